# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any

from .console import MLConsole
from .engine import ScamRiskEngine
from .errors import RetrainFailure
from .reporting import summarize_batch
from .schemas import ContentUnit, Origin, RiskLevel
from .settings import EngineSettings
from .training.dataset import load_examples
from .training.trainer import export_model, load_exported_model


def _record_to_unit(record: Any) -> ContentUnit:
    if not isinstance(record, dict):
        return ContentUnit(text=None)
    if str(record.get("origin") or "") == Origin.SOCIAL_POST.value:
        return ContentUnit.from_social_post(record)
    return ContentUnit.from_job_posting(record)


def _read_records(path: Path) -> list[Any]:
    rows: list[Any] = []
    for raw in path.read_text(encoding="utf-8").splitlines():
        line = raw.strip()
        if not line:
            continue
        rows.append(json.loads(line))
    return rows


def _build_engine(settings: EngineSettings, *, use_exported: bool) -> ScamRiskEngine:
    engine = ScamRiskEngine(settings=settings)
    if use_exported:
        model = load_exported_model(settings.model_dir)
        if model is not None:
            engine.classifier.install_model(model)
    return engine


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="scamguard", description="Score job postings and social posts for scam risk.")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    parser.add_argument("--use-exported-model", action="store_true", help="Load the exported classifier from SCAMGUARD_MODEL_DIR")
    sub = parser.add_subparsers(dest="command", required=True)

    analyze = sub.add_parser("analyze", help="Analyze one piece of text")
    analyze.add_argument("text", help="Text to analyze")
    analyze.add_argument("--social", action="store_true", help="Treat the text as a social-media post")
    analyze.add_argument("--likes", type=float, default=None)
    analyze.add_argument("--followers", type=float, default=None)
    analyze.add_argument("--shares", type=float, default=None)
    analyze.add_argument("--json", action="store_true", help="Print the raw result as JSON")

    batch = sub.add_parser("batch", help="Analyze a JSONL file of job or social records")
    batch.add_argument("input", type=Path)
    batch.add_argument("--output", type=Path, default=None, help="Write results as JSONL")

    trends = sub.add_parser("trends", help="Analyze a JSONL file and report trends and alerts")
    trends.add_argument("input", type=Path)
    trends.add_argument("--top", type=int, default=10)
    trends.add_argument("--min-confidence", type=float, default=None, help="Defaults to SCAMGUARD_ALERT_MIN_CONFIDENCE")
    trends.add_argument("--levels", nargs="+", choices=[level.value for level in RiskLevel], default=["high", "critical"])

    retrain = sub.add_parser("retrain", help="Retrain the classifier with labeled examples")
    retrain.add_argument("dataset", type=Path, help="JSONL, CSV or parquet with text and label columns")
    retrain.add_argument("--export", action="store_true", help="Export the new model to SCAMGUARD_MODEL_DIR")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    console = MLConsole()
    settings = EngineSettings.from_env()
    engine = _build_engine(settings, use_exported=args.use_exported_model or settings.use_exported_model)

    if args.command == "analyze":
        engagement = {
            key: value
            for key, value in (("likes", args.likes), ("followers", args.followers), ("shares", args.shares))
            if value is not None
        }
        origin = Origin.SOCIAL_POST if args.social else Origin.JOB_POSTING
        result = engine.analyze_content(ContentUnit(text=args.text, origin=origin, engagement=engagement))
        if args.json:
            print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
        else:
            console.analysis_panel(result)
        return 1 if result.is_degraded else 0

    if args.command == "batch":
        entries = engine.batch_analyze([_record_to_unit(record) for record in _read_records(args.input)])
        console.batch_table(entries, summarize_batch(entries))
        if args.output is not None:
            args.output.parent.mkdir(parents=True, exist_ok=True)
            lines = [json.dumps({"index": entry.index, **entry.result.to_dict()}, ensure_ascii=False) for entry in entries]
            args.output.write_text("\n".join(lines) + "\n", encoding="utf-8")
            console.success(f"results: {args.output}")
        return 0

    if args.command == "trends":
        entries = engine.batch_analyze([_record_to_unit(record) for record in _read_records(args.input)])
        results = [entry.result for entry in entries]
        console.trends_table(engine.get_trends(results, top_n=args.top))
        min_confidence = settings.alert_min_confidence if args.min_confidence is None else args.min_confidence
        alerts = engine.get_alerts(results, min_confidence=min_confidence, risk_levels=args.levels)
        console.info(f"{len(alerts)} alert(s) at confidence >= {min_confidence:.2f}")
        for alert in alerts:
            console.analysis_panel(alert)
        return 0

    console.banner()
    try:
        examples = load_examples(args.dataset)
    except (RetrainFailure, ValueError) as exc:
        console.warn(f"cannot read {args.dataset}: {exc}")
        return 1
    report = engine.retrain(examples)
    if not report.success:
        console.warn(f"retrain failed: {report.error}")
        return 1
    console.success(f"model {report.model_version} trained on {report.training_size} examples")
    console.metrics_table(report.metrics, title="Training metrics")
    if args.export:
        exported = export_model(engine.classifier.model, settings.model_dir)
        console.success(f"exported: {exported['paths']['model']}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
