#!/usr/bin/env python3
from __future__ import annotations

import argparse
import json
from pathlib import Path

from scamguard.console import MLConsole
from scamguard.engine import ScamRiskEngine
from scamguard.evaluation.evaluate import metrics_at, score_frame
from scamguard.schemas import Origin
from scamguard.settings import EngineSettings
from scamguard.training.dataset import load_examples, to_dataframe


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Sweep confidence thresholds over a labeled dataset.")
    parser.add_argument("--eval", default="data/eval_dataset.jsonl", help="Labeled dataset (jsonl, csv or parquet)")
    parser.add_argument("--social", action="store_true", help="Score rows with the social-post policy")
    parser.add_argument("--output", default="reports/threshold_eval.json", help="JSON report path")
    return parser.parse_args()


def main() -> int:
    args = parse_args()
    eval_path = Path(args.eval)
    output_path = Path(args.output)

    engine = ScamRiskEngine(settings=EngineSettings.from_env())
    df = to_dataframe(load_examples(eval_path))
    origin = Origin.SOCIAL_POST if args.social else Origin.JOB_POSTING
    scored = score_frame(engine, df, origin=origin)
    probs = scored["confidence"].tolist()

    rows = [metrics_at(scored["label"], probs, raw / 100.0) for raw in range(5, 96, 5)]
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(rows, ensure_ascii=False, indent=2) + "\n", encoding="utf-8")

    console = MLConsole()
    console.threshold_table(rows)
    console.success(f"report: {output_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
