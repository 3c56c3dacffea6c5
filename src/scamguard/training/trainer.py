# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

import json
import shutil
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

import joblib
from sklearn.feature_extraction.text import CountVectorizer
from sklearn.metrics import accuracy_score, confusion_matrix, f1_score, precision_score, recall_score
from sklearn.naive_bayes import MultinomialNB
from sklearn.pipeline import Pipeline

from ..errors import RetrainFailure
from ..schemas import SCAM_LABEL, TrainingExample


@dataclass(frozen=True, slots=True)
class ClassifierModel:
    version: str
    pipeline: Pipeline | None
    example_count: int
    label_counts: dict[str, int] = field(default_factory=dict)
    trained_at: str = ""
    metrics: dict[str, float] = field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        return self.pipeline is None or self.example_count == 0


def _timestamp_key() -> str:
    return datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S")


def _iso_now() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="seconds").replace("+00:00", "Z")


def build_pipeline() -> Pipeline:
    return Pipeline(
        steps=[
            ("vectorizer", CountVectorizer(lowercase=True, stop_words="english")),
            ("clf", MultinomialNB(alpha=1.0)),
        ]
    )


def _metrics(y_true: list[int], y_pred: list[int]) -> dict[str, float]:
    tn, fp, fn, tp = confusion_matrix(y_true, y_pred, labels=[0, 1]).ravel()
    return {
        "accuracy": float(accuracy_score(y_true, y_pred)),
        "precision": float(precision_score(y_true, y_pred, zero_division=0)),
        "recall": float(recall_score(y_true, y_pred, zero_division=0)),
        "f1": float(f1_score(y_true, y_pred, zero_division=0)),
        "tn": float(tn),
        "fp": float(fp),
        "fn": float(fn),
        "tp": float(tp),
    }


def fit_model(corpus: list[TrainingExample], *, version: str) -> ClassifierModel:
    """Fit a fresh pipeline on ``corpus``; never touches an existing model."""
    label_counts: dict[str, int] = {}
    for example in corpus:
        label_counts[example.label] = label_counts.get(example.label, 0) + 1
    if not corpus:
        return ClassifierModel(version=version, pipeline=None, example_count=0, trained_at=_iso_now())

    texts = [example.text for example in corpus]
    labels = [example.label for example in corpus]
    pipeline = build_pipeline()
    try:
        pipeline.fit(texts, labels)
    except ValueError as exc:
        raise RetrainFailure(f"classifier fit failed: {exc}") from exc

    y_true = [1 if label == SCAM_LABEL else 0 for label in labels]
    y_pred = [1 if label == SCAM_LABEL else 0 for label in pipeline.predict(texts)]
    return ClassifierModel(
        version=version,
        pipeline=pipeline,
        example_count=len(corpus),
        label_counts=label_counts,
        trained_at=_iso_now(),
        metrics=_metrics(y_true, y_pred),
    )


def export_model(model: ClassifierModel, model_root: Path) -> dict[str, Any]:
    latest_dir = model_root / "latest"
    archive_dir = model_root / "archive" / _timestamp_key()
    latest_dir.mkdir(parents=True, exist_ok=True)
    archive_dir.mkdir(parents=True, exist_ok=True)

    model_path = latest_dir / "model.joblib"
    metadata_path = latest_dir / "metadata.json"
    joblib.dump(model.pipeline, model_path)
    metadata = {
        "model_version": model.version,
        "example_count": int(model.example_count),
        "label_counts": dict(model.label_counts),
        "trained_at_utc": model.trained_at,
        "exported_at_utc": _iso_now(),
        "metrics": dict(model.metrics),
    }
    metadata_path.write_text(json.dumps(metadata, ensure_ascii=False, indent=2) + "\n", encoding="utf-8")

    for path in (model_path, metadata_path):
        shutil.copy2(path, archive_dir / path.name)

    return {
        "metadata": metadata,
        "paths": {
            "model": str(model_path),
            "metadata": str(metadata_path),
            "archive": str(archive_dir),
        },
    }


def load_exported_model(model_root: Path) -> ClassifierModel | None:
    latest_dir = model_root / "latest"
    model_path = latest_dir / "model.joblib"
    metadata_path = latest_dir / "metadata.json"
    if not model_path.exists():
        return None
    pipeline = joblib.load(model_path)
    metadata: dict[str, Any] = {}
    if metadata_path.exists():
        try:
            metadata = json.loads(metadata_path.read_text(encoding="utf-8"))
        except json.JSONDecodeError:
            metadata = {}
    return ClassifierModel(
        version=str(metadata.get("model_version") or "imported"),
        pipeline=pipeline,
        example_count=int(metadata.get("example_count") or (0 if pipeline is None else 1)),
        label_counts={str(k): int(v) for k, v in dict(metadata.get("label_counts") or {}).items()},
        trained_at=str(metadata.get("trained_at_utc") or ""),
        metrics={str(k): float(v) for k, v in dict(metadata.get("metrics") or {}).items()},
    )
