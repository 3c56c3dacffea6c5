# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

from importlib import resources
from io import StringIO
from pathlib import Path
from typing import Any, Iterable

import pandas as pd

from ..errors import RetrainFailure
from ..schemas import LABELS, TrainingExample


def _safe_text(value: object) -> str:
    return str(value or "")


def validate_example(item: Any, *, position: int) -> TrainingExample:
    if isinstance(item, TrainingExample):
        text, label = item.text, item.label
    elif isinstance(item, dict):
        text, label = item.get("text"), item.get("label")
    else:
        raise RetrainFailure(f"example {position}: expected a mapping with text and label, got {type(item).__name__}")
    if not isinstance(text, str) or not text.strip():
        raise RetrainFailure(f"example {position}: text must be a non-empty string")
    if label not in LABELS:
        raise RetrainFailure(f"example {position}: label must be one of {', '.join(LABELS)}, got {label!r}")
    return TrainingExample(text=text, label=label)


def validate_examples(items: Iterable[Any]) -> list[TrainingExample]:
    if items is None or isinstance(items, (str, bytes, dict)):
        raise RetrainFailure("training data must be a list of examples")
    try:
        rows = list(items)
    except TypeError as exc:
        raise RetrainFailure(f"training data must be a list of examples, got {type(items).__name__}") from exc
    return [validate_example(item, position=idx) for idx, item in enumerate(rows)]


def _read_frame(path: Path) -> pd.DataFrame:
    suffix = path.suffix.lower()
    if suffix in {".jsonl", ".ndjson"}:
        return pd.read_json(path, lines=True, dtype=False)
    if suffix == ".json":
        return pd.read_json(path, dtype=False)
    if suffix == ".csv":
        return pd.read_csv(path, dtype=str, keep_default_na=False)
    if suffix == ".parquet":
        return pd.read_parquet(path)
    raise ValueError(f"unsupported dataset format: {path.suffix or path.name}")


def frame_to_examples(df: pd.DataFrame) -> list[TrainingExample]:
    if "text" not in df.columns or "label" not in df.columns:
        raise RetrainFailure("dataset needs 'text' and 'label' columns")
    out = df[["text", "label"]].copy()
    out["text"] = out["text"].map(_safe_text).str.strip()
    out["label"] = out["label"].map(_safe_text).str.strip().str.lower()
    out = out[out["text"] != ""]
    out = out.drop_duplicates(subset=["text", "label"])
    return validate_examples(out.to_dict(orient="records"))


def load_examples(path: Path) -> list[TrainingExample]:
    return frame_to_examples(_read_frame(path))


def load_seed_corpus(path: Path | None = None) -> list[TrainingExample]:
    if path is not None:
        return load_examples(path)
    raw = (resources.files("scamguard") / "data" / "seed_corpus.jsonl").read_text(encoding="utf-8")
    return frame_to_examples(pd.read_json(StringIO(raw), lines=True, dtype=False))


def to_dataframe(rows: list[TrainingExample]) -> pd.DataFrame:
    data = [{"text": row.text, "label": row.label} for row in rows]
    return pd.DataFrame(data, columns=["text", "label"])
