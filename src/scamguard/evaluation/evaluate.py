# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

import pandas as pd
from sklearn.metrics import f1_score, precision_score, recall_score

from ..engine import ScamRiskEngine
from ..features import SIGNAL_COLUMNS, enrich_dataframe
from ..schemas import SCAM_LABEL, ContentUnit, Origin


def score_frame(engine: ScamRiskEngine, df: pd.DataFrame, *, origin: Origin = Origin.JOB_POSTING) -> pd.DataFrame:
    """Signal counts and engine confidence for every ``text`` row."""
    enriched = enrich_dataframe(df, lexicon=engine.lexicon, origin=origin)
    out = enriched[SIGNAL_COLUMNS].copy()
    out["label"] = df["label"].map(lambda value: 1 if str(value).strip().lower() == SCAM_LABEL else 0).to_numpy()
    out["confidence"] = [
        engine.analyze_content(ContentUnit(text=text, origin=origin)).confidence for text in out["text"].tolist()
    ]
    return out


def metrics_at(y_true: pd.Series, scores: list[float], threshold: float) -> dict[str, float]:
    y_pred = [1 if score > threshold else 0 for score in scores]
    return {
        "threshold": float(threshold),
        "precision": float(precision_score(y_true, y_pred, zero_division=0)),
        "recall": float(recall_score(y_true, y_pred, zero_division=0)),
        "f1": float(f1_score(y_true, y_pred, zero_division=0)),
    }


def evaluate_engine(
    engine: ScamRiskEngine,
    df: pd.DataFrame,
    *,
    threshold: float = 0.5,
    origin: Origin = Origin.JOB_POSTING,
) -> dict[str, float]:
    scored = score_frame(engine, df, origin=origin)
    metrics = metrics_at(scored["label"], scored["confidence"].tolist(), threshold)
    metrics["rows"] = float(len(scored))
    metrics["mean_keywords"] = float(scored["keyword_count"].mean()) if len(scored) else 0.0
    return metrics


__all__ = ["evaluate_engine", "metrics_at", "score_frame"]
