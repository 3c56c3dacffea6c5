# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

from collections import Counter
from datetime import datetime, timezone
from typing import Iterable, Sequence

from .errors import InvalidInput
from .schemas import AnalysisResult, BatchEntry, BatchSummary, RiskLevel, TrendReport

DEFAULT_TOP_N = 10
DEFAULT_ALERT_CONFIDENCE = 0.6
DEFAULT_ALERT_LEVELS = (RiskLevel.HIGH, RiskLevel.CRITICAL)


def get_trends(results: Iterable[AnalysisResult], *, top_n: int = DEFAULT_TOP_N) -> TrendReport:
    keyword_counts: Counter[str] = Counter()
    type_counts: Counter[str] = Counter()
    total = 0
    for result in results:
        if result.is_degraded:
            continue
        total += 1
        keyword_counts.update(result.flagged_keywords)
        type_counts.update(result.scam_types)
    return TrendReport(
        top_keywords=keyword_counts.most_common(top_n),
        top_scam_types=type_counts.most_common(top_n),
        total_results=total,
    )


def _levels(risk_levels: Iterable[RiskLevel | str]) -> set[RiskLevel]:
    wanted: set[RiskLevel] = set()
    for level in risk_levels:
        try:
            wanted.add(RiskLevel(level))
        except ValueError as exc:
            choices = ", ".join(item.value for item in RiskLevel)
            raise InvalidInput(f"unknown risk level {level!r}; expected one of {choices}") from exc
    return wanted


def _as_utc(value: datetime) -> datetime:
    """Naive datetimes are taken to be UTC."""
    return value.replace(tzinfo=timezone.utc) if value.tzinfo is None else value


def get_alerts(
    results: Iterable[AnalysisResult],
    *,
    min_confidence: float = DEFAULT_ALERT_CONFIDENCE,
    risk_levels: Iterable[RiskLevel | str] = DEFAULT_ALERT_LEVELS,
    since: datetime | None = None,
) -> list[AnalysisResult]:
    wanted = _levels(risk_levels)
    cutoff = _as_utc(since) if since is not None else None
    selected = [
        result
        for result in results
        if not result.is_degraded
        and result.confidence >= min_confidence
        and result.risk_level in wanted
        and (cutoff is None or (result.analyzed_at is not None and _as_utc(result.analyzed_at) >= cutoff))
    ]
    return sorted(selected, key=lambda item: item.confidence, reverse=True)


def summarize_batch(entries: Sequence[BatchEntry]) -> BatchSummary:
    analyzed = [entry.result for entry in entries if entry.error is None and not entry.result.is_degraded]
    scams = sum(1 for result in analyzed if result.is_scam)
    return BatchSummary(
        total=len(entries),
        scams_detected=scams,
        legitimate=len(analyzed) - scams,
        failed=len(entries) - len(analyzed),
    )
