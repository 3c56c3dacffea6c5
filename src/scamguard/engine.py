# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timezone
from typing import Any, Callable, Iterable, Mapping, Sequence

from .errors import ClassifierUnavailable, InvalidInput, RetrainFailure
from .inference.classifier import SupervisedClassifier
from .lexicon import Lexicon, load_lexicon
from .reporting import DEFAULT_ALERT_CONFIDENCE, DEFAULT_ALERT_LEVELS, DEFAULT_TOP_N, get_alerts, get_trends
from .schemas import AnalysisResult, BatchEntry, ContentUnit, Origin, RetrainReport, RiskLevel, TrendReport
from .scoring import extract_signals, score_job_posting, score_social_post
from .sentiment import SentimentScorer
from .settings import EngineSettings
from .training.dataset import load_seed_corpus

log = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ScamRiskEngine:
    def __init__(
        self,
        *,
        lexicon: Lexicon | None = None,
        classifier: SupervisedClassifier | None = None,
        sentiment: SentimentScorer | None = None,
        settings: EngineSettings | None = None,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self.settings = settings or EngineSettings()
        self.lexicon = lexicon or load_lexicon(self.settings.lexicon_path)
        self.classifier = classifier or SupervisedClassifier(load_seed_corpus(self.settings.seed_corpus_path))
        self.sentiment = sentiment or SentimentScorer()
        self.clock = clock

    def _degraded(self, unit: Any, message: str) -> AnalysisResult:
        origin = unit.origin if isinstance(unit, ContentUnit) and isinstance(unit.origin, Origin) else Origin.JOB_POSTING
        return AnalysisResult(
            origin=origin,
            confidence=0.0,
            model_version=self.classifier.version,
            analyzed_at=self.clock(),
            source_id=unit.source_id if isinstance(unit, ContentUnit) else None,
            error=message,
        )

    def _checked_text(self, unit: Any) -> str:
        if not isinstance(unit, ContentUnit):
            raise InvalidInput(f"expected ContentUnit, got {type(unit).__name__}")
        if not isinstance(unit.origin, Origin):
            raise InvalidInput(f"unknown origin {unit.origin!r}")
        if unit.engagement is not None and not isinstance(unit.engagement, Mapping):
            raise InvalidInput(f"engagement must be a mapping, got {type(unit.engagement).__name__}")
        if not isinstance(unit.text, str):
            raise InvalidInput("content text is missing or not a string")
        limit = self.settings.max_text_length
        if len(unit.text) > limit:
            log.debug("truncating content %s from %d to %d characters", unit.source_id, len(unit.text), limit)
            return unit.text[:limit]
        return unit.text

    def _classify(self, text: str) -> list:
        try:
            return self.classifier.classify(text)
        except ClassifierUnavailable as exc:
            log.warning("classifier signal dropped: %s", exc)
            return []

    def analyze_content(self, unit: ContentUnit) -> AnalysisResult:
        try:
            text = self._checked_text(unit)
        except InvalidInput as exc:
            return self._degraded(unit, str(exc))

        version = self.classifier.version
        signals = extract_signals(text, unit.origin, lexicon=self.lexicon, sentiment=self.sentiment)
        if unit.origin is Origin.SOCIAL_POST:
            result = score_social_post(signals, unit.engagement or {})
        else:
            signals.classifications = self._classify(signals.text)
            result = score_job_posting(signals)
        result.model_version = version
        result.analyzed_at = self.clock()
        result.source_id = unit.source_id
        return result

    def _analyze_entry(self, index: int, unit: Any) -> BatchEntry:
        try:
            result = self.analyze_content(unit)
        except Exception as exc:
            log.exception("analysis failed for batch item %d", index)
            return BatchEntry(index=index, result=self._degraded(unit, str(exc)), error=str(exc))
        return BatchEntry(index=index, result=result, error=result.error)

    def batch_analyze(self, units: Sequence[Any]) -> list[BatchEntry]:
        if not units:
            return []
        workers = min(self.settings.batch_workers, len(units))
        with ThreadPoolExecutor(max_workers=workers) as pool:
            return list(pool.map(self._analyze_entry, range(len(units)), units))

    def retrain(self, examples: Iterable[Any]) -> RetrainReport:
        previous = self.classifier.model
        try:
            model = self.classifier.update(examples)
        except RetrainFailure as exc:
            log.warning("retrain rejected, keeping model %s: %s", previous.version, exc)
            return RetrainReport(
                success=False,
                model_version=previous.version,
                training_size=previous.example_count,
                error=str(exc),
            )
        return RetrainReport(
            success=True,
            model_version=model.version,
            training_size=model.example_count,
            metrics=dict(model.metrics),
        )

    def get_trends(self, results: Iterable[AnalysisResult], *, top_n: int = DEFAULT_TOP_N) -> TrendReport:
        return get_trends(results, top_n=top_n)

    def get_alerts(
        self,
        results: Iterable[AnalysisResult],
        *,
        min_confidence: float = DEFAULT_ALERT_CONFIDENCE,
        risk_levels: Iterable[RiskLevel | str] = DEFAULT_ALERT_LEVELS,
        since: datetime | None = None,
    ) -> list[AnalysisResult]:
        return get_alerts(results, min_confidence=min_confidence, risk_levels=risk_levels, since=since)


_CACHE: ScamRiskEngine | None = None


def load_engine() -> ScamRiskEngine:
    global _CACHE
    if _CACHE is not None:
        return _CACHE
    _CACHE = ScamRiskEngine(settings=EngineSettings.from_env())
    return _CACHE
