# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
"""Fusion of lexical, pattern, sentiment and classifier signals.

Both policies are numeric contracts: weights and cut-offs below are fixed,
and changing any of them changes every downstream verdict.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from .features import match_keywords, match_patterns, normalize_text
from .lexicon import Lexicon
from .schemas import (
    SCAM_LABEL,
    AnalysisResult,
    Classification,
    Origin,
    RiskLevel,
    SentimentResult,
    ViralPotential,
)
from .sentiment import SentimentScorer

JOB_SCAM_THRESHOLD = 0.5
SOCIAL_FLAG_THRESHOLD = 0.4
RED_FLAG_WEIGHT = 0.15
JOB_SENTIMENT_CUTOFF = 0.5
JOB_SENTIMENT_BONUS = 0.1
SOCIAL_SENTIMENT_CUTOFF = 0.8
SOCIAL_SENTIMENT_BONUS = 0.15
ENGAGEMENT_RATIO_CUTOFF = 0.5
ENGAGEMENT_BONUS = 0.2

PAYMENT_TERMS = {"fee", "payment", "deposit", "investment"}
FEE_TERMS = {"fee", "payment", "deposit"}
INTERNATIONAL_TERMS = {"international", "abroad", "overseas", "visa", "flight"}
PRESSURE_TERMS = {"urgent", "immediate", "act now", "limited time", "hurry"}
VAGUE_TERMS = {"various duties", "miscellaneous tasks", "data entry", "customer service"}
SPECIFIC_ROLE_TERMS = {"engineer", "developer", "analyst", "manager", "specialist"}

SOCIAL_SCAM_TYPES = (
    ("work_from_home_scam", {"work from home", "earn money online", "make money from home"}),
    ("investment_fraud", {"investment", "guaranteed returns", "high profit", "no risk"}),
    ("pyramid_scheme", {"pyramid scheme", "multi-level marketing", "referral program"}),
)

PRIORITY_BY_LEVEL = {
    RiskLevel.CRITICAL: 5,
    RiskLevel.HIGH: 4,
    RiskLevel.MEDIUM: 3,
    RiskLevel.LOW: 2,
}


@dataclass(slots=True)
class Signals:
    text: str
    keywords: list[str]
    patterns: list[str]
    sentiment: SentimentResult
    classifications: list[Classification] = field(default_factory=list)


def extract_signals(text: str, origin: Origin, *, lexicon: Lexicon, sentiment: SentimentScorer) -> Signals:
    normalized = normalize_text(text)
    return Signals(
        text=normalized,
        keywords=match_keywords(normalized, lexicon.keywords_for(origin)),
        patterns=match_patterns(normalized, lexicon.patterns_for(origin)),
        sentiment=sentiment.analyze(normalized),
    )


def _clamp(value: float) -> float:
    return min(max(value, 0.0), 1.0)


def _any(keywords: set[str], terms: set[str]) -> bool:
    return bool(keywords & terms)


def job_red_flags(keywords: list[str]) -> tuple[list[str], list[str]]:
    """Red flags and the scam types they imply, in evaluation order."""
    present = set(keywords)
    flags: list[str] = []
    scam_types: list[str] = []
    if _any(present, PAYMENT_TERMS):
        flags.append("payment_required")
        scam_types.append("advance_fee_fraud")
    if "work from home" in present and _any(present, FEE_TERMS):
        flags.append("work_from_home_payment")
        scam_types.append("work_from_home_scam")
    if _any(present, INTERNATIONAL_TERMS) and _any(present, FEE_TERMS):
        flags.append("international_fee")
        scam_types.append("recruitment_fraud")
    if _any(present, PRESSURE_TERMS):
        flags.append("high_pressure")
    if _any(present, VAGUE_TERMS) and not _any(present, SPECIFIC_ROLE_TERMS):
        flags.append("vague_description")
    return flags, scam_types


def scam_probability(classifications: list[Classification]) -> float:
    for item in classifications:
        if item.label == SCAM_LABEL:
            return item.probability
    return 0.0


def job_recommendations(is_scam: bool, keywords: list[str], red_flags: list[str]) -> list[str]:
    if is_scam:
        out = [
            "Mark as suspicious and investigate further",
            "Consider removing listing if confidence is high",
            "Notify moderators for review",
        ]
    else:
        out = [
            "Appears legitimate based on current analysis",
            "Continue monitoring for user reports",
        ]
    if keywords:
        out.append(f"Review flagged keywords: {', '.join(keywords[:5])}")
    if red_flags:
        out.append(f"Red flags detected: {', '.join(red_flags)}")
    return out


def score_job_posting(signals: Signals) -> AnalysisResult:
    keyword_risk = min(len(signals.keywords) / 10, 1.0)
    red_flags, scam_types = job_red_flags(signals.keywords)

    risk = keyword_risk + len(red_flags) * RED_FLAG_WEIGHT
    if signals.sentiment.comparative > JOB_SENTIMENT_CUTOFF:
        risk += JOB_SENTIMENT_BONUS
    if signals.classifications:
        risk = (risk + scam_probability(signals.classifications)) / 2

    confidence = _clamp(risk)
    is_scam = confidence > JOB_SCAM_THRESHOLD
    return AnalysisResult(
        origin=Origin.JOB_POSTING,
        confidence=confidence,
        is_flagged=is_scam,
        is_scam=is_scam,
        scam_types=scam_types,
        flagged_keywords=list(signals.keywords),
        flagged_patterns=list(signals.patterns),
        risk_factors=red_flags,
        sentiment=signals.sentiment,
        recommendations=job_recommendations(is_scam, signals.keywords, red_flags),
    )


def risk_level_for(confidence: float) -> RiskLevel:
    if confidence < 0.3:
        return RiskLevel.LOW
    if confidence < 0.6:
        return RiskLevel.MEDIUM
    if confidence < 0.8:
        return RiskLevel.HIGH
    return RiskLevel.CRITICAL


def _number(value: Any) -> float | None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return float(value)


def engagement_ratio(engagement: Mapping[str, Any]) -> float | None:
    """likes / followers, or None when the signal does not apply."""
    likes = _number(engagement.get("likes"))
    followers = _number(engagement.get("followers"))
    if not likes or not followers:
        return None
    return likes / followers


def viral_potential(engagement: Mapping[str, Any]) -> ViralPotential:
    shares = _number(engagement.get("shares")) or 0.0
    return ViralPotential(score=shares / 100 if shares else 0.0, risk_level="high" if shares > 1000 else "medium")


def social_scam_types(keywords: list[str]) -> list[str]:
    present = set(keywords)
    return [name for name, terms in SOCIAL_SCAM_TYPES if _any(present, terms)]


def social_recommendations(is_flagged: bool, level: RiskLevel, keywords: list[str]) -> list[str]:
    if is_flagged:
        out = ["Record as suspicious activity", "Escalate to moderators for review"]
        if level in (RiskLevel.HIGH, RiskLevel.CRITICAL):
            out.append("Warn users engaging with this post")
    else:
        out = ["No action required", "Continue monitoring the account"]
    if keywords:
        out.append(f"Review flagged keywords: {', '.join(keywords[:5])}")
    return out


def score_social_post(signals: Signals, engagement: Mapping[str, Any]) -> AnalysisResult:
    risk = 0.0
    if signals.keywords:
        risk += min(len(signals.keywords) * 0.1, 0.5)
    if signals.patterns:
        risk += min(len(signals.patterns) * 0.15, 0.5)
    ratio = engagement_ratio(engagement)
    if ratio is not None and ratio > ENGAGEMENT_RATIO_CUTOFF:
        risk += ENGAGEMENT_BONUS
    if signals.sentiment.comparative > SOCIAL_SENTIMENT_CUTOFF:
        risk += SOCIAL_SENTIMENT_BONUS

    confidence = _clamp(risk)
    level = risk_level_for(confidence)
    is_flagged = confidence > SOCIAL_FLAG_THRESHOLD
    return AnalysisResult(
        origin=Origin.SOCIAL_POST,
        confidence=confidence,
        is_flagged=is_flagged,
        is_scam=is_flagged,
        risk_level=level,
        scam_types=social_scam_types(signals.keywords),
        flagged_keywords=list(signals.keywords),
        flagged_patterns=list(signals.patterns),
        sentiment=signals.sentiment,
        recommendations=social_recommendations(is_flagged, level, signals.keywords),
        priority=PRIORITY_BY_LEVEL[level],
        viral_potential=viral_potential(engagement),
    )
