# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any

from .features import merge_job_fields, merge_social_fields


class Origin(str, Enum):
    JOB_POSTING = "job_posting"
    SOCIAL_POST = "social_post"


class RiskLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


SCAM_LABEL = "scam"
LEGIT_LABEL = "legitimate"
LABELS = (SCAM_LABEL, LEGIT_LABEL)
ORIGIN_VALUES = frozenset(item.value for item in Origin)


@dataclass(frozen=True, slots=True)
class ContentUnit:
    text: str | None
    origin: Origin = Origin.JOB_POSTING
    engagement: dict[str, float] = field(default_factory=dict)
    source_id: str | None = None
    platform: str | None = None

    def __post_init__(self) -> None:
        # unknown origins are left as-is and rejected by the engine
        if isinstance(self.origin, str) and not isinstance(self.origin, Origin) and self.origin in ORIGIN_VALUES:
            object.__setattr__(self, "origin", Origin(self.origin))

    @classmethod
    def from_job_posting(cls, record: dict[str, Any]) -> "ContentUnit":
        source_id = record.get("_id") or record.get("id")
        return cls(
            text=merge_job_fields(record),
            origin=Origin.JOB_POSTING,
            source_id=str(source_id) if source_id is not None else None,
        )

    @classmethod
    def from_social_post(cls, record: dict[str, Any], *, platform: str | None = None) -> "ContentUnit":
        engagement = record.get("engagement") or {}
        source_id = record.get("url") or record.get("id")
        return cls(
            text=merge_social_fields(record),
            origin=Origin.SOCIAL_POST,
            engagement=dict(engagement) if isinstance(engagement, dict) else {},
            source_id=str(source_id) if source_id is not None else None,
            platform=platform or record.get("platform"),
        )


@dataclass(slots=True)
class SentimentResult:
    score: int = 0
    comparative: float = 0.0
    positive: list[str] = field(default_factory=list)
    negative: list[str] = field(default_factory=list)


@dataclass(slots=True)
class ViralPotential:
    score: float
    risk_level: str


@dataclass(slots=True)
class AnalysisResult:
    origin: Origin
    confidence: float = 0.0
    is_flagged: bool = False
    is_scam: bool = False
    risk_level: RiskLevel | None = None
    scam_types: list[str] = field(default_factory=list)
    flagged_keywords: list[str] = field(default_factory=list)
    flagged_patterns: list[str] = field(default_factory=list)
    risk_factors: list[str] = field(default_factory=list)
    sentiment: SentimentResult = field(default_factory=SentimentResult)
    recommendations: list[str] = field(default_factory=list)
    priority: int | None = None
    viral_potential: ViralPotential | None = None
    model_version: str = "unknown"
    analyzed_at: datetime | None = None
    source_id: str | None = None
    error: str | None = None

    @property
    def is_degraded(self) -> bool:
        return self.error is not None

    def to_dict(self) -> dict[str, Any]:
        payload = asdict(self)
        payload["origin"] = self.origin.value
        payload["risk_level"] = self.risk_level.value if self.risk_level is not None else None
        payload["analyzed_at"] = self.analyzed_at.isoformat() if self.analyzed_at is not None else None
        return payload


@dataclass(frozen=True, slots=True)
class TrainingExample:
    text: str
    label: str


@dataclass(frozen=True, slots=True)
class Classification:
    label: str
    probability: float


@dataclass(slots=True)
class BatchEntry:
    index: int
    result: AnalysisResult
    error: str | None = None


@dataclass(slots=True)
class BatchSummary:
    total: int
    scams_detected: int
    legitimate: int
    failed: int

    @property
    def scam_rate(self) -> float:
        analyzed = self.scams_detected + self.legitimate
        return (self.scams_detected / analyzed) * 100 if analyzed else 0.0


@dataclass(slots=True)
class TrendReport:
    top_keywords: list[tuple[str, int]]
    top_scam_types: list[tuple[str, int]]
    total_results: int


@dataclass(slots=True)
class RetrainReport:
    success: bool
    model_version: str
    training_size: int
    metrics: dict[str, float] = field(default_factory=dict)
    error: str | None = None
