# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
"""Scam risk scoring for job postings and social posts."""

from .engine import ScamRiskEngine, load_engine
from .schemas import AnalysisResult, ContentUnit, Origin, RiskLevel, TrainingExample

__all__ = [
    "ContentUnit",
    "AnalysisResult",
    "TrainingExample",
    "Origin",
    "RiskLevel",
    "ScamRiskEngine",
    "load_engine",
]
