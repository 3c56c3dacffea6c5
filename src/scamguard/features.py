# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any, Iterable

import pandas as pd

if TYPE_CHECKING:
    from .lexicon import Lexicon
    from .schemas import Origin

SIGNAL_COLUMNS = [
    "text",
    "keyword_count",
    "pattern_count",
]


def _safe_text(value: object) -> str:
    return str(value or "")


def _as_list(value: object) -> list[object]:
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def _mapping(value: object) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


def merge_job_fields(record: dict[str, Any]) -> str:
    company = record.get("company")
    company_name = company.get("name") if isinstance(company, dict) else company
    contact = _mapping(record.get("contactInfo") or record.get("contact_info"))
    parts = [
        _safe_text(record.get("title")),
        _safe_text(record.get("description")),
        _safe_text(company_name),
        *(_safe_text(item) for item in _as_list(record.get("requirements"))),
        *(_safe_text(item) for item in _as_list(record.get("responsibilities"))),
        _safe_text(contact.get("email")),
        _safe_text(contact.get("phone")),
        _safe_text(contact.get("website")),
    ]
    return " ".join(parts)


def merge_social_fields(record: dict[str, Any]) -> str | None:
    text = record.get("text")
    return text if text is None or isinstance(text, str) else str(text)


def normalize_text(text: str) -> str:
    return text.lower()


def match_keywords(text: str, vocabulary: Iterable[str]) -> list[str]:
    """Vocabulary entries found as substrings, in vocabulary order."""
    lowered = text.lower()
    found: dict[str, None] = {}
    for keyword in vocabulary:
        if keyword.lower() in lowered:
            found.setdefault(keyword, None)
    return list(found)


def match_patterns(text: str, patterns: Iterable[re.Pattern[str]]) -> list[str]:
    """Every distinct substring matched by any signature, first match first."""
    found: dict[str, None] = {}
    for pattern in patterns:
        for match in pattern.finditer(text):
            found.setdefault(match.group(0), None)
    return list(found)


def keyword_stats(text: str, vocabulary: Iterable[str]) -> dict[str, int]:
    lowered = text.lower()
    stats: dict[str, int] = {}
    for keyword in vocabulary:
        count = len(re.findall(re.escape(keyword.lower()), lowered))
        if count > 0:
            stats[keyword] = count
    return stats


def enrich_dataframe(df: pd.DataFrame, *, lexicon: "Lexicon", origin: "Origin") -> pd.DataFrame:
    out = df.copy()
    keywords = lexicon.keywords_for(origin)
    patterns = lexicon.patterns_for(origin)
    out["text"] = out["text"].map(_safe_text).map(normalize_text)
    out["keyword_count"] = out["text"].map(lambda text: len(match_keywords(text, keywords)))
    out["pattern_count"] = out["text"].map(lambda text: len(match_patterns(text, patterns)))
    return out
