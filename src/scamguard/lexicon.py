# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
"""Keyword vocabularies and pattern signatures.

The lexicon is data, not code: it ships as ``data/lexicon.json`` and can be
replaced with ``SCAMGUARD_LEXICON_PATH``. Once loaded it is an immutable
value shared by every analysis call.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Any

from .errors import LexiconError
from .schemas import Origin

REQUIRED_FIELDS = ("job_keywords", "social_keywords", "job_patterns", "social_patterns")


@dataclass(frozen=True, slots=True)
class Lexicon:
    version: str
    job_keywords: tuple[str, ...]
    social_keywords: tuple[str, ...]
    job_patterns: tuple[re.Pattern[str], ...]
    social_patterns: tuple[re.Pattern[str], ...]

    def keywords_for(self, origin: Origin) -> tuple[str, ...]:
        return self.social_keywords if origin == Origin.SOCIAL_POST else self.job_keywords

    def patterns_for(self, origin: Origin) -> tuple[re.Pattern[str], ...]:
        return self.social_patterns if origin == Origin.SOCIAL_POST else self.job_patterns


def _compile(sources: list[Any], field_name: str) -> tuple[re.Pattern[str], ...]:
    compiled: list[re.Pattern[str]] = []
    for source in sources:
        try:
            compiled.append(re.compile(str(source), flags=re.IGNORECASE))
        except re.error as exc:
            raise LexiconError(f"{field_name}: invalid pattern {source!r}: {exc}") from exc
    return tuple(compiled)


def _keywords(values: list[Any]) -> tuple[str, ...]:
    seen: dict[str, None] = {}
    for value in values:
        word = str(value or "").strip().lower()
        if word:
            seen.setdefault(word, None)
    return tuple(seen)


def lexicon_from_dict(payload: dict[str, Any]) -> Lexicon:
    missing = [name for name in REQUIRED_FIELDS if not isinstance(payload.get(name), list)]
    if missing:
        raise LexiconError(f"lexicon is missing list fields: {', '.join(missing)}")
    return Lexicon(
        version=str(payload.get("version") or "unversioned"),
        job_keywords=_keywords(payload["job_keywords"]),
        social_keywords=_keywords(payload["social_keywords"]),
        job_patterns=_compile(payload["job_patterns"], "job_patterns"),
        social_patterns=_compile(payload["social_patterns"], "social_patterns"),
    )


def load_lexicon(path: Path | None = None) -> Lexicon:
    if path is None:
        raw = (resources.files("scamguard") / "data" / "lexicon.json").read_text(encoding="utf-8")
    else:
        raw = path.read_text(encoding="utf-8")
    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise LexiconError(f"lexicon is not valid JSON: {exc}") from exc
    if not isinstance(payload, dict):
        raise LexiconError("lexicon root must be an object")
    return lexicon_from_dict(payload)
