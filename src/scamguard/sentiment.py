# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
"""Lexicon-based polarity scoring.

Polarity is the sum of integer word valences over the text's tokens and
``comparative`` is that sum divided by the token count. Valences come from
the VADER lexicon, rounded to the nearest integer.
"""

from __future__ import annotations

import re

from vaderSentiment.vaderSentiment import SentimentIntensityAnalyzer

from .schemas import SentimentResult

WORD_RE = re.compile(r"[a-z0-9']+")


def _integer_lexicon(raw: dict[str, float]) -> dict[str, int]:
    table: dict[str, int] = {}
    for word, valence in raw.items():
        rounded = int(round(float(valence)))
        if rounded != 0:
            table[word.lower()] = rounded
    return table


class SentimentScorer:
    def __init__(self, lexicon: dict[str, int] | None = None) -> None:
        if lexicon is None:
            lexicon = _integer_lexicon(SentimentIntensityAnalyzer().lexicon)
        self.lexicon = lexicon

    def tokenize(self, text: str) -> list[str]:
        return WORD_RE.findall(text.lower())

    def analyze(self, text: str) -> SentimentResult:
        tokens = self.tokenize(text)
        score = 0
        positive: list[str] = []
        negative: list[str] = []
        for token in tokens:
            valence = self.lexicon.get(token, 0)
            if valence > 0:
                positive.append(token)
            elif valence < 0:
                negative.append(token)
            score += valence
        comparative = score / len(tokens) if tokens else 0.0
        return SentimentResult(score=score, comparative=comparative, positive=positive, negative=negative)
