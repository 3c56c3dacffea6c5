# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

from datetime import datetime, timezone

import pytest

from scamguard.engine import ScamRiskEngine
from scamguard.inference.classifier import SupervisedClassifier
from scamguard.lexicon import load_lexicon
from scamguard.sentiment import SentimentScorer
from scamguard.training.dataset import load_seed_corpus

FIXED_NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)

SCAM_JOB_TEXT = "Work from home making money! No experience needed. Sign up fee required. Urgent! Act now!"


@pytest.fixture(scope="session")
def lexicon():
    return load_lexicon()


@pytest.fixture(scope="session")
def seed_corpus():
    return load_seed_corpus()


@pytest.fixture(scope="session")
def sentiment():
    return SentimentScorer()


@pytest.fixture
def neutral_sentiment():
    return SentimentScorer(lexicon={})


@pytest.fixture
def engine(lexicon, seed_corpus, sentiment):
    return ScamRiskEngine(
        lexicon=lexicon,
        classifier=SupervisedClassifier(seed_corpus),
        sentiment=sentiment,
        clock=lambda: FIXED_NOW,
    )


@pytest.fixture
def rules_engine(lexicon, neutral_sentiment):
    """Engine whose classifier has no examples, so only rule signals count."""
    return ScamRiskEngine(
        lexicon=lexicon,
        classifier=SupervisedClassifier([]),
        sentiment=neutral_sentiment,
        clock=lambda: FIXED_NOW,
    )
