# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

import json
import re

import pytest

from scamguard.engine import ScamRiskEngine
from scamguard.errors import LexiconError
from scamguard.inference.classifier import SupervisedClassifier
from scamguard.lexicon import lexicon_from_dict, load_lexicon
from scamguard.schemas import ContentUnit, Origin


def _payload(**overrides):
    payload = {
        "version": "test-1",
        "job_keywords": ["banana"],
        "social_keywords": ["mango"],
        "job_patterns": [r"\bfruit\b"],
        "social_patterns": [],
    }
    payload.update(overrides)
    return payload


def test_packaged_lexicon_loads(lexicon):
    assert lexicon.version
    assert "work from home" in lexicon.job_keywords
    assert "pyramid scheme" in lexicon.social_keywords
    assert len(lexicon.job_patterns) == 8
    assert all(pattern.flags & re.IGNORECASE for pattern in lexicon.social_patterns)


def test_lexicon_is_selected_by_origin(lexicon):
    assert lexicon.keywords_for(Origin.JOB_POSTING) is lexicon.job_keywords
    assert lexicon.keywords_for(Origin.SOCIAL_POST) is lexicon.social_keywords
    assert lexicon.patterns_for(Origin.SOCIAL_POST) is lexicon.social_patterns


def test_missing_field_is_rejected():
    payload = _payload()
    del payload["social_keywords"]
    with pytest.raises(LexiconError, match="social_keywords"):
        lexicon_from_dict(payload)


def test_bad_pattern_is_rejected():
    with pytest.raises(LexiconError, match="job_patterns"):
        lexicon_from_dict(_payload(job_patterns=["(unclosed"]))


def test_keywords_are_lowercased_and_deduped():
    lexicon = lexicon_from_dict(_payload(job_keywords=["Banana", "banana", " ", "Kiwi"]))
    assert lexicon.job_keywords == ("banana", "kiwi")


def test_load_lexicon_from_path(tmp_path):
    path = tmp_path / "lexicon.json"
    path.write_text(json.dumps(_payload()), encoding="utf-8")
    assert load_lexicon(path).version == "test-1"


def test_load_lexicon_rejects_bad_json(tmp_path):
    path = tmp_path / "lexicon.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(LexiconError):
        load_lexicon(path)


def test_engine_uses_supplied_vocabulary(neutral_sentiment):
    engine = ScamRiskEngine(
        lexicon=lexicon_from_dict(_payload()),
        classifier=SupervisedClassifier([]),
        sentiment=neutral_sentiment,
    )
    result = engine.analyze_content(ContentUnit(text="Banana fruit stand, urgent fee"))
    assert result.flagged_keywords == ["banana"]
    assert result.flagged_patterns == ["fruit"]
    assert result.confidence == pytest.approx(0.1)
