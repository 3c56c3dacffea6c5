# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

import pandas as pd

from scamguard.features import (
    enrich_dataframe,
    keyword_stats,
    match_keywords,
    match_patterns,
    merge_job_fields,
    merge_social_fields,
    normalize_text,
)
from scamguard.schemas import ContentUnit, Origin


def test_merge_job_fields_keeps_field_order_and_blanks_missing_values():
    record = {
        "title": "Data Entry Clerk",
        "description": None,
        "company": {"name": "Acme"},
        "requirements": ["Typing"],
        "responsibilities": None,
        "contactInfo": {"email": "hr@acme.test"},
    }
    assert merge_job_fields(record) == "Data Entry Clerk  Acme Typing hr@acme.test  "


def test_merge_job_fields_accepts_empty_record():
    assert merge_job_fields({}) == " " * 5


def test_merge_social_fields_uses_body_only():
    assert merge_social_fields({"text": "Hello", "author": {"name": "x"}}) == "Hello"
    assert merge_social_fields({}) is None


def test_content_unit_builders():
    job = ContentUnit.from_job_posting({"_id": 42, "title": "Clerk"})
    assert job.origin is Origin.JOB_POSTING
    assert job.source_id == "42"
    post = ContentUnit.from_social_post({"text": "Hi", "engagement": {"likes": 3}}, platform="reddit")
    assert post.origin is Origin.SOCIAL_POST
    assert post.engagement == {"likes": 3}
    assert post.platform == "reddit"


def test_normalize_text_lowercases_only():
    assert normalize_text("Act NOW!  Fee") == "act now!  fee"


def test_match_keywords_follows_vocabulary_order():
    vocabulary = ("fee", "work from home", "urgent", "absent")
    text = "urgent! work from home, pay the fee. fee again"
    assert match_keywords(text, vocabulary) == ["fee", "work from home", "urgent"]


def test_match_keywords_is_case_insensitive_and_stable():
    vocabulary = ("act now", "deposit")
    text = "ACT NOW and send a Deposit"
    first = match_keywords(text, vocabulary)
    assert first == ["act now", "deposit"]
    assert match_keywords(text, vocabulary) == first


def test_match_patterns_dedupes_repeated_matches(lexicon):
    text = "send $50 fee now via paypal. paypal only, now!"
    assert match_patterns(text, lexicon.job_patterns) == ["$50 fee", "paypal", "now"]


def test_match_patterns_is_idempotent(lexicon):
    text = "guaranteed visa and flight, urgent hurry"
    assert match_patterns(text, lexicon.job_patterns) == match_patterns(text, lexicon.job_patterns)


def test_keyword_stats_counts_occurrences():
    assert keyword_stats("fee fee urgent", ("fee", "urgent", "visa")) == {"fee": 2, "urgent": 1}


def test_enrich_dataframe_adds_signal_counts(lexicon):
    frame = pd.DataFrame({"text": ["Urgent fee!", None], "label": ["scam", "legitimate"]})
    out = enrich_dataframe(frame, lexicon=lexicon, origin=Origin.JOB_POSTING)
    assert out["text"].tolist() == ["urgent fee!", ""]
    assert out["keyword_count"].tolist() == [2, 0]
    assert out["pattern_count"].tolist() == [1, 0]
