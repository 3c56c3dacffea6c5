# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

import threading

import pytest

from scamguard.errors import RetrainFailure
from scamguard.inference.classifier import SupervisedClassifier, next_model_version
from scamguard.schemas import TrainingExample

PROBE = "earn money online, pay the sign up fee, urgent"


def test_seed_corpus_has_five_of_each_label(seed_corpus):
    labels = [example.label for example in seed_corpus]
    assert labels.count("scam") == 5
    assert labels.count("legitimate") == 5


def test_seeded_classifier_returns_both_labels(seed_corpus):
    classifier = SupervisedClassifier(seed_corpus)
    results = classifier.classify(PROBE)
    assert {item.label for item in results} == {"scam", "legitimate"}
    assert sum(item.probability for item in results) == pytest.approx(1.0)
    assert results[0].probability >= results[1].probability
    assert results[0].label == "scam"


def test_legitimate_text_leans_legitimate(seed_corpus):
    classifier = SupervisedClassifier(seed_corpus)
    results = classifier.classify("senior software engineer, competitive salary, benefits included")
    assert results[0].label == "legitimate"


def test_empty_model_returns_no_classifications():
    classifier = SupervisedClassifier([])
    assert classifier.model.is_empty
    assert classifier.classify(PROBE) == []


def test_versions_increase_per_install(seed_corpus):
    classifier = SupervisedClassifier(seed_corpus)
    assert classifier.version == "v1"
    classifier.update([TrainingExample(text="Pay a deposit to unlock your job", label="scam")])
    assert classifier.version == "v2"
    assert len(classifier.corpus) == len(seed_corpus) + 1


def test_train_replaces_corpus(seed_corpus):
    classifier = SupervisedClassifier(seed_corpus)
    classifier.train([{"text": "Registered nurse, night shift", "label": "legitimate"}])
    assert len(classifier.corpus) == 1
    assert [item.label for item in classifier.classify("nurse")] == ["legitimate"]


def test_malformed_update_keeps_active_model(seed_corpus):
    classifier = SupervisedClassifier(seed_corpus)
    before_model = classifier.model
    before = classifier.classify(PROBE)

    with pytest.raises(RetrainFailure):
        classifier.update([{"text": "fine example", "label": "scam"}, {"text": None, "label": "scam"}])
    with pytest.raises(RetrainFailure):
        classifier.update([{"text": "bad label", "label": "spam"}])
    with pytest.raises(RetrainFailure):
        classifier.update("not a list")

    assert classifier.model is before_model
    assert len(classifier.corpus) == len(seed_corpus)
    assert classifier.classify(PROBE) == before


def test_stopword_only_corpus_is_rejected():
    classifier = SupervisedClassifier([])
    with pytest.raises(RetrainFailure):
        classifier.train([{"text": "the and of", "label": "scam"}])
    assert classifier.model.is_empty


def test_classify_during_retrain_sees_complete_models(seed_corpus):
    classifier = SupervisedClassifier(seed_corpus)
    extra = [TrainingExample(text=f"Wire transfer fee number {idx}", label="scam") for idx in range(5)]
    errors: list[Exception] = []

    def retrain() -> None:
        try:
            for _ in range(5):
                classifier.update(extra)
        except Exception as exc:  # pragma: no cover - surfaced by the assertion below
            errors.append(exc)

    worker = threading.Thread(target=retrain)
    worker.start()
    while worker.is_alive():
        results = classifier.classify(PROBE)
        assert len(results) == 2
        assert sum(item.probability for item in results) == pytest.approx(1.0)
    worker.join()
    assert errors == []
    assert classifier.version == "v6"


def test_next_model_version():
    assert next_model_version("v0") == "v1"
    assert next_model_version("v9") == "v10"
    assert next_model_version("imported") == "v1"
