# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

import json

import pandas as pd
import pytest

from scamguard.errors import RetrainFailure
from scamguard.inference.classifier import SupervisedClassifier
from scamguard.training.dataset import frame_to_examples, load_examples, to_dataframe, validate_examples
from scamguard.training.trainer import export_model, fit_model, load_exported_model


def test_load_jsonl_drops_blanks_and_duplicates(tmp_path):
    path = tmp_path / "labels.jsonl"
    rows = [
        {"text": "Pay the training fee first", "label": "SCAM"},
        {"text": "Pay the training fee first", "label": "scam"},
        {"text": "   ", "label": "legitimate"},
        {"text": "Nurse, day shift, benefits", "label": "legitimate"},
    ]
    path.write_text("\n".join(json.dumps(row) for row in rows) + "\n", encoding="utf-8")
    examples = load_examples(path)
    assert [(item.text, item.label) for item in examples] == [
        ("Pay the training fee first", "scam"),
        ("Nurse, day shift, benefits", "legitimate"),
    ]


def test_load_csv(tmp_path):
    path = tmp_path / "labels.csv"
    path.write_text("text,label\nWire the deposit today,scam\nWarehouse associate,legitimate\n", encoding="utf-8")
    assert len(load_examples(path)) == 2


def test_unknown_format_is_rejected(tmp_path):
    path = tmp_path / "labels.txt"
    path.write_text("whatever", encoding="utf-8")
    with pytest.raises(ValueError):
        load_examples(path)


def test_bad_label_is_rejected():
    df = pd.DataFrame([{"text": "hello", "label": "spam"}])
    with pytest.raises(RetrainFailure, match="label"):
        frame_to_examples(df)


def test_missing_columns_are_rejected():
    with pytest.raises(RetrainFailure):
        frame_to_examples(pd.DataFrame([{"body": "hello"}]))


def test_fit_model_reports_metrics(seed_corpus):
    model = fit_model(list(seed_corpus), version="v7")
    assert model.version == "v7"
    assert model.example_count == 10
    assert model.label_counts == {"scam": 5, "legitimate": 5}
    assert 0.0 <= model.metrics["accuracy"] <= 1.0
    assert model.metrics["tp"] + model.metrics["fn"] == 5


def test_fit_model_on_empty_corpus_is_empty():
    model = fit_model([], version="v1")
    assert model.is_empty
    assert model.metrics == {}


def test_export_then_load_matches(tmp_path, seed_corpus):
    source = SupervisedClassifier(seed_corpus)
    exported = export_model(source.model, tmp_path)
    assert exported["metadata"]["model_version"] == "v1"
    assert (tmp_path / "latest" / "model.joblib").exists()

    loaded = load_exported_model(tmp_path)
    assert loaded is not None
    assert loaded.version == "v1"
    assert loaded.example_count == 10

    target = SupervisedClassifier([])
    target.install_model(loaded)
    probe = "earn money from home, sign up fee"
    assert target.classify(probe) == source.classify(probe)


def test_load_exported_model_without_export(tmp_path):
    assert load_exported_model(tmp_path) is None


def test_to_dataframe_round_trip(seed_corpus):
    df = to_dataframe(list(seed_corpus))
    assert list(df.columns) == ["text", "label"]
    assert frame_to_examples(df) == list(seed_corpus)


@pytest.mark.parametrize("items", [5, 3.5, object()])
def test_validate_examples_rejects_non_iterables(items):
    with pytest.raises(RetrainFailure, match="list of examples"):
        validate_examples(items)
