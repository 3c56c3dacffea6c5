# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
"""Retrainable naive Bayes scam/legitimate classifier.

The active model is an immutable ``ClassifierModel``. ``train`` and
``update`` build a complete replacement off to the side and then rebind
``self._active`` in one assignment, so ``classify`` (which never locks)
reads either the old model or the new one. Retrains are serialized by
``self._lock``.
"""

from __future__ import annotations

import logging
import re
import threading
from typing import Any, Iterable

from ..errors import ClassifierUnavailable
from ..schemas import Classification, TrainingExample
from ..training.dataset import validate_examples
from ..training.trainer import ClassifierModel, fit_model

log = logging.getLogger(__name__)

_VERSION_RE = re.compile(r"^v(\d+)$")


def next_model_version(current: str) -> str:
    match = _VERSION_RE.match(current or "")
    return f"v{int(match.group(1)) + 1}" if match else "v1"


class SupervisedClassifier:
    def __init__(self, seed_corpus: Iterable[Any] = ()) -> None:
        self._lock = threading.Lock()
        self._corpus: tuple[TrainingExample, ...] = ()
        self._active = ClassifierModel(version="v0", pipeline=None, example_count=0)
        self.train(list(seed_corpus))

    @property
    def model(self) -> ClassifierModel:
        return self._active

    @property
    def version(self) -> str:
        return self._active.version

    @property
    def corpus(self) -> tuple[TrainingExample, ...]:
        return self._corpus

    def train(self, corpus: Iterable[Any]) -> ClassifierModel:
        """Rebuild from ``corpus`` alone and install the result."""
        examples = validate_examples(corpus)
        with self._lock:
            return self._install(tuple(examples))

    def update(self, new_examples: Iterable[Any]) -> ClassifierModel:
        """Append ``new_examples`` to the corpus and retrain; all or nothing."""
        examples = validate_examples(new_examples)
        with self._lock:
            return self._install(self._corpus + tuple(examples))

    def _install(self, corpus: tuple[TrainingExample, ...]) -> ClassifierModel:
        model = fit_model(list(corpus), version=next_model_version(self._active.version))
        self._corpus = corpus
        self._active = model
        log.info("classifier model %s installed (%d examples)", model.version, model.example_count)
        return model

    def install_model(self, model: ClassifierModel) -> None:
        with self._lock:
            self._active = model

    def classify(self, text: str) -> list[Classification]:
        model = self._active
        if model.is_empty:
            return []
        try:
            classes = [str(label) for label in model.pipeline.classes_]
            probabilities = model.pipeline.predict_proba([text])[0]
        except Exception as exc:
            raise ClassifierUnavailable(f"model {model.version} failed to classify: {exc}") from exc
        if len(probabilities) != len(classes):
            raise ClassifierUnavailable(f"model {model.version} returned {len(probabilities)} scores for {len(classes)} labels")
        results = [Classification(label=label, probability=float(prob)) for label, prob in zip(classes, probabilities)]
        return sorted(results, key=lambda item: item.probability, reverse=True)
