# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
"""Exceptions raised by the scoring engine.

None of these escape ``ScamRiskEngine.analyze_content`` or ``batch_analyze``:
they are turned into degraded results there. ``RetrainFailure`` is reported
to callers of ``retrain`` as an unsuccessful ``RetrainReport``.
"""

from __future__ import annotations


class ScamGuardError(Exception):
    pass


class InvalidInput(ScamGuardError):
    """The content unit cannot be analyzed as given."""


class ClassifierUnavailable(ScamGuardError):
    """The classifier raised or produced output we cannot use."""


class RetrainFailure(ScamGuardError):
    """A retrain was rejected; the active model is unchanged."""


class LexiconError(ScamGuardError):
    """The lexicon resource is missing fields or has a bad pattern."""
