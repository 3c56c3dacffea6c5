# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .env import get_bool_env, get_env, get_float_env, get_int_env

DEFAULT_MAX_TEXT_LENGTH = 10000
DEFAULT_BATCH_WORKERS = 4
DEFAULT_MODEL_DIR = "~/.scamguard/model"
DEFAULT_ALERT_CONFIDENCE = 0.6


@dataclass(frozen=True, slots=True)
class EngineSettings:
    lexicon_path: Path | None = None
    seed_corpus_path: Path | None = None
    max_text_length: int = DEFAULT_MAX_TEXT_LENGTH
    batch_workers: int = DEFAULT_BATCH_WORKERS
    model_dir: Path = Path(DEFAULT_MODEL_DIR).expanduser()
    use_exported_model: bool = False
    alert_min_confidence: float = DEFAULT_ALERT_CONFIDENCE

    @classmethod
    def from_env(cls) -> "EngineSettings":
        lexicon = get_env("SCAMGUARD_LEXICON_PATH")
        seed = get_env("SCAMGUARD_SEED_CORPUS_PATH")
        model_dir = get_env("SCAMGUARD_MODEL_DIR", DEFAULT_MODEL_DIR) or DEFAULT_MODEL_DIR
        return cls(
            lexicon_path=Path(lexicon).expanduser() if lexicon else None,
            seed_corpus_path=Path(seed).expanduser() if seed else None,
            max_text_length=max(get_int_env("SCAMGUARD_MAX_TEXT_LENGTH", DEFAULT_MAX_TEXT_LENGTH), 1),
            batch_workers=max(get_int_env("SCAMGUARD_BATCH_WORKERS", DEFAULT_BATCH_WORKERS), 1),
            model_dir=Path(model_dir).expanduser(),
            use_exported_model=get_bool_env("SCAMGUARD_USE_EXPORTED_MODEL", False),
            alert_min_confidence=min(max(get_float_env("SCAMGUARD_ALERT_MIN_CONFIDENCE", DEFAULT_ALERT_CONFIDENCE), 0.0), 1.0),
        )
