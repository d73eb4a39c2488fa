"""Helpers shared by CLI commands."""

from __future__ import annotations

from typing import Optional

from lexishape.config import load_config
from lexishape.engine import MorphologyEngine
from lexishape.overrides import build_store


def open_engine(lang: Optional[str] = None) -> MorphologyEngine:
    """Engine for the configured store; language from --lang or config.

    Raises ConfigError (a RuntimeError) when config.yml is unusable.
    """
    cfg = load_config()
    return MorphologyEngine(lang or cfg.language, store=build_store(cfg))
