"""Lexishape: rule-based word shaping for phrase-building interfaces.

Pluralize, conjugate, negate and question words and short clauses, with
per-language user overrides that persist across sessions.
"""

from lexishape.engine import MorphologyEngine, default_engine
from lexishape.overrides import Overrides, OverridesStore

__all__ = ["MorphologyEngine", "Overrides", "OverridesStore", "default_engine"]
