"""Language dispatch for morphology rules.

Each language module registers its rule set here. Callers use
dispatch.rules_for(tag) without knowing which module handles which
language; tags without a registered rule set fall back to English.
"""

from __future__ import annotations

from enum import Enum

from lexishape.language import primary_language
from lexishape.linguistics.rules import MorphologyRules


class Language(str, Enum):
    ENGLISH = "en"
    SPANISH = "es"
    FRENCH = "fr"
    GERMAN = "de"


FALLBACK = Language.ENGLISH

_REGISTRY: dict[str, MorphologyRules] = {}


def register(language: Language, rules: MorphologyRules) -> None:
    """Register a rule set for a language."""
    _REGISTRY[language.value] = rules


def resolve(tag: str) -> Language:
    """Map a BCP-47-ish tag to a supported language ("en-GB" -> ENGLISH)."""
    try:
        return Language(primary_language(tag))
    except ValueError:
        return FALLBACK


def rules_for(tag: str) -> MorphologyRules:
    return _REGISTRY[resolve(tag).value]
