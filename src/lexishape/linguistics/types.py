"""Grammatical feature types shared by the rules contract and the engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Person(str, Enum):
    FIRST = "first"
    SECOND = "second"
    THIRD = "third"


class Number(str, Enum):
    SINGULAR = "singular"
    PLURAL = "plural"


class Tense(str, Enum):
    PRESENT = "present"
    PAST = "past"
    FUTURE = "future"


class Aspect(str, Enum):
    SIMPLE = "simple"
    PROGRESSIVE = "progressive"
    PERFECT = "perfect"
    PERFECT_PROGRESSIVE = "perfect-progressive"


class Voice(str, Enum):
    ACTIVE = "active"
    PASSIVE = "passive"


class DeterminerPreference(str, Enum):
    DEFINITE = "definite"
    INDEFINITE = "indefinite"
    NONE = "none"


class WordOperation(str, Enum):
    """Per-word transforms that can be applied to the last word of a text."""

    TO_ING = "to_ing"
    TO_PAST = "to_past"
    TO_3RD_PERSON_S = "to_3rd_person_s"
    BASE_VERB = "base_verb"
    PLURALIZE = "pluralize"
    SINGULARIZE = "singularize"
    POSSESSIVE = "possessive"
    TO_COMPARATIVE = "to_comparative"
    TO_SUPERLATIVE = "to_superlative"
    TO_ADVERB = "to_adverb"
    ADVERB_TO_ADJECTIVE = "adverb_to_adjective"


@dataclass(frozen=True)
class ConjugationRequest:
    lemma: str
    person: Person = Person.THIRD
    number: Number = Number.SINGULAR
    tense: Tense = Tense.PRESENT
    aspect: Aspect = Aspect.SIMPLE
    voice: Voice = Voice.ACTIVE
