"""The rules contract every language implements, plus the override-only base.

A rule set is stateless: all user state arrives through the Overrides
argument, fetched fresh by the engine on every call. Lexical transforms
consult overrides first, then the language's irregular tables, then its
regular suffix rules.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from lexishape.linguistics.casing import looks_like_proper_name, match_case
from lexishape.linguistics.types import (
    Aspect,
    DeterminerPreference,
    Number,
    Person,
    Tense,
    Voice,
)
from lexishape.overrides.model import Overrides


def head_word(noun_phrase: str) -> str:
    """Last whitespace-delimited token of a noun phrase."""
    parts = noun_phrase.split()
    return parts[-1] if parts else noun_phrase


def lookup(table: dict[str, str], word: str) -> str | None:
    """Case-insensitive lookup that re-applies the word's casing to the hit."""
    hit = table.get(word.lower())
    if hit is None:
        return None
    return match_case(word, hit)


def lookup_first(word: str, *tables: dict[str, str]) -> str | None:
    """First hit across tables, in order. An empty-string entry is a hit."""
    for table in tables:
        hit = lookup(table, word)
        if hit is not None:
            return hit
    return None


def _or_unchanged(table: dict[str, str], word: str) -> str:
    hit = lookup(table, word)
    return word if hit is None else hit


class MorphologyRules(ABC):
    language_code: str = ""

    # Verbs

    @abstractmethod
    def to_ing(self, verb: str, overrides: Overrides) -> str: ...

    @abstractmethod
    def to_past(self, verb: str, overrides: Overrides) -> str: ...

    @abstractmethod
    def to_3rd_person_s(self, verb: str, overrides: Overrides) -> str: ...

    @abstractmethod
    def base_verb(self, verb: str, overrides: Overrides) -> str: ...

    # Nouns

    @abstractmethod
    def pluralize(self, noun: str, conservative: bool, overrides: Overrides) -> str: ...

    @abstractmethod
    def singularize(self, noun: str, conservative: bool, overrides: Overrides) -> str: ...

    @abstractmethod
    def possessive(self, noun: str, overrides: Overrides) -> str: ...

    # Adjectives / adverbs

    @abstractmethod
    def to_comparative(self, adjective: str, overrides: Overrides) -> str: ...

    @abstractmethod
    def to_superlative(self, adjective: str, overrides: Overrides) -> str: ...

    @abstractmethod
    def to_adverb(self, adjective: str, overrides: Overrides) -> str: ...

    @abstractmethod
    def adverb_to_adjective(self, adverb: str, overrides: Overrides) -> str: ...

    # Clauses (ordered word lists, never raw text)

    @abstractmethod
    def negate(
        self, words: list[str], contracted: bool = False, overrides: Overrides | None = None
    ) -> list[str]: ...

    @abstractmethod
    def make_yes_no_question(
        self, words: list[str], overrides: Overrides | None = None
    ) -> list[str]: ...

    @abstractmethod
    def make_wh_question(
        self, words: list[str], wh: str, overrides: Overrides | None = None
    ) -> list[str]: ...

    @abstractmethod
    def insert_not(self, words: list[str]) -> list[str]: ...

    # Articles

    @abstractmethod
    def indefinite_article(self, word: str, overrides: Overrides) -> str: ...

    @abstractmethod
    def determiner(
        self, noun_phrase: str, preference: DeterminerPreference, overrides: Overrides
    ) -> str: ...

    # Pronouns

    @abstractmethod
    def pronoun_variants(self, token: str) -> list[str]: ...

    # Conjugation

    @abstractmethod
    def conjugate(
        self,
        lemma: str,
        person: Person,
        number: Number,
        tense: Tense,
        aspect: Aspect,
        voice: Voice,
        overrides: Overrides,
    ) -> str: ...


class PassThroughRules(MorphologyRules):
    """Override-only rule set for languages without a grammar yet.

    Every lexical operation returns the override when one exists and the
    input unchanged otherwise. Clause transforms return the words unchanged.
    Subclasses set their articles and may refine single operations.
    """

    definite_article: str = ""
    indefinite_article_default: str = ""
    # Languages that capitalize every noun cannot spot names by casing
    nouns_capitalized: bool = False

    def to_ing(self, verb: str, overrides: Overrides) -> str:
        return _or_unchanged(overrides.ing, verb)

    def to_past(self, verb: str, overrides: Overrides) -> str:
        return _or_unchanged(overrides.past, verb)

    def to_3rd_person_s(self, verb: str, overrides: Overrides) -> str:
        return _or_unchanged(overrides.third_s, verb)

    def base_verb(self, verb: str, overrides: Overrides) -> str:
        return _or_unchanged(overrides.base, verb)

    def pluralize(self, noun: str, conservative: bool, overrides: Overrides) -> str:
        if noun.lower() in overrides.do_not_change:
            return noun
        return _or_unchanged(overrides.plural, noun)

    def singularize(self, noun: str, conservative: bool, overrides: Overrides) -> str:
        if noun.lower() in overrides.do_not_change:
            return noun
        return _or_unchanged(overrides.singular, noun)

    def possessive(self, noun: str, overrides: Overrides) -> str:
        return noun

    def to_comparative(self, adjective: str, overrides: Overrides) -> str:
        return _or_unchanged(overrides.comparative, adjective)

    def to_superlative(self, adjective: str, overrides: Overrides) -> str:
        return _or_unchanged(overrides.superlative, adjective)

    def to_adverb(self, adjective: str, overrides: Overrides) -> str:
        return _or_unchanged(overrides.adverb, adjective)

    def adverb_to_adjective(self, adverb: str, overrides: Overrides) -> str:
        return _or_unchanged(overrides.adjective, adverb)

    def negate(
        self, words: list[str], contracted: bool = False, overrides: Overrides | None = None
    ) -> list[str]:
        return list(words)

    def make_yes_no_question(
        self, words: list[str], overrides: Overrides | None = None
    ) -> list[str]:
        return list(words)

    def make_wh_question(
        self, words: list[str], wh: str, overrides: Overrides | None = None
    ) -> list[str]:
        return list(words)

    def insert_not(self, words: list[str]) -> list[str]:
        return list(words)

    def indefinite_article(self, word: str, overrides: Overrides) -> str:
        override = overrides.article.get(word.lower())
        if override is not None:
            return override
        return self.indefinite_article_default

    def determiner(
        self, noun_phrase: str, preference: DeterminerPreference, overrides: Overrides
    ) -> str:
        override = overrides.article.get(noun_phrase.lower())
        if override is not None:
            return override
        head = head_word(noun_phrase)
        if not self.nouns_capitalized and looks_like_proper_name(head):
            return ""
        if preference is DeterminerPreference.DEFINITE:
            return self.definite_article
        if preference is DeterminerPreference.INDEFINITE:
            return self.indefinite_article(head, overrides)
        return ""

    def pronoun_variants(self, token: str) -> list[str]:
        return [token]

    def conjugate(
        self,
        lemma: str,
        person: Person,
        number: Number,
        tense: Tense,
        aspect: Aspect,
        voice: Voice,
        overrides: Overrides,
    ) -> str:
        """Only the simple active present/past cells can be overridden."""
        if voice is Voice.ACTIVE and aspect is Aspect.SIMPLE:
            if tense is Tense.PRESENT and person is Person.THIRD and number is Number.SINGULAR:
                return self.to_3rd_person_s(lemma, overrides)
            if tense is Tense.PAST:
                return self.to_past(lemma, overrides)
        return lemma
