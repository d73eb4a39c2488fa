"""Engine façade: one language, its rule set, and an overrides store.

    engine = MorphologyEngine("en-US", store=OverridesStore())
    engine.pluralize("Child")                      # "Children"
    engine.negate(["He", "goes"], contracted=True)  # ["He", "doesn't", "go"]
    engine.apply_to_last_word("He said, “run.”", WordOperation.TO_PAST)
                                                   # "He said, “ran.”"

Overrides are fetched from the store on every call, so an update made
through one engine is visible to every other engine sharing the store.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable

# Importing the package registers every language with dispatch
import lexishape.linguistics  # noqa: F401
from lexishape.config import load_config
from lexishape.language import primary_language
from lexishape.linguistics import dispatch
from lexishape.linguistics.rules import MorphologyRules
from lexishape.linguistics.types import (
    Aspect,
    ConjugationRequest,
    DeterminerPreference,
    Number,
    Person,
    Tense,
    Voice,
    WordOperation,
)
from lexishape.overrides.model import Overrides
from lexishape.overrides.store import OverridesStore, default_store
from lexishape.tokenizer import split_trailing_punctuation, tokenize_words, words_from

logger = logging.getLogger(__name__)


class MorphologyEngine:
    def __init__(self, language: str = "en", store: OverridesStore | None = None) -> None:
        self.store = store if store is not None else default_store()
        self._language, self._rules = self._resolve(language)

    @staticmethod
    def _resolve(tag: str) -> tuple[str, MorphologyRules]:
        return primary_language(tag), dispatch.rules_for(tag)

    # ── Language ──────────────────────────────────────────────────────────

    @property
    def language(self) -> str:
        return self._language

    @property
    def rules(self) -> MorphologyRules:
        return self._rules

    def set_language(self, tag: str) -> None:
        """Switch language; tag and rule set change together."""
        language, rules = self._resolve(tag)
        self._language, self._rules = language, rules
        logger.debug("Language set to %r (rules: %s)", language, type(rules).__name__)

    # ── Overrides ─────────────────────────────────────────────────────────

    def overrides(self) -> Overrides:
        return self.store.get(self._language)

    def set_overrides(self, overrides: Overrides, language: str | None = None) -> None:
        self.store.set(language or self._language, overrides)

    def update_overrides(
        self, mutate: Callable[[Overrides], None], language: str | None = None
    ) -> Overrides:
        return self.store.update(language or self._language, mutate)

    def reset_overrides(self, language: str | None = None) -> None:
        self.store.reset(language or self._language)

    # ── Verbs ─────────────────────────────────────────────────────────────

    def to_ing(self, verb: str) -> str:
        return self._rules.to_ing(verb, self.overrides())

    def to_past(self, verb: str) -> str:
        return self._rules.to_past(verb, self.overrides())

    def to_3rd_person_s(self, verb: str) -> str:
        return self._rules.to_3rd_person_s(verb, self.overrides())

    def base_verb(self, verb: str) -> str:
        return self._rules.base_verb(verb, self.overrides())

    # ── Nouns ─────────────────────────────────────────────────────────────

    def pluralize(self, noun: str, conservative: bool = False) -> str:
        return self._rules.pluralize(noun, conservative, self.overrides())

    def singularize(self, noun: str, conservative: bool = False) -> str:
        return self._rules.singularize(noun, conservative, self.overrides())

    def possessive(self, noun: str) -> str:
        return self._rules.possessive(noun, self.overrides())

    # ── Adjectives / adverbs ──────────────────────────────────────────────

    def to_comparative(self, adjective: str) -> str:
        return self._rules.to_comparative(adjective, self.overrides())

    def to_superlative(self, adjective: str) -> str:
        return self._rules.to_superlative(adjective, self.overrides())

    def to_adverb(self, adjective: str) -> str:
        return self._rules.to_adverb(adjective, self.overrides())

    def adverb_to_adjective(self, adverb: str) -> str:
        return self._rules.adverb_to_adjective(adverb, self.overrides())

    # ── Articles / pronouns ───────────────────────────────────────────────

    def indefinite_article(self, word: str) -> str:
        return self._rules.indefinite_article(word, self.overrides())

    def determiner(
        self,
        noun_phrase: str,
        preference: DeterminerPreference = DeterminerPreference.INDEFINITE,
    ) -> str:
        return self._rules.determiner(noun_phrase, preference, self.overrides())

    def pronoun_variants(self, token: str) -> list[str]:
        return self._rules.pronoun_variants(token)

    # ── Conjugation ───────────────────────────────────────────────────────

    def conjugate(
        self,
        lemma: str,
        person: Person,
        number: Number,
        tense: Tense,
        aspect: Aspect = Aspect.SIMPLE,
        voice: Voice = Voice.ACTIVE,
    ) -> str:
        return self._rules.conjugate(
            lemma, person, number, tense, aspect, voice, self.overrides()
        )

    def conjugate_request(self, request: ConjugationRequest) -> str:
        return self.conjugate(
            request.lemma,
            request.person,
            request.number,
            request.tense,
            request.aspect,
            request.voice,
        )

    # ── Clauses (word lists) ──────────────────────────────────────────────

    def negate(self, words: list[str], contracted: bool = False) -> list[str]:
        return self._rules.negate(words, contracted, self.overrides())

    def make_yes_no_question(self, words: list[str]) -> list[str]:
        return self._rules.make_yes_no_question(words, self.overrides())

    def make_wh_question(self, words: list[str], wh: str) -> list[str]:
        return self._rules.make_wh_question(words, wh, self.overrides())

    def insert_not(self, words: list[str]) -> list[str]:
        return self._rules.insert_not(words)

    def negate_simple_verb(self, words: list[str]) -> list[str]:
        return self.negate(words, contracted=False)

    # ── Clauses (text) ────────────────────────────────────────────────────
    # Text variants tokenize, transform and rejoin with single spaces.

    def _rejoin(self, text: str, transform: Callable[[list[str]], list[str]]) -> str:
        return " ".join(transform(words_from(text)))

    def negate_text(self, text: str, contracted: bool = False) -> str:
        return self._rejoin(text, lambda words: self.negate(words, contracted))

    def make_yes_no_question_text(self, text: str) -> str:
        return self._rejoin(text, self.make_yes_no_question)

    def make_wh_question_text(self, text: str, wh: str) -> str:
        return self._rejoin(text, lambda words: self.make_wh_question(words, wh))

    def insert_not_text(self, text: str) -> str:
        return self._rejoin(text, self.insert_not)

    def negate_simple_verb_text(self, text: str) -> str:
        return self._rejoin(text, self.negate_simple_verb)

    # ── Last-word helpers ─────────────────────────────────────────────────

    def replace_last_word(self, text: str, transform: Callable[[str], str]) -> str:
        """Rewrite the last word's core; everything else stays verbatim."""
        for token in reversed(tokenize_words(text)):
            core, trail = split_trailing_punctuation(token.text)
            if core:
                return text[: token.start] + transform(core) + trail + text[token.end:]
        return text

    def apply_to_last_word(
        self, text: str, operation: WordOperation, conservative: bool = False
    ) -> str:
        """Whole-sentence variant of every per-word transform."""
        operation = WordOperation(operation)
        match operation:
            case WordOperation.PLURALIZE:
                transform = lambda w: self.pluralize(w, conservative)  # noqa: E731
            case WordOperation.SINGULARIZE:
                transform = lambda w: self.singularize(w, conservative)  # noqa: E731
            case _:
                transform = getattr(self, operation.value)
        return self.replace_last_word(text, transform)

    def last_word(self, text: str) -> str | None:
        for token in reversed(tokenize_words(text)):
            core, _ = split_trailing_punctuation(token.text)
            if core:
                return core
        return None

    @staticmethod
    def append_word(word: str, text: str) -> str:
        trimmed = text.strip()
        if not trimmed:
            return word
        return f"{trimmed} {word}"


# ── Opt-in shared instance ────────────────────────────────────────────────────

_default_engine: MorphologyEngine | None = None
_default_lock = threading.Lock()


def default_engine() -> MorphologyEngine:
    """Process-wide engine on the default store, language from config."""
    global _default_engine
    with _default_lock:
        if _default_engine is None:
            _default_engine = MorphologyEngine(load_config().language)
        return _default_engine


def reset_default_engine() -> None:
    global _default_engine
    with _default_lock:
        _default_engine = None
