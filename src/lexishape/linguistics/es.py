"""Spanish rules: override-only placeholder with two small heuristics.

Negation puts "no" in front of the final word (the verb slot in short
clauses) and determiners pick el/los and un/unos by a trailing -s.
Everything else applies user overrides and otherwise passes through.
"""

from __future__ import annotations

from lexishape.linguistics.casing import looks_like_proper_name
from lexishape.linguistics.rules import PassThroughRules, head_word
from lexishape.linguistics.types import DeterminerPreference
from lexishape.overrides.model import Overrides


def _looks_plural(lower: str) -> bool:
    return lower.endswith("s")


class SpanishRules(PassThroughRules):
    language_code = "es"
    definite_article = "el"
    indefinite_article_default = "un"

    def negate(
        self, words: list[str], contracted: bool = False, overrides: Overrides | None = None
    ) -> list[str]:
        if not words:
            return ["no"]
        out = list(words)
        out.insert(len(out) - 1, "no")
        return out

    def determiner(
        self, noun_phrase: str, preference: DeterminerPreference, overrides: Overrides
    ) -> str:
        override = overrides.article.get(noun_phrase.lower())
        if override is not None:
            return override
        head = head_word(noun_phrase)
        if looks_like_proper_name(head):
            return ""

        plural = _looks_plural(head.lower())
        if preference is DeterminerPreference.DEFINITE:
            return "los" if plural else "el"
        if preference is DeterminerPreference.INDEFINITE:
            if plural:
                return "unos"
            return self.indefinite_article(head, overrides)
        return ""
