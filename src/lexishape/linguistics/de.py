"""German rules: override-only placeholder.

Noun plurals, verb conjugation and "nicht/kein" negation all depend on
gender and clause structure that is not modeled yet, so every operation
applies user overrides and otherwise passes the input through.
"""

from __future__ import annotations

from lexishape.linguistics.rules import PassThroughRules


class GermanRules(PassThroughRules):
    language_code = "de"
    definite_article = "der"
    indefinite_article_default = "ein"
    nouns_capitalized = True
