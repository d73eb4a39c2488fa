"""French rules: override-only placeholder.

"ne ... pas" negation and "est-ce que" questions need syntax that is not
modeled yet; lexical operations apply user overrides only.
"""

from __future__ import annotations

from lexishape.linguistics.rules import PassThroughRules


class FrenchRules(PassThroughRules):
    language_code = "fr"
    definite_article = "le"
    indefinite_article_default = "un"
