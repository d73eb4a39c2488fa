"""Linguistics layer: morphology rules per language.

Each language module (en.py, es.py, ...) provides a MorphologyRules
subclass. They are registered with the dispatch module on import.
"""

from lexishape.linguistics import de, dispatch, en, es, fr
from lexishape.linguistics.dispatch import Language

dispatch.register(Language.ENGLISH, en.EnglishRules())
dispatch.register(Language.SPANISH, es.SpanishRules())
dispatch.register(Language.FRENCH, fr.FrenchRules())
dispatch.register(Language.GERMAN, de.GermanRules())
