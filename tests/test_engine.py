"""Tests for the MorphologyEngine façade: language switching, overrides,
text variants and last-word helpers."""

from lexishape.engine import MorphologyEngine, default_engine
from lexishape.linguistics.de import GermanRules
from lexishape.linguistics.en import EnglishRules
from lexishape.linguistics.types import (
    ConjugationRequest,
    DeterminerPreference,
    Number,
    Person,
    Tense,
    WordOperation,
)
from lexishape.overrides import MemoryBackend, Overrides, OverridesStore, SqliteBackend


# ── Language ─────────────────────────────────────────────────────────────────


class TestLanguage:
    def test_tag_normalized(self, store):
        assert MorphologyEngine("en-US", store=store).language == "en"

    def test_set_language_swaps_rules(self, engine):
        engine.set_language("de-DE")
        assert engine.language == "de"
        assert isinstance(engine.rules, GermanRules)

    def test_unknown_language_uses_english_rules(self, store):
        engine = MorphologyEngine("zz", store=store)
        assert engine.language == "zz"
        assert isinstance(engine.rules, EnglishRules)
        assert engine.pluralize("child") == "children"

    def test_unknown_language_keeps_own_overrides(self, store):
        MorphologyEngine("en", store=store).update_overrides(
            lambda o: o.plural.update({"child": "kids"})
        )
        assert MorphologyEngine("zz", store=store).pluralize("child") == "children"


# ── Scenarios ────────────────────────────────────────────────────────────────


class TestScenarios:
    def test_plural_casing(self, engine):
        assert engine.pluralize("child") == "children"
        assert engine.pluralize("Child") == "Children"
        assert engine.pluralize("CHILD") == "CHILDREN"

    def test_past(self, engine):
        assert engine.to_past("go") == "went"
        assert engine.to_past("DRINK") == "DRANK"

    def test_negate(self, engine):
        assert engine.negate(["She", "is", "here"], contracted=True) == ["She", "isn't", "here"]
        assert engine.negate(["He", "goes"], contracted=True) == ["He", "doesn't", "go"]

    def test_question(self, engine):
        assert engine.make_yes_no_question(["He", "likes", "pizza"]) == [
            "Does", "he", "like", "pizza",
        ]

    def test_pronouns(self, engine):
        assert engine.pronoun_variants("They") == ["They", "them", "their", "theirs", "themselves"]

    def test_overrides_cross_instances(self, store):
        MorphologyEngine("zz", store=store).update_overrides(
            lambda o: o.plural.update({"child": "children"})
        )
        assert MorphologyEngine("zz", store=store).pluralize("child") == "children"

    def test_overrides_persist_across_stores(self, tmp_path):
        path = tmp_path / "overrides.db"
        first = MorphologyEngine("zz", store=OverridesStore(SqliteBackend(path)))
        first.update_overrides(lambda o: o.plural.update({"ox": "oxes"}))

        fresh = MorphologyEngine("zz", store=OverridesStore(SqliteBackend(path)))
        assert fresh.pluralize("ox") == "oxes"


# ── Overrides ────────────────────────────────────────────────────────────────


class TestOverridePrecedence:
    def test_override_beats_irregular(self, engine):
        engine.set_overrides(Overrides(plural={"child": "childs"}))
        assert engine.pluralize("Child") == "Childs"

    def test_override_beats_regular(self, engine):
        engine.update_overrides(lambda o: o.past.update({"dream": "dreamt"}))
        assert engine.to_past("dream") == "dreamt"

    def test_do_not_change(self, engine):
        engine.update_overrides(lambda o: o.do_not_change.add("data"))
        assert engine.singularize("data") == "data"
        assert engine.pluralize("Data") == "Data"

    def test_do_not_change_checked_before_plural_map(self, engine):
        engine.set_overrides(Overrides(do_not_change={"fish"}, plural={"fish": "fishes"}))
        assert engine.pluralize("fish") == "fish"

    def test_article_override(self, engine):
        engine.update_overrides(lambda o: o.article.update({"herb": "a"}))
        assert engine.indefinite_article("herb") == "a"
        assert engine.determiner("herb", DeterminerPreference.INDEFINITE) == "a"

    def test_base_override(self, engine):
        assert engine.base_verb("dreamt") == "dreamt"
        engine.update_overrides(lambda o: o.base.update({"dreamt": "dream"}))
        assert engine.base_verb("Dreamt") == "Dream"

    def test_update_is_visible_immediately(self, engine):
        assert engine.to_comparative("fun") == "funner"
        engine.update_overrides(lambda o: o.comparative.update({"fun": "more fun"}))
        assert engine.to_comparative("fun") == "more fun"

    def test_other_language_unaffected(self, engine):
        engine.update_overrides(lambda o: o.plural.update({"child": "kids"}), language="de")
        assert engine.pluralize("child") == "children"

    def test_reset(self, engine):
        engine.set_overrides(Overrides(plural={"child": "kids"}))
        engine.reset_overrides()
        assert engine.pluralize("child") == "children"

    def test_empty_string_override_wins(self, engine):
        engine.set_overrides(
            Overrides(
                ing={"go": ""},
                past={"go": ""},
                third_s={"go": ""},
                base={"went": ""},
                comparative={"good": ""},
                superlative={"good": ""},
                adverb={"good": ""},
                adjective={"well": ""},
            )
        )
        assert engine.to_ing("go") == ""
        assert engine.to_past("go") == ""
        assert engine.to_3rd_person_s("go") == ""
        assert engine.base_verb("went") == ""
        assert engine.to_comparative("good") == ""
        assert engine.to_superlative("good") == ""
        assert engine.to_adverb("good") == ""
        assert engine.adverb_to_adjective("well") == ""

    def test_empty_string_override_in_pass_through_language(self, engine):
        engine.set_language("fr")
        engine.set_overrides(Overrides(past={"aller": ""}, plural={"oeil": ""}))
        assert engine.to_past("aller") == ""
        assert engine.pluralize("oeil") == ""


# ── Conjugation ──────────────────────────────────────────────────────────────


class TestConjugate:
    def test_defaults_to_simple_active(self, engine):
        assert engine.conjugate("go", Person.THIRD, Number.SINGULAR, Tense.PRESENT) == "goes"

    def test_request(self, engine):
        request = ConjugationRequest(lemma="go", tense=Tense.PAST)
        assert engine.conjugate_request(request) == "went"


# ── Text variants ────────────────────────────────────────────────────────────


class TestTextVariants:
    def test_negate_text(self, engine):
        assert engine.negate_text("She is here.") == "She is not here"

    def test_negate_text_contracted(self, engine):
        assert engine.negate_text("He goes", contracted=True) == "He doesn't go"

    def test_question_text(self, engine):
        assert engine.make_yes_no_question_text("He likes pizza") == "Does he like pizza"

    def test_wh_question_text(self, engine):
        assert engine.make_wh_question_text("you live here", "where") == "Where do you live here"

    def test_rejoin_collapses_whitespace(self, engine):
        assert engine.negate_text("She   is\there") == "She is not here"

    def test_insert_not_text(self, engine):
        assert engine.insert_not_text("I can go") == "I can not go"

    def test_negate_simple_verb(self, engine):
        assert engine.negate_simple_verb(["He", "goes"]) == ["He", "does", "not", "go"]
        assert engine.negate_simple_verb_text("They went") == "They did not go"


# ── Last-word helpers ────────────────────────────────────────────────────────


class TestLastWord:
    def test_replace_keeps_quotes_and_punctuation(self, engine):
        assert engine.replace_last_word("He said, “run.”", engine.to_past) == "He said, “ran.”"

    def test_replace_keeps_rest_verbatim(self, engine):
        result = engine.replace_last_word("I  see   a child!", engine.pluralize)
        assert result == "I  see   a children!"

    def test_replace_without_words(self, engine):
        assert engine.replace_last_word("...", engine.pluralize) == "..."
        assert engine.replace_last_word("", engine.pluralize) == ""

    def test_apply_operation(self, engine):
        assert engine.apply_to_last_word("I see two child", WordOperation.PLURALIZE) == (
            "I see two children"
        )
        assert engine.apply_to_last_word("Where is the cat?", WordOperation.POSSESSIVE) == (
            "Where is the cat's?"
        )
        assert engine.apply_to_last_word("big", WordOperation.TO_COMPARATIVE) == "bigger"

    def test_apply_operation_by_value(self, engine):
        assert engine.apply_to_last_word("They run", "to_ing") == "They running"

    def test_apply_conservative(self, engine):
        assert engine.apply_to_last_word("I met Anna", WordOperation.PLURALIZE, conservative=True) == (
            "I met Anna"
        )

    def test_last_word(self, engine):
        assert engine.last_word("Hello, world!") == "world"
        assert engine.last_word("... !") is None
        assert engine.last_word("") is None

    def test_append_word(self, engine):
        assert engine.append_word("now", "  I want ") == "I want now"
        assert engine.append_word("hi", "   ") == "hi"


# ── Shared instance ──────────────────────────────────────────────────────────


class TestDefaultEngine:
    def test_is_shared(self):
        assert default_engine() is default_engine()

    def test_language_from_config(self, lexishape_home):
        lexishape_home.mkdir(parents=True)
        (lexishape_home / "config.yml").write_text("language: fr\nstore:\n  backend: memory\n")
        engine = default_engine()
        assert engine.language == "fr"
        assert isinstance(engine.store.backend, MemoryBackend)
