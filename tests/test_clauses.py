"""Tests for English clause transforms: negation, questions, do-support."""

from lexishape.linguistics.en import (
    EnglishRules,
    infer_person_number,
    main_verb_index,
)
from lexishape.linguistics.types import Number, Person

en = EnglishRules()


# ── Negation with an auxiliary ───────────────────────────────────────────────


class TestNegateAuxiliary:
    def test_not_after_auxiliary(self):
        assert en.negate(["She", "is", "here"]) == ["She", "is", "not", "here"]

    def test_contracted(self):
        assert en.negate(["She", "is", "here"], contracted=True) == ["She", "isn't", "here"]

    def test_modal_contracted(self):
        assert en.negate(["They", "can", "swim"], contracted=True) == ["They", "can't", "swim"]

    def test_will_contracts_to_wont(self):
        assert en.negate(["It", "will", "rain"], contracted=True) == ["It", "won't", "rain"]

    def test_am_has_no_contraction(self):
        assert en.negate(["I", "am", "happy"], contracted=True) == ["I", "am", "not", "happy"]

    def test_contraction_keeps_all_caps(self):
        assert en.negate(["SHE", "IS", "HERE"], contracted=True) == ["SHE", "ISN'T", "HERE"]


# ── Negation with do-support ─────────────────────────────────────────────────


class TestNegateDoSupport:
    def test_third_singular_contracted(self):
        assert en.negate(["He", "goes"], contracted=True) == ["He", "doesn't", "go"]

    def test_plural_subject(self):
        assert en.negate(["They", "play"]) == ["They", "do", "not", "play"]

    def test_irregular_past(self):
        assert en.negate(["I", "went"]) == ["I", "did", "not", "go"]

    def test_regular_past_contracted(self):
        assert en.negate(["We", "walked"], contracted=True) == ["We", "didn't", "walk"]

    def test_proper_name_subject(self):
        assert en.negate(["John", "runs"]) == ["John", "does", "not", "run"]

    def test_keeps_words_after_verb(self):
        assert en.negate(["He", "likes", "pizza"]) == ["He", "does", "not", "like", "pizza"]

    def test_determiner_subject_singular(self):
        assert en.negate(["The", "dog", "barks"]) == ["The", "dog", "does", "not", "bark"]

    def test_determiner_subject_plural(self):
        assert en.negate(["The", "dogs", "bark"]) == ["The", "dogs", "do", "not", "bark"]

    def test_adverb_before_verb(self):
        assert en.negate(["She", "quickly", "runs"], contracted=True) == [
            "She", "doesn't", "quickly", "run",
        ]

    def test_frequency_adverb(self):
        assert en.negate(["They", "often", "played"]) == ["They", "did", "not", "often", "play"]

    def test_ly_verb_is_not_skipped(self):
        assert en.negate(["They", "apply", "daily"]) == ["They", "do", "not", "apply", "daily"]

    def test_bare_verb_moves_capital(self):
        assert en.negate(["Go"]) == ["Do", "not", "go"]

    def test_empty(self):
        assert en.negate([]) == ["do", "not"]
        assert en.negate([], contracted=True) == ["do", "n't"]


# ── Yes/no questions ─────────────────────────────────────────────────────────


class TestYesNoQuestion:
    def test_do_support_third_singular(self):
        assert en.make_yes_no_question(["He", "likes", "pizza"]) == ["Does", "he", "like", "pizza"]

    def test_auxiliary_inversion(self):
        assert en.make_yes_no_question(["She", "is", "happy"]) == ["Is", "she", "happy"]

    def test_i_stays_capitalized(self):
        assert en.make_yes_no_question(["I", "am", "late"]) == ["Am", "I", "late"]

    def test_past(self):
        assert en.make_yes_no_question(["They", "went", "home"]) == ["Did", "they", "go", "home"]

    def test_second_person(self):
        assert en.make_yes_no_question(["You", "like", "it"]) == ["Do", "you", "like", "it"]

    def test_name_keeps_capital(self):
        assert en.make_yes_no_question(["John", "likes", "pizza"]) == ["Does", "John", "like", "pizza"]

    def test_adverb_stays_after_subject(self):
        assert en.make_yes_no_question(["She", "often", "eats", "fish"]) == [
            "Does", "she", "often", "eat", "fish",
        ]

    def test_modal(self):
        assert en.make_yes_no_question(["We", "can", "go"]) == ["Can", "we", "go"]

    def test_empty(self):
        assert en.make_yes_no_question([]) == []


class TestWhQuestion:
    def test_do_support(self):
        assert en.make_wh_question(["You", "live", "here"], "where") == [
            "Where", "do", "you", "live", "here",
        ]

    def test_auxiliary(self):
        assert en.make_wh_question(["She", "is", "sad"], "why") == ["Why", "is", "she", "sad"]

    def test_empty(self):
        assert en.make_wh_question([], "what") == ["What"]


class TestInsertNot:
    def test_after_auxiliary(self):
        assert en.insert_not(["I", "can", "go"]) == ["I", "can", "not", "go"]

    def test_appended_without_auxiliary(self):
        assert en.insert_not(["Stop"]) == ["Stop", "not"]

    def test_empty(self):
        assert en.insert_not([]) == ["not"]


# ── Heuristics ───────────────────────────────────────────────────────────────


class TestMainVerbIndex:
    def test_pronoun_subject(self):
        assert main_verb_index(["He", "likes", "pizza"]) == 1

    def test_determiner_subject(self):
        assert main_verb_index(["The", "dog", "barks", "loudly"]) == 2

    def test_two_words(self):
        assert main_verb_index(["This", "works"]) == 1

    def test_single_word(self):
        assert main_verb_index(["Go"]) == 0

    def test_skips_adverbs(self):
        assert main_verb_index(["He", "really", "likes", "it"]) == 2
        assert main_verb_index(["The", "cat", "usually", "sleeps"]) == 3

    def test_last_word_is_the_verb(self):
        assert main_verb_index(["He", "often"]) == 1


class TestPersonNumber:
    def test_pronoun(self):
        assert infer_person_number(["I"]) == (Person.FIRST, Number.SINGULAR)
        assert infer_person_number(["we"]) == (Person.FIRST, Number.PLURAL)

    def test_proper_name(self):
        assert infer_person_number(["Maria"]) == (Person.THIRD, Number.SINGULAR)

    def test_noun_phrase_head(self):
        assert infer_person_number(["my", "cats"]) == (Person.THIRD, Number.PLURAL)
        assert infer_person_number(["my", "cat"]) == (Person.THIRD, Number.SINGULAR)

    def test_default_third_plural(self):
        assert infer_person_number(["dogs"]) == (Person.THIRD, Number.PLURAL)
        assert infer_person_number([]) == (Person.THIRD, Number.PLURAL)
