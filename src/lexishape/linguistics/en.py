"""English rules: word shaping and short-clause transforms.

Every lexical transform follows the same pipeline:

    word -> [override?] -> [irregular table?] -> [suffix rule cascade]

and hands its lowercase result to match_case, so "Child" pluralizes to
"Children" and "DRINK" goes to "DRANK".

Clause transforms (negate, questions) work on ordered word lists. Splitting
text into words is the tokenizer's job.
"""

from __future__ import annotations

import re
import string

import inflect

from lexishape.linguistics.casing import (
    capitalize_first,
    decapitalize_first,
    is_titlecase,
    looks_like_proper_name,
    match_case,
)
from lexishape.linguistics.en_lexicon import (
    AUXILIARIES,
    CLASSICAL_A_TO_ON,
    CLASSICAL_A_TO_ON_UM,
    CLASSICAL_ES_TO_IS,
    CLASSICAL_I_TO_US,
    CLASSICAL_ICES_TO_IX,
    CLASSICAL_ICES_TO_IX_EX,
    CLASSICAL_IS_TO_ES,
    CLASSICAL_IX_EX_TO_ICES,
    CLASSICAL_ON_UM_TO_A,
    CLASSICAL_US_TO_I,
    CONSONANT_SOUND_PREFIXES,
    CONTRACTIONS,
    DETERMINERS,
    F_FE_TAKES_S,
    IE_SINGULARS,
    INVARIANT_PLURALS,
    IRREGULAR_3RD_PERSON,
    IRREGULAR_ADJECTIVE_TO_ADVERB,
    IRREGULAR_ADVERB_TO_ADJECTIVE,
    IRREGULAR_COMPARATIVES,
    IRREGULAR_LEMMA,
    IRREGULAR_PAST,
    IRREGULAR_PAST_FORMS,
    IRREGULAR_PAST_PARTICIPLE,
    IRREGULAR_PLURALS,
    IRREGULAR_PRESENT_PARTICIPLE,
    IRREGULAR_SINGULARS,
    IRREGULAR_SUPERLATIVES,
    LY_VERBS,
    O_TAKES_S,
    PREVERBAL_ADVERBS,
    PRONOUNS,
    S_SINGULARS,
    SILENT_H_PREFIXES,
    SUBJECT_PERSON_NUMBER,
    TAKES_FE_WHEN_SINGULAR,
    UNCOUNTABLES,
    VE_SINGULARS,
    VOWEL_SOUND_LETTERS,
)
from lexishape.linguistics.rules import MorphologyRules, head_word, lookup, lookup_first
from lexishape.linguistics.types import (
    Aspect,
    DeterminerPreference,
    Number,
    Person,
    Tense,
    Voice,
)
from lexishape.overrides.model import Overrides

_engine = inflect.engine()

VOWELS = "aeiou"

# Natural double finals that are part of the stem ("call", "kiss", "buzz")
_KEEP_DOUBLED = "lsfz"

_LEADING_DIGITS = re.compile(r"^\d+")

_QUOTES = string.punctuation + "“”‘’"

# Stressed last syllables that double in longer verbs (prefer, occur, admit)
_STRESSED_FINALS = ("fer", "cur", "pel", "trol", "mit")
_UNSTRESSED_FINALS = ("ffer", "imit")


# ── Regular inflection helpers ────────────────────────────────────────────────

def _ends_consonant_y(lower: str) -> bool:
    return len(lower) > 1 and lower.endswith("y") and lower[-2] not in VOWELS


def _ends_cvc(lower: str) -> bool:
    """Consonant-vowel-consonant ending, final letter not y/w/x."""
    if len(lower) < 3:
        return False
    first, mid, last = lower[-3], lower[-2], lower[-1]
    if last in "ywx" or not last.isalpha() or not first.isalpha():
        return False
    return first not in VOWELS and mid in VOWELS and last not in VOWELS


def _should_double_final_consonant(lower: str) -> bool:
    """stop -> stopped, prefer -> preferred, but open -> opened."""
    if not _ends_cvc(lower):
        return False
    if _syllable_count(lower) == 1:
        return True
    return lower.endswith(_STRESSED_FINALS) and not lower.endswith(_UNSTRESSED_FINALS)


def _has_doubled_final_consonant(stem: str) -> bool:
    if len(stem) < 4:
        return False
    last = stem[-1]
    if last != stem[-2] or not last.isalpha():
        return False
    return last not in VOWELS and last not in "ywx" and last not in _KEEP_DOUBLED


def _has_vowel(stem: str) -> bool:
    return any(ch in VOWELS or ch == "y" for ch in stem)


def _takes_es(stem: str) -> bool:
    """Whether a stem forms its -s form with -es (box, wish, buzz, echo, lens)."""
    if stem.endswith(("ss", "zz", "x", "ch", "sh")):
        return True
    if stem.endswith(("s", "z")) and len(stem) > 1 and stem[-2] not in VOWELS:
        return True
    return stem.endswith("o") and len(stem) > 3


def _regular_ing(lower: str) -> str:
    if lower.endswith("ie"):
        return lower[:-2] + "ying"
    if lower.endswith("e") and not lower.endswith("ee") and len(lower) > 2:
        return lower[:-1] + "ing"
    if _should_double_final_consonant(lower):
        return lower + lower[-1] + "ing"
    return lower + "ing"


def _regular_past(lower: str) -> str:
    if lower.endswith("e"):
        return lower + "d"
    if _ends_consonant_y(lower):
        return lower[:-1] + "ied"
    if _should_double_final_consonant(lower):
        return lower + lower[-1] + "ed"
    return lower + "ed"


def _regular_3rd(lower: str) -> str:
    if _ends_consonant_y(lower):
        return lower[:-1] + "ies"
    if lower.endswith(("s", "x", "z", "ch", "sh", "o")):
        return lower + "es"
    return lower + "s"


def _syllable_count(word: str) -> int:
    """Rough syllable count heuristic based on vowel groups."""
    lower = word.lower()
    if not lower:
        return 0
    count = 0
    prev_vowel = False
    for ch in lower:
        is_vowel = ch in "aeiouy"
        if is_vowel and not prev_vowel:
            count += 1
        prev_vowel = is_vowel
    # Trailing silent e, but "-le" keeps its syllable (simple, gentle)
    if lower.endswith("e") and not lower.endswith("le") and count > 1:
        count -= 1
    return max(count, 1)


def _restore_silent_e(stem: str) -> str:
    """Put back the e that -ed or -ing swallowed: lik -> like, danc -> dance."""
    if stem.endswith(("v", "dg")) or (stem.endswith("c") and not stem.endswith("ic")):
        return stem + "e"
    if len(stem) == 2 and stem[0] in VOWELS and stem[1] not in VOWELS + "wxy":
        return stem + "e"
    if _syllable_count(stem) == 1 and _ends_cvc(stem):
        return stem + "e"
    return stem


def _regular_plural(lower: str) -> str:
    if _ends_consonant_y(lower):
        return lower[:-1] + "ies"
    if lower.endswith(("f", "fe")):
        if lower in F_FE_TAKES_S or lower.endswith("ff"):
            return lower + "s"
        if lower.endswith("fe"):
            return lower[:-2] + "ves"
        return lower[:-1] + "ves"
    if lower.endswith("us") and lower in CLASSICAL_US_TO_I:
        return lower[:-2] + "i"
    if lower.endswith("is") and lower in CLASSICAL_IS_TO_ES:
        return lower[:-2] + "es"
    if lower.endswith(("on", "um")) and lower in CLASSICAL_ON_UM_TO_A:
        return lower[:-2] + "a"
    if lower.endswith(("ix", "ex")) and lower in CLASSICAL_IX_EX_TO_ICES:
        return lower[:-2] + "ices"
    if lower.endswith("o"):
        if lower in O_TAKES_S or (len(lower) > 1 and lower[-2] in VOWELS):
            return lower + "s"
        return lower + "es"
    if lower.endswith(("s", "x", "z", "ch", "sh")):
        return lower + "es"
    return lower + "s"


def _regular_singular(lower: str) -> str:
    if lower in S_SINGULARS or lower.endswith(("ss", "is")):
        return lower
    if lower.endswith("ies") and len(lower) > 3:
        if lower[:-1] in IE_SINGULARS:
            return lower[:-1]
        return lower[:-3] + "y"
    if lower.endswith("ves") and len(lower) > 3:
        if lower[:-1] in VE_SINGULARS:
            return lower[:-1]
        stem = lower[:-3]
        if stem in TAKES_FE_WHEN_SINGULAR:
            return stem + "fe"
        return stem + "f"
    if lower.endswith("i") and lower in CLASSICAL_I_TO_US:
        return lower[:-1] + "us"
    if lower.endswith("es") and lower in CLASSICAL_ES_TO_IS:
        return lower[:-2] + "is"
    if lower.endswith("a") and lower in CLASSICAL_A_TO_ON_UM:
        if lower in CLASSICAL_A_TO_ON:
            return lower[:-1] + "on"
        return lower[:-1] + "um"
    if lower.endswith("ices") and lower in CLASSICAL_ICES_TO_IX_EX:
        if lower in CLASSICAL_ICES_TO_IX:
            return lower[:-4] + "ix"
        return lower[:-4] + "ex"
    if lower.endswith("es") and len(lower) > 2:
        stem = lower[:-2]
        if stem in S_SINGULARS or _takes_es(stem):
            return stem
        return lower[:-1]
    if lower.endswith("s") and len(lower) > 1:
        return lower[:-1]
    return lower


def _is_proper_noun(text: str) -> bool:
    """A capitalized single name, or a multi-word name with every word capitalized."""
    words = text.split()
    if len(words) >= 2:
        return all(w[0].isupper() for w in words)
    return looks_like_proper_name(text)


def _looks_plural_noun(lower: str) -> bool:
    if lower in IRREGULAR_SINGULARS or lower in INVARIANT_PLURALS:
        return True
    if not lower.endswith("s") or lower.endswith(("ss", "us", "is")):
        return False
    return lower not in S_SINGULARS


def _starts_with_vowel_sound(word: str) -> bool:
    w = word.strip(_QUOTES)
    if not w:
        return False
    lower = w.lower()

    digits = _LEADING_DIGITS.match(lower)
    if digits:
        return _starts_with_vowel_sound(_engine.number_to_words(digits.group()))

    if lower.startswith(SILENT_H_PREFIXES):
        return True
    if lower.startswith(CONSONANT_SOUND_PREFIXES):
        return False
    # Acronyms are read letter by letter
    if w.isupper():
        return w[0] in VOWEL_SOUND_LETTERS
    return lower[0] in VOWELS


def _contract(aux: str) -> str | None:
    contraction = CONTRACTIONS.get(aux.lower())
    if contraction is None:
        return None
    return match_case(aux, contraction)


def _decapitalize_subject(word: str) -> str:
    """Lowercase a sentence-initial pronoun or determiner; "I" and names stay."""
    lower = word.lower()
    if lower == "i" or not is_titlecase(word):
        return word
    if lower in PRONOUNS or lower in DETERMINERS:
        return decapitalize_first(word)
    return word


def auxiliary_index(words: list[str]) -> int | None:
    for i, word in enumerate(words):
        if word.lower() in AUXILIARIES:
            return i
    return None


def _is_preverbal_adverb(word: str) -> bool:
    lower = word.lower()
    if lower in PREVERBAL_ADVERBS:
        return True
    return lower.endswith("ly") and len(lower) > 4 and lower not in LY_VERBS


def subject_length(words: list[str]) -> int:
    """Tokens in the subject: one, or a determiner plus one noun ("the dog")."""
    if len(words) <= 1:
        return 0
    if words[0].lower() in DETERMINERS:
        return min(2, len(words) - 1)
    return 1


def main_verb_index(words: list[str]) -> int:
    """Position of the main verb in a short clause without an auxiliary.

    The verb follows the subject, after any adverbs like "often" or
    "quickly". The last word is always a candidate. Not a parser:
    "the big dog runs" picks "dog".
    """
    i = subject_length(words)
    while i < len(words) - 1 and _is_preverbal_adverb(words[i]):
        i += 1
    return i


def infer_person_number(subject: list[str]) -> tuple[Person, Number]:
    """Person and number of a clause subject.

    Precedence: pronoun table, then a single capitalized name (third
    singular), then a determiner-led noun phrase judged by its head, and
    third plural by default.
    """
    if not subject:
        return Person.THIRD, Number.PLURAL
    first = subject[0].lower()
    known = SUBJECT_PERSON_NUMBER.get(first)
    if known is not None:
        return Person(known[0]), Number(known[1])
    if len(subject) == 1 and looks_like_proper_name(subject[0]):
        return Person.THIRD, Number.SINGULAR
    if len(subject) > 1 and first in DETERMINERS:
        if _looks_plural_noun(subject[-1].lower()):
            return Person.THIRD, Number.PLURAL
        return Person.THIRD, Number.SINGULAR
    return Person.THIRD, Number.PLURAL


def be_form(person: Person, number: Number, tense: Tense) -> str:
    if tense is Tense.PRESENT:
        if number is Number.SINGULAR and person is Person.FIRST:
            return "am"
        if number is Number.SINGULAR and person is Person.THIRD:
            return "is"
        return "are"
    if tense is Tense.PAST:
        if number is Number.SINGULAR and person in (Person.FIRST, Person.THIRD):
            return "was"
        return "were"
    return "will be"


def have_form(person: Person, number: Number, tense: Tense) -> str:
    if tense is Tense.PRESENT:
        if person is Person.THIRD and number is Number.SINGULAR:
            return "has"
        return "have"
    if tense is Tense.PAST:
        return "had"
    return "will have"


def past_participle(lower: str) -> str:
    return IRREGULAR_PAST_PARTICIPLE.get(lower) or _regular_past(lower)


# ── Rule set ──────────────────────────────────────────────────────────────────

class EnglishRules(MorphologyRules):
    language_code = "en"

    # Verbs

    def to_ing(self, verb: str, overrides: Overrides) -> str:
        if not verb.strip():
            return verb
        hit = lookup_first(verb, overrides.ing, IRREGULAR_PRESENT_PARTICIPLE)
        if hit is not None:
            return hit
        return match_case(verb, _regular_ing(verb.lower()))

    def to_past(self, verb: str, overrides: Overrides) -> str:
        if not verb.strip():
            return verb
        hit = lookup_first(verb, overrides.past, IRREGULAR_PAST)
        if hit is not None:
            return hit
        return match_case(verb, _regular_past(verb.lower()))

    def to_3rd_person_s(self, verb: str, overrides: Overrides) -> str:
        if not verb.strip():
            return verb
        hit = lookup_first(verb, overrides.third_s, IRREGULAR_3RD_PERSON)
        if hit is not None:
            return hit
        return match_case(verb, _regular_3rd(verb.lower()))

    def base_verb(self, verb: str, overrides: Overrides) -> str:
        if not verb.strip():
            return verb
        hit = lookup_first(verb, overrides.base, IRREGULAR_LEMMA)
        if hit is not None:
            return hit
        lower = verb.lower()

        # Longer suffixes first: -ing, -ied, -ed, -ies, -es, -s
        if lower.endswith("ing") and _has_vowel(lower[:-3]):
            stem = lower[:-3]
            if lower.endswith("ying") and len(stem) == 2:
                return match_case(verb, stem[0] + "ie")
            if _has_doubled_final_consonant(stem):
                return match_case(verb, stem[:-1])
            return match_case(verb, _restore_silent_e(stem))
        if lower.endswith("ied") and len(lower) > 4:
            return match_case(verb, lower[:-3] + "y")
        if lower.endswith("ed") and _has_vowel(lower[:-2]):
            if lower.endswith("eed"):
                if len(lower) <= 5:
                    return verb
                return match_case(verb, lower[:-1])
            stem = lower[:-2]
            if _has_doubled_final_consonant(stem):
                return match_case(verb, stem[:-1])
            return match_case(verb, _restore_silent_e(stem))
        if lower.endswith("ies") and len(lower) > 4:
            return match_case(verb, lower[:-3] + "y")
        if lower.endswith("es") and len(lower) > 3:
            stem = lower[:-2]
            if _takes_es(stem):
                return match_case(verb, stem)
            return match_case(verb, lower[:-1])
        if lower.endswith("s") and len(lower) > 2:
            if lower.endswith(("ss", "us", "is")) or lower in S_SINGULARS:
                return verb
            return match_case(verb, lower[:-1])
        return verb

    # Nouns

    def pluralize(self, noun: str, conservative: bool, overrides: Overrides) -> str:
        lower = noun.lower()
        if not lower.strip() or lower in overrides.do_not_change:
            return noun
        hit = lookup(overrides.plural, noun)
        if hit is not None:
            return hit

        if conservative and _is_proper_noun(noun):
            return noun
        if lower in INVARIANT_PLURALS or lower in UNCOUNTABLES:
            return noun
        hit = lookup(IRREGULAR_PLURALS, noun)
        if hit is not None:
            return hit
        return match_case(noun, _regular_plural(lower))

    def singularize(self, noun: str, conservative: bool, overrides: Overrides) -> str:
        lower = noun.lower()
        if not lower.strip() or lower in overrides.do_not_change:
            return noun
        hit = lookup(overrides.singular, noun)
        if hit is not None:
            return hit

        if conservative and _is_proper_noun(noun):
            return noun
        if lower in INVARIANT_PLURALS or lower in UNCOUNTABLES:
            return noun
        hit = lookup(IRREGULAR_SINGULARS, noun)
        if hit is not None:
            return hit
        singular = _regular_singular(lower)
        if singular == lower:
            return noun
        return match_case(noun, singular)

    def possessive(self, noun: str, overrides: Overrides) -> str:
        """children -> children's, James -> James', cat -> cat's."""
        if not noun.strip():
            return noun
        lower = noun.lower()
        if lower in IRREGULAR_SINGULARS and not lower.endswith("s"):
            suffix = "'s"
        elif lower.endswith("s"):
            suffix = "'"
        else:
            suffix = "'s"
        if noun.isupper():
            suffix = suffix.upper()
        return noun + suffix

    # Adjectives / adverbs

    def _graded(
        self,
        adjective: str,
        override_table: dict[str, str],
        irregular_table: dict[str, str],
        suffix: str,
        periphrastic: str,
    ) -> str:
        if not adjective.strip():
            return adjective
        hit = lookup_first(adjective, override_table, irregular_table)
        if hit is not None:
            return hit
        lower = adjective.lower()

        if _ends_consonant_y(lower):
            return match_case(adjective, lower[:-1] + "i" + suffix)
        syllables = _syllable_count(lower)
        if syllables == 1 and len(lower) <= 5:
            if lower.endswith("e"):
                return match_case(adjective, lower + suffix[1:])
            if _should_double_final_consonant(lower):
                return match_case(adjective, lower + lower[-1] + suffix)
            return match_case(adjective, lower + suffix)
        if syllables == 2 and lower.endswith("y"):
            return match_case(adjective, lower[:-1] + "i" + suffix)
        return match_case(adjective, f"{periphrastic} {lower}")

    def to_comparative(self, adjective: str, overrides: Overrides) -> str:
        return self._graded(adjective, overrides.comparative, IRREGULAR_COMPARATIVES, "er", "more")

    def to_superlative(self, adjective: str, overrides: Overrides) -> str:
        return self._graded(adjective, overrides.superlative, IRREGULAR_SUPERLATIVES, "est", "most")

    def to_adverb(self, adjective: str, overrides: Overrides) -> str:
        if not adjective.strip():
            return adjective
        hit = lookup_first(adjective, overrides.adverb, IRREGULAR_ADJECTIVE_TO_ADVERB)
        if hit is not None:
            return hit
        lower = adjective.lower()

        if _ends_consonant_y(lower):
            return match_case(adjective, lower[:-1] + "ily")
        if lower.endswith("ic"):
            return match_case(adjective, lower + "ally")
        if lower.endswith("le") and len(lower) > 2 and lower[-3] not in VOWELS:
            return match_case(adjective, lower[:-1] + "y")
        return match_case(adjective, lower + "ly")

    def adverb_to_adjective(self, adverb: str, overrides: Overrides) -> str:
        if not adverb.strip():
            return adverb
        hit = lookup_first(adverb, overrides.adjective, IRREGULAR_ADVERB_TO_ADJECTIVE)
        if hit is not None:
            return hit
        lower = adverb.lower()

        if lower.endswith("ily") and len(lower) > 4:
            return match_case(adverb, lower[:-3] + "y")
        if lower.endswith("ically"):
            return match_case(adverb, lower[:-4])
        if lower.endswith("bly") or (
            lower.endswith("ply") and len(lower) > 4 and lower[-4] not in VOWELS
        ):
            return match_case(adverb, lower[:-2] + "le")
        if lower.endswith("ly") and len(lower) > 3:
            return match_case(adverb, lower[:-2])
        return adverb

    # Clauses

    def _do_support(self, main: str, subject: list[str]) -> str:
        lower = main.lower()
        regular_past = (
            lower.endswith("ed") and self.base_verb(lower, Overrides()) != lower
        )
        if lower in IRREGULAR_PAST_FORMS or regular_past:
            return "did"
        person, number = infer_person_number(subject)
        if person is Person.THIRD and number is Number.SINGULAR:
            return "does"
        return "do"

    def negate(
        self, words: list[str], contracted: bool = False, overrides: Overrides | None = None
    ) -> list[str]:
        """Negate a short clause.

        With an auxiliary, "not" goes right after it (or the auxiliary is
        contracted). Without one, do-support: "He goes" -> "He does not go".
        """
        if not words:
            return ["do", "n't" if contracted else "not"]
        overrides = overrides or Overrides()

        aux = auxiliary_index(words)
        if aux is not None:
            out = list(words)
            contraction = _contract(out[aux]) if contracted else None
            if contraction is not None:
                out[aux] = contraction
            else:
                out.insert(aux + 1, "not")
            return out

        s, v = subject_length(words), main_verb_index(words)
        subject, adverbs = list(words[:s]), list(words[s:v])
        main, rest = words[v], list(words[v + 1:])
        do_aux = self._do_support(main, subject)
        base = self.base_verb(main, overrides)
        negation = [CONTRACTIONS[do_aux]] if contracted else [do_aux, "not"]
        if not subject and main[:1].isupper() and not main.isupper():
            negation[0] = capitalize_first(negation[0])
            base = decapitalize_first(base)
        return subject + negation + adverbs + [base] + rest

    def make_yes_no_question(
        self, words: list[str], overrides: Overrides | None = None
    ) -> list[str]:
        if not words:
            return []
        overrides = overrides or Overrides()

        aux = auxiliary_index(words)
        if aux is not None:
            out = list(words)
            aux_word = out.pop(aux)
            if out:
                out[0] = _decapitalize_subject(out[0])
            return [capitalize_first(aux_word)] + out

        s, v = subject_length(words), main_verb_index(words)
        subject, adverbs = list(words[:s]), list(words[s:v])
        main, rest = words[v], list(words[v + 1:])
        do_aux = self._do_support(main, subject)
        base = self.base_verb(main, overrides)
        if subject:
            subject[0] = _decapitalize_subject(subject[0])
        elif not main.isupper():
            base = decapitalize_first(base)
        return [capitalize_first(do_aux)] + subject + adverbs + [base] + rest

    def make_wh_question(
        self, words: list[str], wh: str, overrides: Overrides | None = None
    ) -> list[str]:
        if not words:
            return [capitalize_first(wh)]
        inverted = self.make_yes_no_question(words, overrides)
        if inverted and not inverted[0].isupper():
            inverted[0] = decapitalize_first(inverted[0])
        return [capitalize_first(wh)] + inverted

    def insert_not(self, words: list[str]) -> list[str]:
        if not words:
            return ["not"]
        out = list(words)
        aux = auxiliary_index(out)
        if aux is not None:
            out.insert(aux + 1, "not")
        else:
            out.append("not")
        return out

    # Articles

    def indefinite_article(self, word: str, overrides: Overrides) -> str:
        override = overrides.article.get(word.lower())
        if override is not None:
            return override
        parts = word.split()
        if not parts:
            return "a"
        return "an" if _starts_with_vowel_sound(parts[0]) else "a"

    def determiner(
        self, noun_phrase: str, preference: DeterminerPreference, overrides: Overrides
    ) -> str:
        override = overrides.article.get(noun_phrase.lower())
        if override is not None:
            return override
        head = head_word(noun_phrase)
        if looks_like_proper_name(head):
            return ""

        if preference is DeterminerPreference.DEFINITE:
            return "the"
        if preference is DeterminerPreference.INDEFINITE:
            lower_head = head.lower()
            if lower_head in UNCOUNTABLES or _looks_plural_noun(lower_head):
                return "some"
            return self.indefinite_article(noun_phrase, overrides)
        return ""

    # Pronouns

    def pronoun_variants(self, token: str) -> list[str]:
        """Subject, object, possessive adjective, possessive pronoun, reflexive."""
        forms = PRONOUNS.get(token.lower())
        if forms is None:
            return [token]
        if len(token) > 1 and token.isupper():
            return [form.upper() for form in forms]
        if len(token) > 1 and is_titlecase(token):
            return [capitalize_first(forms[0])] + [form.lower() for form in forms[1:]]
        return list(forms)

    # Conjugation

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
        base = lemma.strip().lower()

        if voice is Voice.PASSIVE:
            participle = past_participle(base)
            match aspect:
                case Aspect.SIMPLE:
                    auxiliary = be_form(person, number, tense)
                case Aspect.PROGRESSIVE:
                    auxiliary = be_form(person, number, tense) + " being"
                case Aspect.PERFECT:
                    auxiliary = have_form(person, number, tense) + " been"
                case Aspect.PERFECT_PROGRESSIVE:
                    auxiliary = have_form(person, number, tense) + " been being"
            return f"{auxiliary} {participle}"

        match aspect:
            case Aspect.SIMPLE:
                # "be" agrees in every person: am/is/are, was/were
                if base == "be":
                    return be_form(person, number, tense)
                if tense is Tense.PRESENT:
                    if person is Person.THIRD and number is Number.SINGULAR:
                        return self.to_3rd_person_s(base, overrides)
                    return base
                if tense is Tense.PAST:
                    return self.to_past(base, overrides)
                return f"will {base}"
            case Aspect.PROGRESSIVE:
                return f"{be_form(person, number, tense)} {self.to_ing(base, overrides)}"
            case Aspect.PERFECT:
                return f"{have_form(person, number, tense)} {past_participle(base)}"
            case Aspect.PERFECT_PROGRESSIVE:
                return f"{have_form(person, number, tense)} been {self.to_ing(base, overrides)}"
