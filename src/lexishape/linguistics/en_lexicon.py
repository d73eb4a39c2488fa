"""English lexicon tables: irregular forms and exception sets.

Every table is keyed by lowercase form and is built once at import time.
The rule cascades in en.py consult these before any suffix rule fires.
"""

from __future__ import annotations

# ── Irregular verbs ───────────────────────────────────────────────────────────

IRREGULAR_PAST: dict[str, str] = {
    "arise": "arose", "awake": "awoke", "be": "was", "bear": "bore",
    "beat": "beat", "become": "became", "begin": "began", "bend": "bent",
    "bet": "bet", "bind": "bound", "bite": "bit", "bleed": "bled",
    "blow": "blew", "break": "broke", "bring": "brought", "build": "built",
    "burn": "burned", "burst": "burst", "buy": "bought", "catch": "caught",
    "choose": "chose", "come": "came", "cost": "cost", "cut": "cut",
    "deal": "dealt", "dig": "dug", "do": "did", "draw": "drew",
    "dream": "dreamed", "drink": "drank", "drive": "drove", "eat": "ate",
    "fall": "fell", "feed": "fed", "feel": "felt", "fight": "fought",
    "find": "found", "fly": "flew", "forget": "forgot", "forgive": "forgave",
    "freeze": "froze", "get": "got", "give": "gave", "go": "went",
    "grow": "grew", "hang": "hung", "have": "had", "hear": "heard",
    "hide": "hid", "hit": "hit", "hold": "held", "hurt": "hurt",
    "keep": "kept", "know": "knew", "lay": "laid", "lead": "led",
    "leave": "left", "lend": "lent", "let": "let", "lie": "lay",
    "light": "lit", "lose": "lost", "make": "made", "mean": "meant",
    "meet": "met", "pay": "paid", "put": "put", "read": "read",
    "ride": "rode", "ring": "rang", "rise": "rose", "run": "ran",
    "say": "said", "see": "saw", "sell": "sold", "send": "sent",
    "set": "set", "shake": "shook", "shine": "shone", "shoot": "shot",
    "show": "showed", "shut": "shut", "sing": "sang", "sit": "sat",
    "sleep": "slept", "speak": "spoke", "spend": "spent", "stand": "stood",
    "steal": "stole", "swim": "swam", "take": "took", "teach": "taught",
    "tear": "tore", "tell": "told", "think": "thought", "throw": "threw",
    "understand": "understood", "wake": "woke", "wear": "wore", "win": "won",
    "write": "wrote",
}

IRREGULAR_PAST_PARTICIPLE: dict[str, str] = {
    "arise": "arisen", "awake": "awoken", "be": "been", "bear": "borne",
    "beat": "beaten", "become": "become", "begin": "begun", "bend": "bent",
    "bet": "bet", "bind": "bound", "bite": "bitten", "bleed": "bled",
    "blow": "blown", "break": "broken", "bring": "brought", "build": "built",
    "burn": "burned", "burst": "burst", "buy": "bought", "catch": "caught",
    "choose": "chosen", "come": "come", "cost": "cost", "cut": "cut",
    "deal": "dealt", "dig": "dug", "do": "done", "draw": "drawn",
    "dream": "dreamed", "drink": "drunk", "drive": "driven", "eat": "eaten",
    "fall": "fallen", "feed": "fed", "feel": "felt", "fight": "fought",
    "find": "found", "fly": "flown", "forget": "forgotten",
    "forgive": "forgiven", "freeze": "frozen", "get": "gotten",
    "give": "given", "go": "gone", "grow": "grown", "hang": "hung",
    "have": "had", "hear": "heard", "hide": "hidden", "hit": "hit",
    "hold": "held", "hurt": "hurt", "keep": "kept", "know": "known",
    "lay": "laid", "lead": "led", "leave": "left", "lend": "lent",
    "let": "let", "lie": "lain", "light": "lit", "lose": "lost",
    "make": "made", "mean": "meant", "meet": "met", "pay": "paid",
    "put": "put", "read": "read", "ride": "ridden", "ring": "rung",
    "rise": "risen", "run": "run", "say": "said", "see": "seen",
    "sell": "sold", "send": "sent", "set": "set", "shake": "shaken",
    "shine": "shone", "shoot": "shot", "show": "shown", "shut": "shut",
    "sing": "sung", "sit": "sat", "sleep": "slept", "speak": "spoken",
    "spend": "spent", "stand": "stood", "steal": "stolen", "swim": "swum",
    "take": "taken", "teach": "taught", "tear": "torn", "tell": "told",
    "think": "thought", "throw": "thrown", "understand": "understood",
    "wake": "woken", "wear": "worn", "win": "won", "write": "written",
}

# -ing forms that the regular rule gets wrong
IRREGULAR_PRESENT_PARTICIPLE: dict[str, str] = {
    "be": "being",
    "see": "seeing",
    "flee": "fleeing",
    "die": "dying",
}

IRREGULAR_3RD_PERSON: dict[str, str] = {
    "be": "is", "am": "is", "are": "is",
    "have": "has", "do": "does", "go": "goes", "say": "says",
    "fly": "flies", "try": "tries", "deny": "denies", "study": "studies",
    "die": "dies", "lie": "lies", "tie": "ties",
}


def _build_lemma_table() -> dict[str, str]:
    table: dict[str, str] = {}
    for base, past in IRREGULAR_PAST.items():
        table[past] = base
    for base, participle in IRREGULAR_PAST_PARTICIPLE.items():
        table[participle] = base
    for base, third in IRREGULAR_3RD_PERSON.items():
        table[third] = base
    table.update({
        "was": "be", "were": "be", "is": "be", "am": "be", "are": "be",
        "been": "be", "being": "be",
        "has": "have", "had": "have",
        "does": "do", "did": "do", "done": "do",
    })
    return table


# Inflected form -> lemma; "lay" resolves to "lie" (past of lie) by table order
IRREGULAR_LEMMA: dict[str, str] = _build_lemma_table()

IRREGULAR_PAST_FORMS: frozenset[str] = frozenset(IRREGULAR_PAST.values())

# ── Nouns ─────────────────────────────────────────────────────────────────────

IRREGULAR_PLURALS: dict[str, str] = {
    "child": "children", "person": "people", "man": "men", "woman": "women",
    "mouse": "mice", "goose": "geese", "tooth": "teeth", "foot": "feet",
    "ox": "oxen",
    "cactus": "cacti", "focus": "foci", "fungus": "fungi",
    "nucleus": "nuclei", "radius": "radii", "stimulus": "stimuli",
    "syllabus": "syllabi", "alumnus": "alumni",
    "analysis": "analyses", "diagnosis": "diagnoses", "crisis": "crises",
    "axis": "axes", "basis": "bases", "thesis": "theses",
    "parenthesis": "parentheses", "hypothesis": "hypotheses",
    "phenomenon": "phenomena", "criterion": "criteria", "datum": "data",
    "medium": "media",
    "index": "indices", "appendix": "appendices", "matrix": "matrices",
    "vertex": "vertices",
}

IRREGULAR_SINGULARS: dict[str, str] = {
    plural: singular for singular, plural in IRREGULAR_PLURALS.items()
}

INVARIANT_PLURALS: frozenset[str] = frozenset({
    "sheep", "fish", "deer", "series", "species", "aircraft", "salmon",
    "trout", "bison", "moose", "swine",
})

UNCOUNTABLES: frozenset[str] = frozenset({
    "information", "equipment", "furniture", "luggage", "baggage", "advice",
    "rice", "money", "news", "bread", "butter", "cheese", "coffee", "tea",
    "water", "milk", "sand", "traffic", "homework", "work",
})

# -f/-fe nouns that just take +s
F_FE_TAKES_S: frozenset[str] = frozenset({
    "roof", "belief", "chef", "chief", "proof", "cliff", "reef", "gulf",
    "handkerchief", "safe",
})

# Stems (plural minus "ves") whose singular ends in -fe rather than -f
TAKES_FE_WHEN_SINGULAR: frozenset[str] = frozenset({"kni", "wi", "li"})

CLASSICAL_US_TO_I: frozenset[str] = frozenset({
    "cactus", "focus", "fungus", "nucleus", "radius", "stimulus", "syllabus",
    "alumnus",
})
CLASSICAL_I_TO_US: frozenset[str] = frozenset({
    "cacti", "foci", "fungi", "nuclei", "radii", "stimuli", "syllabi",
    "alumni",
})
CLASSICAL_IS_TO_ES: frozenset[str] = frozenset({
    "analysis", "diagnosis", "crisis", "axis", "basis", "thesis",
    "parenthesis", "hypothesis",
})
CLASSICAL_ES_TO_IS: frozenset[str] = frozenset({
    "analyses", "diagnoses", "crises", "axes", "bases", "theses",
    "parentheses", "hypotheses",
})
CLASSICAL_ON_UM_TO_A: frozenset[str] = frozenset({
    "phenomenon", "criterion", "datum", "medium", "bacterium",
})
CLASSICAL_A_TO_ON_UM: frozenset[str] = frozenset({
    "phenomena", "criteria", "data", "media", "bacteria",
})
CLASSICAL_A_TO_ON: frozenset[str] = frozenset({"phenomena", "criteria"})
CLASSICAL_IX_EX_TO_ICES: frozenset[str] = frozenset({
    "index", "appendix", "matrix", "vertex",
})
CLASSICAL_ICES_TO_IX_EX: frozenset[str] = frozenset({
    "indices", "appendices", "matrices", "vertices",
})
# Every current member recovers -ix; "vertices" only reaches this set if it
# leaves the irregular table
CLASSICAL_ICES_TO_IX: frozenset[str] = frozenset({
    "indices", "appendices", "matrices", "vertices",
})

# -o nouns that just take +s
O_TAKES_S: frozenset[str] = frozenset({
    "piano", "photo", "halo", "solo", "soprano", "radio", "studio", "video",
    "zoo", "kilo", "memo", "avocado", "taco",
})

# Singular nouns ending in -ve / -ie whose plural is a plain +s
VE_SINGULARS: frozenset[str] = frozenset({
    "glove", "dove", "olive", "curve", "valve", "nerve", "groove", "move",
    "drive", "wave", "stove", "cave", "grave", "sleeve", "archive",
    "detective", "motive", "objective", "adjective", "knave",
})
IE_SINGULARS: frozenset[str] = frozenset({
    "movie", "cookie", "pie", "tie", "lie", "zombie", "calorie", "rookie",
    "prairie", "brownie", "selfie", "genie", "auntie", "goalie", "hoodie",
})

# Singular nouns that already end in -s; never stripped, and their -es
# plural strips back to them
S_SINGULARS: frozenset[str] = frozenset({
    "bus", "gas", "plus", "atlas", "iris", "lens", "canvas", "bonus",
    "campus", "virus", "status", "walrus", "census", "circus", "octopus",
    "genus", "chorus", "alias", "bias", "yes", "minus", "apparatus",
    "corpus", "lotus", "thus", "this", "its", "his",
})

# ── Clause words ──────────────────────────────────────────────────────────────

AUXILIARIES: frozenset[str] = frozenset({
    "am", "is", "are", "was", "were", "be", "been", "being",
    "do", "does", "did",
    "have", "has", "had",
    "can", "will", "shall", "may", "might", "must", "should", "would",
    "could",
})

# Auxiliaries without an entry ("am", "be", "may", ...) are negated with "not"
CONTRACTIONS: dict[str, str] = {
    "is": "isn't",
    "are": "aren't",
    "was": "wasn't",
    "were": "weren't",
    "do": "don't",
    "does": "doesn't",
    "did": "didn't",
    "have": "haven't",
    "has": "hasn't",
    "had": "hadn't",
    "can": "can't",
    "will": "won't",
    "shall": "shan't",
    "would": "wouldn't",
    "should": "shouldn't",
    "could": "couldn't",
    "might": "mightn't",
    "must": "mustn't",
}

DETERMINERS: frozenset[str] = frozenset({
    "the", "a", "an", "my", "your", "his", "her", "its", "our", "their",
    "this", "that", "these", "those", "some", "every", "each", "no", "any",
})

# Adverbs that sit between a subject and its verb: "She often runs"
PREVERBAL_ADVERBS: frozenset[str] = frozenset({
    "always", "never", "often", "sometimes", "usually", "seldom", "also",
    "just", "still", "already", "even", "only", "ever", "almost",
})

# -ly words that are verbs
LY_VERBS: frozenset[str] = frozenset({
    "apply", "reply", "supply", "rely", "fly", "ally", "comply", "imply",
    "multiply", "tally", "rally", "bully", "sully", "dally",
})

# Subject word -> (person, number); "you" defaults to singular
SUBJECT_PERSON_NUMBER: dict[str, tuple[str, str]] = {
    "i": ("first", "singular"),
    "you": ("second", "singular"),
    "he": ("third", "singular"),
    "she": ("third", "singular"),
    "it": ("third", "singular"),
    "this": ("third", "singular"),
    "that": ("third", "singular"),
    "we": ("first", "plural"),
    "they": ("third", "plural"),
    "these": ("third", "plural"),
    "those": ("third", "plural"),
}

# Pronoun rows: subject, object, possessive adjective, possessive pronoun,
# reflexive. Nominative and accusative spellings share a row.
PRONOUNS: dict[str, tuple[str, str, str, str, str]] = {
    "i": ("I", "me", "my", "mine", "myself"),
    "you": ("you", "you", "your", "yours", "yourself"),
    "he": ("he", "him", "his", "his", "himself"),
    "she": ("she", "her", "her", "hers", "herself"),
    "it": ("it", "it", "its", "its", "itself"),
    "we": ("we", "us", "our", "ours", "ourselves"),
    "they": ("they", "them", "their", "theirs", "themselves"),
}
PRONOUNS.update({
    "me": PRONOUNS["i"],
    "him": PRONOUNS["he"],
    "her": PRONOUNS["she"],
    "us": PRONOUNS["we"],
    "them": PRONOUNS["they"],
})

# ── Adjectives and adverbs ────────────────────────────────────────────────────

IRREGULAR_COMPARATIVES: dict[str, str] = {
    "good": "better",
    "well": "better",
    "bad": "worse",
    "far": "farther",
}

IRREGULAR_SUPERLATIVES: dict[str, str] = {
    "good": "best",
    "well": "best",
    "bad": "worst",
    "far": "farthest",
}

IRREGULAR_ADJECTIVE_TO_ADVERB: dict[str, str] = {
    "good": "well",
    "fast": "fast",
    "hard": "hard",
    "public": "publicly",
    "true": "truly",
    "due": "duly",
    "whole": "wholly",
    "full": "fully",
    "early": "early",
    "daily": "daily",
    "only": "only",
}

IRREGULAR_ADVERB_TO_ADJECTIVE: dict[str, str] = {
    "well": "good",
    "fast": "fast",
    "hard": "hard",
    "publicly": "public",
    "truly": "true",
    "duly": "due",
    "wholly": "whole",
    "fully": "full",
    "gently": "gentle",
    "early": "early",
    "daily": "daily",
    "only": "only",
}

# ── Articles ──────────────────────────────────────────────────────────────────

SILENT_H_PREFIXES: tuple[str, ...] = (
    "honest", "honor", "honour", "hour", "heir", "herb",
)

CONSONANT_SOUND_PREFIXES: tuple[str, ...] = (
    "university", "universe", "unit", "union", "uniform", "unique",
    "unicorn", "unison", "use", "usu", "uti", "uto", "ubiquitous",
    "eu", "ewe", "one", "once", "ouija",
)

# Letters whose spoken name starts with a vowel sound ("an MRI", "an FBI")
VOWEL_SOUND_LETTERS: str = "AEFHILMNORSX"
