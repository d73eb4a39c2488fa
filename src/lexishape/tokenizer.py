"""Word tokenization for whole-sentence transforms.

A token is a whitespace-delimited chunk with its leading punctuation
(opening quotes, brackets) removed. Trailing punctuation stays attached to
the token and is split off separately, so a transform can rewrite the core
of "run.”" without touching ".”".

Boundaries are whitespace, which is right for every supported language
(en, es, fr, de). Scripts written without spaces would need a
language-aware segmenter and are not handled. Elided forms such as
"l'homme" stay one word.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

_CHUNK = re.compile(r"\S+")


@dataclass(frozen=True)
class Token:
    text: str
    start: int
    end: int


def _is_word_char(ch: str) -> bool:
    return ch.isalnum() or ch == "'"


def tokenize_words(text: str) -> list[Token]:
    """Word tokens with their character spans in text.

    Chunks made only of punctuation ("—", "...") are not words.
    """
    tokens: list[Token] = []
    for match in _CHUNK.finditer(text):
        chunk = match.group()
        offset = 0
        while offset < len(chunk) and not _is_word_char(chunk[offset]):
            offset += 1
        if offset == len(chunk):
            continue
        start = match.start() + offset
        tokens.append(Token(text[start:match.end()], start, match.end()))
    return tokens


def words_from(text: str) -> list[str]:
    """Word list for clause transforms, trailing punctuation dropped."""
    words: list[str] = []
    for token in tokenize_words(text):
        core, _ = split_trailing_punctuation(token.text)
        words.append(core or token.text)
    return words


def split_trailing_punctuation(token: str) -> tuple[str, str]:
    """Split "run.”" into ("run", ".”"). Apostrophes belong to the core."""
    end = len(token)
    while end > 0 and not _is_word_char(token[end - 1]):
        end -= 1
    return token[:end], token[end:]
