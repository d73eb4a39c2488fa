"""Casing helpers shared by every rule set.

Rules compute replacements in lowercase and run them through match_case
before returning, so a sentence never mixes casing styles.
"""

from __future__ import annotations


def match_case(original: str, replacement: str) -> str:
    """Rewrite replacement to follow the casing pattern of original.

    ALL CAPS input gives an all-caps result. A capitalized input only
    capitalizes the first character of the result, so "more happy" does
    not become "More Happy". Anything else returns replacement untouched.
    """
    if not replacement:
        return replacement
    if original.isupper():
        return replacement.upper()
    if original[:1].isupper():
        return replacement[0].upper() + replacement[1:]
    return replacement


def capitalize_first(word: str) -> str:
    if not word:
        return word
    return word[0].upper() + word[1:]


def decapitalize_first(word: str) -> str:
    if not word:
        return word
    return word[0].lower() + word[1:]


def is_titlecase(token: str) -> bool:
    """First character uppercase and no other uppercase characters."""
    if not token or not token[0].isupper():
        return False
    return not any(ch.isupper() for ch in token[1:])


def looks_like_proper_name(token: str) -> bool:
    """Heuristic: a single capitalized token that is not an all-caps acronym."""
    if not token or " " in token.strip():
        return False
    if len(token) > 1 and token.isupper():
        return False
    return is_titlecase(token)
