"""Language tag normalization shared by the engine and the overrides store."""

from __future__ import annotations


def primary_language(tag: str) -> str:
    """Reduce a BCP 47-ish tag to its lowercase primary subtag.

    "en-US" -> "en", "pt_BR" -> "pt", "ES" -> "es".
    """
    cleaned = tag.strip().replace("_", "-")
    primary, _, _ = cleaned.partition("-")
    return primary.lower()
