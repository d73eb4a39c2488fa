"""The per-language override record.

One Overrides value exists per primary language subtag. Every map key (and
every do-not-change entry) is lowercase; lookups lowercase the query word.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any

# Map fields, in serialization order
MAP_FIELDS: tuple[str, ...] = (
    "plural",        # noun -> plural
    "singular",      # plural -> singular
    "past",          # verb -> past
    "third_s",       # verb -> 3rd person singular
    "ing",           # verb -> -ing
    "base",          # inflected -> lemma
    "comparative",   # adjective -> comparative
    "superlative",   # adjective -> superlative
    "adverb",        # adjective -> adverb
    "adjective",     # adverb -> adjective
    "article",       # head word or phrase -> "a"/"an"/"the"/"some"/""
)


@dataclass
class Overrides:
    do_not_change: set[str] = field(default_factory=set)

    plural: dict[str, str] = field(default_factory=dict)
    singular: dict[str, str] = field(default_factory=dict)

    past: dict[str, str] = field(default_factory=dict)
    third_s: dict[str, str] = field(default_factory=dict)
    ing: dict[str, str] = field(default_factory=dict)
    base: dict[str, str] = field(default_factory=dict)

    comparative: dict[str, str] = field(default_factory=dict)
    superlative: dict[str, str] = field(default_factory=dict)
    adverb: dict[str, str] = field(default_factory=dict)
    adjective: dict[str, str] = field(default_factory=dict)

    article: dict[str, str] = field(default_factory=dict)

    def is_empty(self) -> bool:
        return not any(getattr(self, f.name) for f in fields(self))

    def normalize(self) -> None:
        """Lowercase every key and do-not-change entry in place."""
        self.do_not_change = {word.lower() for word in self.do_not_change}
        for name in MAP_FIELDS:
            current: dict[str, str] = getattr(self, name)
            setattr(self, name, {key.lower(): value for key, value in current.items()})

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"do_not_change": sorted(self.do_not_change)}
        for name in MAP_FIELDS:
            data[name] = dict(getattr(self, name))
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Overrides":
        """Build a record from its serialized form.

        Unknown keys are ignored and missing keys default to empty. Raises
        TypeError or ValueError when a field has the wrong shape.
        """
        if not isinstance(data, dict):
            raise TypeError(f"Overrides payload must be an object, got {type(data).__name__}")

        words = data.get("do_not_change", [])
        if not isinstance(words, list) or not all(isinstance(w, str) for w in words):
            raise ValueError("do_not_change must be a list of strings")

        result = cls(do_not_change=set(words))
        for name in MAP_FIELDS:
            mapping = data.get(name, {})
            if not isinstance(mapping, dict):
                raise ValueError(f"{name} must be an object")
            for key, value in mapping.items():
                if not isinstance(value, str):
                    raise ValueError(f"{name}[{key!r}] must be a string")
            setattr(result, name, dict(mapping))
        result.normalize()
        return result

