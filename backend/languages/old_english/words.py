"""Surface word forms.

A Word is a single validated token. A NumberForm groups the singular, plural
and (rarely) dual Words of one case of a noun.
"""
from __future__ import annotations

import re
from collections.abc import Iterator, Mapping
from dataclasses import dataclass

from core.errors import empty_or_whitespace, raise_error, required_field
from languages.types import GrammaticalNumber
from .maps import NUMBERS

_WHITESPACE = re.compile(r"\s")


@dataclass(frozen=True, slots=True)
class Word:
    """A single whitespace-free surface form. Equality is by value."""
    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value or _WHITESPACE.search(self.value):
            raise_error(empty_or_whitespace(str(self.value), origin="old_english.words").error)

    def equals(self, other: str) -> bool:
        """Exact comparison against a raw string."""
        return self.value == other

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class NumberForm:
    """Forms of one case by grammatical number. Dual is present only when supplied."""
    singular: Word
    plural: Word
    dual: Word | None = None

    @classmethod
    def build(cls, record: Mapping[str, str | None]) -> NumberForm:
        """Validate a raw {singular, plural, dual?} record into Words.

        Raises ValidationError when singular or plural is missing or any
        supplied form is not a valid Word.
        """
        for required in ("singular", "plural"):
            if record.get(required) is None:
                raise_error(required_field(required, origin="old_english.words").error)
        dual = record.get("dual")
        return cls(
            singular=Word(record["singular"]),
            plural=Word(record["plural"]),
            dual=Word(dual) if dual is not None else None,
        )

    def get(self, number: GrammaticalNumber | str) -> Word | None:
        """Word for a number, or None when that number has no form."""
        match number:
            case "singular":
                return self.singular
            case "plural":
                return self.plural
            case "dual":
                return self.dual
        return None

    def numbers(self) -> list[str]:
        """Numbers with a form, in singular/dual/plural order."""
        return [n for n in NUMBERS if self.get(n) is not None]

    def items(self) -> Iterator[tuple[str, Word]]:
        for number in self.numbers():
            yield number, self.get(number)

    def to_dict(self) -> dict[str, str | None]:
        return {
            "singular": self.singular.value,
            "dual": self.dual.value if self.dual else None,
            "plural": self.plural.value,
        }
