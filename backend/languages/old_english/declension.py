"""Old English noun declensions.

A Declension is one noun's full paradigm as supplied by the seed content;
forms are never derived from endings. The DeclensionRegistry indexes the
seeded nouns by base form.
"""
from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from core.errors import AppError, Ok, Result, invalid_choice, not_found, raise_error, raise_result
from core.logging import content_logger
from languages.types import Gender, Strength
from .maps import CASES, GENDERS, STRENGTHS
from .words import NumberForm, Word

log = content_logger()

NumberRecord = Mapping[str, str | None]


@dataclass(frozen=True, slots=True)
class Declension:
    """Paradigm of a noun: four mandatory cases plus an optional instrumental."""
    base: Word
    gender: Gender
    strength: Strength
    nominative: NumberForm
    accusative: NumberForm
    genitive: NumberForm
    dative: NumberForm
    instrumental: NumberForm | None = None

    @classmethod
    def create(
        cls,
        *,
        base: str,
        gender: Gender,
        strength: Strength,
        nominative: NumberRecord,
        accusative: NumberRecord,
        genitive: NumberRecord,
        dative: NumberRecord,
        instrumental: NumberRecord | None = None,
    ) -> Declension:
        """Build a declension from raw strings, validating every form."""
        if gender not in GENDERS:
            raise_error(invalid_choice("gender", gender, GENDERS, origin="old_english.declension").error)
        if strength not in STRENGTHS:
            raise_error(invalid_choice("strength", strength, STRENGTHS, origin="old_english.declension").error)
        return cls(
            base=Word(base),
            gender=gender,
            strength=strength,
            nominative=NumberForm.build(nominative),
            accusative=NumberForm.build(accusative),
            genitive=NumberForm.build(genitive),
            dative=NumberForm.build(dative),
            instrumental=NumberForm.build(instrumental) if instrumental is not None else None,
        )

    def declination_table(self) -> Mapping[str, NumberForm | None]:
        """Read-only case -> NumberForm view. Instrumental is always a key, None when absent."""
        return MappingProxyType({case: getattr(self, case) for case in CASES})

    def forms(self) -> Iterator[tuple[str, str, Word]]:
        """Every populated (case, number, word) cell in table order."""
        for case, form in self.declination_table().items():
            if form is None:
                continue
            for number, word in form.items():
                yield case, number, word

    def to_dict(self) -> dict:
        return {
            "base": self.base.value,
            "gender": self.gender,
            "strength": self.strength,
            "cases": {
                case: form.to_dict() if form else None
                for case, form in self.declination_table().items()
            },
        }


class DeclensionRegistry:
    """Lookup table from base form to Declension. Read-only once built."""

    __slots__ = ("_declensions",)

    def __init__(self, declensions: Iterable[Declension]):
        table: dict[str, Declension] = {}
        for declension in declensions:
            key = declension.base.value
            if key in table:
                # Last write wins
                log.warning("duplicate_declension_base", base=key)
            table[key] = declension
        self._declensions = MappingProxyType(table)
        log.debug("declension_registry_built", count=len(table))

    def lookup(self, base: str) -> Result[Declension, AppError]:
        declension = self._declensions.get(base)
        if declension is None:
            return not_found("Declension", base, origin="old_english.registry")
        return Ok(declension)

    def get(self, base: str) -> Declension:
        """Declension for a base form. Raises NotFoundError when unknown."""
        result = self.lookup(base)
        raise_result(result)
        return result.unwrap()

    def bases(self) -> list[str]:
        return list(self._declensions)

    def __contains__(self, base: object) -> bool:
        return base in self._declensions

    def __iter__(self) -> Iterator[Declension]:
        return iter(self._declensions.values())

    def __len__(self) -> int:
        return len(self._declensions)
