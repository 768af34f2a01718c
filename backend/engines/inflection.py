"""Inflected tokens.

An InflectedWord points at one (case, number) cell of a Declension and
resolves its surface form once, at construction. Together with plain Words
it forms the Token union that sentences are built from.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from core.errors import (
    AppError,
    Err,
    Ok,
    Result,
    ValidationError,
    ResolutionError,
    invalid_choice,
    number_not_defined_for_case,
    raise_error,
)
from core.logging import engine_logger
from languages.old_english.declension import Declension
from languages.old_english.maps import INFLECTABLE_CASES, NUMBERS
from languages.old_english.words import Word
from languages.types import GrammaticalNumber, InflectableCase

log = engine_logger()


@dataclass(frozen=True, slots=True)
class InflectedWord:
    """A noun occurrence fixed to one case and number.

    Raises ValidationError for an unknown case or number, and ResolutionError
    when the declension has no form for the requested number in that case
    (e.g. a dual on a noun seeded without duals).
    """
    declension: Declension = field(repr=False)
    case: InflectableCase
    number: GrammaticalNumber
    value: str = field(init=False)

    def __post_init__(self) -> None:
        origin = "engines.inflection"
        if self.case not in INFLECTABLE_CASES:
            raise_error(invalid_choice("case", str(self.case), INFLECTABLE_CASES, origin=origin).error)
        if self.number not in NUMBERS:
            raise_error(invalid_choice("number", str(self.number), NUMBERS, origin=origin).error)

        word = self.declension.declination_table()[self.case].get(self.number)
        if word is None:
            raise_error(number_not_defined_for_case(
                self.declension.base.value, self.case, self.number, origin=origin,
            ).error)
        object.__setattr__(self, "value", word.value)

    @property
    def base(self) -> str:
        return self.declension.base.value

    @property
    def label(self) -> str:
        """Case/number label revealed by the "show case" toggle."""
        return f"{self.case} {self.number}"

    def __str__(self) -> str:
        return self.value


Token = Union[Word, InflectedWord]


def try_inflect(
    declension: Declension, case: str, number: str
) -> Result[InflectedWord, AppError]:
    """Build an InflectedWord at a boundary that offers case/number choices.

    Returns Err instead of raising, so a bad combination never reaches the matcher.
    """
    try:
        return Ok(InflectedWord(declension, case, number))
    except (ValidationError, ResolutionError) as exc:
        log.info(
            "inflection_rejected",
            base=declension.base.value,
            case=case,
            number=number,
            code=exc.code.name,
        )
        return Err(exc.error)
