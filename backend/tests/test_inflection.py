"""InflectedWord tests — resolving a (case, number) cell of a declension.

Tests cover:
    - Every populated cell of a declension resolves to its surface form
    - Dual on a noun without duals raises ResolutionError
    - Instrumental and unknown case/number values raise ValidationError
    - try_inflect returns Ok/Err instead of raising
"""

import pytest

from core.errors import ErrorCode, ResolutionError, ValidationError
from engines.inflection import InflectedWord, try_inflect
from languages.old_english.declension import Declension


def test_every_seeded_cell_resolves(cyning, biscop):
    for declension in (cyning, biscop):
        for case, number, word in declension.forms():
            inflected = InflectedWord(declension, case, number)
            assert inflected.value == word.value


def test_resolves_expected_forms(cyning, biscop):
    assert InflectedWord(cyning, "genitive", "singular").value == "cyninges"
    assert InflectedWord(biscop, "dative", "plural").value == "biscopum"


def test_label_and_base(biscop):
    inflected = InflectedWord(biscop, "accusative", "plural")
    assert inflected.base == "biscop"
    assert inflected.label == "accusative plural"
    assert str(inflected) == "biscopas"


def test_dual_without_form_raises_resolution_error(cyning):
    with pytest.raises(ResolutionError) as exc_info:
        InflectedWord(cyning, "nominative", "dual")
    error = exc_info.value.error
    assert error.code == ErrorCode.E5030_NUMBER_NOT_DEFINED_FOR_CASE
    assert error.metadata == {"base": "cyning", "case": "nominative", "number": "dual"}


def test_dual_resolves_when_supplied():
    pronoun = Declension.create(
        base="wit",
        gender="neuter",
        strength="strong",
        nominative={"singular": "ic", "dual": "wit", "plural": "we"},
        accusative={"singular": "mec", "dual": "uncit", "plural": "usic"},
        genitive={"singular": "min", "dual": "uncer", "plural": "ure"},
        dative={"singular": "me", "dual": "unc", "plural": "us"},
    )
    assert InflectedWord(pronoun, "accusative", "dual").value == "uncit"


def test_instrumental_is_not_inflectable(cyning):
    with pytest.raises(ValidationError) as exc_info:
        InflectedWord(cyning, "instrumental", "singular")
    assert exc_info.value.code == ErrorCode.E2007_INVALID_CHOICE


@pytest.mark.parametrize("case,number", [("vocative", "singular"), ("dative", "trial")])
def test_unknown_case_or_number_rejected(cyning, case, number):
    with pytest.raises(ValidationError):
        InflectedWord(cyning, case, number)


def test_inflected_words_are_immutable(cyning):
    inflected = InflectedWord(cyning, "dative", "singular")
    with pytest.raises(AttributeError):
        inflected.case = "genitive"


# --- try_inflect --------------------------------------------------------------

def test_try_inflect_ok(cyning):
    result = try_inflect(cyning, "dative", "singular")
    assert result.is_ok()
    assert result.unwrap().value == "cyninge"


def test_try_inflect_err_on_missing_dual(cyning):
    result = try_inflect(cyning, "genitive", "dual")
    assert result.is_err()
    assert result.unwrap_err().code == ErrorCode.E5030_NUMBER_NOT_DEFINED_FOR_CASE


def test_try_inflect_err_on_bad_case(cyning):
    result = try_inflect(cyning, "locative", "singular")
    assert result.unwrap_err().code == ErrorCode.E2007_INVALID_CHOICE
