"""Error system tests — codes, Result combinators and exception mapping.

Tests cover:
    - ErrorCode HTTP status and category ranges
    - AppError serialization and context updates
    - Ok/Err combinators, ensure/require
    - raise_error picks the exception class for the code
"""

import pytest

from core.errors import (
    AppError,
    AppErrorException,
    ErrorCode,
    NotFoundError,
    Ok,
    ResolutionError,
    StateConflictError,
    ValidationError,
    ensure,
    invalid_choice,
    not_found,
    number_not_defined_for_case,
    raise_error,
    raise_result,
    require,
    state_conflict,
)


# --- ErrorCode ----------------------------------------------------------------

@pytest.mark.parametrize("code,status,category", [
    (ErrorCode.E2006_EMPTY_OR_WHITESPACE, 400, "validation"),
    (ErrorCode.E4010_NOT_FOUND, 404, "lookup"),
    (ErrorCode.E5030_NUMBER_NOT_DEFINED_FOR_CASE, 409, "business"),
    (ErrorCode.E9001_UNEXPECTED_ERROR, 500, "internal"),
])
def test_error_code_status_and_category(code, status, category):
    assert code.http_status == status
    assert code.category == category


# --- AppError -----------------------------------------------------------------

def test_app_error_to_dict():
    error = not_found("Declension", "ealdormann").error
    body = error.to_dict()["error"]
    assert body["code"] == "E4010_NOT_FOUND"
    assert body["code_num"] == 4010
    assert body["message"] == "Declension not found: ealdormann"
    assert body["category"] == "lookup"
    assert body["metadata"] == {"entity": "Declension", "entity_id": "ealdormann"}


def test_app_error_str():
    error = number_not_defined_for_case("cyning", "dative", "dual").error
    assert str(error) == "[E5030_NUMBER_NOT_DEFINED_FOR_CASE] 'cyning' has no dual form in the dative case"


def test_with_context_keeps_correlation_id_when_none_given():
    error = AppError(code=ErrorCode.E9000_INTERNAL_GENERIC, message="boom")
    updated = error.with_context(correlation_id=None, request_id="req-1")
    assert updated.context.correlation_id == error.context.correlation_id
    assert updated.context.request_id == "req-1"


def test_with_metadata_merges():
    error = invalid_choice("case", "vocative", ("nominative",)).error.with_metadata(hint="x")
    assert error.metadata["allowed"] == ["nominative"]
    assert error.metadata["hint"] == "x"


# --- Result -------------------------------------------------------------------

def test_ok_combinators():
    result = Ok(2).map(lambda v: v * 3).and_then(lambda v: Ok(v + 1))
    assert result.unwrap() == 7
    assert result.match(ok=lambda v: f"ok {v}", err=lambda e: "err") == "ok 7"
    assert list(result) == [7]


def test_err_short_circuits():
    error = not_found("Scenario", 9)
    assert error.map(lambda v: v * 3) is error
    assert error.unwrap_or("fallback") == "fallback"
    assert list(error) == []
    with pytest.raises(ValueError):
        error.unwrap()


def test_ensure_and_require():
    failure = not_found("Session", "x").error
    assert ensure(True, failure).is_ok()
    assert ensure(False, failure).unwrap_err() is failure
    assert require(0, failure).unwrap() == 0
    assert require(None, failure).is_err()


# --- Exceptions ---------------------------------------------------------------

@pytest.mark.parametrize("error,exc_type", [
    (invalid_choice("number", "trial", ("singular",)).error, ValidationError),
    (not_found("Declension", "x").error, NotFoundError),
    (number_not_defined_for_case("cyning", "dative", "dual").error, ResolutionError),
    (state_conflict("Session", "advancing", "playing").error, StateConflictError),
    (AppError(code=ErrorCode.E9000_INTERNAL_GENERIC, message="boom"), AppErrorException),
])
def test_raise_error_picks_exception_class(error, exc_type):
    with pytest.raises(exc_type) as exc_info:
        raise_error(error)
    assert exc_info.value.error is error
    assert isinstance(exc_info.value, AppErrorException)


def test_raise_result_passes_ok():
    raise_result(Ok(1))
    with pytest.raises(NotFoundError):
        raise_result(not_found("Scenario", 4))
