"""Exception Wrappers for AppError

Data-model constructors cannot return a Result, so they raise. Each exception
carries the AppError that describes it; raise_error() picks the class that
matches the error's code.
"""
from __future__ import annotations

from .types import AppError, ErrorCode


class AppErrorException(Exception):
    """Exception wrapper for AppError.

    Use this when you need to raise an AppError in code that
    doesn't use the Result monad (constructors, FastAPI dependencies).
    """

    def __init__(self, error: AppError):
        self.error = error
        super().__init__(str(error))

    @property
    def code(self) -> ErrorCode:
        return self.error.code


class ValidationError(AppErrorException):
    """Malformed word, seed record or request value."""


class NotFoundError(AppErrorException, LookupError):
    """Unknown declension base, scenario, session or language."""


class ResolutionError(AppErrorException):
    """Requested case/number combination is not defined for a noun."""


class StateConflictError(AppErrorException):
    """Session transition attempted from a state that does not allow it."""


def exception_for(error: AppError) -> type[AppErrorException]:
    """Select the exception class for an error code."""
    match error.code:
        case ErrorCode.E4010_NOT_FOUND:
            return NotFoundError
        case ErrorCode.E5030_NUMBER_NOT_DEFINED_FOR_CASE:
            return ResolutionError
        case ErrorCode.E5002_STATE_CONFLICT | ErrorCode.E5001_OPERATION_NOT_ALLOWED:
            return StateConflictError
    if error.code.category == "validation":
        return ValidationError
    return AppErrorException


def raise_error(error: AppError) -> None:
    """Raise AppError as the matching exception.

    Usage:
        if not word:
            raise_error(empty_or_whitespace(raw).error)
    """
    raise exception_for(error)(error)


def raise_result(result) -> None:
    """Raise error if Result is Err, otherwise return.

    Usage:
        result = lookup(base)
        raise_result(result)  # Raises if Err
        declension = result.unwrap()
    """
    if result.is_err():
        raise_error(result.unwrap_err())
