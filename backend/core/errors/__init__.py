"""Monadic Error Handling System

Type-safe error handling inspired by Haskell's Either and Rust's Result.

Key components:
- Result[T, E]: container for success/failure
- AppError: error value with code, message, metadata and context
- ErrorCode: hierarchical error code taxonomy
- Builder functions: ergonomic error construction
- Exceptions: AppErrorException subclasses for code that must raise

Usage:
    from core.errors import Ok, Err, Result, AppError, not_found

    def lookup(base: str) -> Result[Declension, AppError]:
        declension = table.get(base)
        if declension is None:
            return not_found("Declension", base, origin="registry")
        return Ok(declension)

    match lookup("cyning"):
        case Ok(declension):
            ...
        case Err(error):
            log.warning(error.message, code=error.code.name)
"""
from .types import (
    # Core types
    Result,
    Ok,
    Err,
    AppError,
    ErrorCode,
    ErrorContext,
    # Combinators
    ensure,
    require,
)

from .builders import (
    # Validation (E2xxx)
    validation_error,
    required_field,
    empty_or_whitespace,
    invalid_choice,
    out_of_range,
    duplicate_id,
    # Lookup (E4xxx)
    not_found,
    # Session/Business (E5xxx)
    business_error,
    number_not_defined_for_case,
    state_conflict,
)

from .exceptions import (
    AppErrorException,
    ValidationError,
    NotFoundError,
    ResolutionError,
    StateConflictError,
    exception_for,
    raise_error,
    raise_result,
)

from .handlers import (
    register_error_handlers,
    result_to_response,
)

__all__ = [
    # Core types
    "Result",
    "Ok",
    "Err",
    "AppError",
    "ErrorCode",
    "ErrorContext",
    "ensure",
    "require",
    # Validation (E2xxx)
    "validation_error",
    "required_field",
    "empty_or_whitespace",
    "invalid_choice",
    "out_of_range",
    "duplicate_id",
    # Lookup (E4xxx)
    "not_found",
    # Session/Business (E5xxx)
    "business_error",
    "number_not_defined_for_case",
    "state_conflict",
    # Exceptions
    "AppErrorException",
    "ValidationError",
    "NotFoundError",
    "ResolutionError",
    "StateConflictError",
    "exception_for",
    "raise_error",
    "raise_result",
    # Handlers
    "register_error_handlers",
    "result_to_response",
]
