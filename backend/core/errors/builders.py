"""Domain-Specific Error Builders

Ergonomic constructors for typed errors. Each builder returns Err(AppError)
with the appropriate code and metadata.
"""
from .types import AppError, ErrorCode, ErrorContext, Err


# =============================================================================
# Validation Errors (E2xxx)
# =============================================================================

def validation_error(
    message: str,
    *,
    code: ErrorCode = ErrorCode.E2000_VALIDATION_GENERIC,
    field: str | None = None,
    value: str | None = None,
    origin: str = "",
    **metadata,
) -> Err[AppError]:
    """Create validation error."""
    meta = {"field": field, "value": value, **metadata}
    return Err(AppError(
        code=code,
        message=message,
        context=ErrorContext(origin=origin),
        metadata={k: v for k, v in meta.items() if v is not None},
    ))


def required_field(field: str, origin: str = "") -> Err[AppError]:
    return validation_error(
        f"Required field '{field}' is missing",
        code=ErrorCode.E2001_REQUIRED_FIELD_MISSING,
        field=field,
        origin=origin,
    )


def empty_or_whitespace(raw: str, origin: str = "") -> Err[AppError]:
    return validation_error(
        f'Word "{raw}" contains a space or is empty.',
        code=ErrorCode.E2006_EMPTY_OR_WHITESPACE,
        field="value",
        value=raw,
        origin=origin,
    )


def invalid_choice(
    field: str, value: str, allowed: tuple[str, ...] | list[str], origin: str = ""
) -> Err[AppError]:
    return validation_error(
        f"Invalid {field} '{value}': expected one of {', '.join(allowed)}",
        code=ErrorCode.E2007_INVALID_CHOICE,
        field=field,
        value=value,
        allowed=list(allowed),
        origin=origin,
    )


def out_of_range(
    field: str,
    value: int,
    min_val: int | None = None,
    max_val: int | None = None,
    origin: str = "",
) -> Err[AppError]:
    bounds = []
    if min_val is not None:
        bounds.append(f">= {min_val}")
    if max_val is not None:
        bounds.append(f"<= {max_val}")
    msg = f"Value {value} for '{field}' out of range ({', '.join(bounds)})"
    return validation_error(
        msg,
        code=ErrorCode.E2003_OUT_OF_RANGE,
        field=field,
        value=str(value),
        min=min_val,
        max=max_val,
        origin=origin,
    )


def duplicate_id(entity: str, id: int | str, origin: str = "") -> Err[AppError]:
    return validation_error(
        f"{entity} id {id} is used more than once",
        code=ErrorCode.E2008_DUPLICATE_ID,
        field="id",
        value=str(id),
        entity=entity,
        origin=origin,
    )


# =============================================================================
# Lookup Errors (E4xxx)
# =============================================================================

def not_found(entity: str, id: str | int | None = None, origin: str = "") -> Err[AppError]:
    msg = f"{entity} not found"
    if id is not None:
        msg += f": {id}"
    meta = {"entity": entity}
    if id is not None:
        meta["entity_id"] = str(id)
    return Err(AppError(
        code=ErrorCode.E4010_NOT_FOUND,
        message=msg,
        context=ErrorContext(origin=origin),
        metadata=meta,
    ))


# =============================================================================
# Session/Business Errors (E5xxx)
# =============================================================================

def business_error(
    message: str,
    *,
    code: ErrorCode = ErrorCode.E5000_BUSINESS_GENERIC,
    origin: str = "",
    **metadata,
) -> Err[AppError]:
    """Create business logic error."""
    return Err(AppError(
        code=code,
        message=message,
        context=ErrorContext(origin=origin),
        metadata=metadata,
    ))


def number_not_defined_for_case(
    base: str, case: str, number: str, origin: str = ""
) -> Err[AppError]:
    return business_error(
        f"'{base}' has no {number} form in the {case} case",
        code=ErrorCode.E5030_NUMBER_NOT_DEFINED_FOR_CASE,
        base=base,
        case=case,
        number=number,
        origin=origin,
    )


def state_conflict(
    entity: str, current_state: str, required_state: str, origin: str = ""
) -> Err[AppError]:
    return business_error(
        f"{entity} is in '{current_state}' state, requires '{required_state}'",
        code=ErrorCode.E5002_STATE_CONFLICT,
        entity=entity,
        current_state=current_state,
        required_state=required_state,
        origin=origin,
    )

