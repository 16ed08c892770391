"""Validation failure message resolution.

Turns a validation failure shape into the single message placed in the
INVALID_INPUT_VALUE envelope.

Rules:
- Field errors: ``"[field] message"`` per error, joined with ``". "``
- Constraint violations: ``"[property_path] message"``, same join
- Unreadable body: fixed message about the request body
- Anything else: fixed "unknown validation error" message

Field errors and constraint violations deliberately keep separate join
rules even though they currently render the same way.
"""

from typing import Any

from apicommon.presentation.errors.conditions import (
    ConstraintViolationFailure,
    FieldValidationFailure,
    UnreadableBody,
)

VALIDATION_FALLBACK_MESSAGE = "An input validation error has occurred."
UNREADABLE_BODY_MESSAGE = (
    "The request body could not be read. Please check the JSON format."
)
UNKNOWN_VALIDATION_MESSAGE = "An unknown validation error has occurred."

_SEPARATOR = ". "


def resolve_field_errors_message(failure: FieldValidationFailure) -> str:
    """Join field errors as ``[field] message`` in reported order."""
    messages = [f"[{error.field}] {error.message}" for error in failure.errors]
    return _SEPARATOR.join(messages) if messages else VALIDATION_FALLBACK_MESSAGE


def resolve_constraint_violations_message(failure: ConstraintViolationFailure) -> str:
    """Join constraint violations as ``[property_path] message`` in reported order."""
    messages = [
        f"[{violation.property_path}] {violation.message}"
        for violation in failure.violations
    ]
    return _SEPARATOR.join(messages) if messages else VALIDATION_FALLBACK_MESSAGE


def resolve_validation_message(failure: Any) -> str:
    """Resolve the message for a validation failure.

    Args:
        failure: Validation failure shape. Other values are accepted and
            resolve to the unknown-validation message.

    Returns:
        Message for the INVALID_INPUT_VALUE envelope.

    Example:
        >>> resolve_validation_message(
        ...     FieldValidationFailure(
        ...         errors=(
        ...             FieldError("email", "must not be blank"),
        ...             FieldError("age", "must be positive"),
        ...         )
        ...     )
        ... )
        '[email] must not be blank. [age] must be positive'
    """
    match failure:
        case FieldValidationFailure():
            return resolve_field_errors_message(failure)
        case ConstraintViolationFailure():
            return resolve_constraint_violations_message(failure)
        case UnreadableBody():
            return UNREADABLE_BODY_MESSAGE
        case _:
            return UNKNOWN_VALIDATION_MESSAGE
