"""Error translation for the presentation layer.

This package classifies raised conditions, translates them into error
envelopes, and registers the FastAPI exception handlers that emit them.

Exports:
    translate: Map any raised condition to an ErrorResponse
    resolve_validation_message: Message for validation failures
    register_exception_handlers: Register the full handler set
    register_business_error_handler: Register only the BusinessError handler
    classify_exception: Map framework exceptions to translator shapes
"""

from apicommon.presentation.errors.conditions import (
    ConstraintViolation,
    ConstraintViolationFailure,
    DisallowedMethod,
    FieldError,
    FieldValidationFailure,
    UnreadableBody,
    UnroutablePath,
)
from apicommon.presentation.errors.exception_handlers import (
    build_error_response,
    classify_exception,
    register_business_error_handler,
    register_exception_handlers,
)
from apicommon.presentation.errors.translator import internal_error, translate
from apicommon.presentation.errors.validation_messages import (
    UNKNOWN_VALIDATION_MESSAGE,
    UNREADABLE_BODY_MESSAGE,
    VALIDATION_FALLBACK_MESSAGE,
    resolve_validation_message,
)

__all__ = [
    "ConstraintViolation",
    "ConstraintViolationFailure",
    "DisallowedMethod",
    "FieldError",
    "FieldValidationFailure",
    "UNKNOWN_VALIDATION_MESSAGE",
    "UNREADABLE_BODY_MESSAGE",
    "UnreadableBody",
    "UnroutablePath",
    "VALIDATION_FALLBACK_MESSAGE",
    "build_error_response",
    "classify_exception",
    "internal_error",
    "register_business_error_handler",
    "register_exception_handlers",
    "resolve_validation_message",
    "translate",
]
