"""Translation of raised conditions into error envelopes.

``translate`` is the single place where business failures and system
failures meet. It matches the condition against the known shapes, most
specific first:

1. BusinessError -> its own code, with its message override if one was given
2. UnroutablePath -> NO_ENDPOINT, path interpolated into the message
3. DisallowedMethod -> METHOD_NOT_ALLOWED, method interpolated
4. Validation failures -> INVALID_INPUT_VALUE, message from
   ``resolve_validation_message``
5. Anything else -> INTERNAL_SERVER_ERROR with its default message

Rule 5 is total: translate never raises, whatever it is given. Server-side
failures never expose exception detail in the envelope.
"""

from collections.abc import Callable
from typing import Any

from apicommon.core.errors import BusinessError, CommonErrorCode
from apicommon.presentation.errors.conditions import (
    ConstraintViolationFailure,
    DisallowedMethod,
    FieldValidationFailure,
    UnreadableBody,
    UnroutablePath,
)
from apicommon.presentation.errors.validation_messages import (
    resolve_validation_message,
)
from apicommon.presentation.responses import ErrorResponse, build_error

ValidationMessageResolver = Callable[[Any], str]

NO_ENDPOINT_MESSAGE = "no endpoint matches [{path}]"
METHOD_NOT_ALLOWED_MESSAGE = "method [{method}] is not allowed"

# Prebuilt so the catch-all path cannot fail
_INTERNAL_ERROR = build_error(CommonErrorCode.INTERNAL_SERVER_ERROR)


def translate(
    condition: object,
    *,
    validation_message_resolver: ValidationMessageResolver = resolve_validation_message,
    on_error: Callable[[Exception], None] | None = None,
) -> ErrorResponse:
    """Translate a raised condition into an error envelope.

    Args:
        condition: BusinessError, an infrastructure signal shape, or any
            other object (usually an unexpected exception).
        validation_message_resolver: Builds the message for validation
            failures. Override to customize validation messages.
        on_error: Called with the exception when translation itself fails
            (for example a broken resolver) before falling back to the
            internal error envelope.

    Returns:
        ErrorResponse for the most specific matching rule.
    """
    try:
        return _translate(condition, validation_message_resolver)
    except Exception as exc:
        if on_error is not None:
            on_error(exc)
        return internal_error()


def internal_error() -> ErrorResponse:
    """Envelope for unclassified failures."""
    return _INTERNAL_ERROR


def _translate(
    condition: object,
    validation_message_resolver: ValidationMessageResolver,
) -> ErrorResponse:
    match condition:
        case BusinessError():
            return build_error(condition.error_code, condition.custom_message)
        case UnroutablePath(path=path):
            return build_error(
                CommonErrorCode.NO_ENDPOINT,
                NO_ENDPOINT_MESSAGE.format(path=path),
            )
        case DisallowedMethod(method=method):
            return build_error(
                CommonErrorCode.METHOD_NOT_ALLOWED,
                METHOD_NOT_ALLOWED_MESSAGE.format(method=method),
            )
        case FieldValidationFailure() | ConstraintViolationFailure() | UnreadableBody():
            return build_error(
                CommonErrorCode.INVALID_INPUT_VALUE,
                validation_message_resolver(condition),
            )
        case _:
            return internal_error()
