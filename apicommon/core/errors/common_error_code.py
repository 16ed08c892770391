"""Common error codes shared by every domain.

These cover failures that do not belong to any business domain: input
validation, argument checks, routing and unexpected server errors. Codes
follow the ``DOMAIN-NNN`` convention.
"""

from http import HTTPStatus

from apicommon.core.errors.error_code import ErrorCodeEnum, unique_error_codes


@unique_error_codes
class CommonErrorCode(ErrorCodeEnum):
    """Error codes common to all domains."""

    INVALID_INPUT_VALUE = (
        HTTPStatus.BAD_REQUEST,
        "COMMON-001",
        "Validation failed for the input.",
    )
    PARAMETER_NULL = (
        HTTPStatus.BAD_REQUEST,
        "COMMON-002",
        "A required parameter is null.",
    )
    PARAMETER_ID_VALUE = (
        HTTPStatus.BAD_REQUEST,
        "COMMON-003",
        "ID value must be greater than zero.",
    )
    NO_ENDPOINT = (
        HTTPStatus.NOT_FOUND,
        "COMMON-004",
        "The requested endpoint does not exist.",
    )
    METHOD_NOT_ALLOWED = (
        HTTPStatus.METHOD_NOT_ALLOWED,
        "COMMON-005",
        "The HTTP method is not allowed.",
    )
    INTERNAL_SERVER_ERROR = (
        HTTPStatus.INTERNAL_SERVER_ERROR,
        "COMMON-006",
        "An internal server error has occurred.",
    )
