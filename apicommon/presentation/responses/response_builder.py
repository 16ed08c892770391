"""Pure envelope builders.

Assemble success and error envelopes from optional inputs. Each input is
defaulted independently:

- http_status: 200 OK
- message: keyed by status (see ``resolve_default_message``)
- data: the EmptyResponse sentinel

Builders perform no I/O and keep no state, so identical inputs always give
equal envelopes.

Usage:
    from apicommon.presentation.responses import build_error, build_success

    envelope = build_success(data={"id": 1})
    error = build_error(CommonErrorCode.PARAMETER_NULL, "user_id is required")
"""

from http import HTTPStatus
from typing import Any

from apicommon.core.errors import ErrorCode, is_client_error, is_server_error
from apicommon.presentation.responses.api_response import ApiResponse
from apicommon.presentation.responses.api_status import ApiStatus
from apicommon.presentation.responses.empty_response import EmptyResponse
from apicommon.presentation.responses.error_response import ErrorResponse

DEFAULT_MESSAGE = "The request has been processed."
DEFAULT_OK_MESSAGE = "The request was processed successfully."
DEFAULT_CREATED_MESSAGE = "The resource was created successfully."
DEFAULT_NO_CONTENT_MESSAGE = "The request was processed but there is no data to return."

_DEFAULT_MESSAGES: dict[HTTPStatus, str] = {
    HTTPStatus.OK: DEFAULT_OK_MESSAGE,
    HTTPStatus.CREATED: DEFAULT_CREATED_MESSAGE,
    HTTPStatus.NO_CONTENT: DEFAULT_NO_CONTENT_MESSAGE,
}


def resolve_default_message(http_status: HTTPStatus | int) -> str:
    """Return the default success message for a status.

    Args:
        http_status: Success status.

    Returns:
        Status-specific message for 200/201/204, generic message otherwise.
    """
    return _DEFAULT_MESSAGES.get(HTTPStatus(http_status), DEFAULT_MESSAGE)


def build_success(
    http_status: HTTPStatus | int | None = None,
    message: str | None = None,
    data: Any = None,
) -> ApiResponse[Any]:
    """Build a success envelope.

    Args:
        http_status: Response status (default 200).
        message: Message (default resolved from the status).
        data: Payload (default EmptyResponse sentinel).

    Returns:
        ApiResponse with SUCCESS status.

    Raises:
        ValueError: If http_status is a 4xx or 5xx status.
    """
    status = HTTPStatus.OK if http_status is None else HTTPStatus(http_status)
    if is_client_error(status) or is_server_error(status):
        raise ValueError(
            f"Success envelope cannot use error status {int(status)}; use build_error"
        )

    return ApiResponse[Any](
        status=ApiStatus.SUCCESS,
        message=message if message is not None else resolve_default_message(status),
        data=data if data is not None else EmptyResponse.get_instance(),
    )


def build_error(error_code: ErrorCode, message: str | None = None) -> ErrorResponse:
    """Build an error envelope.

    Args:
        error_code: Error identity; supplies status, code and default message.
        message: Optional override for the default message.

    Returns:
        ErrorResponse with FAILURE (4xx) or ERROR (5xx) status.
    """
    return ErrorResponse.of(error_code, message)
