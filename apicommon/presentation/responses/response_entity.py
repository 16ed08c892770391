"""HTTP response helpers for route handlers.

Wrap envelopes from ``response_builder`` into FastAPI responses carrying the
matching status code. Every helper takes an optional ``message``; without it
the status-specific default is used.

Usage:
    from apicommon.presentation.responses import created, ok

    @router.get("/users/{user_id}")
    async def get_user(user_id: int) -> JSONResponse:
        return ok(await service.get(user_id))

    @router.post("/users")
    async def create_user(body: UserIn) -> JSONResponse:
        return created(await service.create(body), message="User registered.")

Note:
    HTTP forbids a body on 204 and 304 responses, so for those statuses the
    envelope is built but only the status line and headers are sent.
"""

from http import HTTPStatus
from typing import Any

from fastapi import Response
from fastapi.responses import JSONResponse

from apicommon.core.errors import ErrorCode
from apicommon.presentation.responses.api_response import ApiResponse
from apicommon.presentation.responses.error_response import ErrorResponse
from apicommon.presentation.responses.response_builder import (
    build_error,
    build_success,
)

_BODYLESS_STATUSES = frozenset({HTTPStatus.NO_CONTENT, HTTPStatus.NOT_MODIFIED})


def to_response(
    envelope: ApiResponse[Any] | ErrorResponse,
    http_status: HTTPStatus | int,
    headers: dict[str, str] | None = None,
) -> Response:
    """Serialize an envelope into a response with the given status.

    Args:
        envelope: Success or error envelope.
        http_status: Status code to send.
        headers: Optional extra headers.

    Returns:
        JSONResponse, or a bodyless Response for 204/304.
    """
    status_code = int(http_status)
    if status_code in _BODYLESS_STATUSES:
        return Response(status_code=status_code, headers=headers)
    return JSONResponse(
        status_code=status_code,
        content=envelope.to_content(),
        headers=headers,
    )


def build(
    http_status: HTTPStatus | int | None = None,
    message: str | None = None,
    data: Any = None,
) -> Response:
    """Build a success response with any defaults filled in."""
    status = HTTPStatus.OK if http_status is None else HTTPStatus(http_status)
    return to_response(build_success(status, message, data), status)


def ok(data: Any = None, message: str | None = None) -> Response:
    """200 OK success response."""
    return build(HTTPStatus.OK, message, data)


def created(data: Any = None, message: str | None = None) -> Response:
    """201 Created success response."""
    return build(HTTPStatus.CREATED, message, data)


def no_content(message: str | None = None) -> Response:
    """204 No Content success response (no payload)."""
    return build(HTTPStatus.NO_CONTENT, message)


def error(error_code: ErrorCode, message: str | None = None) -> Response:
    """Error response for an error code, with an optional message override."""
    return to_response(build_error(error_code, message), error_code.http_status)
