"""Response envelopes and builders.

This package contains the two envelope shapes every request outcome
collapses into, the empty payload sentinel, and the builders that assemble
them.

Exports:
    ApiStatus: Outcome kind (SUCCESS, FAILURE, ERROR)
    ApiResponse: Success envelope
    ErrorResponse: Error envelope
    EmptyResponse: Empty payload sentinel
    build_success, build_error: Pure envelope builders
    build, ok, created, no_content, error: HTTP response helpers
"""

from apicommon.presentation.responses.api_response import ApiResponse
from apicommon.presentation.responses.api_status import ApiStatus
from apicommon.presentation.responses.empty_response import (
    EMPTY_RESPONSE,
    EmptyResponse,
)
from apicommon.presentation.responses.error_response import (
    ErrorResponse,
    resolve_status,
)
from apicommon.presentation.responses.response_builder import (
    DEFAULT_CREATED_MESSAGE,
    DEFAULT_MESSAGE,
    DEFAULT_NO_CONTENT_MESSAGE,
    DEFAULT_OK_MESSAGE,
    build_error,
    build_success,
    resolve_default_message,
)
from apicommon.presentation.responses.response_entity import (
    build,
    created,
    error,
    no_content,
    ok,
    to_response,
)

__all__ = [
    "ApiResponse",
    "ApiStatus",
    "DEFAULT_CREATED_MESSAGE",
    "DEFAULT_MESSAGE",
    "DEFAULT_NO_CONTENT_MESSAGE",
    "DEFAULT_OK_MESSAGE",
    "EMPTY_RESPONSE",
    "EmptyResponse",
    "ErrorResponse",
    "build",
    "build_error",
    "build_success",
    "created",
    "error",
    "no_content",
    "ok",
    "resolve_default_message",
    "resolve_status",
    "to_response",
]
