"""apicommon - uniform response envelopes and error translation for FastAPI.

Every request outcome is reported as one of two envelopes:

    {"status": "SUCCESS", "message": "...", "data": ...}
    {"status": "FAILURE" | "ERROR", "statusCode": 400, "errorCode": "COMMON-001", "message": "..."}

Usage:
    from fastapi import FastAPI
    from apicommon import BusinessError, CommonErrorCode, ok, register_exception_handlers

    app = FastAPI()
    register_exception_handlers(app)

    @app.get("/users/{user_id}")
    async def get_user(user_id: int):
        if user_id <= 0:
            raise BusinessError(CommonErrorCode.PARAMETER_ID_VALUE)
        return ok({"id": user_id})
"""

from apicommon.core.errors import (
    BusinessError,
    CommonErrorCode,
    ErrorCode,
    ErrorCodeEnum,
    unique_error_codes,
)
from apicommon.presentation.errors import (
    register_business_error_handler,
    register_exception_handlers,
    resolve_validation_message,
    translate,
)
from apicommon.presentation.responses import (
    ApiResponse,
    ApiStatus,
    EmptyResponse,
    ErrorResponse,
    build,
    build_error,
    build_success,
    created,
    error,
    no_content,
    ok,
)

__all__ = [
    "ApiResponse",
    "ApiStatus",
    "BusinessError",
    "CommonErrorCode",
    "EmptyResponse",
    "ErrorCode",
    "ErrorCodeEnum",
    "ErrorResponse",
    "build",
    "build_error",
    "build_success",
    "created",
    "error",
    "no_content",
    "ok",
    "register_business_error_handler",
    "register_exception_handlers",
    "resolve_validation_message",
    "translate",
    "unique_error_codes",
]
