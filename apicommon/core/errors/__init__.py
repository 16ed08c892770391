"""Core errors package.

Exports the error code taxonomy and the business error raised by domain code.

Usage:
    from apicommon.core.errors import BusinessError, CommonErrorCode, ErrorCode
"""

from apicommon.core.errors.business_error import BusinessError
from apicommon.core.errors.common_error_code import CommonErrorCode
from apicommon.core.errors.error_code import (
    ErrorCode,
    ErrorCodeEnum,
    is_client_error,
    is_server_error,
    unique_error_codes,
)

__all__ = [
    "BusinessError",
    "CommonErrorCode",
    "ErrorCode",
    "ErrorCodeEnum",
    "is_client_error",
    "is_server_error",
    "unique_error_codes",
]
