"""Business error raised when a business rule is violated.

BusinessError is the only exception business logic raises to signal a known
failure. It carries exactly one ErrorCode and propagates unmodified up the
call stack until the presentation layer translates it into an error
envelope. Do not catch and re-wrap it on the way up.

Usage:
    from apicommon.core.errors import BusinessError, CommonErrorCode

    if user_id <= 0:
        raise BusinessError(CommonErrorCode.PARAMETER_ID_VALUE)

    # Context-specific message overriding the code's default
    raise BusinessError(UserErrorCode.USER_NOT_FOUND, f"User {user_id} not found.")
"""

from apicommon.core.errors.error_code import ErrorCode


class BusinessError(Exception):
    """Known business rule violation.

    Args:
        error_code: Identity of the violated rule.
        message: Optional context-specific message. When omitted the error
            code's default message is used.

    Raises:
        TypeError: If ``error_code`` does not implement ErrorCode.
    """

    def __init__(self, error_code: ErrorCode, message: str | None = None) -> None:
        if not isinstance(error_code, ErrorCode):
            raise TypeError(
                f"error_code must implement ErrorCode, got {type(error_code).__name__}"
            )
        self._error_code = error_code
        self._custom_message = message
        super().__init__(self.message)

    @property
    def error_code(self) -> ErrorCode:
        """Error code carried by this error."""
        return self._error_code

    @property
    def custom_message(self) -> str | None:
        """Context-specific message supplied at raise time, if any."""
        return self._custom_message

    @property
    def message(self) -> str:
        """Effective message: the override if given, else the code default."""
        if self._custom_message is not None:
            return self._custom_message
        return self._error_code.message

    def __str__(self) -> str:
        """String representation of error."""
        return f"{self._error_code.code}: {self.message}"
