"""Error envelope schema.

Every failed request returns the same shape:

    {"status": "FAILURE", "statusCode": 400, "errorCode": "COMMON-001", "message": "..."}

FAILURE is used for 4xx statuses and ERROR for 5xx. The envelope carries no
payload field.

Exports:
    ErrorResponse: Error envelope
"""

from pydantic import BaseModel, ConfigDict, Field

from apicommon.core.errors import ErrorCode, is_server_error
from apicommon.presentation.responses.api_status import ApiStatus


class ErrorResponse(BaseModel):
    """Error envelope.

    Attributes:
        status: FAILURE (4xx) or ERROR (5xx).
        status_code: Numeric HTTP status (serialized as ``statusCode``).
        error_code: Machine-readable error code (serialized as ``errorCode``).
        message: Human-readable message.

    Examples:
        >>> ErrorResponse.of(CommonErrorCode.PARAMETER_ID_VALUE)
        ErrorResponse(status=<ApiStatus.FAILURE: 'FAILURE'>, status_code=400, ...)
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    status: ApiStatus = Field(
        ...,
        description="Outcome kind",
        examples=[ApiStatus.FAILURE],
    )
    status_code: int = Field(
        ...,
        alias="statusCode",
        description="HTTP status code",
        examples=[400],
    )
    error_code: str = Field(
        ...,
        alias="errorCode",
        description="Machine-readable error code",
        examples=["COMMON-001"],
    )
    message: str = Field(
        ...,
        description="Human-readable message",
        examples=["Validation failed for the input."],
    )

    @classmethod
    def of(cls, error_code: ErrorCode, message: str | None = None) -> "ErrorResponse":
        """Build an error envelope from an error code.

        Args:
            error_code: Error identity.
            message: Override for the code's default message.

        Returns:
            ErrorResponse with status resolved from the code's HTTP status.
        """
        return cls(
            status=resolve_status(error_code.http_status),
            status_code=int(error_code.http_status),
            error_code=error_code.code,
            message=message if message is not None else error_code.message,
        )

    def to_content(self) -> dict:
        """Return the JSON-compatible body for this envelope."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


def resolve_status(http_status: int) -> ApiStatus:
    """Map an HTTP error status to its outcome kind."""
    return ApiStatus.ERROR if is_server_error(http_status) else ApiStatus.FAILURE
