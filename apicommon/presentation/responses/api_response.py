"""Success envelope schema.

Every successful request returns the same shape:

    {"status": "SUCCESS", "message": "...", "data": <payload>}

``data`` is always present: real result data, or the EmptyResponse sentinel
when there is nothing to return.

Exports:
    ApiResponse: Generic success envelope (usable as a FastAPI response_model)
"""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from apicommon.presentation.responses.api_status import ApiStatus
from apicommon.presentation.responses.empty_response import EmptyResponse

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Success envelope.

    Attributes:
        status: Outcome kind, always SUCCESS for envelopes built here.
        message: Human-readable message.
        data: Result payload or the EmptyResponse sentinel.

    Examples:
        >>> ApiResponse[dict](
        ...     status=ApiStatus.SUCCESS,
        ...     message="The request was processed successfully.",
        ...     data={"id": 1},
        ... )
    """

    model_config = ConfigDict(frozen=True)

    status: ApiStatus = Field(
        ...,
        description="Outcome kind",
        examples=[ApiStatus.SUCCESS],
    )
    message: str = Field(
        ...,
        description="Human-readable message",
        examples=["The request was processed successfully."],
    )
    data: T | EmptyResponse = Field(
        ...,
        description="Result payload, or {'result': 'No content'} when empty",
    )

    def to_content(self) -> dict:
        """Return the JSON-compatible body for this envelope."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
