"""Empty payload sentinel for success envelopes.

A success envelope never has an absent or null ``data`` field. When a
handler has nothing to return, the single shared EmptyResponse instance is
used instead. It serializes as ``{"result": "No content"}``.

Usage:
    from apicommon.presentation.responses import EmptyResponse

    empty = EmptyResponse.get_instance()
    assert empty is EmptyResponse.get_instance()
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict

NO_CONTENT_RESULT = "No content"


class EmptyResponse(BaseModel):
    """Immutable marker for "no payload".

    Always obtain it through ``get_instance()`` (or ``EMPTY_RESPONSE``);
    builders only ever hand out that one instance. Copies return the same
    object.
    """

    model_config = ConfigDict(frozen=True)

    result: Literal["No content"] = NO_CONTENT_RESULT

    @classmethod
    def get_instance(cls) -> "EmptyResponse":
        """Return the process-wide sentinel."""
        return EMPTY_RESPONSE

    def __copy__(self) -> "EmptyResponse":
        return self

    def __deepcopy__(self, memo: dict[int, Any] | None = None) -> "EmptyResponse":
        return self


EMPTY_RESPONSE = EmptyResponse()
