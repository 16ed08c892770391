"""ErrorCode protocol and registry validation.

An error code is an immutable (HTTP status, code, default message) triple
naming one specific failure. Each business domain declares its own set of
codes as an ``Enum`` whose members satisfy ``ErrorCode`` structurally; no
base class is required.

Architecture:
- ErrorCode is a runtime-checkable Protocol (PEP 544 structural subtyping)
- Registries are Enum classes decorated with ``@unique_error_codes``
- The translation layer only uses the three accessors, so it never needs to
  know which registry a code came from

Usage:
    from http import HTTPStatus
    from enum import Enum

    from apicommon.core.errors import ErrorCodeEnum, unique_error_codes

    @unique_error_codes
    class UserErrorCode(ErrorCodeEnum):
        USER_NOT_FOUND = (HTTPStatus.NOT_FOUND, "USER-001", "User not found.")
        EMAIL_TAKEN = (HTTPStatus.CONFLICT, "USER-002", "Email already registered.")
"""

from enum import Enum
from http import HTTPStatus
from typing import Protocol, TypeVar, runtime_checkable

E = TypeVar("E", bound=type[Enum])


@runtime_checkable
class ErrorCode(Protocol):
    """Protocol for error code identities.

    Attributes:
        http_status: HTTP status the error translates to (4xx or 5xx).
        code: Stable machine-readable identifier (e.g. ``"COMMON-001"``).
        message: Default human-readable message.
    """

    @property
    def http_status(self) -> HTTPStatus:
        """HTTP status for this error."""
        ...

    @property
    def code(self) -> str:
        """Stable machine-readable error code."""
        ...

    @property
    def message(self) -> str:
        """Default human-readable message."""
        ...


class ErrorCodeEnum(Enum):
    """Member-less Enum base for error code registries.

    Members are declared as ``(http_status, code, message)`` tuples and
    expose them through read-only properties, which makes every member an
    ``ErrorCode``.
    """

    def __init__(self, http_status: HTTPStatus, code: str, message: str) -> None:
        self._http_status = http_status
        self._code = code
        self._message = message

    @property
    def http_status(self) -> HTTPStatus:
        """HTTP status for this error."""
        return self._http_status

    @property
    def code(self) -> str:
        """Stable machine-readable error code."""
        return self._code

    @property
    def message(self) -> str:
        """Default human-readable message."""
        return self._message


def is_server_error(http_status: HTTPStatus | int) -> bool:
    """Return True for 5xx statuses."""
    return 500 <= int(http_status) <= 599


def is_client_error(http_status: HTTPStatus | int) -> bool:
    """Return True for 4xx statuses."""
    return 400 <= int(http_status) <= 499


def unique_error_codes(registry: E) -> E:
    """Validate an error code registry at class definition time.

    Checks that every member satisfies ``ErrorCode``, that its HTTP status
    is a known 4xx or 5xx ``HTTPStatus`` and that no two members share a
    ``code``.

    Args:
        registry: Enum class whose members are error codes.

    Returns:
        The same class, unchanged.

    Raises:
        ValueError: If a member is malformed or a code is duplicated.
    """
    seen: dict[str, str] = {}
    for member in registry:
        if not isinstance(member, ErrorCode):
            raise ValueError(
                f"{registry.__name__}.{member.name} does not implement ErrorCode"
            )

        try:
            status = HTTPStatus(member.http_status)
        except ValueError as exc:
            raise ValueError(
                f"{registry.__name__}.{member.name} has unknown HTTP status "
                f"{member.http_status!r}"
            ) from exc

        if not (is_client_error(status) or is_server_error(status)):
            raise ValueError(
                f"{registry.__name__}.{member.name} must use a 4xx or 5xx status, "
                f"got {int(status)}"
            )

        if member.code in seen:
            raise ValueError(
                f"Duplicate error code {member.code!r} in {registry.__name__}: "
                f"{seen[member.code]} and {member.name}"
            )
        seen[member.code] = member.name

    return registry
