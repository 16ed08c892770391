"""Argument checks that raise common business errors.

Guard clauses for service and handler code. Failures raise BusinessError
with a CommonErrorCode so they reach the client as ordinary 400 envelopes.

Usage:
    from apicommon.core.validation import check_id_valid, check_not_null

    def get_user(user_id: int) -> User:
        check_id_valid(user_id)  # 400 COMMON-003 for 0 or negative ids
        ...
"""

from typing import Any

from apicommon.core.errors import BusinessError, CommonErrorCode


def is_null(value: Any) -> bool:
    """Return True if value is None."""
    return value is None


def is_not_null(value: Any) -> bool:
    """Return True if value is not None."""
    return value is not None


def check_not_null(value: Any) -> None:
    """Require a value to be present.

    Args:
        value: Value to check.

    Raises:
        BusinessError: PARAMETER_NULL if value is None.
    """
    if is_null(value):
        raise BusinessError(CommonErrorCode.PARAMETER_NULL)


def check_all_not_null(*values: Any) -> None:
    """Require every value to be present.

    Raises:
        BusinessError: PARAMETER_NULL on the first None value.
    """
    for value in values:
        check_not_null(value)


def check_id_valid(id_value: int | None) -> None:
    """Require a positive identifier.

    Args:
        id_value: Identifier to check.

    Raises:
        BusinessError: PARAMETER_NULL if None, PARAMETER_ID_VALUE if <= 0.
    """
    check_not_null(id_value)
    if id_value <= 0:  # type: ignore[operator]
        raise BusinessError(CommonErrorCode.PARAMETER_ID_VALUE)


def check_ids_valid(*id_values: int | None) -> None:
    """Require every identifier to be positive.

    Raises:
        BusinessError: On the first missing or non-positive identifier.
    """
    for id_value in id_values:
        check_id_valid(id_value)
