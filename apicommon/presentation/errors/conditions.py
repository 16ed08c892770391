"""Infrastructure failure shapes consumed by the translator.

The web framework reports routing and validation failures in its own
exception types. The exception handlers classify those exceptions into the
framework-independent shapes below before translation, so the translator
only ever matches on these dataclasses, BusinessError, or "anything else".

Shapes:
- UnroutablePath: no route matches the request path
- DisallowedMethod: route exists but does not accept the method
- FieldValidationFailure: request body fields failed validation
- ConstraintViolationFailure: parameter/model constraints failed validation
- UnreadableBody: request body could not be parsed
"""

from dataclasses import dataclass
from typing import TypeAlias


@dataclass(frozen=True, slots=True, kw_only=True)
class UnroutablePath:
    """No route matches the request.

    Attributes:
        path: Request path that did not match.
    """

    path: str


@dataclass(frozen=True, slots=True, kw_only=True)
class DisallowedMethod:
    """Route matched but the HTTP method is not supported.

    Attributes:
        method: Request method (e.g. ``"DELETE"``).
    """

    method: str


@dataclass(frozen=True, slots=True)
class FieldError:
    """A single field-level validation error."""

    field: str
    message: str


@dataclass(frozen=True, slots=True)
class ConstraintViolation:
    """A single constraint violation on a parameter or model property."""

    property_path: str
    message: str


@dataclass(frozen=True, slots=True, kw_only=True)
class FieldValidationFailure:
    """Request body validation failed.

    Attributes:
        errors: Field errors in the order the validator reported them.
    """

    errors: tuple[FieldError, ...] = ()


@dataclass(frozen=True, slots=True, kw_only=True)
class ConstraintViolationFailure:
    """Parameter or model constraint validation failed.

    Attributes:
        violations: Violations in the order the validator reported them.
    """

    violations: tuple[ConstraintViolation, ...] = ()


@dataclass(frozen=True, slots=True, kw_only=True)
class UnreadableBody:
    """Request body could not be parsed (malformed JSON, wrong encoding).

    Attributes:
        reason: Parser detail, kept for logging only.
    """

    reason: str | None = None


ValidationFailure: TypeAlias = FieldValidationFailure | ConstraintViolationFailure | UnreadableBody

InfrastructureSignal: TypeAlias = UnroutablePath | DisallowedMethod | ValidationFailure
