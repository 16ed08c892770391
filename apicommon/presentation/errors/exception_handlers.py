"""Global exception handlers for FastAPI applications.

Every exception that escapes a route handler or dependency is classified
into one of the translator's shapes, translated into an error envelope, and
written with the envelope's status code.

Classification:
    BusinessError -> itself
    HTTPException 405 -> DisallowedMethod
    HTTPException 404 raised by routing -> UnroutablePath
    RequestValidationError -> UnreadableBody / FieldValidationFailure /
        ConstraintViolationFailure
    pydantic.ValidationError -> ConstraintViolationFailure
    anything else -> unclassified (500)

Exports:
    register_business_error_handler: Register only the BusinessError handler
    register_exception_handlers: Register the full handler set
    classify_exception: Map an exception to a translator shape
"""

from collections.abc import Awaitable, Callable, Sequence
from functools import partial
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import Response

from apicommon.core.container import get_logger
from apicommon.core.errors import BusinessError
from apicommon.presentation.errors.conditions import (
    ConstraintViolation,
    ConstraintViolationFailure,
    DisallowedMethod,
    FieldError,
    FieldValidationFailure,
    UnreadableBody,
    UnroutablePath,
    ValidationFailure,
)
from apicommon.presentation.errors.translator import (
    ValidationMessageResolver,
    translate,
)
from apicommon.presentation.errors.validation_messages import (
    resolve_validation_message,
)
from apicommon.presentation.responses import ApiStatus, ErrorResponse

ExceptionHandler = Callable[[Request, Exception], Awaitable[Response]]

_BODY_LOCATION = "body"
_JSON_INVALID = "json_invalid"
# Headers from framework exceptions that remain meaningful to clients
_FORWARDED_HEADERS = ("allow",)


def classify_exception(exc: Exception, request: Request) -> object:
    """Map a framework or application exception to a translator shape.

    Args:
        exc: Exception that escaped the route handler.
        request: Current request (supplies path and method).

    Returns:
        BusinessError, an infrastructure signal, or ``exc`` itself when it
        matches no known shape.
    """
    match exc:
        case BusinessError():
            return exc
        case StarletteHTTPException(status_code=405):
            return DisallowedMethod(method=request.method)
        case StarletteHTTPException(status_code=404) if _is_routing_miss(request):
            return UnroutablePath(path=request.url.path)
        case RequestValidationError():
            return classify_validation_errors(exc.errors())
        case PydanticValidationError():
            return constraint_violations(exc.errors(), default_path=exc.title)
        case _:
            return exc


def classify_validation_errors(errors: Sequence[Any]) -> ValidationFailure:
    """Classify FastAPI request validation errors.

    An unparsable body wins over everything else. If every error is located
    in the body, the failure is a field failure; otherwise (query, path,
    header or cookie parameters involved) it is a constraint violation.

    Args:
        errors: ``RequestValidationError.errors()`` entries.

    Returns:
        UnreadableBody, FieldValidationFailure or ConstraintViolationFailure.
    """
    for err in errors:
        if err.get("type") == _JSON_INVALID:
            ctx = err.get("ctx") or {}
            return UnreadableBody(reason=ctx.get("error") or err.get("msg"))

    if all(_location(err)[:1] == (_BODY_LOCATION,) for err in errors):
        return FieldValidationFailure(
            errors=tuple(
                FieldError(_field_name(_location(err)), str(err.get("msg", "")))
                for err in errors
            )
        )

    return constraint_violations(errors)


def constraint_violations(
    errors: Sequence[Any], default_path: str = "value"
) -> ConstraintViolationFailure:
    """Build a constraint violation failure from pydantic-style errors.

    Args:
        errors: Error dicts with ``loc`` and ``msg`` keys.
        default_path: Property path used for model-level errors with an
            empty location.

    Returns:
        ConstraintViolationFailure preserving the reported order.
    """
    return ConstraintViolationFailure(
        violations=tuple(
            ConstraintViolation(
                ".".join(str(part) for part in _location(err)) or default_path,
                str(err.get("msg", "")),
            )
            for err in errors
        )
    )


def build_error_response(
    request: Request,
    exc: Exception,
    *,
    validation_message_resolver: ValidationMessageResolver = resolve_validation_message,
) -> JSONResponse:
    """Classify, translate, log and serialize an exception.

    Args:
        request: Current request.
        exc: Exception to report.
        validation_message_resolver: Message builder for validation failures.

    Returns:
        JSONResponse carrying the error envelope and its status code.
    """
    try:
        condition = classify_exception(exc, request)
    except Exception as classify_error:
        # Malformed framework errors are reported as unclassified
        _log_translation_failure(request, classify_error)
        condition = exc
    envelope = translate(
        condition,
        validation_message_resolver=validation_message_resolver,
        on_error=partial(_log_translation_failure, request),
    )
    _log_translation(request, exc, envelope)

    return JSONResponse(
        status_code=envelope.status_code,
        content=envelope.to_content(),
        headers=_forwarded_headers(exc),
    )


def make_exception_handler(
    validation_message_resolver: ValidationMessageResolver = resolve_validation_message,
) -> ExceptionHandler:
    """Create an exception handler bound to a validation message resolver."""

    async def handle(request: Request, exc: Exception) -> Response:
        return build_error_response(
            request, exc, validation_message_resolver=validation_message_resolver
        )

    return handle


exception_handler = make_exception_handler()


def register_business_error_handler(app: FastAPI) -> None:
    """Register only the BusinessError handler.

    Use this when the host application keeps its own handling for routing,
    validation and unexpected errors.

    Args:
        app: FastAPI application instance.
    """
    app.add_exception_handler(BusinessError, exception_handler)


def register_exception_handlers(
    app: FastAPI,
    *,
    validation_message_resolver: ValidationMessageResolver | None = None,
) -> None:
    """Register the full exception handler set with a FastAPI app.

    Handlers:
    - BusinessError: the raised error code
    - HTTPException: 404 routing misses and 405 method mismatches
    - RequestValidationError / pydantic.ValidationError: INVALID_INPUT_VALUE
    - Exception: INTERNAL_SERVER_ERROR catch-all

    Args:
        app: FastAPI application instance.
        validation_message_resolver: Optional replacement for
            ``resolve_validation_message``.

    Note:
        Starlette still re-raises exceptions handled by the ``Exception``
        handler after the response is sent, so servers keep logging them.
        In debug mode Starlette shows its traceback page instead.
    """
    handler = (
        exception_handler
        if validation_message_resolver is None
        else make_exception_handler(validation_message_resolver)
    )

    app.add_exception_handler(BusinessError, handler)
    app.add_exception_handler(StarletteHTTPException, handler)
    app.add_exception_handler(RequestValidationError, handler)
    app.add_exception_handler(PydanticValidationError, handler)
    app.add_exception_handler(Exception, handler)


def _is_routing_miss(request: Request) -> bool:
    # Starlette only sets "endpoint" once a route matched, Mounts included
    return "endpoint" not in request.scope


def _location(err: Any) -> tuple[Any, ...]:
    return tuple(err.get("loc") or ())


def _field_name(loc: tuple[Any, ...]) -> str:
    parts = [str(part) for part in loc[1:]]
    return ".".join(parts) if parts else _BODY_LOCATION


def _forwarded_headers(exc: Exception) -> dict[str, str] | None:
    headers = getattr(exc, "headers", None) if isinstance(exc, StarletteHTTPException) else None
    if not headers:
        return None
    forwarded = {
        name: value
        for name, value in headers.items()
        if name.lower() in _FORWARDED_HEADERS
    }
    return forwarded or None


def _log_translation(request: Request, exc: Exception, envelope: ErrorResponse) -> None:
    logger = get_logger().bind(
        path=request.url.path,
        method=request.method,
        status_code=envelope.status_code,
        error_code=envelope.error_code,
    )
    if envelope.status == ApiStatus.ERROR:
        logger.error("Request failed with server error", error=exc)
    else:
        logger.warning("Request failed", error_type=type(exc).__name__)


def _log_translation_failure(request: Request, error: Exception) -> None:
    get_logger().bind(path=request.url.path, method=request.method).error(
        "Error translation failed", error=error
    )
