"""Request parsing and error translation shared by the API Gateway handlers."""

import functools
import json
import logging
from collections.abc import Callable
from typing import Any

from planit.errors import (
    USER_MESSAGES,
    ErrorCode,
    NotAuthenticatedError,
    NotFoundError,
    PermissionDeniedError,
    PlanitError,
    ValidationError,
)

logger = logging.getLogger(__name__)

Handler = Callable[[dict[str, Any], object], dict[str, Any]]

_STATUS_CODES: list[tuple[type[PlanitError], int]] = [
    (ValidationError, 400),
    (NotAuthenticatedError, 401),
    (PermissionDeniedError, 403),
    (NotFoundError, 404),
]


def current_user_id(event: dict[str, Any]) -> str | None:
    """User id placed on the request by the authorizer, if any."""
    authorizer = (event.get("requestContext") or {}).get("authorizer") or {}
    return authorizer.get("userId")


def parse_body(event: dict[str, Any]) -> dict[str, Any]:
    try:
        body = json.loads(event.get("body") or "{}")
    except json.JSONDecodeError as e:
        raise ValidationError(f"Body is not valid JSON: {e}", code=ErrorCode.INVALID_REQUEST) from e
    if not isinstance(body, dict):
        raise ValidationError("Body must be a JSON object", code=ErrorCode.INVALID_REQUEST)
    return body


def path_param(event: dict[str, Any], name: str) -> str:
    value = (event.get("pathParameters") or {}).get(name)
    if not value:
        raise ValidationError(f"Missing path parameter {name}", code=ErrorCode.INVALID_REQUEST)
    return value


def json_response(status_code: int, body: Any) -> dict[str, Any]:
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body),
    }


def error_response(error: PlanitError) -> dict[str, Any]:
    status_code = next((status for cls, status in _STATUS_CODES if isinstance(error, cls)), 500)
    return json_response(status_code, {"error": error.code.value, "message": error.user_message})


def api_handler(func: Handler) -> Handler:
    """Turn Planit errors into JSON error responses and log anything unexpected."""

    @functools.wraps(func)
    def wrapper(event: dict[str, Any], context: object) -> dict[str, Any]:
        try:
            return func(event, context)
        except PlanitError as e:
            logger.info("%s failed: %s (%s)", func.__name__, e.message, e.code.value)
            return error_response(e)
        except Exception:
            logger.exception("Unhandled error in %s", func.__name__)
            return json_response(
                500,
                {"error": ErrorCode.INTERNAL_ERROR.value, "message": USER_MESSAGES[ErrorCode.INTERNAL_ERROR]},
            )

    return wrapper
