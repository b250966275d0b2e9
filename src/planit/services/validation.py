"""Field checks run before any mutation.

Each check raises ``planit.errors.ValidationError`` with a specific error code
so the caller can show the matching message.
"""

import datetime as dt
import math
from typing import Any

from planit.errors import ErrorCode, NotAuthenticatedError, ValidationError
from planit.models import Category, Trip


def require_user(user_id: str | None) -> str:
    if not user_id or not user_id.strip():
        raise NotAuthenticatedError()
    return user_id


def require_text(value: str | None, code: ErrorCode, field: str) -> str:
    if value is not None and not isinstance(value, str):
        raise ValidationError(f"{field} must be text, got {type(value).__name__}", code=code)
    if value is None or not value.strip():
        raise ValidationError(f"{field} is required", code=code)
    return value.strip()


def optional_text(value: str | None, field: str) -> str | None:
    """Trimmed text, or None when missing or blank."""
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError(f"{field} must be text, got {type(value).__name__}")
    return value.strip() or None


def parse_date(value: Any, code: ErrorCode = ErrorCode.VALIDATION_ERROR) -> dt.date | None:
    """Accept a date or an ISO ``YYYY-MM-DD`` string. Blank means missing."""
    if value is None or value == "":
        return None
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, dt.date):
        return value
    try:
        return dt.date.fromisoformat(str(value))
    except ValueError as e:
        raise ValidationError(f"Invalid date {value!r}", code=code) from e


def parse_time(value: Any, code: ErrorCode = ErrorCode.MISSING_DATE_TIME) -> dt.time | None:
    """Accept a time or an ``HH:MM[:SS]`` 24-hour string. Blank means missing."""
    if value is None or value == "":
        return None
    if isinstance(value, dt.time):
        parsed = value
    else:
        try:
            parsed = dt.time.fromisoformat(str(value))
        except ValueError as e:
            raise ValidationError(f"Invalid time {value!r}", code=code) from e
    if parsed.tzinfo is not None:
        raise ValidationError(f"Time of day must not carry a UTC offset, got {value!r}", code=code)
    return parsed


def parse_amount(value: Any, code: ErrorCode) -> float | None:
    """Non-negative finite amount. Blank means missing."""
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        raise ValidationError(f"Invalid amount {value!r}", code=code)
    try:
        amount = float(value)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"Invalid amount {value!r}", code=code) from e
    if not math.isfinite(amount) or amount < 0:
        raise ValidationError(f"Amount must be a non-negative number, got {value!r}", code=code)
    return amount


def parse_category(value: Any) -> Category:
    try:
        return Category(value)
    except ValueError as e:
        raise ValidationError(f"Unknown category {value!r}", code=ErrorCode.INVALID_CATEGORY) from e


def validate_trip_fields(
    name: str | None,
    start_date: dt.date | None,
    end_date: dt.date | None,
    budget: float | None,
) -> str:
    """Return the trimmed trip name."""
    clean_name = require_text(name, ErrorCode.MISSING_NAME, "Trip name")
    if start_date is None or end_date is None:
        raise ValidationError("start_date and end_date are required", code=ErrorCode.MISSING_DATES)
    if end_date < start_date:
        raise ValidationError(
            f"end_date {end_date} is before start_date {start_date}",
            code=ErrorCode.INVALID_DATE_RANGE,
        )
    if budget is not None:
        parse_amount(budget, ErrorCode.INVALID_BUDGET)
    return clean_name


def validate_activity_fields(
    trip: Trip,
    title: str | None,
    date: dt.date | None,
    time: dt.time | None,
    estimated_cost: float | None,
) -> str:
    """Return the trimmed activity title."""
    clean_title = require_text(title, ErrorCode.MISSING_TITLE, "Activity title")
    if date is None or time is None:
        raise ValidationError("date and time are required", code=ErrorCode.MISSING_DATE_TIME)
    parse_time(time)
    if parse_amount(estimated_cost, ErrorCode.INVALID_COST) is None:
        raise ValidationError("estimated_cost is required", code=ErrorCode.INVALID_COST)
    if not trip.covers(date):
        raise ValidationError(
            f"{date} is outside trip {trip.id} ({trip.start_date} to {trip.end_date})",
            code=ErrorCode.DATE_OUTSIDE_TRIP,
        )
    return clean_title
