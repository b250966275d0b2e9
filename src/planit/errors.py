"""
Custom exceptions and error handling for Planit.

Defines application-specific exceptions with error codes for consistent
error handling across services and Lambda handlers.

Usage:
    from planit.errors import ValidationError, ErrorCode

    raise ValidationError("end_date before start_date", code=ErrorCode.INVALID_DATE_RANGE)
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Error codes for client-facing error messages."""

    # Authentication errors
    NOT_AUTHENTICATED = "NOT_AUTHENTICATED"

    # Permission errors
    PERMISSION_DENIED = "PERMISSION_DENIED"
    NOT_TRIP_OWNER = "NOT_TRIP_OWNER"
    NOT_A_PARTICIPANT = "NOT_A_PARTICIPANT"

    # Lookup errors
    TRIP_NOT_FOUND = "TRIP_NOT_FOUND"
    TRIP_CODE_NOT_FOUND = "TRIP_CODE_NOT_FOUND"
    ACTIVITY_NOT_FOUND = "ACTIVITY_NOT_FOUND"
    USER_NOT_FOUND = "USER_NOT_FOUND"

    # Validation errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    MISSING_NAME = "MISSING_NAME"
    MISSING_EMAIL = "MISSING_EMAIL"
    EMAIL_TAKEN = "EMAIL_TAKEN"
    MISSING_DATES = "MISSING_DATES"
    INVALID_DATE_RANGE = "INVALID_DATE_RANGE"
    INVALID_BUDGET = "INVALID_BUDGET"
    MISSING_TITLE = "MISSING_TITLE"
    MISSING_DATE_TIME = "MISSING_DATE_TIME"
    INVALID_COST = "INVALID_COST"
    INVALID_CATEGORY = "INVALID_CATEGORY"
    DATE_OUTSIDE_TRIP = "DATE_OUTSIDE_TRIP"
    MISSING_TRIP_CODE = "MISSING_TRIP_CODE"
    INVALID_PARTICIPANT_COUNT = "INVALID_PARTICIPANT_COUNT"
    INVALID_REQUEST = "INVALID_REQUEST"

    # Informational
    ALREADY_JOINED = "ALREADY_JOINED"

    # System errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


USER_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.NOT_AUTHENTICATED: "You need to sign in to do that.",
    ErrorCode.PERMISSION_DENIED: "You don't have permission to do that.",
    ErrorCode.NOT_TRIP_OWNER: "Only the trip creator can delete this trip.",
    ErrorCode.NOT_A_PARTICIPANT: "Join this trip before adding activities or votes.",
    ErrorCode.TRIP_NOT_FOUND: "Trip not found.",
    ErrorCode.TRIP_CODE_NOT_FOUND: "No trip found with that code.",
    ErrorCode.ACTIVITY_NOT_FOUND: "Activity not found.",
    ErrorCode.USER_NOT_FOUND: "No account found with this email.",
    ErrorCode.VALIDATION_ERROR: "Your request contains invalid information. Please check and try again.",
    ErrorCode.MISSING_NAME: "Please enter a name.",
    ErrorCode.MISSING_EMAIL: "Please enter an email address.",
    ErrorCode.EMAIL_TAKEN: "User already exists with this email.",
    ErrorCode.MISSING_DATES: "Please select start and end dates.",
    ErrorCode.INVALID_DATE_RANGE: "End date must be after start date.",
    ErrorCode.INVALID_BUDGET: "Please enter a valid budget.",
    ErrorCode.MISSING_TITLE: "Please enter an activity title.",
    ErrorCode.MISSING_DATE_TIME: "Please select date and time.",
    ErrorCode.INVALID_COST: "Please enter a valid cost.",
    ErrorCode.INVALID_CATEGORY: "Please choose Adventure, Food, Sightseeing or Other.",
    ErrorCode.DATE_OUTSIDE_TRIP: "Activity date must be within the trip dates.",
    ErrorCode.MISSING_TRIP_CODE: "Please enter a trip code.",
    ErrorCode.INVALID_PARTICIPANT_COUNT: "A trip needs at least one participant.",
    ErrorCode.INVALID_REQUEST: "Invalid request format. Please try again.",
    ErrorCode.ALREADY_JOINED: "You're already a participant in this trip.",
    ErrorCode.INTERNAL_ERROR: "Something went wrong. Please try again.",
}


class PlanitError(Exception):
    """Base exception for all Planit errors."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.INTERNAL_ERROR):
        self.message = message
        self.code = code
        super().__init__(message)

    @property
    def user_message(self) -> str:
        return USER_MESSAGES.get(self.code, USER_MESSAGES[ErrorCode.INTERNAL_ERROR])


class ValidationError(PlanitError):
    """Malformed or out-of-range input."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.VALIDATION_ERROR):
        super().__init__(message, code)


class NotFoundError(PlanitError):
    """Referenced trip, activity, user or trip code does not exist."""

    pass


class PermissionDeniedError(PlanitError):
    """Actor lacks the rights for the operation."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.PERMISSION_DENIED):
        super().__init__(message, code)


class NotAuthenticatedError(PlanitError):
    """No current user for an action that requires one."""

    def __init__(self, message: str = "No current user", code: ErrorCode = ErrorCode.NOT_AUTHENTICATED):
        super().__init__(message, code)
