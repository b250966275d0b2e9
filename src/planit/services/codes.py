"""Record identifiers, trip codes and invite links."""

import secrets
import string
import uuid
from collections.abc import Iterable

from planit.errors import ErrorCode, PlanitError

TRIP_CODE_LENGTH = 6
TRIP_CODE_ALPHABET = string.ascii_uppercase + string.digits
INVITE_PATH = "/join/"
MAX_CODE_ATTEMPTS = 100


def new_id() -> str:
    return uuid.uuid4().hex


def normalize_trip_code(code: str) -> str:
    return code.strip().upper()


def generate_trip_code(length: int = TRIP_CODE_LENGTH) -> str:
    return "".join(secrets.choice(TRIP_CODE_ALPHABET) for _ in range(length))


def unique_trip_code(existing_codes: Iterable[str]) -> str:
    """Generate a code that collides with none of ``existing_codes``, ignoring case."""
    taken = {normalize_trip_code(code) for code in existing_codes}
    for _ in range(MAX_CODE_ATTEMPTS):
        code = generate_trip_code()
        if code not in taken:
            return code
    raise PlanitError(
        f"No free trip code after {MAX_CODE_ATTEMPTS} attempts ({len(taken)} codes taken)",
        code=ErrorCode.INTERNAL_ERROR,
    )


def invite_path(code: str) -> str:
    return f"{INVITE_PATH}{code}"


def invite_link(base_url: str, code: str) -> str:
    return base_url.rstrip("/") + invite_path(code)


def invite_message(trip_name: str, code: str) -> str:
    return f'You\'re invited to join "{trip_name}" on Planit! Use code: {code}'
