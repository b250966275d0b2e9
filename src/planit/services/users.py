"""User directory: registration and sign-in lookup by email."""

import logging

from planit.db import RecordStore
from planit.errors import ErrorCode, NotFoundError, ValidationError
from planit.models import User
from planit.services.codes import new_id
from planit.services.repository import load_users, save_users
from planit.services.validation import require_text

logger = logging.getLogger(__name__)


def _same_email(a: str, b: str) -> bool:
    return a.strip().lower() == b.strip().lower()


def register_user(store: RecordStore, email: str | None, name: str | None) -> User:
    clean_name = require_text(name, ErrorCode.MISSING_NAME, "Name")
    clean_email = require_text(email, ErrorCode.MISSING_EMAIL, "Email")

    users = load_users(store)
    if any(_same_email(u.email, clean_email) for u in users):
        raise ValidationError(f"Email {clean_email} already registered", code=ErrorCode.EMAIL_TAKEN)

    user = User(id=new_id(), email=clean_email, name=clean_name)
    save_users(store, [*users, user])
    logger.info("Registered user %s", user.id)
    return user


def find_user_by_email(store: RecordStore, email: str | None) -> User:
    clean_email = require_text(email, ErrorCode.MISSING_EMAIL, "Email")
    for user in load_users(store):
        if _same_email(user.email, clean_email):
            return user
    raise NotFoundError("No user with that email", code=ErrorCode.USER_NOT_FOUND)


def get_user(store: RecordStore, user_id: str) -> User:
    for user in load_users(store):
        if user.id == user_id:
            return user
    raise NotFoundError(f"User {user_id} not found", code=ErrorCode.USER_NOT_FOUND)
