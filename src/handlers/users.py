"""Account endpoints backing the sign-up and sign-in dialog."""

from typing import Any

from handlers.common import api_handler, json_response, parse_body
from planit.db import get_record_store
from planit.services.users import find_user_by_email, register_user


@api_handler
def register_handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    body = parse_body(event)
    user = register_user(get_record_store(), body.get("email"), body.get("name"))
    return json_response(201, {"user": user.to_record()})


@api_handler
def sign_in_handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    body = parse_body(event)
    user = find_user_by_email(get_record_store(), body.get("email"))
    return json_response(200, {"user": user.to_record()})
