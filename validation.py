"""Request validation for the chatbot endpoint.

Provides a JSON Schema for the chat request body and a helper that turns an
inbound (method, raw body) pair into a ChatRequest or a rejection.
"""
import json
from typing import Optional

from jsonschema import validate, ValidationError

from errors import BadRequest, MethodNotAllowed
from providers.schema import ChatRequest


ALLOWED_METHOD = "POST"

CHAT_REQUEST_SCHEMA = {
    "type": "object",
    "required": ["message"],
    "properties": {
        "message": {"type": "string", "minLength": 1}
    }
}


def validate_chat_request(method: str, body: Optional[bytes]) -> ChatRequest:
    """Validate an inbound chat call.

    The method is checked before the body is looked at.

    Raises:
        MethodNotAllowed: method is anything but POST.
        BadRequest: body missing or unparsable, or ``message`` absent,
            not a string, or blank.

    Returns:
        ChatRequest with the trimmed message.
    """
    if (method or "").upper() != ALLOWED_METHOD:
        raise MethodNotAllowed()

    if not body:
        raise BadRequest()
    try:
        payload = json.loads(body)
    except ValueError:
        raise BadRequest(details="Body is not valid JSON")

    try:
        validate(instance=payload, schema=CHAT_REQUEST_SCHEMA)
    except ValidationError as exc:
        raise BadRequest(details=exc.message)

    message = payload["message"].strip()
    if not message:
        raise BadRequest()
    return ChatRequest(message=message)
