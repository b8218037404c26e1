from __future__ import annotations

from typing import TypeVar

from pydantic import ValidationError

from .messages import ErrorResponse, WireMessage

M = TypeVar("M", bound=WireMessage)


class DecodeError(ValueError):
    """Raised when a request body is not a structurally valid message."""


def decode(raw: bytes, model: type[M]) -> M:
    """
    Parse a JSON request body into `model`.

    The body must be UTF-8 JSON whose top level is an object and whose known
    fields are strings (or null). Anything else raises DecodeError; missing
    fields do not.
    """
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise DecodeError(f"request body is not valid UTF-8: {e.reason}") from e
    try:
        return model.model_validate_json(text)
    except ValidationError as e:
        first = e.errors()[0] if e.error_count() else {}
        where = ".".join(str(p) for p in first.get("loc", ()))
        msg = first.get("msg", "invalid request body")
        raise DecodeError(f"{model.__name__}: {where + ': ' if where else ''}{msg}") from e


def encode(message: WireMessage) -> bytes:
    return message.model_dump_json().encode("utf-8")


def encode_error(code: str, detail: str) -> bytes:
    return encode(ErrorResponse(error=code, detail=detail))
