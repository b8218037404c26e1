from __future__ import annotations

from .codec import DecodeError, decode, encode, encode_error
from .handlers import HandlerOutcome, OutcomeStatus, handle_load, handle_save
from .messages import ErrorResponse, LoadFileRequest, LoadFileResponse, SaveFileRequest, SaveFileResponse

__all__ = [
    "DecodeError",
    "decode",
    "encode",
    "encode_error",
    "HandlerOutcome",
    "OutcomeStatus",
    "handle_load",
    "handle_save",
    "ErrorResponse",
    "LoadFileRequest",
    "LoadFileResponse",
    "SaveFileRequest",
    "SaveFileResponse",
]
