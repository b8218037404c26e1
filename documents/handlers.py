from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from persistence.errors import DocumentIOError, DocumentNotFoundError, DocumentStoreError, LocatorError
from persistence.repositories import AsyncDocumentStore

from .codec import DecodeError, decode, encode, encode_error
from .messages import LoadFileRequest, LoadFileResponse, SaveFileRequest, SaveFileResponse

logger = logging.getLogger(__name__)


class OutcomeStatus(str, Enum):
    OK = "ok"
    BAD_REQUEST = "bad_request"
    NOT_FOUND = "not_found"
    FAILED = "failed"


@dataclass(frozen=True)
class HandlerOutcome:
    """
    Result of one request, handed back to the transport layer as-is.

    `body` is already encoded: the response message on success, an
    ErrorResponse otherwise.
    """

    status: OutcomeStatus
    body: bytes

    @property
    def ok(self) -> bool:
        return self.status is OutcomeStatus.OK


def _failure(status: OutcomeStatus, code: str, exc: Exception) -> HandlerOutcome:
    return HandlerOutcome(status=status, body=encode_error(code, str(exc)))


def _store_failure(op: str, exc: DocumentStoreError) -> HandlerOutcome:
    if isinstance(exc, LocatorError):
        logger.info("%s: rejected locator: %s", op, exc)
        return _failure(OutcomeStatus.BAD_REQUEST, "invalid_locator", exc)
    if isinstance(exc, DocumentNotFoundError):
        logger.info("%s: %s", op, exc)
        return _failure(OutcomeStatus.NOT_FOUND, "not_found", exc)
    if isinstance(exc, DocumentIOError):
        return _failure(OutcomeStatus.FAILED, "io_error", exc)
    return _failure(OutcomeStatus.FAILED, "store_error", exc)


async def handle_load(raw: bytes, store: AsyncDocumentStore) -> HandlerOutcome:
    try:
        request = decode(raw, LoadFileRequest)
    except DecodeError as e:
        logger.info("LOAD FILE: bad request body: %s", e)
        return _failure(OutcomeStatus.BAD_REQUEST, "invalid_request", e)

    try:
        locator = store.locate(request.path)
        content = await store.load(locator)
    except DocumentStoreError as e:
        return _store_failure("LOAD FILE", e)

    return HandlerOutcome(status=OutcomeStatus.OK, body=encode(LoadFileResponse(json_content=content)))


async def handle_save(raw: bytes, store: AsyncDocumentStore) -> HandlerOutcome:
    try:
        request = decode(raw, SaveFileRequest)
    except DecodeError as e:
        logger.info("SAVE FILE: bad request body: %s", e)
        return _failure(OutcomeStatus.BAD_REQUEST, "invalid_request", e)

    try:
        locator = store.locate(request.path)
        await store.save(locator, request.json_content, companion=request.elm_content or None)
    except DocumentStoreError as e:
        return _store_failure("SAVE FILE", e)

    return HandlerOutcome(status=OutcomeStatus.OK, body=encode(SaveFileResponse()))
