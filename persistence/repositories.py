from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Protocol

from .disk_store import DiskDocumentStore
from .interfaces import DocumentLocator, PathResolver
from .resolvers import FixedDocumentResolver, RootedDocumentResolver

if TYPE_CHECKING:
    from settings import Settings

PATH_POLICIES = ("fixed", "rooted")


class AsyncDocumentStore(Protocol):
    def locate(self, requested: str) -> DocumentLocator: ...

    async def load(self, locator: DocumentLocator) -> str: ...
    async def save(self, locator: DocumentLocator, content: str, *, companion: str | None = None) -> None: ...


class AsyncDiskDocumentStore(AsyncDocumentStore):
    """
    Async wrapper around the disk-backed document store.
    Uses asyncio.to_thread to avoid blocking the event loop on file I/O.

    Once started, a read or write runs to completion even if the awaiting
    request is cancelled.
    """

    def __init__(self, store: DiskDocumentStore) -> None:
        self._store = store

    @property
    def store(self) -> DiskDocumentStore:
        return self._store

    def locate(self, requested: str) -> DocumentLocator:
        return self._store.locate(requested)

    async def load(self, locator: DocumentLocator) -> str:
        return await asyncio.to_thread(self._store.load, locator)

    async def save(self, locator: DocumentLocator, content: str, *, companion: str | None = None) -> None:
        await asyncio.to_thread(self._store.save, locator, content, companion=companion)


def build_resolver(settings: Settings) -> PathResolver:
    if settings.path_policy == "fixed":
        return FixedDocumentResolver(settings.document_path)
    if settings.path_policy == "rooted":
        return RootedDocumentResolver(settings.document_root)
    raise ValueError(f"unknown PATH_POLICY {settings.path_policy!r} (expected one of {', '.join(PATH_POLICIES)})")


def build_document_store(settings: Settings) -> AsyncDiskDocumentStore:
    store = DiskDocumentStore(build_resolver(settings), atomic_writes=settings.atomic_writes)
    return AsyncDiskDocumentStore(store)
