from __future__ import annotations

from .disk_store import DiskDocumentStore
from .errors import DocumentIOError, DocumentNotFoundError, DocumentStoreError, LocatorError
from .interfaces import DocumentLocator, DocumentStore, PathResolver
from .repositories import AsyncDiskDocumentStore, AsyncDocumentStore, build_document_store, build_resolver
from .resolvers import FixedDocumentResolver, RootedDocumentResolver

__all__ = [
    "DocumentLocator",
    "DocumentStore",
    "PathResolver",
    "DiskDocumentStore",
    "AsyncDocumentStore",
    "AsyncDiskDocumentStore",
    "FixedDocumentResolver",
    "RootedDocumentResolver",
    "build_document_store",
    "build_resolver",
    "DocumentStoreError",
    "DocumentNotFoundError",
    "DocumentIOError",
    "LocatorError",
]
