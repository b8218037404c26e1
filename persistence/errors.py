from __future__ import annotations


class DocumentStoreError(Exception):
    """Base class for failures raised by the document store."""


class DocumentNotFoundError(DocumentStoreError):
    def __init__(self, path: str):
        super().__init__(f"document not found: {path}")
        self.path = path


class DocumentIOError(DocumentStoreError):
    """Any read or write failure other than a missing file."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"{reason}: {path}")
        self.path = path
        self.reason = reason


class LocatorError(DocumentStoreError):
    """The requested document key cannot be mapped to a path under the active policy."""
