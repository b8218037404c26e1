from __future__ import annotations

from pathlib import Path
from typing import Protocol

from pydantic import BaseModel, ConfigDict, Field


class DocumentLocator(BaseModel):
    """
    Identifies the file a request concerns.

    Always carries a non-empty path, whether the caller supplied it or the
    server substituted its own.
    """

    model_config = ConfigDict(frozen=True)

    path: str = Field(min_length=1)


class PathResolver(Protocol):
    """
    Policy mapping a caller-supplied document key to a file on disk.

    The caller's key is advisory: a resolver may replace or reject it.
    """

    def locate(self, requested: str) -> DocumentLocator:
        """Turn the raw key from a request into a locator (may raise LocatorError)."""
        ...

    def resolve_path(self, locator: DocumentLocator) -> Path:
        """Return the absolute filesystem path for `locator` (may raise LocatorError)."""
        ...


class DocumentStore(Protocol):
    def locate(self, requested: str) -> DocumentLocator:
        ...

    def load(self, locator: DocumentLocator) -> str:
        """Return the full document text. Never returns empty content for a missing file."""
        ...

    def save(self, locator: DocumentLocator, content: str, *, companion: str | None = None) -> None:
        """Replace the document with `content` (last write wins)."""
        ...
