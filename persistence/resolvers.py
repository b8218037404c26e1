from __future__ import annotations

import logging
from pathlib import Path

from .errors import LocatorError
from .interfaces import DocumentLocator
from .paths import COMPANION_SUFFIX

logger = logging.getLogger(__name__)


class FixedDocumentResolver:
    """
    Single-document policy: every request maps to one server-chosen file.

    Whatever path the caller sends is ignored. Client-controlled filesystem
    paths are never opened.
    """

    def __init__(self, path: Path):
        self._path = path.expanduser().resolve()

    @property
    def path(self) -> Path:
        return self._path

    def locate(self, requested: str) -> DocumentLocator:
        if requested and requested != str(self._path):
            logger.debug("DOCUMENT LOCATE: ignoring client path %r, using %s", requested, self._path)
        return DocumentLocator(path=str(self._path))

    def resolve_path(self, locator: DocumentLocator) -> Path:
        return self._path


class RootedDocumentResolver:
    """
    Multi-document policy: the caller's path is a key relative to `root`.

    Leading slashes are dropped ("/doc/a" -> <root>/doc/a). Keys that are
    empty, contain a NUL byte, resolve outside the root, or end in the
    companion suffix are rejected with LocatorError.
    """

    def __init__(self, root: Path):
        self._root = root.expanduser().resolve()

    @property
    def root(self) -> Path:
        return self._root

    def locate(self, requested: str) -> DocumentLocator:
        key = (requested or "").strip()
        if not key.strip("/"):
            raise LocatorError("document path is required")
        locator = DocumentLocator(path=key)
        # Reject escapes here so bad keys fail before any I/O.
        self.resolve_path(locator)
        return locator

    def resolve_path(self, locator: DocumentLocator) -> Path:
        rel = locator.path.lstrip("/")
        if "\x00" in rel:
            raise LocatorError("document path contains a NUL byte")
        try:
            candidate = (self._root / rel).resolve()
        except (ValueError, OSError) as e:
            raise LocatorError(f"document path is not usable: {locator.path!r} ({e})") from e
        if candidate == self._root or not candidate.is_relative_to(self._root):
            raise LocatorError(f"document path escapes the document root: {locator.path!r}")
        # Names ending in the companion suffix are reserved for companion files.
        if candidate.name.lower().endswith(COMPANION_SUFFIX):
            raise LocatorError(f"document path may not end in {COMPANION_SUFFIX!r}: {locator.path!r}")
        return candidate
