from __future__ import annotations

import logging
from pathlib import Path

from text_store import read_text, write_text

from .errors import DocumentIOError, DocumentNotFoundError
from .interfaces import DocumentLocator, DocumentStore, PathResolver
from .paths import companion_path

logger = logging.getLogger(__name__)


class DiskDocumentStore(DocumentStore):
    """
    Stores document text on disk at the path chosen by a PathResolver.

    - Every load re-reads the file; nothing is cached.
    - Saves replace the whole file. They are not atomic unless
      `atomic_writes` is set, and there is no locking: concurrent saves to
      the same path race and the last one to finish wins.
    """

    def __init__(self, resolver: PathResolver, *, atomic_writes: bool = False):
        self._resolver = resolver
        self._atomic_writes = atomic_writes

    @property
    def resolver(self) -> PathResolver:
        return self._resolver

    def locate(self, requested: str) -> DocumentLocator:
        return self._resolver.locate(requested)

    def path_for(self, locator: DocumentLocator) -> Path:
        return self._resolver.resolve_path(locator)

    def load(self, locator: DocumentLocator) -> str:
        path = self.path_for(locator)
        try:
            content = read_text(path)
        except FileNotFoundError as e:
            raise DocumentNotFoundError(str(path)) from e
        except UnicodeDecodeError as e:
            logger.warning("DOCUMENT LOAD: %s is not valid UTF-8: %r", path, e)
            raise DocumentIOError(str(path), "document is not valid UTF-8 text") from e
        except OSError as e:
            logger.warning("DOCUMENT LOAD: failed to read %s: %r", path, e)
            raise DocumentIOError(str(path), f"failed to read document ({e.strerror or e})") from e
        logger.debug("DOCUMENT LOAD: %s (%d chars)", path, len(content))
        return content

    def save(self, locator: DocumentLocator, content: str, *, companion: str | None = None) -> None:
        path = self.path_for(locator)
        self._write(path, content)
        if companion:
            self._write(companion_path(path), companion)
        logger.debug("DOCUMENT SAVE: %s (%d chars, companion=%s)", path, len(content), bool(companion))

    def _write(self, path: Path, content: str) -> None:
        try:
            write_text(path, content, atomic=self._atomic_writes)
        except UnicodeEncodeError as e:
            logger.warning("DOCUMENT SAVE: content for %s is not encodable as UTF-8: %r", path, e)
            raise DocumentIOError(str(path), "content is not encodable as UTF-8") from e
        except OSError as e:
            logger.warning("DOCUMENT SAVE: failed to write %s: %r", path, e)
            raise DocumentIOError(str(path), f"failed to write document ({e.strerror or e})") from e
