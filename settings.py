from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from persistence.paths import default_document_path, default_document_root, default_index_page


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _env_path(name: str, default: Path) -> Path:
    raw = (os.getenv(name) or "").strip()
    return Path(raw).expanduser() if raw else default


@dataclass(frozen=True)
class Settings:
    # Document location
    path_policy: str
    document_path: Path
    document_root: Path

    # Writes
    atomic_writes: bool

    # Editor entry page served at "/"
    index_page: Path

    # Debug
    debug_log_requests: bool


def get_settings() -> Settings:
    # "fixed": one server-chosen file, client paths ignored.
    # "rooted": client path is a key under DOCUMENT_ROOT.
    path_policy = os.getenv("PATH_POLICY", "fixed").strip().lower() or "fixed"

    document_path = _env_path("DOCUMENT_PATH", default_document_path())
    document_root = _env_path("DOCUMENT_ROOT", default_document_root())

    # Off by default: a failed save may leave a partially written file.
    atomic_writes = _env_bool("ATOMIC_WRITES", False)

    index_page = _env_path("INDEX_PAGE", default_index_page())

    debug_log_requests = _env_bool("DEBUG_LOG_REQUESTS", True)

    return Settings(
        path_policy=path_policy,
        document_path=document_path,
        document_root=document_root,
        atomic_writes=atomic_writes,
        index_page=index_page,
        debug_log_requests=debug_log_requests,
    )
