from __future__ import annotations

from pathlib import Path

COMPANION_SUFFIX = ".elm"


def project_root() -> Path:
    # persistence/paths.py -> persistence -> project root
    return Path(__file__).resolve().parents[1]


def default_document_path() -> Path:
    return project_root() / "data" / "document.json"


def default_document_root() -> Path:
    return project_root() / "data" / "documents"


def default_index_page() -> Path:
    return project_root() / "static" / "index.html"


def companion_path(document: Path, suffix: str = COMPANION_SUFFIX) -> Path:
    """
    Sibling file holding rendered source for `document`: its full name plus `suffix`.

    document.json -> document.json.elm. Distinct documents always get
    distinct companions.
    """
    return document.with_name(document.name + suffix)
