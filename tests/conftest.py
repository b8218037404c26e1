from __future__ import annotations

import importlib
from pathlib import Path
import sys


import pytest


# Ensure the repository root (parent of ./tests) is importable during pytest collection.
# This avoids ModuleNotFoundError for imports like `import persistence...` under pytest import modes
# that don't automatically prepend the cwd/rootdir to sys.path.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


@pytest.fixture
def sandbox_documents(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """
    Point every configured path at a temp directory so tests never touch real ./data.
    """
    monkeypatch.setenv("PATH_POLICY", "fixed")
    monkeypatch.setenv("DOCUMENT_PATH", str(tmp_path / "data" / "document.json"))
    monkeypatch.setenv("DOCUMENT_ROOT", str(tmp_path / "data" / "documents"))
    monkeypatch.setenv("INDEX_PAGE", str(tmp_path / "static" / "index.html"))
    monkeypatch.setenv("ATOMIC_WRITES", "false")
    monkeypatch.setenv("DEBUG_LOG_REQUESTS", "true")
    return tmp_path


@pytest.fixture
def reload_endpoints(sandbox_documents: Path) -> Path:
    """
    Endpoints build the document store at import time; reload after sandboxing paths.
    """
    import endpoints.document_endpoints as document_endpoints

    importlib.reload(document_endpoints)
    return sandbox_documents


@pytest.fixture
def rooted_endpoints(monkeypatch: pytest.MonkeyPatch, sandbox_documents: Path) -> Path:
    monkeypatch.setenv("PATH_POLICY", "rooted")
    import endpoints.document_endpoints as document_endpoints

    importlib.reload(document_endpoints)
    return sandbox_documents
