from __future__ import annotations

import uuid
from pathlib import Path


def read_text(path: Path) -> str:
    """
    Read a whole file as UTF-8 text.

    Bytes are decoded as-is (no newline translation), so what was written
    comes back unchanged. Errors propagate: FileNotFoundError for a missing
    file, other OSError subclasses for I/O faults, UnicodeDecodeError for
    content that is not UTF-8.
    """
    return path.read_bytes().decode("utf-8")


def write_text(path: Path, content: str, *, atomic: bool = False) -> None:
    """
    Replace the file at `path` with `content` encoded as UTF-8.

    Missing parent directories are created. With `atomic=True` each call
    writes to its own uniquely named temp file in the same directory and
    then moves it into place, so overlapping writers never share a temp
    file and the target always holds one complete payload. Otherwise the
    target is truncated and written directly, which can leave a partial
    file if the write fails halfway.
    """
    data = content.encode("utf-8")
    path.parent.mkdir(parents=True, exist_ok=True)
    if not atomic:
        path.write_bytes(data)
        return
    tmp_path = path.with_name(f".{path.name}.{uuid.uuid4().hex}.tmp")
    try:
        with tmp_path.open("xb") as f:
            f.write(data)
        tmp_path.replace(path)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise
