"""Local file storage helpers."""

import os
import tempfile
from pathlib import Path


def read(path: Path) -> str | None:
    """Read file contents, or None if doesn't exist."""
    if not path.exists():
        return None
    return path.read_text(encoding="utf-8")


def write_atomic(path: Path, data: str) -> None:
    """Replace the file with data in a single rename, creating parent dirs if needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as fp:
            fp.write(data)
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise
