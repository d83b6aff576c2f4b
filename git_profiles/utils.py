"""Shared utility functions."""

import os
import tempfile
from pathlib import Path


def atomic_write_text(text: str, file_path: Path) -> None:
    """Write text atomically using temp file + rename.

    Ensures data durability with fsync and cross-platform atomic rename.

    Args:
        text: Full file contents to write.
        file_path: Target file path.
    """
    dir_path = file_path.parent
    dir_path.mkdir(parents=True, exist_ok=True)

    fd, tmp_path = tempfile.mkstemp(suffix=".tmp", dir=dir_path)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
            f.write(text)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_path, file_path)
    except Exception:
        try:
            os.unlink(tmp_path)
        except OSError:
            pass
        raise


def is_blank(value: str | None) -> bool:
    """True for None, empty, or whitespace-only strings."""
    return value is None or not value.strip()


def has_line_break(value: str) -> bool:
    """True if the string would be split across lines by str.splitlines."""
    return "".join(value.splitlines()) != value
