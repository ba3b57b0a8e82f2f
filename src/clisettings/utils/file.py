"""File utility functions."""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Final

logger: Final = logging.getLogger(__name__)


def ensure_directory_exists(directory: Path) -> None:
    """Create directory if it doesn't exist.

    Args:
        directory: Path to create
    """
    if not directory.exists():
        directory.mkdir(parents=True, exist_ok=True)
        logger.debug("Created directory: %s", directory)


def atomic_write_text(path: Path, text: str, encoding: str = "utf-8") -> None:
    """Replace the contents of ``path`` without exposing a partial file.

    The text goes to a temporary file in the same directory, which is then
    renamed over ``path``. The temporary file is removed if anything fails.

    Args:
        path: Target file
        text: New file contents
        encoding: Text encoding

    Raises:
        OSError: If the temporary file cannot be written or renamed
    """
    tmp_path: Path | None = None
    try:
        with tempfile.NamedTemporaryFile(
            "w",
            encoding=encoding,
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
        ) as temp:
            tmp_path = Path(temp.name)
            temp.write(text)
            temp.flush()
            os.fsync(temp.fileno())
        os.replace(tmp_path, path)
    except BaseException:
        if tmp_path is not None:
            tmp_path.unlink(missing_ok=True)
        raise
    logger.debug("Wrote %d bytes to %s", len(text), path)
