"""Opening .bim inputs, compressed or not.

Compression is recognized by the gzip magic number rather than the file
name, so ``study.bim`` holding gzip data is read correctly too.
"""

import gzip
from pathlib import Path
from typing import IO

GZIP_MAGIC = b"\x1f\x8b"


def is_gzipped(filepath: Path) -> bool:
    """True if the file starts with the gzip magic number.

    Unreadable files are judged by their ``.gz`` suffix; opening them later
    reports the real error.
    """
    try:
        with open(filepath, "rb") as f:
            return f.read(len(GZIP_MAGIC)) == GZIP_MAGIC
    except OSError:
        return filepath.name.endswith(".gz")


def open_text(filepath: Path) -> IO[str]:
    """Open a plain or gzipped file for reading text.

    The returned handle is a context manager.

    Raises:
        OSError: If the file cannot be opened
    """
    opener = gzip.open if is_gzipped(filepath) else open
    return opener(filepath, "rt", encoding="utf-8")
