"""Small filesystem helpers shared by the repositories and configuration."""

from __future__ import annotations

import os
from collections.abc import Callable
from typing import BinaryIO


def exists(path: str) -> bool:
    """Return True if a file or directory exists at ``path``.

    Any error while inspecting the path is treated as "does not exist".
    """
    try:
        os.stat(path)
    except (OSError, ValueError):
        return False
    return True


def ensure_dir(path: str) -> None:
    """Create ``path`` and its parents if they are missing."""
    if not path or exists(path):
        return
    os.makedirs(path, mode=0o755, exist_ok=True)


def write_file_stream(
    path: str, truncate: bool, write: Callable[[BinaryIO], object]
) -> None:
    """Create (or truncate) ``path`` and let ``write`` stream bytes into it.

    When ``truncate`` is false and the file already exists, nothing is
    written. The parent directory is created if needed.
    """
    if not path:
        raise ValueError("path is empty")

    if not truncate and exists(path):
        return

    ensure_dir(os.path.dirname(path))

    with open(path, "wb") as stream:
        write(stream)