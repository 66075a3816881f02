"""Storage of memo files under their category directories."""

from __future__ import annotations

import os

from . import fsutil
from .domain import MemoFile

_EMPTY_DIRECTORY_PASSES = 10


def _join(*parts: str) -> str:
    kept = [part for part in parts if part]
    if not kept:
        return ""
    return os.path.normpath(os.path.join(*kept))


class MemoRepository:
    """Memo files kept below one memos directory."""

    def __init__(self, directory: str) -> None:
        self.dir = directory

    def save(self, file: MemoFile, truncate: bool) -> None:
        """Write the memo to its category directory.

        An existing file is left alone unless ``truncate`` is true.
        """
        location = _join(self.dir, file.location())
        fsutil.ensure_dir(location)

        path = _join(location, file.file_name())
        if fsutil.exists(path) and not truncate:
            return
        fsutil.write_file_stream(path, truncate, lambda stream: stream.write(file.data()))
        print(f"File saved: {path}")

    def remove_empty_directories(self) -> None:
        """Remove empty directories below the memos directory, repeating a few passes."""
        for _ in range(_EMPTY_DIRECTORY_PASSES):
            if self._remove_empty_directories_once() == 0:
                break

    def _remove_empty_directories_once(self) -> int:
        return self._remove_empty_below(self.dir)

    def _remove_empty_below(self, directory: str) -> int:
        removed = 0
        for name in sorted(os.listdir(directory)):
            path = os.path.join(directory, name)
            if not os.path.isdir(path) or os.path.islink(path):
                continue
            children = os.listdir(path)
            if not children:
                try:
                    os.rmdir(path)
                except OSError as exc:
                    raise OSError(f"failed to remove empty directory {path}: {exc}") from exc
                removed += 1
                print(f"Removed empty directory: {path}")
            else:
                removed += self._remove_empty_below(path)
        return removed