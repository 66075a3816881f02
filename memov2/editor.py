"""Opening memos in an external editor."""

from __future__ import annotations

import subprocess

EDITOR_COMMAND = "code"


class DefaultEditorOpener:
    """Opens a file in the editor, with the base directory as workspace folder."""

    def open(self, basedir: str, path: str) -> None:
        command = [EDITOR_COMMAND, path, "--folder-uri", basedir]
        try:
            subprocess.run(command, check=True)
        except (OSError, subprocess.CalledProcessError) as exc:
            raise RuntimeError(f"error opening editor: {exc}") from exc


DEO = DefaultEditorOpener()