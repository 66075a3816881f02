"""Storage of todo lists and weekly reports, and the set of repositories."""

from __future__ import annotations

import os
from dataclasses import dataclass

from . import fsutil
from .config import TomlConfig
from .domain import MarkdownFile, TodoFile, WeeklyFile
from .memo_repository import MemoRepository


def _save(directory: str, file: MarkdownFile, truncate: bool) -> None:
    """Write ``file`` into ``directory`` unless it exists and ``truncate`` is false."""
    path = os.path.join(directory, file.file_name())
    if fsutil.exists(path) and not truncate:
        return
    fsutil.write_file_stream(path, truncate, lambda stream: stream.write(file.data()))
    print(f"File saved: {path}")


class TodoRepository:
    """Daily todo files kept in one directory."""

    def __init__(self, directory: str) -> None:
        self.dir = directory

    def save(self, file: TodoFile, truncate: bool) -> None:
        """Write the todo file; an existing file is kept unless ``truncate`` is true."""
        _save(self.dir, file, truncate)


class WeeklyRepository:
    """The weekly report kept in one directory."""

    def __init__(self, directory: str) -> None:
        self.dir = directory

    def save(self, file: WeeklyFile, truncate: bool) -> None:
        """Write the report; an existing file is kept unless ``truncate`` is true."""
        _save(self.dir, file, truncate)


@dataclass
class Repositories:
    """All repositories built from one configuration."""

    memo: MemoRepository
    memo_weekly: WeeklyRepository
    todo: TodoRepository
    todo_weekly: WeeklyRepository


def new_repositories(config: TomlConfig) -> Repositories:
    memos_dir = config.memos_dir()
    todos_dir = config.todos_dir()
    return Repositories(
        memo=MemoRepository(memos_dir),
        memo_weekly=WeeklyRepository(memos_dir),
        todo=TodoRepository(todos_dir),
        todo_weekly=WeeklyRepository(todos_dir),
    )