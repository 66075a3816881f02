import os
from datetime import datetime

from memov2.config import TomlConfig
from memov2.domain import new_todos_file, new_weekly
from memov2.markdown import HeadingBlock
from memov2.repository import (
    Repositories,
    TodoRepository,
    WeeklyRepository,
    new_repositories,
)


def test_todo_save_writes_file(tmp_path):
    repo = TodoRepository(str(tmp_path))
    todo = new_todos_file(datetime(2023, 10, 1))
    repo.save(todo, True)

    path = tmp_path / todo.file_name()
    assert path.read_bytes() == todo.data()
    assert todo.file_name() == "20231001Sun_todos.md"


def test_todo_save_prints_path(tmp_path, capsys):
    repo = TodoRepository(str(tmp_path))
    todo = new_todos_file(datetime(2023, 10, 1))
    repo.save(todo, False)
    out = capsys.readouterr().out
    assert out == f"File saved: {os.path.join(str(tmp_path), todo.file_name())}\n"


def test_todo_save_keeps_existing_without_truncate(tmp_path):
    repo = TodoRepository(str(tmp_path))
    todo = new_todos_file(datetime(2023, 10, 1))
    repo.save(todo, True)
    original = todo.data()

    todo.heading_blocks = [HeadingBlock(heading_text="later", level=2)]
    repo.save(todo, False)
    assert (tmp_path / todo.file_name()).read_bytes() == original


def test_todo_save_overwrites_with_truncate(tmp_path):
    repo = TodoRepository(str(tmp_path))
    todo = new_todos_file(datetime(2023, 10, 1))
    repo.save(todo, True)

    todo.heading_blocks = [HeadingBlock(heading_text="later", level=2, content_text="x")]
    repo.save(todo, True)
    assert (tmp_path / todo.file_name()).read_bytes() == todo.data()


def test_todo_save_creates_missing_directory(tmp_path):
    target = tmp_path / "nested" / "todos"
    repo = TodoRepository(str(target))
    todo = new_todos_file(datetime(2024, 1, 15))
    repo.save(todo, False)
    assert (target / todo.file_name()).read_bytes() == todo.data()


def test_weekly_save_and_keep(tmp_path):
    repo = WeeklyRepository(str(tmp_path))
    weekly = new_weekly()
    weekly.heading_blocks = [HeadingBlock(heading_text="first", level=2)]
    repo.save(weekly, False)
    first = weekly.data()

    weekly.heading_blocks = [HeadingBlock(heading_text="second", level=2)]
    repo.save(weekly, False)
    path = tmp_path / weekly.file_name()
    assert path.read_bytes() == first

    repo.save(weekly, True)
    assert path.read_bytes() == weekly.data()


def test_new_repositories_uses_config_dirs(tmp_path):
    config = TomlConfig(
        base_dir=str(tmp_path),
        todos_folder_name="todos",
        memos_folder_name="memos",
        todos_days_to_seek=10,
    )
    repos = new_repositories(config)
    assert isinstance(repos, Repositories)
    assert repos.memo.dir == config.memos_dir()
    assert repos.memo_weekly.dir == config.memos_dir()
    assert repos.todo.dir == config.todos_dir()
    assert repos.todo_weekly.dir == config.todos_dir()