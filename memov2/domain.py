"""Memo, todo and weekly report files and their markdown form."""

from __future__ import annotations

import abc
import os
import re
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from .markdown import HeadingBlock

FILE_SEPARATOR = "_"
FILE_FILLER = "-"
FILE_EXTENSION = ".md"

FILE_NAME_DATE_LAYOUT_MEMO = "%Y%m%d%a%H%M%S"
FILE_NAME_DATETIME_REGEX_MEMO = r"^\d{8}\S{3}\d{6}"
FILE_NAME_REGEX_MEMO = r"^\d{8}\S{3}\d{6}_memo_.*\.md$"
FILE_NAME_EXTRACT_REGEX_MEMO = r"^\d{8}\S{3}\d{6}_memo_(.*)\.md$"

FILE_NAME_DATE_LAYOUT_TODO = "%Y%m%d%a"
FILE_NAME_REGEX_TODO = r"^\d{8}\S{3}_todos\.md$"
FILE_NAME_DATETIME_REGEX_TODO = r"^\d{8}\S{3}"

TODO_TEMPLATE_NAME = "todos_template"
WEEKLY_REPORT_NAME = "weekly_report"


class FileType(str, Enum):
    TODOS = "todos"
    MEMO = "memo"
    WEEKLY = "weekly"
    TEMPLATE = "template"

    def __str__(self) -> str:
        return self.value


def _is_zero(date: datetime | None) -> bool:
    return date is None or date.replace(tzinfo=None) == datetime.min


def _go_quote(text: str) -> str:
    escapes = {
        '"': '\\"',
        "\\": "\\\\",
        "\a": "\\a",
        "\b": "\\b",
        "\f": "\\f",
        "\n": "\\n",
        "\r": "\\r",
        "\t": "\\t",
        "\v": "\\v",
    }
    parts = []
    for ch in text:
        if ch in escapes:
            parts.append(escapes[ch])
        elif ch.isprintable():
            parts.append(ch)
        elif ord(ch) < 0x80:
            parts.append(f"\\x{ord(ch):02x}")
        elif ord(ch) <= 0xFFFF:
            parts.append(f"\\u{ord(ch):04x}")
        else:
            parts.append(f"\\U{ord(ch):08x}")
    return '"' + "".join(parts) + '"'


@dataclass(kw_only=True)
class MarkdownFile(abc.ABC):
    """Common state and serialisation of the markdown files."""

    date: datetime
    file_type: FileType
    title: str
    top_level_body_content: HeadingBlock = field(default_factory=HeadingBlock)
    heading_blocks: list[HeadingBlock] = field(default_factory=list)

    @abc.abstractmethod
    def file_name(self) -> str:
        """Name of the file on disk."""

    def set_date(self, date: datetime | None) -> None:
        """Replace the date unless ``date`` is empty."""
        if _is_zero(date):
            return
        self.date = date

    def last_heading_block(self) -> HeadingBlock | None:
        return self.heading_blocks[-1] if self.heading_blocks else None

    def override_heading_block_matched(self, block: HeadingBlock) -> None:
        """Replace the first block with the same level and heading text."""
        for index, existing in enumerate(self.heading_blocks):
            if existing.level == block.level and existing.heading_text == block.heading_text:
                self.heading_blocks[index] = block
                return
        raise LookupError("target entity not found")

    def override_heading_blocks_matched(self, blocks: list[HeadingBlock]) -> None:
        for block in blocks:
            self.override_heading_block_matched(block)

    def data(self) -> bytes:
        parts = ["# " + self.title + "\n\n"]
        top = self.top_level_body_content
        if top is not None and top.content_text:
            parts.append(top.content_text)
        parts.extend(str(block) for block in self.heading_blocks)
        return "".join(parts).encode("utf-8")


@dataclass(kw_only=True)
class MemoFile(MarkdownFile):
    """A memo stored under its category directories."""

    file_type: FileType = FileType.MEMO
    category_tree: list[str] = field(default_factory=list)

    def file_name(self) -> str:
        stamp = self.date.strftime(FILE_NAME_DATE_LAYOUT_MEMO)
        title = self.title.replace(" ", FILE_FILLER)
        return FILE_SEPARATOR.join((stamp, str(self.file_type), title)) + FILE_EXTENSION

    def location(self) -> str:
        """Directory of the memo relative to the memos directory."""
        return os.sep.join(self.category_tree)

    def _metadata(self) -> str:
        categories = ", ".join(_go_quote(c) for c in self.category_tree)
        return f"---\ncategory: [{categories}]\n---\n\n"

    def data(self) -> bytes:
        return self._metadata().encode("utf-8") + super().data()


@dataclass(kw_only=True)
class TodoFile(MarkdownFile):
    """A daily todo list, or the template daily lists are built from."""

    file_type: FileType = FileType.TODOS

    def file_name(self) -> str:
        if self.file_type is FileType.TEMPLATE:
            return TODO_TEMPLATE_NAME + FILE_EXTENSION
        stamp = self.date.strftime(FILE_NAME_DATE_LAYOUT_TODO)
        return stamp + FILE_SEPARATOR + str(self.file_type) + FILE_EXTENSION


@dataclass(kw_only=True)
class WeeklyFile(MarkdownFile):
    """The weekly report."""

    file_type: FileType = FileType.WEEKLY

    def file_name(self) -> str:
        return WEEKLY_REPORT_NAME + FILE_EXTENSION


def new_memo_file(
    date: datetime | None, title: str, category_tree: list[str] | None
) -> MemoFile:
    if _is_zero(date):
        raise ValueError("invalid date")
    return MemoFile(date=date, title=title, category_tree=list(category_tree or []))


def memo_title(filename: str) -> str:
    """Extract the title from a memo file name, or return the name unchanged."""
    match = re.match(FILE_NAME_EXTRACT_REGEX_MEMO, filename)
    return match.group(1) if match else filename


def new_todos_file(date: datetime | None) -> TodoFile:
    if _is_zero(date):
        raise ValueError("invalid date")
    return TodoFile(
        date=date,
        file_type=FileType.TODOS,
        title=date.strftime(FILE_NAME_DATE_LAYOUT_TODO),
    )


def new_todo_template_file() -> TodoFile:
    return TodoFile(
        date=datetime.now(),
        file_type=FileType.TEMPLATE,
        title=TODO_TEMPLATE_NAME,
        heading_blocks=[
            HeadingBlock(heading_text="todos", level=2),
            HeadingBlock(heading_text="wanttodos", level=2),
        ],
    )


def new_weekly() -> WeeklyFile:
    return WeeklyFile(date=datetime.now(), title=WEEKLY_REPORT_NAME)