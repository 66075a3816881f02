"""Markdown building blocks."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class HeadingBlock:
    """A heading together with the raw text that follows it."""

    heading_text: str = ""
    level: int = 0
    content_text: str = ""
    line_number: int = 0

    def __str__(self) -> str:
        head = "#" * self.level + " " + self.heading_text + "\n\n"
        if not self.content_text:
            return head
        return head + self.content_text + "\n"