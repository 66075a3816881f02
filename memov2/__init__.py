"""Memos and todo lists kept as Markdown files, with romaji-aware search."""

__version__ = "0.1.0"