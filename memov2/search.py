"""Searching memos by title, category, heading and content."""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import IntEnum

from .domain import MemoFile
from .markdown import HeadingBlock
from .romaji import RomajiConverter


class MatchType(IntEnum):
    """Where in a memo a query matched; the order is the display order."""

    TITLE = 0
    CATEGORY = 1
    CONTENT = 2
    HEADING = 3


@dataclass
class Match:
    """One place in a memo that matched a query."""

    type: MatchType
    heading_order: int = 0
    line: int = 0
    content: str = ""
    prev_line_context: str = ""
    next_line_context: str = ""
    heading: str = ""


@dataclass
class SearchResult:
    """A memo together with the places in it that matched."""

    memo: MemoFile
    matches: list[Match] = field(default_factory=list)


def _content_matches(
    text: str, query: str, heading_order: int, heading: str
) -> list[Match]:
    lines = text.split("\n")
    found = []
    for index, line in enumerate(lines):
        if query not in line.lower():
            continue
        found.append(
            Match(
                type=MatchType.CONTENT,
                content=line,
                heading_order=heading_order,
                line=index + 1,
                prev_line_context=lines[index - 1] if index > 0 else "",
                next_line_context=lines[index + 1] if index < len(lines) - 1 else "",
                heading=heading,
            )
        )
    return found


def search_memo(memo: MemoFile, query: str, match_type: MatchType) -> SearchResult:
    """Find the places in ``memo`` that contain ``query``, case-insensitively.

    Content and heading searches also look at the text before the first heading.
    """
    result = SearchResult(memo=memo)
    needle = query.strip().lower()

    if match_type is MatchType.TITLE and needle in memo.title.lower():
        result.matches.append(Match(type=MatchType.TITLE, content=memo.title))

    if match_type is MatchType.CATEGORY and any(
        needle in category.lower() for category in memo.category_tree
    ):
        result.matches.append(
            Match(type=MatchType.CATEGORY, content="/".join(memo.category_tree))
        )

    if match_type in (MatchType.CONTENT, MatchType.HEADING):
        top = memo.top_level_body_content or HeadingBlock()
        result.matches.extend(
            _content_matches(top.content_text, needle, -1, top.heading_text)
        )

        for order, block in enumerate(memo.heading_blocks):
            if match_type is MatchType.HEADING and needle in block.heading_text.lower():
                result.matches.append(
                    Match(
                        type=MatchType.HEADING,
                        content=block.heading_text,
                        heading_order=order,
                        line=order,
                    )
                )
            elif match_type is MatchType.CONTENT:
                result.matches.extend(
                    _content_matches(block.content_text, needle, order, block.heading_text)
                )

    return result


def _memo_path(memo: MemoFile) -> str:
    return os.path.join(memo.location(), memo.file_name())


def _match_key(match: Match) -> tuple:
    if match.type is MatchType.CONTENT:
        tail: tuple = (match.line,)
    else:
        tail = (match.content,)
    return (match.type, match.heading_order, *tail)


_SEARCH_ORDER = (MatchType.TITLE, MatchType.CATEGORY, MatchType.HEADING, MatchType.CONTENT)


def search_memos(
    memos: Iterable[MemoFile], query: str, romaji_conv: RomajiConverter | None
) -> list[SearchResult]:
    """Search all memos for every word of ``query``.

    Each word may match through any of its romaji conversions; a match is kept
    only if its text contains every word. Results are newest first, then by path.
    """
    if query == "":
        return []

    word_queries = [
        romaji_conv.convert(word) if romaji_conv is not None else [word]
        for word in query.split()
    ]

    def contains_all_words(text: str) -> bool:
        lowered = text.lower()
        return all(
            any(variation.lower() in lowered for variation in variations)
            for variations in word_queries
        )

    results_by_file: dict[str, SearchResult] = {}
    for memo in memos:
        matches_by_type: dict[MatchType, list[Match]] = {}
        for variations in word_queries:
            for variation in variations:
                for match_type in _SEARCH_ORDER:
                    found = search_memo(memo, variation, match_type).matches
                    if found:
                        matches_by_type.setdefault(match_type, []).extend(found)

        valid: list[Match] = []
        for matches in matches_by_type.values():
            unique = {match.content: match for match in matches}
            valid.extend(m for m in unique.values() if contains_all_words(m.content))

        if valid:
            valid.sort(key=_match_key)
            results_by_file[_memo_path(memo)] = SearchResult(memo=memo, matches=valid)

    ordered = sorted(results_by_file.values(), key=lambda r: _memo_path(r.memo))
    ordered.sort(key=lambda r: r.memo.date, reverse=True)
    return ordered