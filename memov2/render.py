"""Text rendering of search results with highlighted matches."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass

from .romaji import RomajiConverter
from .search import Match, MatchType, SearchResult

_ANSI_RESET = "\x1b[0m"
_DATETIME_LAYOUT = "%Y-%m-%d %H:%M"


@dataclass(frozen=True)
class _Style:
    """Foreground colour from the 256-colour palette; no colour leaves text as is."""

    foreground: int | None = None

    def __call__(self, text: str) -> str:
        if not text or self.foreground is None:
            return text
        return f"\x1b[38;5;{self.foreground}m{text}{_ANSI_RESET}"


_TITLE_STYLE = _Style(205)
_MATCH_STYLE = _Style(86)
_DIM_STYLE = _Style(247)
_PAGE_STYLE = _Style(243)
_TYPE_STYLE = _Style(110)
_PLAIN_STYLE = _Style()

_SECTIONS = (
    (MatchType.TITLE, "Title"),
    (MatchType.CATEGORY, "Category"),
    (MatchType.HEADING, "Heading"),
    (MatchType.CONTENT, "Content"),
)


def query_variations(query: str, romaji_conv: RomajiConverter | None) -> list[str]:
    """Return every form of every query word, without duplicates, in order."""
    if not query:
        return []
    variations: dict[str, None] = {}
    for word in query.split():
        forms = romaji_conv.convert(word) if romaji_conv is not None else [word]
        for form in forms:
            variations.setdefault(form, None)
    return list(variations)


def find_all_matches(text: str, queries: Iterable[str]) -> list[tuple[int, int]]:
    """Return the sorted, merged ``(start, end)`` spans where any query occurs.

    Matching ignores case; overlapping or touching spans are merged.
    """
    lowered = text.lower()
    spans: list[tuple[int, int]] = []
    for query in queries:
        needle = query.lower()
        if not needle:
            continue
        position = lowered.find(needle)
        while position != -1:
            end = position + len(needle)
            spans.append((position, end))
            position = lowered.find(needle, end)

    spans.sort(key=lambda span: span[0])
    merged: list[tuple[int, int]] = []
    for start, end in spans:
        if merged and start <= merged[-1][1]:
            last_start, last_end = merged[-1]
            merged[-1] = (last_start, max(last_end, end))
        else:
            merged.append((start, end))
    return merged


def highlight_matches(
    text: str,
    query_variations: list[str],
    style: Callable[[str], str],
    match_style: Callable[[str], str] = _MATCH_STYLE,
) -> str:
    """Render ``text`` with ``style``, and the parts matching a query with ``match_style``."""
    spans = find_all_matches(text, query_variations) if query_variations else []
    if not spans:
        return style(text)

    pieces = []
    last = 0
    for start, end in spans:
        pieces.append(style(text[last:start]))
        pieces.append(match_style(text[start:end]))
        last = end
    pieces.append(style(text[last:]))
    return "".join(pieces)


def _render_content(matches: list[Match], variations: list[str]) -> Iterator[str]:
    current_heading = ""
    for index, match in enumerate(matches):
        if match.heading != current_heading:
            current_heading = match.heading
            if index > 0:
                yield "\n"
            heading = highlight_matches(current_heading, variations, _DIM_STYLE)
            yield f"     In heading: {heading}\n"
        if match.prev_line_context:
            yield f"           {match.line - 1}: {_DIM_STYLE(match.prev_line_context)}\n"
        content = highlight_matches(match.content, variations, _PLAIN_STYLE)
        yield f"       >>> {match.line}: {content}\n"
        if match.next_line_context:
            yield f"           {match.line + 1}: {_DIM_STYLE(match.next_line_context)}\n"
        if index < len(matches) - 1 and match.heading == matches[index + 1].heading:
            yield f"           {_DIM_STYLE('---')}\n"


def _render_result(
    result: SearchResult, is_selected: bool, variations: list[str]
) -> Iterator[str]:
    memo = result.memo
    prefix = "▸" if is_selected else " "
    yield f"{prefix} {highlight_matches(memo.title, variations, _TITLE_STYLE)}\n"

    stamp = _DIM_STYLE(memo.date.strftime(_DATETIME_LAYOUT))
    category = ""
    if memo.category_tree:
        category = highlight_matches(" > ".join(memo.category_tree), variations, _DIM_STYLE)
    yield f"   {stamp} | {category}\n"

    by_type: dict[MatchType, dict[str, Match]] = {}
    for match in result.matches:
        by_type.setdefault(match.type, {})[match.content] = match

    for match_type, label in _SECTIONS:
        matches = by_type.get(match_type)
        if not matches:
            continue
        yield f"   {_TYPE_STYLE(label)} matches:\n"
        ordered = sorted(matches.values(), key=lambda m: (m.heading_order, m.line))
        if match_type is MatchType.CONTENT:
            yield from _render_content(ordered, variations)
        else:
            for match in ordered:
                yield f"     {highlight_matches(match.content, variations, _PLAIN_STYLE)}\n"
    yield "\n"


def render_results(
    results: list[SearchResult],
    selected: int,
    query: str,
    romaji_conv: RomajiConverter | None,
) -> str:
    """Render search results as text, marking the selected one with ``▸``."""
    if not results:
        return "No results found"

    variations = query_variations(query, romaji_conv)
    pieces = [_PAGE_STYLE(f"Found {len(results)} results"), "\n\n"]
    for index, result in enumerate(results):
        pieces.extend(_render_result(result, index == selected, variations))
    return "".join(pieces)