from datetime import datetime

import pytest

from memov2.domain import new_memo_file
from memov2.markdown import HeadingBlock
from memov2.romaji import RomajiConverter
from memov2.search import Match, MatchType, SearchResult, search_memo, search_memos


@pytest.fixture
def memo():
    m = new_memo_file(datetime.now(), "Test Memo", ["Category1", "Category2"])
    m.heading_blocks = [
        HeadingBlock(
            level=2,
            heading_text="Meeting Notes 会議メモ",
            content_text="Discussed project timeline\nNext steps: implementation\n予定を確認した",
        ),
        HeadingBlock(
            level=2,
            heading_text="Tasks",
            content_text="1. Review code\n2. Write tests\n3. Update docs\n",
        ),
        HeadingBlock(
            level=2,
            heading_text="References リファレンス",
            content_text="See documentation at:\nhttps://example.com\n参考資料を確認",
        ),
    ]
    return m


@pytest.mark.parametrize(
    "query, match_type, want_match, want_text",
    [
        ("Test", MatchType.TITLE, True, ""),
        ("NonExistent", MatchType.TITLE, False, ""),
        ("Category1", MatchType.CATEGORY, True, ""),
        ("NonExistent", MatchType.CATEGORY, False, ""),
        ("Meeting", MatchType.HEADING, True, "Meeting Notes 会議メモ"),
        ("会議", MatchType.HEADING, True, "Meeting Notes 会議メモ"),
        ("NonExistent", MatchType.HEADING, False, ""),
        ("TASKS", MatchType.HEADING, True, "Tasks"),
        ("timeline", MatchType.CONTENT, True, "Discussed project timeline"),
        ("予定", MatchType.CONTENT, True, "予定を確認した"),
        ("NonExistent", MatchType.CONTENT, False, ""),
        ("REVIEW", MatchType.CONTENT, True, "1. Review code"),
        ("  timeline  ", MatchType.CONTENT, True, "Discussed project timeline"),
    ],
)
def test_search_memo_cases(memo, query, match_type, want_match, want_text):
    result = search_memo(memo, query, match_type)
    if want_match:
        assert len(result.matches) > 0
        if want_text:
            assert want_text in [m.content for m in result.matches]
    else:
        assert result.matches == []


def test_search_memo_category_content_is_joined(memo):
    result = search_memo(memo, "category2", MatchType.CATEGORY)
    assert result.matches == [Match(type=MatchType.CATEGORY, content="Category1/Category2")]


def test_search_memo_content_context(memo):
    result = search_memo(memo, "implementation", MatchType.CONTENT)
    assert result.matches == [
        Match(
            type=MatchType.CONTENT,
            heading_order=0,
            line=2,
            content="Next steps: implementation",
            prev_line_context="Discussed project timeline",
            next_line_context="予定を確認した",
            heading="Meeting Notes 会議メモ",
        )
    ]


def test_search_memo_top_level_content():
    m = new_memo_file(datetime(2024, 1, 1), "t", [])
    m.top_level_body_content = HeadingBlock(content_text="intro line\nsecond")
    result = search_memo(m, "intro", MatchType.CONTENT)
    assert [(x.type, x.heading_order, x.line, x.next_line_context) for x in result.matches] == [
        (MatchType.CONTENT, -1, 1, "second")
    ]


def _memo(date, title, blocks=()):
    m = new_memo_file(date, title, [])
    m.heading_blocks = list(blocks)
    return m


def test_search_memos_newest_first():
    older = _memo(datetime(2024, 1, 1), "alpha notes")
    newer = _memo(datetime(2024, 2, 1), "alpha beta")
    results = search_memos([older, newer], "alpha", None)
    assert [r.memo.title for r in results] == ["alpha beta", "alpha notes"]


def test_search_memos_requires_all_words():
    older = _memo(datetime(2024, 1, 1), "alpha notes")
    newer = _memo(datetime(2024, 2, 1), "alpha beta")
    results = search_memos([older, newer], "alpha beta", None)
    assert [r.memo.title for r in results] == ["alpha beta"]
    assert results[0].matches == [Match(type=MatchType.TITLE, content="alpha beta")]


def test_search_memos_empty_query():
    assert search_memos([_memo(datetime(2024, 1, 1), "x")], "", None) == []


def test_search_memos_whitespace_query():
    assert search_memos([_memo(datetime(2024, 1, 1), "x")], "   ", None) == []


def test_search_memos_romaji_conversion():
    conv = RomajiConverter({"かいぎ": ["会議"]})
    m = _memo(datetime(2024, 1, 1), "notes", [HeadingBlock(heading_text="会議メモ", level=2)])
    results = search_memos([m], "kaigi", conv)
    assert results == [
        SearchResult(
            memo=m,
            matches=[Match(type=MatchType.HEADING, content="会議メモ", heading_order=0, line=0)],
        )
    ]


def test_search_memos_match_order():
    m = _memo(
        datetime(2024, 1, 1),
        "foo title",
        [
            HeadingBlock(heading_text="h1", level=2, content_text="x\nfoo b\nfoo a"),
            HeadingBlock(heading_text="foo head", level=2, content_text="foo c"),
        ],
    )
    results = search_memos([m], "foo", None)
    assert len(results) == 1
    keys = [(x.type, x.heading_order, x.line, x.content) for x in results[0].matches]
    assert keys == [
        (MatchType.TITLE, 0, 0, "foo title"),
        (MatchType.CONTENT, 0, 2, "foo b"),
        (MatchType.CONTENT, 0, 3, "foo a"),
        (MatchType.CONTENT, 1, 1, "foo c"),
        (MatchType.HEADING, 1, 1, "foo head"),
    ]


def test_search_memos_same_date_sorted_by_path():
    date = datetime(2024, 1, 1, 9, 0, 0)
    b = _memo(date, "bbb match")
    a = _memo(date, "aaa match")
    results = search_memos([b, a], "match", None)
    assert [r.memo.title for r in results] == ["aaa match", "bbb match"]