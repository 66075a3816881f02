import pytest

from memov2.markdown import HeadingBlock


@pytest.mark.parametrize(
    "block, expected",
    [
        (HeadingBlock("Title", 1, "Some content"), "# Title\n\nSome content\n"),
        (HeadingBlock("Subtitle", 2, "More content"), "## Subtitle\n\nMore content\n"),
        (HeadingBlock("Section", 3, ""), "### Section\n\n"),
        (
            HeadingBlock("Subsection", 4, "Line 1\nLine 2"),
            "#### Subsection\n\nLine 1\nLine 2\n",
        ),
    ],
)
def test_heading_block_str(block, expected):
    assert str(block) == expected


def test_defaults():
    block = HeadingBlock()
    assert block.heading_text == ""
    assert block.level == 0
    assert block.line_number == 0