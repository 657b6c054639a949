"""Tests for line classification."""

from __future__ import annotations

import pytest

from slidepress.lexer import LineKind, classify_line, classify_lines, indentation_width


class TestClassifyLine:
    """Tests for classify_line function."""

    @pytest.mark.parametrize(
        ("text", "kind"),
        [
            ("", LineKind.BLANK),
            ("   \t", LineKind.BLANK),
            ("// a comment", LineKind.COMMENT),
            ("  // indented comment", LineKind.PRE),
            ("```", LineKind.FENCE),
            ("~~~~ python", LineKind.FENCE),
            ("# Title", LineKind.HEADER),
            ("- item", LineKind.BULLET),
            ("    - nested", LineKind.BULLET),
            (".image a.png", LineKind.DIRECTIVE),
            ("    indented code", LineKind.PRE),
            ("Just prose.", LineKind.PROSE),
            (".unknown thing", LineKind.PROSE),
            ("#hashtag", LineKind.PROSE),
            ("  # indented header", LineKind.HEADER),
        ],
    )
    def test_kinds(self, text: str, kind: LineKind) -> None:
        """Each syntax form maps to its line kind."""
        assert classify_line(text, 1).kind is kind

    def test_header_depth_and_title(self) -> None:
        """Header depth is the number of hash characters."""
        line = classify_line("### Deep *title*  ", 7)
        assert line.depth == 3
        assert line.content == "Deep *title*"
        assert line.line_number == 7

    def test_header_depth_adds_indentation_level(self) -> None:
        """Each indentation level deepens a header by one."""
        assert classify_line("  # Sub", 1).depth == 2
        assert classify_line("    ## Deeper", 1).depth == 4
        assert classify_line("  # Sub", 1, indent_width=4).depth == 1
        assert classify_line("\t# Tabbed", 1, tab_size=4).depth == 3
        assert classify_line("  # Sub", 1).content == "Sub"

    def test_only_column_zero_comments(self) -> None:
        """Indented slashes belong to preformatted text, not comments."""
        line = classify_line("    // explain", 1)
        assert line.kind is LineKind.PRE
        assert line.text == "    // explain"

    def test_bullet_level_from_indentation(self) -> None:
        """Bullet level is indentation width divided by indent width."""
        assert classify_line("- a", 1).depth == 0
        assert classify_line("  - b", 1).depth == 1
        assert classify_line("    - c", 1, indent_width=4).depth == 1

    def test_tabs_expand_before_measuring(self) -> None:
        """Tabs count as tab_size columns."""
        line = classify_line("\t- tabbed", 1, indent_width=2, tab_size=4)
        assert line.depth == 2

    def test_directive_captures_raw_arguments(self) -> None:
        """Directive arguments are kept verbatim and not validated."""
        line = classify_line('.video "my clip.mp4" video/mp4', 3)
        assert line.directive == "video"
        assert line.arguments == '"my clip.mp4" video/mp4'

    def test_directive_without_arguments_does_not_raise(self) -> None:
        """Missing arguments are left for the parser to reject."""
        line = classify_line(".image", 1)
        assert line.kind is LineKind.DIRECTIVE
        assert line.arguments == ""

    def test_fence_marker_and_info(self) -> None:
        """Fence lines capture the marker and info string."""
        line = classify_line("````go -edit", 1)
        assert line.fence == "````"
        assert line.info == "go -edit"


class TestClassifyLines:
    """Tests for classify_lines function."""

    def test_yields_lookahead(self) -> None:
        """Each line is paired with the following one."""
        pairs = list(classify_lines("# A\n- b\n"))
        assert [(line.kind, ahead.kind if ahead else None) for line, ahead in pairs] == [
            (LineKind.HEADER, LineKind.BULLET),
            (LineKind.BULLET, None),
        ]

    def test_empty_input(self) -> None:
        """Empty input yields nothing."""
        assert list(classify_lines("")) == []

    def test_line_numbers_are_one_based(self) -> None:
        """Line numbers count from 1."""
        numbers = [line.line_number for line, _ in classify_lines("a\n\nb")]
        assert numbers == [1, 2, 3]


def test_indentation_width_mixed() -> None:
    """Spaces and tabs combine into a column width."""
    assert indentation_width("  \tx", tab_size=4) == 4
    assert indentation_width("x") == 0
