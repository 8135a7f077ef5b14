"""
Tests for the line-based range locator (line_for_version / between).
"""

import re

import pytest

from changelog_parser import ChangelogParser, RangeLocator
from changelog_parser.locator import (
    HEADER_LINE_PREDICATES,
    between_lines,
    contains_version_token,
    has_header_prefix,
    is_bracketed_label,
    is_date_line,
    is_header_line,
    is_label_line,
    is_list_item_label,
    is_underlined,
    line_for_version,
    normalize_label,
    starts_version_range,
)

from conftest import read_fixture

DESCENDING = "# Changelog\n\n## 1.1.0\n- New\n\n## 1.0.0\n- Initial\n"
ASCENDING = "# Changelog\n\n## 1.0.0\n- Initial\n\n## 1.1.0\n- New\n"

ESC = re.escape("1.0.0")


class TestNormalizeLabel:
    @pytest.mark.parametrize(
        "label, expected",
        [("v1.0.0", "1.0.0"), ("V2.0", "2.0"), ("1.0.0", "1.0.0"), ("Unreleased", "Unreleased")],
    )
    def test_strips_leading_v(self, label, expected):
        assert normalize_label(label) == expected

    @pytest.mark.parametrize("label", [None, "", "   ", "v"])
    def test_blank_labels(self, label):
        assert normalize_label(label) is None


class TestTokenFilters:
    @pytest.mark.parametrize("line", ["## 1.0.0", "1.0.0: x", "(1.0.0)", "v1.0.0 released"])
    def test_whole_token(self, line):
        assert contains_version_token(line, ESC)

    @pytest.mark.parametrize("line", ["1.0.0.1 fixes", "1.0.0-beta", "1.0.0rc1", "11.0.0.0", "0.1.0.0"])
    def test_embedded_token(self, line):
        assert not contains_version_token(line, ESC)

    def test_version_range(self):
        assert starts_version_range("## Compare 1.0.0 and 1.0.0..2.0.0", ESC)
        assert not starts_version_range("## 1.0.0", ESC)


class TestHeaderLinePredicates:
    def test_predicates_are_ordered(self):
        assert HEADER_LINE_PREDICATES == (
            has_header_prefix,
            is_label_line,
            is_bracketed_label,
            is_list_item_label,
            is_date_line,
            is_underlined,
        )

    @pytest.mark.parametrize("line", ["## 1.0.0", "!1.0.0", "== 1.0.0 =="])
    def test_header_prefix(self, line):
        assert has_header_prefix(line, None, ESC)

    @pytest.mark.parametrize("line", ["1.0.0: bugfix", "v1.0.0 (2024-01-01)", "1.0.0 released"])
    def test_label_line(self, line):
        assert is_label_line(line, None, ESC)

    def test_label_line_needs_trailing_whitespace(self):
        assert not is_label_line("1.0.0", None, ESC)

    def test_bracketed_label(self):
        assert is_bracketed_label("[1.0.0] - 2024-01-01", None, ESC)
        assert not is_bracketed_label(" [1.0.0]", None, ESC)

    @pytest.mark.parametrize("line", ["- 1.0.0", "* Version 1.0.0", "+ version 1.0.0 (beta)", "- VERSION 1.0.0"])
    def test_list_item_label(self, line):
        assert is_list_item_label(line, None, ESC)

    def test_list_item_other_text(self):
        assert not is_list_item_label("- Upgraded to 1.0.0", None, ESC)

    def test_date_line(self):
        assert is_date_line("2024-01-01 1.0.0", None, ESC)
        assert not is_date_line("Released 2024-01-01", None, ESC)

    @pytest.mark.parametrize("underline", ["---", "=====", "+++ ", "-" * 20])
    def test_underlined(self, underline):
        assert is_underlined("Release 1.0.0", underline, ESC)

    @pytest.mark.parametrize("underline", [None, "--", "- item", "=-= x"])
    def test_not_underlined(self, underline):
        assert not is_underlined("Release 1.0.0", underline, ESC)

    def test_plain_mention_is_not_a_header(self):
        assert not is_header_line("Upgraded to 1.0.0 today", "", ESC)

    def test_range_mention_is_not_a_header(self):
        assert not is_header_line("## Compare 1.0.0 and 1.0.0..2.0.0", None, ESC)


class TestLocate:
    def test_finds_first_header_line(self):
        assert RangeLocator(DESCENDING).locate("1.0.0") == 5
        assert RangeLocator(DESCENDING).locate("1.1.0") == 2

    def test_v_prefix_is_ignored(self):
        assert RangeLocator(DESCENDING).locate("v1.0.0") == 5

    def test_longer_token_is_not_matched(self):
        lines = ["1.0.0.1 fixes", "1.0.0-beta notes", "## 1.0.0"]
        assert line_for_version(lines, "1.0.0") == 2

    def test_range_expression_is_not_matched(self):
        lines = ["## Changes 1.0.0..1.1.0", "", "## 1.0.0"]
        assert line_for_version(lines, "1.0.0") == 2

    def test_right_side_of_range_is_not_matched(self):
        lines = ["## Changes 1.0.0..1.1.0", "", "## 1.1.0"]
        assert line_for_version(lines, "1.1.0") == 2
        assert line_for_version(lines[:1], "1.1.0") is None

    def test_non_ascii_letter_does_not_extend_token(self):
        assert line_for_version(["## 1.0.0é"], "1.0.0") == 0
        assert line_for_version(["1.0.0é notes", "-----"], "1.0.0") == 0

    def test_underline_convention(self):
        text = "Intro mentioning 1.0.0\n\n1.0.0\n-----\n\n* Initial"
        assert RangeLocator(text).locate("1.0.0") == 2

    def test_label_is_regex_escaped(self):
        lines = ["## 1x0x0", "## 1.0.0"]
        assert line_for_version(lines, "1.0.0") == 1

    @pytest.mark.parametrize("label", [None, "", "  "])
    def test_blank_label(self, label):
        assert RangeLocator(DESCENDING).locate(label) is None

    def test_missing_label(self):
        assert RangeLocator(DESCENDING).locate("9.9.9") is None

    def test_keep_a_changelog_fixture(self):
        locator = RangeLocator(read_fixture("keep_a_changelog.md"))
        assert locator.locate("Unreleased") == 7
        assert locator.locate("1.1.0") == 12
        assert locator.locate("1.0.0") == 26


class TestBetween:
    def test_old_after_new_is_bounded(self):
        assert RangeLocator(DESCENDING).between("1.0.0", "1.1.0") == "## 1.1.0\n- New"

    def test_old_before_new_runs_to_end_of_document(self):
        # Known quirk, kept on purpose: when the old version's line comes first
        # the range is NOT cut at the new version's line.
        result = RangeLocator(ASCENDING).between("1.0.0", "1.1.0")
        assert result == "## 1.0.0\n- Initial\n\n## 1.1.0\n- New"

    def test_old_before_new_in_descending_document(self):
        result = RangeLocator(DESCENDING).between("1.1.0", "1.0.0")
        assert result == "## 1.1.0\n- New\n\n## 1.0.0\n- Initial"

    def test_same_version_is_empty(self):
        assert RangeLocator(DESCENDING).between("1.1.0", "1.1.0") == ""

    def test_only_old_found(self):
        assert RangeLocator(DESCENDING).between("1.0.0", "9.9.9") == "# Changelog\n\n## 1.1.0\n- New"

    def test_only_old_found_on_first_line(self):
        assert RangeLocator("## 1.0.0\n- Initial").between("1.0.0", "9.9.9") is None

    def test_only_new_found(self):
        assert RangeLocator(DESCENDING).between("9.9.9", "1.0.0") == "## 1.0.0\n- Initial"

    def test_neither_found(self):
        assert RangeLocator(DESCENDING).between("8.8.8", "9.9.9") is None

    def test_result_keeps_leading_indentation(self):
        assert between_lines(["  ## 1.0.0", "x", ""], None, 0) == "  ## 1.0.0\nx"

    def test_parser_delegates_to_locator(self):
        parser = ChangelogParser(read_fixture("keep_a_changelog.md"))
        result = parser.between("1.0.0", "1.1.0")

        assert parser.line_for_version("1.0.1") == 21
        assert result.startswith("## [1.1.0] - 2024-03-15")
        assert result.endswith("- Critical bug in session handling")
        assert "## [1.0.0]" not in result
