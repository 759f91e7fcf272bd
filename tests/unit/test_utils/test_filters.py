"""Tests for title marker and head name filtering."""

import pytest

from pr_skip_gate.exceptions import MalformedHeadReferenceError
from pr_skip_gate.utils.filters import (
    has_skip_marker,
    is_change_request_head,
    parse_change_request_number,
)


class TestHasSkipMarker:
    """Tests for has_skip_marker()."""

    @pytest.mark.parametrize(
        "title",
        [
            "[wip]",
            "[WIP] Refactor parser",
            "Refactor parser [Wip]",
            "[ci skip]",
            "[ci-skip]",
            "[ci_skip]",
            "[skip ci]",
            "[skip-ci]",
            "[skip_ci]",
            "Fix bug [SKIP-CI] in parser",
            "prefix[ci skip]suffix",
        ],
    )
    def test_markers_match(self, title):
        assert has_skip_marker(title) is True

    @pytest.mark.parametrize(
        "title",
        [
            "",
            "Add feature X",
            "wip: Add feature X",
            "skip ci",
            "(skip ci)",
            "[ci  skip]",
            "[ci.skip]",
            "[skipci]",
            "[wip ] almost",
            "[work in progress]",
        ],
    )
    def test_non_markers_do_not_match(self, title):
        assert has_skip_marker(title) is False


class TestHeadNames:
    """Tests for pull request head name parsing."""

    @pytest.mark.parametrize("head_name", ["PR-1", "PR-42", "PR-007"])
    def test_is_change_request_head(self, head_name):
        assert is_change_request_head(head_name) is True

    @pytest.mark.parametrize(
        "head_name", ["main", "pr-1", "PR-", "PR-0", "PR-notes", "PR-12a", "PR-1\n", "xPR-1"]
    )
    def test_other_names_are_branches(self, head_name):
        assert is_change_request_head(head_name) is False

    @pytest.mark.parametrize(
        ("head_name", "number"),
        [("PR-1", 1), ("PR-42", 42), ("PR-007", 7), ("PR-123456", 123456)],
    )
    def test_parse_number(self, head_name, number):
        assert parse_change_request_number(head_name) == number

    @pytest.mark.parametrize(
        "head_name", ["main", "PR-", "PR-x1", "PR-1.5", "PR- 3", "PR-+3", "PR-0", "PR-١٢"]
    )
    def test_parse_rejects_malformed(self, head_name):
        with pytest.raises(MalformedHeadReferenceError, match="PR-<number>"):
            parse_change_request_number(head_name)
