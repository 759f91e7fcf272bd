"""Title and head-name filtering utilities for deciding which pull requests to build."""

import re
from re import Pattern

from pr_skip_gate.exceptions import MalformedHeadReferenceError

# Head names for pull requests are formatted as "PR-<number>"
CHANGE_REQUEST_PREFIX = "PR-"

# Bracketed title markers that ask for the build to be skipped:
# [wip], [ci skip], [skip ci]. The words "ci" and "skip" may be separated
# by a dash, an underscore or a single space.
SKIP_MARKER_PATTERN: Pattern[str] = re.compile(
    r"\[(wip|ci[-_ ]skip|skip[-_ ]ci)\]", re.IGNORECASE
)

CHANGE_REQUEST_HEAD_PATTERN: Pattern[str] = re.compile(r"PR-0*[1-9][0-9]*")

_NUMBER_PATTERN: Pattern[str] = re.compile(r"[0-9]+")


def has_skip_marker(title: str) -> bool:
    """Check whether a pull request title carries a skip marker.

    Args:
        title: Pull request title

    Returns:
        True if the title contains a marker anywhere, case-insensitive
    """
    return SKIP_MARKER_PATTERN.search(title) is not None


def is_change_request_head(head_name: str) -> bool:
    """Check if a head name is exactly "PR-" followed by a positive number.

    Branches such as "PR-notes" are ordinary branches, not pull requests.
    """
    return CHANGE_REQUEST_HEAD_PATTERN.fullmatch(head_name) is not None


def parse_change_request_number(head_name: str) -> int:
    """Extract the pull request number from a head reference name.

    Args:
        head_name: Head reference name, e.g. "PR-42"

    Returns:
        The pull request number

    Raises:
        MalformedHeadReferenceError: If the name is not "PR-" followed by a
            positive decimal number
    """
    if not head_name.startswith(CHANGE_REQUEST_PREFIX):
        raise MalformedHeadReferenceError(head_name)

    suffix = head_name[len(CHANGE_REQUEST_PREFIX) :]
    if not _NUMBER_PATTERN.fullmatch(suffix):
        raise MalformedHeadReferenceError(head_name)

    number = int(suffix)
    if number <= 0:
        raise MalformedHeadReferenceError(head_name)

    return number
