"""Skip CI builds for pull requests that are marked, unreviewed or unapproved."""

from pr_skip_gate.api.head_filter import ChangeRequestHeadFilter
from pr_skip_gate.exceptions import (
    ConfigurationError,
    FetchFailedError,
    GateError,
    InvalidReviewStateError,
    MalformedHeadReferenceError,
)
from pr_skip_gate.gate import ChangeRequestGate, GateOptions
from pr_skip_gate.models import ChangeRequest, ExclusionReason, Review, ReviewState, Verdict
from pr_skip_gate.services import ChangeRequestFetcher, GitHubChangeRequestFetcher

__version__ = "0.1.0"

__all__ = [
    "ChangeRequest",
    "ChangeRequestFetcher",
    "ChangeRequestGate",
    "ChangeRequestHeadFilter",
    "ConfigurationError",
    "ExclusionReason",
    "FetchFailedError",
    "GateError",
    "GateOptions",
    "GitHubChangeRequestFetcher",
    "InvalidReviewStateError",
    "MalformedHeadReferenceError",
    "Review",
    "ReviewState",
    "Verdict",
]
