"""Data models for the pull request skip gate."""

from .github_types import ChangeRequest, ExclusionReason, Review, ReviewState, Verdict

__all__ = [
    "ChangeRequest",
    "ExclusionReason",
    "Review",
    "ReviewState",
    "Verdict",
]
