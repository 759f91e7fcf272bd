"""Decide whether a pull request build should be skipped.

A pull request head is excluded from building when its title carries a skip
marker, when it has no reviews yet, or when none of its reviews approve it.
Everything else, including ordinary branches, is allowed through.
"""

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict

from pr_skip_gate.exceptions import FetchFailedError, GateError
from pr_skip_gate.models.github_types import (
    ChangeRequest,
    ExclusionReason,
    Review,
    ReviewState,
    Verdict,
)
from pr_skip_gate.services.fetcher import (
    ChangeRequestFetcher,
    ChangeRequestSnapshotFetcher,
)
from pr_skip_gate.utils.filters import (
    has_skip_marker,
    is_change_request_head,
    parse_change_request_number,
)

if TYPE_CHECKING:
    from pr_skip_gate.config.settings import Settings

LGTM_MARKER = "lgtm"


class GateOptions(BaseModel):
    """Policy switches for the gate."""

    model_config = ConfigDict(frozen=True)

    # Draft data from the source is not reliable yet, so this stays off by default
    draft_check_enabled: bool = False
    lgtm_counts_as_approval: bool = True

    @classmethod
    def from_settings(cls, settings: "Settings") -> "GateOptions":
        return cls(
            draft_check_enabled=settings.draft_check_enabled,
            lgtm_counts_as_approval=settings.lgtm_counts_as_approval,
        )


def is_approval(review: Review, lgtm_counts_as_approval: bool = True) -> bool:
    """Check if a single review signs off on the pull request.

    Args:
        review: Review to inspect
        lgtm_counts_as_approval: Also accept a body containing "lgtm"

    Returns:
        True for an APPROVED review, or an "lgtm" body when enabled
    """
    if review.state is ReviewState.APPROVED:
        return True
    return lgtm_counts_as_approval and LGTM_MARKER in review.body.lower()


def aggregate_reviews(
    reviews: Iterable[Review], lgtm_counts_as_approval: bool = True
) -> bool:
    """Return True if at least one review approves. Order does not matter."""
    return any(is_approval(review, lgtm_counts_as_approval) for review in reviews)


class ChangeRequestGate:
    """Stateless skip/allow decision for pull request heads.

    The gate holds only immutable options and a logger, so one instance can
    evaluate many heads concurrently.
    """

    def __init__(
        self,
        options: GateOptions | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.options = options or GateOptions()
        self.logger = logger or logging.getLogger(__name__)

    @classmethod
    def from_settings(
        cls, settings: "Settings", logger: logging.Logger | None = None
    ) -> "ChangeRequestGate":
        return cls(GateOptions.from_settings(settings), logger=logger)

    def evaluate(
        self,
        head_ref_name: str,
        fetcher: ChangeRequestFetcher,
        is_change_request: bool | None = None,
    ) -> Verdict:
        """Evaluate a head reference and decide whether to skip its build.

        Args:
            head_ref_name: Head name from the host, e.g. "PR-42" or "main"
            fetcher: Source of pull request metadata and reviews
            is_change_request: Whether the host already knows this head is a
                pull request. None means decide from the name: only an exact
                "PR-<number>" is treated as one.

        Returns:
            Verdict with the exclusion flag and the reason

        Raises:
            MalformedHeadReferenceError: If the host marked the head as a pull
                request but its name is not "PR-<number>"
            FetchFailedError: If pull request data could not be fetched
            InvalidReviewStateError: If a review has an unknown state
        """
        if is_change_request is None:
            is_change_request = is_change_request_head(head_ref_name)
        if not is_change_request:
            return Verdict.allow()

        number = parse_change_request_number(head_ref_name)
        change_request, reviews = self._fetch(number, fetcher)
        verdict = self.decide(change_request, reviews)

        if verdict.excluded:
            self.logger.info(
                f"PR #{number} excluded from build (reason: {verdict.reason.value})"
            )
        else:
            self.logger.info(f"PR #{number} allowed to build")

        return verdict

    def decide(
        self, change_request: ChangeRequest, reviews: Iterable[Review] | None
    ) -> Verdict:
        """Apply the skip rules to an already-fetched snapshot.

        Rules are checked in order and the first match wins: title marker,
        draft (when enabled), no reviews, no approval.
        """
        number = change_request.number

        if has_skip_marker(change_request.title):
            return Verdict.exclude(ExclusionReason.TITLE_MARKER, number)

        if self.options.draft_check_enabled and change_request.is_draft:
            return Verdict.exclude(ExclusionReason.DRAFT, number)

        review_list = list(reviews or [])
        if not review_list:
            self.logger.info(f"PR #{number} has no reviews")
            return Verdict.exclude(ExclusionReason.NO_REVIEWS, number)

        for review in review_list:
            self.logger.debug(
                f"PR #{number}: review {review.review_id} by {review.author}, "
                f"state: {review.state.value}"
            )

        if not aggregate_reviews(review_list, self.options.lgtm_counts_as_approval):
            return Verdict.exclude(ExclusionReason.NO_APPROVAL, number)

        return Verdict.allow(number)

    def _fetch(
        self, number: int, fetcher: ChangeRequestFetcher
    ) -> tuple[ChangeRequest, list[Review]]:
        try:
            if isinstance(fetcher, ChangeRequestSnapshotFetcher):
                change_request, reviews = fetcher.fetch_snapshot(number)
            else:
                change_request = fetcher.get_change_request(number)
                reviews = fetcher.list_reviews(number)
        except GateError:
            raise
        except Exception as e:
            raise FetchFailedError(number, f"{type(e).__name__}: {e}") from e

        return change_request, list(reviews or [])
