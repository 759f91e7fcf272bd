"""Pytest configuration and fixtures."""

from collections.abc import Callable
from unittest.mock import Mock

import pytest

from pr_skip_gate.models.github_types import ChangeRequest, Review, ReviewState
from pr_skip_gate.services.fetcher import ChangeRequestFetcher


@pytest.fixture
def make_review() -> Callable[..., Review]:
    """Return a factory for Review snapshots."""

    def _make(
        state: ReviewState | str = ReviewState.COMMENTED,
        body: str = "",
        author: str = "reviewer",
        review_id: int | None = 1,
    ) -> Review:
        return Review(review_id=review_id, author=author, state=state, body=body)

    return _make


@pytest.fixture
def make_fetcher() -> Callable[..., Mock]:
    """Return a factory for mock fetchers serving one pull request."""

    def _make(
        title: str = "Add feature X",
        reviews: list[Review] | None = None,
        number: int = 42,
        is_draft: bool = False,
    ) -> Mock:
        fetcher = Mock(spec=ChangeRequestFetcher)
        fetcher.get_change_request.return_value = ChangeRequest(
            number=number, title=title, is_draft=is_draft
        )
        fetcher.list_reviews.return_value = reviews if reviews is not None else []
        return fetcher

    return _make
