"""Interface the gate uses to read pull request data."""

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from pr_skip_gate.models.github_types import ChangeRequest, Review


@runtime_checkable
class ChangeRequestFetcher(Protocol):
    """Source of pull request metadata and reviews.

    Implementations must return current data on every call and raise
    ``FetchFailedError`` when the source cannot be reached. An empty review
    sequence is a valid answer, not an error.
    """

    def get_change_request(self, number: int) -> ChangeRequest:
        """Return the title and draft flag of pull request ``number``."""
        ...

    def list_reviews(self, number: int) -> Sequence[Review]:
        """Return every review submitted on pull request ``number``."""
        ...


@runtime_checkable
class ChangeRequestSnapshotFetcher(ChangeRequestFetcher, Protocol):
    """Fetcher that can read metadata and reviews from one pull request lookup.

    The gate prefers ``fetch_snapshot`` when it is available so the title and
    the reviews it judges come from the same response.
    """

    def fetch_snapshot(self, number: int) -> tuple[ChangeRequest, Sequence[Review]]:
        """Return pull request ``number`` together with its reviews."""
        ...
