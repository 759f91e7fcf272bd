"""Services for external API interactions."""

from pr_skip_gate.services.fetcher import (
    ChangeRequestFetcher,
    ChangeRequestSnapshotFetcher,
)
from pr_skip_gate.services.github_fetcher import (
    GitHubChangeRequestFetcher,
    build_github_client,
)

__all__ = [
    "ChangeRequestFetcher",
    "ChangeRequestSnapshotFetcher",
    "GitHubChangeRequestFetcher",
    "build_github_client",
]
