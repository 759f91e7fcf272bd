"""GitHub-backed pull request fetcher built on PyGithub."""

import logging

import requests
from github import Auth, Github, GithubException
from github.PullRequest import PullRequest
from github.Repository import Repository

from pr_skip_gate.config.settings import Settings, get_settings
from pr_skip_gate.exceptions import ConfigurationError, FetchFailedError
from pr_skip_gate.models.github_types import ChangeRequest, Review

logger = logging.getLogger(__name__)

# Login reported for reviews whose author account no longer exists
UNKNOWN_AUTHOR = "unknown"


def build_github_client(settings: Settings | None = None) -> Github:
    """Create an authenticated GitHub client from settings.

    Args:
        settings: Settings to read from (default: settings loaded from the environment)

    Returns:
        A PyGithub client with token auth, timeout and page size applied

    Raises:
        ConfigurationError: If no GitHub token is configured
    """
    if settings is None:
        settings = get_settings()

    if not settings.github_token:
        raise ConfigurationError(
            f"GitHub token not configured for {settings.environment} environment. "
            "Set GH_TOKEN"
        )

    return Github(
        auth=Auth.Token(settings.github_token),
        base_url=settings.github_base_url,
        timeout=settings.github_timeout,
        per_page=settings.github_per_page,
    )


def validate_repo_full_name(v: str) -> str:
    """Validate repo_full_name is in 'owner/repo' format."""
    if not v or not v.strip():
        raise ValueError("repo_full_name cannot be empty")

    if v.count("/") != 1:
        raise ValueError(f"repo_full_name must be in 'owner/repo' format, got: '{v}'")

    owner, repo = v.split("/")
    if not owner or not repo:
        raise ValueError(
            f"repo_full_name must have non-empty owner and repo parts, got: '{v}'"
        )

    return v


def _to_change_request(number: int, pr: PullRequest) -> ChangeRequest:
    return ChangeRequest(number=number, title=pr.title or "", is_draft=bool(pr.draft))


def _to_reviews(pr: PullRequest) -> list[Review]:
    return [
        Review(
            review_id=review.id,
            author=review.user.login if review.user else UNKNOWN_AUTHOR,
            state=review.state,
            body=review.body,
        )
        for review in pr.get_reviews()
    ]


class GitHubChangeRequestFetcher:
    """Read pull requests and their reviews from a single GitHub repository.

    Nothing is cached: every call goes back to the GitHub API so a verdict
    always reflects the current review state. ``fetch_snapshot`` looks the
    pull request up once and reads both its metadata and its reviews from it.
    """

    def __init__(self, github_client: Github, repo_full_name: str) -> None:
        self.github_client = github_client
        self.repo_full_name = validate_repo_full_name(repo_full_name)

    @classmethod
    def from_settings(
        cls, repo_full_name: str, settings: Settings | None = None
    ) -> "GitHubChangeRequestFetcher":
        """Build a fetcher with a client configured from settings."""
        return cls(build_github_client(settings), repo_full_name)

    def _get_pull(self, number: int) -> PullRequest:
        repo: Repository = self.github_client.get_repo(self.repo_full_name)
        return repo.get_pull(number)

    def fetch_snapshot(self, number: int) -> tuple[ChangeRequest, list[Review]]:
        """Fetch pull request metadata and reviews with one pull request lookup.

        Args:
            number: Pull request number

        Returns:
            Tuple of (ChangeRequest, reviews), reviews possibly empty

        Raises:
            FetchFailedError: If the GitHub API request fails or times out
            InvalidReviewStateError: If GitHub reports an unknown review state
        """
        try:
            pr = self._get_pull(number)
            change_request = _to_change_request(number, pr)
            reviews = _to_reviews(pr)
        except GithubException as e:
            raise FetchFailedError(
                number, f"GitHub API error ({e.status}) fetching pull request"
            ) from e
        except requests.RequestException as e:
            raise FetchFailedError(
                number, f"Request failed fetching pull request: {e}"
            ) from e

        logger.debug(
            f"Fetched PR #{number} with {len(reviews)} reviews in {self.repo_full_name}"
        )
        return change_request, reviews

    def get_change_request(self, number: int) -> ChangeRequest:
        """Fetch pull request metadata.

        Raises:
            FetchFailedError: If the GitHub API request fails or times out
        """
        try:
            change_request = _to_change_request(number, self._get_pull(number))
        except GithubException as e:
            raise FetchFailedError(
                number, f"GitHub API error ({e.status}) fetching pull request"
            ) from e
        except requests.RequestException as e:
            raise FetchFailedError(
                number, f"Request failed fetching pull request: {e}"
            ) from e

        logger.debug(f"Fetched PR #{number} in {self.repo_full_name}")
        return change_request

    def list_reviews(self, number: int) -> list[Review]:
        """Fetch every review submitted on a pull request.

        Raises:
            FetchFailedError: If the GitHub API request fails or times out
            InvalidReviewStateError: If GitHub reports an unknown review state
        """
        try:
            reviews = _to_reviews(self._get_pull(number))
        except GithubException as e:
            raise FetchFailedError(
                number, f"GitHub API error ({e.status}) listing reviews"
            ) from e
        except requests.RequestException as e:
            raise FetchFailedError(number, f"Request failed listing reviews: {e}") from e

        logger.debug(
            f"Fetched {len(reviews)} reviews for PR #{number} in {self.repo_full_name}"
        )
        return reviews
