"""GitHub-specific type definitions."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from pr_skip_gate.exceptions import InvalidReviewStateError


class ReviewState(str, Enum):
    """State of a pull request review as reported by GitHub."""

    APPROVED = "APPROVED"
    CHANGES_REQUESTED = "CHANGES_REQUESTED"
    COMMENTED = "COMMENTED"
    DISMISSED = "DISMISSED"
    PENDING = "PENDING"

    @classmethod
    def parse(cls, value: object) -> "ReviewState":
        """Convert a raw state value into a ReviewState.

        Args:
            value: State string (or ReviewState) from the source-hosting API

        Returns:
            The matching ReviewState

        Raises:
            InvalidReviewStateError: If the value is not a known review state
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.upper())
            except ValueError:
                pass
        raise InvalidReviewStateError(value)


class ExclusionReason(str, Enum):
    """Why a pull request was (or was not) excluded from building."""

    NO_REVIEWS = "no-reviews"
    TITLE_MARKER = "title-marker"
    NO_APPROVAL = "no-approval"
    DRAFT = "draft"
    NONE = "none"


class ChangeRequest(BaseModel):
    """Pull request metadata needed for the skip decision."""

    model_config = ConfigDict(frozen=True)

    number: int = Field(gt=0)
    title: str
    is_draft: bool = False


class Review(BaseModel):
    """A single pull request review snapshot."""

    model_config = ConfigDict(frozen=True)

    review_id: int | None = None
    author: str
    state: ReviewState
    body: str = ""

    @field_validator("state", mode="before")
    @classmethod
    def validate_state(cls, v: object) -> ReviewState:
        """Reject review states outside the known set."""
        return ReviewState.parse(v)

    @field_validator("body", mode="before")
    @classmethod
    def validate_body(cls, v: str | None) -> str:
        """Treat a missing review body as empty."""
        return v or ""


class Verdict(BaseModel):
    """Outcome of evaluating a head reference.

    ``excluded`` is True exactly when ``reason`` is not ``ExclusionReason.NONE``.
    ``number`` is None for heads that are not pull requests.
    """

    model_config = ConfigDict(frozen=True)

    excluded: bool
    reason: ExclusionReason
    number: int | None = None

    @model_validator(mode="after")
    def check_reason_matches(self) -> "Verdict":
        if self.excluded == (self.reason is ExclusionReason.NONE):
            raise ValueError(
                f"Verdict excluded={self.excluded} conflicts with reason '{self.reason.value}'"
            )
        return self

    @classmethod
    def allow(cls, number: int | None = None) -> "Verdict":
        """Build a verdict that lets the build run."""
        return cls(excluded=False, reason=ExclusionReason.NONE, number=number)

    @classmethod
    def exclude(cls, reason: ExclusionReason, number: int | None = None) -> "Verdict":
        """Build a verdict that skips the build for the given reason."""
        return cls(excluded=True, reason=reason, number=number)
