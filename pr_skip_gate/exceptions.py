"""Exception classes raised by the pull request skip gate."""


class GateError(Exception):
    """Base exception for all gate errors."""

    def __init__(self, code: str, message: str) -> None:
        self.code = code
        self.message = message
        super().__init__(f"[{code}] {message}")


class ConfigurationError(GateError):
    """Raised when gate configuration is invalid or missing."""

    def __init__(self, message: str) -> None:
        super().__init__("CONFIGURATION_ERROR", message)


class MalformedHeadReferenceError(GateError):
    """Raised when a pull request head name does not follow ``PR-<number>``.

    Callers are expected to pass only pull request heads, so this signals a
    defect upstream rather than a build decision.
    """

    def __init__(self, head_name: str) -> None:
        super().__init__(
            "MALFORMED_HEAD_REFERENCE",
            f"Head reference '{head_name}' is not in 'PR-<number>' format",
        )
        self.head_name = head_name


class FetchFailedError(GateError):
    """Raised when pull request data could not be retrieved."""

    def __init__(self, number: int, message: str) -> None:
        super().__init__("FETCH_FAILED", f"PR #{number}: {message}")
        self.number = number


class InvalidReviewStateError(GateError):
    """Raised when the source returns a review state the gate does not know."""

    def __init__(self, state: object) -> None:
        super().__init__("INVALID_REVIEW_STATE", f"Unknown review state: {state!r}")
        self.state = state
