"""Head filter the build host calls while scanning a repository for heads to build."""

import logging
from collections.abc import Iterable
from typing import Literal

from pr_skip_gate.exceptions import FetchFailedError
from pr_skip_gate.gate.change_request_gate import ChangeRequestGate
from pr_skip_gate.services.fetcher import ChangeRequestFetcher

logger = logging.getLogger(__name__)

FetchErrorPolicy = Literal["raise", "include", "exclude"]


class ChangeRequestHeadFilter:
    """Exclude pull request heads the gate says should not be built.

    ``on_fetch_error`` decides what happens when GitHub cannot be reached:
    "raise" propagates the error, "include" builds the head anyway and
    "exclude" skips it. Malformed heads and unknown review states always
    propagate. Heads the host leaves untyped, such as "PR-notes", are
    ordinary branches and are built.
    """

    def __init__(
        self,
        fetcher: ChangeRequestFetcher,
        gate: ChangeRequestGate | None = None,
        on_fetch_error: FetchErrorPolicy = "raise",
    ) -> None:
        if on_fetch_error not in ("raise", "include", "exclude"):
            raise ValueError(
                f"on_fetch_error must be 'raise', 'include' or 'exclude', got: '{on_fetch_error}'"
            )

        self.fetcher = fetcher
        self.gate = gate or ChangeRequestGate()
        self.on_fetch_error = on_fetch_error

    def is_excluded(self, head_name: str, is_change_request: bool | None = None) -> bool:
        """Return True if the head should not be built.

        Pass ``is_change_request`` when the host already knows the head type;
        otherwise only exact "PR-<number>" names are checked against GitHub.
        """
        try:
            verdict = self.gate.evaluate(head_name, self.fetcher, is_change_request)
            return verdict.excluded
        except FetchFailedError as e:
            if self.on_fetch_error == "raise":
                raise
            logger.warning(
                f"Could not evaluate {head_name}, "
                f"{'excluding' if self.on_fetch_error == 'exclude' else 'including'} it: {e}"
            )
            return self.on_fetch_error == "exclude"

    def partition_heads(self, head_names: Iterable[str]) -> tuple[list[str], list[str]]:
        """Split heads into (to_build, excluded), keeping the input order."""
        to_build: list[str] = []
        excluded: list[str] = []

        for head_name in head_names:
            if self.is_excluded(head_name):
                excluded.append(head_name)
            else:
                to_build.append(head_name)

        logger.info(
            f"Head scan: {len(to_build)} to build, {len(excluded)} excluded"
        )
        return to_build, excluded
