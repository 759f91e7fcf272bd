"""Pull request skip gate."""

from .change_request_gate import (
    ChangeRequestGate,
    GateOptions,
    aggregate_reviews,
    is_approval,
)

__all__ = ["ChangeRequestGate", "GateOptions", "aggregate_reviews", "is_approval"]
