"""Utility functions and helpers."""

from .filters import has_skip_marker, is_change_request_head, parse_change_request_number
from .logging import setup_logging, setup_observability

__all__ = [
    "has_skip_marker",
    "is_change_request_head",
    "parse_change_request_number",
    "setup_logging",
    "setup_observability",
]
