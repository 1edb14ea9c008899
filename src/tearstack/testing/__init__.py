"""Test helpers — assertions and log capture."""

from tearstack.testing.asserts import (
    assert_contains_regex,
    assert_contents_in_order,
    assert_matches_regex,
    assert_not_contains_regex,
    assert_not_equal,
    assert_not_matches_regex,
)
from tearstack.testing.logs import RecordingHandler

__all__ = [
    "RecordingHandler",
    "assert_contains_regex",
    "assert_contents_in_order",
    "assert_matches_regex",
    "assert_not_contains_regex",
    "assert_not_equal",
    "assert_not_matches_regex",
]
