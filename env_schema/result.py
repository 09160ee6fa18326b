"""
ABOUTME: Explicit success-or-reason outcome returned by value parsers
ABOUTME: Lets the aggregator collect failures without using exceptions for control flow
"""

from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class Ok:
    """Successfully parsed value."""

    value: Any

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    """Parse failure with a human-readable reason."""

    reason: str

    @property
    def ok(self) -> bool:
        return False


ParseResult = Union[Ok, Err]
