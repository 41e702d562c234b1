"""Enumerations for orderlex type-safe constants.

Uses StrEnum for automatic string conversion.

Python 3.13+.
"""

from enum import StrEnum


class TrailingPolicy(StrEnum):
    """What the strict API does with input left after a record.

    StrEnum provides automatic string conversion: str(TrailingPolicy.ALLOW) == "allow"
    """

    ALLOW = "allow"
    """Accept any trailing input."""

    TRIVIA = "trivia"
    """Accept trailing whitespace and comments, reject anything else.

    A final comment that runs to end of input without a newline counts as
    a comment here.
    """

    REJECT = "reject"
    """Reject any trailing input, trailing comments included."""


__all__ = [
    "TrailingPolicy",
]
