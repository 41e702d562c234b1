"""Reference record parser built from regular expressions.

A deliberately independent second implementation of the record grammar
used as an oracle: the cursor-based parser and this one must agree on
every input. It shares no code with orderlex.syntax.

Python 3.13+.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

_TRIVIA = re.compile(r"(?:[ \t\n\r\v\f]+|#[^\n\r]*(?:\r\n|\n|\r))*")
_UINT = re.compile(r"[0-9]+")
_FLOAT = re.compile(
    r"[+-]?(?:(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|(?i:infinity|inf|nan))"
)


@dataclass(frozen=True, slots=True)
class ShadowSuccess:
    id: int
    name: str
    pairs: tuple[tuple[int, float], ...]
    end: int


@dataclass(frozen=True, slots=True)
class ShadowFailure:
    expected: str
    position: int


def _skip(source: str, pos: int) -> int:
    match = _TRIVIA.match(source, pos)
    assert match is not None
    return match.end()


def shadow_parse(source: str) -> ShadowSuccess | ShadowFailure:
    """Parse one record, returning the outcome and where it happened."""
    pos = _skip(source, 0)
    match = _UINT.match(source, pos)
    if match is None:
        return ShadowFailure("record id", pos)
    record_id = int(match.group())

    pos = _skip(source, match.end())
    if not source.startswith('"', pos):
        return ShadowFailure("quoted string", pos)
    close = source.find('"', pos + 1)
    if close == -1:
        return ShadowFailure("closing quote", pos)
    if close == pos + 1:
        return ShadowFailure("quoted string", pos)
    name = source[pos + 1 : close]

    pos = _skip(source, close + 1)
    match = _UINT.match(source, pos)
    if match is None:
        return ShadowFailure("declared count", pos)
    count = int(match.group())
    pos = match.end()

    pairs: list[tuple[int, float]] = []
    for _ in range(count):
        pos = _skip(source, pos)
        index = _UINT.match(source, pos)
        if index is None:
            return ShadowFailure("data pair index", pos)
        pos = _skip(source, index.end())
        quantity = _FLOAT.match(source, pos)
        if quantity is None:
            return ShadowFailure("data pair quantity", pos)
        pairs.append((int(index.group()), float(quantity.group())))
        pos = quantity.end()

    return ShadowSuccess(record_id, name, tuple(pairs), pos)
