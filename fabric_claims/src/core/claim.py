"""Claim records and the parser for the ``#<id> @ <x>,<y>: <w>x<h>`` line format.

The grammar is fixed, so the parser is a small left-to-right scanner rather
than a regular expression.  Scanning token by token lets a failure report
the exact column where the line stopped matching.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from fabric_claims.src.errors import MalformedLineError, NumericOverflowError

MAX_UINT = 2**64 - 1

WHITESPACE = " \t\r"


@dataclass(frozen=True)
class Claim:
    """Rectangle request anchored at ``position`` with ``size`` (width, height)."""

    id: int
    position: Tuple[int, int]
    size: Tuple[int, int]

    @property
    def max_x(self) -> int:
        return self.position[0] + max(self.size[0] - 1, 0)

    @property
    def max_y(self) -> int:
        return self.position[1] + max(self.size[1] - 1, 0)

    def x_range(self) -> range:
        """Return the inclusive column range covered by the claim."""
        return range(self.position[0], self.max_x + 1)

    def y_range(self) -> range:
        """Return the inclusive row range covered by the claim."""
        return range(self.position[1], self.max_y + 1)

    def area(self) -> int:
        return len(self.x_range()) * len(self.y_range())

    def __str__(self) -> str:
        return format_claim(self)


class _Scanner:
    def __init__(self, line: str):
        self.line = line
        self.pos = 0

    def skip_ws(self) -> None:
        while self.pos < len(self.line) and self.line[self.pos] in WHITESPACE:
            self.pos += 1

    def expect(self, literal: str) -> None:
        self.skip_ws()
        if not self.line.startswith(literal, self.pos):
            raise MalformedLineError(self.line, self.pos, f"'{literal}'")
        self.pos += len(literal)

    def uint(self, field: str) -> int:
        self.skip_ws()
        start = self.pos
        # str.isdigit accepts non-ASCII digits
        while self.pos < len(self.line) and self.line[self.pos] in "0123456789":
            self.pos += 1
        if self.pos == start:
            raise MalformedLineError(self.line, start, f"unsigned integer ({field})")
        raw = self.line[start : self.pos]
        value = int(raw)
        if value > MAX_UINT:
            raise NumericOverflowError(self.line, field, raw)
        return value

    def end(self) -> None:
        self.skip_ws()
        if self.pos != len(self.line):
            raise MalformedLineError(self.line, self.pos, "end of line")


def parse_claim(line: str) -> Claim:
    """Parse ``line`` into a :class:`Claim`.

    Raises :class:`MalformedLineError` when the line does not follow the
    grammar and :class:`NumericOverflowError` when a number, or the claim's
    far edge, does not fit in an unsigned 64-bit integer.
    """

    scanner = _Scanner(line)
    scanner.expect("#")
    claim_id = scanner.uint("id")
    scanner.expect("@")
    x = scanner.uint("x")
    scanner.expect(",")
    y = scanner.uint("y")
    scanner.expect(":")
    width = scanner.uint("width")
    scanner.expect("x")
    height = scanner.uint("height")
    scanner.end()
    claim = Claim(id=claim_id, position=(x, y), size=(width, height))
    if claim.max_x > MAX_UINT:
        raise NumericOverflowError(line, "x + width", str(claim.max_x))
    if claim.max_y > MAX_UINT:
        raise NumericOverflowError(line, "y + height", str(claim.max_y))
    return claim


def format_claim(claim: Claim) -> str:
    """Return the canonical text line for ``claim``."""
    x, y = claim.position
    w, h = claim.size
    return f"#{claim.id} @ {x},{y}: {w}x{h}"


__all__ = ["Claim", "parse_claim", "format_claim", "MAX_UINT"]
