"""Token types, matching rules and the Token dataclass for the arithlex lexer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


# Character classes
DIGITS = frozenset("0123456789")
BINARY_OPERATORS = frozenset("*|/+-")   # `|` is a literal member of the set
WHITESPACE = frozenset(" \t\f\r\n")


# ---------------------------------------------------------------------------
# Matching rules
#
# Each rule takes the source and a start offset and returns the offset just
# past its greedy match, or the start offset itself when it does not match.
# ---------------------------------------------------------------------------

def match_number(source: str, pos: int) -> int:
    """Match an optional leading ``-`` followed by one or more digits."""
    end = pos
    if end < len(source) and source[end] == "-":
        end += 1
    digits_start = end
    while end < len(source) and source[end] in DIGITS:
        end += 1
    if end == digits_start:
        return pos
    return end


def match_binary_op(source: str, pos: int) -> int:
    """Match exactly one operator character."""
    if pos < len(source) and source[pos] in BINARY_OPERATORS:
        return pos + 1
    return pos


def match_whitespace(source: str, pos: int) -> int:
    """Match a run of whitespace. Never produces a token."""
    end = pos
    while end < len(source) and source[end] in WHITESPACE:
        end += 1
    return end


class TokenType(Enum):
    """Every token the arithlex lexer can emit, in matching priority order."""

    NUMBER = auto()
    BINARYOP = auto()

    def match(self, source: str, pos: int) -> int:
        """Return the end offset of this type's match at `pos` (`pos` if none)."""
        return _MATCHERS[self](source, pos)


_MATCHERS = {
    TokenType.NUMBER: match_number,
    TokenType.BINARYOP: match_binary_op,
}


@dataclass(frozen=True, slots=True)
class Token:
    """A single token produced by the lexer.

    `value` is the exact matched text and `offset` the position of its first
    character in the input, so tokens can be mapped back onto the source.
    """

    type: TokenType
    value: str
    offset: int = 0

    @property
    def end(self) -> int:
        return self.offset + len(self.value)

    def __str__(self) -> str:
        return f"({self.type.name} {self.value})"

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.value!r}, {self.offset})"
