"""Syntax errors raised by the Luna parser."""

from dataclasses import dataclass
from typing import Union

from .token import TokenKind
from .types import Span


@dataclass(frozen=True)
class InvalidToken:
    """Input text matched none of the token rules."""

    def __str__(self) -> str:
        return "encountered invalid token"


@dataclass(frozen=True)
class UnexpectedToken:
    """A token that cannot start a datum appeared where one was expected."""

    found: TokenKind

    def __str__(self) -> str:
        return f"unexpected {self.found}"


@dataclass(frozen=True)
class UnexpectedBracket:
    """A closing bracket of the wrong family closed a list."""

    expected: TokenKind
    found: TokenKind

    def __str__(self) -> str:
        return (
            f"expected {self.expected} to close preceding {self.expected.opener()}, "
            f"found {self.found} instead"
        )


@dataclass(frozen=True)
class UnmatchedBracket:
    """Input ended while a list was still open."""

    expected: TokenKind

    def __str__(self) -> str:
        return f"expected {self.expected} to close preceding {self.expected.opener()}"


ErrorKind = Union[InvalidToken, UnexpectedToken, UnexpectedBracket, UnmatchedBracket]


class ParseError(SyntaxError):
    """A syntax error at a span of the parsed source.

    Attributes:
        span: Range of the offending text in the string passed to parse().
        kind: One of InvalidToken, UnexpectedToken, UnexpectedBracket,
            UnmatchedBracket.
    """

    def __init__(self, span: Span, kind: ErrorKind):
        super().__init__(str(kind))
        self.span = span
        self.kind = kind

    def __repr__(self) -> str:
        return f"ParseError(span={self.span!r}, kind={self.kind!r})"

    def context(self, source: str) -> str:
        """Return the text of `source` covered by this error."""
        return self.span.slice(source)

    def render(self, source: str) -> str:
        return f"Syntax error: {self}\ncontext: {self.context(source)}"
