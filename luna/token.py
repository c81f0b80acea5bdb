"""Lexical tokens produced by the Luna lexer."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .types import Span


class TokenKind(Enum):
    """The lexical category of a token.

    The value of each member is its display form, used in error messages.
    """

    LPAREN = "`(`"
    RPAREN = "`)`"
    LBRACKET = "`[`"
    RBRACKET = "`]`"
    LBRACE = "`{`"
    RBRACE = "`}`"
    SYMBOL = "symbol"
    STRING = "string literal"
    INT = "integer literal"
    BOOL = "Boolean literal"
    INVALID = "invalid token"

    def __str__(self) -> str:
        return self.value

    @property
    def is_opener(self) -> bool:
        return self in _CLOSERS

    @property
    def is_closer(self) -> bool:
        return self in _OPENERS

    def closer(self) -> Optional["TokenKind"]:
        """Return the closing bracket for an opening bracket, else None."""
        return _CLOSERS.get(self)

    def opener(self) -> Optional["TokenKind"]:
        """Return the opening bracket for a closing bracket, else None."""
        return _OPENERS.get(self)


_CLOSERS = {
    TokenKind.LPAREN: TokenKind.RPAREN,
    TokenKind.LBRACKET: TokenKind.RBRACKET,
    TokenKind.LBRACE: TokenKind.RBRACE,
}
_OPENERS = {closer: opener for opener, closer in _CLOSERS.items()}


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    lexeme: str
    span: Span

    def __str__(self) -> str:
        return str(self.kind)
