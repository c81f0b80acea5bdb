"""Lexical analyser for Luna source code.

Whitespace (the Unicode Pattern_White_Space set) and `;` line comments are
skipped. Every other run of text becomes a Token; text that matches no rule
becomes an INVALID token, so the lexer itself never raises on bad input.
"""

from typing import Iterator, Optional

import regex

from .token import Token, TokenKind
from .types import BooleanSyntax, Dialect, Span

_SKIP = regex.compile(r"(?:\p{Pattern_White_Space}+|;[^\r\n]*(?:\r\n|\n)?)+")

_DELIMITERS = {
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    "[": TokenKind.LBRACKET,
    "]": TokenKind.RBRACKET,
    "{": TokenKind.LBRACE,
    "}": TokenKind.RBRACE,
}

_INT = regex.compile(r"[+-]?[0-9]+")
_STRING = regex.compile(r'"(?:[^"\\]|\\.)*"', regex.DOTALL)
# Extended identifier characters are the minimum set required by R7RS.
_SYMBOL = regex.compile(r"(?:\p{XID_Continue}|[!$%*+\-./:<=>?@^_~])+")
_BOOLEANS = {
    BooleanSyntax.HASH: regex.compile(r"#(?:true|false|t|f)"),
    BooleanSyntax.BARE: regex.compile(r"true|false"),
}


def _rules(dialect: Dialect) -> list[tuple[TokenKind, regex.Pattern]]:
    # Priority order: on a tie in match length the earlier rule wins.
    rules = [(TokenKind.INT, _INT), (TokenKind.BOOL, _BOOLEANS[dialect.booleans])]
    if dialect.strings:
        rules.append((TokenKind.STRING, _STRING))
    rules.append((TokenKind.SYMBOL, _SYMBOL))
    return rules


class Lexer:
    """An iterator of Tokens over some source code, with one token of lookahead.

    Args:
        source: The full input string. Token spans index into it.
        dialect: Grammar options (boolean syntax, string literals).
        start: Offset at which to begin lexing, e.g. past a shebang line.
    """

    def __init__(self, source: str, dialect: Optional[Dialect] = None, start: int = 0):
        self.source = source
        self.dialect = dialect or Dialect()
        self._rules = _rules(self.dialect)
        self._start = start
        self.reset()

    def reset(self) -> None:
        """Restart lexing from the initial position."""
        self._pos = self._start
        self._consumed = self._start
        self._peeked: Optional[Token] = None
        self._has_peeked = False

    @property
    def position(self) -> int:
        """Offset just past the last consumed token."""
        return self._consumed

    def peek(self) -> Optional[Token]:
        """Return the next token without consuming it, or None at end of input."""
        if not self._has_peeked:
            self._peeked = self._scan()
            self._has_peeked = True
        return self._peeked

    def advance(self) -> Optional[Token]:
        """Consume and return the next token, or None at end of input."""
        token = self.peek()
        self._peeked = None
        self._has_peeked = False
        if token is not None:
            self._consumed = token.span.end
        return token

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        token = self.advance()
        if token is None:
            raise StopIteration
        return token

    def _scan(self) -> Optional[Token]:
        src = self.source
        skipped = _SKIP.match(src, self._pos)
        if skipped:
            self._pos = skipped.end()
        pos = self._pos
        if pos >= len(src):
            return None

        ch = src[pos]
        kind = _DELIMITERS.get(ch)
        end = pos + 1
        if kind is None:
            kind, end = self._longest_match(pos)
        if kind is TokenKind.INVALID and ch == '"' and self.dialect.strings:
            # Unterminated string literal: the rest of the input is invalid.
            end = len(src)

        self._pos = end
        return Token(kind, src[pos:end], Span(pos, end))

    def _longest_match(self, pos: int) -> tuple[TokenKind, int]:
        best_kind, best_end = TokenKind.INVALID, pos + 1
        matched = False
        for kind, pattern in self._rules:
            m = pattern.match(self.source, pos)
            if m and m.end() > pos and (not matched or m.end() > best_end):
                best_kind, best_end = kind, m.end()
                matched = True
        return best_kind, best_end


def tokenize(source: str, dialect: Optional[Dialect] = None) -> Iterator[Token]:
    """Lazily yield the tokens of `source` from left to right."""
    yield from Lexer(source, dialect)
