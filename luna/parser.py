"""Parser for Luna S-expressions."""

from dataclasses import dataclass, field
from typing import Optional

import regex

from .errors import (
    InvalidToken, ParseError, UnexpectedBracket, UnexpectedToken, UnmatchedBracket,
)
from .lexer import Lexer
from .token import Token, TokenKind
from .types import Bool, Dialect, Int, List, SExpr, Span, String, Symbol

_ESCAPE = regex.compile(r"\\(.)", regex.DOTALL)
_ESCAPES = {"n": "\n", "t": "\t", "r": "\r", "0": "\0"}

_TRUE = ("#t", "#true", "true")


@dataclass
class _Frame:
    """A list whose closing bracket has not been seen yet."""

    opener: Token
    items: list[SExpr] = field(default_factory=list)


def strip_shebang(source: str) -> str:
    """Strip the shebang line from `source` if one is present."""
    if not source.startswith("#!"):
        return source
    newline = source.find("\n")
    return "" if newline == -1 else source[newline + 1:]


def _unescape(body: str) -> str:
    return _ESCAPE.sub(lambda m: _ESCAPES.get(m.group(1), m.group(1)), body)


def _atom(tok: Token) -> SExpr:
    kind = tok.kind
    if kind is TokenKind.INT:
        return Int(int(tok.lexeme))
    if kind is TokenKind.BOOL:
        return Bool(tok.lexeme in _TRUE)
    if kind is TokenKind.STRING:
        return String(_unescape(tok.lexeme[1:-1]))
    return Symbol(tok.lexeme)


def parse(source: str, dialect: Optional[Dialect] = None) -> list[SExpr]:
    """Parse Luna source code into a list of top-level S-expressions.

    A leading shebang line is ignored. Error spans always index into
    `source` itself.

    Args:
        source: Program text
        dialect: Grammar options; defaults to Dialect()

    Returns:
        The top-level nodes in source order.

    Raises:
        ParseError: on the first lexical or bracket error found.
    """
    lexer = Lexer(source, dialect, start=len(source) - len(strip_shebang(source)))
    program: list[SExpr] = []
    # Open lists, innermost last.
    stack: list[_Frame] = []

    while True:
        tok = lexer.peek()
        if tok is None:
            break
        kind = tok.kind

        if kind is TokenKind.INVALID:
            raise ParseError(tok.span, InvalidToken())

        if kind.is_opener:
            stack.append(_Frame(lexer.advance()))
            continue

        if kind.is_closer:
            if not stack:
                raise ParseError(tok.span, UnexpectedToken(found=kind))
            frame = stack[-1]
            expected = frame.opener.kind.closer()
            if kind is not expected:
                raise ParseError(
                    Span(frame.opener.span.start, tok.span.end),
                    UnexpectedBracket(expected=expected, found=kind),
                )
            lexer.advance()
            stack.pop()
            node: SExpr = List(tuple(frame.items))
        else:
            node = _atom(lexer.advance())

        if stack:
            stack[-1].items.append(node)
        else:
            program.append(node)

    if stack:
        opener = stack[-1].opener
        raise ParseError(
            Span(opener.span.start, lexer.position),
            UnmatchedBracket(expected=opener.kind.closer()),
        )
    return program
