import pytest
from luna.errors import (
    InvalidToken, ParseError, UnexpectedBracket, UnexpectedToken, UnmatchedBracket,
)
from luna.parser import parse
from luna.token import TokenKind
from luna.types import Span


def test_invalid_token_message():
    assert str(InvalidToken()) == "encountered invalid token"


def test_unexpected_token_message():
    assert str(UnexpectedToken(found=TokenKind.RPAREN)) == "unexpected `)`"


def test_unexpected_bracket_message():
    kind = UnexpectedBracket(expected=TokenKind.RPAREN, found=TokenKind.RBRACKET)
    assert str(kind) == "expected `)` to close preceding `(`, found `]` instead"


def test_unmatched_bracket_message():
    assert str(UnmatchedBracket(expected=TokenKind.RBRACE)) == "expected `}` to close preceding `{`"


def test_parse_error_str_is_kind_message():
    err = ParseError(Span(0, 1), UnexpectedToken(found=TokenKind.RBRACE))
    assert str(err) == "unexpected `}`"
    assert err.span == Span(0, 1)
    assert isinstance(err, SyntaxError)


def test_render_unmatched():
    src = "(1 2"
    with pytest.raises(ParseError) as excinfo:
        parse(src)
    assert excinfo.value.render(src) == (
        "Syntax error: expected `)` to close preceding `(`\n"
        "context: (1 2"
    )


def test_render_mismatched():
    src = "x [1 2)"
    with pytest.raises(ParseError) as excinfo:
        parse(src)
    assert excinfo.value.render(src) == (
        "Syntax error: expected `]` to close preceding `[`, found `)` instead\n"
        "context: [1 2)"
    )


def test_context_for_each_kind():
    cases = {
        "a ' b": "'",
        "a ]": "]",
        "{a (b}": "(b}",
        "[a (b)": "[a (b)",
    }
    for src, context in cases.items():
        with pytest.raises(ParseError) as excinfo:
            parse(src)
        assert excinfo.value.context(src) == context


def test_span_byte_range():
    src = "λ ("
    with pytest.raises(ParseError) as excinfo:
        parse(src)
    span = excinfo.value.span
    assert span == Span(2, 3)
    assert span.byte_range(src) == (3, 4)
    assert src.encode("utf-8")[3:4] == b"("


def test_span_byte_range_multibyte_content():
    src = '"λλ" ]'
    with pytest.raises(ParseError) as excinfo:
        parse(src)
    assert excinfo.value.span == Span(5, 6)
    assert excinfo.value.span.byte_range(src) == (7, 8)


def test_repr():
    err = ParseError(Span(3, 4), InvalidToken())
    assert repr(err) == "ParseError(span=Span(start=3, end=4), kind=InvalidToken())"
