from .errors import (
    InvalidToken, ParseError, UnexpectedBracket, UnexpectedToken, UnmatchedBracket,
)
from .lexer import Lexer, tokenize
from .parser import parse, strip_shebang
from .token import Token, TokenKind
from .types import BooleanSyntax, Bool, Dialect, Int, List, SExpr, Span, String, Symbol

__version__ = "0.1.0"

__all__ = [
    "parse", "strip_shebang", "tokenize", "Lexer", "Token", "TokenKind",
    "Span", "SExpr", "Symbol", "String", "Int", "Bool", "List",
    "Dialect", "BooleanSyntax",
    "ParseError", "InvalidToken", "UnexpectedToken", "UnexpectedBracket", "UnmatchedBracket",
]
