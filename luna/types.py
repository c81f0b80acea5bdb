from dataclasses import dataclass
from enum import Enum
from typing import Union

# AST node types: Symbol, String, Int, Bool, List.
# Each variant is its own frozen dataclass; SExpr is the closed union.


@dataclass(frozen=True)
class Span:
    """Half-open range [start, end) of string offsets into the source."""

    start: int
    end: int

    def slice(self, source: str) -> str:
        return source[self.start:self.end]

    def byte_range(self, source: str) -> tuple[int, int]:
        """Convert to UTF-8 byte offsets into `source`."""
        start = len(source[:self.start].encode("utf-8"))
        return start, start + len(self.slice(source).encode("utf-8"))


@dataclass(frozen=True)
class Symbol:
    name: str


@dataclass(frozen=True)
class String:
    value: str


@dataclass(frozen=True)
class Int:
    value: int


@dataclass(frozen=True)
class Bool:
    value: bool


@dataclass(frozen=True)
class List:
    items: tuple["SExpr", ...] = ()

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index):
        return self.items[index]

    def __iter__(self):
        return iter(self.items)


SExpr = Union[Symbol, String, Int, Bool, List]


class BooleanSyntax(Enum):
    HASH = "hash"  # #t #f #true #false
    BARE = "bare"  # true false


@dataclass(frozen=True)
class Dialect:
    booleans: BooleanSyntax = BooleanSyntax.HASH
    strings: bool = True
