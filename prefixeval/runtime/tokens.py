"""
Token model.

A parsed expression is a tree of three token kinds:
- Integer: whole-number literal
- Symbol: bare word (normally an operator name)
- List: one parenthesized group, never empty once tokenized

Tokens are frozen so a tree can be evaluated repeatedly without mutation.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Tuple, Union


class TokenKind(Enum):
    INTEGER = "integer"
    SYMBOL = "symbol"
    LIST = "list"


@dataclass(frozen=True)
class Integer:
    value: int
    kind = TokenKind.INTEGER

    def to_data(self) -> int:
        return self.value


@dataclass(frozen=True)
class Symbol:
    value: str
    kind = TokenKind.SYMBOL

    def to_data(self) -> str:
        return self.value


@dataclass(frozen=True)
class List:
    items: Tuple["Token", ...] = ()
    kind = TokenKind.LIST

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    def __getitem__(self, index):
        return self.items[index]

    @property
    def head(self) -> "Token":
        return self.items[0]

    @property
    def tail(self) -> Tuple["Token", ...]:
        return self.items[1:]

    def to_data(self) -> list:
        """Plain nested list form, used for JSON output."""
        return [item.to_data() for item in self.items]


Token = Union[Integer, Symbol, List]


def from_data(data: Any) -> Token:
    """Build a token tree from plain ints, strings and nested lists."""
    if isinstance(data, bool):
        raise TypeError(f"Cannot build a token from {data!r}")
    if isinstance(data, int):
        return Integer(data)
    if isinstance(data, str):
        return Symbol(data)
    if isinstance(data, (list, tuple)):
        return List(tuple(from_data(item) for item in data))
    raise TypeError(f"Cannot build a token from {data!r}")
