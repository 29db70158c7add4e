"""
Expression handlers and the operator registry.

An operator is any Expression: it folds a sequence of integers into one
integer. The registry maps operator names to Expression instances and is
handed to the evaluator, which only ever reads from it.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Dict, Iterator, Optional, Sequence

from prefixeval.errors import (
    DuplicateHandler,
    HandlerNotAnExpression,
    HandlerNotRegistered,
    InvalidOperand,
)


class Expression(ABC):
    """Variadic fold over integer operands."""

    name: str = ""
    description: str = ""

    def __call__(self, *arguments: int) -> int:
        return self.run(*arguments)

    @abstractmethod
    def run(self, *arguments: int) -> int:
        raise NotImplementedError

    def check_operands(self, arguments: Sequence) -> None:
        for argument in arguments:
            if isinstance(argument, bool) or not isinstance(argument, int):
                raise InvalidOperand(argument, self.name or type(self).__name__)


class Add(Expression):
    """
    Sum of the arguments; 0 when there are none.

    Non-integer operands (a bare symbol passed through by the evaluator) raise
    InvalidOperand. Lenient folds count such values as 0 instead; which
    behavior is wanted is still an open product decision.
    """

    name = "add"
    description = "Sum of all arguments"

    def run(self, *arguments: int) -> int:
        self.check_operands(arguments)
        return sum(arguments)


class Multiply(Expression):
    """
    Product of the arguments; 1 when there are none.

    Non-integer operands raise InvalidOperand rather than being counted as 0;
    see Add.
    """

    name = "multiply"
    description = "Product of all arguments"

    def run(self, *arguments: int) -> int:
        self.check_operands(arguments)
        return math.prod(arguments)


def is_expression(handler) -> bool:
    return isinstance(handler, Expression)


@dataclass
class OperatorRegistry(Mapping):
    """
    Read-only name -> Expression mapping.

    Handlers are checked when registered, so a registry built through
    register() never holds a non-Expression value.
    """
    registry_id: str = "default"
    version: str = "1.0"
    handlers: Dict[str, Expression] = field(default_factory=dict)

    def __post_init__(self):
        handlers, self.handlers = self.handlers, {}
        for name, handler in handlers.items():
            self.register(name, handler)

    def register(self, name: str, handler: Expression) -> "OperatorRegistry":
        if not is_expression(handler):
            raise HandlerNotAnExpression(type(handler).__name__)
        if name in self.handlers:
            raise DuplicateHandler(name)
        self.handlers[name] = handler
        return self

    def require(self, name: str) -> Expression:
        if name not in self.handlers:
            raise HandlerNotRegistered(name)
        return self.handlers[name]

    def describe(self) -> list:
        return [
            {
                "name": name,
                "handler": type(handler).__name__,
                "description": handler.description,
            }
            for name, handler in sorted(self.handlers.items())
        ]

    def __getitem__(self, name: str) -> Expression:
        return self.handlers[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self.handlers)

    def __len__(self) -> int:
        return len(self.handlers)

    def __contains__(self, name) -> bool:
        return name in self.handlers


def default_registry(registry_id: Optional[str] = None) -> OperatorRegistry:
    """The reference registry: ``add`` and ``multiply``."""
    return OperatorRegistry(
        registry_id=registry_id or "default",
        handlers={"add": Add(), "multiply": Multiply()},
    )
