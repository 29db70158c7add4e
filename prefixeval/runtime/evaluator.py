"""
Prefix Expression Evaluator

Walks a token tree depth-first. For each list the head is evaluated to an
operator name, the name is resolved against the registry, the remaining
elements are evaluated left to right and the operator is applied to them.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, List, Union

from prefixeval.errors import (
    ExpressionSyntaxError,
    HandlerNotAnExpression,
    HandlerNotRegistered,
    NestingTooDeep,
)
from prefixeval.operators import is_expression
from prefixeval.runtime import tokens
from prefixeval.runtime.tokenizer import DEFAULT_MAX_DEPTH

Value = Union[int, str]


class Evaluator:
    """
    Evaluates token trees against an operator registry.

    The registry may be an OperatorRegistry or any plain mapping of names to
    handlers; values that are not Expressions are rejected on lookup.
    """

    def __init__(self, max_depth: int = DEFAULT_MAX_DEPTH):
        self.max_depth = max_depth

    def run(self, token: tokens.Token, registry: Mapping) -> Value:
        try:
            return self._run(token, registry, 0)
        except RecursionError:
            raise NestingTooDeep(self.max_depth) from None

    def _run(self, token: tokens.Token, registry: Mapping, depth: int) -> Value:
        if not isinstance(token, tokens.List):
            # Bare integers and symbols pass through as plain values.
            return token.value

        if depth > self.max_depth:
            raise NestingTooDeep(self.max_depth)

        if not len(token):
            raise ExpressionSyntaxError()

        if len(token) == 1 and isinstance(token.head, tokens.Integer):
            return token.head.value

        name = self._run(token.head, registry, depth + 1)
        handler = self._resolve(name, registry)

        arguments: List[Any] = [self._run(item, registry, depth + 1) for item in token.tail]
        return handler.run(*arguments)

    def _resolve(self, name: Any, registry: Mapping):
        try:
            handler = registry[name]
        except KeyError:
            raise HandlerNotRegistered(name) from None
        if not is_expression(handler):
            raise HandlerNotAnExpression(type(handler).__name__)
        return handler


def run(token: tokens.Token, registry: Mapping, max_depth: int = DEFAULT_MAX_DEPTH) -> Value:
    return Evaluator(max_depth=max_depth).run(token, registry)
