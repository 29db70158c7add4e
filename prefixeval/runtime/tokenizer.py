"""
Prefix Expression Tokenizer

Turns raw text into a nested token tree.

Lexemes are "(", ")" and words (maximal runs of characters that are neither
whitespace nor parentheses). Grouping is driven by an explicit stack: only the
outermost group is transparent, so "(add 1 2)" yields [add, 1, 2] while
"(add 1 (multiply 2 3))" yields [add, 1, [multiply, 2, 3]].
"""

from __future__ import annotations

import re
from collections.abc import Container
from typing import List, Optional

from prefixeval.errors import ExpressionSyntaxError, InputTooLong, NestingTooDeep
from prefixeval.runtime import tokens

LEXEME_PATTERN = re.compile(r"\(|\)|[^\s()]+")
INTEGER_PATTERN = re.compile(r"^[+-]?[0-9]+$")

DEFAULT_MAX_DEPTH = 256
# Upper bound for max_depth. Evaluation recurses once per nesting level and
# must stay below sys.getrecursionlimit().
MAX_DEPTH_LIMIT = 256
DEFAULT_MAX_INPUT_LENGTH = 1024 * 1024


def to_atom(word: str) -> tokens.Token:
    if INTEGER_PATTERN.match(word):
        return tokens.Integer(int(word))
    return tokens.Symbol(word)


class Tokenizer:
    """
    Scans an expression into a token tree.

    The registry is only consulted once, to check that the leading top-level
    token is an integer or a registered operator name.
    """

    def __init__(self,
                 registry: Container,
                 max_depth: int = DEFAULT_MAX_DEPTH,
                 max_input_length: Optional[int] = DEFAULT_MAX_INPUT_LENGTH):
        self.registry = registry
        self.max_depth = max_depth
        self.max_input_length = max_input_length

    def lex(self, source: str) -> List[str]:
        """Return the raw lexemes of ``source``."""
        if self.max_input_length is not None and len(source) > self.max_input_length:
            raise InputTooLong(len(source), self.max_input_length)
        return LEXEME_PATTERN.findall(source)

    def tokenize(self, source: str) -> tokens.List:
        """
        Build the token tree for ``source``.

        Raises:
            ExpressionSyntaxError: unbalanced or empty groups, or a leading
                token that is neither an integer nor a registered name.
        """
        stack: List[List[tokens.Token]] = []
        current: List[tokens.Token] = []
        depth = 0

        for lexeme in self.lex(source):
            if lexeme == "(":
                stack.append(current)
                current = []
                depth += 1
                if depth > self.max_depth:
                    raise NestingTooDeep(self.max_depth)
            elif lexeme == ")":
                if depth == 0:
                    raise ExpressionSyntaxError()
                prior = stack.pop()
                depth -= 1
                if prior:
                    if not current:
                        raise ExpressionSyntaxError()
                    prior.append(tokens.List(tuple(current)))
                    current = prior
                # An empty prior means the outermost group just closed; its
                # contents stay current, unwrapped.
            else:
                current.append(to_atom(lexeme))

        if depth != 0:
            raise ExpressionSyntaxError()

        if not current or not self._valid_leader(current[0]):
            raise ExpressionSyntaxError()

        return tokens.List(tuple(current))

    def _valid_leader(self, token: tokens.Token) -> bool:
        if isinstance(token, tokens.Integer):
            return True
        return isinstance(token, tokens.Symbol) and token.value in self.registry


def tokenize(source: str, registry: Container, **options) -> tokens.List:
    return Tokenizer(registry, **options).tokenize(source)
