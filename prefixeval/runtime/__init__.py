"""
Prefix Expression Runtime

- Tokenizer: text -> nested token tree
- Evaluator: token tree + registry -> integer
- Interpreter: text -> decimal text, with ExecutionConfig limits
"""

from prefixeval.runtime.tokens import Integer, List, Symbol, Token, TokenKind
from prefixeval.runtime.tokenizer import Tokenizer, tokenize
from prefixeval.runtime.evaluator import Evaluator, run
from prefixeval.runtime.interpreter import (
    ExecutionConfig,
    ExecutionResult,
    Interpreter,
    evaluate,
)

__all__ = [
    "Integer",
    "List",
    "Symbol",
    "Token",
    "TokenKind",
    "Tokenizer",
    "tokenize",
    "Evaluator",
    "run",
    "ExecutionConfig",
    "ExecutionResult",
    "Interpreter",
    "evaluate",
]
