"""
prefixeval - prefix expression evaluator

Evaluates expressions such as ``(add 1 (multiply 2 3))`` against a registry
of named operators.

Exports:
- Interpreter / evaluate: text in, decimal text out
- Tokenizer, Evaluator: the two halves of the pipeline
- Expression, Add, Multiply, OperatorRegistry: operator handlers
"""

from prefixeval.errors import (
    EvaluationError,
    ExpressionSyntaxError,
    HandlerNotAnExpression,
    HandlerNotRegistered,
    InvalidOperand,
)
from prefixeval.operators import (
    Add,
    Expression,
    Multiply,
    OperatorRegistry,
    default_registry,
)
from prefixeval.runtime import (
    Evaluator,
    ExecutionConfig,
    ExecutionResult,
    Interpreter,
    Tokenizer,
    evaluate,
)

__version__ = "1.0.0"

__all__ = [
    "EvaluationError",
    "ExpressionSyntaxError",
    "HandlerNotAnExpression",
    "HandlerNotRegistered",
    "InvalidOperand",
    "Add",
    "Expression",
    "Multiply",
    "OperatorRegistry",
    "default_registry",
    "Evaluator",
    "ExecutionConfig",
    "ExecutionResult",
    "Interpreter",
    "Tokenizer",
    "evaluate",
]
