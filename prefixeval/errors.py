"""
Evaluation errors.

Every failure the tokenizer, evaluator or an operator can report derives from
EvaluationError. Each carries a machine-readable ``kind`` and the message that
callers present to the user.
"""

from __future__ import annotations

from typing import Any, Optional


class EvaluationError(Exception):
    """Base class for all reported (non-fatal) evaluation failures."""

    kind = "evaluation_error"
    message = "The expression could not be evaluated."

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)


class ExpressionSyntaxError(EvaluationError):
    """Unbalanced parentheses, an empty group, or a bad leading token."""

    kind = "syntax_error"
    message = "There is a syntax error in the given expression."


class NestingTooDeep(ExpressionSyntaxError):
    """Groups nested deeper than ExecutionConfig.max_depth."""

    def __init__(self, max_depth: int):
        self.max_depth = max_depth
        super().__init__(f"{self.message} Nesting exceeds {max_depth} levels.")


class InputTooLong(ExpressionSyntaxError):
    def __init__(self, length: int, max_length: int):
        self.length = length
        self.max_length = max_length
        super().__init__(
            f"{self.message} Input of {length} characters exceeds {max_length}."
        )


class HandlerNotRegistered(EvaluationError):
    kind = "handler_not_registered"

    def __init__(self, name: Any):
        self.name = name
        super().__init__(f"Expression handler `{name}` must be registered.")


class HandlerNotAnExpression(EvaluationError):
    kind = "handler_not_expression"

    def __init__(self, type_name: str):
        self.type_name = type_name
        super().__init__(
            f"Expression handler `{type_name}` must implement the `Expression` interface."
        )


class DuplicateHandler(EvaluationError):
    kind = "duplicate_handler"

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Expression handler `{name}` is already registered.")


class InvalidOperand(EvaluationError):
    """An operator received something other than an integer."""

    kind = "invalid_operand"

    def __init__(self, value: Any, handler: Optional[str] = None):
        self.value = value
        self.handler = handler
        target = f" for `{handler}`" if handler else ""
        super().__init__(f"Operand `{value}`{target} is not an integer.")
