"""
Prefix Expression Interpreter

Single entry point tying the tokenizer and evaluator together:
text -> Tokenizer.tokenize() -> token tree -> Evaluator.run() -> decimal text.

Key classes:
- ExecutionConfig: limits applied while tokenizing and evaluating
- ExecutionResult: outcome of interpret(), for callers that present errors
- Interpreter: owns the registry and config for a series of evaluations
"""

from __future__ import annotations

import logging
import time
from collections.abc import Mapping
from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

from prefixeval.errors import EvaluationError
from prefixeval.operators import default_registry
from prefixeval.runtime import tokens
from prefixeval.runtime.evaluator import Evaluator
from prefixeval.runtime.tokenizer import (
    DEFAULT_MAX_DEPTH,
    DEFAULT_MAX_INPUT_LENGTH,
    MAX_DEPTH_LIMIT,
    Tokenizer,
)

logger = logging.getLogger(__name__)


@dataclass
class ExecutionConfig:
    """Limits for a single evaluation."""
    max_depth: int = DEFAULT_MAX_DEPTH
    max_input_length: Optional[int] = DEFAULT_MAX_INPUT_LENGTH

    def __post_init__(self):
        if not 1 <= self.max_depth <= MAX_DEPTH_LIMIT:
            raise ValueError(
                f"max_depth must be between 1 and {MAX_DEPTH_LIMIT}, got {self.max_depth}"
            )
        if self.max_input_length is not None and self.max_input_length < 1:
            raise ValueError(f"max_input_length must be positive, got {self.max_input_length}")

    @classmethod
    def from_options(cls, options: Optional[Dict[str, Any]] = None) -> "ExecutionConfig":
        """Build a config from a loose options dict, ignoring unknown keys."""
        options = options or {}
        return cls(**{
            key: options[key]
            for key in ("max_depth", "max_input_length")
            if options.get(key) is not None
        })


@dataclass
class ExecutionResult:
    """Outcome of Interpreter.interpret()."""
    success: bool
    expression: str
    value: Optional[str] = None
    error: Optional[str] = None
    error_kind: Optional[str] = None
    execution_time_ms: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class Interpreter:
    """
    Evaluates expressions against a fixed registry.

    The registry is never modified here, so one Interpreter can serve any
    number of evaluations.
    """

    def __init__(self,
                 registry: Optional[Mapping] = None,
                 config: Optional[ExecutionConfig] = None):
        self.registry = default_registry() if registry is None else registry
        self.config = config or ExecutionConfig()
        self.tokenizer = Tokenizer(
            self.registry,
            max_depth=self.config.max_depth,
            max_input_length=self.config.max_input_length,
        )
        self.evaluator = Evaluator(max_depth=self.config.max_depth)

    def tokenize(self, expression: str) -> tokens.List:
        return self.tokenizer.tokenize(expression)

    def run(self, tree: tokens.Token) -> Any:
        return self.evaluator.run(tree, self.registry)

    def evaluate(self, expression: str) -> str:
        """
        Evaluate ``expression`` and render the result as decimal text.

        Raises:
            EvaluationError: any syntax or registry failure.
        """
        tree = self.tokenize(expression)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"Tokenized {expression!r} -> {tree.to_data()!r}")
        result = self.run(tree)
        logger.debug("Evaluated %r -> %r", expression, result)
        return str(result)

    def interpret(self, expression: str) -> ExecutionResult:
        """Like evaluate(), but reports evaluation errors in the result."""
        start_time = time.perf_counter()
        try:
            value = self.evaluate(expression)
        except EvaluationError as e:
            logger.debug(f"Evaluation of {expression!r} failed: {e.kind}: {e}")
            return ExecutionResult(
                success=False,
                expression=expression,
                error=str(e),
                error_kind=e.kind,
                execution_time_ms=(time.perf_counter() - start_time) * 1000,
            )
        return ExecutionResult(
            success=True,
            expression=expression,
            value=value,
            execution_time_ms=(time.perf_counter() - start_time) * 1000,
        )


def evaluate(expression: str,
             registry: Optional[Mapping] = None,
             config: Optional[ExecutionConfig] = None) -> str:
    """Evaluate ``expression`` with a one-off Interpreter."""
    return Interpreter(registry, config).evaluate(expression)
