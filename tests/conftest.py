"""Test fixtures for the prefixeval test suite."""
import pytest
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from prefixeval.operators import Add, Expression, Multiply, OperatorRegistry, default_registry
from prefixeval.runtime.tokenizer import Tokenizer
from prefixeval.runtime.evaluator import Evaluator
from prefixeval.runtime.interpreter import Interpreter


class RecordingExpression(Expression):
    """Sums its arguments and records every call, in call order."""

    name = "record"

    def __init__(self):
        self.calls = []

    def run(self, *arguments):
        self.calls.append(arguments)
        return sum(arguments)


@pytest.fixture
def registry() -> OperatorRegistry:
    """Reference registry with add and multiply."""
    return default_registry()


@pytest.fixture
def plain_registry():
    """Registry supplied as a plain dict, as a caller may do."""
    return {"add": Add(), "multiply": Multiply()}


@pytest.fixture
def tokenizer(registry) -> Tokenizer:
    return Tokenizer(registry)


@pytest.fixture
def evaluator() -> Evaluator:
    return Evaluator()


@pytest.fixture
def interpreter(registry) -> Interpreter:
    return Interpreter(registry=registry)


@pytest.fixture
def recorder() -> RecordingExpression:
    return RecordingExpression()
