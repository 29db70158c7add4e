"""Evaluate endpoint for expression evaluation."""

from typing import Optional

from fastapi import APIRouter
from pydantic import BaseModel, Field

from prefixeval.operators import default_registry
from prefixeval.runtime.interpreter import ExecutionConfig, Interpreter
from prefixeval.runtime.tokenizer import MAX_DEPTH_LIMIT

router = APIRouter()


class EvaluateOptions(BaseModel):
    """Optional limits for a single evaluation."""
    max_depth: Optional[int] = Field(default=None, ge=1, le=MAX_DEPTH_LIMIT)
    max_input_length: Optional[int] = Field(default=None, ge=1)


class EvaluateRequest(BaseModel):
    """Request body for expression evaluation."""
    expression: str
    options: Optional[EvaluateOptions] = None


class EvaluateResponse(BaseModel):
    """Response body for expression evaluation."""
    success: bool
    expression: str
    result: Optional[str] = None
    error: Optional[str] = None
    error_kind: Optional[str] = None
    execution_time_ms: float


@router.post("/evaluate", response_model=EvaluateResponse)
async def evaluate_expression(request: EvaluateRequest):
    """
    Evaluate an expression.

    Syntax and registry errors are reported in the body; they are a normal
    outcome of evaluation, not a server failure.
    """
    options = request.options.model_dump() if request.options else None
    interpreter = Interpreter(
        registry=default_registry(),
        config=ExecutionConfig.from_options(options),
    )
    result = interpreter.interpret(request.expression)

    return EvaluateResponse(
        success=result.success,
        expression=result.expression,
        result=result.value,
        error=result.error,
        error_kind=result.error_kind,
        execution_time_ms=result.execution_time_ms,
    )
