"""Operators endpoint listing the registry."""

from typing import List

from fastapi import APIRouter
from pydantic import BaseModel

from prefixeval.operators import default_registry

router = APIRouter()


class OperatorInfo(BaseModel):
    name: str
    handler: str
    description: str


class OperatorsResponse(BaseModel):
    registry_id: str
    version: str
    operators: List[OperatorInfo]


@router.get("/operators", response_model=OperatorsResponse)
async def list_operators():
    """List operators available to /evaluate."""
    registry = default_registry()
    return OperatorsResponse(
        registry_id=registry.registry_id,
        version=registry.version,
        operators=[OperatorInfo(**op) for op in registry.describe()],
    )
