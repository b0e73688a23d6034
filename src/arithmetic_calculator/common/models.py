"""Pydantic models for arithmetic operation outcomes."""
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from arithmetic_calculator.common.errors import ErrorKind


class OperationResult(BaseModel):
    """Represents a successfully evaluated arithmetic expression."""

    model_config = ConfigDict(frozen=True)

    ok: Literal[True] = True
    expression: str = Field(..., description="Original arithmetic expression")
    result: float = Field(..., description="Evaluated numeric result of the expression")


class OperationFailure(BaseModel):
    """Represents an arithmetic expression that could not be evaluated."""

    model_config = ConfigDict(frozen=True)

    ok: Literal[False] = False
    expression: str = Field(..., description="Original arithmetic expression")
    kind: ErrorKind = Field(..., description="Kind of failure")
    error: str = Field(..., description="Human-readable failure message")
