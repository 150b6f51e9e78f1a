"""
Core data models for shunt-calc.

Defines the token kinds, evaluation modes, error kinds and the
serializable report produced for every evaluated expression.
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field, computed_field


# =============================================================================
# Enums
# =============================================================================

class TokenKind(str, Enum):
    """Classification of a single whitespace-delimited token."""
    INTEGER = "integer"
    OPERATOR = "operator"
    LEFT_PAREN = "left_paren"
    RIGHT_PAREN = "right_paren"
    INVALID = "invalid"


class EvaluationMode(str, Enum):
    """How operators are ordered and applied."""
    LEGACY = "legacy"  # No precedence, reversed subtraction
    STANDARD = "standard"  # Conventional precedence and operand order


class ErrorKind(str, Enum):
    """Failure categories surfaced by conversion and evaluation."""
    MISMATCHED_PARENTHESIS = "mismatched_parenthesis"
    INVALID_TOKEN = "invalid_token"
    INSUFFICIENT_OPERANDS = "insufficient_operands"
    EMPTY_RESULT = "empty_result"
    DIVISION_BY_ZERO = "division_by_zero"


class Stage(str, Enum):
    """Pipeline stage an error was raised in."""
    CONVERSION = "conversion"
    EVALUATION = "evaluation"


# =============================================================================
# Report Models
# =============================================================================

class ErrorDetail(BaseModel):
    """Structured description of a failed expression."""
    kind: ErrorKind
    message: str
    token: str | None = None
    position: int | None = None
    stage: Stage | None = None


class EvaluationReport(BaseModel):
    """
    Outcome of running one expression through the pipeline.

    On success `value` holds the result and `error` is None; on failure
    `postfix` and `value` hold whatever the pipeline produced before the
    failing stage.
    """
    expression: str
    mode: EvaluationMode
    tokens: list[str] = Field(default_factory=list)
    postfix: list[str] | None = None
    value: int | None = None
    error: ErrorDetail | None = None
    duration_ms: float = 0.0
    created_at: datetime = Field(default_factory=datetime.utcnow)

    @computed_field
    @property
    def success(self) -> bool:
        return self.error is None
