"""
shunt-calc - Shunting-Yard infix expression evaluator

Converts whitespace-delimited infix arithmetic to postfix (RPN) with the
Shunting-Yard algorithm and reduces the postfix form on a value stack.
"""

__version__ = "1.0.0"

from shunt_calc.engine import Engine, evaluate_expression, to_postfix
from shunt_calc.errors import (
    DivisionByZeroError,
    EmptyResultError,
    ExpressionError,
    InsufficientOperandsError,
    InvalidTokenError,
    MismatchedParenthesisError,
)
from shunt_calc.models import ErrorKind, EvaluationMode, EvaluationReport

__all__ = [
    "Engine",
    "evaluate_expression",
    "to_postfix",
    "ExpressionError",
    "MismatchedParenthesisError",
    "InvalidTokenError",
    "InsufficientOperandsError",
    "EmptyResultError",
    "DivisionByZeroError",
    "ErrorKind",
    "EvaluationMode",
    "EvaluationReport",
]
