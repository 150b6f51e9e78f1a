"""
Exception hierarchy for expression evaluation.

Every failure raised by the converter or the evaluator derives from
ExpressionError and carries the error kind, the offending token and its
position in the token sequence (when one exists).
"""

from shunt_calc.models import ErrorDetail, ErrorKind


class ExpressionError(ValueError):
    """Base exception for expression errors."""

    kind: ErrorKind

    def __init__(
        self,
        message: str,
        token: str | None = None,
        position: int | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.token = token
        self.position = position

    def to_detail(self) -> ErrorDetail:
        """Convert the exception into its serializable form."""
        return ErrorDetail(
            kind=self.kind,
            message=self.message,
            token=self.token,
            position=self.position,
        )


class MismatchedParenthesisError(ExpressionError):
    """Raised when a parenthesis has no partner."""
    kind = ErrorKind.MISMATCHED_PARENTHESIS


class InvalidTokenError(ExpressionError):
    """Raised when a token is neither integer, operator nor parenthesis."""
    kind = ErrorKind.INVALID_TOKEN

    def __init__(self, token: str, position: int | None = None, reason: str | None = None):
        shown = token if len(token) <= 32 else f"{token[:16]}...({len(token)} chars)"
        message = f"Invalid token {shown!r}"
        if reason:
            message += f": {reason}"
        super().__init__(message, token=token, position=position)


class InsufficientOperandsError(ExpressionError):
    """Raised when an operator finds fewer than two values on the stack."""
    kind = ErrorKind.INSUFFICIENT_OPERANDS

    def __init__(self, token: str, position: int | None = None, available: int = 0):
        super().__init__(
            f"Operator {token!r} needs 2 operands, found {available}",
            token=token,
            position=position,
        )
        self.available = available


class EmptyResultError(ExpressionError):
    """Raised when evaluation finishes with nothing on the stack."""
    kind = ErrorKind.EMPTY_RESULT

    def __init__(self):
        super().__init__("Expression produced no value")


class DivisionByZeroError(ExpressionError, ZeroDivisionError):
    """Raised when attempting to divide by zero."""
    kind = ErrorKind.DIVISION_BY_ZERO

    def __init__(self, position: int | None = None):
        super().__init__("Cannot divide by zero", token="/", position=position)
