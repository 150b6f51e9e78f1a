"""
Postfix (RPN) evaluation over a single value stack.
"""

from typing import Callable, Sequence

import structlog

from shunt_calc.errors import (
    DivisionByZeroError,
    EmptyResultError,
    InsufficientOperandsError,
    InvalidTokenError,
)
from shunt_calc.models import EvaluationMode
from shunt_calc.tokens import is_integer, is_operator

logger = structlog.get_logger()


def _truncating_divide(dividend: int, divisor: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(dividend) // abs(divisor)
    return quotient if (dividend < 0) == (divisor < 0) else -quotient


# Binary operations keyed by operator. Each receives (arg1, arg2), where arg1
# was on top of the stack and arg2 directly below it.
_LEGACY_OPS: dict[str, Callable[[int, int], int]] = {
    "+": lambda arg1, arg2: arg1 + arg2,
    "-": lambda arg1, arg2: arg1 - arg2,
    "*": lambda arg1, arg2: arg1 * arg2,
    "/": lambda arg1, arg2: _truncating_divide(arg2, arg1),
}

_STANDARD_OPS: dict[str, Callable[[int, int], int]] = {
    **_LEGACY_OPS,
    "-": lambda arg1, arg2: arg2 - arg1,
}


class RPNEvaluator:
    """
    Evaluates postfix token sequences to an integer.

    `single_operand_shortcut` reproduces the legacy behaviour of returning
    the lone remaining value as soon as an operator arrives with only one
    operand on the stack. When disabled that situation raises
    InsufficientOperandsError instead.
    """

    def __init__(
        self,
        mode: EvaluationMode = EvaluationMode.LEGACY,
        single_operand_shortcut: bool = True,
    ):
        self.mode = EvaluationMode(mode)
        self.single_operand_shortcut = single_operand_shortcut
        self._ops = _STANDARD_OPS if self.mode == EvaluationMode.STANDARD else _LEGACY_OPS

    def evaluate(self, tokens: Sequence[str]) -> int:
        """
        Reduce postfix tokens to a single integer.

        Raises InvalidTokenError, InsufficientOperandsError,
        DivisionByZeroError or EmptyResultError.
        """
        value_stack: list[int] = []

        for position, token in enumerate(tokens):
            if is_integer(token):
                try:
                    value_stack.append(int(token))
                except ValueError as e:
                    # Literal exceeds the interpreter's int conversion digit limit
                    logger.warning("Integer literal too long", digits=len(token), position=position)
                    raise InvalidTokenError(token, position, reason="integer literal too long") from e

            elif is_operator(token):
                if len(value_stack) == 1 and self.single_operand_shortcut:
                    logger.debug(
                        "Single operand shortcut",
                        operator=token,
                        position=position,
                        skipped=len(tokens) - position,
                    )
                    return value_stack.pop()

                if len(value_stack) < 2:
                    logger.warning(
                        "Insufficient operands",
                        operator=token,
                        position=position,
                        available=len(value_stack),
                    )
                    raise InsufficientOperandsError(token, position, len(value_stack))

                arg1 = value_stack.pop()
                arg2 = value_stack.pop()
                if token == "/" and arg1 == 0:
                    logger.warning("Division by zero", position=position)
                    raise DivisionByZeroError(position)
                value_stack.append(self._ops[token](arg1, arg2))

            else:
                logger.warning("Invalid postfix token", token=token, position=position)
                raise InvalidTokenError(token, position)

        if not value_stack:
            logger.warning("Empty result")
            raise EmptyResultError()

        result = value_stack[-1]
        logger.debug(
            "Expression evaluated",
            result_bits=result.bit_length(),
            leftover=len(value_stack) - 1,
        )
        return result
