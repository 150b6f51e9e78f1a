"""
Infix to postfix conversion (Shunting-Yard).

The converter keeps an operator stack and an output queue for the
duration of one call. In legacy mode every operator is pushed without
comparing precedence, so the output order depends only on
parenthesization and arrival order. Standard mode pops operators of
equal or higher precedence before pushing, giving the conventional
left-associative ordering.
"""

from collections import deque
from typing import Sequence

import structlog

from shunt_calc.errors import InvalidTokenError, MismatchedParenthesisError
from shunt_calc.models import EvaluationMode
from shunt_calc.tokens import (
    LEFT_PAREN,
    RIGHT_PAREN,
    SENTINEL,
    is_integer,
    is_operator,
    is_parenthesis,
    precedence,
)

logger = structlog.get_logger()


class ShuntingYard:
    """
    Converts infix token sequences to postfix order.

    Instances only hold the evaluation mode; all scratch state lives in
    the `convert` call, so one instance may be reused or shared.
    """

    def __init__(self, mode: EvaluationMode = EvaluationMode.LEGACY):
        self.mode = EvaluationMode(mode)

    def convert(self, tokens: Sequence[str]) -> list[str]:
        """
        Convert infix tokens to postfix tokens.

        Raises MismatchedParenthesisError for an unmatched `(` or `)` and
        InvalidTokenError for anything that is not an integer, operator or
        parenthesis. The empty sentinel token is skipped.
        """
        # Entries are (token, position) so an unclosed "(" can be located
        operator_stack: list[tuple[str, int]] = []
        output_queue: deque[str] = deque()

        for position, token in enumerate(tokens):
            if is_integer(token):
                output_queue.append(token)

            elif is_operator(token):
                if self.mode == EvaluationMode.STANDARD:
                    self._pop_higher_precedence(token, operator_stack, output_queue)
                operator_stack.append((token, position))

            elif token == LEFT_PAREN:
                operator_stack.append((token, position))

            elif token == RIGHT_PAREN:
                self._close_group(position, operator_stack, output_queue)

            elif token != SENTINEL:
                logger.warning("Invalid token", token=token, position=position)
                raise InvalidTokenError(token, position)

        while operator_stack:
            top, top_position = operator_stack.pop()
            if is_parenthesis(top):
                logger.warning("Unclosed parenthesis", position=top_position)
                raise MismatchedParenthesisError(
                    f"Unclosed parenthesis at position {top_position}",
                    token=top,
                    position=top_position,
                )
            output_queue.append(top)

        postfix = list(output_queue)
        logger.debug("Expression converted", postfix=postfix, mode=self.mode.value)
        return postfix

    @staticmethod
    def _close_group(
        position: int,
        operator_stack: list[tuple[str, int]],
        output_queue: deque[str],
    ) -> None:
        """Pop operators into the queue until the matching "(" is discarded."""
        while operator_stack:
            top, _ = operator_stack.pop()
            if top == LEFT_PAREN:
                return
            output_queue.append(top)

        logger.warning("Unmatched closing parenthesis", position=position)
        raise MismatchedParenthesisError(
            f"Unmatched closing parenthesis at position {position}",
            token=RIGHT_PAREN,
            position=position,
        )

    @staticmethod
    def _pop_higher_precedence(
        token: str,
        operator_stack: list[tuple[str, int]],
        output_queue: deque[str],
    ) -> None:
        """Move stacked operators that bind at least as tightly as token."""
        while operator_stack:
            top, _ = operator_stack[-1]
            if top == LEFT_PAREN or precedence(top) < precedence(token):
                break
            output_queue.append(operator_stack.pop()[0])
