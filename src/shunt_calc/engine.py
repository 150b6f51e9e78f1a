"""
Expression pipeline for shunt-calc.

Ties the tokenizer, converter and evaluator together:
1. Split the raw expression on whitespace
2. Convert the infix tokens to postfix
3. Reduce the postfix tokens to an integer

The first failure aborts the pipeline; nothing is retried.
"""

import time
from typing import Iterable

import structlog

from shunt_calc.config import settings
from shunt_calc.converter import ShuntingYard
from shunt_calc.errors import ExpressionError
from shunt_calc.evaluator import RPNEvaluator
from shunt_calc.models import EvaluationMode, EvaluationReport, Stage
from shunt_calc.tokens import tokenize

logger = structlog.get_logger()

# Expressions shown by `shunt demo`
SAMPLE_EXPRESSIONS = (
    "1 + 3",
    "( 1 + 3 ) * 2",
    "( 4 / 2 ) + 6",
    "4 + ( 12 / ( 1 * 2 ) )",
    "( 1 + ( 12 * 2 )",
)


class Engine:
    """
    Runs expressions through conversion and evaluation.

    Holds a converter and an evaluator configured for one mode. Neither
    keeps per-call state, so an engine can be reused for any number of
    expressions.
    """

    def __init__(
        self,
        mode: EvaluationMode | None = None,
        single_operand_shortcut: bool | None = None,
    ):
        self.mode = EvaluationMode(mode if mode is not None else settings.mode)
        if single_operand_shortcut is None:
            single_operand_shortcut = settings.single_operand_shortcut
        self.converter = ShuntingYard(self.mode)
        self.evaluator = RPNEvaluator(self.mode, single_operand_shortcut)

    def to_postfix(self, raw: str) -> list[str]:
        """Tokenize and convert an infix expression."""
        return self.converter.convert(tokenize(raw, sentinel=True))

    def evaluate(self, raw: str) -> int:
        """Evaluate an infix expression, raising on the first failure."""
        return self.evaluator.evaluate(self.to_postfix(raw))

    def run(self, raw: str) -> EvaluationReport:
        """
        Evaluate an expression and capture the outcome as a report.

        Expression errors are recorded on the report rather than raised.
        """
        start_time = time.time()
        report = EvaluationReport(expression=raw, mode=self.mode, tokens=tokenize(raw))
        stage = Stage.CONVERSION

        try:
            report.postfix = self.converter.convert(report.tokens)
            stage = Stage.EVALUATION
            report.value = self.evaluator.evaluate(report.postfix)
        except ExpressionError as e:
            report.error = e.to_detail()
            report.error.stage = stage
            logger.info(
                "Evaluation failed",
                expression=raw,
                stage=stage.value,
                kind=e.kind.value,
                position=e.position,
            )

        report.duration_ms = (time.time() - start_time) * 1000
        return report

    def run_many(self, expressions: Iterable[str]) -> list[EvaluationReport]:
        """Evaluate a batch of expressions independently."""
        return [self.run(raw) for raw in expressions]


def to_postfix(raw: str, *, mode: EvaluationMode | None = None) -> list[str]:
    """Convert a whitespace-delimited infix expression to postfix tokens."""
    return Engine(mode).to_postfix(raw)


def evaluate_expression(
    raw: str,
    *,
    mode: EvaluationMode | None = None,
    single_operand_shortcut: bool | None = None,
) -> int:
    """
    Evaluate a whitespace-delimited infix expression.

    Raises the first ExpressionError encountered by either stage.
    """
    return Engine(mode, single_operand_shortcut).evaluate(raw)
