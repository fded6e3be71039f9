"""
Pass 40 — Negative Number Check
"""

from strcalc.core.context import CalcContext
from strcalc.core.errors import HasNegativeError
from strcalc.core.logging import get_pass_logger

PASS_NAME = "p40_check_negatives"
log = get_pass_logger(PASS_NAME)


def collect_negatives(numbers: list[int]) -> list[int]:
    """Every value below zero, in original order."""
    return [n for n in numbers if n < 0]


def check_negatives(ctx: CalcContext) -> CalcContext:
    """
    Reject input containing negatives, reporting all of them.

    Raises:
        HasNegativeError: Carrying the complete ordered list of negatives
    """
    negatives = collect_negatives(ctx.numbers)
    if negatives:
        log.verbose("negatives_found", count=len(negatives))
        raise HasNegativeError(negatives)

    ctx.add_trace(pass_name=PASS_NAME, action="no_negatives")
    return ctx
