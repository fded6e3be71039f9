"""
Pass 60 — Sum
"""

from strcalc.core.context import CalcContext
from strcalc.core.logging import get_pass_logger

PASS_NAME = "p60_sum"
log = get_pass_logger(PASS_NAME)


def sum_numbers(ctx: CalcContext) -> CalcContext:
    ctx.total = sum(ctx.numbers)
    log.verbose("summed", total=ctx.total)
    ctx.add_trace(pass_name=PASS_NAME, action="summed", after=str(ctx.total))
    return ctx
