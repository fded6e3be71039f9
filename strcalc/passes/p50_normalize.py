"""
Pass 50 — Normalization

Numbers above the profile's ``max_value`` (1000) count as zero. Runs
after the negative check, so only non-negative values reach it.
"""

from strcalc.core.context import CalcContext
from strcalc.core.logging import get_pass_logger

PASS_NAME = "p50_normalize"
log = get_pass_logger(PASS_NAME)


def clamp_numbers(numbers: list[int], max_value: int = 1000) -> list[int]:
    """Replace every number greater than ``max_value`` with 0."""
    return [n if n <= max_value else 0 for n in numbers]


def normalize_numbers(ctx: CalcContext) -> CalcContext:
    """Apply the out-of-range rule to ``ctx.numbers``."""
    before = ctx.numbers
    ctx.numbers = clamp_numbers(before, ctx.settings.max_value)

    dropped = sum(1 for a, b in zip(before, ctx.numbers) if a != b)
    if dropped:
        log.verbose("numbers_zeroed", count=dropped, max_value=ctx.settings.max_value)

    ctx.add_trace(
        pass_name=PASS_NAME,
        action="normalized_numbers",
        after=f"{dropped} zeroed",
    )
    return ctx
