"""
Pass 10 — Consecutive Separator Check

Scans the text left to tokenize for separators with nothing but spaces
between them. Runs on raw text, before any splitting.
"""

from typing import Iterable, Optional

from strcalc.core.context import CalcContext
from strcalc.core.errors import ConsecutiveSeparatorsError
from strcalc.core.logging import get_pass_logger

PASS_NAME = "p10_check_separators"
log = get_pass_logger(PASS_NAME)


def find_consecutive_separators(text: str, separators: Iterable[str]) -> Optional[int]:
    """
    Return the index where a separator run is detected, or None.

    Spaces are skipped entirely: they neither set nor reset the
    "last significant character was a separator" flag. A separator that
    is still pending at the end of the text also counts, and is reported
    at ``len(text)``.
    """
    seps = set(separators)
    after_separator = False

    for i, c in enumerate(text):
        if c == " ":
            continue
        if c in seps:
            if after_separator:
                return i
            after_separator = True
            continue
        after_separator = False

    if after_separator:
        return len(text)
    return None


def check_separators(ctx: CalcContext) -> CalcContext:
    """
    Reject adjacent or trailing separators.

    Raises:
        ConsecutiveSeparatorsError: On "1,\\n2", "1\\n,2", "1, ,2" or "1,"
    """
    position = find_consecutive_separators(ctx.body, ctx.separators)

    if position is not None:
        log.verbose("consecutive_separators", position=position)
        raise ConsecutiveSeparatorsError()

    ctx.add_trace(pass_name=PASS_NAME, action="separators_ok")
    return ctx
