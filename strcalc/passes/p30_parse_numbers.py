"""
Pass 30 — Number Parsing

Parses every token as a signed 64-bit integer. One bad token fails the
whole calculation; there are no partial results.
"""

import re

from strcalc.core.context import CalcContext
from strcalc.core.errors import NotANumberError
from strcalc.core.logging import get_pass_logger

PASS_NAME = "p30_parse_numbers"
log = get_pass_logger(PASS_NAME)

# Optional sign, ASCII digits only (no "_", no unicode digits, no spaces)
INT_PATTERN = re.compile(r"[+-]?[0-9]+", re.ASCII)

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1
MAX_DIGITS = len(str(INT64_MAX))


def parse_int64(token: str) -> int:
    """
    Parse a token as a signed 64-bit integer.

    Raises:
        NotANumberError: If the token is empty, malformed, or out of range
    """
    if not INT_PATTERN.fullmatch(token):
        raise NotANumberError(token)

    # Only significant digits reach int(), which refuses very long strings
    digits = token.lstrip("+-").lstrip("0") or "0"
    if len(digits) > MAX_DIGITS:
        raise NotANumberError(token)

    value = int(digits)
    if token[0] == "-":
        value = -value
    if not INT64_MIN <= value <= INT64_MAX:
        raise NotANumberError(token)
    return value


def parse_numbers(ctx: CalcContext) -> CalcContext:
    """Parse ``ctx.tokens`` into ``ctx.numbers``, in input order."""
    numbers = []
    for token in ctx.tokens:
        try:
            numbers.append(parse_int64(token))
        except NotANumberError:
            log.verbose("not_a_number", token=token[:50])
            raise

    ctx.numbers = numbers
    ctx.add_trace(
        pass_name=PASS_NAME,
        action="parsed_numbers",
        after=f"{len(numbers)} numbers",
    )
    return ctx
