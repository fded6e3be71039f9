"""
Calculator — Public entry points.

    >>> add("1\\n2,3")
    6
    >>> add("//;\\n1;2")
    3
"""

from typing import Optional

from strcalc.core.context import CalcRequest
from strcalc.core.engine import Engine, Pipeline
from strcalc.ir.schema import CalcResult
from strcalc.passes import (
    check_negatives,
    check_separators,
    normalize_numbers,
    parse_numbers,
    resolve_delimiter,
    sum_numbers,
    tokenize,
)

DEFAULT_PIPELINE = "default"


def setup_default_pipeline(engine: Engine) -> None:
    """Register the default pipeline."""
    engine.register_pipeline(
        Pipeline(
            id=DEFAULT_PIPELINE,
            name="Default String Calculator Pipeline",
            passes=[
                resolve_delimiter,   # "//<c>\n" header or comma/newline
                check_separators,    # Before tokenizing, on raw text
                tokenize,
                parse_numbers,
                check_negatives,     # All negatives, before normalizing
                normalize_numbers,   # > max_value counts as 0
                sum_numbers,
            ],
        )
    )


# Global engine instance
_engine: Optional[Engine] = None


def get_engine() -> Engine:
    """Get or create the global engine, with the default pipeline registered."""
    global _engine
    if _engine is None:
        _engine = Engine()
        setup_default_pipeline(_engine)
    return _engine


def calculate(text: str, profile: Optional[str] = None) -> CalcResult:
    """
    Run the calculator without raising on bad input.

    Returns:
        CalcResult with ``total`` on success, ``error`` when rejected
    """
    request = CalcRequest(text=text, profile=profile)
    return get_engine().calculate(request, DEFAULT_PIPELINE)


def add(text: str, profile: Optional[str] = None) -> int:
    """
    Sum the numbers in a delimited string.

    Args:
        text: Comma/newline separated integers, or "//<c>\\n" followed by
            integers separated by the custom character <c>
        profile: Settings profile name (default: STRCALC_PROFILE or "default")

    Returns:
        The sum, with numbers above 1000 counted as 0

    Raises:
        ConsecutiveSeparatorsError: Adjacent or trailing separators
        InvalidInputError: Malformed custom separator header
        NotANumberError: A token is not a 64-bit integer
        HasNegativeError: Negatives present (``.negatives`` lists them all)
    """
    ctx = get_engine().execute(CalcRequest(text=text, profile=profile), DEFAULT_PIPELINE)
    if ctx.error is not None:
        raise ctx.error
    return ctx.total
