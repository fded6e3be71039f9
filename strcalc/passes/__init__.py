"""Passes — Pipeline stages for the string calculator."""

from strcalc.passes.p00_resolve_delimiter import resolve_delimiter
from strcalc.passes.p10_check_separators import check_separators
from strcalc.passes.p20_tokenize import tokenize
from strcalc.passes.p30_parse_numbers import parse_numbers
from strcalc.passes.p40_check_negatives import check_negatives
from strcalc.passes.p50_normalize import normalize_numbers
from strcalc.passes.p60_sum import sum_numbers

__all__ = [
    "resolve_delimiter",
    "check_separators",
    "tokenize",
    "parse_numbers",
    "check_negatives",
    "normalize_numbers",
    "sum_numbers",
]
