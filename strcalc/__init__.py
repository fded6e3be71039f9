"""
strcalc — String Calculator

A deterministic pipeline that parses a delimited text string into
integers, validates them, and returns their sum or a classified error.
"""

__version__ = "0.1.0"
__ir_version__ = "0.1.0"

from strcalc.core.errors import (  # noqa: E402
    AddError,
    CalcError,
    ConsecutiveSeparatorsError,
    HasNegativeError,
    InvalidInputError,
    NotANumberError,
)
from strcalc.ir.enums import ErrorKind  # noqa: E402
from strcalc.calculator import add, calculate  # noqa: E402

__all__ = [
    "add",
    "calculate",
    "AddError",
    "CalcError",
    "ConsecutiveSeparatorsError",
    "HasNegativeError",
    "InvalidInputError",
    "NotANumberError",
    "ErrorKind",
]
