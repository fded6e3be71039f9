"""
Errors — Classified failures raised by pipeline passes.

Every rejection of user input is an AddError subclass tagged with an
ErrorKind, so callers can either catch a specific class or switch on
``error.kind``.
"""

from typing import Iterable

from strcalc.ir.enums import ErrorKind


class CalcError(Exception):
    """Base exception for strcalc."""


class AddError(CalcError):
    """Base class for input the calculator refuses to sum."""

    kind: ErrorKind
    message: str = "invalid input"

    def __init__(self, message: str = None):
        super().__init__(message or self.message)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AddError):
            return NotImplemented
        return self.kind == other.kind

    def __hash__(self) -> int:
        return hash(self.kind)


class ConsecutiveSeparatorsError(AddError):
    """Two separators with nothing but spaces between them, or a trailing one."""

    kind = ErrorKind.CONSECUTIVE_SEPARATORS
    message = "consecutive separators detected"


class InvalidInputError(AddError):
    """Custom separator header is malformed."""

    kind = ErrorKind.INVALID_INPUT
    message = "invalid input"


class NotANumberError(AddError):
    """A token is not a signed 64-bit integer."""

    kind = ErrorKind.NAN
    message = "not a number"

    def __init__(self, token: str = None):
        self.token = token
        super().__init__()


class HasNegativeError(AddError):
    """One or more negative numbers in the input."""

    kind = ErrorKind.HAS_NEGATIVE

    def __init__(self, negatives: Iterable[int]):
        self.negatives = list(negatives)
        super().__init__(f"input has negative number {self.negatives}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HasNegativeError):
            return NotImplemented
        return self.negatives == other.negatives

    def __hash__(self) -> int:
        return hash((self.kind, tuple(self.negatives)))

    def __repr__(self) -> str:
        return f"HasNegativeError({self.negatives!r})"
