"""
IR Enums — All labels, statuses, and error codes.

No stringly-typed constants scattered across passes.
"""

from enum import Enum


class SeparatorMode(str, Enum):
    """How the separator set was resolved."""

    DEFAULT = "default"    # Comma and newline
    CUSTOM = "custom"      # Single char declared in a "//<c>\n" header


class ErrorKind(str, Enum):
    """
    Classification of a rejected calculation.

    Mutually exclusive; the first rule hit in pipeline order wins.
    """

    CONSECUTIVE_SEPARATORS = "consecutive_separators"
    INVALID_INPUT = "invalid_input"
    NAN = "nan"
    HAS_NEGATIVE = "has_negative"


class DiagnosticLevel(str, Enum):
    """Diagnostic severity levels."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class CalcStatus(str, Enum):
    """Overall calculation status."""

    SUCCESS = "success"
    REJECTED = "rejected"    # Input failed validation (classified error)
    ERROR = "error"          # Unexpected failure inside a pass
