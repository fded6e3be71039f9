"""
IR — Intermediate Representation

Everything a calculation resolved, as serializable data.
"""

from strcalc.ir.enums import (
    CalcStatus,
    DiagnosticLevel,
    ErrorKind,
    SeparatorMode,
)
from strcalc.ir.schema import (
    CalcErrorInfo,
    CalcResult,
    Diagnostic,
    TraceEntry,
)

__all__ = [
    # Enums
    "CalcStatus",
    "DiagnosticLevel",
    "ErrorKind",
    "SeparatorMode",
    # Models
    "CalcErrorInfo",
    "CalcResult",
    "Diagnostic",
    "TraceEntry",
]
