"""
IR Schema — Pydantic models for a calculation outcome.

The IR records what the pipeline resolved at each step, so a result can
be inspected, serialized, and compared without re-running the input.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from strcalc.ir.enums import CalcStatus, DiagnosticLevel, ErrorKind, SeparatorMode

IR_VERSION = "0.1.0"


class CalcErrorInfo(BaseModel):
    """A classified rejection, as data."""

    kind: ErrorKind
    message: str
    negatives: list[int] = Field(
        default_factory=list,
        description="Negative values in input order (has_negative only)",
    )


class TraceEntry(BaseModel):
    """A single pipeline trace entry."""

    id: str
    timestamp: datetime
    pass_name: str
    action: str
    before: Optional[str] = None
    after: Optional[str] = None


class Diagnostic(BaseModel):
    """A diagnostic message."""

    id: str
    level: DiagnosticLevel
    code: str
    message: str
    source: str


class CalcResult(BaseModel):
    """The complete output of one calculation."""

    version: str = Field(default=IR_VERSION, description="IR schema version")
    request_id: str = Field(..., description="Unique calculation ID")
    timestamp: datetime = Field(..., description="When the calculation started")
    processing_duration_ms: Optional[float] = None

    input: str = Field(..., description="Raw input text")
    profile: str = Field("default", description="Settings profile used")

    # Resolved by the passes, in pipeline order
    mode: Optional[SeparatorMode] = None
    separators: list[str] = Field(default_factory=list)
    tokens: list[str] = Field(default_factory=list)
    numbers: list[int] = Field(
        default_factory=list,
        description="Parsed numbers after normalization",
    )

    total: Optional[int] = Field(None, description="Sum, when status is success")
    status: CalcStatus = Field(..., description="Calculation status")
    error: Optional[CalcErrorInfo] = None

    trace: list[TraceEntry] = Field(default_factory=list)
    diagnostics: list[Diagnostic] = Field(default_factory=list)
