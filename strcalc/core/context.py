"""
CalcContext — Mutable state passed between pipeline passes.

Each pass reads prior artifacts and mutates only its allowed fields.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional
from uuid import uuid4

from strcalc.config.loader import get_default_profile, get_settings
from strcalc.config.models import CalcSettings
from strcalc.core.errors import AddError, HasNegativeError
from strcalc.ir.enums import CalcStatus, DiagnosticLevel, SeparatorMode
from strcalc.ir.schema import (
    CalcErrorInfo,
    CalcResult,
    Diagnostic,
    TraceEntry,
)


@dataclass
class CalcRequest:
    """Input to the calculation pipeline."""

    text: str
    request_id: Optional[str] = None
    profile: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.request_id is None:
            self.request_id = str(uuid4())


@dataclass
class CalcContext:
    """
    Mutable context passed through pipeline passes.

    Each pass may read all fields but should only mutate
    the fields it is responsible for.
    """

    # Input
    request: CalcRequest
    raw_text: str
    settings: CalcSettings = field(default_factory=CalcSettings)
    profile: str = "default"

    # p00_resolve_delimiter
    mode: Optional[SeparatorMode] = None
    separators: tuple[str, ...] = ()
    body: str = ""

    # p20_tokenize / p30_parse_numbers
    tokens: list[str] = field(default_factory=list)
    numbers: list[int] = field(default_factory=list)

    # p60_sum
    total: Optional[int] = None

    # Outcome
    status: CalcStatus = CalcStatus.SUCCESS
    error: Optional[Exception] = None
    trace: list[TraceEntry] = field(default_factory=list)
    diagnostics: list[Diagnostic] = field(default_factory=list)
    start_time: datetime = field(default_factory=datetime.now)

    @classmethod
    def from_request(cls, request: CalcRequest) -> "CalcContext":
        """Create a context from a calculation request."""
        profile = request.profile or get_default_profile()
        return cls(
            request=request,
            raw_text=request.text,
            settings=get_settings(profile),
            profile=profile,
        )

    @property
    def halted(self) -> bool:
        """True once a pass has rejected the input or failed."""
        return self.status != CalcStatus.SUCCESS

    def add_trace(self, pass_name: str, action: str, **kwargs: Any) -> None:
        """Add a trace entry."""
        self.trace.append(
            TraceEntry(
                id=str(uuid4()),
                timestamp=datetime.now(),
                pass_name=pass_name,
                action=action,
                before=kwargs.get("before"),
                after=kwargs.get("after"),
            )
        )

    def add_diagnostic(
        self,
        level: str,
        code: str,
        message: str,
        source: str,
    ) -> None:
        """Add a diagnostic message."""
        self.diagnostics.append(
            Diagnostic(
                id=str(uuid4()),
                level=DiagnosticLevel(level),
                code=code,
                message=message,
                source=source,
            )
        )

    def reject(self, error: AddError, source: str) -> None:
        """Record a classified rejection of the input."""
        self.status = CalcStatus.REJECTED
        self.error = error
        self.total = None
        self.add_diagnostic(
            level="error",
            code=error.kind.name,
            message=str(error),
            source=source,
        )

    def _error_info(self) -> Optional[CalcErrorInfo]:
        if not isinstance(self.error, AddError):
            return None
        negatives = self.error.negatives if isinstance(self.error, HasNegativeError) else []
        return CalcErrorInfo(
            kind=self.error.kind,
            message=str(self.error),
            negatives=negatives,
        )

    def to_result(self) -> CalcResult:
        """Convert context to final CalcResult."""
        duration_ms = (datetime.now() - self.start_time).total_seconds() * 1000
        return CalcResult(
            request_id=self.request.request_id or str(uuid4()),
            timestamp=self.start_time,
            processing_duration_ms=duration_ms,
            input=self.raw_text,
            profile=self.profile,
            mode=self.mode,
            separators=list(self.separators),
            tokens=self.tokens,
            numbers=self.numbers,
            total=self.total if self.status == CalcStatus.SUCCESS else None,
            status=self.status,
            error=self._error_info(),
            trace=self.trace,
            diagnostics=self.diagnostics,
        )
