"""
Engine — Pipeline orchestration.

The engine selects a pipeline, runs passes in order, stops at the first
rejection, and packages output.

The engine is NOT where parsing rules live.
"""

from dataclasses import dataclass
from typing import Callable, Optional

from strcalc.core.context import CalcContext, CalcRequest
from strcalc.core.errors import AddError
from strcalc.core.logging import CalcLogger
from strcalc.ir.enums import CalcStatus
from strcalc.ir.schema import CalcResult


# Type alias for a pass function
PassFn = Callable[[CalcContext], CalcContext]


@dataclass
class Pipeline:
    """A named sequence of passes."""

    id: str
    name: str
    passes: list[PassFn]


class Engine:
    """
    Pipeline orchestrator.

    Runs passes in order, classifies failures, and packages results.
    """

    def __init__(self) -> None:
        self._pipelines: dict[str, Pipeline] = {}

    def register_pipeline(self, pipeline: Pipeline) -> None:
        """Register a pipeline by ID."""
        self._pipelines[pipeline.id] = pipeline

    def list_pipelines(self) -> list[str]:
        """List registered pipeline IDs."""
        return list(self._pipelines.keys())

    def execute(
        self,
        request: CalcRequest,
        pipeline_id: Optional[str] = None,
    ) -> CalcContext:
        """
        Run a calculation and return the final context.

        A pass that raises AddError rejects the input; any other exception
        marks the calculation as failed and is kept on ``ctx.error``.
        """
        pipeline_id = pipeline_id or "default"
        ctx = CalcContext.from_request(request)

        if pipeline_id not in self._pipelines:
            ctx.status = CalcStatus.ERROR
            ctx.add_diagnostic(
                level="error",
                code="PIPELINE_NOT_FOUND",
                message=f"Pipeline '{pipeline_id}' not registered",
                source="engine",
            )
            return ctx

        pipeline = self._pipelines[pipeline_id]
        tlog = CalcLogger(request.request_id)

        for pass_fn in pipeline.passes:
            pass_name = pass_fn.__name__
            try:
                tlog.pass_start(pass_name)
                ctx = pass_fn(ctx)
                tlog.pass_end(pass_name)
            except AddError as e:
                tlog.pass_rejected(pass_name, e)
                ctx.reject(e, source=pass_name)
                ctx.add_trace(pass_name=pass_name, action="pipeline_halted")
                break
            except Exception as e:
                tlog.pass_error(pass_name, e)
                ctx.status = CalcStatus.ERROR
                ctx.error = e
                ctx.add_diagnostic(
                    level="error",
                    code="PASS_ERROR",
                    message=f"Pass '{pass_name}' failed: {e}",
                    source="engine",
                )
                ctx.add_trace(pass_name=pass_name, action="error")
                break

        tlog.calculation_complete(
            status=ctx.status.value,
            tokens=len(ctx.tokens),
            total=ctx.total,
            diagnostics=len(ctx.diagnostics),
        )

        return ctx

    def calculate(
        self,
        request: CalcRequest,
        pipeline_id: Optional[str] = None,
    ) -> CalcResult:
        """Run a calculation and return the serializable result."""
        return self.execute(request, pipeline_id).to_result()
