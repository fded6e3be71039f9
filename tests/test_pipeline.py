"""
Tests for the pipeline engine.
"""

from strcalc.calculator import get_engine, setup_default_pipeline
from strcalc.core.context import CalcContext, CalcRequest
from strcalc.core.engine import Engine, Pipeline
from strcalc.core.errors import ConsecutiveSeparatorsError
from strcalc.ir.enums import CalcStatus, ErrorKind
from strcalc.passes import resolve_delimiter, sum_numbers, tokenize


def test_request_generates_id():
    """CalcRequest should auto-generate an ID if not provided."""
    request = CalcRequest(text="1,2")
    assert request.request_id is not None
    assert len(request.request_id) > 0


def test_context_from_request():
    """CalcContext should load the default profile settings."""
    request = CalcRequest(text="1,2")
    ctx = CalcContext.from_request(request)

    assert ctx.raw_text == "1,2"
    assert ctx.request == request
    assert ctx.profile == "default"
    assert ctx.settings.max_value == 1000


def test_default_pipeline_registered():
    engine = Engine()
    setup_default_pipeline(engine)

    assert engine.list_pipelines() == ["default"]


def test_global_engine_is_reused():
    assert get_engine() is get_engine()
    assert "default" in get_engine().list_pipelines()


def test_rejection_halts_pipeline():
    """Passes after a rejection do not run."""
    calls = []

    def reject(ctx):
        raise ConsecutiveSeparatorsError()

    def never(ctx):
        calls.append(ctx)
        return ctx

    engine = Engine()
    engine.register_pipeline(Pipeline(id="t", name="Test", passes=[reject, never]))

    ctx = engine.execute(CalcRequest(text="1"), "t")

    assert calls == []
    assert ctx.status == CalcStatus.REJECTED
    assert ctx.error == ConsecutiveSeparatorsError()
    assert ctx.trace[-1].action == "pipeline_halted"
    assert ctx.diagnostics[0].source == "reject"


def test_unexpected_failure_is_kept():
    """A non-AddError exception marks the result as an error."""

    def broken(ctx):
        raise RuntimeError("boom")

    engine = Engine()
    engine.register_pipeline(Pipeline(id="t", name="Test", passes=[broken]))

    ctx = engine.execute(CalcRequest(text="1"), "t")

    assert ctx.status == CalcStatus.ERROR
    assert isinstance(ctx.error, RuntimeError)
    assert ctx.diagnostics[0].code == "PASS_ERROR"

    result = ctx.to_result()
    assert result.error is None
    assert result.total is None


def test_partial_pipeline():
    """Any subset of passes can be composed."""
    engine = Engine()
    engine.register_pipeline(
        Pipeline(id="t", name="Test", passes=[resolve_delimiter, tokenize, sum_numbers])
    )

    result = engine.calculate(CalcRequest(text="//;\n1;2"), "t")

    assert result.status == CalcStatus.SUCCESS
    assert result.tokens == ["1", "2"]
    assert result.total == 0  # numbers were never parsed


def test_pipeline_not_found():
    """Engine should handle missing pipeline gracefully."""
    engine = Engine()
    result = engine.calculate(CalcRequest(text="1"), "nonexistent")

    assert result.status == CalcStatus.ERROR
    assert any(d.code == "PIPELINE_NOT_FOUND" for d in result.diagnostics)


def test_result_carries_error_kind():
    engine = get_engine()
    result = engine.calculate(CalcRequest(text="//"))

    assert result.status == CalcStatus.REJECTED
    assert result.error.kind == ErrorKind.INVALID_INPUT
    assert result.error.negatives == []
