import pytest

from strcalc.config import loader
from strcalc.core.context import CalcContext, CalcRequest


@pytest.fixture(autouse=True)
def reset_profiles(monkeypatch):
    """Each test starts from the bundled default profile."""
    monkeypatch.delenv("STRCALC_PROFILE", raising=False)
    loader.set_default_profile(None)
    loader.clear_cache()
    yield
    loader.set_default_profile(None)
    loader.clear_cache()


@pytest.fixture
def make_ctx():
    """Build a context for a raw input, as the engine would."""

    def _make(text: str, profile: str = None) -> CalcContext:
        return CalcContext.from_request(CalcRequest(text=text, profile=profile))

    return _make
