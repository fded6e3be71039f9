"""
Tests for CalcResult JSON serialization.
"""

from strcalc.calculator import calculate
from strcalc.ir.enums import CalcStatus, ErrorKind
from strcalc.ir.serialization import from_json, save, to_json


def test_json_preserves_error_payload():
    result = calculate("//;\n1;-2;3;-4")

    restored = from_json(to_json(result))

    assert restored.status == CalcStatus.REJECTED
    assert restored.error.kind == ErrorKind.HAS_NEGATIVE
    assert restored.error.negatives == [-2, -4]
    assert restored.separators == [";"]


def test_save_writes_json(tmp_path):
    result = calculate("1\n2")
    path = tmp_path / "result.json"

    save(result, path)
    restored = from_json(path.read_text())

    assert restored.total == 3
    assert restored.request_id == result.request_id
    assert len(restored.trace) == len(result.trace)
