"""
IR Serialization — CalcResult to and from JSON.

Results round-trip losslessly, including the error payload and trace.
"""

from pathlib import Path
from typing import Union

from strcalc.ir.schema import CalcResult


def to_json(result: CalcResult, indent: int = 2) -> str:
    return result.model_dump_json(indent=indent)


def from_json(json_str: str) -> CalcResult:
    return CalcResult.model_validate_json(json_str)


def save(result: CalcResult, path: Union[str, Path]) -> None:
    """Write a result as JSON, used by ``strcalc add --format json -o``."""
    Path(path).write_text(to_json(result) + "\n")
