"""
Tests for the strcalc command line.
"""

import io
import json

from strcalc.cli.main import main


def test_add_prints_sum(capsys):
    assert main(["add", "1,2,3"]) == 0
    assert capsys.readouterr().out.strip() == "6"


def test_escapes(capsys):
    assert main(["add", "--escapes", "//;\\n1;2"]) == 0
    assert capsys.readouterr().out.strip() == "3"


def test_rejection_exit_code(capsys):
    assert main(["add", "1,-2,-3"]) == 1
    out = capsys.readouterr().out
    assert "has_negative" in out
    assert "[-2, -3]" in out


def test_json_output(capsys):
    assert main(["add", "--format", "json", "2,1001"]) == 0
    data = json.loads(capsys.readouterr().out)

    assert data["total"] == 2
    assert data["status"] == "success"
    assert data["numbers"] == [2, 0]


def test_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n2"))

    assert main(["add", "-"]) == 0
    assert capsys.readouterr().out.strip() == "3"


def test_output_file(tmp_path):
    out = tmp_path / "sum.txt"

    assert main(["add", "4,5", "-o", str(out)]) == 0
    assert out.read_text().strip() == "9"


def test_strict_profile(capsys):
    assert main(["add", "--profile", "strict", "//;X1;2"]) == 1
    assert "invalid_input" in capsys.readouterr().out


def test_unknown_profile(capsys):
    assert main(["add", "--profile", "nope", "1"]) == 2
    assert "Profile not found" in capsys.readouterr().err


def test_no_command(capsys):
    assert main([]) == 0
    assert "usage" in capsys.readouterr().out


def test_json_output_file(tmp_path):
    out = tmp_path / "result.json"

    assert main(["add", "--format", "json", "-o", str(out), "1,-2"]) == 1
    data = json.loads(out.read_text())

    assert data["status"] == "rejected"
    assert data["error"]["negatives"] == [-2]
