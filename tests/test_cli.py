"""
Command-line front end and file/string API.
"""

import io
import sys

import pytest

from bftape import RunOptions, SourceLoadError, UnmatchedBracketError, run_file, run_string
from bftape.cli import main


def write_program(tmp_path, source, name="prog.bf"):
    path = tmp_path / name
    path.write_bytes(source)
    return path


def test_run_string_uses_given_streams():
    out = io.BytesIO()
    run_string(b",+.", stdin=io.BytesIO(b"a"), stdout=out)
    assert out.getvalue() == b"b"


def test_run_string_strict_option():
    with pytest.raises(UnmatchedBracketError):
        run_string("]", stdin=io.BytesIO(), stdout=io.BytesIO(), options=RunOptions(strict=True))


def test_run_file(tmp_path):
    path = write_program(tmp_path, b"++++++++[>++++++++<-]>+.+.")
    out = io.BytesIO()
    run_file(path, stdin=io.BytesIO(), stdout=out)
    assert out.getvalue() == b"AB"


def test_run_file_missing(tmp_path):
    with pytest.raises(SourceLoadError) as excinfo:
        run_file(tmp_path / "nope.bf", stdin=io.BytesIO(), stdout=io.BytesIO())
    assert "Unable to read given file name" in str(excinfo.value)


def test_cli_success(tmp_path, capsys):
    path = write_program(tmp_path, b"++++++++[>++++++++<-]>+.")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == "A"


def test_cli_reads_stdin(tmp_path, capsys, monkeypatch):
    path = write_program(tmp_path, b",.,.")
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(b"hi")))
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == "hi"


def test_cli_requires_file_argument(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main([])
    assert excinfo.value.code == 2
    assert "file" in capsys.readouterr().err


def test_cli_unreadable_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.bf")]) == 1
    assert "Unable to read given file name" in capsys.readouterr().err


def test_cli_reports_fault(tmp_path, capsys):
    path = write_program(tmp_path, b"+.<")
    assert main([str(path)]) == 1
    captured = capsys.readouterr()
    assert captured.out == "\x01"
    assert "Memory address out of boundaries" in captured.err


def test_cli_strict_flag(tmp_path, capsys):
    path = write_program(tmp_path, b"+.[")
    assert main(["--strict", str(path)]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "CompileError: Missing right bracket" in captured.err


def test_cli_lazy_by_default(tmp_path, capsys):
    path = write_program(tmp_path, b"+.[")
    assert main([str(path)]) == 1
    captured = capsys.readouterr()
    assert captured.out == "\x01"
    assert "Missing right bracket" in captured.err
    assert "CompileError" not in captured.err
