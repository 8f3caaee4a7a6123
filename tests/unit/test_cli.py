"""Tests for CLI tool."""

from __future__ import annotations

import json
import subprocess
import sys

import pytest

from bqnumeric.cli.inspect import format_bytes, parse_bytes
from bqnumeric.cli.main import main


def test_cli_help() -> None:
    """Test CLI --help flag."""
    result = subprocess.run(
        [sys.executable, "-m", "bqnumeric.cli.main", "--help"],
        capture_output=True,
        text=True,
    )
    assert result.returncode == 0
    assert "bqnumeric: BigQuery NUMERIC byte-string codec" in result.stdout
    assert "--encode" in result.stdout


def test_cli_version() -> None:
    """Test CLI --version flag."""
    result = subprocess.run(
        [sys.executable, "-m", "bqnumeric.cli.main", "--version"],
        capture_output=True,
        text=True,
    )
    assert result.returncode == 0
    assert "bqnumeric 0.1.0" in result.stdout


def test_cli_no_args(capsys: pytest.CaptureFixture[str]) -> None:
    """Test CLI with no arguments (should show help)."""
    assert main([]) == 0
    assert "bqnumeric" in capsys.readouterr().out


def test_cli_encode_hex(capsys: pytest.CaptureFixture[str]) -> None:
    """Test --encode prints hex wire bytes."""
    assert main(["--encode", "1.2"]) == 0
    assert capsys.readouterr().out.strip() == "008c8647"


def test_cli_encode_list(capsys: pytest.CaptureFixture[str]) -> None:
    """Test --encode with list formatting and a negative value."""
    assert main(["--encode=-1.2", "--format", "list"]) == 0
    assert capsys.readouterr().out.strip() == "0,116,121,184"


def test_cli_decode(capsys: pytest.CaptureFixture[str]) -> None:
    """Test --decode prints the decimal with nine fractional digits."""
    assert main(["--decode", "008c8647"]) == 0
    assert capsys.readouterr().out.strip() == "1.200000000"


def test_cli_decode_list(capsys: pytest.CaptureFixture[str]) -> None:
    """Test --decode with list input."""
    assert main(["--decode", "0,116,121,184", "--format", "list"]) == 0
    assert capsys.readouterr().out.strip() == "-1.200000000"


def test_cli_json(capsys: pytest.CaptureFixture[str]) -> None:
    """Test --json output."""
    assert main(["--encode", "1.2", "--json"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload == {"value": "1.2", "wire": "008c8647"}


def test_cli_inspect(capsys: pytest.CaptureFixture[str]) -> None:
    """Test --inspect breakdown."""
    assert main(["--inspect", "128"]) == 0
    out = capsys.readouterr().out
    assert "128000000000" in out
    assert "1dcd650000" in out
    assert "000065cd1d" in out
    assert "5 bytes" in out


def test_cli_inspect_headroom_exact(capsys: pytest.CaptureFixture[str]) -> None:
    """Test headroom keeps all 38 digits for values near the bound."""
    assert main(["--inspect=-99999999999999999999999999999.999999998"]) == 0
    out = capsys.readouterr().out
    assert "headroom to bound" in out
    assert out.rstrip().endswith("0.000000001")


def test_cli_scale_error(capsys: pytest.CaptureFixture[str]) -> None:
    """Test codec errors exit with status 1."""
    assert main(["--encode", "1.0000000001"]) == 1
    assert "Scale exceeds maximum: 10 (allowed: 9)" in capsys.readouterr().err


def test_cli_overflow_error(capsys: pytest.CaptureFixture[str]) -> None:
    """Test overflow on encode."""
    assert main(["--encode", "100000000000000000000000000000"]) == 1
    assert "Numeric overflow" in capsys.readouterr().err


def test_cli_bad_hex(capsys: pytest.CaptureFixture[str]) -> None:
    """Test malformed byte strings."""
    assert main(["--decode", "zz"]) == 1
    assert "invalid byte string" in capsys.readouterr().err


def test_format_parse_roundtrip() -> None:
    """Test byte rendering helpers."""
    data = bytes([0, 140, 134, 71])
    assert parse_bytes(format_bytes(data, "hex"), "hex") == data
    assert parse_bytes(format_bytes(data, "list"), "list") == data
    assert parse_bytes("", "list") == b""
