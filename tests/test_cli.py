import json
import os
import tempfile

from click.testing import CliRunner

from hexspigot.cli import main


def test_digits_default():
    result = CliRunner().invoke(main, ["digits", "--count", "16"])
    assert result.exit_code == 0
    assert result.output.strip() == "243F6A8885A308D3"


def test_digits_json():
    result = CliRunner().invoke(main, ["digits", "--position", "1", "--count", "4", "--format", "json"])
    assert result.exit_code == 0
    payload = json.loads(result.output)
    assert payload["value"] == "43F6"
    assert payload["position"] == 1


def test_digits_to_file():
    with tempfile.TemporaryDirectory() as td:
        path = os.path.join(td, "pi.txt")
        result = CliRunner().invoke(main, ["digits", "--count", "10", "--chunk-size", "3", "--out", path])
        assert result.exit_code == 0
        with open(path, "r", encoding="ascii") as f:
            assert f.read() == "243F6A8885\n"


def test_digits_rejects_negative_position():
    result = CliRunner().invoke(main, ["digits", "--position", "-1"])
    assert result.exit_code != 0
    assert "non-negative" in result.output


def test_digits_large_position_declined():
    result = CliRunner().invoke(main, ["digits", "--position", str(10**12 + 1), "--count", "1"], input="n\n")
    assert result.exit_code == 0
    assert "extremely large" in result.output


def test_verify_command():
    result = CliRunner().invoke(main, ["verify", "--count", "32"])
    assert result.exit_code == 0
    assert result.output.strip() == "ok"


def test_digits_to_file_with_workers():
    with tempfile.TemporaryDirectory() as td:
        path = os.path.join(td, "pi.txt")
        result = CliRunner().invoke(main, ["digits", "--count", "10", "--chunk-size", "4", "--workers", "2", "--out", path])
        assert result.exit_code == 0
        with open(path, "r", encoding="ascii") as f:
            assert f.read() == "243F6A8885\n"


def test_digits_large_position_confirmed():
    result = CliRunner().invoke(main, ["digits", "--position", str(10**12 + 1), "--count", "1"], input="y\n")
    assert result.exit_code == 0
    assert "extremely large" in result.output
    last = result.output.strip().splitlines()[-1]
    assert len(last) == 1
    assert last in "0123456789ABCDEF"


def test_digits_large_position_yes_flag():
    result = CliRunner().invoke(main, ["digits", "--position", str(10**12 + 1), "--count", "1", "--yes"])
    assert result.exit_code == 0
    assert "extremely large" not in result.output
    last = result.output.strip().splitlines()[-1]
    assert len(last) == 1
    assert last in "0123456789ABCDEF"


def test_verify_rejects_far_start():
    result = CliRunner().invoke(main, ["verify", "--start", str(10**12)])
    assert result.exit_code != 0
    assert "below position" in result.output
