"""End-to-end checks of the command line entry point."""

import io
import pathlib
import sys
import types

import pytest

ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import entropy_cli


@pytest.fixture(autouse=True)
def _prog_name(monkeypatch):
    monkeypatch.setattr(sys, "argv", ["entropy"])


def _feed_stdin(monkeypatch, data: bytes):
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(data)))


def test_file_with_repeated_byte(tmp_path, capsys):
    sample = tmp_path / "aaaa.bin"
    sample.write_bytes(b"\x41" * 4)

    assert entropy_cli.main([str(sample)]) == 0
    out = capsys.readouterr().out
    assert out == "0.00 bits (0.00 bytes) = 0.0000% of 4 bytes (0.0000 bits/byte)\n"


def test_stdin_is_read_without_file(monkeypatch, capsys):
    _feed_stdin(monkeypatch, b"ab" * 1000)

    assert entropy_cli.main([]) == 0
    out = capsys.readouterr().out
    assert out == "2,000.00 bits (250.00 bytes) = 12.5000% of 2,000 bytes (1.0000 bits/byte)\n"


def test_empty_stdin_reports_no_data(monkeypatch, capsys):
    _feed_stdin(monkeypatch, b"")

    assert entropy_cli.main([]) == 1
    captured = capsys.readouterr()
    assert captured.out == "entropy: No data found!\n"
    assert captured.err == ""


def test_empty_file_reports_no_data(tmp_path, capsys):
    empty = tmp_path / "empty"
    empty.write_bytes(b"")

    assert entropy_cli.main([str(empty)]) == 1
    assert "No data found!" in capsys.readouterr().out


def test_two_arguments_print_usage(capsys):
    assert entropy_cli.main(["a", "b"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("usage: entropy [ FILE ]")


@pytest.mark.parametrize("arg", ["-h", "--help", "-", "--", "-x"])
def test_flag_like_argument_prints_usage(arg, capsys):
    assert entropy_cli.main([arg]) == 1
    assert "usage: entropy [ FILE ]" in capsys.readouterr().err


def test_missing_file(tmp_path, capsys):
    missing = tmp_path / "nope.bin"

    assert entropy_cli.main([str(missing)]) == 2
    captured = capsys.readouterr()
    assert captured.err == f"entropy: File not found: '{missing}'\n"
    assert captured.out == ""


def test_unopenable_file(tmp_path, capsys):
    assert entropy_cli.main([str(tmp_path)]) == 2
    assert "entropy: Error opening file:" in capsys.readouterr().err


def test_read_failure(monkeypatch, capsys):
    class Broken:
        def read(self, size=-1):
            raise OSError("I/O error")

    monkeypatch.setattr(sys, "stdin", types.SimpleNamespace(buffer=Broken()))

    assert entropy_cli.main([]) == 1
    assert capsys.readouterr().err == "entropy: Error reading data: I/O error\n"


def test_run_exits_with_status(tmp_path, monkeypatch):
    monkeypatch.setattr(sys, "argv", ["entropy", str(tmp_path / "missing")])

    with pytest.raises(SystemExit) as info:
        entropy_cli.run()
    assert info.value.code == 2


def test_path_through_regular_file_is_open_error(tmp_path, capsys):
    regular = tmp_path / "f"
    regular.write_bytes(b"data")

    assert entropy_cli.main([str(regular / "child")]) == 2
    err = capsys.readouterr().err
    assert err.startswith("entropy: Error opening file:")
    assert "File not found" not in err


def test_symlink_loop_is_open_error(tmp_path, capsys):
    loop = tmp_path / "loop"
    try:
        loop.symlink_to(loop)
    except (OSError, NotImplementedError):
        pytest.skip("symlinks unavailable")

    assert entropy_cli.main([str(loop)]) == 2
    assert capsys.readouterr().err.startswith("entropy: Error opening file:")


def test_closed_stdin_is_read_error(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", None)

    assert entropy_cli.main([]) == 1
    captured = capsys.readouterr()
    assert captured.err == "entropy: Error reading data: standard input is closed\n"
    assert captured.out == ""
