import io
import sys

import pytest

import faststring as fs
from cli import find as find_cli
from cli import split as split_cli
from cli import wc as wc_cli


def run_cli(module, monkeypatch, capsys, *arguments) -> str:
    monkeypatch.setattr(sys, "argv", [module.__name__, *arguments])
    module.main()
    return capsys.readouterr().out


@pytest.fixture
def sample_file(tmp_path):
    path = tmp_path / "sample.txt"
    path.write_bytes(b"hello world\nfoo\nhello again\n")
    return path


def test_find_all_offsets(sample_file, monkeypatch, capsys):
    out = run_cli(find_cli, monkeypatch, capsys, "hello", str(sample_file))
    assert out.split() == ["0", "16"]


def test_find_overlapping(tmp_path, monkeypatch, capsys):
    path = tmp_path / "overlap.bin"
    path.write_bytes(b"aaaa")
    out = run_cli(find_cli, monkeypatch, capsys, "aa", str(path))
    assert out.split() == ["0", "1", "2"]


def test_find_first_last_and_count(sample_file, monkeypatch, capsys):
    assert run_cli(find_cli, monkeypatch, capsys, "-f", "o", str(sample_file)).split() == ["4"]
    assert run_cli(find_cli, monkeypatch, capsys, "-r", "o", str(sample_file)).split() == ["20"]
    assert run_cli(find_cli, monkeypatch, capsys, "-c", "o", str(sample_file)).split() == ["5"]
    assert run_cli(find_cli, monkeypatch, capsys, "-c", "zzz", str(sample_file)).split() == ["0"]


def test_find_hex_needle(tmp_path, monkeypatch, capsys):
    path = tmp_path / "crlf.bin"
    path.write_bytes(b"a\r\nb\r\n")
    assert run_cli(find_cli, monkeypatch, capsys, "-x", "0d0a", str(path)).split() == ["1", "4"]

    with pytest.raises(SystemExit) as exit_info:
        run_cli(find_cli, monkeypatch, capsys, "-x", "zz", str(path))
    assert exit_info.value.code == 2
    assert "Invalid hexadecimal needle: zz" in capsys.readouterr().out


def test_find_multiple_files_and_missing(sample_file, tmp_path, monkeypatch, capsys):
    other = tmp_path / "other.txt"
    other.write_bytes(b"xfoo")
    missing = tmp_path / "missing.txt"
    out = run_cli(find_cli, monkeypatch, capsys, "foo", str(sample_file), str(missing), str(other))
    assert out.splitlines() == [
        f"{sample_file}:12",
        f"No such file: {missing}",
        f"{other}:1",
    ]


def test_find_standard_input(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(b"\xffab\xffab")))
    out = run_cli(find_cli, monkeypatch, capsys, "-x", "ff")
    assert out.split() == ["0", "3"]


def test_version(monkeypatch, capsys):
    with pytest.raises(SystemExit):
        run_cli(find_cli, monkeypatch, capsys, "--version")
    assert fs.__version__ in capsys.readouterr().out


def test_wc_default_counts(sample_file, monkeypatch, capsys):
    out = run_cli(wc_cli, monkeypatch, capsys, str(sample_file))
    assert out.split() == ["3", "5", "28", str(sample_file)]


def test_wc_max_line_length(sample_file, monkeypatch, capsys):
    out = run_cli(wc_cli, monkeypatch, capsys, "-L", str(sample_file))
    assert out.split() == ["11", str(sample_file)]


def test_wc_unterminated_line(tmp_path, monkeypatch, capsys):
    path = tmp_path / "tail.txt"
    path.write_bytes("αβ\nγδε".encode("utf-8"))
    out = run_cli(wc_cli, monkeypatch, capsys, "-l", "-c", "-L", str(path))
    assert out.split() == ["1", "11", "6", str(path)]


def test_wc_totals_and_missing(sample_file, tmp_path, monkeypatch, capsys):
    other = tmp_path / "other.txt"
    other.write_bytes(b"one two\n")
    missing = tmp_path / "missing.txt"
    out = run_cli(wc_cli, monkeypatch, capsys, "-l", "-w", str(sample_file), str(other), str(missing))
    lines = out.splitlines()
    assert lines[0].split() == ["3", "5", str(sample_file)]
    assert lines[1].split() == ["1", "2", str(other)]
    assert lines[2] == f"No such file: {missing}"
    assert lines[3].split() == ["4", "7", "total"]


def test_wc_files0_from(sample_file, tmp_path, monkeypatch, capsys):
    names = tmp_path / "names"
    names.write_bytes(str(sample_file).encode() + b"\0" + b"/does/not/exist\0")
    out = run_cli(wc_cli, monkeypatch, capsys, "-c", "--files0-from", str(names))
    assert out.split() == ["28", str(sample_file)]


def test_split_by_lines(sample_file, tmp_path, monkeypatch, capsys):
    prefix = str(tmp_path / "part_")
    run_cli(split_cli, monkeypatch, capsys, "-l", "2", str(sample_file), prefix)
    assert (tmp_path / "part_0").read_bytes() == b"hello world\nfoo\n"
    assert (tmp_path / "part_1").read_bytes() == b"hello again\n"
    assert not (tmp_path / "part_2").exists()


def test_split_by_separator(tmp_path, monkeypatch, capsys):
    source = tmp_path / "records.bin"
    source.write_bytes(b"a\0bb\0ccc")
    prefix = str(tmp_path / "rec_")
    run_cli(split_cli, monkeypatch, capsys, "-l", "1", "-t", "\\0", str(source), prefix)
    assert (tmp_path / "rec_0").read_bytes() == b"a\0"
    assert (tmp_path / "rec_1").read_bytes() == b"bb\0"
    assert (tmp_path / "rec_2").read_bytes() == b"ccc"


def test_split_by_number(sample_file, tmp_path, monkeypatch, capsys):
    prefix = str(tmp_path / "chunk_")
    run_cli(split_cli, monkeypatch, capsys, "-n", "3", str(sample_file), prefix)
    chunks = [(tmp_path / f"chunk_{i}").read_bytes() for i in range(3)]
    assert [len(chunk) for chunk in chunks] == [9, 9, 10]
    assert b"".join(chunks) == sample_file.read_bytes()


def test_split_errors(tmp_path, monkeypatch, capsys):
    missing = tmp_path / "missing.txt"
    out = run_cli(split_cli, monkeypatch, capsys, str(missing), str(tmp_path / "x"))
    assert out.strip() == f"No such file: {missing}"

    out = run_cli(split_cli, monkeypatch, capsys, "-t", "", str(missing))
    assert out.strip() == "The separator must not be empty"

    out = run_cli(split_cli, monkeypatch, capsys, "-l", "0", str(missing))
    assert out.strip() == "The number of lines and files must be positive"
