import pytest

from rsafe.usecases.evaluate import evaluate, find_safe_reports
from rsafe.infra.text_io import read_lines


def test_evaluate_sample(sample_lines):
    assert evaluate(sample_lines, 0) == 2
    assert evaluate(sample_lines, 1) == 4
    assert evaluate(sample_lines, 2) == 6


def test_evaluate_is_repeatable(sample_lines):
    assert evaluate(sample_lines, 1) == evaluate(sample_lines, 1)


def test_evaluate_empty_input():
    assert evaluate([], 0) == 0
    assert evaluate(["", "foo"], 0) == 0


def test_find_safe_reports(sample_file):
    assert find_safe_reports(sample_file, 0) == 2
    assert find_safe_reports(sample_file, 1) == 4


def test_read_lines(sample_file):
    lines = read_lines(sample_file)
    assert len(lines) == 6
    assert lines[0] == "7 6 4 2 1"


def test_missing_file_is_not_swallowed(tmp_path):
    with pytest.raises(OSError):
        find_safe_reports(str(tmp_path / "nope.txt"), 0)


def test_lines_split_only_on_newline(tmp_path):
    p = tmp_path / "vt.txt"
    p.write_bytes("1 2\x0b3 4\n5 6 7 8\n".encode("utf-8"))
    assert read_lines(str(p)) == ["1 2\x0b3 4", "5 6 7 8"]
    assert find_safe_reports(str(p), 0) == 2


def test_crlf_and_trailing_newline(tmp_path):
    p = tmp_path / "crlf.txt"
    p.write_bytes(b"7 6 4 2 1\r\n1 2 7 8 9\r\n\r\n")
    assert read_lines(str(p)) == ["7 6 4 2 1", "1 2 7 8 9", ""]
    assert find_safe_reports(str(p), 0) == 1


def test_empty_file_has_no_lines(tmp_path):
    p = tmp_path / "empty.txt"
    p.write_bytes(b"")
    assert read_lines(str(p)) == []
