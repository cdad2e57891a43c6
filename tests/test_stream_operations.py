"""Tests for stream helpers."""
import pytest
from services.stream_operations import TextStreamWriter, iter_numbered_lines, write_bytes


def test_write_bytes(tmp_path):
    path = tmp_path / "stream_example.txt"
    data = "Hello from FileStream!".encode("utf-8")

    assert write_bytes(path, data) == len(data)
    assert path.read_bytes() == data


def test_text_stream_writer_lines_and_partials(tmp_path):
    path = tmp_path / "writer_example.txt"

    with TextStreamWriter(path) as writer:
        writer.write_line("Line 1 from StreamWriter")
        writer.write_line("Line 2 from StreamWriter")
        writer.write("Partial line ")
        writer.write_line("completed.")

    assert path.read_text(encoding="utf-8") == (
        "Line 1 from StreamWriter\n"
        "Line 2 from StreamWriter\n"
        "Partial line completed.\n"
    )


def test_text_stream_writer_append(tmp_path):
    path = tmp_path / "log.txt"
    path.write_text("existing\n", encoding="utf-8")

    with TextStreamWriter(path, append=True) as writer:
        writer.write_line("added")

    assert path.read_text(encoding="utf-8") == "existing\nadded\n"


def test_text_stream_writer_closed_after_exit(tmp_path):
    with TextStreamWriter(tmp_path / "x.txt") as writer:
        writer.write("a")

    with pytest.raises(ValueError, match="not open"):
        writer.write("b")


def test_iter_numbered_lines(tmp_path):
    path = tmp_path / "writer_example.txt"
    path.write_bytes(b"first\r\nsecond\nthird")

    assert list(iter_numbered_lines(path)) == [(1, "first"), (2, "second"), (3, "third")]
    assert next(iter_numbered_lines(path, start=10)) == (10, "first")


def test_iter_numbered_lines_missing_file(tmp_path):
    lines = iter_numbered_lines(tmp_path / "missing.txt")

    with pytest.raises(FileNotFoundError):
        next(lines)
