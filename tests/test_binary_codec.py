"""Tests for the binary primitive encoding."""
import io
import pytest
from services.binary_codec import (
    KIND_BOOL,
    KIND_FLOAT,
    KIND_INT,
    KIND_STRING,
    BinaryReader,
    BinaryWriter,
    read_values,
    write_values,
)


def test_int_layout_is_little_endian():
    buf = io.BytesIO()
    BinaryWriter(buf).write_int(42)

    assert buf.getvalue() == b"\x2a\x00\x00\x00"


def test_negative_int_layout():
    buf = io.BytesIO()
    BinaryWriter(buf).write_int(-2)

    assert buf.getvalue() == b"\xfe\xff\xff\xff"


def test_float_layout():
    buf = io.BytesIO()
    BinaryWriter(buf).write_float(1.0)

    assert buf.getvalue() == b"\x00\x00\x00\x00\x00\x00\xf0\x3f"


def test_string_layout_has_byte_length_prefix():
    buf = io.BytesIO()
    BinaryWriter(buf).write_string("hé")

    # 3 UTF-8 bytes, not 2 characters
    assert buf.getvalue() == b"\x03\x00\x00\x00h\xc3\xa9"


def test_bool_layout():
    buf = io.BytesIO()
    writer = BinaryWriter(buf)
    writer.write_bool(True)
    writer.write_bool(False)

    assert buf.getvalue() == b"\x01\x00"


def test_demo_record_layout(tmp_path):
    """int, double, string, bool written back to back with no padding."""
    path = tmp_path / "binary_example.bin"

    size = write_values(path, [42, 3.14159, "Binary text", True])

    assert size == 4 + 8 + 4 + len("Binary text") + 1
    assert path.stat().st_size == size
    assert read_values(path, [KIND_INT, KIND_FLOAT, KIND_STRING, KIND_BOOL]) == [
        42,
        3.14159,
        "Binary text",
        True,
    ]


def test_write_int_range_checks():
    writer = BinaryWriter(io.BytesIO())

    writer.write_int(2 ** 31 - 1)
    writer.write_int(-(2 ** 31))
    with pytest.raises(ValueError, match="32 bits"):
        writer.write_int(2 ** 31)
    with pytest.raises(TypeError):
        writer.write_int(True)


def test_write_float_type_checks():
    buf = io.BytesIO()
    writer = BinaryWriter(buf)

    writer.write_float(2)
    assert buf.getvalue() == b"\x00\x00\x00\x00\x00\x00\x00\x40"
    with pytest.raises(TypeError):
        writer.write_float("1.5")
    with pytest.raises(TypeError):
        writer.write_float(True)


def test_write_value_rejects_unsupported_type():
    with pytest.raises(TypeError, match="Unsupported"):
        BinaryWriter(io.BytesIO()).write_value(b"bytes")


def test_write_value_treats_bool_as_bool():
    buf = io.BytesIO()
    BinaryWriter(buf).write_value(False)

    assert buf.getvalue() == b"\x00"


def test_read_truncated_data_raises_eof():
    reader = BinaryReader(io.BytesIO(b"\x01\x00"))

    with pytest.raises(EOFError):
        reader.read_int()


def test_read_truncated_string_raises_eof():
    reader = BinaryReader(io.BytesIO(b"\x05\x00\x00\x00abc"))

    with pytest.raises(EOFError):
        reader.read_string()


def test_read_invalid_bool_byte():
    with pytest.raises(ValueError, match="Invalid boolean"):
        BinaryReader(io.BytesIO(b"\x02")).read_bool()


def test_read_unknown_kind():
    with pytest.raises(ValueError, match="Unknown value kind"):
        BinaryReader(io.BytesIO(b"")).read_kind("decimal")


def test_read_values_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_values(tmp_path / "missing.bin", [KIND_INT])
