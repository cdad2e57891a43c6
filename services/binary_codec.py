"""
Binary encoding of primitive values.

All values are little-endian with fixed widths:

    int     4 bytes, signed            struct '<i'
    float   8 bytes, IEEE-754 double   struct '<d'
    string  4-byte unsigned byte count struct '<I', then UTF-8 bytes
    bool    1 byte, 0x00 or 0x01

A file written with ``BinaryWriter`` holds the values back to back with no
header or padding; the reader must know the sequence of kinds.
"""
import os
import struct
from typing import Any, BinaryIO, Iterable, List, Sequence, Union

PathType = Union[str, os.PathLike]

INT_FORMAT = "<i"
FLOAT_FORMAT = "<d"
LENGTH_FORMAT = "<I"

INT_SIZE = struct.calcsize(INT_FORMAT)  # 4
FLOAT_SIZE = struct.calcsize(FLOAT_FORMAT)  # 8
LENGTH_SIZE = struct.calcsize(LENGTH_FORMAT)  # 4

INT_MIN = -(2 ** 31)
INT_MAX = 2 ** 31 - 1

KIND_INT = "int"
KIND_FLOAT = "float"
KIND_STRING = "string"
KIND_BOOL = "bool"


class BinaryWriter:
    """Writes primitive values to a binary stream."""

    def __init__(self, stream: BinaryIO):
        self.stream = stream

    def write_int(self, value: int):
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"Expected int, got {type(value).__name__}")
        if not INT_MIN <= value <= INT_MAX:
            raise ValueError(f"Integer {value} does not fit in 32 bits")
        self.stream.write(struct.pack(INT_FORMAT, value))

    def write_float(self, value: float):
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeError(f"Expected float, got {type(value).__name__}")
        self.stream.write(struct.pack(FLOAT_FORMAT, float(value)))

    def write_string(self, value: str):
        if not isinstance(value, str):
            raise TypeError(f"Expected str, got {type(value).__name__}")
        data = value.encode("utf-8")
        self.stream.write(struct.pack(LENGTH_FORMAT, len(data)))
        self.stream.write(data)

    def write_bool(self, value: bool):
        self.stream.write(b"\x01" if value else b"\x00")

    def write_value(self, value: Any):
        """Dispatch on the Python type of ``value``."""
        # bool before int: bool is an int subclass
        if isinstance(value, bool):
            self.write_bool(value)
        elif isinstance(value, int):
            self.write_int(value)
        elif isinstance(value, float):
            self.write_float(value)
        elif isinstance(value, str):
            self.write_string(value)
        else:
            raise TypeError(f"Unsupported value type: {type(value).__name__}")


class BinaryReader:
    """Reads primitive values written by BinaryWriter."""

    def __init__(self, stream: BinaryIO):
        self.stream = stream

    def _read_exact(self, size: int) -> bytes:
        data = self.stream.read(size)
        if len(data) != size:
            raise EOFError(f"Expected {size} bytes, got {len(data)}")
        return data

    def read_int(self) -> int:
        return struct.unpack(INT_FORMAT, self._read_exact(INT_SIZE))[0]

    def read_float(self) -> float:
        return struct.unpack(FLOAT_FORMAT, self._read_exact(FLOAT_SIZE))[0]

    def read_string(self) -> str:
        (length,) = struct.unpack(LENGTH_FORMAT, self._read_exact(LENGTH_SIZE))
        return self._read_exact(length).decode("utf-8")

    def read_bool(self) -> bool:
        raw = self._read_exact(1)[0]
        if raw not in (0, 1):
            raise ValueError(f"Invalid boolean byte: 0x{raw:02x}")
        return raw == 1

    def read_kind(self, kind: str) -> Any:
        readers = {
            KIND_INT: self.read_int,
            KIND_FLOAT: self.read_float,
            KIND_STRING: self.read_string,
            KIND_BOOL: self.read_bool,
        }
        if kind not in readers:
            raise ValueError(f"Unknown value kind: {kind}")
        return readers[kind]()


def write_values(path: PathType, values: Iterable[Any]) -> int:
    """
    Create or truncate ``path`` and write the values in order.

    Returns:
        Number of bytes written
    """
    with open(path, "wb") as f:
        writer = BinaryWriter(f)
        for value in values:
            writer.write_value(value)
        return f.tell()


def read_values(path: PathType, kinds: Sequence[str]) -> List[Any]:
    """Read one value per entry in ``kinds`` from the start of ``path``."""
    with open(path, "rb") as f:
        reader = BinaryReader(f)
        return [reader.read_kind(kind) for kind in kinds]
