"""Byte and text stream helpers."""
import os
from typing import Iterator, Optional, Tuple, Union

PathType = Union[str, os.PathLike]


def write_bytes(path: PathType, data: bytes) -> int:
    """Create or truncate ``path`` and write raw bytes; returns bytes written."""
    with open(path, "wb") as f:
        return f.write(data)


class TextStreamWriter:
    """
    Line-oriented text writer over a file opened for the writer's lifetime.

    Use as a context manager; ``write`` appends to the current line and
    ``write_line`` terminates it with a newline.
    """

    def __init__(self, path: PathType, encoding: str = "utf-8", append: bool = False):
        self.path = path
        self.encoding = encoding
        self.mode = "a" if append else "w"
        self._file = None

    def __enter__(self) -> "TextStreamWriter":
        self._file = open(self.path, self.mode, encoding=self.encoding, newline="")
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False

    def write(self, text: str):
        if self._file is None:
            raise ValueError("TextStreamWriter is not open")
        self._file.write(text)

    def write_line(self, text: str = ""):
        self.write(f"{text}\n")

    def close(self):
        if self._file is not None:
            self._file.close()
            self._file = None


def iter_numbered_lines(
    path: PathType, start: int = 1, encoding: Optional[str] = "utf-8"
) -> Iterator[Tuple[int, str]]:
    """
    Yield ``(line_number, line)`` pairs with line terminators stripped.

    The file stays open only while the generator is being consumed.
    """
    with open(path, "r", encoding=encoding) as reader:
        for number, line in enumerate(reader, start=start):
            yield number, line.rstrip("\r\n")
