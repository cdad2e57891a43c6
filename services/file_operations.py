"""Whole-file read/write helpers and the non-throwing safe writer."""
import logging
import os
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Iterable, List, Union

from utils.errors import describe_error
from utils.file_stream import format_file_size

PathType = Union[str, os.PathLike]

logger = logging.getLogger(__name__)


@dataclass
class FileInfo:
    """Metadata snapshot of a regular file."""
    path: str
    size: int
    created: datetime
    modified: datetime

    @property
    def size_display(self) -> str:
        return format_file_size(self.size)


def write_all_text(path: PathType, content: str, encoding: str = "utf-8") -> None:
    """Create or truncate ``path`` and write ``content`` to it."""
    with open(path, "w", encoding=encoding, newline="") as f:
        f.write(content)


def read_all_text(path: PathType, encoding: str = "utf-8") -> str:
    """Read the whole file as text, newlines untranslated."""
    with open(path, "r", encoding=encoding, newline="") as f:
        return f.read()


def append_all_text(path: PathType, content: str, encoding: str = "utf-8") -> None:
    """Append ``content``, creating the file if it does not exist."""
    with open(path, "a", encoding=encoding, newline="") as f:
        f.write(content)


def write_all_lines(path: PathType, lines: Iterable[str], encoding: str = "utf-8") -> None:
    """Create or truncate ``path`` and write each line followed by a newline."""
    with open(path, "w", encoding=encoding, newline="") as f:
        for line in lines:
            f.write(f"{line}\n")


def read_all_lines(path: PathType, encoding: str = "utf-8") -> List[str]:
    """Read every line of a text file without its terminator (\\r, \\n or \\r\\n)."""
    with open(path, "r", encoding=encoding) as f:
        return [line.rstrip("\r\n") for line in f]


def file_exists(path: PathType) -> bool:
    return os.path.isfile(path)


def get_file_info(path: PathType) -> FileInfo:
    """
    Collect size and timestamps for a file.

    Creation time uses st_birthtime where the platform records it and falls
    back to st_ctime otherwise.

    Raises:
        FileNotFoundError: If the file does not exist
    """
    stat = Path(path).stat()
    created_ts = getattr(stat, "st_birthtime", stat.st_ctime)
    return FileInfo(
        path=os.fspath(path),
        size=stat.st_size,
        created=datetime.fromtimestamp(created_ts),
        modified=datetime.fromtimestamp(stat.st_mtime),
    )


def safe_write_text(path: PathType, content: str, encoding: str = "utf-8") -> bool:
    """
    Write text to a file, reporting file-system failures as False.

    Access-denied, missing-directory and other OSErrors are logged and
    converted to a False result. Anything else (a non-str content, an
    encoding error) propagates.

    Args:
        path: Target file (create-or-truncate)
        content: Text to write
        encoding: Text encoding

    Returns:
        True if the content was fully written, False otherwise
    """
    try:
        write_all_text(path, content, encoding=encoding)
        return True
    except PermissionError as e:
        logger.warning(f"Access denied writing {path}: {describe_error(e)}")
        return False
    except FileNotFoundError as e:
        logger.warning(f"Directory not found for {path}: {describe_error(e)}")
        return False
    except OSError as e:
        logger.error(f"IO error writing {path}: {describe_error(e)}")
        return False
