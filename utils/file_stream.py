"""File streaming utilities: chunked reads and block copies with progress."""
import codecs
import logging
import os
from dataclasses import dataclass
from typing import Callable, Iterator, Optional, Union

PathType = Union[str, os.PathLike]

DEFAULT_CHUNK_SIZE = 1024
DEFAULT_BLOCK_SIZE = 4096

logger = logging.getLogger(__name__)


@dataclass
class CopyResult:
    """Outcome of a single progress copy."""
    source: str
    destination: str
    total_bytes: int
    copied_bytes: int
    percent: int


def read_file_in_chunks(
    path: PathType,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    encoding: str = "utf-8",
) -> Iterator[str]:
    """
    Lazily read a text file as chunks of at most ``chunk_size`` characters.

    The file is not opened until the first chunk is requested, so a missing
    or unreadable file raises on the first ``next()``. The handle is closed
    when the iterator is exhausted, when it is closed early, or when a read
    fails. Newlines are passed through untranslated. A leading UTF-8 byte
    order mark is dropped when the encoding is UTF-8.

    Args:
        path: Text file to read
        chunk_size: Maximum characters per chunk
        encoding: Text encoding of the file

    Returns:
        Single-use iterator of string chunks

    Raises:
        ValueError: If chunk_size is not positive
    """
    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")
    if codecs.lookup(encoding).name == "utf-8":
        encoding = "utf-8-sig"
    return _iter_text_chunks(path, chunk_size, encoding)


def _iter_text_chunks(path: PathType, chunk_size: int, encoding: str) -> Iterator[str]:
    with open(path, "r", encoding=encoding, newline="") as reader:
        logger.debug(f"Opened {path} for chunked read (chunk_size={chunk_size})")
        while True:
            chunk = reader.read(chunk_size)
            if not chunk:
                break
            yield chunk
    logger.debug(f"Closed {path} after chunked read")


def copy_file_with_progress(
    source: PathType,
    destination: PathType,
    progress_callback: Optional[Callable[[int], None]] = None,
    complete_callback: Optional[Callable[[CopyResult], None]] = None,
    block_size: int = DEFAULT_BLOCK_SIZE,
) -> CopyResult:
    """
    Copy a file block by block, reporting cumulative percentage progress.

    The destination is created or truncated. The source is opened first, so
    a missing source leaves the destination untouched. A failure part way
    through leaves a partially written destination behind.

    Args:
        source: File to copy from
        destination: File to copy to (create-or-truncate)
        progress_callback: Called with the percentage after every block
        complete_callback: Called once with the result after the last block
        block_size: Bytes read and written per iteration

    Returns:
        CopyResult describing the finished copy

    Raises:
        ValueError: If block_size is not positive
        OSError: If either file cannot be opened, read or written
    """
    if block_size <= 0:
        raise ValueError(f"block_size must be positive, got {block_size}")

    with open(source, "rb") as src:
        total_bytes = os.fstat(src.fileno()).st_size
        with open(destination, "wb") as dst:
            logger.info(
                f"Copying {source} -> {destination} ({format_file_size(total_bytes)})"
            )
            copied_bytes = 0
            percent = 0

            if total_bytes == 0:
                percent = 100
                if progress_callback:
                    progress_callback(percent)
            else:
                buffer = bytearray(block_size)
                view = memoryview(buffer)
                while True:
                    bytes_read = src.readinto(buffer)
                    if not bytes_read:
                        break
                    dst.write(view[:bytes_read])
                    copied_bytes += bytes_read
                    # Source may grow while copying
                    percent = min(copied_bytes * 100 // total_bytes, 100)
                    if progress_callback:
                        progress_callback(percent)

    result = CopyResult(
        source=os.fspath(source),
        destination=os.fspath(destination),
        total_bytes=total_bytes,
        copied_bytes=copied_bytes,
        percent=percent,
    )
    logger.info(f"Copy complete: {result.destination} ({copied_bytes} bytes)")
    if complete_callback:
        complete_callback(result)
    return result


def format_file_size(size_bytes: int) -> str:
    """
    Format file size in human-readable format.

    Args:
        size_bytes: Size in bytes

    Returns:
        Formatted string (e.g., "1.5 MB")
    """
    for unit in ["B", "KB", "MB", "GB", "TB"]:
        if size_bytes < 1024.0:
            return f"{size_bytes:.1f} {unit}"
        size_bytes /= 1024.0
    return f"{size_bytes:.1f} PB"
