"""Path-string inspection and temp-file helpers."""
import os
import re
import tempfile
from dataclasses import dataclass
from pathlib import Path, PurePath, PureWindowsPath
from typing import FrozenSet

# Drive letter ("C:") or UNC ("\\server\share") prefix
_WINDOWS_PATH = re.compile(r"^([A-Za-z]:|\\\\)")

# Characters rejected in file names on at least one supported platform
_INVALID_FILENAME_CHARS = frozenset('\\/:*?"<>|') | frozenset(chr(c) for c in range(32))


@dataclass
class PathInfo:
    """Components of a path string."""
    full_path: str
    directory: str
    file_name: str
    stem: str
    extension: str
    root: str


def _pure_path(path: str) -> PurePath:
    if _WINDOWS_PATH.match(path):
        return PureWindowsPath(path)
    return PurePath(path)


def describe_path(path: str) -> PathInfo:
    """
    Split a path string into its components without touching the disk.

    Drive-letter and UNC paths are parsed with Windows rules on any host;
    everything else uses the host's rules.
    """
    pure = _pure_path(os.fspath(path))
    directory = str(pure.parent) if pure.name else ""
    return PathInfo(
        full_path=str(pure),
        directory=directory,
        file_name=pure.name,
        stem=pure.stem,
        extension=pure.suffix,
        root=pure.anchor,
    )


def combine_paths(*parts: str) -> str:
    """Join path segments with the host separator."""
    return os.path.join(*parts)


def temp_directory() -> Path:
    return Path(tempfile.gettempdir())


def create_temp_file(suffix: str = ".tmp") -> Path:
    """Create an empty, uniquely named file in the temp directory."""
    fd, name = tempfile.mkstemp(suffix=suffix)
    os.close(fd)
    return Path(name)


def invalid_filename_chars() -> FrozenSet[str]:
    return _INVALID_FILENAME_CHARS


def safe_filename(filename: str, max_length: int = 255) -> str:
    """
    Ensure filename is safe and within length limits.

    Args:
        filename: Original filename
        max_length: Maximum filename length

    Returns:
        Safe filename
    """
    # Remove or replace problematic characters
    safe = "".join("_" if c in _INVALID_FILENAME_CHARS else c for c in filename)

    # Truncate if too long (preserve extension)
    if len(safe) > max_length:
        parts = safe.rsplit(".", 1)
        if len(parts) == 2 and len(parts[1]) + 1 < max_length:
            name, ext = parts
            max_name_length = max(max_length - len(ext) - 1, 0)
            safe = name[:max_name_length] + "." + ext
        else:
            safe = safe[:max_length]

    return safe
