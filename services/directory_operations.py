"""Directory creation, listing and removal."""
import errno
import logging
import os
import shutil
from pathlib import Path
from typing import List, Union

PathType = Union[str, os.PathLike]

logger = logging.getLogger(__name__)


def ensure_directory(path: PathType) -> bool:
    """
    Create a directory and any missing parents.

    Returns:
        True if the directory was created, False if it already existed
    """
    directory = Path(path)
    if directory.is_dir():
        return False
    directory.mkdir(parents=True, exist_ok=True)
    logger.debug(f"Created directory {directory}")
    return True


def list_files(path: PathType, recursive: bool = False) -> List[Path]:
    """
    List regular files under a directory.

    Args:
        path: Directory to scan
        recursive: Descend into every subdirectory when True

    Returns:
        Sorted list of file paths, each prefixed with ``path``

    Raises:
        FileNotFoundError: If the directory does not exist
        NotADirectoryError: If ``path`` is a file
    """
    directory = Path(path)
    if recursive:
        # rglob swallows a missing root; surface it like the flat listing does
        if not directory.exists():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(directory))
        if not directory.is_dir():
            raise NotADirectoryError(errno.ENOTDIR, os.strerror(errno.ENOTDIR), str(directory))
        found = [p for p in directory.rglob("*") if p.is_file()]
    else:
        found = [p for p in directory.iterdir() if p.is_file()]
    return sorted(found)


def list_directories(path: PathType) -> List[Path]:
    """Sorted immediate subdirectories of ``path``."""
    return sorted(p for p in Path(path).iterdir() if p.is_dir())


def current_directory() -> Path:
    return Path.cwd()


def remove_tree(path: PathType) -> bool:
    """
    Remove a directory tree if present.

    Returns:
        True if something was removed
    """
    directory = Path(path)
    if not directory.exists():
        return False
    shutil.rmtree(directory)
    logger.debug(f"Removed directory tree {directory}")
    return True
