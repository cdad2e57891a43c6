"""Classification of file-system failures for diagnostics."""
import errno
from enum import Enum


class ErrorKind(Enum):
    """Kinds of file-system failure reported to users."""
    NOT_FOUND = "not-found"
    ACCESS_DENIED = "access-denied"
    INVALID_PATH = "invalid-path"
    IO_GENERIC = "io-generic"


_INVALID_PATH_ERRNOS = {
    errno.ENAMETOOLONG,
    errno.EINVAL,
    errno.ENOTDIR,
    errno.EISDIR,
}


def classify_error(exc: BaseException) -> ErrorKind:
    """
    Map an exception raised by a file operation to an ErrorKind.

    Args:
        exc: Exception raised by open(), os.* or pathlib calls

    Returns:
        Matching ErrorKind; IO_GENERIC when nothing more specific applies
    """
    if isinstance(exc, FileNotFoundError):
        return ErrorKind.NOT_FOUND
    if isinstance(exc, PermissionError):
        return ErrorKind.ACCESS_DENIED
    if isinstance(exc, (IsADirectoryError, NotADirectoryError)):
        return ErrorKind.INVALID_PATH
    if isinstance(exc, OSError) and exc.errno in _INVALID_PATH_ERRNOS:
        return ErrorKind.INVALID_PATH
    # open() rejects paths with embedded NUL bytes with ValueError
    if isinstance(exc, ValueError) and "null" in str(exc).lower():
        return ErrorKind.INVALID_PATH
    return ErrorKind.IO_GENERIC


def describe_error(exc: BaseException) -> str:
    """One-line diagnostic for an exception, prefixed with its kind."""
    kind = classify_error(exc)
    if isinstance(exc, OSError) and exc.filename is not None:
        detail = f"{exc.strerror or exc} ({exc.filename})"
    else:
        detail = str(exc) or type(exc).__name__
    return f"{kind.value}: {detail}"
