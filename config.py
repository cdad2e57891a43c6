"""Configuration management for the file I/O toolkit."""
import codecs
import logging
import os
from dataclasses import dataclass
from typing import Optional
from dotenv import load_dotenv

from utils.file_stream import DEFAULT_BLOCK_SIZE, DEFAULT_CHUNK_SIZE

# Load environment variables
load_dotenv()


def _positive_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"Invalid {name}: expected an integer, got {raw!r}")
    if value <= 0:
        raise ValueError(f"Invalid {name}: must be positive, got {value}")
    return value


@dataclass
class Config:
    """Main configuration container."""
    work_dir: str
    log_dir: str
    chunk_size: int
    block_size: int
    encoding: str
    log_level: str

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        encoding = os.getenv("FILEIO_ENCODING", "utf-8")
        try:
            codecs.lookup(encoding)
        except LookupError:
            raise ValueError(f"Invalid FILEIO_ENCODING: unknown encoding {encoding!r}")

        log_level = os.getenv("FILEIO_LOG_LEVEL", "INFO").upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise ValueError(f"Invalid FILEIO_LOG_LEVEL: {log_level!r}")

        return cls(
            work_dir=os.getenv("FILEIO_WORK_DIR", "fileio_work"),
            log_dir=os.getenv("FILEIO_LOG_DIR", "logs"),
            chunk_size=_positive_int("FILEIO_CHUNK_SIZE", DEFAULT_CHUNK_SIZE),
            block_size=_positive_int("FILEIO_BLOCK_SIZE", DEFAULT_BLOCK_SIZE),
            encoding=encoding,
            log_level=log_level,
        )

    def with_overrides(
        self,
        work_dir: Optional[str] = None,
        chunk_size: Optional[int] = None,
    ) -> "Config":
        """Return a copy with CLI-provided values applied."""
        if chunk_size is not None and chunk_size <= 0:
            raise ValueError(f"Invalid chunk size: must be positive, got {chunk_size}")
        return Config(
            work_dir=work_dir or self.work_dir,
            log_dir=self.log_dir,
            chunk_size=chunk_size or self.chunk_size,
            block_size=self.block_size,
            encoding=self.encoding,
            log_level=self.log_level,
        )
