"""Structured logging for the file I/O toolkit."""
import logging
from datetime import datetime
from pathlib import Path
from typing import Optional


class FileIOLogger:
    """Structured logger for file operations run by the CLI."""

    def __init__(self, log_dir: str = "logs", level: str = "INFO"):
        """
        Initialize logger with file and console handlers.

        Args:
            log_dir: Directory for log files
            level: Logging level name for both handlers
        """
        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)

        # Create logger
        self.logger = logging.getLogger("fileio")
        self.logger.setLevel(level)

        # Remove existing handlers to avoid duplicates
        self.logger.handlers.clear()

        # Console handler
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )
        console_handler.setFormatter(console_formatter)
        self.logger.addHandler(console_handler)

        # File handler (date-based filename)
        self.log_file = self.log_dir / f"fileio_{datetime.now().strftime('%Y%m%d')}.log"
        file_handler = logging.FileHandler(self.log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )
        file_handler.setFormatter(file_formatter)
        self.logger.addHandler(file_handler)

    def close(self):
        """Flush and detach all handlers."""
        for handler in list(self.logger.handlers):
            handler.close()
            self.logger.removeHandler(handler)

    def log_section_start(self, section: str):
        """Log start of a demo section."""
        self.logger.info(f"SECTION_START Section={section}")

    def log_section_complete(self, section: str, success: bool, error: Optional[str] = None):
        """Log completion of a demo section."""
        status = "SUCCESS" if success else "FAILED"
        error_str = f" | Error={error}" if error else ""
        self.logger.info(f"SECTION_COMPLETE Section={section} | Status={status}{error_str}")

    def log_copy_start(self, source: str, destination: str):
        """Log start of a progress copy."""
        self.logger.info(f"COPY_START Source={source} | Destination={destination}")

    def log_copy_progress(self, destination: str, percent: int):
        """Log a progress update."""
        self.logger.debug(f"COPY_PROGRESS Destination={destination} | Percent={percent}")

    def log_copy_complete(self, destination: str, copied_bytes: int, total_bytes: int):
        """Log successful copy."""
        self.logger.info(
            f"COPY_COMPLETE Destination={destination} | Copied={copied_bytes} | Total={total_bytes}"
        )

    def log_write_failure(self, path: str, error: str):
        """Log a failed write."""
        self.logger.error(f"WRITE_FAILURE Path={path} | Error={error}")

    def log_file_info(self, path: str, size: str, created: datetime, modified: datetime):
        """Log file metadata."""
        self.logger.info(
            f"FILE_INFO Path={path} | Size={size} | "
            f"Created={created:%Y-%m-%d %H:%M:%S} | Modified={modified:%Y-%m-%d %H:%M:%S}"
        )

    def log_error(self, message: str, exc_info: bool = False):
        """Log general error."""
        self.logger.error(message, exc_info=exc_info)

    def log_warning(self, message: str):
        """Log warning."""
        self.logger.warning(message)

    def log_info(self, message: str):
        """Log info message."""
        self.logger.info(message)

    def log_debug(self, message: str):
        """Log debug message."""
        self.logger.debug(message)
