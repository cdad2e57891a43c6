"""Demonstration runner exercising every file-system helper in sequence."""
from pathlib import Path
from typing import Callable, Dict, List, Optional

from config import Config
from services import binary_codec
from services.directory_operations import (
    current_directory,
    ensure_directory,
    list_directories,
    list_files,
    remove_tree,
)
from services.file_operations import (
    append_all_text,
    file_exists,
    get_file_info,
    read_all_lines,
    read_all_text,
    safe_write_text,
    write_all_lines,
    write_all_text,
)
from services.path_operations import (
    combine_paths,
    create_temp_file,
    describe_path,
    invalid_filename_chars,
    safe_filename,
    temp_directory,
)
from services.stream_operations import TextStreamWriter, iter_numbered_lines, write_bytes
from utils.errors import describe_error
from utils.file_stream import copy_file_with_progress, format_file_size, read_file_in_chunks
from utils.logger import FileIOLogger

SECTIONS = (
    "files",
    "directories",
    "streams",
    "binary",
    "paths",
    "chunks",
    "copy",
    "safe-write",
)

SAMPLE_WINDOWS_PATH = r"C:\Users\Example\Documents\test.txt"


class SectionResult:
    """Result of running one demo section."""

    def __init__(self, section: str):
        self.section = section
        self.success: bool = False
        self.error_message: Optional[str] = None


class DemoRunner:
    """Runs demonstration sections inside a dedicated working directory."""

    def __init__(self, config: Config, logger: FileIOLogger):
        """
        Initialize demo runner.

        Args:
            config: Toolkit configuration (work dir, sizes, encoding)
            logger: Structured logger for section output
        """
        self.config = config
        self.logger = logger
        self.work_dir = Path(config.work_dir)
        self._temp_files: List[Path] = []
        self._handlers: Dict[str, Callable[[], None]] = {
            "files": self.run_file_io,
            "directories": self.run_directories,
            "streams": self.run_streams,
            "binary": self.run_binary,
            "paths": self.run_paths,
            "chunks": self.run_chunked_read,
            "copy": self.run_progress_copy,
            "safe-write": self.run_safe_write,
        }

    def _path(self, name: str) -> Path:
        return self.work_dir / name

    def run(self, sections: Optional[List[str]] = None) -> List[SectionResult]:
        """
        Run the requested sections in canonical order.

        Args:
            sections: Section names to run; all sections when None

        Returns:
            One SectionResult per section run
        """
        requested = sections or list(SECTIONS)
        unknown = [s for s in requested if s not in self._handlers]
        if unknown:
            raise ValueError(f"Unknown section(s): {', '.join(unknown)}")

        ensure_directory(self.work_dir)
        results = []
        for section in SECTIONS:
            if section not in requested:
                continue
            result = SectionResult(section)
            self.logger.log_section_start(section)
            try:
                self._handlers[section]()
                result.success = True
            except OSError as e:
                result.error_message = describe_error(e)
                self.logger.log_error(f"Section {section} failed: {result.error_message}")
            self.logger.log_section_complete(section, result.success, result.error_message)
            results.append(result)
        return results

    def run_file_io(self):
        encoding = self.config.encoding
        path = self._path("proba.txt")
        write_all_text(path, "Hello, World!\nThis is a test file.", encoding=encoding)
        self.logger.log_info(f"File written: {path}")
        self.logger.log_info(f"File content: {read_all_text(path, encoding=encoding)!r}")

        append_all_text(path, "\nAppended line.", encoding=encoding)

        lines_path = self._path("lines.txt")
        write_all_lines(lines_path, ["Line 1", "Line 2", "Line 3"], encoding=encoding)
        for line in read_all_lines(lines_path, encoding=encoding):
            self.logger.log_info(f"- {line}")

        if file_exists(path):
            info = get_file_info(path)
            self.logger.log_file_info(str(path), info.size_display, info.created, info.modified)

    def run_directories(self):
        test_dir = self._path("TestDirectory")
        if ensure_directory(test_dir):
            self.logger.log_info(f"Directory created: {test_dir}")
        sub_dir = test_dir / "SubFolder"
        ensure_directory(sub_dir)

        encoding = self.config.encoding
        write_all_text(test_dir / "file1.txt", "Content 1", encoding=encoding)
        write_all_text(test_dir / "file2.txt", "Content 2", encoding=encoding)
        write_all_text(sub_dir / "subfile.txt", "Sub content", encoding=encoding)

        for f in list_files(test_dir):
            self.logger.log_info(f"File: {f.name}")
        for f in list_files(test_dir, recursive=True):
            self.logger.log_info(f"File (recursive): {f}")
        for d in list_directories(test_dir):
            self.logger.log_info(f"Subdirectory: {d.name}")
        self.logger.log_info(f"Current directory: {current_directory()}")

    def run_streams(self):
        written = write_bytes(self._path("stream_example.txt"), "Hello from FileStream!".encode("utf-8"))
        self.logger.log_info(f"Raw stream bytes written: {written}")

        writer_path = self._path("writer_example.txt")
        with TextStreamWriter(writer_path, encoding=self.config.encoding) as writer:
            writer.write_line("Line 1 from StreamWriter")
            writer.write_line("Line 2 from StreamWriter")
            writer.write("Partial line ")
            writer.write_line("completed.")

        for number, line in iter_numbered_lines(writer_path, encoding=self.config.encoding):
            self.logger.log_info(f"{number}: {line}")

    def run_binary(self):
        path = self._path("binary_example.bin")
        size = binary_codec.write_values(path, [42, 3.14159, "Binary text", True])
        values = binary_codec.read_values(
            path,
            [binary_codec.KIND_INT, binary_codec.KIND_FLOAT, binary_codec.KIND_STRING, binary_codec.KIND_BOOL],
        )
        self.logger.log_info(f"Binary file {path} ({size} bytes)")
        for label, value in zip(("Int", "Double", "String", "Bool"), values):
            self.logger.log_info(f"{label}: {value}")

    def run_paths(self):
        info = describe_path(SAMPLE_WINDOWS_PATH)
        self.logger.log_info(f"Full path: {info.full_path}")
        self.logger.log_info(f"Directory: {info.directory}")
        self.logger.log_info(f"Filename: {info.file_name}")
        self.logger.log_info(f"Filename without extension: {info.stem}")
        self.logger.log_info(f"Extension: {info.extension}")
        self.logger.log_info(f"Root: {info.root}")
        self.logger.log_info(f"Combined path: {combine_paths('folder1', 'folder2', 'file.txt')}")
        self.logger.log_info(f"Temp directory: {temp_directory()}")

        temp_file = create_temp_file()
        self._temp_files.append(temp_file)
        self.logger.log_info(f"Temp filename: {temp_file}")
        self.logger.log_info(f"Invalid filename characters count: {len(invalid_filename_chars())}")
        self.logger.log_info(f"Safe filename: {safe_filename('report: Q1/Q2?.txt')}")

    def run_chunked_read(self):
        path = self._path("chunk_source.txt")
        write_all_text(path, "0123456789" * 250, encoding=self.config.encoding)
        sizes = [
            len(chunk)
            for chunk in read_file_in_chunks(path, self.config.chunk_size, self.config.encoding)
        ]
        self.logger.log_info(f"Chunks read: {len(sizes)} | Sizes={sizes}")

    def run_progress_copy(self):
        source = self._path("copy_source.bin")
        destination = self._path("copy_destination.bin")
        write_bytes(source, bytes(range(256)) * 40)
        self.logger.log_copy_start(str(source), str(destination))
        result = copy_file_with_progress(
            source,
            destination,
            progress_callback=lambda p: self.logger.log_copy_progress(str(destination), p),
            complete_callback=lambda r: self.logger.log_copy_complete(
                r.destination, r.copied_bytes, r.total_bytes
            ),
            block_size=self.config.block_size,
        )
        self.logger.log_info(f"Copied {format_file_size(result.copied_bytes)} at {result.percent}%")

    def run_safe_write(self):
        good = self._path("safe.txt")
        ok = safe_write_text(good, "Written safely.", encoding=self.config.encoding)
        self.logger.log_info(f"Safe write to {good}: {ok}")

        bad = self._path("missing_dir") / "safe.txt"
        ok = safe_write_text(bad, "Never written.", encoding=self.config.encoding)
        if not ok:
            self.logger.log_write_failure(str(bad), "directory not found")

    def cleanup(self) -> bool:
        """Remove the working directory and any temp files created."""
        for temp_file in self._temp_files:
            temp_file.unlink(missing_ok=True)
        self._temp_files.clear()
        removed = remove_tree(self.work_dir)
        self.logger.log_info(f"Cleanup completed (removed={removed})")
        return removed
