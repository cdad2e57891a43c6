"""Main CLI entrypoint for the file I/O toolkit."""
import sys
import argparse

from config import Config
from services.demo import SECTIONS, DemoRunner
from utils.errors import describe_error
from utils.file_stream import copy_file_with_progress, format_file_size, read_file_in_chunks
from utils.logger import FileIOLogger


class ConsoleProgress:
    """Prints a single, rewritten percentage line to stdout."""

    def __init__(self, stream=None):
        self.stream = stream or sys.stdout
        self.last_percent = None

    def update(self, percent: int):
        if percent != self.last_percent:
            self.stream.write(f"\rCopying: {percent}%")
            self.stream.flush()
            self.last_percent = percent

    def complete(self, result):
        self.stream.write(" - Complete!\n")
        self.stream.flush()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="File I/O toolkit - chunked reads, progress copies and file-system demos"
    )
    parser.add_argument(
        "--section",
        action="append",
        choices=SECTIONS,
        help="Run only this demo section (repeatable; default: all sections)",
    )
    parser.add_argument(
        "--work-dir",
        type=str,
        help="Directory the demo writes into (default: FILEIO_WORK_DIR)",
    )
    parser.add_argument(
        "--cleanup",
        action="store_true",
        help="Remove the demo working directory after the run",
    )
    parser.add_argument(
        "--copy",
        nargs=2,
        metavar=("SRC", "DST"),
        help="Copy SRC to DST with a progress indicator, then exit",
    )
    parser.add_argument(
        "--chunks",
        metavar="PATH",
        help="Read PATH in chunks and print the chunk sizes, then exit",
    )
    parser.add_argument(
        "--chunk-size",
        type=int,
        help="Characters per chunk (default: FILEIO_CHUNK_SIZE)",
    )
    return parser


def main(argv=None):
    """Main entry point."""
    args = build_parser().parse_args(argv)

    # Load configuration (treat only this as "configuration error")
    try:
        config = Config.from_env().with_overrides(
            work_dir=args.work_dir, chunk_size=args.chunk_size
        )
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    if args.copy:
        source, destination = args.copy
        progress = ConsoleProgress()
        try:
            result = copy_file_with_progress(
                source,
                destination,
                progress_callback=progress.update,
                complete_callback=progress.complete,
                block_size=config.block_size,
            )
        except OSError as e:
            print(f"\nCopy failed: {describe_error(e)}", file=sys.stderr)
            return 1
        print(f"Copied {format_file_size(result.copied_bytes)} to {result.destination}")
        return 0

    if args.chunks:
        try:
            sizes = [
                len(chunk)
                for chunk in read_file_in_chunks(args.chunks, config.chunk_size, config.encoding)
            ]
        except (OSError, UnicodeDecodeError) as e:
            print(f"Chunked read failed: {describe_error(e)}", file=sys.stderr)
            return 1
        print(f"Chunks: {len(sizes)}")
        for index, size in enumerate(sizes, start=1):
            print(f"  {index}: {size} chars")
        return 0

    logger = None
    try:
        # Initialize logger
        logger = FileIOLogger(log_dir=config.log_dir, level=config.log_level)
        logger.log_info("=" * 60)
        logger.log_info("File I/O Demo Starting")
        logger.log_info(f"Working directory: {config.work_dir}")
        logger.log_info("=" * 60)

        runner = DemoRunner(config, logger)
        results = runner.run(args.section)

        failed = [r for r in results if not r.success]
        logger.log_info("=" * 60)
        logger.log_info(f"Sections run: {len(results)} | Failed: {len(failed)}")
        logger.log_info("=" * 60)

        if args.cleanup:
            runner.cleanup()

        return 1 if failed else 0
    except OSError as e:
        print(f"Fatal error: {describe_error(e)}", file=sys.stderr)
        return 1
    finally:
        if logger:
            logger.close()


if __name__ == "__main__":
    sys.exit(main())
