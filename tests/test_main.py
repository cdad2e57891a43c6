"""Tests for the CLI entry point."""
import os
import pytest
from unittest.mock import patch
from main import ConsoleProgress, main


@pytest.fixture
def env(tmp_path):
    """Isolated configuration pointing work and log dirs into tmp_path."""
    env_vars = {
        "FILEIO_WORK_DIR": str(tmp_path / "work"),
        "FILEIO_LOG_DIR": str(tmp_path / "logs"),
    }
    with patch.dict(os.environ, env_vars, clear=True):
        yield tmp_path


def test_copy_flag(env, capsys):
    source = env / "source.bin"
    destination = env / "dest.bin"
    source.write_bytes(b"x" * 10000)

    assert main(["--copy", str(source), str(destination)]) == 0

    out = capsys.readouterr().out
    assert "\rCopying: 40%" in out
    assert "\rCopying: 81%" in out
    assert "\rCopying: 100% - Complete!" in out
    assert destination.read_bytes() == source.read_bytes()


def test_copy_flag_missing_source(env, capsys):
    assert main(["--copy", str(env / "missing.bin"), str(env / "dest.bin")]) == 1

    assert "not-found" in capsys.readouterr().err


def test_chunks_flag(env, capsys):
    path = env / "data.txt"
    path.write_text("a" * 25, encoding="utf-8")

    assert main(["--chunks", str(path), "--chunk-size", "10"]) == 0

    out = capsys.readouterr().out
    assert "Chunks: 3" in out
    assert "3: 5 chars" in out


def test_chunks_flag_missing_file(env, capsys):
    assert main(["--chunks", str(env / "missing.txt")]) == 1

    assert "Chunked read failed: not-found" in capsys.readouterr().err


def test_configuration_error(env, capsys):
    with patch.dict(os.environ, {"FILEIO_BLOCK_SIZE": "zero"}):
        assert main(["--chunks", "anything"]) == 1

    assert "Configuration error" in capsys.readouterr().err


def test_invalid_chunk_size_flag(env, capsys):
    assert main(["--chunks", "anything", "--chunk-size", "0"]) == 1

    assert "Configuration error" in capsys.readouterr().err


def test_demo_run_with_cleanup(env):
    assert main(["--section", "files", "--section", "binary", "--cleanup"]) == 0

    assert not (env / "work").exists()
    assert any((env / "logs").iterdir())


def test_demo_run_work_dir_override(env):
    target = env / "elsewhere"

    assert main(["--section", "streams", "--work-dir", str(target)]) == 0

    assert (target / "writer_example.txt").exists()


def test_unusable_log_dir_is_fatal_error(env, capsys):
    """A log dir that cannot be created exits 1 with a diagnostic."""
    blocker = env / "not_a_dir"
    blocker.write_text("x", encoding="utf-8")

    with patch.dict(os.environ, {"FILEIO_LOG_DIR": str(blocker / "logs")}):
        assert main(["--section", "files"]) == 1

    assert "Fatal error: invalid-path" in capsys.readouterr().err


def test_console_progress_skips_repeats():
    class Buffer:
        def __init__(self):
            self.parts = []

        def write(self, text):
            self.parts.append(text)

        def flush(self):
            pass

    stream = Buffer()
    progress = ConsoleProgress(stream)
    for percent in (10, 10, 55, 100):
        progress.update(percent)
    progress.complete(None)

    assert stream.parts == ["\rCopying: 10%", "\rCopying: 55%", "\rCopying: 100%", " - Complete!\n"]
