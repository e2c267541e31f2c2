import sys

from loguru import logger

from tinylog.config import new_config
from tinylog.writers import (
    DiscardWriter,
    FileWriter,
    MultiWriter,
    file_writers,
    get_debug_writer,
    get_error_writer,
    get_info_writer,
    get_writer,
)


class RecordingWriter:
    def __init__(self):
        self.chunks = []
        self.flushed = 0

    def write(self, text):
        self.chunks.append(text)
        return len(text)

    def flush(self):
        self.flushed += 1


def capture_warnings():
    messages = []
    handler_id = logger.add(messages.append, level="WARNING", format="{message}")
    return messages, handler_id


def test_get_writer_returns_console_when_file_logging_is_off(tmp_path):
    console = RecordingWriter()

    assert get_writer(False, str(tmp_path / "x.log"), console) is console
    assert get_writer(True, "", console) is console
    assert get_writer(True, "", None) is None
    assert not (tmp_path / "x.log").exists()


def test_get_writer_combines_console_and_file(tmp_path):
    console = RecordingWriter()
    path = tmp_path / "app.log"

    writer = get_writer(True, str(path), console)
    assert isinstance(writer, MultiWriter)

    writer.write("line\n")
    writer.flush()
    for file_writer in file_writers(writer):
        file_writer.close()

    assert console.chunks == ["line\n"]
    assert path.read_text() == "line\n"


def test_get_writer_returns_file_alone_without_console(tmp_path):
    path = tmp_path / "only.log"

    writer = get_writer(True, str(path), None)

    assert isinstance(writer, FileWriter)
    assert writer.path == str(path)
    writer.close()


def test_file_writer_appends_to_existing_file(tmp_path):
    path = tmp_path / "append.log"
    path.write_text("first\n")

    writer = FileWriter(str(path))
    writer.write("second\n")
    writer.close()

    assert path.read_text() == "first\nsecond\n"


def test_open_failure_warns_and_keeps_console(tmp_path):
    console = RecordingWriter()
    messages, handler_id = capture_warnings()
    try:
        writer = get_writer(True, str(tmp_path), console)
    finally:
        logger.remove(handler_id)

    assert writer is console
    assert any("Failed to open log file for writing" in str(m) for m in messages)


def test_band_writers_fall_back_to_discard():
    cfg = new_config()
    cfg.log_to_output = False

    assert isinstance(get_debug_writer(cfg), DiscardWriter)
    assert isinstance(get_info_writer(cfg), DiscardWriter)
    assert isinstance(get_error_writer(cfg), DiscardWriter)


def test_band_writers_pick_stdout_and_stderr():
    cfg = new_config()

    assert get_debug_writer(cfg) is sys.stdout
    assert get_info_writer(cfg) is sys.stdout
    assert get_error_writer(cfg) is sys.stderr


def test_error_band_uses_error_file(tmp_path):
    cfg = new_config()
    cfg.log_to_output = False
    cfg.log_to_file = True
    cfg.error_file = str(tmp_path / "err.log")

    assert isinstance(get_info_writer(cfg), DiscardWriter)
    writer = get_error_writer(cfg)
    assert isinstance(writer, FileWriter)
    writer.close()


def test_multi_writer_writes_in_order_and_flushes_all():
    first, second = RecordingWriter(), RecordingWriter()
    writer = MultiWriter(first, second)

    assert writer.write("abc") == 3
    writer.flush()

    assert first.chunks == second.chunks == ["abc"]
    assert first.flushed == second.flushed == 1
    assert file_writers(writer) == []


def test_discard_writer_accepts_everything():
    writer = DiscardWriter()

    assert writer.write("dropped") == 7
    writer.flush()
