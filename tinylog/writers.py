# SPDX-License-Identifier: Apache-2.0
"""Output writer resolution for the three severity bands."""

import os
import sys
from typing import TYPE_CHECKING, Any, List, Optional

from loguru import logger

if TYPE_CHECKING:
    from tinylog.config import Config

FILE_MODE = 0o644


class FileWriter:
    """Append-only log file, created with mode 0644 when missing."""

    def __init__(self, path: str) -> None:
        self.path = path
        fd = os.open(path, os.O_APPEND | os.O_CREAT | os.O_WRONLY, FILE_MODE)
        self.stream = os.fdopen(fd, "a", encoding="utf-8")

    def write(self, text: str) -> int:
        return self.stream.write(text)

    def flush(self) -> None:
        self.stream.flush()

    def close(self) -> None:
        self.stream.close()


class MultiWriter:
    """Duplicate every write to each of the wrapped writers, in order."""

    def __init__(self, *writers: Any) -> None:
        self.writers = list(writers)

    def write(self, text: str) -> int:
        for writer in self.writers:
            writer.write(text)
        return len(text)

    def flush(self) -> None:
        for writer in self.writers:
            writer.flush()


class DiscardWriter:
    """Writer that accepts everything and keeps nothing."""

    def write(self, text: str) -> int:
        return len(text)

    def flush(self) -> None:
        pass


def get_writer(log_to_file: bool, file_out: str, writer: Optional[Any]) -> Optional[Any]:
    """Combine ``writer`` with the log file at ``file_out`` when file logging is on."""
    if not log_to_file or not file_out:
        return writer

    try:
        file_writer = FileWriter(file_out)
    except OSError as exc:
        logger.warning(f"Failed to open log file for writing: {file_out} ({exc})")
        return writer

    if writer is not None:
        return MultiWriter(writer, file_writer)
    return file_writer


def _band_writer(log_to_file: bool, file_out: str, console: Optional[Any]) -> Any:
    writer = get_writer(log_to_file, file_out, console)
    if writer is None:
        return DiscardWriter()
    return writer


def get_debug_writer(cfg: "Config") -> Any:
    """Resolve the writer for TRACE and DEBUG messages."""
    console = sys.stdout if cfg.log_to_output else None
    return _band_writer(cfg.log_to_file, cfg.debug_file, console)


def get_info_writer(cfg: "Config") -> Any:
    """Resolve the writer for INFO and WARNING messages."""
    console = sys.stdout if cfg.log_to_output else None
    return _band_writer(cfg.log_to_file, cfg.info_file, console)


def get_error_writer(cfg: "Config") -> Any:
    """Resolve the writer for ERROR, FATAL and PANIC messages."""
    console = sys.stderr if cfg.log_to_output else None
    return _band_writer(cfg.log_to_file, cfg.error_file, console)


def file_writers(writer: Any) -> List[FileWriter]:
    """Collect the FileWriters reachable from ``writer``."""
    if isinstance(writer, FileWriter):
        return [writer]
    if isinstance(writer, MultiWriter):
        found: List[FileWriter] = []
        for child in writer.writers:
            found.extend(file_writers(child))
        return found
    return []
