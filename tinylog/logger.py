# SPDX-License-Identifier: Apache-2.0
"""Leveled, colorized logger and its constructors."""

import sys
import threading
from dataclasses import replace
from datetime import datetime
from typing import Any

from loguru import logger as internal_logger

from tinylog.config import Config, Severity, level_color, level_tag, new_config
from tinylog.tags import generate_tag
from tinylog.writers import (
    file_writers,
    get_debug_writer,
    get_error_writer,
    get_info_writer,
)


class PanicError(RuntimeError):
    """Raised by ``Logger.panic`` after the message has been written."""


def format_time(now: datetime, pattern: str) -> str:
    """Format ``now`` with a strftime pattern that also understands %3f (milliseconds)."""
    return now.strftime(pattern.replace("%3f", f"{now.microsecond // 1000:03d}"))


class Logger:
    """A logger owning a reconciled Config.

    Writes are synchronous. The write of a single line is serialized by a
    per-logger lock; nothing is buffered between calls.
    """

    def __init__(self, cfg: Config) -> None:
        self.config = cfg
        self._lock = threading.Lock()

    def apply_config(self, cfg: Config) -> None:
        """Apply ``cfg`` to this logger, keeping user-supplied level tags.

        A level tag is only regenerated when it still equals the default tag
        and either its color or the tag formatting moved away from the
        defaults. A custom tag that happens to equal its default is therefore
        treated as untouched. Files opened for a previous configuration are
        not closed.
        """
        cfg = replace(cfg, level_text=replace(cfg.level_text))

        if cfg.disable_colors:
            for severity in Severity:
                setattr(cfg, f"{severity.name.lower()}_color", "")
            cfg.reset_color = ""
            cfg.time_color = ""

        defaults = new_config()
        formatting_changed = (
            cfg.level_text_inner_format != defaults.level_text_inner_format
            or cfg.level_text_outer_format != defaults.level_text_outer_format
            or cfg.level_text_left_justify != defaults.level_text_left_justify
            or cfg.level_text_padding != defaults.level_text_padding
        )

        for severity in Severity:
            color = level_color(cfg, severity)
            untouched = level_tag(cfg.level_text, severity) == level_tag(
                defaults.level_text, severity
            )
            if untouched and (color != level_color(defaults, severity) or formatting_changed):
                setattr(
                    cfg.level_text,
                    severity.name.lower(),
                    generate_tag(severity.name, color, cfg),
                )

        cfg.debug_writer = get_debug_writer(cfg)
        cfg.info_writer = get_info_writer(cfg)
        cfg.error_writer = get_error_writer(cfg)

        self.config = cfg

    def close(self) -> None:
        """Close the log files opened for the current configuration."""
        cfg = self.config
        seen = set()
        for writer in (cfg.debug_writer, cfg.info_writer, cfg.error_writer):
            for file_writer in file_writers(writer):
                if id(file_writer) not in seen:
                    seen.add(id(file_writer))
                    file_writer.close()

    def _time_string(self) -> str:
        cfg = self.config
        if cfg.print_time:
            return cfg.time_color + format_time(datetime.now(), cfg.time_pattern) + cfg.reset_color
        return ""

    def _do_log(self, writer: Any, level: Severity, level_text: str, msg: str) -> None:
        cfg = self.config
        if level < cfg.log_level:
            return

        if not cfg.print_level:
            level_text = ""
        line = self._time_string() + cfg.log_prefix + level_text + msg + cfg.log_suffix

        with self._lock:
            try:
                writer.write(line)
                writer.flush()
            except (OSError, ValueError) as exc:
                internal_logger.warning(f"Failed to write log line: {exc}")

    def _do_logf(
        self, writer: Any, level: Severity, level_text: str, fmt: str, *args: Any
    ) -> None:
        if level >= self.config.log_level:
            self._do_log(writer, level, level_text, _substitute(fmt, args))

    def trace(self, msg: str) -> None:
        self._do_log(self.config.debug_writer, Severity.TRACE, self.config.level_text.trace, msg)

    def tracef(self, fmt: str, *args: Any) -> None:
        self._do_logf(
            self.config.debug_writer, Severity.TRACE, self.config.level_text.trace, fmt, *args
        )

    def debug(self, msg: str) -> None:
        self._do_log(self.config.debug_writer, Severity.DEBUG, self.config.level_text.debug, msg)

    def debugf(self, fmt: str, *args: Any) -> None:
        self._do_logf(
            self.config.debug_writer, Severity.DEBUG, self.config.level_text.debug, fmt, *args
        )

    def info(self, msg: str) -> None:
        self._do_log(self.config.info_writer, Severity.INFO, self.config.level_text.info, msg)

    def infof(self, fmt: str, *args: Any) -> None:
        self._do_logf(
            self.config.info_writer, Severity.INFO, self.config.level_text.info, fmt, *args
        )

    def warning(self, msg: str) -> None:
        self._do_log(
            self.config.info_writer, Severity.WARNING, self.config.level_text.warning, msg
        )

    def warningf(self, fmt: str, *args: Any) -> None:
        self._do_logf(
            self.config.info_writer, Severity.WARNING, self.config.level_text.warning, fmt, *args
        )

    warn = warning
    warnf = warningf

    def error(self, msg: str) -> None:
        self._do_log(self.config.error_writer, Severity.ERROR, self.config.level_text.error, msg)

    def errorf(self, fmt: str, *args: Any) -> None:
        self._do_logf(
            self.config.error_writer, Severity.ERROR, self.config.level_text.error, fmt, *args
        )

    def fatal(self, msg: str) -> None:
        """Write ``msg`` and exit the process with status 1."""
        self._do_log(self.config.error_writer, Severity.FATAL, self.config.level_text.fatal, msg)
        sys.exit(1)

    def fatalf(self, fmt: str, *args: Any) -> None:
        self._do_logf(
            self.config.error_writer, Severity.FATAL, self.config.level_text.fatal, fmt, *args
        )
        sys.exit(1)

    def panic(self, msg: str) -> None:
        """Write ``msg`` and raise PanicError carrying it."""
        self._do_log(self.config.error_writer, Severity.PANIC, self.config.level_text.panic, msg)
        raise PanicError(msg)

    def panicf(self, fmt: str, *args: Any) -> None:
        msg = _substitute(fmt, args)
        self._do_log(self.config.error_writer, Severity.PANIC, self.config.level_text.panic, msg)
        raise PanicError(msg)


def _substitute(fmt: str, args: tuple) -> str:
    """printf-style substitution that never raises.

    A pattern that does not match its arguments is reported as an internal
    warning and written as-is, followed by the arguments.
    """
    try:
        return fmt % args
    except (TypeError, ValueError) as exc:
        internal_logger.warning(f"Bad log format {fmt!r}: {exc}")
        if args:
            return f"{fmt} {args!r}"
        return fmt


def default_logger() -> Logger:
    """Get a new logger with the default config."""
    return new_logger(new_config())


def new_logger(cfg: Config) -> Logger:
    """Build a logger from ``cfg``, reconciling tags and writers once."""
    logger = Logger(cfg)
    logger.apply_config(cfg)
    return logger


def new_tagged_logger(log_tag: str, log_color: str) -> Logger:
    """Build a default logger whose line prefix is a tag, handy for submodules."""
    cfg = new_config()
    cfg.log_prefix = generate_tag(log_tag, log_color, cfg)
    return new_logger(cfg)
