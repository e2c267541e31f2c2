# SPDX-License-Identifier: Apache-2.0
"""Logger configuration model and defaults."""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any

from tinylog.colors import (
    COLOR_CYAN,
    COLOR_GRAY,
    COLOR_GREEN,
    COLOR_MAGENTA,
    COLOR_RED,
    COLOR_RESET,
    COLOR_WHITE,
    COLOR_YELLOW,
)
from tinylog.tags import generate_tag
from tinylog.writers import get_debug_writer, get_error_writer, get_info_writer


class Severity(IntEnum):
    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARNING = 3
    WARN = 3
    ERROR = 4
    FATAL = 5
    PANIC = 6


@dataclass
class LevelText:
    """Display strings for each log level; can be user-overridden."""

    trace: str = ""
    debug: str = ""
    info: str = ""
    warning: str = ""
    error: str = ""
    fatal: str = ""
    panic: str = ""


@dataclass
class Config:
    """Settings for a Logger.

    A zero-value ``Config()`` is valid but prints nothing useful; start from
    ``new_config()`` and change what you need.
    """

    # Whether or not to log to stdout/stderr
    log_to_output: bool = False
    log_to_file: bool = False

    # Files for TRACE/DEBUG, INFO/WARNING and ERROR/FATAL/PANIC, used when log_to_file is set
    debug_file: str = ""
    info_file: str = ""
    error_file: str = ""

    print_time: bool = False
    # strftime pattern; %3f renders milliseconds
    time_pattern: str = ""
    time_color: str = ""

    print_level: bool = False

    # Minimum severity that gets written
    log_level: Severity = Severity.TRACE

    # printf-style patterns for the text inside the brackets and for the whole bracketed tag
    level_text_inner_format: str = ""
    level_text_outer_format: str = ""
    # Visible width of a tag, trailing spaces included
    level_text_padding: int = 0
    level_text_left_justify: bool = False

    # Printed after the time and before the level tag
    log_prefix: str = ""
    log_suffix: str = ""

    disable_colors: bool = False

    trace_color: str = ""
    debug_color: str = ""
    info_color: str = ""
    warning_color: str = ""
    error_color: str = ""
    fatal_color: str = ""
    panic_color: str = ""
    reset_color: str = ""

    level_text: LevelText = field(default_factory=LevelText)

    debug_writer: Any = None
    info_writer: Any = None
    error_writer: Any = None


def level_color(cfg: Config, severity: Severity) -> str:
    """Return the color sequence configured for ``severity``."""
    return getattr(cfg, f"{severity.name.lower()}_color")


def level_tag(level_text: LevelText, severity: Severity) -> str:
    """Return the display string stored for ``severity``."""
    return getattr(level_text, severity.name.lower())


def new_config() -> Config:
    """Build a Config holding the preferred defaults."""
    cfg = Config()

    cfg.log_to_output = True
    cfg.log_to_file = False

    cfg.debug_file = ""
    cfg.info_file = ""
    cfg.error_file = ""

    cfg.print_time = True
    cfg.time_pattern = "[%b %d %Y @ %H:%M:%S.%3f] "
    cfg.time_color = COLOR_GRAY

    cfg.print_level = True

    cfg.log_level = Severity.TRACE

    cfg.level_text_inner_format = "%7s"
    cfg.level_text_outer_format = "%s "
    cfg.level_text_padding = 10
    cfg.level_text_left_justify = False

    cfg.log_prefix = ""
    cfg.log_suffix = "\n"

    cfg.disable_colors = False

    cfg.trace_color = COLOR_WHITE
    cfg.debug_color = COLOR_GREEN
    cfg.info_color = COLOR_CYAN
    cfg.warning_color = COLOR_YELLOW
    cfg.error_color = COLOR_MAGENTA
    cfg.fatal_color = COLOR_RED
    cfg.panic_color = COLOR_RED
    cfg.reset_color = COLOR_RESET

    # Tags need the final colors and formats; writers come last
    for severity in Severity:
        setattr(
            cfg.level_text,
            severity.name.lower(),
            generate_tag(severity.name, level_color(cfg, severity), cfg),
        )

    cfg.debug_writer = get_debug_writer(cfg)
    cfg.info_writer = get_info_writer(cfg)
    cfg.error_writer = get_error_writer(cfg)

    return cfg
