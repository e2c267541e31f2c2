# SPDX-License-Identifier: Apache-2.0
"""Settings-file support for the command-line tool."""

from typing import Optional

from dynaconf import Dynaconf, ValidationError, Validator
from loguru import logger
import typer

from tinylog.colors import new_color
from tinylog.config import Config, Severity, new_config

SEVERITY_NAMES = [severity.name for severity in Severity] + ["WARN"]

# settings key -> Config attribute, values copied as-is
PLAIN_KEYS = {
    "LOG_TO_OUTPUT": "log_to_output",
    "LOG_TO_FILE": "log_to_file",
    "DEBUG_FILE": "debug_file",
    "INFO_FILE": "info_file",
    "ERROR_FILE": "error_file",
    "PRINT_TIME": "print_time",
    "TIME_PATTERN": "time_pattern",
    "PRINT_LEVEL": "print_level",
    "INNER_FORMAT": "level_text_inner_format",
    "OUTER_FORMAT": "level_text_outer_format",
    "PADDING": "level_text_padding",
    "LEFT_JUSTIFY": "level_text_left_justify",
    "PREFIX": "log_prefix",
    "SUFFIX": "log_suffix",
    "DISABLE_COLORS": "disable_colors",
}

# settings key -> Config attribute, values are escape codes passed through new_color
COLOR_KEYS = {
    "TIME_COLOR": "time_color",
    "TRACE_COLOR": "trace_color",
    "DEBUG_COLOR": "debug_color",
    "INFO_COLOR": "info_color",
    "WARNING_COLOR": "warning_color",
    "ERROR_COLOR": "error_color",
    "FATAL_COLOR": "fatal_color",
    "PANIC_COLOR": "panic_color",
}

BOOL_KEYS = [
    "LOG_TO_OUTPUT",
    "LOG_TO_FILE",
    "PRINT_TIME",
    "PRINT_LEVEL",
    "LEFT_JUSTIFY",
    "DISABLE_COLORS",
]


def _validators() -> list:
    validators = [
        Validator(
            "LOG_LEVEL",
            is_type_of=str,
            cast=lambda v: str(v).upper(),
            is_in=SEVERITY_NAMES,
        )
        | Validator("LOG_LEVEL", is_type_of=None, default=None),
        Validator("PADDING", is_type_of=int)
        | Validator("PADDING", is_type_of=None, default=None),
    ]
    for key in BOOL_KEYS:
        validators.append(
            Validator(key, is_type_of=bool)
            | Validator(
                key,
                is_type_of=str,
                cast=lambda v: v.lower() in ["true", "yes"],
            )
            | Validator(key, is_type_of=None, default=None)
        )
    return validators


def load_settings(settings_file: Optional[str] = None) -> Dynaconf:
    """Load and validate settings from ``settings_file`` and TINYLOG_* variables."""
    settings = Dynaconf(
        envvar_prefix="TINYLOG",
        settings_files=[settings_file] if settings_file else [],
    )
    settings.validators.register(*_validators())
    try:
        settings.validators.validate_all()
    except ValidationError as exc:
        logger.error(f"Error validating tinylog settings: {exc.details}")
        raise typer.Exit(1)
    return settings


def config_from_settings(settings: Dynaconf) -> Config:
    """Build a Config from the defaults, overridden by any keys present in ``settings``."""
    cfg = new_config()

    for key, attr in PLAIN_KEYS.items():
        value = settings.get(key)
        if value is None:
            continue
        if key in BOOL_KEYS and isinstance(value, str):
            value = value.lower() in ["true", "yes"]
        setattr(cfg, attr, value)

    for key, attr in COLOR_KEYS.items():
        value = settings.get(key)
        if value is not None:
            setattr(cfg, attr, new_color(str(value)))

    log_level = settings.get("LOG_LEVEL")
    if log_level is not None:
        cfg.log_level = Severity[str(log_level).upper()]

    return cfg
