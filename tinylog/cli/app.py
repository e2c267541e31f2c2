# SPDX-License-Identifier: Apache-2.0
"""Typer CLI entrypoint for tinylog."""

import signal
import sys
from importlib import metadata
from typing import List, Optional
from typing_extensions import Annotated

from loguru import logger
import typer

from tinylog.colors import new_color, strip_ansi
from tinylog.config import Config, Severity, level_tag
from tinylog.logger import PanicError, new_logger
from tinylog.logging_utils import init_logger
from tinylog.settings import config_from_settings, load_settings
from tinylog.tags import generate_tag


def signal_handler_sigint(sig: int, frame: object) -> None:
    """Handle SIGINT signal gracefully."""
    print("SIGINT received. Exit.")
    raise typer.Exit()


def parse_severity(name: str) -> Severity:
    """Map a severity name (any case, WARN allowed) to a Severity."""
    try:
        return Severity[name.strip().upper()]
    except KeyError:
        logger.error(f"Unknown severity '{name}'")
        raise typer.Exit(1)


def _base_config(settings_file: Optional[str], no_color: bool) -> Config:
    cfg = config_from_settings(load_settings(settings_file))
    if no_color:
        cfg.disable_colors = True
    return cfg


app = typer.Typer()


@app.command(name="emit", help="Write a single log line at the given severity")
def emit_command(
    level: Annotated[
        str,
        typer.Argument(help="Severity: trace, debug, info, warning, error, fatal or panic"),
    ],
    message: Annotated[List[str], typer.Argument(help="Message text")],
    threshold: Annotated[
        Optional[str], typer.Option(help="Drop lines below this severity")
    ] = None,
    no_color: Annotated[
        bool, typer.Option("--no-color", help="Disable ANSI colors")
    ] = False,
    no_time: Annotated[
        bool, typer.Option("--no-time", help="Do not print the timestamp")
    ] = False,
    prefix: Annotated[
        Optional[str], typer.Option(help="Text printed before the level tag")
    ] = None,
    tag: Annotated[
        Optional[str], typer.Option(help="Prefix lines with a bracketed submodule tag")
    ] = None,
    tag_color: Annotated[
        str, typer.Option(help="ANSI escape code for the submodule tag")
    ] = "34",
    log_file: Annotated[
        Optional[str], typer.Option(help="Also append every band to this file")
    ] = None,
    settings_file: Annotated[
        Optional[str], typer.Option("--settings", help="Settings file (toml, yaml or json)")
    ] = None,
    debug: Annotated[bool, typer.Option(help="Debug")] = False,
) -> None:
    """Write MESSAGE through a logger built from the defaults, settings and options."""
    init_logger(debug)

    severity = parse_severity(level)
    cfg = _base_config(settings_file, no_color)

    if threshold is not None:
        cfg.log_level = parse_severity(threshold)
    if no_time:
        cfg.print_time = False
    if prefix is not None:
        cfg.log_prefix = prefix
    if tag:
        tag_prefix = generate_tag(tag, new_color(tag_color), cfg)
        cfg.log_prefix = strip_ansi(tag_prefix) if cfg.disable_colors else tag_prefix
    if log_file:
        cfg.log_to_file = True
        cfg.debug_file = cfg.debug_file or log_file
        cfg.info_file = cfg.info_file or log_file
        cfg.error_file = cfg.error_file or log_file

    logger.debug(f"Emitting {severity.name} line, threshold {cfg.log_level.name}")

    log = new_logger(cfg)
    try:
        getattr(log, severity.name.lower())(" ".join(message))
    except PanicError:
        raise typer.Exit(2)
    finally:
        log.close()


@app.command(name="tags", help="Preview the level tags for a formatting setup")
def tags_command(
    padding: Annotated[
        Optional[int], typer.Option(help="Visible width of each tag")
    ] = None,
    left_justify: Annotated[
        bool, typer.Option("--left-justify", help="Left-justify the tags")
    ] = False,
    inner_format: Annotated[
        Optional[str], typer.Option(help="printf pattern for the text inside the brackets")
    ] = None,
    outer_format: Annotated[
        Optional[str], typer.Option(help="printf pattern for the bracketed tag")
    ] = None,
    no_color: Annotated[
        bool, typer.Option("--no-color", help="Disable ANSI colors")
    ] = False,
    settings_file: Annotated[
        Optional[str], typer.Option("--settings", help="Settings file (toml, yaml or json)")
    ] = None,
) -> None:
    init_logger()

    cfg = _base_config(settings_file, no_color)
    if padding is not None:
        cfg.level_text_padding = padding
    if left_justify:
        cfg.level_text_left_justify = True
    if inner_format is not None:
        cfg.level_text_inner_format = inner_format
    if outer_format is not None:
        cfg.level_text_outer_format = outer_format

    log = new_logger(cfg)
    for severity in Severity:
        print(f"{level_tag(log.config.level_text, severity)}|")


@app.command(name="strip", help="Print a file or stdin with ANSI sequences removed")
def strip_command(
    path: Annotated[
        Optional[str], typer.Argument(help="File to read (default: stdin)")
    ] = None,
) -> None:
    if path is None:
        sys.stdout.write(strip_ansi(sys.stdin.read()))
        return

    try:
        with open(path, "r", encoding="utf-8", errors="replace") as stream:
            sys.stdout.write(strip_ansi(stream.read()))
    except OSError as exc:
        logger.error(f"Could not read {path}: {exc}")
        raise typer.Exit(1)


@app.command(name="version", help="Show version information")
def version_command() -> None:
    """Display version information for tinylog."""
    print(f"tinylog {metadata.version('tinylog')}")


def main() -> None:
    signal.signal(signal.SIGINT, signal_handler_sigint)
    app()
