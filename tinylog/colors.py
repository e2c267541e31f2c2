# SPDX-License-Identifier: Apache-2.0
"""ANSI color sequences and escape-sequence stripping."""

import re


def new_color(code: str) -> str:
    """Build an ANSI color sequence from an escape code.

    Any SGR code is accepted as-is, including 256-color (``38;5;208``) and
    24-bit (``38;2;255;99;99``) codes. Nothing is validated.
    """
    return "\033[" + code + "m"


COLOR_RED = new_color("31")
COLOR_GREEN = new_color("32")
COLOR_YELLOW = new_color("33")
COLOR_BLUE = new_color("34")
COLOR_MAGENTA = new_color("35")
COLOR_CYAN = new_color("36")
COLOR_WHITE = new_color("37")
COLOR_GRAY = new_color("30;1")
COLOR_RESET = new_color("0")

# CSI sequences introduced by ESC or the 8-bit CSI byte, plus the BEL-terminated form
ANSI_PATTERN = re.compile(
    r"[\x1b\x9b][\[\]()#;?]*"
    r"(?:(?:(?:[a-zA-Z\d]*(?:;[a-zA-Z\d]*)*)?\x07)"
    r"|(?:(?:\d{1,4}(?:;\d{0,4})*)?[\dA-PRZcf-ntqry=><~]))"
)


def strip_ansi(text: str) -> str:
    """Remove ANSI escape sequences, leaving only the visible characters."""
    return ANSI_PATTERN.sub("", text)
