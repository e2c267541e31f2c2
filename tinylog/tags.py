# SPDX-License-Identifier: Apache-2.0
"""Level tag generation."""

from typing import TYPE_CHECKING

from tinylog.colors import strip_ansi

if TYPE_CHECKING:
    from tinylog.config import Config


def generate_tag(tag_text: str, color_sequence: str, cfg: "Config") -> str:
    """Build a bracketed, colored and padded tag for ``tag_text``.

    The inner format is applied to the bare text, the result is wrapped in
    brackets together with the color and reset sequences, and the outer
    format is applied to the bracketed string. Padding is computed on the
    visible width, so tags line up no matter how long their escape
    sequences are.
    """
    formatted_tag = "[%s%s%s]" % (
        color_sequence,
        cfg.level_text_inner_format % tag_text,
        cfg.reset_color,
    )
    formatted_tag = cfg.level_text_outer_format % formatted_tag

    display_length = len(strip_ansi(formatted_tag))
    pad_length = cfg.level_text_padding + (len(formatted_tag) - display_length)

    # A negative width left-justifies
    if cfg.level_text_left_justify:
        pad_length = -pad_length

    return "%*s" % (pad_length, formatted_tag)
