from tinylog.colors import COLOR_CYAN, COLOR_RESET, new_color, strip_ansi
from tinylog.config import new_config
from tinylog.tags import generate_tag


def test_default_info_tag_is_padded_to_visible_width():
    cfg = new_config()

    tag = generate_tag("INFO", COLOR_CYAN, cfg)

    assert tag == "[" + COLOR_CYAN + "   INFO" + COLOR_RESET + "] "
    assert strip_ansi(tag) == "[   INFO] "
    assert len(strip_ansi(tag)) == cfg.level_text_padding


def test_right_justified_padding_adds_leading_spaces_only():
    cfg = new_config()
    cfg.level_text_padding = 14

    tag = generate_tag("INFO", COLOR_CYAN, cfg)

    assert strip_ansi(tag) == "    [   INFO] "
    assert tag.startswith("    [" + COLOR_CYAN)
    assert len(tag) - len(strip_ansi(tag)) == len(COLOR_CYAN) + len(COLOR_RESET)


def test_left_justify_pads_on_the_right():
    cfg = new_config()
    cfg.level_text_padding = 14
    cfg.level_text_left_justify = True

    tag = generate_tag("INFO", COLOR_CYAN, cfg)

    assert strip_ansi(tag) == "[   INFO]     "
    assert tag.endswith("]     ")


def test_padding_smaller_than_text_never_truncates():
    cfg = new_config()
    cfg.level_text_padding = 3

    assert strip_ansi(generate_tag("WARNING", COLOR_CYAN, cfg)) == "[WARNING] "


def test_long_color_sequences_keep_visible_alignment():
    cfg = new_config()
    short = generate_tag("INFO", COLOR_CYAN, cfg)
    long = generate_tag("INFO", new_color("38;2;128;255;234"), cfg)

    assert strip_ansi(short) == strip_ansi(long)
    assert len(long) > len(short)


def test_custom_formats_are_applied_inside_and_outside_brackets():
    cfg = new_config()
    cfg.level_text_inner_format = "%-5s"
    cfg.level_text_outer_format = "%s: "
    cfg.level_text_padding = 0

    assert strip_ansi(generate_tag("DB", "", cfg)) == "[DB   ]: "


def test_tag_without_colors_contains_no_escape_bytes():
    cfg = new_config()
    cfg.reset_color = ""

    tag = generate_tag("ERROR", "", cfg)

    assert tag == strip_ansi(tag) == "[  ERROR] "
