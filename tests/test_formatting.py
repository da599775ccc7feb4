## clopt — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import io

import pytest

from clopt.types import Option
from clopt.errors import UnknownOption, MissingRequiredOptions
from clopt.formatting import (PLAIN, ANSI, Style, format_help, format_option, format_version,
                              format_examples, format_parse_error, write_without_ansi)


OPTIONS = [
    Option("h", "help", "Print this help message", skip_required_check=True),
    Option("f", "file", "The file to read", is_required=True, has_argument=True),
    Option("", "format", "The format of the file", has_argument=True),
]


def _strip(text: str) -> str:
    buf = io.StringIO()
    write_without_ansi(buf.write)(text)
    return buf.getvalue()


def test_help_layout_follows_registration_order():
    text = format_help("tool", "Does things.", OPTIONS)
    assert text == (
        "tool Help:\n"
        "Does things.\n"
        " -h, --help\n\tPrint this help message\n"
        " -f, --file <arg> (required)\n\tThe file to read\n"
        " --format <arg>\n\tThe format of the file\n"
    )


def test_help_without_description():
    text = format_help("tool", None, OPTIONS[:1])
    assert text.splitlines()[:2] == ["tool Help:", " -h, --help"]


def test_option_with_short_name_only():
    assert format_option(Option("q", "", "Quiet")) == " -q\n\tQuiet"


def test_ansi_style_colors_but_keeps_text():
    colored = format_help("tool", "Does things.", OPTIONS, ANSI)
    assert "\033[" in colored
    assert _strip(colored) == format_help("tool", "Does things.", OPTIONS, PLAIN)


def test_plain_style_never_emits_ansi():
    assert PLAIN.is_plain and not ANSI.is_plain
    assert "\033[" not in format_help("tool", "x", OPTIONS, PLAIN)


def test_custom_style_only_colors_known_roles():
    style = Style({'required': 'magenta'})
    assert style("plain", 'context') == "plain"
    assert style("(required)", 'required') != "(required)"


def test_format_version():
    assert format_version("tool", "1.2.3") == "tool 1.2.3"
    assert format_version("tool", None) is None
    assert _strip(format_version("tool", "1.2.3", ANSI)) == "tool 1.2.3"


def test_format_examples():
    assert format_examples(["-f a.txt", "-f b.txt"]) == "Example Usages:\n-f a.txt\n-f b.txt"
    assert format_examples([]) == "Example Usages:"


@pytest.mark.parametrize("exc, expected", [
    (UnknownOption("bogus", token="--bogus"), "Unknown option: --bogus"),
    (MissingRequiredOptions(OPTIONS[1:]), "Missing required option: -f or --file\nMissing required option: --format"),
])
def test_format_parse_error(exc, expected):
    assert format_parse_error(exc) == expected
    assert _strip(format_parse_error(exc, ANSI)) == expected


def test_styles_are_hashable():
    renderers = {PLAIN: "plain", ANSI: "ansi"}
    assert renderers[ANSI] == "ansi"
    assert hash(Style({'error': 'red'})) != hash(ANSI)
