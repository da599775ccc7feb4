## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# clopt — Declare command-line options once, then parse and validate argument vectors.
#

import sys
from typing import Sequence

import click

from .types import ParseResult
from .errors import ParseError
from .manager import OptionsManager
from .formatting import format_parse_error


def report_parse_error(manager: OptionsManager, exc: ParseError) -> None:
    click.echo(format_parse_error(exc, manager.style), err=True)
    manager.print_help()


def run(manager: OptionsManager, argv: Sequence[str] | None = None) -> ParseResult:
    """Parse `argv` (defaults to `sys.argv[1:]`), exiting with status 1 after printing help on bad input."""
    arguments = list(sys.argv[1:] if argv is None else argv)
    try:
        return manager.parse(arguments)
    except ParseError as exc:
        report_parse_error(manager, exc)
        sys.exit(exc.exit_code)


def handle_builtin_flags(manager: OptionsManager, help_flag: str | None = 'h', version_flag: str | None = 'v') -> None:
    if help_flag is not None and manager.is_present(help_flag):
        manager.print_help()
        sys.exit(0)
    if version_flag is not None and manager.is_present(version_flag):
        manager.print_version()
        sys.exit(0)
