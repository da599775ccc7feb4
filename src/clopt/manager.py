## clopt — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from typing import Sequence, TextIO

import click

from .types import Option, ParseResult
from .registry import Registry
from .parser import parse
from .completion import build_autocomplete_ps1
from .formatting import Style, PLAIN, format_help, format_version, format_examples


class OptionsManager:
    """Owns the declared options of one program and the result of its latest parse."""

    def __init__(self, context: str, description: str | None = None, *, version: str | None = None,
                 command_name: str | None = None, style: Style = PLAIN, registry: Registry | None = None):
        self.context = context
        self.description = description
        self.version = version
        self.command_name = command_name or context
        self.style = style
        self.registry = registry if registry is not None else Registry()
        self.example_usages: list[str] = []
        self.result = ParseResult()

    # Declaration ─────────────────────────────────────────────────────────────────────────────
    def add_option(self, short_name: str, long_name: str, description: str = "", is_required: bool = False,
                   has_argument: bool = False, skip_required_check: bool = False) -> Option:
        return self.registry.register(short_name, long_name, description, is_required=is_required,
                                      has_argument=has_argument, skip_required_check=skip_required_check)

    def add_example_usage(self, example_usage: str) -> None:
        self.example_usages.append(example_usage)

    def set_version(self, version: str) -> None:
        self.version = version

    @property
    def options(self) -> list[Option]:
        return list(self.registry)

    def lookup(self, name: str) -> Option | None:
        return self.registry.lookup(name)

    # Parsing ─────────────────────────────────────────────────────────────────────────────────
    def parse(self, arguments: Sequence[str]) -> ParseResult:
        """Parse arguments without the program name; raises `ParseError` subclasses on bad input."""
        self.result = ParseResult()
        self.result = parse(self.registry, arguments)
        return self.result

    def parse_argv(self, argv: Sequence[str]) -> ParseResult:
        return self.parse(argv[1:])

    def is_present(self, name: str) -> bool:
        return self.result.is_present(name)

    def get_option(self, name: str) -> Option | None:
        return self.result.get_option(name)

    # Presentation ────────────────────────────────────────────────────────────────────────────
    def get_help(self, style: Style | None = None) -> str:
        return format_help(self.context, self.description, self.registry, style or self.style)

    def get_version(self, style: Style | None = None) -> str | None:
        return format_version(self.context, self.version, style or self.style)

    def print_examples(self, file: TextIO | None = None) -> None:
        click.echo(format_examples(self.example_usages, self.style), file=file)

    def print_help(self, print_examples: bool = True, file: TextIO | None = None) -> None:
        if print_examples:
            self.print_examples(file=file)
        click.echo(self.get_help(), file=file)

    def print_version(self, file: TextIO | None = None) -> None:
        if (text := self.get_version()) is not None:
            click.echo(text, file=file)

    def build_autocomplete_ps1(self) -> str:
        return build_autocomplete_ps1(self.command_name, self.registry)
