## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import re
from dataclasses import dataclass, field
from typing import Iterable

import click

from .types import Option
from .errors import ParseError


ANSI_COLORS = {
    'context': 'magenta',
    'description': 'bright_black',
    'short': 'blue',
    'long': 'cyan',
    'required': 'red',
    'program': 'green',
    'version': 'yellow',
    'heading': 'yellow',
    'example': 'blue',
    'error': 'red',
}


@dataclass(frozen=True, eq=False)
class Style:
    """Presentation strategy; maps a text role to its terminal rendering."""
    colors: dict[str, str] = field(default_factory=dict)

    def __call__(self, text: str, role: str) -> str:
        if (color := self.colors.get(role)) is None:
            return text
        return click.style(text, fg=color)

    @property
    def is_plain(self) -> bool:
        return not self.colors


PLAIN = Style()
ANSI = Style(ANSI_COLORS)


def write_without_ansi(write_fn):
    """Wrapper function that strips ANSI codes before calling the original writer."""
    ansi_re = re.compile(r'\033\[[0-9;]*m')
    return lambda text: write_fn(ansi_re.sub('', text))


def format_option(opt: Option, style: Style = PLAIN) -> str:
    flags = []
    if opt.short_name: flags.append(style(f'-{opt.short_name}', 'short'))
    if opt.long_name: flags.append(style(f'--{opt.long_name}', 'long'))
    line = ' ' + ', '.join(flags)
    if opt.has_argument: line += ' <arg>'
    if opt.is_required: line += style(' (required)', 'required')
    return line + '\n\t' + style(opt.description, 'description')

def format_help(context: str, description: str | None, options: Iterable[Option], style: Style = PLAIN) -> str:
    lines = [style(f'{context} Help:', 'context')]
    if description is not None:
        lines.append(style(description, 'description'))
    lines.extend(format_option(opt, style) for opt in options)
    return '\n'.join(lines) + '\n'

def format_version(context: str, version: str | None, style: Style = PLAIN) -> str | None:
    if version is None: return None
    return f"{style(context, 'program')} {style(version, 'version')}"

def format_examples(examples: Iterable[str], style: Style = PLAIN) -> str:
    lines = [style('Example Usages:', 'heading'), *(style(ex, 'example') for ex in examples)]
    return '\n'.join(lines)

def format_parse_error(exc: ParseError, style: Style = PLAIN) -> str:
    return '\n'.join(style(line, 'error') for line in str(exc).splitlines())
