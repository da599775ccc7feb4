## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# clopt — Declare command-line options once, then parse and validate argument vectors.
#

import sys
from dataclasses import dataclass

import click

from .formatting import Style, PLAIN, ANSI, write_without_ansi
from .manager import OptionsManager
from . import runner


VERSION = '0.1.0'


@dataclass(frozen=True)
class RunnerConfig:
    plain: bool

    @property
    def style(self) -> Style:
        return PLAIN if self.plain else ANSI


def build_example_manager(style: Style = PLAIN) -> OptionsManager:
    manager = OptionsManager("clopt example", "This is an example of the clopt library, a lightweight "
                             "command-line option parsing tool.", version=VERSION, command_name='clopt', style=style)
    # These run even if the required options are not present.
    manager.add_option("h", "help", "Print this help message", skip_required_check=True)
    manager.add_option("v", "version", "Print the version", skip_required_check=True)

    manager.add_option("V", "verbose", "Prints to the console verbosely")
    manager.add_option("f", "file", "The file to read", is_required=True, has_argument=True)
    manager.add_option("", "format", "The format of the file", has_argument=True)

    manager.add_example_usage(r"-f C:\Users\user\Desktop\file.txt")
    manager.add_example_usage(r'-f "C:\Users\user with space\Desktop\file.txt"')
    return manager


@click.group()
@click.option('--plain', '-p', is_flag=True, help='Strip ANSI color codes and redirect stderr to stdout.')
@click.pass_context
def cli(ctx: click.Context, plain: bool) -> None:
    ctx.ensure_object(dict)
    ctx.obj['config'] = RunnerConfig(plain=plain)

    if plain:
        writer = write_without_ansi(sys.stdout.write)
        sys.stdout.write, sys.stderr.write = writer, writer


@cli.command('example', add_help_option=False, context_settings={'ignore_unknown_options': True, 'allow_extra_args': True})
@click.argument('tokens', nargs=-1)
@click.pass_context
def example(ctx: click.Context, tokens: tuple[str, ...]) -> None:
    manager = build_example_manager(ctx.obj['config'].style)
    # click drops `--` from `tokens`; the unprocessed tail keeps it for the option parser.
    raw = ctx.obj.get('raw_tokens')
    runner.run(manager, list(tokens if raw is None else raw))
    runner.handle_builtin_flags(manager)

    if manager.is_present("V"):
        click.echo("This is verbose mode")
    if (opt := manager.get_option("file")) is not None:
        click.echo(f"File: {opt.argument}")
    if (opt := manager.get_option("format")) is not None:
        click.echo(f"Format: {opt.argument}")
    ctx.exit(0)


@cli.command('completion')
@click.pass_context
def completion(ctx: click.Context) -> None:
    manager = build_example_manager(ctx.obj['config'].style)
    click.echo(manager.build_autocomplete_ps1(), nl=False)


def _raw_example_tokens(args: list[str]) -> list[str] | None:
    # Group options are plain flags, so the first other token names the subcommand.
    index = next((i for i, t in enumerate(args) if not t.startswith('-')), None)
    if index is None or args[index] != 'example':
        return None
    return args[index+1:]


def main(argv: list[str] | None = None) -> None:
    a = list(sys.argv[1:] if argv is None else argv)
    cli.main(args=a, prog_name='clopt', obj={'raw_tokens': _raw_example_tokens(a)})


if __name__ == "__main__":
    main()
