## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# clopt — Declare command-line options once, then parse and validate argument vectors.
#

from typing import Literal, Sequence

from .types import ParseResult
from .errors import ParseError, UnknownOption, MissingArgument, MissingRequiredOptions
from .registry import Registry


TokenKind = Literal['long', 'short', 'other']


def classify_token(token: str) -> tuple[TokenKind, str]:
    """Split a raw token into its kind and the name to look up."""
    if token.startswith('--'):
        return 'long', token[2:]
    if len(token) > 1 and token[0] == '-':
        return 'short', token[1:]
    return 'other', token


def scan(registry: Registry, arguments: Sequence[str]) -> ParseResult:
    """Match flag tokens against the registry, consuming values as needed.

    Every token is scanned, so the program name must already be stripped. Tokens that
    are neither long nor short flags are skipped: positional arguments are not collected.
    """
    registry.reset_arguments()
    result = ParseResult()

    index = 0
    while index < len(arguments):
        token = arguments[index]
        kind, name = classify_token(token)
        index += 1
        if kind == 'other':
            continue

        option = registry.lookup(name)
        if option is None:
            raise UnknownOption(name, token=token)
        if option.has_argument:
            if index >= len(arguments):
                raise MissingArgument(name, token=token)
            # Taken verbatim, even when it looks like another flag.
            option.argument = arguments[index]
            index += 1
        result.add(option)
    return result


def check_required(registry: Registry, result: ParseResult) -> None:
    if result.bypasses_required():
        return
    if missing := [opt for opt in registry.required() if opt not in result]:
        raise MissingRequiredOptions(missing)


def parse(registry: Registry, arguments: Sequence[str]) -> ParseResult:
    try:
        result = scan(registry, arguments)
        check_required(registry, result)
    except ParseError:
        # A rejected vector leaves no consumed values behind.
        registry.reset_arguments()
        raise
    return result
