## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘


class CloptError(Exception):
    def __init__(self, message: str = "", *, name: str | None = None):
        """Base class for all errors raised by clopt."""
        super().__init__(message)
        self.name: str | None = name

class OptionDefinitionError(CloptError, ValueError):
    """Registration-time problems, i.e. mistakes by the program declaring options."""
    pass


class ParseError(CloptError):
    """User-input errors found while parsing the argument vector."""
    exit_code = 1

class UnknownOption(ParseError, LookupError):
    def __init__(self, name: str, *, token: str | None = None):
        super().__init__(f"Unknown option: {token or name}", name=name)
        self.token = token or name

class MissingArgument(ParseError, ValueError):
    def __init__(self, name: str, *, token: str | None = None):
        super().__init__(f"Missing argument for option: {name}", name=name)
        self.token = token or name

class MissingRequiredOptions(ParseError):
    def __init__(self, options: list):
        self.options = list(options)
        lines = [f"Missing required option: {' or '.join(opt.flags)}" for opt in self.options]
        super().__init__('\n'.join(lines))

    @property
    def names(self) -> list[str]:
        return [opt.short_name or opt.long_name for opt in self.options]
