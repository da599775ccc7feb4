## clopt — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from dataclasses import dataclass, field

from .errors import OptionDefinitionError


@dataclass(eq=False)
class Option:
    """A declared flag. Compared by identity, the same instance is returned on every lookup."""
    short_name: str
    long_name: str
    description: str = ""
    is_required: bool = False
    has_argument: bool = False
    skip_required_check: bool = False
    argument: str | None = None

    def __post_init__(self):
        if not self.short_name and not self.long_name:
            raise OptionDefinitionError("Option needs a short or a long name.")
        for name in (self.short_name, self.long_name):
            if name.startswith('-'):
                raise OptionDefinitionError(f"Option name `{name}` must be given without leading dashes.", name=name)

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(n for n in (self.short_name, self.long_name) if n)

    def matches(self, name: str) -> bool:
        # Empty names are placeholders and never match.
        return bool(name) and name in (self.short_name, self.long_name)

    @property
    def flags(self) -> tuple[str, ...]:
        short = (f'-{self.short_name}',) if self.short_name else ()
        long = (f'--{self.long_name}',) if self.long_name else ()
        return short + long

    def __repr__(self):
        return f"<Option {', '.join(self.flags)}>"


@dataclass
class ParseResult:
    """Options seen during a single parse, in first-seen order."""
    present: list[Option] = field(default_factory=list)

    def add(self, option: Option) -> None:
        if not any(p is option for p in self.present):
            self.present.append(option)

    def get_option(self, name: str) -> Option | None:
        return next((opt for opt in self.present if opt.matches(name)), None)

    def is_present(self, name: str) -> bool:
        return self.get_option(name) is not None

    def bypasses_required(self) -> bool:
        return any(opt.skip_required_check for opt in self.present)

    def __contains__(self, option: Option) -> bool:
        return any(p is option for p in self.present)

    def __iter__(self):
        return iter(self.present)

    def __len__(self):
        return len(self.present)
