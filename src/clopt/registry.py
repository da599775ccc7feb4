## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from dataclasses import dataclass, field

from .types import Option


@dataclass
class Registry:
    options: list[Option] = field(default_factory=list)

    # Registration helpers
    def register(self, short_name: str, long_name: str, description: str = "", is_required: bool = False,
                 has_argument: bool = False, skip_required_check: bool = False) -> Option:
        option = Option(short_name, long_name, description, is_required=is_required,
                        has_argument=has_argument, skip_required_check=skip_required_check)
        self.options.append(option)
        return option

    def lookup(self, name: str) -> Option | None:
        # Duplicate names are the caller's problem; the first registration wins.
        return next((opt for opt in self.options if opt.matches(name)), None)

    def required(self) -> list[Option]:
        return [opt for opt in self.options if opt.is_required]

    def reset_arguments(self) -> None:
        for opt in self.options:
            opt.argument = None

    def __contains__(self, name: str) -> bool:
        return self.lookup(name) is not None

    def __iter__(self):
        return iter(self.options)

    def __len__(self):
        return len(self.options)
