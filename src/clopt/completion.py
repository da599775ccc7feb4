## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from typing import Iterable

from .types import Option


PS1_TEMPLATE = """\
Register-ArgumentCompleter -Native -CommandName '{command}' -ScriptBlock {{
    param($commandName, $wordToComplete, $cursorPosition)
    $options = @({options})
    $options | Where-Object {{ $_ -like "$wordToComplete*" }} | ForEach-Object {{
        [System.Management.Automation.CompletionResult]::new($_, $_, 'ParameterName', $_)
    }}
}}
"""


def _quote_ps1(text: str) -> str:
    # Single-quoted PowerShell strings escape quotes by doubling them.
    return "'" + text.replace("'", "''") + "'"


def build_autocomplete_ps1(command_name: str, options: Iterable[Option]) -> str:
    """PowerShell snippet registering a native argument completer for every declared flag.

    Short names are listed as `'-x'`, long names as `'--name'`, in registration order;
    the script block keeps the ones starting with the word being completed.
    """
    flags = [flag for opt in options for flag in opt.flags]
    return PS1_TEMPLATE.format(command=command_name.replace("'", "''"),
                               options=', '.join(_quote_ps1(f) for f in flags))
