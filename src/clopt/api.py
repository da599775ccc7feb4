## clopt — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from .types import Option, ParseResult
from .errors import *
from .registry import Registry
from .manager import OptionsManager
from .formatting import Style, PLAIN, ANSI
from .parser import parse, classify_token
from .runner import run, handle_builtin_flags
