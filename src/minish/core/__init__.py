"""Command-line interpretation core."""

from .commands import parse_cycle, parse_line, split_command
from .redirection import parse_redirections
from .resolver import BUILTIN_NAMES, find_in_path, resolve_command
from .shell import LineReader, Shell
from .types import Builtin, CycleResult, External, ParsedCommand, ParsedLine, RedirectMode, RedirectSpec

__all__ = [
    "BUILTIN_NAMES",
    "Builtin",
    "CycleResult",
    "External",
    "LineReader",
    "ParsedCommand",
    "ParsedLine",
    "RedirectMode",
    "RedirectSpec",
    "Shell",
    "find_in_path",
    "parse_cycle",
    "parse_line",
    "parse_redirections",
    "resolve_command",
    "split_command",
]
