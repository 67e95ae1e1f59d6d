"""Builtin command handlers."""

from __future__ import annotations

import os
import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from pathlib import Path

from minish.core.resolver import BUILTIN_NAMES, find_in_path
from minish.core.streams import CommandStreams
from minish.errors import DirectoryError, ShellExit

QUOTE_CHARS = ('"', "'")
EXIT_CODE_RE = re.compile(r"^\s*([+-]?[0-9]+)")


@dataclass(frozen=True)
class BuiltinContext:
    """What a builtin may touch besides its arguments."""

    streams: CommandStreams
    directories: list[str]
    home: Path


BuiltinHandler = Callable[[Sequence[str], BuiltinContext], int]


def builtin_exit(args: Sequence[str], ctx: BuiltinContext) -> int:
    raise ShellExit(_exit_code(args))


def builtin_pwd(args: Sequence[str], ctx: BuiltinContext) -> int:
    ctx.streams.stdout.write_line(os.getcwd())
    return 0


def builtin_cd(args: Sequence[str], ctx: BuiltinContext) -> int:
    """Change the working directory; `~` and no argument mean home."""
    target = args[0] if args else "~"
    if target == "~":
        target = str(ctx.home)
    elif target.startswith("~/"):
        target = str(ctx.home / target[2:])

    if not os.path.isdir(target):
        raise DirectoryError(target)
    try:
        os.chdir(target)
    except OSError as exc:
        raise DirectoryError(target, exc.strerror or str(exc)) from exc
    return 0


def builtin_echo(args: Sequence[str], ctx: BuiltinContext) -> int:
    ctx.streams.stdout.write_line(strip_outer_quotes(" ".join(args)))
    return 0


def builtin_type(args: Sequence[str], ctx: BuiltinContext) -> int:
    """Report whether a name is a builtin or where it lives on the search path."""
    if not args:
        return 0

    name = args[0]
    if name in BUILTIN_NAMES:
        ctx.streams.stdout.write_line(f"{name} is a shell builtin")
        return 0

    path = find_in_path(name, ctx.directories, executable=False)
    if path is None:
        ctx.streams.stderr.write_line(f"{name}: not found")
        return 1
    ctx.streams.stdout.write_line(f"{name} is {path}")
    return 0


def strip_outer_quotes(text: str) -> str:
    """Drop one matching pair of quotes wrapping the whole text.

    Only the outermost pair is removed; quotes inside are left alone.
    """

    if len(text) >= 2 and text[0] in QUOTE_CHARS and text[-1] == text[0]:
        return text[1:-1]
    return text


def _exit_code(args: Sequence[str]) -> int:
    """Read leading digits of the first argument; anything else means 0."""
    if not args:
        return 0
    match = EXIT_CODE_RE.match(args[0])
    if match is None:
        return 0
    return int(match.group(1))


BUILTINS: dict[str, BuiltinHandler] = {
    "exit": builtin_exit,
    "cd": builtin_cd,
    "pwd": builtin_pwd,
    "echo": builtin_echo,
    "type": builtin_type,
}
