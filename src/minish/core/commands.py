"""Command parsing helpers."""

from __future__ import annotations

from minish.core.redirection import parse_redirections
from minish.core.types import ParsedCommand, ParsedLine


def split_command(text: str) -> tuple[str, list[str]] | None:
    """Split residual command text into a name and its arguments."""

    words = text.split()
    if not words:
        return None
    return words[0], words[1:]


def parse_cycle(line: str) -> ParsedLine:
    """Parse one input line, keeping the redirects even when no command is left."""

    residual, stdout_redirect, stderr_redirect = parse_redirections(line)
    parts = split_command(residual)
    command = None
    if parts is not None:
        name, args = parts
        command = ParsedCommand(
            name=name,
            args=tuple(args),
            stdout_redirect=stdout_redirect,
            stderr_redirect=stderr_redirect,
        )
    return ParsedLine(command=command, stdout_redirect=stdout_redirect, stderr_redirect=stderr_redirect)


def parse_line(line: str) -> ParsedCommand | None:
    """Parse one input line; returns None when no command is left to run."""

    return parse_cycle(line).command
