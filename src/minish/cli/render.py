"""Line readers and terminal rendering for minish."""

from __future__ import annotations

import sys
from pathlib import Path

from prompt_toolkit import PromptSession
from prompt_toolkit.history import FileHistory
from prompt_toolkit.patch_stdout import patch_stdout
from rich.console import Console

from minish.config import Settings


class PromptReader:
    """Interactive line reader backed by prompt_toolkit."""

    def __init__(self, history_file: Path | None = None) -> None:
        history = FileHistory(str(history_file)) if history_file else None
        self._prompt_session: PromptSession[str] = PromptSession(history=history)

    def read_line(self, prompt: str) -> str:
        """Prompt user for input."""
        with patch_stdout(raw=True):
            return self._prompt_session.prompt(prompt)


class StreamReader:
    """Line reader for piped input; writes the prompt to stdout itself."""

    def read_line(self, prompt: str) -> str:
        sys.stdout.write(prompt)
        sys.stdout.flush()
        buffer = getattr(sys.stdin, "buffer", None)
        if buffer is None:
            line = sys.stdin.readline()
        else:
            line = buffer.readline().decode(sys.stdin.encoding or "utf-8", "surrogateescape")
        if not line:
            raise EOFError
        return line.rstrip("\r\n")


def create_reader(settings: Settings) -> PromptReader | StreamReader:
    """Pick prompt_toolkit for terminals and a plain reader otherwise."""
    if sys.stdin.isatty() and sys.stdout.isatty():
        return PromptReader(settings.history_file)
    return StreamReader()


def render_version(version: str) -> None:
    Console().print(f"[bold]minish[/bold] {version}")
