"""Read-parse-dispatch loop."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from loguru import logger

from minish.core.builtins import BUILTINS, BuiltinContext
from minish.core.commands import parse_cycle
from minish.core.launcher import launch
from minish.core.resolver import resolve_command, search_path
from minish.core.streams import CommandStreams, OutputSink, open_streams
from minish.core.types import Builtin, CycleResult, ParsedCommand
from minish.errors import CommandNotFoundError, DirectoryError, MinishError, RedirectWriteError, ShellExit

if TYPE_CHECKING:
    from minish.config import Settings

DEFAULT_PROMPT = "$ "
STATUS_NOT_FOUND = 127


class LineReader(Protocol):
    """Source of input lines; raises EOFError when input is exhausted."""

    def read_line(self, prompt: str) -> str: ...


class Shell:
    """Runs prompt cycles until `exit` or end of input.

    Each cycle parses the line, opens redirect targets, then runs a builtin or
    an external program. Nothing but the working directory carries over from
    one cycle to the next.
    """

    def __init__(
        self,
        *,
        prompt: str = DEFAULT_PROMPT,
        search_path: str | None = None,
        home: Path | None = None,
    ) -> None:
        self.prompt = prompt
        self._search_path = search_path
        self._home = home
        self.last_status = 0

    @classmethod
    def from_settings(cls, settings: Settings) -> Shell:
        return cls(
            prompt=settings.prompt,
            search_path=settings.search_path,
            home=settings.resolve_home(),
        )

    @property
    def home(self) -> Path:
        return self._home or Path.home()

    def directories(self) -> list[str]:
        return search_path(self._search_path)

    def run(self, reader: LineReader) -> int:
        """Loop until `exit`; returns the exit code for the process."""
        while True:
            try:
                line = reader.read_line(self.prompt)
            except EOFError:
                logger.debug("shell.eof status=0")
                return 0

            try:
                self.run_line(line)
            except ShellExit as exc:
                logger.debug("shell.exit code={}", exc.code)
                return exc.code

    def run_line(self, line: str) -> CycleResult:
        """Run one cycle. Raises ShellExit when the line is an `exit`."""
        if not line.strip():
            return CycleResult(command=None, status=self.last_status)

        parsed = parse_cycle(line)
        command = parsed.command
        name = command.name if command else None
        logger.debug("shell.cycle line={!r}", line)

        try:
            with open_streams(parsed.stdout_redirect, parsed.stderr_redirect) as streams:
                if command is None:
                    return self._finish(None, 0)
                status = self._dispatch(command, streams)
        except RedirectWriteError as exc:
            self._report(exc, OutputSink("stderr"))
            return self._finish(name, 1)

        return self._finish(name, status)

    def _dispatch(self, command: ParsedCommand, streams: CommandStreams) -> int:
        directories = self.directories()
        try:
            resolved = resolve_command(command.name, directories)
            if resolved is None:
                raise CommandNotFoundError(command.name)
            if isinstance(resolved, Builtin):
                handler = BUILTINS[resolved.name]
                ctx = BuiltinContext(streams=streams, directories=directories, home=self.home)
                return handler(command.args, ctx)
            return launch(resolved, command.args, streams)
        except CommandNotFoundError as exc:
            self._report(exc, streams.stderr)
            return STATUS_NOT_FOUND
        except DirectoryError as exc:
            self._report(exc, streams.stderr)
            return 1

    def _finish(self, name: str | None, status: int) -> CycleResult:
        self.last_status = status
        return CycleResult(command=name, status=status)

    @staticmethod
    def _report(exc: MinishError, sink: OutputSink) -> None:
        logger.debug("shell.error type={} message={}", type(exc).__name__, exc)
        sink.write_line(str(exc))
