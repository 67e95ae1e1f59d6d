"""Per-cycle output streams and redirect target handling."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass
from typing import TextIO

from loguru import logger

from minish.core.types import RedirectSpec
from minish.errors import RedirectWriteError


class OutputSink:
    """One output stream of a command: a redirect file or the inherited stream."""

    def __init__(self, stream_name: str, handle: TextIO | None = None) -> None:
        self._stream_name = stream_name
        self._handle = handle

    @property
    def redirected(self) -> bool:
        return self._handle is not None

    @property
    def handle(self) -> TextIO | None:
        """Open redirect file to hand to a child process, if any."""
        return self._handle

    def write_line(self, text: str) -> None:
        stream = self._handle or self._inherited()
        data = text + "\n"
        try:
            stream.write(data)
        except UnicodeEncodeError:
            # Surrogate escapes stand for raw input bytes.
            buffer = getattr(stream, "buffer", None)
            if buffer is None:
                raise
            stream.flush()
            buffer.write(data.encode(stream.encoding or "utf-8", "surrogateescape"))
        stream.flush()

    def flush(self) -> None:
        (self._handle or self._inherited()).flush()

    def _inherited(self) -> TextIO:
        # Looked up on every write so replaced sys streams are honored.
        return getattr(sys, self._stream_name)


@dataclass(frozen=True)
class CommandStreams:
    """Output destinations for one command."""

    stdout: OutputSink
    stderr: OutputSink

    def flush(self) -> None:
        self.stdout.flush()
        self.stderr.flush()


@contextmanager
def open_streams(
    stdout_redirect: RedirectSpec | None = None,
    stderr_redirect: RedirectSpec | None = None,
) -> Iterator[CommandStreams]:
    """Create or truncate redirect targets and yield the cycle's streams.

    Targets are opened once, before the command runs, and closed when the
    block exits. Raises RedirectWriteError if a target cannot be opened.
    """

    with ExitStack() as stack:
        stdout = OutputSink("stdout", _open_target(stack, stdout_redirect))
        stderr = OutputSink("stderr", _open_target(stack, stderr_redirect))
        yield CommandStreams(stdout=stdout, stderr=stderr)


def _open_target(stack: ExitStack, spec: RedirectSpec | None) -> TextIO | None:
    if spec is None:
        return None
    try:
        handle = open(spec.path, spec.mode.value, encoding="utf-8", errors="surrogateescape")  # noqa: SIM115
    except OSError as exc:
        raise RedirectWriteError(spec.path, exc.strerror or str(exc)) from exc
    logger.debug("streams.open path={} mode={}", spec.path, spec.mode.name)
    return stack.enter_context(handle)
