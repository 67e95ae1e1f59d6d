"""External program launcher."""

from __future__ import annotations

import os
import subprocess
from collections.abc import Sequence

from loguru import logger

from minish.core.streams import CommandStreams
from minish.core.types import External
from minish.errors import CommandNotFoundError


def launch(command: External, args: Sequence[str], streams: CommandStreams) -> int:
    """Run an external program to completion and return its exit status.

    stdin is always inherited. stdout and stderr go to their redirect files
    when present, else they are inherited too. argv[0] is the program's base
    name.
    """

    argv = [os.path.basename(command.path), *args]
    streams.flush()
    logger.debug("launcher.spawn path={} argv={}", command.path, argv)
    try:
        # Running user-chosen programs is the whole point of this call.
        process = subprocess.Popen(  # noqa: S603
            argv,
            executable=command.path,
            stdin=None,
            stdout=streams.stdout.handle,
            stderr=streams.stderr.handle,
        )
    except OSError as exc:
        logger.debug("launcher.failed path={} error={}", command.path, exc)
        raise CommandNotFoundError(command.name) from exc

    status = process.wait()
    logger.debug("launcher.exit path={} status={}", command.path, status)
    # Killed by signal N shows up as -N.
    return status if status >= 0 else 128 - status
