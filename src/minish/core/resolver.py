"""Command name resolution."""

from __future__ import annotations

import os
from collections.abc import Iterable

from loguru import logger

from minish.core.types import Builtin, External, ResolvedCommand

BUILTIN_NAMES = frozenset({"echo", "cd", "exit", "type", "pwd"})


def search_path(raw: str | None = None) -> list[str]:
    """Return the ordered directory list from `raw` or the PATH variable."""

    value = os.environ.get("PATH", "") if raw is None else raw
    if not value:
        return []
    return value.split(os.pathsep)


def is_builtin(name: str) -> bool:
    return name in BUILTIN_NAMES


def find_in_path(name: str, directories: Iterable[str], *, executable: bool = True) -> str | None:
    """Find the first regular file called `name` in `directories`.

    Names containing a path separator are checked as-is instead. An empty
    directory entry stands for the working directory.
    """

    if not name:
        return None
    if os.sep in name:
        return name if _is_match(name, executable=executable) else None

    for directory in directories:
        candidate = os.path.join(directory, name)
        if _is_match(candidate, executable=executable):
            return candidate
    return None


def resolve_command(name: str, directories: Iterable[str]) -> ResolvedCommand | None:
    """Classify a command name; None means it was not found."""

    if is_builtin(name):
        return Builtin(name)

    path = find_in_path(name, directories, executable=True)
    if path is None:
        logger.debug("resolver.miss name={}", name)
        return None
    logger.debug("resolver.hit name={} path={}", name, path)
    return External(name=name, path=path)


def _is_match(path: str, *, executable: bool) -> bool:
    if not os.path.isfile(path):
        return False
    return not executable or os.access(path, os.X_OK)
