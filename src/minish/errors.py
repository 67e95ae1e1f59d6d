"""Application-level exception types for minish."""

from __future__ import annotations


class MinishError(Exception):
    """Base exception for minish."""


class CommandNotFoundError(MinishError):
    """Raised when a command name resolves to neither a builtin nor an executable."""

    def __init__(self, name: str) -> None:
        super().__init__(f"{name}: command not found")
        self.name = name


class DirectoryError(MinishError):
    """Raised when `cd` is given a target that is missing or not a directory."""

    def __init__(self, target: str, reason: str = "No such file or directory") -> None:
        super().__init__(f"cd: {target}: {reason}")
        self.target = target
        self.reason = reason


class RedirectWriteError(MinishError):
    """Raised when a redirect target cannot be created or truncated."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"minish: {path}: {reason}")
        self.path = path
        self.reason = reason


class ShellExit(MinishError):
    """Raised by the `exit` builtin to stop the read loop."""

    def __init__(self, code: int = 0) -> None:
        super().__init__(f"exit {code}")
        self.code = code
