"""Shared core dataclasses."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class RedirectMode(Enum):
    """How a redirect target is opened."""

    WRITE = "w"
    APPEND = "a"


class TokenKind(Enum):
    """Token tags produced by the line scanner."""

    WORD = "word"
    REDIRECT_OUT = "redirect_out"
    REDIRECT_OUT_APPEND = "redirect_out_append"
    REDIRECT_ERR = "redirect_err"
    REDIRECT_ERR_APPEND = "redirect_err_append"


@dataclass(frozen=True)
class Token:
    """One scanned token; `value` is the word text or the redirect target."""

    kind: TokenKind
    value: str


@dataclass(frozen=True)
class RedirectSpec:
    """Where one output stream goes instead of the inherited destination."""

    path: str
    mode: RedirectMode = RedirectMode.WRITE


@dataclass(frozen=True)
class ParsedCommand:
    """Command line parsed for a single cycle."""

    name: str
    args: tuple[str, ...] = ()
    stdout_redirect: RedirectSpec | None = None
    stderr_redirect: RedirectSpec | None = None


@dataclass(frozen=True)
class ParsedLine:
    """Redirects found on a line plus the command left over, if any."""

    command: ParsedCommand | None
    stdout_redirect: RedirectSpec | None = None
    stderr_redirect: RedirectSpec | None = None


@dataclass(frozen=True)
class Builtin:
    """Command implemented by the shell itself."""

    name: str


@dataclass(frozen=True)
class External:
    """Command resolved to an executable file."""

    name: str
    path: str


ResolvedCommand = Union[Builtin, External]


@dataclass(frozen=True)
class CycleResult:
    """Outcome of one prompt cycle."""

    command: str | None
    status: int
