"""Redirection operator scanning."""

from __future__ import annotations

from minish.core.types import RedirectMode, RedirectSpec, Token, TokenKind

# Longest operators first so `2>>` is never read as `2>` with target `>...`.
_OPERATORS: tuple[tuple[str, TokenKind], ...] = (
    ("1>>", TokenKind.REDIRECT_OUT_APPEND),
    ("2>>", TokenKind.REDIRECT_ERR_APPEND),
    (">>", TokenKind.REDIRECT_OUT_APPEND),
    ("1>", TokenKind.REDIRECT_OUT),
    ("2>", TokenKind.REDIRECT_ERR),
    (">", TokenKind.REDIRECT_OUT),
)

_STDOUT_KINDS = {TokenKind.REDIRECT_OUT, TokenKind.REDIRECT_OUT_APPEND}
_APPEND_KINDS = {TokenKind.REDIRECT_OUT_APPEND, TokenKind.REDIRECT_ERR_APPEND}


def scan(line: str) -> list[Token]:
    """Split a line into words and redirect tokens.

    An operator is only recognized at the start of a word. Its target is the
    rest of that word, or the following word when the rest is empty. An
    operator with nothing after it stays a plain word.
    """

    words = line.split()
    tokens: list[Token] = []
    idx = 0
    while idx < len(words):
        word = words[idx]
        kind, rest = _match_operator(word)
        if kind is None:
            tokens.append(Token(TokenKind.WORD, word))
            idx += 1
            continue

        if rest:
            tokens.append(Token(kind, rest))
            idx += 1
            continue

        if idx + 1 < len(words):
            tokens.append(Token(kind, words[idx + 1]))
            idx += 2
            continue

        tokens.append(Token(TokenKind.WORD, word))
        idx += 1

    return tokens


def parse_redirections(line: str) -> tuple[str, RedirectSpec | None, RedirectSpec | None]:
    """Strip redirect operators from a line.

    Returns the residual command text and at most one redirect per stream.
    When a stream is redirected more than once the last operator wins.
    """

    words: list[str] = []
    stdout_redirect: RedirectSpec | None = None
    stderr_redirect: RedirectSpec | None = None

    for token in scan(line):
        if token.kind is TokenKind.WORD:
            words.append(token.value)
            continue

        mode = RedirectMode.APPEND if token.kind in _APPEND_KINDS else RedirectMode.WRITE
        spec = RedirectSpec(path=token.value, mode=mode)
        if token.kind in _STDOUT_KINDS:
            stdout_redirect = spec
        else:
            stderr_redirect = spec

    return " ".join(words), stdout_redirect, stderr_redirect


def _match_operator(word: str) -> tuple[TokenKind | None, str]:
    for operator, kind in _OPERATORS:
        if word.startswith(operator):
            return kind, word[len(operator) :]
    return None, word
