from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from pathlib import Path

import pytest
from loguru import logger

from minish import logging_utils


@dataclass
class ScriptedReader:
    """Line source that replays fixed lines, then reports end of input."""

    lines: list[str]
    prompts: list[str] = field(default_factory=list)

    def read_line(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)


@pytest.fixture(autouse=True)
def _quiet_logging(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    logger.remove()
    monkeypatch.setattr(logging_utils, "_CONFIGURED", None)
    yield
    logger.remove()


@pytest.fixture(autouse=True)
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    # Restores the working directory even when `cd` moved it.
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def bin_dir(tmp_path: Path) -> Path:
    path = tmp_path / "bin"
    path.mkdir()
    return path


@pytest.fixture
def write_script() -> Callable[..., Path]:
    def _write(directory: Path, name: str, body: str = "exit 0", *, executable: bool = True) -> Path:
        path = directory / name
        path.write_text(f"#!/bin/sh\n{body}\n", encoding="utf-8")
        path.chmod(0o755 if executable else 0o644)
        return path

    return _write


@pytest.fixture
def scripted_reader() -> Callable[..., ScriptedReader]:
    def _build(*lines: str) -> ScriptedReader:
        return ScriptedReader(list(lines))

    return _build
