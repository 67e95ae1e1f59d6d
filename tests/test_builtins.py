import os
from pathlib import Path

import pytest

from minish.core.builtins import strip_outer_quotes
from minish.core.shell import Shell
from minish.errors import ShellExit


def test_echo_joins_arguments_with_single_spaces(capsys: pytest.CaptureFixture[str]) -> None:
    result = Shell().run_line("echo hello    world")
    assert result.status == 0
    assert capsys.readouterr().out == "hello world\n"


def test_echo_without_arguments_prints_empty_line(capsys: pytest.CaptureFixture[str]) -> None:
    Shell().run_line("echo")
    assert capsys.readouterr().out == "\n"


def test_echo_strips_one_outer_quote_pair(capsys: pytest.CaptureFixture[str]) -> None:
    shell = Shell()
    shell.run_line('echo "hello   world"')
    shell.run_line("echo 'single'")
    shell.run_line('echo "a" "b"')
    assert capsys.readouterr().out == 'hello world\nsingle\na" "b\n'


def test_strip_outer_quotes_edge_cases() -> None:
    assert strip_outer_quotes('""') == ""
    assert strip_outer_quotes('"') == '"'
    assert strip_outer_quotes("\"mixed'") == "\"mixed'"
    assert strip_outer_quotes("plain") == "plain"
    assert strip_outer_quotes("'it''s'") == "it''s"


def test_pwd_prints_working_directory(capsys: pytest.CaptureFixture[str]) -> None:
    Shell().run_line("pwd")
    assert capsys.readouterr().out == os.getcwd() + "\n"


def test_cd_absolute_and_relative(tmp_path: Path) -> None:
    sub = tmp_path / "a" / "b"
    sub.mkdir(parents=True)
    shell = Shell()

    assert shell.run_line(f"cd {tmp_path / 'a'}").status == 0
    assert Path.cwd() == (tmp_path / "a").resolve()
    assert shell.run_line("cd b").status == 0
    assert Path.cwd() == sub.resolve()
    assert shell.run_line("cd ..").status == 0
    assert Path.cwd() == (tmp_path / "a").resolve()


def test_cd_twice_is_same_as_once(tmp_path: Path) -> None:
    target = tmp_path / "target"
    target.mkdir()
    shell = Shell()

    shell.run_line(f"cd {target}")
    once = Path.cwd()
    shell.run_line(f"cd {target}")
    assert Path.cwd() == once


def test_cd_missing_directory_reports_and_keeps_cwd(capsys: pytest.CaptureFixture[str]) -> None:
    before = os.getcwd()
    result = Shell().run_line("cd /does/not/exist")
    assert result.status == 1
    assert os.getcwd() == before
    assert capsys.readouterr().err == "cd: /does/not/exist: No such file or directory\n"


def test_cd_to_regular_file_fails(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (tmp_path / "file.txt").write_text("x", encoding="utf-8")
    result = Shell().run_line("cd file.txt")
    assert result.status == 1
    assert "cd: file.txt: No such file or directory" in capsys.readouterr().err


def test_cd_home_forms(tmp_path: Path) -> None:
    home = tmp_path / "home"
    (home / "projects").mkdir(parents=True)
    shell = Shell(home=home)

    shell.run_line("cd")
    assert Path.cwd() == home.resolve()
    shell.run_line(f"cd {tmp_path}")
    shell.run_line("cd ~")
    assert Path.cwd() == home.resolve()
    shell.run_line("cd ~/projects")
    assert Path.cwd() == (home / "projects").resolve()


def test_type_reports_builtins(capsys: pytest.CaptureFixture[str]) -> None:
    shell = Shell(search_path="")
    for name in ("echo", "exit", "type", "pwd", "cd"):
        shell.run_line(f"type {name}")
    out = capsys.readouterr().out
    assert out.splitlines() == [f"{name} is a shell builtin" for name in ("echo", "exit", "type", "pwd", "cd")]


def test_type_reports_path_of_file_on_search_path(
    bin_dir: Path, write_script, capsys: pytest.CaptureFixture[str]
) -> None:
    script = write_script(bin_dir, "tool")
    notes = write_script(bin_dir, "notes", executable=False)
    shell = Shell(search_path=str(bin_dir))

    shell.run_line("type tool")
    shell.run_line("type notes")
    assert capsys.readouterr().out == f"tool is {script}\nnotes is {notes}\n"


def test_type_unknown_name_reports_not_found(bin_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    result = Shell(search_path=str(bin_dir)).run_line("type nosuchthing")
    captured = capsys.readouterr()
    assert result.status == 1
    assert captured.out == ""
    assert captured.err == "nosuchthing: not found\n"


def test_type_without_argument_prints_nothing(capsys: pytest.CaptureFixture[str]) -> None:
    assert Shell().run_line("type").status == 0
    assert capsys.readouterr() == ("", "")


@pytest.mark.parametrize(
    ("line", "code"),
    [
        ("exit", 0),
        ("exit 0", 0),
        ("exit 3", 3),
        ("exit abc", 0),
        ("exit 7 extra", 7),
        ("exit 3abc", 3),
        ("exit 1_0", 1),
        ("exit -2", -2),
        ("exit +5", 5),
    ],
)
def test_exit_raises_with_code(line: str, code: int) -> None:
    with pytest.raises(ShellExit) as excinfo:
        Shell().run_line(line)
    assert excinfo.value.code == code
