"""CLI main module for minish."""

from typing import Optional

import typer

from minish import __version__
from minish.cli.render import create_reader, render_version
from minish.config import Settings, get_settings
from minish.core import Shell
from minish.errors import ShellExit

app = typer.Typer(
    name="minish",
    help="A minimal interactive command shell.",
    add_completion=False,
    rich_markup_mode="rich",
)


def _version_callback(value: bool) -> None:
    if value:
        render_version(__version__)
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    version: Optional[bool] = typer.Option(
        None, "--version", callback=_version_callback, is_eager=True, help="Show the version and exit."
    ),
) -> None:
    if ctx.invoked_subcommand is None:
        # Default to the interactive loop
        repl()


def _load_settings(prompt: Optional[str]) -> Settings:
    overrides = {"prompt": prompt} if prompt is not None else {}
    return get_settings(**overrides)


@app.command()
def repl(prompt: Optional[str] = None) -> None:
    """Start the interactive shell."""
    settings = _load_settings(prompt)
    shell = Shell.from_settings(settings)
    code = shell.run(create_reader(settings))
    raise typer.Exit(code)


@app.command()
def run(line: str) -> None:
    """Run a single command line and exit with its status."""
    shell = Shell.from_settings(_load_settings(None))
    try:
        result = shell.run_line(line)
    except ShellExit as exc:
        raise typer.Exit(exc.code) from exc
    raise typer.Exit(result.status)


if __name__ == "__main__":
    app()
