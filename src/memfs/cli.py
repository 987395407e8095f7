from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import typer

from . import __version__
from .config import AppConfig, ensure_directories, load_config
from .shell import ShellEnvironment, ShellResponse

app = typer.Typer(help="Interactive shell over an in-memory filesystem.")
config_app = typer.Typer(help="Inspect and manage configuration.")

log = logging.getLogger(__name__)


@dataclass
class State:
    config: AppConfig


def _setup_logging(debug: bool, logs_dir: Path) -> None:
    level = logging.DEBUG if debug else logging.INFO
    log_file = logs_dir / "memfs.log"
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        handlers=[
            logging.StreamHandler(),
            logging.FileHandler(log_file, encoding="utf-8"),
        ],
    )


def _make_shell(cfg: AppConfig) -> ShellEnvironment:
    return ShellEnvironment(prompt=cfg.shell.prompt, exit_command=cfg.shell.exit_command)


def _emit(response: ShellResponse) -> None:
    if response.stdout:
        typer.echo(response.stdout, nl=False)
    if response.stderr:
        typer.echo(response.stderr, nl=False, err=True)


@app.callback()
def _load_config(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to a configuration file (TOML or YAML). Overrides discovery.",
    ),
    base_dir: Optional[Path] = typer.Option(
        None,
        "--base-dir",
        help="Base directory for default paths. Defaults to the current working directory.",
    ),
) -> None:
    cfg = load_config(config_path=config, base_dir=base_dir)
    ensure_directories(cfg)
    _setup_logging(debug=cfg.debug, logs_dir=cfg.paths.logs_dir)
    ctx.obj = State(config=cfg)


@app.command(name="version")
def version() -> None:
    """Print version information."""
    typer.echo(__version__)


@app.command(name="shell")
def shell(ctx: typer.Context) -> None:
    """Start an interactive session on a fresh, empty filesystem."""
    assert isinstance(ctx.obj, State)
    env = _make_shell(ctx.obj.config)
    log.debug("Starting interactive shell")
    while True:
        try:
            line = input(env.prompt)
        except (EOFError, KeyboardInterrupt):
            typer.echo()
            break
        response = env.execute(line)
        _emit(response)
        if response.should_exit:
            break


@app.command(name="run")
def run(
    ctx: typer.Context,
    script: Path = typer.Argument(..., exists=True, dir_okay=False, help="File with one command per line."),
    stop_on_error: bool = typer.Option(False, "--stop-on-error", help="Abort on the first failing command."),
) -> None:
    """Execute the commands in SCRIPT against a fresh filesystem."""
    assert isinstance(ctx.obj, State)
    env = _make_shell(ctx.obj.config)
    with script.open("r", encoding="utf-8") as fh:
        for lineno, line in enumerate(fh, start=1):
            response = env.execute(line)
            _emit(response)
            if response.exit_code != 0 and stop_on_error:
                log.debug("Stopping at line %d of %s", lineno, script)
                raise typer.Exit(code=1)
            if response.should_exit:
                break


@config_app.command("show")
def config_show(ctx: typer.Context) -> None:
    """Show the resolved configuration values."""
    assert isinstance(ctx.obj, State)
    cfg = ctx.obj.config
    lines = [
        "env: " + cfg.env,
        f"debug: {cfg.debug}",
        "paths:",
        f"  base_dir: {cfg.paths.base_dir}",
        f"  logs_dir: {cfg.paths.logs_dir}",
        "shell:",
        f"  prompt: {cfg.shell.prompt!r}",
        f"  exit_command: {cfg.shell.exit_command}",
    ]
    for line in lines:
        typer.echo(line)


app.add_typer(config_app, name="config")
