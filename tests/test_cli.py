from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from memfs import __version__
from memfs.cli import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def _isolated(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.delenv("MEMFS_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("memfs.config.DEFAULT_CONFIG_DIR_UNIX", tmp_path / "home-config")


def test_version() -> None:
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert result.stdout.strip() == __version__


def test_shell_reads_until_exit(tmp_path: Path) -> None:
    result = runner.invoke(
        app,
        ["--base-dir", str(tmp_path), "shell"],
        input="mkdir docs\ncd docs\npwd\nexit\npwd\n",
    )
    assert result.exit_code == 0
    assert result.stdout.count("/docs\n") == 1
    assert (tmp_path / "logs").is_dir()


def test_shell_stops_at_end_of_input(tmp_path: Path) -> None:
    result = runner.invoke(app, ["--base-dir", str(tmp_path), "shell"], input="mkfile a\nls\n")
    assert result.exit_code == 0
    assert "a\n" in result.stdout


def test_run_script(tmp_path: Path) -> None:
    script = tmp_path / "session.txt"
    script.write_text('mkdir -p notes/week1\nwrite notes/week1/todo "read chapter 1"\nread notes/week1/todo\n')
    result = runner.invoke(app, ["--base-dir", str(tmp_path), "run", str(script)])
    assert result.exit_code == 0
    assert "read chapter 1\n" in result.stdout


def test_run_script_stop_on_error(tmp_path: Path) -> None:
    script = tmp_path / "session.txt"
    script.write_text("cd missing\nmkdir never\n")
    result = runner.invoke(app, ["--base-dir", str(tmp_path), "run", "--stop-on-error", str(script)])
    assert result.exit_code == 1


def test_config_show(tmp_path: Path) -> None:
    (tmp_path / "memfs.toml").write_text('[shell]\nprompt = "$ "\n', encoding="utf-8")
    result = runner.invoke(app, ["--base-dir", str(tmp_path), "config", "show"])
    assert result.exit_code == 0
    assert "prompt: '$ '" in result.stdout
