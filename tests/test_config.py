from __future__ import annotations

from pathlib import Path

import pytest

from memfs.config import AppConfig, load_config
from memfs.exceptions import ConfigurationError


@pytest.fixture(autouse=True)
def _isolated(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.delenv("MEMFS_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("memfs.config.DEFAULT_CONFIG_DIR_UNIX", tmp_path / "home-config")


def test_defaults(tmp_path: Path) -> None:
    cfg = load_config(base_dir=tmp_path)
    assert isinstance(cfg, AppConfig)
    assert cfg.shell.prompt == "command: "
    assert cfg.shell.exit_command == "exit"
    assert cfg.paths.logs_dir == tmp_path.resolve() / "logs"
    assert cfg.debug is False


def test_toml_discovered_in_cwd(tmp_path: Path) -> None:
    (tmp_path / "memfs.toml").write_text(
        'debug = true\nenv = "test"\n[shell]\nprompt = "> "\n[paths]\nlogs = "var/log"\n',
        encoding="utf-8",
    )
    cfg = load_config(base_dir=tmp_path)
    assert cfg.debug is True
    assert cfg.env == "test"
    assert cfg.shell.prompt == "> "
    assert cfg.paths.logs_dir == (tmp_path / "var" / "log").resolve()


def test_yaml_from_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    config_file = tmp_path / "custom.yaml"
    config_file.write_text("shell:\n  exit_command: quit\n", encoding="utf-8")
    monkeypatch.setenv("MEMFS_CONFIG", str(config_file))
    assert load_config(base_dir=tmp_path).shell.exit_command == "quit"


def test_yaml_must_be_a_mapping(tmp_path: Path) -> None:
    config_file = tmp_path / "memfs.yaml"
    config_file.write_text("- just\n- a list\n", encoding="utf-8")
    with pytest.raises(ConfigurationError):
        load_config(config_path=config_file, base_dir=tmp_path)


def test_explicit_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError):
        load_config(config_path=tmp_path / "absent.toml", base_dir=tmp_path)


def test_invalid_toml(tmp_path: Path) -> None:
    config_file = tmp_path / "memfs.toml"
    config_file.write_text("debug = = true\n", encoding="utf-8")
    with pytest.raises(ConfigurationError):
        load_config(config_path=config_file, base_dir=tmp_path)
