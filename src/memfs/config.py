from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional
import os
import logging

try:
    import tomllib  # Python 3.11+
except ModuleNotFoundError:  # pragma: no cover - for safety if run on <3.11
    import tomli as tomllib  # type: ignore[no-redef]

import yaml

from .exceptions import ConfigurationError

log = logging.getLogger(__name__)


CONFIG_FILENAMES_TOML = ("memfs.toml", "config.toml")
CONFIG_FILENAMES_YAML = ("memfs.yaml", "memfs.yml", "config.yaml", "config.yml")
DEFAULT_CONFIG_DIR_UNIX = Path.home() / ".config" / "memfs"


@dataclass(frozen=True)
class ShellConfig:
    prompt: str = "command: "
    exit_command: str = "exit"


@dataclass(frozen=True)
class PathsConfig:
    base_dir: Path
    logs_dir: Path


@dataclass(frozen=True)
class AppConfig:
    paths: PathsConfig
    shell: ShellConfig
    env: str = "dev"
    debug: bool = False


def _find_config_file(explicit: Optional[Path]) -> Optional[Path]:
    if explicit is not None:
        return explicit

    env_path = os.environ.get("MEMFS_CONFIG")
    if env_path:
        p = Path(env_path)
        if p.exists():
            return p

    cwd = Path.cwd()
    for name in (*CONFIG_FILENAMES_TOML, *CONFIG_FILENAMES_YAML):
        candidate = cwd / name
        if candidate.exists():
            return candidate

    for name in (*CONFIG_FILENAMES_TOML, *CONFIG_FILENAMES_YAML):
        candidate = DEFAULT_CONFIG_DIR_UNIX / name
        if candidate.exists():
            return candidate

    return None


def _read_toml(p: Path) -> Dict[str, Any]:
    with p.open("rb") as f:
        return tomllib.load(f)


def _read_yaml(p: Path) -> Dict[str, Any]:
    with p.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"YAML config must be a mapping at top-level: {p}")
    return data


def _to_path(value: Optional[str], *, base_dir: Path) -> Path:
    p = Path(value) if value else base_dir
    if not p.is_absolute():
        p = (base_dir / p).resolve()
    return p


def load_config(*, config_path: Optional[Path] = None, base_dir: Optional[Path] = None) -> AppConfig:
    base_dir = (base_dir or Path.cwd()).resolve()

    file_path = _find_config_file(config_path)
    raw: Dict[str, Any] = {}
    if file_path is not None:
        if not file_path.exists():
            raise ConfigurationError(f"Configuration file '{file_path}' does not exist.")
        try:
            if file_path.suffix.lower() == ".toml":
                raw = _read_toml(file_path)
            else:
                raw = _read_yaml(file_path)
        except (tomllib.TOMLDecodeError, yaml.YAMLError) as exc:
            raise ConfigurationError(f"Failed to parse configuration: {exc}") from exc
        log.debug("Loaded config from %s", file_path)

    raw_paths = raw.get("paths") if isinstance(raw.get("paths"), dict) else {}
    raw_shell = raw.get("shell") if isinstance(raw.get("shell"), dict) else {}

    default_shell = ShellConfig()
    paths = PathsConfig(
        base_dir=base_dir,
        logs_dir=_to_path(raw_paths.get("logs"), base_dir=base_dir) if raw_paths.get("logs") else base_dir / "logs",
    )
    shell = ShellConfig(
        prompt=str(raw_shell.get("prompt", default_shell.prompt)),
        exit_command=str(raw_shell.get("exit_command", default_shell.exit_command)),
    )

    env = str(raw.get("env", "dev"))
    debug = bool(raw.get("debug", False))

    return AppConfig(paths=paths, shell=shell, env=env, debug=debug)


def ensure_directories(cfg: AppConfig) -> None:
    cfg.paths.logs_dir.mkdir(parents=True, exist_ok=True)
