"""Storage helpers for the JSON backup configuration."""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

from backup_tool.domain.errors import ConfigLoadError, ConfigParseError
from backup_tool.domain.models import BackupConfig


def _expand(value: str) -> Path:
    return Path(os.path.expanduser(value))


def _parse_config(data: Any, path: Path) -> BackupConfig:
    if not isinstance(data, dict):
        raise ConfigParseError(path, f"expected a JSON object, got {type(data).__name__}")

    try:
        raw_inputs = data["input_paths"]
        raw_output = data["output_path"]
    except KeyError as exc:
        raise ConfigParseError(path, f"missing field {exc.args[0]!r}") from exc

    if not isinstance(raw_inputs, list) or not all(isinstance(item, str) for item in raw_inputs):
        raise ConfigParseError(path, "'input_paths' must be a list of strings")
    # Path("") would silently become the working directory
    if any(not item.strip() for item in raw_inputs):
        raise ConfigParseError(path, "'input_paths' must not contain empty paths")
    if not isinstance(raw_output, str):
        raise ConfigParseError(path, "'output_path' must be a string")

    return BackupConfig(
        input_paths=tuple(_expand(item) for item in raw_inputs),
        output_path=_expand(raw_output),
    )


def load_config(path: Path) -> BackupConfig:
    config_path = Path(path)
    try:
        text = config_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ConfigParseError(config_path, str(exc)) from exc
    except OSError as exc:
        raise ConfigLoadError(config_path, str(exc)) from exc

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigParseError(config_path, str(exc)) from exc
    return _parse_config(data, config_path)


def save_config(config: BackupConfig, path: Path) -> BackupConfig:
    config_path = Path(path)
    payload = {
        "input_paths": [str(item) for item in config.input_paths],
        "output_path": str(config.output_path),
    }
    config_path.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
    return config


class JsonConfigRepository:
    def __init__(self, path: Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load_config(self) -> BackupConfig:
        return load_config(self._path)
