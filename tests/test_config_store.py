from pathlib import Path
import json

import pytest

from backup_tool.domain.errors import ConfigLoadError, ConfigParseError
from backup_tool.domain.models import BackupConfig
from backup_tool.infrastructure.storage.config_store import JsonConfigRepository, load_config, save_config


def write_config(path: Path, payload: object) -> Path:
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_load_config_reads_paths_in_order(tmp_path: Path) -> None:
    path = write_config(
        tmp_path / "config.json",
        {"input_paths": ["/tmp/b", "/tmp/a.txt"], "output_path": "/tmp/out"},
    )

    config = load_config(path)

    assert config.input_paths == (Path("/tmp/b"), Path("/tmp/a.txt"))
    assert config.output_path == Path("/tmp/out")


def test_load_config_ignores_unknown_keys_and_expands_home(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    path = write_config(
        tmp_path / "config.json",
        {"input_paths": ["~/docs"], "output_path": "~/out", "comment": "nightly"},
    )

    config = load_config(path)

    assert config.input_paths == (tmp_path / "docs",)
    assert config.output_path == tmp_path / "out"


def test_missing_file_raises_load_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigLoadError) as excinfo:
        load_config(tmp_path / "absent.json")

    assert str(excinfo.value).startswith("Config loading failed.")
    assert excinfo.value.path == tmp_path / "absent.json"


def test_directory_instead_of_file_raises_load_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigLoadError):
        load_config(tmp_path)


def test_malformed_json_raises_parse_error(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text('{"input_paths": [', encoding="utf-8")

    with pytest.raises(ConfigParseError) as excinfo:
        load_config(path)

    assert str(excinfo.value).startswith("Config parsing failed.")


@pytest.mark.parametrize(
    "payload",
    [
        ["/tmp/a"],
        {"input_paths": ["/tmp/a"]},
        {"output_path": "/tmp/out"},
        {"input_paths": "/tmp/a", "output_path": "/tmp/out"},
        {"input_paths": ["/tmp/a", 3], "output_path": "/tmp/out"},
        {"input_paths": [], "output_path": None},
    ],
)
def test_wrong_shape_raises_parse_error(tmp_path: Path, payload) -> None:
    path = write_config(tmp_path / "config.json", payload)

    with pytest.raises(ConfigParseError):
        load_config(path)


def test_save_and_load_config(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    config = BackupConfig(input_paths=(Path("/srv/data"),), output_path=Path("/srv/backups"))

    save_config(config, path)

    assert json.loads(path.read_text()) == {"input_paths": ["/srv/data"], "output_path": "/srv/backups"}
    assert JsonConfigRepository(path).load_config() == config


@pytest.mark.parametrize("empty", ["", "   "])
def test_empty_input_path_is_rejected(tmp_path: Path, monkeypatch, empty) -> None:
    work = tmp_path / "work"
    work.mkdir()
    (work / "unrelated.txt").write_text("not configured")
    monkeypatch.chdir(work)
    path = write_config(tmp_path / "config.json", {"input_paths": [empty], "output_path": str(tmp_path)})

    with pytest.raises(ConfigParseError) as excinfo:
        load_config(path)

    assert "empty" in excinfo.value.detail
