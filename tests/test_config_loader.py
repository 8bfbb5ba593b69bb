from __future__ import annotations

import json
from pathlib import Path

import pytest

from config.config_loader import DEFAULT_CONFIG, load_config, save_config, validate_config


def test_missing_file_yields_defaults(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    config = load_config(str(tmp_path / "absent.json"))
    assert config == DEFAULT_CONFIG
    assert (tmp_path / "logs").is_dir()


def test_user_values_override_defaults(tmp_path: Path) -> None:
    path = tmp_path / "runtime_config.json"
    out = tmp_path / "out"
    path.write_text(json.dumps({"max_steps": 5, "verbose": True, "output_directory": str(out)}), encoding="utf-8")

    config = load_config(str(path))
    assert config["max_steps"] == 5
    assert config["verbose"] is True
    assert config["program_path"] == DEFAULT_CONFIG["program_path"]
    assert out.is_dir()


@pytest.mark.parametrize("override", [{"verbose": "yes"}, {"max_steps": True}, {"max_steps": 1.5}, {"tape_path": 3}])
def test_wrong_types_are_rejected(tmp_path: Path, override: dict) -> None:
    path = tmp_path / "runtime_config.json"
    path.write_text(json.dumps(override), encoding="utf-8")
    with pytest.raises(TypeError):
        load_config(str(path))


def test_negative_step_limit_is_rejected() -> None:
    config = dict(DEFAULT_CONFIG, max_steps=-1)
    with pytest.raises(ValueError):
        validate_config(config)


def test_missing_key_is_rejected() -> None:
    config = dict(DEFAULT_CONFIG)
    del config["trace_path"]
    with pytest.raises(ValueError, match="trace_path"):
        validate_config(config)


def test_invalid_json_is_a_value_error(tmp_path: Path) -> None:
    path = tmp_path / "runtime_config.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ValueError, match="Invalid JSON"):
        load_config(str(path))


def test_save_then_load(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "runtime_config.json"
    config = dict(DEFAULT_CONFIG, tape_path="tapes/long", output_directory=str(tmp_path / "logs"))
    save_config(config, str(path))
    assert load_config(str(path)) == config
