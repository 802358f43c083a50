import json
from pathlib import Path

import pytest

from stsmap.domain.room_values import RoomValues
from stsmap.presentation.cli import config


def test_missing_default_file_gives_defaults(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setattr(config, "get_default_config_path", lambda: tmp_path / "room_values.json")

    assert config.load_room_values() == RoomValues()


def test_missing_explicit_file_is_an_error(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        config.load_room_values(tmp_path / "nope.json")


def test_values_file_overrides_defaults(tmp_path: Path) -> None:
    values_path = tmp_path / "values.json"
    values_path.write_text(json.dumps({"rest": 5, "gold": 300}), encoding="utf-8")

    values = config.load_room_values(values_path)

    assert values.rest == 5.0
    assert values.gold == 300.0
    assert values.elite == 1.2


def test_values_file_must_hold_an_object(tmp_path: Path) -> None:
    values_path = tmp_path / "values.json"
    values_path.write_text("[1, 2]", encoding="utf-8")

    with pytest.raises(ValueError):
        config.load_room_values(values_path)


def test_default_config_path_lives_in_user_dir() -> None:
    path = config.get_default_config_path()

    assert path.name == "room_values.json"
    assert path.parent == config.get_user_data_dir()
