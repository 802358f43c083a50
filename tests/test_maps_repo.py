import json
from pathlib import Path

import pytest

from stsmap.data import DataLoadError, DataReferenceError, DataValidationError
from stsmap.data.repositories import MapsRepository, load_map_file, parse_map_payload
from stsmap.domain.defs import RoomDef


def _write_maps(tmp_path: Path, payload: object) -> MapsRepository:
    (tmp_path / "maps.json").write_text(json.dumps(payload), encoding="utf-8")
    return MapsRepository(base_path=tmp_path)


def test_bundled_maps_load() -> None:
    repo = MapsRepository()

    assert repo.ids() == ["act1_sample", "two_floor_fork"]
    act = repo.get("act1_sample")
    assert act.top_floor == 15
    assert act.room(1, 1) == RoomDef(typ="enemy", connections=(1, 2))
    assert len(repo.all()) == 2


def test_unknown_map_id_raises_key_error() -> None:
    with pytest.raises(KeyError):
        MapsRepository().get("act9")


def test_missing_file_raises_load_error(tmp_path: Path) -> None:
    with pytest.raises(DataLoadError):
        MapsRepository(base_path=tmp_path).get("any")


def test_invalid_json_raises_load_error(tmp_path: Path) -> None:
    (tmp_path / "maps.json").write_text("{not json", encoding="utf-8")

    with pytest.raises(DataLoadError):
        MapsRepository(base_path=tmp_path).all()


def test_top_level_must_be_object(tmp_path: Path) -> None:
    with pytest.raises(DataValidationError):
        _write_maps(tmp_path, []).all()


def test_connection_to_missing_room_is_reference_error(tmp_path: Path) -> None:
    repo = _write_maps(
        tmp_path,
        {"broken": {"1": [{"typ": "enemy", "connections": [1]}], "2": [{"typ": "rest", "connections": []}]}},
    )

    with pytest.raises(DataReferenceError, match="connects to room 1"):
        repo.get("broken")


@pytest.mark.parametrize(
    "payload",
    [
        {"16": []},
        {"zero": []},
        {"1": {"typ": "enemy"}},
        {"1": [{"connections": []}]},
        {"1": [{"typ": "enemy", "connections": "0"}]},
        {"1": [{"typ": "enemy", "connections": [0, 0]}], "2": [{"typ": "rest"}]},
        {"1": [{"typ": "enemy", "connections": [True]}], "2": [{"typ": "rest"}]},
    ],
)
def test_structural_problems_are_validation_errors(payload) -> None:
    with pytest.raises(DataValidationError):
        parse_map_payload(payload, "test map")


def test_missing_connections_default_to_dead_end() -> None:
    map_def = parse_map_payload({"1": [{"typ": "rest"}]}, "test map")

    assert map_def.connections(1, 0) == ()


def test_load_map_file(tmp_path: Path) -> None:
    map_path = tmp_path / "seed_42.json"
    map_path.write_text(
        json.dumps({"2": [{"typ": "elite", "connections": []}], "1": [{"typ": "enemy", "connections": [0]}]}),
        encoding="utf-8",
    )

    map_def = load_map_file(map_path)

    assert map_def.top_floor == 2
    assert map_def.room_type(2, 0) == "elite"


def test_repository_reports_its_backing_file(tmp_path: Path) -> None:
    assert MapsRepository(base_path=tmp_path).file_path == tmp_path / "maps.json"


def test_undecodable_file_raises_load_error(tmp_path: Path) -> None:
    (tmp_path / "maps.json").write_bytes(b"\xff\xfe\x00bad")

    with pytest.raises(DataLoadError, match="Unable to read map file"):
        MapsRepository(base_path=tmp_path).all()


def test_invalid_json_message_names_the_position(tmp_path: Path) -> None:
    (tmp_path / "maps.json").write_text('{"act": }', encoding="utf-8")

    with pytest.raises(DataLoadError, match="line 1, column 9"):
        MapsRepository(base_path=tmp_path).all()
