from __future__ import annotations

import json
from pathlib import Path

import pytest

from pymtcsound.exceptions import PersistenceError
from pymtcsound.models.state import DeviceState, GpsState, SoundProfile
from pymtcsound.persistence import JsonFilePersister


def test_missing_file_loads_nothing(tmp_path: Path) -> None:
    assert JsonFilePersister(tmp_path / "state.json").load() is None


def test_save_then_load(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "state.json"
    persister = JsonFilePersister(path)
    state = DeviceState(
        hardware_status="i2c:bd37534",
        volume=21,
        input="fm",
        profiles={"fm": SoundProfile(bass=3)},
        gps=GpsState(monitor=True, package="com.nav"),
    )

    persister.save(state)
    stored = json.loads(path.read_text(encoding="utf-8"))
    assert "hardware_status" not in stored
    assert "power" not in stored
    assert list(tmp_path.joinpath("nested").iterdir()) == [path]

    loaded = persister.load()
    assert loaded is not None
    assert loaded.volume == 21
    assert loaded.profile.bass == 3
    assert loaded.gps.package == "com.nav"
    assert loaded.hardware_status == ""


def test_unknown_and_null_fields_fall_back_to_defaults(tmp_path: Path) -> None:
    path = tmp_path / "state.json"
    path.write_text(json.dumps({"volume": None, "balance": 2, "legacy": 1}), encoding="utf-8")

    loaded = JsonFilePersister(path).load()
    assert loaded is not None
    assert loaded.volume == 12
    assert loaded.balance == 2


def test_corrupt_file_raises_persistence_error(tmp_path: Path) -> None:
    path = tmp_path / "state.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(PersistenceError) as excinfo:
        JsonFilePersister(path).load()
    assert excinfo.value.path == str(path)


def test_unwritable_location_raises_persistence_error(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")

    with pytest.raises(PersistenceError):
        JsonFilePersister(blocker / "state.json").save(DeviceState())


def test_restore_copies_settings_only() -> None:
    current = DeviceState(hardware_status="i2c:x", power=False)
    current.restore(DeviceState(hardware_status="old", volume=3, mute=True))

    assert current.hardware_status == "i2c:x"
    assert current.power is False
    assert current.volume == 3
    assert current.mute is True
