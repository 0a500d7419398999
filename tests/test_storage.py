import json
import sys

import pytest

from vpet.errors import StorageFormatError, StorageIOError, StorageNotFound, ValidationError
from vpet.pet import Pet
from vpet.storage import DeleteOutcome, PetStore


def test_save_and_load(store):
    pet = Pet.from_dict({"name": "TestPet", "hunger": 60, "happiness": 70, "energy": 80})
    path = store.save(pet)
    assert path == store.directory / "TestPet.json"

    loaded = store.load("TestPet")
    assert loaded.to_dict() == pet.to_dict()


def test_round_trip_after_actions(store):
    pet = Pet("Rex")
    pet.feed()
    pet.play()
    store.save(pet)
    assert store.load("Rex").to_dict() == {"name": "Rex", "hunger": 30, "happiness": 80, "energy": 80}


def test_record_is_readable_json(store):
    store.save(Pet("Rex"))
    text = (store.directory / "Rex.json").read_text(encoding="utf-8")
    assert "\n" in text
    assert json.loads(text) == {"name": "Rex", "hunger": 50, "happiness": 50, "energy": 100}


def test_save_overwrites_previous_record(store):
    pet = Pet("Rex")
    store.save(pet)
    pet.feed()
    store.save(pet)
    assert store.load("Rex").hunger == 20
    assert [p.name for p in store.directory.iterdir()] == ["Rex.json"]


def test_load_reads_records_from_earlier_sessions(store):
    store.directory.mkdir(parents=True)
    (store.directory / "Old.json").write_text('{"name":"Old","hunger":10,"happiness":20,"energy":30}')
    pet = store.load("Old")
    assert (pet.name, pet.hunger, pet.happiness, pet.energy) == ("Old", 10, 20, 30)


def test_load_does_not_clamp_hand_edited_values(store):
    store.directory.mkdir(parents=True)
    (store.directory / "Odd.json").write_text(json.dumps({"name": "Odd", "hunger": -20, "happiness": 140, "energy": 100}))
    pet = store.load("Odd")
    assert (pet.hunger, pet.happiness) == (-20, 140)
    store.save(pet)
    assert store.load("Odd").to_dict() == {"name": "Odd", "hunger": -20, "happiness": 140, "energy": 100}


def test_load_missing_record(store):
    with pytest.raises(StorageNotFound) as excinfo:
        store.load("Ghost")
    assert excinfo.value.name == "Ghost"


@pytest.mark.parametrize("content", [
    "not json at all",
    "[1, 2, 3]",
    '{"name": "Bad", "hunger": 1, "happiness": 2}',
    '{"name": "Bad", "hunger": "lots", "happiness": 2, "energy": 3}',
])
def test_load_malformed_record(store, content):
    store.directory.mkdir(parents=True)
    (store.directory / "Bad.json").write_text(content)
    with pytest.raises(StorageFormatError) as excinfo:
        store.load("Bad")
    assert excinfo.value.name == "Bad"


def test_load_io_failure(store):
    (store.directory / "Dir.json").mkdir(parents=True)
    with pytest.raises(StorageIOError) as excinfo:
        store.load("Dir")
    assert isinstance(excinfo.value.error, OSError)


def test_save_io_failure(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("")
    store = PetStore(blocker)
    with pytest.raises(StorageIOError):
        store.save(Pet("Rex"))


def test_delete_existing_record(store):
    store.save(Pet("Rex"))
    assert store.exists("Rex")
    assert store.delete("Rex") is DeleteOutcome.DELETED
    assert not store.exists("Rex")
    with pytest.raises(StorageNotFound):
        store.load("Rex")


def test_delete_missing_record_reports_absence(store):
    assert store.delete("Ghost") is DeleteOutcome.ABSENT


def test_delete_io_failure(store):
    (store.directory / "Dir.json").mkdir(parents=True)
    with pytest.raises(StorageIOError):
        store.delete("Dir")


@pytest.mark.parametrize("name", ["", "  ", "../escape", "a/b", "a\\b", ".."])
def test_unusable_names_are_rejected(store, name):
    with pytest.raises(ValidationError):
        store.path_for(name)


def test_name_with_null_byte_is_rejected_before_touching_disk(store):
    pet = Pet("a\x00b")
    with pytest.raises(ValidationError):
        store.save(pet)
    with pytest.raises(ValidationError):
        store.load("a\x00b")
    with pytest.raises(ValidationError):
        store.delete("a\x00b")
    assert not store.directory.exists()


@pytest.mark.skipif(not hasattr(sys, "get_int_max_str_digits"), reason="no integer string length limit")
def test_load_oversized_integer_is_a_format_error(store):
    store.directory.mkdir(parents=True)
    (store.directory / "Big.json").write_text(
        '{"name": "Big", "hunger": ' + "1" * 5000 + ', "happiness": 2, "energy": 3}'
    )
    with pytest.raises(StorageFormatError):
        store.load("Big")


def test_load_deeply_nested_record_is_a_format_error(store):
    store.directory.mkdir(parents=True)
    (store.directory / "Deep.json").write_text('{"name": ' + "[" * 100000 + "]" * 100000 + "}")
    with pytest.raises(StorageFormatError):
        store.load("Deep")


def test_load_rejects_record_saved_under_another_name(store):
    store.save(Pet("Rex"))
    (store.directory / "Rex.json").rename(store.directory / "Fido.json")
    with pytest.raises(StorageFormatError) as excinfo:
        store.load("Fido")
    assert excinfo.value.name == "Fido"


def test_failed_save_leaves_no_temp_file(store, monkeypatch):
    def broken_replace(src, dst):
        raise PermissionError("read-only")

    monkeypatch.setattr("vpet.storage.os.replace", broken_replace)
    with pytest.raises(StorageIOError) as excinfo:
        store.save(Pet("Rex"))
    assert isinstance(excinfo.value.error, PermissionError)
    assert list(store.directory.iterdir()) == []


def test_failed_cleanup_still_reports_the_original_error(store, monkeypatch):
    def broken_replace(src, dst):
        raise PermissionError("read-only")

    def broken_unlink(self, missing_ok=False):
        raise OSError("cannot remove")

    monkeypatch.setattr("vpet.storage.os.replace", broken_replace)
    monkeypatch.setattr("vpet.storage.Path.unlink", broken_unlink)
    with pytest.raises(StorageIOError) as excinfo:
        store.save(Pet("Rex"))
    assert isinstance(excinfo.value.error, PermissionError)
