"""Tests for the credential snapshot file"""
import json

from farmerhub.auth import CredentialStorage, CredentialStore
from farmerhub.models import Account


def _write_lines(path, lines):
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_load_missing_file_returns_empty(storage):
    assert storage.load() == {}
    assert storage.last_error is None


def test_save_then_load_preserves_accounts(storage):
    accounts = {
        "farmer": Account(username="farmer", password="Pass123!", email="farm@hub.com"),
        "grower": Account(username="Grower", password="Pass123@", email="grow@farm.in"),
    }

    assert storage.save(accounts) is None
    loaded = storage.load()

    assert set(loaded) == {"farmer", "grower"}
    assert loaded["grower"].username == "Grower"
    assert loaded["grower"].email == "grow@farm.in"


def test_one_record_per_line(storage, data_file):
    storage.save({"farmer": Account(username="farmer", password="Pass123!", email="farm@hub.com")})

    lines = data_file.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 1
    assert json.loads(lines[0]) == {
        "username": "farmer",
        "password": "Pass123!",
        "email": "farm@hub.com",
    }


def test_load_keys_by_lowercase_username(storage, data_file):
    _write_lines(data_file, [json.dumps({"username": "MixedCase", "password": "p", "email": "m@x.com"})])

    loaded = storage.load()
    assert list(loaded) == ["mixedcase"]


def test_blank_lines_and_extra_fields_ignored(storage, data_file):
    _write_lines(data_file, [
        "",
        json.dumps({"username": "farmer", "password": "Pass123!", "email": "farm@hub.com", "role": "x"}),
        "   ",
    ])

    loaded = storage.load()
    assert list(loaded) == ["farmer"]


def test_corrupt_file_returns_empty(storage, data_file):
    _write_lines(data_file, [
        json.dumps({"username": "farmer", "password": "Pass123!", "email": "farm@hub.com"}),
        "{not json",
    ])

    assert storage.load() == {}
    assert storage.last_error is not None
    assert storage.last_error.operation == "load"


def test_record_missing_field_is_corrupt(storage, data_file):
    _write_lines(data_file, [json.dumps({"username": "farmer"})])

    assert storage.load() == {}
    assert storage.last_error is not None


def test_non_object_record_is_corrupt(storage, data_file):
    _write_lines(data_file, ["[1, 2, 3]"])
    assert storage.load() == {}


def test_binary_garbage_is_corrupt(storage, data_file):
    data_file.write_bytes(b"\xac\xed\x00\x05sr\x00\x11java.util.HashMap")
    assert storage.load() == {}


def test_corrupt_file_falls_back_to_default_account(storage, data_file):
    data_file.write_text("garbage", encoding="utf-8")

    store = CredentialStore(storage)
    store.load()

    assert len(store) == 1
    assert store.authenticate("farmer", "Pass123!").success


def test_save_failure_is_returned_not_raised(tmp_path):
    target = tmp_path / "snapshot_dir"
    target.mkdir()
    storage = CredentialStorage(target)

    error = storage.save({})

    assert error is not None
    assert error.operation == "save"
    assert error.path == str(target)
    assert storage.last_error is error


def test_registrations_survive_restart(storage):
    store = CredentialStore(storage)
    store.load()
    store.register("grower", "Pass123@", "grow@farm.in")
    assert store.save() is None

    reloaded = CredentialStore(CredentialStorage(storage.path))
    reloaded.load()

    assert len(reloaded) == 2
    assert reloaded.authenticate("GROWER", "Pass123@").success
    assert reloaded.authenticate("farmer", "Pass123!").success
