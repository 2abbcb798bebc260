from __future__ import annotations

import json
import os

import pytest

from hack_or_snooze.session_store import Credentials, FileSessionStore, MemorySessionStore


@pytest.fixture
def file_store(tmp_path):
    return FileSessionStore(str(tmp_path / "nested" / "session.json"))


def test_memory_store():
    store = MemorySessionStore()
    assert store.load() is None
    store.save(Credentials(token="T", username="alice"))
    assert store.load() == Credentials(token="T", username="alice")
    store.clear()
    assert store.load() is None


def test_file_store_missing_file(file_store):
    assert file_store.load() is None


def test_file_store_save_and_load(file_store):
    file_store.save(Credentials(token="T", username="alice"))

    with open(file_store.path) as f:
        assert json.load(f) == {"token": "T", "username": "alice"}
    assert oct(os.stat(file_store.path).st_mode & 0o777) == oct(0o600)
    assert FileSessionStore(file_store.path).load() == Credentials(token="T", username="alice")


def test_file_store_clear(file_store):
    file_store.save(Credentials(token="T", username="alice"))
    file_store.clear()
    assert not os.path.exists(file_store.path)
    # clearing twice is fine
    file_store.clear()


def test_file_store_corrupt_file(tmp_path):
    path = tmp_path / "session.json"
    path.write_text("{not json")
    assert FileSessionStore(str(path)).load() is None


def test_file_store_incomplete_credentials(tmp_path):
    path = tmp_path / "session.json"
    path.write_text(json.dumps({"token": "T"}))
    assert FileSessionStore(str(path)).load() is None


def test_file_store_tightens_existing_file(tmp_path):
    path = tmp_path / "session.json"
    path.write_text("{}")
    os.chmod(path, 0o644)

    FileSessionStore(str(path)).save(Credentials(token="T", username="alice"))

    assert os.stat(path).st_mode & 0o777 == 0o600


def test_file_store_creates_file_owner_only(tmp_path):
    path = tmp_path / "session.json"
    old_umask = os.umask(0)
    try:
        FileSessionStore(str(path)).save(Credentials(token="T", username="alice"))
    finally:
        os.umask(old_umask)
    assert os.stat(path).st_mode & 0o777 == 0o600
