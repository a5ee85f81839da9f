# test_storage.py

import json

from storage import JsonFileStore, MemoryStore, slot_key


def test_slot_key_is_namespaced():
    assert slot_key("default") == "lines_default"


def test_memory_store():
    store = MemoryStore()
    assert store.get("a") is None
    store.set("a", "1")
    assert store.get("a") == "1"


def test_json_file_store_persists_between_instances(tmp_path):
    path = tmp_path / "nested" / "store.json"
    JsonFileStore(str(path)).set("lines_x", '{"num_points": 5}')
    JsonFileStore(str(path)).set("lines_y", "{}")

    store = JsonFileStore(str(path))
    assert store.get("lines_x") == '{"num_points": 5}'
    assert store.get("lines_y") == "{}"
    assert store.get("lines_z") is None


def test_json_file_store_missing_file_is_empty(tmp_path):
    assert JsonFileStore(str(tmp_path / "none.json")).get("lines_default") is None


def test_json_file_store_corrupt_file_is_empty(tmp_path):
    path = tmp_path / "store.json"
    path.write_text("{definitely not json")
    store = JsonFileStore(str(path))
    assert store.get("lines_default") is None

    store.set("lines_default", "{}")
    assert json.loads(path.read_text()) == {"lines_default": "{}"}


def test_json_file_store_ignores_non_object_content(tmp_path):
    path = tmp_path / "store.json"
    path.write_text("[1, 2, 3]")
    assert JsonFileStore(str(path)).get("lines_default") is None


def test_json_file_store_ignores_non_string_values(tmp_path):
    path = tmp_path / "store.json"
    path.write_text(json.dumps({"lines_default": {"num_points": 3}}))
    assert JsonFileStore(str(path)).get("lines_default") is None
