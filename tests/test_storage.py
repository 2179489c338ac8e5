from habitflow.habits.storage import KeyValueStorage


def test_missing_key_returns_none(storage):
    assert storage.get_item("habits") is None


def test_set_and_replace(storage):
    storage.set_item("habits", "[]")
    storage.set_item("habits", '[{"a": 1}]')
    assert storage.get_item("habits") == '[{"a": 1}]'


def test_creates_parent_directory_and_persists(tmp_path):
    path = tmp_path / "nested" / "dir" / "kv.db"
    KeyValueStorage(str(path)).set_item("k", "v")

    assert path.exists()
    assert KeyValueStorage(str(path)).get_item("k") == "v"
