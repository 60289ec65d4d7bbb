from paletter.state import LocalStore, PersistentBinding
import json
import logging


def test_missing_key_loads_none():
    binding = PersistentBinding(LocalStore(), "colors")
    assert binding.load() is None


def test_save_then_load(file_store, store_path):
    PersistentBinding(file_store, "shades").save([5, 50, 95])

    reopened = LocalStore(store_path)
    assert PersistentBinding(reopened, "shades").load() == [5, 50, 95]
    assert json.loads(store_path.read_text(encoding="utf-8")) == {"shades": "[5, 50, 95]"}


def test_invalid_json_loads_none():
    store = LocalStore()
    store.set_item("colors", "[\"red\",")
    assert PersistentBinding(store, "colors").load() is None


def test_validator_rejection_loads_none():
    def only_lists(value):
        if not isinstance(value, list):
            raise TypeError("not a list")
        return value

    store = LocalStore()
    store.set_item("colors", "\"red\"")
    assert PersistentBinding(store, "colors", only_lists).load() is None

    store.set_item("colors", "[\"red\"]")
    assert PersistentBinding(store, "colors", only_lists).load() == ["red"]


def test_validator_can_convert():
    store = LocalStore()
    store.set_item("format", "\"lch\"")
    assert PersistentBinding(store, "format", str.upper).load() == "LCH"


def test_sync_writes_only_changes():
    writes = []

    class RecordingStore(LocalStore):
        def set_item(self, key, value):
            writes.append((key, value))
            super().set_item(key, value)

    binding = PersistentBinding(RecordingStore(), "swap-colors")
    assert binding.sync(False) is True
    assert binding.sync(False) is False
    assert binding.sync(True) is True
    assert writes == [("swap-colors", "false"), ("swap-colors", "true")]


def test_sync_after_load_skips_unchanged():
    store = LocalStore()
    store.set_item("format", "\"rgb\"")
    binding = PersistentBinding(store, "format")
    binding.load()
    assert binding.sync("rgb") is False


def test_failed_write_is_logged(failing_store, caplog):
    binding = PersistentBinding(failing_store, "colors")
    with caplog.at_level(logging.WARNING, logger="paletter"):
        binding.save(["red"])
    assert "Skipping save" in caplog.text
    assert failing_store.get_item("colors") is None
    # still considered unsaved, so the next sync retries
    assert binding.sync(["red"]) is True


def test_unserializable_value_is_dropped(caplog):
    store = LocalStore()
    binding = PersistentBinding(store, "colors")
    with caplog.at_level(logging.WARNING, logger="paletter"):
        binding.save({1, 2})
    assert "Cannot serialize" in caplog.text
    assert "colors" not in store


def test_corrupt_store_file_is_ignored(store_path, caplog):
    store_path.parent.mkdir(parents=True)
    store_path.write_text("{not json", encoding="utf-8")
    with caplog.at_level(logging.WARNING, logger="paletter"):
        store = LocalStore(store_path)
    assert store.keys() == []
    assert "unreadable" in caplog.text


def test_non_string_entries_are_skipped(store_path):
    store_path.parent.mkdir(parents=True)
    store_path.write_text(json.dumps({"colors": "[]", "shades": [1, 2]}), encoding="utf-8")
    store = LocalStore(store_path)
    assert store.keys() == ["colors"]


def test_remove_item(file_store, store_path):
    file_store.set_item("format", "\"hex\"")
    file_store.remove_item("format")
    file_store.remove_item("missing")
    assert "format" not in file_store
    assert json.loads(store_path.read_text(encoding="utf-8")) == {}
