"""
Unit tests for locale stores.
"""

import json

import pytest
from structlog.testing import capture_logs

from i18n_sync.config import SyncConfig
from i18n_sync.errors import LocaleStoreError, TranslationFileError
from i18n_sync.localization import FileLocaleStore, LocaleStore, MemoryLocaleStore
from i18n_sync.localization.store import dump_tree


class TestLocaleStoreContract:
    """Test the abstract store base."""

    def test_cannot_instantiate_base(self):
        with pytest.raises(TypeError):
            LocaleStore()

    def test_subclass_must_implement_every_method(self):
        class ListOnlyStore(LocaleStore):
            def list_locales(self):
                return []

        with pytest.raises(TypeError):
            ListOnlyStore()


class TestFileLocaleStore:
    """Test the JSON file store."""

    def test_list_locales_sorted_directories_only(self, config, locales_dir, write_locale):
        write_locale("fr", {})
        write_locale("de", {})
        (locales_dir / "en").mkdir()
        (locales_dir / "README.md").write_text("not a locale")

        store = FileLocaleStore(config)
        assert store.list_locales() == ["de", "en", "fr"]

    def test_list_locales_missing_root(self, temp_dir):
        store = FileLocaleStore(SyncConfig(locales_dir=temp_dir / "nope"))

        with pytest.raises(LocaleStoreError) as exc_info:
            store.list_locales()

        assert exc_info.value.context["root"] == str(temp_dir / "nope")

    def test_path_for(self, config, locales_dir):
        store = FileLocaleStore(config)
        assert store.path_for("uk") == locales_dir / "uk" / "common.json"

    def test_custom_file_name(self, locales_dir):
        store = FileLocaleStore(SyncConfig(locales_dir=locales_dir, file_name="messages.json"))
        assert store.path_for("uk") == locales_dir / "uk" / "messages.json"

    def test_load(self, config, write_locale):
        write_locale("de", {"a": {"b": "Hallo"}})
        assert FileLocaleStore(config).load("de") == {"a": {"b": "Hallo"}}

    def test_load_missing_file_is_empty(self, config, locales_dir):
        (locales_dir / "es").mkdir()
        assert FileLocaleStore(config).load("es") == {}

    def test_load_malformed_file_is_empty(self, config, write_locale):
        write_locale("it", '{"a": "unterminated')
        assert FileLocaleStore(config).load("it") == {}

    def test_load_non_object_is_empty(self, config, write_locale):
        write_locale("it", '["a", "b"]')
        assert FileLocaleStore(config).load("it") == {}

    def test_strict_load_malformed_raises(self, locales_dir, write_locale):
        path = write_locale("it", "{not json}")
        store = FileLocaleStore(SyncConfig(locales_dir=locales_dir, strict=True))

        with pytest.raises(TranslationFileError) as exc_info:
            store.load("it")

        assert exc_info.value.context == {"locale": "it", "file": str(path)}
        assert exc_info.value.previous_error is not None

    def test_strict_load_missing_file_is_empty(self, locales_dir):
        store = FileLocaleStore(SyncConfig(locales_dir=locales_dir, strict=True))
        assert store.load("pt") == {}

    def test_save_creates_directories_and_formats(self, config, locales_dir):
        store = FileLocaleStore(config)
        store.save("uk", {"app": {"title": "Панель"}, "n": 1})

        text = (locales_dir / "uk" / "common.json").read_text(encoding="utf-8")
        assert text == '{\n  "app": {\n    "title": "Панель"\n  },\n  "n": 1\n}\n'

    def test_save_then_load_preserves_order(self, config):
        store = FileLocaleStore(config)
        tree = {"z": "1", "a": {"y": "2", "b": "3"}}
        store.save("nl", tree)

        loaded = store.load("nl")
        assert list(loaded) == ["z", "a"]
        assert list(loaded["a"]) == ["y", "b"]

    def test_dump_tree_single_trailing_newline(self):
        text = dump_tree({"a": "b"})
        assert text.endswith("}\n")
        assert not text.endswith("\n\n")
        assert json.loads(text) == {"a": "b"}


class TestMemoryLocaleStore:
    """Test the in-memory store."""

    def test_list_and_load(self):
        store = MemoryLocaleStore({"fr": {"a": "b"}, "en": {"a": "c"}})
        assert store.list_locales() == ["en", "fr"]
        assert store.load("fr") == {"a": "b"}
        assert store.load("xx") == {}

    def test_missing_locale_logged_with_component(self):
        with capture_logs() as logs:
            store = MemoryLocaleStore()
            store.load("xx")

        assert logs == [{
            "event": "Translation tree does not exist",
            "log_level": "warning",
            "component": "locale_store",
            "locale": "xx",
        }]

    def test_load_returns_copy(self):
        store = MemoryLocaleStore({"fr": {"a": {"b": "c"}}})
        tree = store.load("fr")
        tree["a"]["b"] = "changed"
        assert store.load("fr") == {"a": {"b": "c"}}

    def test_save_records_writes(self):
        store = MemoryLocaleStore()
        store.save("de", {"a": "b"})
        assert store.trees == {"de": {"a": "b"}}
        assert store.writes == ["de"]
