"""
Unit tests for the display query engine.
"""
from conftest import as_file
from locale_editor.query import display_order, matches, visible_keys


class TestVisibleKeys:
    """Tests for visible_keys"""

    def test_empty_values_first_then_alphabetical(self, store):
        store.load([as_file("en.json", {"z": "", "a": "x", "m": ""})])
        assert visible_keys(store, "en", "") == ["m", "z", "a"]

    def test_unknown_locale(self, loaded_store):
        assert visible_keys(loaded_store, "de", "") == []

    def test_empty_store(self, store):
        assert visible_keys(store, "en") == []

    def test_query_matches_key_case_insensitively(self, loaded_store):
        assert visible_keys(loaded_store, "en", "GREET") == ["greeting"]

    def test_query_matches_value(self, loaded_store):
        assert visible_keys(loaded_store, "fr", "bonj") == ["greeting"]

    def test_query_without_match(self, loaded_store):
        assert visible_keys(loaded_store, "en", "zzz") == []

    def test_filter_keeps_display_order(self, store):
        store.load([as_file("en.json", {
            "menu.b": "Open", "menu.a": "Close", "menu.c": "", "other": "menu",
        })])
        assert visible_keys(store, "en", "menu") == ["menu.c", "menu.a", "menu.b", "other"]

    def test_does_not_mutate_store(self, loaded_store):
        before = {k: dict(v) for k, v in loaded_store.translations.items()}
        visible_keys(loaded_store, "fr", "t")
        assert loaded_store.translations == before
        assert loaded_store.dirty is False


class TestHelpers:
    """Tests for matches and display_order"""

    def test_matches(self):
        assert matches("app.Title", "", "title")
        assert matches("k", "Straße", "STRASSE")
        assert not matches("a", "b", "c")

    def test_display_order(self):
        items = [("b", "x"), ("c", ""), ("a", "y")]
        assert sorted(items, key=display_order) == [("c", ""), ("a", "y"), ("b", "x")]
