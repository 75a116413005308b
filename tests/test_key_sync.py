"""
Unit tests for cross-locale key synchronization.
"""
from locale_editor.key_sync import missing_keys, synchronize_keys


class TestSynchronizeKeys:
    """Tests for synchronize_keys"""

    def test_fills_union_with_empty_values(self):
        data = {"en": {"a": "1", "b": "2"}, "fr": {"b": "deux", "c": "trois"}}
        synchronize_keys(data)
        assert set(data["en"]) == set(data["fr"]) == {"a", "b", "c"}
        assert data["en"]["c"] == ""
        assert data["fr"]["a"] == ""

    def test_existing_values_untouched(self):
        data = {"en": {"a": "1"}, "fr": {"a": "un"}}
        synchronize_keys(data)
        assert data == {"en": {"a": "1"}, "fr": {"a": "un"}}

    def test_idempotent(self):
        data = {"en": {"a": "1"}, "fr": {"b": "2"}, "de": {}}
        once = synchronize_keys(data)
        snapshot = {k: dict(v) for k, v in once.items()}
        assert synchronize_keys(once) == snapshot

    def test_empty_map(self):
        assert synchronize_keys({}) == {}


class TestMissingKeys:
    """Tests for missing_keys"""

    def test_reports_gaps_per_locale(self):
        data = {"en": {"a": "", "b": ""}, "fr": {"a": ""}}
        assert missing_keys(data) == {"fr": ["b"]}

    def test_no_gaps(self):
        assert missing_keys({"en": {"a": ""}, "fr": {"a": "x"}}) == {}
