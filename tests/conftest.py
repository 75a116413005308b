"""
Pytest configuration and shared fixtures for locale editor tests.
"""
import json

import pytest
from PyQt6.QtCore import QCoreApplication

from locale_editor.store_model import TranslationStore


def as_file(name, data):
    """Encode a dict as a ``(name, bytes)`` load input."""
    return (name, json.dumps(data).encode("utf-8"))


@pytest.fixture(scope="session")
def qapp():
    """Core application instance for tests that create Qt objects"""
    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication([])
    return app


@pytest.fixture
def store():
    """Empty store"""
    return TranslationStore()


@pytest.fixture
def loaded_store():
    """Store with en/fr loaded; fr lacks 'farewell' and 'en' is selected"""
    s = TranslationStore()
    s.load([
        as_file("en.json", {"greeting": "Hello", "farewell": "Bye", "title": ""}),
        as_file("fr.json", {"greeting": "Bonjour", "title": "Titre"}),
    ])
    return s


@pytest.fixture
def locale_dir(tmp_path):
    """Directory with en.json, fr.json and a broken de.json"""
    (tmp_path / "en.json").write_text('{"a": "x", "b": ""}', encoding="utf-8")
    (tmp_path / "fr.json").write_text('{"a": "y", "c": "z"}', encoding="utf-8")
    (tmp_path / "de.json").write_text('{"a": ', encoding="utf-8")
    return tmp_path
