"""Data model for loaded locale dictionaries and editor state."""

import json
import logging
import os
import threading
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Optional

from .errors import (
    EmptyResultError, NoOpError, NotFoundError, ParseError, StoreBusyError,
)
from .key_sync import missing_keys, synchronize_keys
from .resource_guard import MAX_FILE_BYTES, MAX_TOTAL_BYTES, check_sizes

log = logging.getLogger(__name__)


@dataclass
class LoadResult:
    """Outcome of a successful load: locales in input order plus per-file errors."""
    loaded_locales: list = field(default_factory=list)
    errors: list = field(default_factory=list)  # ParseError instances


@dataclass
class LocaleStats:
    """Key counts shown next to a locale in the locale list."""
    locale: str
    total: int = 0
    missing: int = 0    # keys whose value is ""

    @property
    def translated(self) -> int:
        return self.total - self.missing


def locale_id_from_name(name: str) -> str:
    """Derive a LocaleId from a file name: ``path/to/fr.json`` -> ``fr``."""
    return os.path.splitext(os.path.basename(name))[0]


def coerce_value(value) -> str:
    """Strings pass through; anything else becomes the missing marker ""."""
    return value if isinstance(value, str) else ""


def parse_locale_file(name: str, content: bytes) -> dict:
    """Decode one file into a flat {key: str} dictionary.

    Raises:
        ParseError: on invalid UTF-8, invalid JSON, JSON Python cannot
            represent (huge integers, deep nesting) or a non-object root.

    Empty keys are dropped.
    """
    try:
        text = content.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise ParseError(name, f"not valid UTF-8 ({e.reason})") from e
    try:
        data = json.loads(text)
    except (ValueError, RecursionError) as e:
        # JSONDecodeError is a ValueError; so is the int digit-limit error
        raise ParseError(name, str(e) or type(e).__name__) from e
    if not isinstance(data, dict):
        raise ParseError(name, f"top-level value is {type(data).__name__}, expected object")
    if "" in data:
        log.warning("%s: dropped empty key", name)
    return {key: coerce_value(value) for key, value in data.items() if key}


class TranslationStore:
    """Holds every loaded locale dictionary plus selection and dirty state.

    All locales share one key set after :meth:`load` and :meth:`add_key`.
    Loads, exports and mutations all hold a non-reentrant guard; while it is
    held every other load, export or mutation raises :class:`StoreBusyError`.
    """

    def __init__(self, max_file_bytes: int = MAX_FILE_BYTES,
                 max_total_bytes: int = MAX_TOTAL_BYTES):
        self.max_file_bytes = max_file_bytes
        self.max_total_bytes = max_total_bytes
        self.translations: dict = {}          # locale -> {key: value}
        self.selected_locale: Optional[str] = None
        self.dirty = False
        self._unsaved_locales: set = set()   # locales edited since last export
        self._io_lock = threading.Lock()

    # ── Read access ──────────────────────────────────────────────

    @property
    def is_empty(self) -> bool:
        return not self.translations

    @property
    def locales(self) -> list:
        return list(self.translations)

    @property
    def unsaved_locales(self) -> list:
        """Locales with edits not yet written by an export, in store order."""
        return [loc for loc in self.translations if loc in self._unsaved_locales]

    @property
    def busy(self) -> bool:
        return self._io_lock.locked()

    def __contains__(self, locale) -> bool:
        return locale in self.translations

    def get_locale(self, locale: str) -> dict:
        """Return the live dictionary for a locale."""
        try:
            return self.translations[locale]
        except KeyError:
            raise NotFoundError(locale) from None

    def get_value(self, locale: str, key: str) -> str:
        return self.get_locale(locale).get(key, "")

    def key_count(self) -> int:
        """Number of keys every locale shares."""
        if not self.translations:
            return 0
        return len(next(iter(self.translations.values())))

    def stats(self, locale: str) -> LocaleStats:
        data = self.get_locale(locale)
        missing = sum(1 for v in data.values() if v == "")
        return LocaleStats(locale=locale, total=len(data), missing=missing)

    def all_stats(self) -> list:
        return [self.stats(loc) for loc in self.translations]

    # ── Guard ─────────────────────────────────────────────────────

    @contextmanager
    def io_operation(self, name: str):
        """Hold the store guard for the duration of the block.

        Loads, exports and every mutation run under it, so an edit can never
        interleave with a load swapping out the dictionaries.
        """
        if not self._io_lock.acquire(blocking=False):
            log.debug("Rejected %s: the store is busy", name)
            raise StoreBusyError(f"Cannot {name} while a load or export is running")
        try:
            yield
        finally:
            self._io_lock.release()

    # ── Load ──────────────────────────────────────────────────────

    def load(self, files: list) -> LoadResult:
        """Replace the store with the contents of ``files``.

        Args:
            files: ``(file_name, content_bytes)`` pairs.  The LocaleId is the
                file name without extension; a later duplicate wins.

        Returns:
            LoadResult with the loaded locales and any per-file ParseErrors.

        Raises:
            SizeLimitExceeded: batch over budget; nothing was parsed.
            EmptyResultError: no file parsed; the previous store is kept.
        """
        with self.io_operation("load"):
            check_sizes([(name, len(content)) for name, content in files],
                        self.max_file_bytes, self.max_total_bytes)

            new_translations = {}
            errors = []
            for name, content in files:
                try:
                    data = parse_locale_file(name, content)
                except ParseError as e:
                    log.warning("%s", e)
                    errors.append(e)
                    continue
                new_translations[locale_id_from_name(name)] = data

            if not new_translations:
                raise EmptyResultError(errors)

            gaps = missing_keys(new_translations)
            if gaps:
                log.info("Filled %d missing key(s) across %d locale(s)",
                         sum(len(g) for g in gaps.values()), len(gaps))
            synchronize_keys(new_translations)

            self.translations = new_translations
            self.selected_locale = next(iter(new_translations))
            self.dirty = False
            self._unsaved_locales = set()

        log.info("Loaded %d locale(s) with %d key(s), %d file(s) failed",
                 len(new_translations), self.key_count(), len(errors))
        return LoadResult(loaded_locales=list(new_translations), errors=errors)

    # ── Mutations ────────────────────────────────────────────────

    def update(self, locale: str, key: str, value: str):
        """Set one value.  Raises NoOpError if there is nothing to edit."""
        with self.io_operation("update"):
            if not isinstance(value, str):
                raise NoOpError(f"Value for {key} must be a string, got {type(value).__name__}")
            if not self.translations:
                raise NoOpError("No locales loaded")
            data = self.translations.get(locale)
            if data is None:
                raise NoOpError(f"Locale not loaded: {locale}")
            if key not in data:
                raise NoOpError(f"Unknown key: {key}")
            data[key] = value
            self._mark_dirty([locale])

    def add_key(self, key: str):
        """Add ``key`` with an empty value to every locale lacking it."""
        with self.io_operation("add key"):
            if not key:
                raise NoOpError("Key must not be empty")
            if not self.translations:
                raise NoOpError("No locales loaded")
            changed = [loc for loc, data in self.translations.items() if key not in data]
            for loc in changed:
                self.translations[loc][key] = ""
            if changed:
                self._mark_dirty(changed)

    def close_locale(self, locale: str):
        """Remove a locale, moving the selection to the first remaining one."""
        with self.io_operation("close locale"):
            if locale not in self.translations:
                raise NotFoundError(locale)
            del self.translations[locale]
            self._unsaved_locales.discard(locale)

            if self.selected_locale == locale:
                self.selected_locale = next(iter(self.translations), None)
            if not self.translations:
                self.dirty = False

    def select_locale(self, locale: str):
        with self.io_operation("select locale"):
            if locale not in self.translations:
                raise NotFoundError(locale)
            self.selected_locale = locale

    # ── Dirty tracking ───────────────────────────────────────────

    def _mark_dirty(self, locales: list):
        self._unsaved_locales.update(locales)
        self.dirty = True

    def mark_exported(self, locales: list):
        """Record that ``locales`` were written; dirty clears once none remain."""
        self._unsaved_locales.difference_update(locales)
        if not self._unsaved_locales:
            self.dirty = False
