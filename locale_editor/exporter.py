"""Canonical JSON export of locale dictionaries."""

import json
import logging
import os
from dataclasses import dataclass, field

from .errors import ExportError, NotFoundError

log = logging.getLogger(__name__)


@dataclass
class ExportResult:
    """Locales written by an export and the files they went to."""
    locales: list = field(default_factory=list)
    paths: list = field(default_factory=list)


def render_locale(data: dict) -> str:
    """Serialize a dictionary with keys in ascending order and 2-space indent.

    Non-ASCII text is kept as-is; no trailing newline is added.
    """
    ordered = {k: data[k] for k in sorted(data)}
    return json.dumps(ordered, ensure_ascii=False, indent=2)


def locale_path(output_dir: str, locale: str) -> str:
    return os.path.join(output_dir, f"{locale}.json")


def write_locale(output_dir: str, locale: str, data: dict) -> str:
    """Write ``<output_dir>/<locale>.json``, overwriting any existing file."""
    path = locale_path(output_dir, locale)
    try:
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(render_locale(data))
    except OSError as e:
        log.error("Export of %s to %s failed: %s", locale, path, e)
        raise ExportError(locale, path, e) from e
    return path


def export_locale(store, locale: str, output_dir: str) -> ExportResult:
    """Export one locale of ``store``.

    Only this locale's unsaved mark is cleared; the store stays dirty while
    other locales still hold unexported edits.

    Raises:
        NotFoundError: locale is not loaded.
        ExportError: the file could not be written.
        StoreBusyError: another load/export holds the store.
    """
    with store.io_operation("export"):
        if locale not in store:
            raise NotFoundError(locale)
        path = write_locale(output_dir, locale, store.translations[locale])
        store.mark_exported([locale])
    log.info("Exported %s to %s", locale, path)
    return ExportResult(locales=[locale], paths=[path])


def export_all(store, output_dir: str) -> ExportResult:
    """Export every locale, stopping at the first failed write."""
    result = ExportResult()
    with store.io_operation("export"):
        for locale, data in store.translations.items():
            result.paths.append(write_locale(output_dir, locale, data))
            result.locales.append(locale)
        store.mark_exported(result.locales)
    log.info("Exported %d locale(s) to %s", len(result.locales), output_dir)
    return result
