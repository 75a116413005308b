"""Locale Editor: load, inspect and re-export flat JSON translation files.

Launch with: python main.py en.json fr.json [--export OUT_DIR]
"""

import argparse
import logging
import os
import sys

from PyQt6.QtCore import QCoreApplication

from locale_editor.io_engine import IOEngine
from locale_editor.query import visible_keys
from locale_editor.settings import SETTINGS_FILE, Settings
from locale_editor.store_model import TranslationStore


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Flat JSON locale editor")
    parser.add_argument("files", nargs="+", help="locale JSON files (en.json, fr.json, ...)")
    parser.add_argument("--export", metavar="DIR", help="write every locale to DIR")
    parser.add_argument("--locale", help="locale to list keys for (default: first loaded)")
    parser.add_argument("--query", default="", help="only list keys/values containing this text")
    parser.add_argument("--settings", default=SETTINGS_FILE, help="settings file path")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def print_summary(store: TranslationStore, locale: str, query: str):
    for stats in store.all_stats():
        marker = "*" if stats.locale == store.selected_locale else " "
        print(f"{marker} {stats.locale.upper():<10} {stats.total} translation keys, "
              f"{stats.missing} missing")
    keys = visible_keys(store, locale, query)
    print(f"\n{locale}: {len(keys)} keys")
    for key in keys:
        value = store.translations[locale][key]
        print(f"  {key} = {value!r}" if value else f"  {key} (missing)")


def main():
    args = build_parser().parse_args()
    settings = Settings.load(args.settings)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = QCoreApplication(sys.argv)
    app.setApplicationName("Locale Editor")

    store = TranslationStore(settings.max_file_bytes, settings.max_total_bytes)
    engine = IOEngine(store)
    status = {"code": 0, "stage": "load"}

    def on_loaded(result):
        for err in result.errors:
            print(f"Error parsing {err.name}: {err.reason}", file=sys.stderr)
            status["code"] = 1
        locale = args.locale or store.selected_locale
        if locale not in store:
            print(f"Locale not loaded: {locale}", file=sys.stderr)
            status["code"] = 1
        else:
            print_summary(store, locale, args.query)
        settings.last_open_dir = os.path.dirname(os.path.abspath(args.files[0]))
        settings.save(args.settings)

    def on_exported(result):
        for path in result.paths:
            print(f"Exported {path}")
        settings.last_export_dir = args.export
        settings.save(args.settings)

    def on_failed(operation, exc):
        print(f"Error during {operation}: {exc}", file=sys.stderr)
        status["code"] = 1

    def on_job_finished():
        if status["stage"] == "load" and args.export and not store.is_empty:
            status["stage"] = "export"
            engine.export_all(args.export)
            return
        app.exit(status["code"])

    engine.load_finished.connect(on_loaded)
    engine.export_finished.connect(on_exported)
    engine.failed.connect(on_failed)
    engine.finished.connect(on_job_finished)
    engine.load_paths(args.files)

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
