"""I/O engine: runs locale loads and exports on a Qt worker thread."""

import logging
import os

from PyQt6.QtCore import QObject, QThread, pyqtSignal

from .errors import LocaleEditorError, ReadError
from .exporter import export_all, export_locale
from .resource_guard import check_paths
from .store_model import TranslationStore

log = logging.getLogger(__name__)


def read_files(paths: list) -> list:
    """Read files as ``(base_name, bytes)`` pairs for TranslationStore.load."""
    files = []
    for path in paths:
        try:
            with open(path, "rb") as f:
                files.append((os.path.basename(path), f.read()))
        except OSError as e:
            raise ReadError(os.path.basename(path), e) from e
    return files


class LoadWorker(QObject):
    """Checks sizes on disk, reads the files and loads them into the store."""

    loaded = pyqtSignal(object)             # LoadResult
    error = pyqtSignal(str, object)         # operation, exception
    finished = pyqtSignal()

    def __init__(self, store: TranslationStore, paths: list):
        super().__init__()
        self.store = store
        self.paths = list(paths)

    def run(self):
        try:
            check_paths(self.paths, self.store.max_file_bytes, self.store.max_total_bytes)
            result = self.store.load(read_files(self.paths))
        except (LocaleEditorError, OSError) as e:
            log.warning("Load failed: %s", e)
            self.error.emit("load", e)
        except Exception as e:
            log.exception("Unexpected error during load")
            self.error.emit("load", e)
        else:
            self.loaded.emit(result)
        finally:
            self.finished.emit()


class ExportWorker(QObject):
    """Exports one locale, or every locale when ``locale`` is None."""

    exported = pyqtSignal(object)           # ExportResult
    error = pyqtSignal(str, object)
    finished = pyqtSignal()

    def __init__(self, store: TranslationStore, output_dir: str, locale: str = None):
        super().__init__()
        self.store = store
        self.output_dir = output_dir
        self.locale = locale

    def run(self):
        try:
            if self.locale is None:
                result = export_all(self.store, self.output_dir)
            else:
                result = export_locale(self.store, self.locale, self.output_dir)
        except (LocaleEditorError, OSError) as e:
            self.error.emit("export", e)
        except Exception as e:
            log.exception("Unexpected error during export")
            self.error.emit("export", e)
        else:
            self.exported.emit(result)
        finally:
            self.finished.emit()


class IOEngine(QObject):
    """Starts one background load/export at a time for a store."""

    load_finished = pyqtSignal(object)      # LoadResult
    export_finished = pyqtSignal(object)    # ExportResult
    failed = pyqtSignal(str, object)        # operation, exception
    finished = pyqtSignal()

    def __init__(self, store: TranslationStore, parent=None):
        super().__init__(parent)
        self.store = store
        self._thread = None
        self._worker = None

    @property
    def is_running(self) -> bool:
        return self._thread is not None

    def load_paths(self, paths: list) -> bool:
        """Start loading ``paths``.  Returns False if a job is already running."""
        if self.is_running:
            return False
        worker = LoadWorker(self.store, paths)
        worker.loaded.connect(self.load_finished)
        return self._start(worker)

    def export_locale(self, locale: str, output_dir: str) -> bool:
        if self.is_running:
            return False
        worker = ExportWorker(self.store, output_dir, locale)
        worker.exported.connect(self.export_finished)
        return self._start(worker)

    def export_all(self, output_dir: str) -> bool:
        if self.is_running:
            return False
        worker = ExportWorker(self.store, output_dir)
        worker.exported.connect(self.export_finished)
        return self._start(worker)

    def _start(self, worker: QObject) -> bool:
        thread = QThread()
        worker.moveToThread(thread)
        thread.started.connect(worker.run)
        worker.error.connect(self.failed)
        worker.finished.connect(self._on_worker_finished)

        self._thread = thread
        self._worker = worker
        thread.start()
        return True

    def _on_worker_finished(self):
        """Stop the thread and relay completion."""
        if self._thread is not None:
            self._thread.quit()
            self._thread.wait()
        self._thread = None
        self._worker = None
        self.finished.emit()
