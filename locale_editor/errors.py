"""Exceptions raised by the locale store, exporter and I/O engine."""


class LocaleEditorError(Exception):
    """Base class for every recoverable locale editor error."""


class SizeLimitExceeded(LocaleEditorError):
    """A load batch broke the per-file or aggregate size budget."""

    def __init__(self, oversized: list, total_bytes: int,
                 max_file_bytes: int, max_total_bytes: int):
        self.oversized = list(oversized)
        self.total_bytes = total_bytes
        self.max_file_bytes = max_file_bytes
        self.max_total_bytes = max_total_bytes
        if self.oversized:
            msg = (f"{len(self.oversized)} file(s) larger than "
                   f"{max_file_bytes} bytes: {', '.join(self.oversized)}")
        else:
            msg = (f"Files total {total_bytes} bytes "
                   f"(limit {max_total_bytes})")
        super().__init__(msg)


class ParseError(LocaleEditorError):
    """One input file could not be decoded into a flat JSON object."""

    def __init__(self, name: str, reason: str):
        self.name = name
        self.reason = reason
        super().__init__(f"Error parsing {name}: {reason}")


class ReadError(LocaleEditorError):
    """An input file could not be read from disk."""

    def __init__(self, name: str, cause: OSError):
        self.name = name
        self.cause = cause
        super().__init__(f"Could not read {name}: {cause}")


class EmptyResultError(LocaleEditorError):
    """No file in a load batch parsed; the previous store is kept."""

    def __init__(self, errors: list):
        self.errors = list(errors)
        super().__init__("No valid JSON files were loaded")


class NotFoundError(LocaleEditorError):
    """An operation referenced a locale that is not loaded."""

    def __init__(self, locale: str):
        self.locale = locale
        super().__init__(f"Locale not loaded: {locale}")


class NoOpError(LocaleEditorError):
    """An edit had nothing to act on (empty store, unknown locale or key)."""


class ExportError(LocaleEditorError):
    """Writing a locale file failed; the target file must be treated as corrupt."""

    def __init__(self, locale: str, path: str, cause: OSError):
        self.locale = locale
        self.path = path
        self.cause = cause
        super().__init__(f"Error exporting {locale} to {path}: {cause}")


class StoreBusyError(LocaleEditorError):
    """A load or export is already running against the store."""
