"""Size budgets checked before any locale file is read or parsed."""

import logging
import os

from .errors import ReadError, SizeLimitExceeded

log = logging.getLogger(__name__)

MAX_FILE_BYTES = 10 * 1024 * 1024      # 10 MiB per file
MAX_TOTAL_BYTES = 100 * 1024 * 1024    # 100 MiB per batch


def check_sizes(sizes: list, max_file_bytes: int = MAX_FILE_BYTES,
                max_total_bytes: int = MAX_TOTAL_BYTES) -> int:
    """Validate a batch of ``(name, byte_length)`` pairs.

    Oversized files are reported by name; the aggregate budget only counts
    files that are within the per-file limit.  Either violation rejects the
    whole batch.

    Returns:
        The measured total of the accepted files, in bytes.

    Raises:
        SizeLimitExceeded: if any file or the batch total is over budget.
    """
    oversized = []
    total = 0
    for name, length in sizes:
        if length > max_file_bytes:
            oversized.append(name)
        else:
            total += length

    if oversized or total > max_total_bytes:
        log.warning("Rejected load batch: oversized=%s total=%d bytes",
                    oversized, total)
        raise SizeLimitExceeded(oversized, total, max_file_bytes, max_total_bytes)
    return total


def check_paths(paths: list, max_file_bytes: int = MAX_FILE_BYTES,
                max_total_bytes: int = MAX_TOTAL_BYTES) -> int:
    """Run :func:`check_sizes` on files on disk without reading them."""
    sizes = []
    for path in paths:
        name = os.path.basename(path)
        try:
            sizes.append((name, os.path.getsize(path)))
        except OSError as e:
            raise ReadError(name, e) from e
    return check_sizes(sizes, max_file_bytes, max_total_bytes)
