"""
scan_files.py - File Scanning Module

Provides the directory walk that produces the listing entries
"""

from pathlib import Path
from typing import List, Optional
import logging
import re
import os

from natsort import natsorted, ns

from .models_fs import Entry, EntryKind
from .listing_codec import is_listable

logger = logging.getLogger(__name__)


def _is_hidden(name: str) -> bool:
    return name.startswith('.')


def _log_walk_error(error: OSError) -> None:
    logger.warning("Cannot read %s: %s", error.filename, error.strerror or error)


def sort_entries(entries: List[Entry]) -> List[Entry]:
    """Sort entries by path in natural order (file2 before file10)"""
    return natsorted(entries, key=lambda e: e.path, alg=ns.PATH)


def scan_entries(
    root: Path,
    pattern: Optional[re.Pattern] = None,
    recursive: bool = False,
    include_dirs: bool = False,
    include_hidden: bool = False
) -> List[Entry]:
    """
    Scan a directory for entries to put in the listing

    Args:
        root: Root directory (not listed itself)
        pattern: Regular expression searched in the relative path (None matches all)
        recursive: Whether to descend into subdirectories
        include_dirs: Whether to list directories as well as files
        include_hidden: Whether to include entries starting with '.'

    Returns:
        Entries with paths relative to root, in natural path order
    """
    root = Path(root)
    if not root.is_dir():
        raise ValueError(f"Directory does not exist: {root}")

    results: List[Entry] = []

    for dirpath, dirnames, filenames in os.walk(root, onerror=_log_walk_error):
        current_dir = Path(dirpath)

        # Prune hidden directories in place so os.walk does not enter them
        if not include_hidden:
            dirnames[:] = [d for d in dirnames if not _is_hidden(d)]

        candidates = [(name, EntryKind.FILE) for name in filenames]
        for name in dirnames:
            # Symlinks to directories are removed like files, never as trees
            if (current_dir / name).is_symlink():
                candidates.append((name, EntryKind.FILE))
            elif include_dirs:
                candidates.append((name, EntryKind.DIRECTORY))

        for name, kind in candidates:
            if not include_hidden and _is_hidden(name):
                continue

            rel_path = str((current_dir / name).relative_to(root))

            if pattern is not None and not pattern.search(rel_path):
                continue

            if not is_listable(rel_path):
                logger.warning("Skipping %r: name cannot be represented in the listing", rel_path)
                continue

            results.append(Entry(kind=kind, path=rel_path))

        if not recursive:
            break

    logger.debug("Scanned %s: %d entries", root, len(results))
    return sort_entries(results)
