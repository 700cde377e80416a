"""
safety_checks.py - Safety Check Module

Provides the check performed before a rename is applied
"""

from pathlib import Path
from typing import Tuple, Optional
import os


def target_exists(path: Path) -> bool:
    """
    Check if anything occupies path (a dangling symlink counts)

    Args:
        path: Path to check

    Returns:
        Whether an entry exists at path

    Raises:
        OSError: Metadata lookup failed for a reason other than "not found"
    """
    try:
        os.lstat(path)
    except (FileNotFoundError, NotADirectoryError):
        return False
    return True


def is_case_only_change(src: Path, dst: Path) -> bool:
    """Whether src and dst differ only in letter case"""
    return str(src).casefold() == str(dst).casefold()


def check_rename_target(src: Path, dst: Path) -> Tuple[bool, Optional[str]]:
    """
    Check if renaming src to dst can go ahead without overwriting anything

    A case-only rename is allowed when the existing target is the source
    itself (case-insensitive filesystems report it as existing).

    Args:
        src: Source path
        dst: Destination path

    Returns:
        (is_allowed, reason)
    """
    try:
        exists = target_exists(dst)
    except OSError as e:
        return False, f"Cannot check destination \"{dst}\": {e}"

    if not exists:
        return True, None

    if is_case_only_change(src, dst):
        try:
            if os.path.samefile(src, dst):
                return True, None
        except OSError:
            pass

    return False, f"Destination \"{dst}\" already exists"
