"""
exec_actions.py - Action Execution Module

Responsibilities:
- Delete files and directory trees
- Rename entries after the destination safety check
- Keep going when a single action fails (no rollback)
- dry_run support
"""

from pathlib import Path
from typing import Callable, Optional, Sequence
import logging
import os
import shutil

from .models_fs import Action, ActionResult
from .safety_checks import check_rename_target

logger = logging.getLogger(__name__)


class SkippedAction(Exception):
    """Action was not applied because the safety check refused it"""


def _resolve(path: str, base: Optional[Path]) -> Path:
    return Path(base, path) if base is not None else Path(path)


def apply_action(action: Action, base: Optional[Path] = None) -> None:
    """
    Apply a single action to the filesystem

    Args:
        action: Action to apply
        base: Directory the listing paths are relative to (default: cwd)

    Raises:
        SkippedAction: Rename refused by the destination check
        OSError: The underlying filesystem call failed
    """
    src = _resolve(action.entry.path, base)

    if action.is_delete:
        if action.entry.is_dir:
            shutil.rmtree(src)
        else:
            os.remove(src)
        logger.info("Removed %s", src)
        return

    dst = _resolve(action.target, base)
    allowed, reason = check_rename_target(src, dst)
    if not allowed:
        raise SkippedAction(reason)

    os.rename(src, dst)
    logger.info("Renamed %s -> %s", src, dst)


def execute_actions(
    actions: Sequence[Action],
    base: Optional[Path] = None,
    dry_run: bool = False,
    progress_callback: Optional[Callable[[int, int, str], None]] = None
) -> ActionResult:
    """
    Apply actions one by one

    Each action is independent: a failure is recorded and the remaining
    actions still run; nothing already applied is undone.

    Args:
        actions: Actions in listing order
        base: Directory the listing paths are relative to
        dry_run: Whether to preview only
        progress_callback: Progress callback (current, total, message)

    Returns:
        Execution result
    """
    result = ActionResult()
    total = len(actions)

    for i, action in enumerate(actions):
        if progress_callback:
            prefix = "[Preview] " if dry_run else ""
            progress_callback(i + 1, total, f"{prefix}{action}")

        if dry_run:
            result.applied.append(action)
            continue

        try:
            apply_action(action, base)
        except SkippedAction as e:
            logger.debug("Skipped %s: %s", action, e)
            result.skipped.append((action, str(e)))
        except OSError as e:
            logger.debug("Failed %s: %s", action, e)
            result.failed.append((action, str(e)))
        else:
            result.applied.append(action)

    return result
