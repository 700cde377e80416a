"""
reconcile.py - Listing Reconciliation Module

Responsibilities:
- Pair edited lines with the original entries by position
- Classify each pair (unchanged / delete / rename)
- Reject edits that change the number of entries
"""

from enum import Enum
from typing import Dict, List, Optional, Sequence
import logging

from .models_fs import Action, ActionKind, Entry, DELETE_MARKER

logger = logging.getLogger(__name__)


class MismatchKind(Enum):
    """Structural mismatch between listing and entries"""
    TOO_MANY_LINES = "file contained too many file names"
    TOO_FEW_LINES = "file did not contain enough file names"


class ListingMismatchError(ValueError):
    """Edited listing does not have one line per entry"""

    def __init__(self, kind: MismatchKind, entry_count: int, line_count: int):
        self.kind = kind
        self.entry_count = entry_count
        self.line_count = line_count
        super().__init__(kind.value)


def classify_line(line: str, entry: Entry) -> Optional[Action]:
    """
    Classify one edited line against its entry

    Args:
        line: Stripped edited line
        entry: Entry at the same position

    Returns:
        Delete or Rename action, None when the line is unchanged
    """
    # The marker wins even when the rest of the line is the original path
    if line.startswith(DELETE_MARKER):
        return Action.delete(entry)
    if line == entry.path:
        return None
    return Action.rename(entry, line)


def reconcile(entries: Sequence[Entry], edited_lines: Sequence[str]) -> List[Action]:
    """
    Derive actions from edited lines, pairing them with entries by position

    Args:
        entries: Ordered entry list written to the listing
        edited_lines: Non-blank stripped lines read back from the listing

    Returns:
        Actions for changed lines, in listing order

    Raises:
        ListingMismatchError: Line count differs from entry count
    """
    actions: List[Action] = []
    entries_it = iter(entries)
    lines_it = iter(edited_lines)

    while True:
        line = next(lines_it, None)
        entry = next(entries_it, None)

        if line is None and entry is None:
            break
        if entry is None:
            raise ListingMismatchError(MismatchKind.TOO_MANY_LINES, len(entries), len(edited_lines))
        if line is None:
            raise ListingMismatchError(MismatchKind.TOO_FEW_LINES, len(entries), len(edited_lines))

        action = classify_line(line, entry)
        if action is not None:
            actions.append(action)

    logger.debug("Reconciled %d entries into %d actions", len(entries), len(actions))
    return actions


def describe_actions(actions: Sequence[Action]) -> Dict[ActionKind, int]:
    """Count actions per kind"""
    counts = {kind: 0 for kind in ActionKind}
    for action in actions:
        counts[action.kind] += 1
    return counts
