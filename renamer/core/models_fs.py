"""
models_fs.py - Core Data Structure Definitions

Contains:
- Entry: Filesystem entry captured during scanning
- Action: Single delete/rename decision derived from the edited listing
- ActionResult: Outcome of applying a batch of actions
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple


DELETE_MARKER = "#"


class EntryKind(Enum):
    """Entry type enumeration"""
    FILE = "file"
    DIRECTORY = "directory"


class ActionKind(Enum):
    """Action type enumeration"""
    DELETE = "delete"
    RENAME = "rename"


@dataclass(frozen=True)
class Entry:
    """Filesystem entry (path relative to the scan root)"""
    kind: EntryKind
    path: str

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY


@dataclass(frozen=True)
class Action:
    """Single action on one entry

    The action keeps a reference to the Entry it was derived from, so the
    source path always comes from the scanned listing.
    """
    kind: ActionKind
    entry: Entry
    target: Optional[str] = None    # Destination path (renames only)

    @classmethod
    def delete(cls, entry: Entry) -> "Action":
        return cls(kind=ActionKind.DELETE, entry=entry)

    @classmethod
    def rename(cls, entry: Entry, target: str) -> "Action":
        return cls(kind=ActionKind.RENAME, entry=entry, target=target)

    @property
    def is_delete(self) -> bool:
        return self.kind is ActionKind.DELETE

    @property
    def is_rename(self) -> bool:
        return self.kind is ActionKind.RENAME

    def __str__(self) -> str:
        if self.is_delete:
            return f"Remove {self.entry.path}"
        return f"{self.entry.path} -> {self.target}"


@dataclass
class ActionResult:
    """Action execution result"""
    applied: List[Action] = field(default_factory=list)
    failed: List[Tuple[Action, str]] = field(default_factory=list)    # (action, error_msg)
    skipped: List[Tuple[Action, str]] = field(default_factory=list)   # (action, reason)

    @property
    def applied_count(self) -> int:
        return len(self.applied)

    @property
    def failed_count(self) -> int:
        return len(self.failed)

    @property
    def skipped_count(self) -> int:
        return len(self.skipped)

    def summary(self) -> str:
        """One-line count of applied, skipped and failed actions"""
        return (f"{self.applied_count} applied, {self.skipped_count} skipped, "
                f"{self.failed_count} failed")
