"""
core - Listing Rename Tool Core Module

Provides core functionalities such as scanning, listing conversion,
reconciliation, execution, etc.
"""

from .models_fs import (
    Entry,
    EntryKind,
    Action,
    ActionKind,
    ActionResult,
    DELETE_MARKER,
)

from .scan_files import (
    scan_entries,
    sort_entries,
)

from .listing_codec import (
    serialize_listing,
    parse_listing,
    is_listable,
    write_listing,
    read_listing,
    listing_buffer,
)

from .reconcile import (
    reconcile,
    classify_line,
    describe_actions,
    ListingMismatchError,
    MismatchKind,
)

from .safety_checks import (
    check_rename_target,
    target_exists,
)

from .exec_actions import (
    apply_action,
    execute_actions,
    SkippedAction,
)

from .session import (
    EditSession,
    SessionState,
    format_actions,
)

__all__ = [
    # Data models
    "Entry",
    "EntryKind",
    "Action",
    "ActionKind",
    "ActionResult",
    "DELETE_MARKER",

    # Scanning
    "scan_entries",
    "sort_entries",

    # Listing
    "serialize_listing",
    "parse_listing",
    "is_listable",
    "write_listing",
    "read_listing",
    "listing_buffer",

    # Reconciliation
    "reconcile",
    "classify_line",
    "describe_actions",
    "ListingMismatchError",
    "MismatchKind",

    # Safety checks
    "check_rename_target",
    "target_exists",

    # Execution
    "apply_action",
    "execute_actions",
    "SkippedAction",

    # Session
    "EditSession",
    "SessionState",
    "format_actions",
]
