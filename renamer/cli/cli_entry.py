"""
cli_entry.py - CLI Entry Point

Lists matching entries in an editor, then deletes/renames them according
to the edited listing.
"""

import argparse
import logging
import re
import sys
from pathlib import Path

from ..core import (
    EditSession, ActionKind,
    scan_entries, listing_buffer, read_listing, execute_actions, describe_actions,
)
from .cli_prompts import input_choice
from .config import load_editor, save_editor
from .editor import EditorLaunchError, launch_editor


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser"""
    parser = argparse.ArgumentParser(
        prog="renamer",
        description="Rename or delete files by editing their names in a text editor",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Listing format:
  one path per line; change a line to rename the entry, start it with '#'
  to delete the entry, leave it unchanged to keep it. Blank lines are
  ignored, but lines must not be added or removed.

Examples:
  # Rename files in the current directory
  renamer

  # Only .jpg files, including subdirectories
  renamer '\\.jpg$' --recursive

  # Include directories, use a different editor once
  renamer --include-dirs --editor "code --wait"
"""
    )

    parser.add_argument("pattern", nargs="?", default=".*",
                        help="Regular expression matched against relative paths (default: all)")
    parser.add_argument("--recursive", "-r", action="store_true", help="Include subdirectories")
    parser.add_argument("--include-dirs", action="store_true", help="List directories as well as files")
    parser.add_argument("--include-hidden", action="store_true", help="Include hidden entries")
    parser.add_argument("--directory", "-C", type=str, default=".", help="Directory to list (default: current)")
    parser.add_argument("--editor", "-e", type=str, help="Editor command for this run")
    parser.add_argument("--save-editor", action="store_true", help="Store --editor in the config file")
    parser.add_argument("--dry-run", "-d", action="store_true", help="Preview only, do not execute")
    parser.add_argument("--verbose", "-v", action="count", default=0, help="More log output (-vv for debug)")

    return parser


def setup_logging(verbosity: int) -> None:
    """Configure stderr logging for the given -v count"""
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s", stream=sys.stderr, force=True)


def main(argv=None) -> int:
    """Main entry point"""
    parser = create_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    if args.save_editor:
        if not args.editor:
            parser.error("--save-editor requires --editor")
        try:
            config_path = save_editor(args.editor)
        except OSError as e:
            print(f"Error: Cannot save config: {e}", file=sys.stderr)
            return 1
        print(f"Saved editor to {config_path}")

    editor = args.editor or load_editor()

    directory = Path(args.directory)
    if not directory.is_dir():
        print(f"Error: Directory does not exist: {directory}", file=sys.stderr)
        return 1

    try:
        pattern = re.compile(args.pattern)
    except re.error as e:
        print(f"Error: Invalid pattern \"{args.pattern}\": {e}", file=sys.stderr)
        return 1

    entries = scan_entries(
        directory,
        pattern=pattern,
        recursive=args.recursive,
        include_dirs=args.include_dirs,
        include_hidden=args.include_hidden,
    )

    if not entries:
        print("No matching entries found")
        return 0

    with listing_buffer(entries) as listing_path:
        session = EditSession(
            entries,
            run_editor=lambda: launch_editor(editor, listing_path),
            read_text=lambda: read_listing(listing_path),
            ask=input_choice,
        )
        try:
            actions = session.run()
        except EditorLaunchError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

    if actions is None:
        print("Aborted")
        return 0

    if not actions:
        return 0

    if args.dry_run:
        execute_actions(actions, base=directory, dry_run=True,
                        progress_callback=lambda current, total, message: print(message))
        counts = describe_actions(actions)
        print(f"[Preview mode] Would rename {counts[ActionKind.RENAME]} "
              f"and remove {counts[ActionKind.DELETE]} entries")
        return 0

    result = execute_actions(actions, base=directory)

    for action, reason in result.skipped:
        print(f"{reason}, skipping rename")
    for action, error in result.failed:
        print(f"Failed to apply action for \"{action.entry.path}\": {error}", file=sys.stderr)

    print(result.summary())
    print("Applied actions")
    return 0


if __name__ == "__main__":
    sys.exit(main())
