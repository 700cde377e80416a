"""
listing_codec.py - Editable Listing Codec

Converts an ordered entry list to the text edited by the user and back:
- serialize_listing / parse_listing: pure text conversion
- write_listing / read_listing: UTF-8 file I/O
- listing_buffer: temporary listing file removed on exit
"""

from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Sequence
import os
import tempfile

from .models_fs import Entry, DELETE_MARKER


def serialize_listing(entries: Sequence[Entry]) -> str:
    """
    Serialize entries to listing text, one path per line

    Args:
        entries: Ordered entry list

    Returns:
        Newline-joined paths (no trailing newline)
    """
    return "\n".join(entry.path for entry in entries)


def parse_listing(text: str) -> List[str]:
    """
    Parse edited listing text

    Each line is stripped; blank lines are dropped and do not take a position.

    Args:
        text: Edited listing text

    Returns:
        Non-blank stripped lines, in order
    """
    lines = []
    for raw in text.splitlines():
        line = raw.strip()
        if line:
            lines.append(line)
    return lines


def is_listable(path: str) -> bool:
    """Whether a path reads back unchanged as a non-delete line"""
    if not path or path != path.strip():
        return False
    if len(path.splitlines()) != 1:
        return False
    return not path.startswith(DELETE_MARKER)


def write_listing(path: Path, entries: Sequence[Entry]) -> None:
    """Write the listing for entries to path"""
    with open(path, "w", encoding="utf-8") as f:
        f.write(serialize_listing(entries))


def read_listing(path: Path) -> str:
    """Read listing text back (a leading BOM added by editors is dropped)"""
    with open(path, "r", encoding="utf-8-sig") as f:
        return f.read()


@contextmanager
def listing_buffer(
    entries: Sequence[Entry],
    prefix: str = "renamer",
    suffix: str = ".ini"
) -> Iterator[Path]:
    """
    Create the temporary listing file for one edit session

    The same file is reopened by the editor on every edit round; it is
    removed when the context exits, whether normally or by an exception.

    Args:
        entries: Entries to write into the buffer
        prefix: Temporary filename prefix
        suffix: Temporary filename suffix (.ini gets '#' comment highlighting)

    Yields:
        Path of the listing file
    """
    fd, name = tempfile.mkstemp(prefix=prefix, suffix=suffix)
    os.close(fd)
    path = Path(name)
    try:
        write_listing(path, entries)
        yield path
    finally:
        try:
            path.unlink()
        except FileNotFoundError:
            pass
