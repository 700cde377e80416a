"""
editor.py - External Editor Launcher

Runs the configured editor on the listing file and waits for it to exit.
"""

from pathlib import Path
from typing import List
import logging
import shlex
import subprocess

logger = logging.getLogger(__name__)


class EditorLaunchError(RuntimeError):
    """The editor command could not be started"""


def build_editor_command(editor: str, target: Path) -> List[str]:
    """Split the editor command line and append the file to edit"""
    try:
        cmd = shlex.split(editor)
    except ValueError as e:
        raise EditorLaunchError(f"Invalid editor command \"{editor}\": {e}") from e
    if not cmd:
        raise EditorLaunchError("Editor command is empty")
    return [*cmd, str(target)]


def launch_editor(editor: str, target: Path) -> int:
    """
    Open target in the editor and block until it exits

    Args:
        editor: Editor command line (e.g. "vim" or "code --wait")
        target: File to edit

    Returns:
        Editor exit status

    Raises:
        EditorLaunchError: Command is empty or could not be started
    """
    cmd = build_editor_command(editor, target)
    try:
        completed = subprocess.run(cmd, check=False)
    except OSError as e:
        raise EditorLaunchError(f"Failed to start editor \"{editor}\": {e}") from e

    if completed.returncode != 0:
        logger.warning("Editor \"%s\" exited with status %d", editor, completed.returncode)
    return completed.returncode
