"""
cli - Command Line Interface for the Listing Rename Tool
"""

from .cli_entry import main
from .editor import EditorLaunchError, launch_editor

__all__ = ["main", "EditorLaunchError", "launch_editor"]
