"""
Listing Rename Tool - Main Entry

Opens the matching file names in a text editor; edited lines rename
entries, lines starting with '#' delete them.

Usage:
    renamer                          # Files in the current directory
    renamer '\\.png$' -r             # PNG files, recursively
    renamer --include-dirs           # Files and directories
    python -m renamer --dry-run      # Preview only
"""


def main():
    """Main entry point"""
    from .cli import main as cli_main
    return cli_main()
