"""
renamer - Rename and delete files by editing a listing in a text editor
"""

__version__ = "0.1.0"
