"""
shell-bookmarks: generate shell integration files from a bookmarks file.
"""

__version__ = "1.0.0"
