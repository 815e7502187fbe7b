"""
Utility modules for shell-bookmarks.

This package contains logging setup and input validation helpers.
"""
