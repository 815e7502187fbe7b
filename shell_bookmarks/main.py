#!/usr/bin/env python3
"""
Main entry point for shell-bookmarks.

This module serves as the console script entry point.
"""

import sys
from shell_bookmarks.cli import main


if __name__ == "__main__":
    sys.exit(main())
