"""Utility for producing absolute paths that survive Windows path limits."""

import os
import sys

WINDOWS_LONG_PATH_PREFIX = "\\\\?\\"


def abs_path(path: str, *, platform: str | None = None) -> str:
    """Return an absolute path, in raw long-path form on Windows."""
    platform = platform or sys.platform
    if platform != "win32":
        return os.path.abspath(path)
    if path.startswith(WINDOWS_LONG_PATH_PREFIX):
        return path
    return WINDOWS_LONG_PATH_PREFIX + os.path.abspath(path)
