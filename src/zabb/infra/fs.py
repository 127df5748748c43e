from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides the user data directory lookup and the path canonicalization used
to compare directories: two paths naming the same location (through
symlinks, '.' or '..' segments) canonicalize to an identical string.
"""

import os
from typing import Optional

from zabb.domain.search_models import InvalidTargetError

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "zabb"
UNIX_APP_DIR_NAME = ".zabb"

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the standard OS-specific directory for persistent application data.

    Automatically creates the hierarchy if it does not exist.
    Standards:
    - Windows: %LOCALAPPDATA%/zabb
    - Linux/Mac: ~/.zabb

    Returns:
        str: Absolute path to the application data directory.
    """
    path: str = ""

    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    if not path:
        path = os.path.join(os.path.expanduser("~"), UNIX_APP_DIR_NAME)

    try:
        os.makedirs(path, exist_ok=True)
    except OSError:
        pass

    return os.path.abspath(path)


def canonicalize(path: str) -> str:
    """
    Resolve a path to its canonical absolute form.

    Symlinks and relative segments are resolved, so that two spellings of
    the same location compare equal.

    Args:
        path: Raw path, absolute or relative to the working directory.

    Returns:
        str: Canonical absolute path.

    Raises:
        InvalidTargetError: If the path does not exist.
    """
    if not path:
        raise InvalidTargetError(path or "''", "an empty path")

    real = os.path.realpath(os.path.expanduser(path))
    if not os.path.exists(real):
        raise InvalidTargetError(real, "a path that does not exist")
    return real


def resolve_target_directory(path: Optional[str]) -> str:
    """
    Canonicalize the directory to abbreviate, defaulting to the working directory.

    Args:
        path: User supplied directory, or None for the current directory.

    Returns:
        str: Canonical absolute directory path.

    Raises:
        InvalidTargetError: If the path is missing or not a directory.
    """
    if path is None or path == "":
        return canonicalize(os.getcwd())

    real = canonicalize(path)
    if not os.path.isdir(real):
        raise InvalidTargetError(real)
    return real


def directory_basename(directory: str) -> str:
    """Lower-cased final segment of a canonical directory path."""
    return os.path.basename(directory.rstrip(os.sep) or directory).lower()
