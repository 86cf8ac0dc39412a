from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Resolves the per-user data directory and normalizes user-supplied paths so
that configuration and log files land in the same place on every platform.
"""

import os
from typing import Optional

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "ProjectLister"
UNIX_APP_DIR_NAME = ".projectlister"

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the standard OS-specific directory for persistent application data.

    Automatically creates the hierarchy if it does not exist.
    Standards:
    - Windows: %LOCALAPPDATA%/ProjectLister
    - Linux/Mac: ~/.projectlister

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


def normalize_path(path: Optional[str], fallback: str = "") -> str:
    """
    Normalize a path string into an absolute filesystem path.

    Expands environment variables ($VAR/%VAR%) and the user home shortcut.
    Returns ``fallback`` if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Value returned when ``path`` is blank.

    Returns:
        str: Normalized absolute path, or the fallback.
    """
    p = (path or "").strip()
    if not p:
        return fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)
