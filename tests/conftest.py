from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

1. Puts the 'src' directory on sys.path so the package imports uninstalled.
2. Shared project forests used across unit and integration tests.
"""

import os
import sys
from typing import List

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from projectlister.domain.models import ProjectKind, ProjectNode  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def sample_forest() -> List[ProjectNode]:
    """
    Solution with a solution folder and a project owning a sub-project.

    Sln Items (container)
    App (/repo/App.proj)
      Core (/repo/Core.proj)
    """
    return [
        ProjectNode(name="Sln Items", kind=ProjectKind.CONTAINER),
        ProjectNode(
            name="App",
            full_path="/repo/App.proj",
            children=(ProjectNode(name="Core", full_path="/repo/Core.proj"),),
        ),
    ]


@pytest.fixture
def isolated_user_dir(tmp_path, monkeypatch):
    """Redirect the user data directory (config, logs) into tmp_path."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    monkeypatch.setenv("LOCALAPPDATA", str(home / "AppData"))
    return home
