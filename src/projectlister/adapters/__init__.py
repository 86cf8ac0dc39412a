from __future__ import annotations

"""
Host adapters: turn external solution descriptions into ProjectNode forests.
"""

import os

from projectlister.adapters.snapshot import Snapshot, load_snapshot
from projectlister.adapters.solution_file import parse_solution

SOLUTION_EXTENSIONS = (".sln",)


def load_source(path: str) -> Snapshot:
    """
    Load a project forest from a solution file or a JSON snapshot.

    The extension selects the adapter: ``.sln`` files are parsed as Visual
    Studio solutions (which carry no active document), anything else is read
    as a JSON snapshot.

    Raises:
        SnapshotError: For unreadable or invalid snapshots.
        SolutionParseError: For unreadable solution files.
    """
    if os.path.splitext(path)[1].lower() in SOLUTION_EXTENSIONS:
        return Snapshot(roots=parse_solution(path))
    return load_snapshot(path)


__all__ = ["Snapshot", "load_snapshot", "load_source", "parse_solution"]
