from __future__ import annotations

"""
Adapter-level exception hierarchy.

The enumeration core never raises; these errors belong to the adapters that
read host data (snapshot files, solution files) before a forest exists.
"""


class ProjectListerError(Exception):
    """Base class for every error raised by this package."""


class SnapshotError(ProjectListerError):
    """Raised when a JSON project snapshot cannot be read or decoded."""


class SolutionParseError(ProjectListerError):
    """Raised when a solution file cannot be read."""
