from __future__ import annotations

"""
Project Tree Data Models.

Immutable snapshot types describing a solution as a forest of project nodes.
Adapters build these once per invocation; the walker only reads them.
"""

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Tuple

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

class ProjectKind(Enum):
    """Distinguishes buildable projects from organizational grouping nodes."""

    PROJECT = "project"
    CONTAINER = "container"


@dataclass(frozen=True)
class ProjectNode:
    """
    One entry in the solution tree.

    Attributes:
        name: Display name.
        full_path: Fully qualified location, empty for virtual nodes.
        kind: Regular project or container (solution folder).
        children: Nested sub-projects in discovery order.
    """
    name: str
    full_path: str = ""
    kind: ProjectKind = ProjectKind.PROJECT
    children: Tuple["ProjectNode", ...] = ()

    @property
    def is_container(self) -> bool:
        return self.kind is ProjectKind.CONTAINER


class ProjectEntry(NamedTuple):
    """Flattened (name, full_path) pair emitted by the walker."""

    name: str
    full_path: str


@dataclass(frozen=True)
class ActiveDocumentInfo:
    """
    The document focused in the host environment.

    Absence of an active document is modelled as ``None`` by callers.
    """
    path: str
