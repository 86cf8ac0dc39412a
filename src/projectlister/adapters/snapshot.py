from __future__ import annotations

"""
JSON Snapshot Adapter.

Builds the ProjectNode forest from a JSON-compatible structure exported by a
host (an IDE plugin, a build server, a hand-written file). Anything the
adapter cannot resolve becomes an empty field or is dropped with a warning;
the walker only ever sees well-formed nodes.

Accepted shapes::

    [ {"name": ..., "full_path": ..., "kind": "project", "children": [...]}, ... ]

    {"active_document": "/path/or/null", "projects": [ ... ]}
"""

import json
import logging
import os
from dataclasses import dataclass, field
from typing import Any, List, Optional

from projectlister.domain.constants import CONTAINER_KIND_ALIASES
from projectlister.domain.errors import SnapshotError
from projectlister.domain.models import ActiveDocumentInfo, ProjectKind, ProjectNode

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Snapshot:
    """
    A decoded host snapshot.

    Attributes:
        roots: Top-level project nodes.
        active_document: Focused document, None when absent.
    """
    roots: List[ProjectNode] = field(default_factory=list)
    active_document: Optional[ActiveDocumentInfo] = None

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def load_snapshot(path: str) -> Snapshot:
    """
    Read a JSON snapshot file.

    Raises:
        SnapshotError: If the file is missing, unreadable or not valid JSON.
    """
    if not os.path.isfile(path):
        raise SnapshotError(f"Snapshot file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise SnapshotError(f"Cannot read snapshot '{path}': {e}") from e
    except json.JSONDecodeError as e:
        raise SnapshotError(f"Invalid JSON in snapshot '{path}': {e.msg} (line {e.lineno})") from e

    snapshot = snapshot_from_data(data)
    logger.debug(f"Loaded snapshot '{path}' with {len(snapshot.roots)} root nodes.")
    return snapshot


def snapshot_from_data(data: Any) -> Snapshot:
    """Decode an already parsed JSON value into a Snapshot."""
    return Snapshot(
        roots=forest_from_data(data),
        active_document=active_document_from_data(data),
    )


def forest_from_data(data: Any) -> List[ProjectNode]:
    """
    Convert a list of node objects (or an object with a ``projects`` list)
    into a ProjectNode forest.
    """
    if isinstance(data, dict):
        data = data.get("projects", [])

    if not isinstance(data, list):
        logger.warning(f"Snapshot projects must be a list, got {type(data).__name__}. Using an empty forest.")
        return []

    return _nodes_from_list(data, "projects")


def active_document_from_data(data: Any) -> Optional[ActiveDocumentInfo]:
    """Extract the optional ``active_document`` path; blank means absent."""
    if not isinstance(data, dict):
        return None

    value = data.get("active_document")
    if isinstance(value, dict):
        value = value.get("path")
    if isinstance(value, str) and value.strip():
        return ActiveDocumentInfo(path=value.strip())
    return None

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _nodes_from_list(items: List[Any], location: str) -> List[ProjectNode]:
    nodes: List[ProjectNode] = []
    for i, item in enumerate(items):
        if not isinstance(item, dict):
            logger.warning(f"Dropped snapshot entry '{location}[{i}]': expected object, got {type(item).__name__}.")
            continue
        nodes.append(_node_from_dict(item, f"{location}[{i}]"))
    return nodes


def _node_from_dict(item: dict, location: str) -> ProjectNode:
    children_raw = item.get("children") or []
    if not isinstance(children_raw, list):
        logger.warning(f"Ignored children of '{location}': expected list.")
        children_raw = []

    full_path = item.get("full_path", item.get("path"))

    return ProjectNode(
        name=_as_text(item.get("name")),
        full_path=_as_text(full_path),
        kind=_parse_kind(item.get("kind")),
        children=tuple(_nodes_from_list(children_raw, f"{location}.children")),
    )


def _parse_kind(value: Any) -> ProjectKind:
    if isinstance(value, str) and value.strip().lower() in CONTAINER_KIND_ALIASES:
        return ProjectKind.CONTAINER
    return ProjectKind.PROJECT


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)
