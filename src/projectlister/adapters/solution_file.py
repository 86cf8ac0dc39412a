from __future__ import annotations

"""
Visual Studio Solution File Adapter.

Reads a ``.sln`` text file and rebuilds the solution tree the IDE would
expose: one node per ``Project(...)`` declaration, solution folders as
container nodes, and nesting taken from ``GlobalSection(NestedProjects)``.
"""

import logging
import os
import re
from dataclasses import dataclass
from typing import Dict, List, Optional

from projectlister.domain.constants import SOLUTION_FOLDER_TYPE_GUID
from projectlister.domain.errors import SolutionParseError
from projectlister.domain.models import ProjectKind, ProjectNode

logger = logging.getLogger(__name__)

# Project("{TYPE-GUID}") = "Name", "relative\path", "{PROJECT-GUID}"
_PROJECT_RX = re.compile(
    r'^\s*Project\(\s*"\{(?P<type>[^}]+)\}"\s*\)\s*=\s*'
    r'"(?P<name>[^"]*)"\s*,\s*"(?P<path>[^"]*)"\s*,\s*"\{(?P<guid>[^}]+)\}"'
)
_NESTED_SECTION_RX = re.compile(r"^\s*GlobalSection\(\s*NestedProjects\s*\)", re.IGNORECASE)
_END_SECTION_RX = re.compile(r"^\s*EndGlobalSection\b", re.IGNORECASE)
_NESTED_ENTRY_RX = re.compile(r"^\s*\{(?P<child>[^}]+)\}\s*=\s*\{(?P<parent>[^}]+)\}")

# -----------------------------------------------------------------------------
# DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class SolutionEntry:
    """Raw ``Project(...)`` declaration as it appears in the file."""
    guid: str
    type_guid: str
    name: str
    relative_path: str

    @property
    def is_solution_folder(self) -> bool:
        return self.type_guid == SOLUTION_FOLDER_TYPE_GUID

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def parse_solution(path: str) -> List[ProjectNode]:
    """
    Parse a solution file into a ProjectNode forest.

    Args:
        path: Path to the ``.sln`` file.

    Returns:
        List[ProjectNode]: Root nodes in file order.

    Raises:
        SolutionParseError: If the file is missing or unreadable.
    """
    if not os.path.isfile(path):
        raise SolutionParseError(f"Solution file not found: {path}")

    try:
        # utf-8-sig strips the BOM Visual Studio writes
        with open(path, "r", encoding="utf-8-sig", errors="replace") as f:
            text = f.read()
    except OSError as e:
        raise SolutionParseError(f"Cannot read solution '{path}': {e}") from e

    base_dir = os.path.dirname(os.path.abspath(path))
    roots = parse_solution_text(text, base_dir)
    logger.debug(f"Parsed solution '{path}': {len(roots)} root entries.")
    return roots


def parse_solution_text(text: str, base_dir: str = "") -> List[ProjectNode]:
    """
    Parse solution file content.

    Project paths are resolved against ``base_dir``; solution folders get an
    empty ``full_path`` since they have no location on disk.
    """
    entries: Dict[str, SolutionEntry] = {}
    parents: Dict[str, str] = {}
    in_nested = False

    for line in text.splitlines():
        if in_nested:
            if _END_SECTION_RX.match(line):
                in_nested = False
                continue
            m = _NESTED_ENTRY_RX.match(line)
            if m:
                parents[m.group("child").upper()] = m.group("parent").upper()
            continue

        if _NESTED_SECTION_RX.match(line):
            in_nested = True
            continue

        m = _PROJECT_RX.match(line)
        if m:
            guid = m.group("guid").upper()
            entries[guid] = SolutionEntry(
                guid=guid,
                type_guid=m.group("type").upper(),
                name=m.group("name"),
                relative_path=m.group("path"),
            )

    parents = _resolve_parents(entries, parents)

    children: Dict[str, List[str]] = {}
    for guid in entries:
        parent = parents.get(guid)
        if parent is not None:
            children.setdefault(parent, []).append(guid)

    return [
        _build_node(guid, entries, children, base_dir)
        for guid in entries
        if guid not in parents
    ]

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _resolve_parents(entries: Dict[str, SolutionEntry], parents: Dict[str, str]) -> Dict[str, str]:
    """Drop nesting links to unknown projects and break nesting cycles."""
    resolved: Dict[str, str] = {}
    for child, parent in parents.items():
        if child not in entries or parent not in entries:
            logger.warning(f"Ignored nesting {{{child}}} -> {{{parent}}}: unknown project GUID.")
            continue
        resolved[child] = parent

    for guid in entries:
        seen = {guid}
        current: Optional[str] = resolved.get(guid)
        while current is not None:
            if current == guid:
                logger.warning(f"Nesting cycle through '{entries[guid].name}'; treating it as a root entry.")
                del resolved[guid]
                break
            if current in seen:
                break
            seen.add(current)
            current = resolved.get(current)

    return resolved


def _build_node(
        guid: str,
        entries: Dict[str, SolutionEntry],
        children: Dict[str, List[str]],
        base_dir: str,
) -> ProjectNode:
    entry = entries[guid]
    if entry.is_solution_folder:
        kind = ProjectKind.CONTAINER
        full_path = ""
    else:
        kind = ProjectKind.PROJECT
        full_path = _resolve_project_path(entry.relative_path, base_dir)

    return ProjectNode(
        name=entry.name,
        full_path=full_path,
        kind=kind,
        children=tuple(
            _build_node(child, entries, children, base_dir)
            for child in children.get(guid, [])
        ),
    )


def _resolve_project_path(relative_path: str, base_dir: str) -> str:
    """Solution files always use backslashes; URLs (web sites) are kept as-is."""
    if not relative_path or "://" in relative_path:
        return relative_path
    native = relative_path.replace("\\", os.sep)
    if not base_dir:
        return os.path.normpath(native)
    return os.path.normpath(os.path.join(base_dir, native))
