from __future__ import annotations

"""
Project Tree Walker.

Flattens a forest of ProjectNode values into an ordered list of
(name, full_path) entries. Traversal is depth-first pre-order; container
nodes are visited for their contents but never emitted.
"""

import logging
import threading
from typing import Iterable, List, Optional, Sequence, Set

from projectlister.domain.models import ProjectEntry, ProjectKind, ProjectNode

logger = logging.getLogger(__name__)

# Stack marker closing the subtree of the last node on the ancestor path
_CLOSE_SUBTREE = object()

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

class ProjectTreeWalker:
    """
    Stateless enumerator of real projects in a solution forest.

    A single shared instance and per-call instances are equivalent: nothing
    is kept between calls, so one walker may serve concurrent callers as long
    as each passes its own tree.

    Args:
        guard_cycles: Skip a node that is already on the current ancestor
            path. Shared sub-projects reached through different parents are
            still listed once per path.
        include_containers: Emit container nodes as well (diagnostics only).
    """

    def __init__(self, guard_cycles: bool = True, include_containers: bool = False):
        self.guard_cycles = guard_cycles
        self.include_containers = include_containers

    def enumerate(
            self,
            roots: Iterable[ProjectNode],
            cancellation_event: Optional[threading.Event] = None,
    ) -> List[ProjectEntry]:
        """
        Collect every non-container node reachable from ``roots``.

        Args:
            roots: Top-level solution entries, in solution order.
            cancellation_event: Optional event checked between node visits.
                When set, the entries collected so far are returned.

        Returns:
            List[ProjectEntry]: Entries in pre-order discovery order.
        """
        results: List[ProjectEntry] = []
        root_list: Sequence[ProjectNode] = list(roots or ())

        stack: List[object] = list(reversed(root_list))
        on_path: List[int] = []
        on_path_set: Set[int] = set()
        visited = 0

        while stack:
            if cancellation_event is not None and cancellation_event.is_set():
                logger.warning(
                    f"Project enumeration cancelled after {visited} nodes "
                    f"({len(results)} projects collected)."
                )
                return results

            node = stack.pop()

            if node is _CLOSE_SUBTREE:
                on_path_set.discard(on_path.pop())
                continue

            if node is None:
                logger.warning("Skipped an unresolved (None) project node.")
                continue

            if self.guard_cycles and id(node) in on_path_set:
                logger.warning(
                    f"Cycle detected at '{node.name or ''}': node already on the current path, skipped."
                )
                continue

            visited += 1
            if self.include_containers or node.kind is not ProjectKind.CONTAINER:
                results.append(_to_entry(node))

            children = node.children or ()
            if not children:
                continue

            if self.guard_cycles:
                on_path.append(id(node))
                on_path_set.add(id(node))
                stack.append(_CLOSE_SUBTREE)

            for child in reversed(children):
                stack.append(child)

        logger.debug(f"Enumerated {len(results)} projects from {visited} nodes.")
        return results


def enumerate_projects(
        roots: Iterable[ProjectNode],
        *,
        guard_cycles: bool = True,
        include_containers: bool = False,
        cancellation_event: Optional[threading.Event] = None,
) -> List[ProjectEntry]:
    """Shortcut for a one-off ``ProjectTreeWalker(...).enumerate(roots)``."""
    walker = ProjectTreeWalker(guard_cycles=guard_cycles, include_containers=include_containers)
    return walker.enumerate(roots, cancellation_event=cancellation_event)

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _to_entry(node: ProjectNode) -> ProjectEntry:
    """Malformed fields pass through as empty strings."""
    return ProjectEntry(name=node.name or "", full_path=node.full_path or "")
