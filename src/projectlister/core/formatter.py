from __future__ import annotations

"""
Output Formatter.

Pure text formatting for enumerated projects, the active document line and
the report separator.
"""

from typing import Iterable, List, Optional

from projectlister.domain.constants import (
    NO_ACTIVE_DOCUMENT,
    SEPARATOR_CHAR,
    SEPARATOR_WIDTH,
)
from projectlister.domain.models import ActiveDocumentInfo, ProjectEntry


class OutputFormatter:
    """Stateless formatter; a shared instance is as good as a fresh one."""

    def format_entries(self, entries: Iterable[ProjectEntry]) -> List[str]:
        """Map each (name, full_path) pair to a ``"<name>: <full_path>"`` line."""
        return [f"{name}: {full_path}" for name, full_path in entries]

    def format_active_document(self, info: Optional[ActiveDocumentInfo]) -> str:
        """Return the active document path or the fixed fallback line."""
        if info is None:
            return NO_ACTIVE_DOCUMENT
        return info.path

    def separator(self) -> str:
        return SEPARATOR_CHAR * SEPARATOR_WIDTH
