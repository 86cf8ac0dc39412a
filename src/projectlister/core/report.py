from __future__ import annotations

"""
Report Composition.

Chains the traversal and formatting stages into the final report:
separator, active document, separator, one line per project. Writing the
lines somewhere is a separate step handled by ``write_report`` or the host.
"""

import logging
import os
import threading
from typing import Iterable, List, Optional

from projectlister.core.formatter import OutputFormatter
from projectlister.core.walker import ProjectTreeWalker
from projectlister.domain.models import ActiveDocumentInfo, ProjectNode

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def build_report(
        roots: Iterable[ProjectNode],
        active_document: Optional[ActiveDocumentInfo] = None,
        walker: Optional[ProjectTreeWalker] = None,
        formatter: Optional[OutputFormatter] = None,
        cancellation_event: Optional[threading.Event] = None,
) -> List[str]:
    """
    Produce the report lines for one invocation.

    Args:
        roots: Project forest supplied by the host adapter.
        active_document: Focused document, or None when there is none.
        walker: Walker to use. Defaults to a fresh ``ProjectTreeWalker``.
        formatter: Formatter to use. Defaults to a fresh ``OutputFormatter``.
        cancellation_event: Forwarded to the walker.

    Returns:
        List[str]: Report lines without trailing newlines.
    """
    walker = walker or ProjectTreeWalker()
    formatter = formatter or OutputFormatter()

    entries = walker.enumerate(roots, cancellation_event=cancellation_event)

    lines: List[str] = [
        formatter.separator(),
        formatter.format_active_document(active_document),
        formatter.separator(),
    ]
    lines.extend(formatter.format_entries(entries))
    return lines


def write_report(lines: List[str], save_path: str) -> bool:
    """
    Persist report lines to a UTF-8 text file.

    Returns:
        bool: True when the file was written, False on I/O failure (logged).
    """
    try:
        out_dir = os.path.dirname(os.path.abspath(save_path))
        os.makedirs(out_dir, exist_ok=True)
        with open(save_path, "w", encoding="utf-8") as f:
            f.write("\n".join(lines) + "\n")
        logger.info(f"Report saved to file: {save_path}")
        return True
    except OSError as e:
        logger.error(f"Failed to save report to '{save_path}': {e}")
        return False
