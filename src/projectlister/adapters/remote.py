from __future__ import annotations

"""
Remote Snapshot Adapter.

Fetches a JSON project snapshot over HTTP and decodes it with the snapshot
adapter.
"""

import logging
from typing import Optional

from projectlister.adapters.snapshot import Snapshot, snapshot_from_data
from projectlister.infra.network import fetch_json

logger = logging.getLogger(__name__)


def fetch_snapshot(url: str) -> Optional[Snapshot]:
    """Return the decoded snapshot, or None if the download failed."""
    data = fetch_json(url)
    if data is None:
        return None
    snapshot = snapshot_from_data(data)
    logger.debug(f"Remote snapshot decoded with {len(snapshot.roots)} root nodes.")
    return snapshot
