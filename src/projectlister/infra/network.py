from __future__ import annotations

"""
HTTP access for remote project snapshots.
"""

import logging
from typing import Any, Dict, Optional

import requests

from projectlister.domain.constants import APP_VERSION

logger = logging.getLogger(__name__)

USER_AGENT = f"ProjectLister-Client/{APP_VERSION}"
SNAPSHOT_TIMEOUT = 10


def fetch_json(url: str, timeout: int = SNAPSHOT_TIMEOUT) -> Optional[Dict[str, Any]]:
    """
    Download a JSON document whose root is an object or a list.

    Lists are wrapped as ``{"projects": [...]}`` so callers always get a dict.

    Returns:
        Optional[Dict[str, Any]]: Decoded payload, or None on any failure.
    """
    headers = {"User-Agent": USER_AGENT}
    logger.debug(f"Fetching project snapshot from: {url}")

    try:
        response = requests.get(url, headers=headers, timeout=timeout)
        response.raise_for_status()

        data = response.json()

        if isinstance(data, list):
            data = {"projects": data}
        if not isinstance(data, dict):
            logger.warning("Network: Received malformed snapshot (root is neither object nor list).")
            return None

        size_kb = len(response.content) / 1024
        logger.info(f"Network: Snapshot downloaded ({size_kb:.1f} KB).")
        return data

    except requests.exceptions.Timeout:
        logger.warning(f"Network: Snapshot download timed out after {timeout}s.")
    except requests.exceptions.RequestException as e:
        logger.error(f"Network: Communication error while fetching snapshot: {e}")
    except ValueError as e:
        logger.error(f"Network: Snapshot is not valid JSON: {e}")

    return None
