from __future__ import annotations

"""
Integration tests for Logging Infrastructure.

Verifies the QueueListener architecture, idempotent configuration and log
file output.
"""

import logging
import time
from logging.handlers import QueueListener
from pathlib import Path

import pytest

from projectlister.infra.logging import (
    _HANDLER_TAG_ATTR,
    _QUEUE_LISTENER_ATTR,
    LoggingConfig,
    configure_logging,
    get_default_log_path,
)


@pytest.fixture(autouse=True)
def reset_logging():
    """Clean up root logger handlers before and after each test."""
    def _reset():
        root = logging.getLogger()
        listener = getattr(root, _QUEUE_LISTENER_ATTR, None)
        if isinstance(listener, QueueListener) and getattr(listener, "_thread", None) is not None:
            listener.stop()
        setattr(root, _QUEUE_LISTENER_ATTR, None)
        for h in list(root.handlers):
            if getattr(h, _HANDLER_TAG_ATTR, False):
                root.removeHandler(h)
                h.close()
        if hasattr(root, "_projectlister_configured"):
            delattr(root, "_projectlister_configured")

    _reset()
    yield
    _reset()


def _our_handlers():
    return [h for h in logging.getLogger().handlers if getattr(h, _HANDLER_TAG_ATTR, False)]


def test_logging_idempotency():
    cfg = LoggingConfig(level="INFO", console=True)
    configure_logging(cfg)
    count = len(_our_handlers())

    configure_logging(cfg)
    assert len(_our_handlers()) == count == 1


def test_force_reconfigures_without_leaking_handlers():
    configure_logging(LoggingConfig(level="INFO"))
    configure_logging(LoggingConfig(level="DEBUG"), force=True)

    assert len(_our_handlers()) == 1
    assert logging.getLogger().level == logging.DEBUG


def test_unknown_level_falls_back_to_info():
    configure_logging(LoggingConfig(level="chatty"))
    assert logging.getLogger().level == logging.INFO


def test_log_file_receives_records(tmp_path: Path):
    log_file = tmp_path / "logs" / "run.log"
    configure_logging(LoggingConfig(level="DEBUG", console=False, log_file=str(log_file)))

    logging.getLogger("projectlister.test").info("walker finished")

    # The QueueListener writes on its own thread
    listener = getattr(logging.getLogger(), _QUEUE_LISTENER_ATTR)
    listener.stop()
    setattr(logging.getLogger(), _QUEUE_LISTENER_ATTR, None)

    assert "walker finished" in log_file.read_text(encoding="utf-8")


def test_log_rotation(tmp_path: Path):
    log_file = tmp_path / "rotate.log"
    configure_logging(LoggingConfig(level="DEBUG", console=False, log_file=str(log_file), max_bytes=100, backup_count=1))

    logger = logging.getLogger("projectlister.rotate")
    for _ in range(10):
        logger.debug("A long message that quickly exceeds the tiny rotation threshold." * 3)

    time.sleep(0.5)
    assert (tmp_path / "rotate.log.1").exists()


def test_default_log_path_is_under_user_dir(isolated_user_dir):
    path = get_default_log_path()
    assert path.startswith(str(isolated_user_dir))
    assert path.endswith("projectlister.log")
