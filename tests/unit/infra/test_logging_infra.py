from __future__ import annotations

"""
Tests for the Logging Infrastructure.

Verifies the QueueListener architecture, idempotency of configuration and
file output.
"""

import logging
from pathlib import Path

from zabb.infra.logging import (
    _HANDLER_TAG_ATTR,
    _QUEUE_LISTENER_ATTR,
    LoggingConfig,
    configure_logging,
    shutdown_logging,
)


def test_logging_idempotency() -> None:
    cfg = LoggingConfig(level="INFO", console=True)

    configure_logging(cfg)
    root = logging.getLogger()
    initial_handler_count = len(root.handlers)

    configure_logging(cfg)
    assert len(root.handlers) == initial_handler_count


def test_force_replaces_our_handlers() -> None:
    configure_logging(LoggingConfig(level="INFO"))
    configure_logging(LoggingConfig(level="DEBUG"), force=True)

    root = logging.getLogger()
    ours = [h for h in root.handlers if getattr(h, _HANDLER_TAG_ATTR, False)]
    assert len(ours) == 1
    assert root.level == logging.DEBUG


def test_queue_listener_architecture() -> None:
    configure_logging(LoggingConfig(level="INFO", console=True))

    root = logging.getLogger()
    assert any(getattr(h, _HANDLER_TAG_ATTR, False) for h in root.handlers)
    assert getattr(root, _QUEUE_LISTENER_ATTR) is not None


def test_unknown_level_defaults_to_warning() -> None:
    configure_logging(LoggingConfig(level="chatty"))
    assert logging.getLogger().level == logging.WARNING


def test_file_logging(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "zabb.log"
    configure_logging(LoggingConfig(level="DEBUG", console=False, log_file=str(log_file)))

    logging.getLogger("zabb.test").debug("candidate skipped")
    shutdown_logging()

    assert "candidate skipped" in log_file.read_text(encoding="utf-8")
