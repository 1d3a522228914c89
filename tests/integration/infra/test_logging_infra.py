from __future__ import annotations

"""
Integration tests for Logging Infrastructure.

Verifies idempotent configuration, forced reconfiguration and that only
our own tagged handlers are replaced.
"""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

import pytest

from declcompare.infra.logging import (
    _CONFIGURED_FLAG_ATTR,
    _HANDLER_TAG_ATTR,
    LoggingConfig,
    configure_logging,
)


@pytest.fixture(autouse=True)
def reset_logging():
    """Detach our handlers and the configured flag around each test."""
    root = logging.getLogger()
    original_level = root.level

    def _cleanup() -> None:
        for h in list(root.handlers):
            if getattr(h, _HANDLER_TAG_ATTR, False):
                root.removeHandler(h)
                h.close()
        if hasattr(root, _CONFIGURED_FLAG_ATTR):
            delattr(root, _CONFIGURED_FLAG_ATTR)

    _cleanup()
    yield
    _cleanup()
    root.setLevel(original_level)


def _our_handlers() -> list:
    return [h for h in logging.getLogger().handlers if getattr(h, _HANDLER_TAG_ATTR, False)]


def test_logging_idempotency() -> None:
    """Repeated configuration does not duplicate handlers."""
    cfg = LoggingConfig(level="INFO", console=True)

    configure_logging(cfg)
    first = len(_our_handlers())
    configure_logging(cfg)

    assert first == 1
    assert len(_our_handlers()) == first


def test_force_reconfigures_level() -> None:
    configure_logging(LoggingConfig(level="INFO"))
    configure_logging(LoggingConfig(level="debug"), force=True)

    assert logging.getLogger().level == logging.DEBUG
    assert len(_our_handlers()) == 1


def test_unknown_level_falls_back_to_warning() -> None:
    configure_logging(LoggingConfig(level="chatty"))

    assert logging.getLogger().level == logging.WARNING


def test_foreign_handlers_survive_reconfiguration() -> None:
    root = logging.getLogger()
    foreign = logging.NullHandler()
    root.addHandler(foreign)
    try:
        configure_logging(LoggingConfig())
        configure_logging(LoggingConfig(), force=True)
        assert foreign in root.handlers
    finally:
        root.removeHandler(foreign)


def test_file_logging(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "declcompare.log"
    configure_logging(LoggingConfig(level="DEBUG", console=False, log_file=str(log_file)))

    logging.getLogger("declcompare.test").debug("hello from test")
    for h in _our_handlers():
        h.flush()

    content = log_file.read_text(encoding="utf-8")
    assert "hello from test" in content
    assert "declcompare.test" in content


def test_unopenable_log_file_is_reported(tmp_path: Path, capsys) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")

    configure_logging(LoggingConfig(console=False, log_file=str(blocker / "x.log")))

    assert _our_handlers() == []
    assert "Cannot open log file" in capsys.readouterr().err


def test_custom_format_and_rotation_settings(tmp_path: Path) -> None:
    log_file = tmp_path / "rotating.log"
    cfg = LoggingConfig(
        level="warning",
        console=False,
        log_file=str(log_file),
        rotate_at_bytes=2048,
        keep_rotated=3,
        fmt="[%(levelname)s] %(message)s",
    )
    configure_logging(cfg)

    logging.getLogger("declcompare.test").warning("snapshot stale")
    (handler,) = _our_handlers()
    handler.flush()

    assert isinstance(handler, RotatingFileHandler)
    assert handler.maxBytes == 2048
    assert handler.backupCount == 3
    assert log_file.read_text(encoding="utf-8").strip() == "[WARNING] snapshot stale"
