from __future__ import annotations

"""
Logging Bootstrap.

Idempotent configuration of the root logger for the command line tool.
Library code never calls this; it only obtains named loggers.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

from declcompare.infra.logging.handlers import (
    _create_console_handler,
    _create_rotating_file_handler,
    _is_our_handler,
)

_CONFIGURED_FLAG_ATTR: str = "_declcompare_configured"


@dataclass(frozen=True)
class LoggingConfig:
    """
    Logging settings of one CLI run.

    Attributes:
        level: Level name; unknown names fall back to WARNING.
        console: Emit records on stderr.
        log_file: Optional rotating diagnostic log.
        rotate_at_bytes: Size at which the log file rolls over.
        keep_rotated: Rolled-over files kept beside the active one.
        fmt: Record format shared by every handler.
    """
    level: str = "WARNING"
    console: bool = True
    log_file: Optional[str] = None
    rotate_at_bytes: int = 512 * 1024
    keep_rotated: int = 1
    fmt: str = "%(levelname)s | %(name)s | %(message)s"

# ==============================================================================
# PUBLIC API
# ==============================================================================

def configure_logging(cfg: LoggingConfig, *, force: bool = False) -> logging.Logger:
    """
    Attach console and file handlers to the root logger once.

    Args:
        cfg: Logging settings.
        force: Replace previously installed handlers instead of returning early.

    Returns:
        logging.Logger: The root logger.
    """
    root = logging.getLogger()

    if getattr(root, _CONFIGURED_FLAG_ATTR, False) and not force:
        return root

    level_int = _parse_level(cfg.level)
    root.setLevel(level_int)
    _remove_our_handlers(root)

    formatter = logging.Formatter(cfg.fmt)
    handlers: List[logging.Handler] = []

    if cfg.console:
        handlers.append(_create_console_handler(level_int, formatter))

    if cfg.log_file:
        fh = _create_rotating_file_handler(
            cfg.log_file,
            level_int,
            formatter,
            cfg.rotate_at_bytes,
            cfg.keep_rotated,
        )
        if fh:
            handlers.append(fh)

    for h in handlers:
        root.addHandler(h)

    setattr(root, _CONFIGURED_FLAG_ATTR, True)
    return root


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)

# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _parse_level(level: str) -> int:
    """Resolve a level name through the logging registry, defaulting to WARNING."""
    value = logging.getLevelName(str(level or "").strip().upper())
    return value if isinstance(value, int) else logging.WARNING


def _remove_our_handlers(root: logging.Logger) -> None:
    for h in list(root.handlers):
        if _is_our_handler(h):
            root.removeHandler(h)
            h.close()
