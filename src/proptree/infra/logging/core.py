from __future__ import annotations

"""
Logging Setup.

proptree modules log through logging.getLogger(__name__) and never attach
handlers on import. configure_logging() is an opt-in helper that routes
every record through a QueueHandler so file writes happen on a listener
thread.
"""

import atexit
import logging
import queue
from logging.handlers import QueueHandler, QueueListener
from typing import List, Optional

from proptree.infra.logging.config import _LEVEL_MAP, LoggingConfig
from proptree.infra.logging.handlers import (
    _create_console_handler,
    _create_rotating_file_handler,
    _is_our_handler,
    _tag_handler,
)

_CONFIGURED_FLAG_ATTR: str = "_proptree_configured"
_QUEUE_LISTENER_ATTR: str = "_proptree_queue_listener"


# ==============================================================================
# PUBLIC API
# ==============================================================================

def configure_logging(
        cfg: LoggingConfig,
        *,
        logger_name: str = "proptree",
        force: bool = False,
) -> logging.Logger:
    """
    Attach console and file handlers to a logger, once.

    Args:
        cfg: Handler settings.
        logger_name: Logger to configure; "" selects the root logger.
        force: Drop the handlers of a previous call and configure again.

    Returns:
        logging.Logger: The configured logger.
    """
    target = logging.getLogger(logger_name)

    already_configured = bool(getattr(target, _CONFIGURED_FLAG_ATTR, False))
    if already_configured and not force:
        return target

    level_int = _parse_level(cfg.level)
    target.setLevel(level_int)

    _remove_our_handlers(target)
    _stop_existing_listener(target)

    handlers_list: List[logging.Handler] = []

    if cfg.console:
        handlers_list.append(
            _create_console_handler(level_int, logging.Formatter(cfg.console_fmt))
        )

    if cfg.log_file:
        fh = _create_rotating_file_handler(
            cfg.log_file,
            level_int,
            logging.Formatter(cfg.file_fmt, datefmt=cfg.datefmt),
            cfg.max_bytes,
            cfg.backup_count,
        )
        if fh:
            handlers_list.append(fh)

    if not handlers_list:
        return target

    log_queue: queue.Queue[logging.LogRecord] = queue.Queue(-1)
    queue_handler = QueueHandler(log_queue)
    _tag_handler(queue_handler)

    listener = QueueListener(log_queue, *handlers_list, respect_handler_level=True)
    listener.start()

    target.addHandler(queue_handler)
    setattr(target, _QUEUE_LISTENER_ATTR, listener)
    setattr(target, _CONFIGURED_FLAG_ATTR, True)

    # Flush pending records at interpreter exit
    atexit.register(_safe_stop_listener, listener)

    return target


def shutdown_logging(logger_name: str = "proptree") -> None:
    """Flush the listener and detach the handlers added by configure_logging()."""
    target = logging.getLogger(logger_name)
    _stop_existing_listener(target)
    _remove_our_handlers(target)
    setattr(target, _CONFIGURED_FLAG_ATTR, False)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _parse_level(level: str) -> int:
    """Convert a level name to its numeric constant, defaulting to INFO."""
    if not level:
        return logging.INFO
    return _LEVEL_MAP.get(str(level).strip().upper(), logging.INFO)


def _remove_our_handlers(target: logging.Logger) -> None:
    for h in list(target.handlers):
        if _is_our_handler(h):
            target.removeHandler(h)
            h.close()


def _stop_existing_listener(target: logging.Logger) -> None:
    listener = getattr(target, _QUEUE_LISTENER_ATTR, None)
    if listener:
        _safe_stop_listener(listener)
        setattr(target, _QUEUE_LISTENER_ATTR, None)


def _safe_stop_listener(listener: Optional[QueueListener]) -> None:
    """Stop a listener, tolerating one that was already stopped."""
    if listener is None:
        return
    if getattr(listener, "_thread", None) is not None:
        listener.stop()
