"""
Logging setup for the Artwork Browser.

Two sinks:
- stderr, configured once at startup (configure_logging)
- the main window's console, fed through a queue that the GUI thread
  drains on a timer (QueueLogHandler)

Worker threads log freely; only the GUI thread touches the console.
"""
from __future__ import annotations

import logging
import sys
from queue import Queue
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


class QueueLogHandler(logging.Handler):
    """
    Puts (message, level_name) tuples on a queue for the console widget.

    Thread-safe: queue.Queue does the locking, and records are formatted
    on the thread that logged them.
    """

    def __init__(self, log_queue: Queue, level: int = logging.INFO):
        super().__init__(level)
        self.log_queue = log_queue
        self.setFormatter(logging.Formatter("%(message)s"))

    def emit(self, record: logging.LogRecord) -> None:
        try:
            self.log_queue.put((self.format(record), record.levelname))
        except Exception:
            self.handleError(record)


def attach_queue_handler(log_queue: Queue, logger_name: Optional[str] = None) -> QueueLogHandler:
    """
    Route a logger (root if logger_name is None) into log_queue.

    Returns:
        The new handler; pass it to detach_queue_handler() on shutdown.
    """
    handler = QueueLogHandler(log_queue)
    logging.getLogger(logger_name).addHandler(handler)
    return handler


def detach_queue_handler(handler: QueueLogHandler, logger_name: Optional[str] = None) -> None:
    """Stop routing a logger into the console queue."""
    logging.getLogger(logger_name).removeHandler(handler)


def configure_logging(level: int = logging.INFO, logger_name: str = "artwork_browser") -> logging.Logger:
    """
    Send the application's logs to stderr.

    Safe to call more than once; the stream handler is only added once.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(logger_name)
    logger.setLevel(level)
    if not any(getattr(h, "_artwork_browser_stream", False) for h in logger.handlers):
        stream = logging.StreamHandler(sys.stderr)
        stream.setFormatter(logging.Formatter(LOG_FORMAT))
        stream._artwork_browser_stream = True
        logger.addHandler(stream)
    return logger
