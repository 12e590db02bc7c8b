"""TelecastLogger -- the library's singleton JSON logger.

Everything in telecast logs through the ``telecast`` logger (or a child of
it).  As a library it stays silent by default: only a
:class:`logging.NullHandler` is attached.  Output is switched on by the
application, either from the environment or in code:

* ``TELECAST_LOG_CONSOLE=1`` or :meth:`TelecastLogger.add_console` writes JSON
  lines to stderr;
* ``TELECAST_LOG_FILE=<path>`` or :meth:`TelecastLogger.add_file` writes them
  to a rotating file (5 MB x 5);
* ``TELECAST_LOG_LEVEL`` sets the level, by name or number.
"""

import json
import logging
import os
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from typing import IO, Optional

LOGGER_NAME = "telecast"

_TRUTHY = {"1", "true", "yes", "on"}


class _JsonFormatter(logging.Formatter):
    """One JSON object per record.

    Every record carries ``timestamp``, ``level``, ``logger``, ``message``,
    ``module`` and ``func_name``; keys passed through ``extra=`` (``api_method``,
    ``update_id``, ...) are added alongside, and a traceback, if any, lands in
    ``exception``.
    """

    _RESERVED = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "func_name": record.funcName,
        }
        entry.update(
            (key, value) for key, value in vars(record).items()
            if key not in self._RESERVED and key not in entry
        )
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


def _level_from_env(default: int) -> int:
    """Resolve ``TELECAST_LOG_LEVEL`` (name or number) to a logging level."""
    raw = os.environ.get("TELECAST_LOG_LEVEL")
    if not raw:
        return default
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw.strip().upper())
    return level if isinstance(level, int) else default


class TelecastLogger:
    """Owner of the ``telecast`` logger and its handlers.

    Usage::

        from telecast.core.logger import TelecastLogger

        logger = TelecastLogger.get_logger()
        TelecastLogger.add_console()      # opt in to stderr output
    """

    _instance: Optional["TelecastLogger"] = None

    _MAX_BYTES = 5 * 1024 * 1024
    _BACKUP_COUNT = 5

    def __new__(cls, level: int = logging.INFO) -> "TelecastLogger":
        if cls._instance is None:
            instance = super().__new__(cls)
            instance.logger = logging.getLogger(LOGGER_NAME)
            instance._configure(_level_from_env(level))
            cls._instance = instance
        return cls._instance

    def _configure(self, level: int) -> None:
        self.logger.setLevel(level)
        # Handlers survive a module reload; attach them once.
        if self.logger.handlers:
            return
        self.logger.addHandler(logging.NullHandler())
        if os.environ.get("TELECAST_LOG_CONSOLE", "").strip().lower() in _TRUTHY:
            self._attach(logging.StreamHandler())
        log_path = os.environ.get("TELECAST_LOG_FILE")
        if log_path:
            self._attach(self._file_handler(log_path))

    def _attach(self, handler: logging.Handler) -> logging.Handler:
        handler.setFormatter(_JsonFormatter())
        self.logger.addHandler(handler)
        return handler

    @classmethod
    def _file_handler(cls, path: str) -> RotatingFileHandler:
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        return RotatingFileHandler(path, maxBytes=cls._MAX_BYTES, backupCount=cls._BACKUP_COUNT, encoding="utf-8")

    @staticmethod
    def get_logger(level: int = logging.INFO) -> logging.Logger:
        """Return the shared ``telecast`` logger; *level* only applies on first use."""
        return TelecastLogger(level).logger

    @classmethod
    def add_console(cls, stream: Optional[IO[str]] = None) -> logging.Handler:
        """Write JSON lines to *stream* (stderr by default)."""
        return cls()._attach(logging.StreamHandler(stream))

    @classmethod
    def add_file(cls, path: str) -> logging.Handler:
        """Write JSON lines to a rotating file at *path*."""
        return cls()._attach(cls._file_handler(path))

    @classmethod
    def remove_handler(cls, handler: logging.Handler) -> None:
        """Detach and close a handler added with :meth:`add_console` or :meth:`add_file`."""
        logger = cls().logger
        logger.removeHandler(handler)
        handler.close()
