"""Core engine -- type descriptors, casting, typed objects, errors and logging.

This package is API-agnostic. It must NEVER import from ``bot/`` or ``sdk/``.
"""

from telecast.core.caster import cast_value, cast_values, strip_arrays
from telecast.core.exceptions import (
    ConfigError,
    InvalidHandler,
    MethodNotFound,
    RemoteCallError,
    TelecastError,
    TransportError,
    TypeMismatch,
)
from telecast.core.files import InputFile
from telecast.core.logger import TelecastLogger
from telecast.core.objects import TelegramObject

__all__ = [
    # Casting
    "cast_value",
    "cast_values",
    "strip_arrays",
    "TelegramObject",
    "InputFile",
    # Errors
    "TelecastError",
    "ConfigError",
    "MethodNotFound",
    "InvalidHandler",
    "TypeMismatch",
    "RemoteCallError",
    "TransportError",
    # Logging
    "TelecastLogger",
]
