"""Exception hierarchy for telecast.

``ConfigError``, ``MethodNotFound``, ``InvalidHandler`` and ``TypeMismatch``
are always raised.  ``RemoteCallError`` and ``TransportError`` are gated by
the per-call *exceptions* policy: when it is off the call returns a falsy
:class:`~telecast.sdk.client.Failure` carrying the error instead.
"""

from typing import Any, Dict, Optional


class TelecastError(Exception):
    """Base class for every error raised by telecast."""


class ConfigError(TelecastError):
    """Missing or invalid bot configuration."""

    @classmethod
    def key_required(cls, key: str, owner: str) -> "ConfigError":
        return cls(f"Config key '{key}' is required to create {owner}")


class MethodNotFound(TelecastError, AttributeError):
    """The requested API method name is not in the method registry."""

    def __init__(self, method: str) -> None:
        self.method = method
        super().__init__(f"Unknown Telegram Bot API method: {method!r}")


class InvalidHandler(TelecastError, TypeError):
    """A handler is neither callable nor an ``UpdateHandler`` subclass."""

    def __init__(self, handler: Any) -> None:
        self.handler = handler
        name = handler if isinstance(handler, str) else getattr(handler, "__name__", type(handler).__name__)
        super().__init__(f"Invalid update handler: {name}")


class TypeMismatch(TelecastError, TypeError):
    """A value cannot be cast to the shape its schema declares.

    Attributes:
        expected: Human-readable descriptor (``"integer"``, ``"Message[]"``).
        value: The offending raw value.
        field: Dotted field path, when known.
    """

    def __init__(self, expected: str, value: Any, field: Optional[str] = None) -> None:
        self.expected = expected
        self.value = value
        self.field = field
        where = f" for field '{field}'" if field else ""
        super().__init__(
            f"Cannot cast {type(value).__name__} value {value!r} to {expected}{where}"
        )

    def at(self, field: str) -> "TypeMismatch":
        """Return a copy of this error with *field* prefixed to its path."""
        path = f"{field}.{self.field}" if self.field else field
        return TypeMismatch(self.expected, self.value, path)


class RemoteCallError(TelecastError):
    """The Telegram Bot API reported a failure (``ok: false`` or non-2xx).

    Attributes:
        status_code: HTTP status code returned by the API.
        response_body: Raw response body as a dict, when available.
        error_code: Telegram's ``error_code`` (falls back to *status_code*).
        description: Telegram's human-readable ``description``.
        retry_after: Seconds to wait before retrying (flood control), if given.
        migrate_to_chat_id: New supergroup id, if the group was migrated.
    """

    def __init__(self, status_code: int, response_body: Optional[Dict[str, Any]] = None) -> None:
        """Initialise with the HTTP status code and optional body."""
        self.status_code = status_code
        self.response_body = response_body or {}
        self.error_code: int = self.response_body.get("error_code") or status_code
        self.description: str = self.response_body.get("description") or "Unknown error"
        parameters = self.response_body.get("parameters") or {}
        self.retry_after: Optional[int] = parameters.get("retry_after")
        self.migrate_to_chat_id: Optional[int] = parameters.get("migrate_to_chat_id")
        super().__init__(f"API error {self.error_code}: {self.description}")


class TransportError(TelecastError):
    """The request never produced a usable API response (network, timeout, bad JSON)."""

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        self.cause = cause
        super().__init__(message)
