"""Bot -- the user-facing façade over the method catalog and handler registry.

Methods are dispatched dynamically by name; both spellings work and
arguments may be given as a mapping, as keywords, or both::

    bot = Bot("123:ABC")
    me = bot.get_me()
    bot.sendMessage({"chat_id": 42, "text": "hello"})
    bot.send_message(chat_id=42, text="hello")

    # one-shot overrides, without touching the bot's defaults
    pending = bot.asynchronous().send_message(chat_id=42, text="later")
    message = await pending
    result = bot.exceptions(False).get_chat(chat_id=-1)   # Failure instead of raising

Incoming updates are routed through :meth:`Bot.handle_update`.
"""

from __future__ import annotations

import abc
import json
from typing import Any, Callable, Iterable, Mapping, Optional, Union

from telecast.bot.registry import Handler, HandlerRegistry
from telecast.core.exceptions import ConfigError, MethodNotFound, TypeMismatch
from telecast.core.logger import TelecastLogger
from telecast.sdk.client import DEFAULT_API_URL, DEFAULT_TIMEOUT, TelegramMethod
from telecast.sdk.methods import get_method
from telecast.sdk.models import Update

logger = TelecastLogger.get_logger()

BodyReader = Callable[[], Union[str, bytes, None]]


class _Invoker(abc.ABC):
    """Shared attribute dispatch: ``obj.send_message(...)`` → ``obj.invoke("send_message", ...)``."""

    @abc.abstractmethod
    def invoke(self, name: str, args: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> Any:
        """Call the remote method *name*."""

    def __getattr__(self, name: str) -> Callable[..., Any]:
        if name.startswith("_") or get_method(name) is None:
            raise MethodNotFound(name)

        def call(args: Optional[Mapping[str, Any]] = None, /, **kwargs: Any) -> Any:
            return self.invoke(name, _merge(args, kwargs))

        call.__name__ = name
        return call


class Bot(_Invoker):
    """Telegram bot bound to one token.

    Args:
        config: A token string, or a mapping with ``token`` and any of
            ``exceptions``, ``async``, ``handlers``, ``timeout``, ``api_url``,
            ``body_reader``.
        **options: The same keys as keyword arguments (``run_async`` may be
            used for ``async``).

    Raises:
        ConfigError: If no token is given.
    """

    def __init__(self, config: Union[str, Mapping[str, Any], None] = None, **options: Any) -> None:
        if isinstance(config, str):
            settings: dict[str, Any] = {"token": config}
        elif isinstance(config, Mapping):
            settings = dict(config)
        elif config is None:
            settings = {}
        else:
            raise ConfigError(f"Bot config must be a token string or a mapping, got {type(config).__name__}")
        if "run_async" in options:
            options["async"] = options.pop("run_async")
        settings.update(options)

        token = settings.get("token")
        if not token:
            raise ConfigError.key_required("token", "Bot")

        self._token: str = str(token)
        self.default_exceptions: bool = bool(settings.get("exceptions", True))
        self.default_async: bool = bool(settings.get("async", False))
        self.timeout: float = settings.get("timeout") or DEFAULT_TIMEOUT
        self.api_url: str = (settings.get("api_url") or DEFAULT_API_URL).rstrip("/")
        self.body_reader: Optional[BodyReader] = settings.get("body_reader")
        self.handlers = HandlerRegistry(settings.get("handlers") or [])

        logger.debug(
            "Bot configured",
            extra={"exceptions": self.default_exceptions, "async": self.default_async, "handlers": len(self.handlers)},
        )

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None, **options: Any) -> Bot:
        """Build a bot from ``TELEGRAM_BOT_TOKEN`` and the ``TELECAST_*`` variables."""
        from telecast.config import load_config

        return cls(load_config(dotenv_path), **options)

    @property
    def token(self) -> str:
        return self._token

    # ------------------------------------------------------------------
    #  Remote methods
    # ------------------------------------------------------------------

    def invoke(
        self,
        name: str,
        args: Optional[Mapping[str, Any]] = None,
        *,
        run_async: Optional[bool] = None,
        exceptions: Optional[bool] = None,
        timeout: Optional[float] = None,
    ) -> Any:
        """Call the remote method *name* with *args*.

        *run_async*, *exceptions* and the HTTP *timeout* default to the bot's
        configured values and apply to this call only.

        Raises:
            MethodNotFound: If *name* is not a known method.
            TypeMismatch: If *args* does not fit the method's parameters.
        """
        spec = get_method(name)
        if spec is None:
            raise MethodNotFound(name)
        if args is not None and not isinstance(args, Mapping):
            raise TypeMismatch("mapping", args, spec.name)

        method = TelegramMethod(self._token, spec, args, api_url=self.api_url, timeout=timeout or self.timeout)
        return method.execute(
            exceptions=self.default_exceptions if exceptions is None else exceptions,
            run_async=self.default_async if run_async is None else run_async,
        )

    def asynchronous(self, flag: bool = True) -> CallOptions:
        """Return a proxy whose calls run with ``async`` set to *flag*."""
        return CallOptions(self, run_async=flag)

    def exceptions(self, flag: bool = True) -> CallOptions:
        """Return a proxy whose calls run with ``exceptions`` set to *flag*."""
        return CallOptions(self, exceptions=flag)

    def file_url(self, file_path: str) -> str:
        """Download URL for the ``file_path`` of a :class:`~telecast.sdk.models.File`."""
        return f"{self.api_url}/file/bot{self._token}/{file_path.lstrip('/')}"

    # ------------------------------------------------------------------
    #  Updates
    # ------------------------------------------------------------------

    def add_handler(self, handler: Union[Handler, Iterable[Handler]]) -> None:
        """Register a handler, or a (nested) list of handlers, in order.

        Raises:
            InvalidHandler: If any entry is neither callable nor an
                ``UpdateHandler`` subclass.
        """
        self.handlers.add(handler)

    def handle_update(self, update: Union[Update, Mapping[str, Any], None] = None) -> bool:
        """Run every matching handler for *update*.

        Without an argument the update is read from the inbound webhook body
        via ``body_reader``.  Returns ``False`` and dispatches nothing when no
        valid update (an object with ``update_id`` whose fields fit the
        ``Update`` schema) is available.
        """
        if update is None:
            update = self._read_body()
            if update is None:
                return False
        if not isinstance(update, Update):
            if not isinstance(update, Mapping) or update.get("update_id") is None:
                logger.debug("Ignoring payload without update_id")
                return False
            try:
                update = Update(update)
            except TypeMismatch as exc:
                logger.warning(
                    "Failed to parse update", extra={"update_id": update.get("update_id"), "error": str(exc)}
                )
                return False
        elif update.update_id is None:
            return False

        update_id = update.update_id
        for entry in self.handlers.matching(update):
            logger.debug("Dispatching update", extra={"update_id": update_id, "handler": entry.name})
            entry.run(self, update)
        return True

    def _read_body(self) -> Optional[Mapping[str, Any]]:
        if self.body_reader is None:
            return None
        body = self.body_reader()
        if not body:
            return None
        try:
            data = json.loads(body)
        except ValueError:
            logger.warning("Webhook body is not valid JSON")
            return None
        return data if isinstance(data, Mapping) else None

    def __repr__(self) -> str:
        return f"Bot(api_url={self.api_url!r}, handlers={len(self.handlers)})"


class CallOptions(_Invoker):
    """One-shot call options bound to a bot.

    Returned by :meth:`Bot.asynchronous` and :meth:`Bot.exceptions`; chainable
    (``bot.asynchronous().exceptions(False).send_message(...)``).  The bot's
    own defaults are never modified.
    """

    def __init__(self, bot: Bot, run_async: Optional[bool] = None, exceptions: Optional[bool] = None) -> None:
        self._bot = bot
        self._run_async = run_async
        self._exceptions = exceptions

    def asynchronous(self, flag: bool = True) -> CallOptions:
        return CallOptions(self._bot, run_async=flag, exceptions=self._exceptions)

    def exceptions(self, flag: bool = True) -> CallOptions:
        return CallOptions(self._bot, run_async=self._run_async, exceptions=flag)

    def invoke(self, name: str, args: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> Any:
        kwargs.setdefault("run_async", self._run_async)
        kwargs.setdefault("exceptions", self._exceptions)
        return self._bot.invoke(name, args, **kwargs)


def _merge(args: Optional[Mapping[str, Any]], kwargs: Mapping[str, Any]) -> Optional[Mapping[str, Any]]:
    if not kwargs:
        return args
    if args is None:
        return dict(kwargs)
    if not isinstance(args, Mapping):
        raise TypeMismatch("mapping", args)
    return {**args, **kwargs}
