"""Handler registry -- ordered fan-out of updates to registered handlers.

Two handler shapes are accepted:

- a plain callable taking the :class:`~telecast.sdk.models.Update`
  (it is always called);
- an :class:`~telecast.bot.handlers.UpdateHandler` subclass (instantiated
  with ``(bot, update)`` and run only when its ``trigger`` matches).

Registration order is evaluation order and every matching handler runs.
"""

from __future__ import annotations

import dataclasses
import inspect
from typing import TYPE_CHECKING, Any, Callable, Iterable, Iterator, Protocol, Union, runtime_checkable

from telecast.bot.handlers import UpdateHandler
from telecast.core.exceptions import InvalidHandler
from telecast.sdk.models import Update

if TYPE_CHECKING:
    from telecast.bot.controller import Bot


# ── Handler protocol ─────────────────────────────────────────────────────────

@runtime_checkable
class UpdateCallback(Protocol):
    """Plain function handler: receives every update."""
    def __call__(self, update: Update) -> Any: ...  # noqa: E704


Handler = Union[UpdateCallback, type[UpdateHandler]]


def is_handler_class(handler: Any) -> bool:
    return inspect.isclass(handler) and issubclass(handler, UpdateHandler)


# ── Registry entry ───────────────────────────────────────────────────────────

@dataclasses.dataclass(frozen=True, slots=True)
class HandlerEntry:
    """One registered handler and how to run it."""
    handler: Handler
    is_class: bool

    @property
    def name(self) -> str:
        return getattr(self.handler, "__name__", None) or type(self.handler).__name__

    def matches(self, update: Update) -> bool:
        return not self.is_class or self.handler.trigger(update)  # type: ignore[union-attr]

    def run(self, bot: Bot, update: Update) -> Any:
        if self.is_class:
            return self.handler(bot, update).handle()  # type: ignore[call-arg,union-attr]
        return self.handler(update)  # type: ignore[call-arg]


# ── Registry ─────────────────────────────────────────────────────────────────

class HandlerRegistry:
    """Append-only, ordered list of :class:`HandlerEntry` objects.

    Usage::

        handlers = HandlerRegistry()
        handlers.add([on_any_update, StartCommand])

        for entry in handlers.matching(update):
            entry.run(bot, update)
    """

    def __init__(self, handlers: Handler | Iterable[Handler] | None = None) -> None:
        self._entries: list[HandlerEntry] = []
        if handlers is not None:
            self.add(handlers)

    def add(self, handler: Handler | Iterable[Handler]) -> None:
        """Register *handler*; lists (nested too) are flattened in order.

        Raises:
            InvalidHandler: If an entry is neither callable nor an
                ``UpdateHandler`` subclass.  Nothing is registered then.
        """
        entries = [self._entry(h) for h in _flatten(handler)]
        self._entries.extend(entries)

    @staticmethod
    def _entry(handler: Any) -> HandlerEntry:
        if is_handler_class(handler):
            if inspect.isabstract(handler):
                raise InvalidHandler(handler)
            return HandlerEntry(handler, is_class=True)
        # Classes are callable too; only UpdateHandler subclasses are accepted.
        if callable(handler) and not inspect.isclass(handler):
            return HandlerEntry(handler, is_class=False)
        raise InvalidHandler(handler)

    # ── lookup helpers ───────────────────────────────────────────────────

    def matching(self, update: Update) -> Iterator[HandlerEntry]:
        """Yield, in registration order, every entry that wants *update*."""
        for entry in self._entries:
            if entry.matches(update):
                yield entry

    def entries(self) -> list[HandlerEntry]:
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[HandlerEntry]:
        return iter(list(self._entries))


def _flatten(handler: Any) -> Iterator[Any]:
    if isinstance(handler, (list, tuple)):
        for item in handler:
            yield from _flatten(item)
    else:
        yield handler
