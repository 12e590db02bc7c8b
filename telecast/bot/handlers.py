"""Update handlers -- class-based reactions to incoming updates.

A handler class decides *whether* it wants an update (:meth:`UpdateHandler.trigger`,
a classmethod evaluated without instantiating) and *what* to do with it
(:meth:`UpdateHandler.handle`, run on a fresh instance per update)::

    class Echo(MessageHandler):
        def handle(self):
            self.bot.send_message(chat_id=self.message.chat.id, text=self.message.text)

    bot.add_handler(Echo)
"""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING, Any, ClassVar

from telecast.sdk.models import Message, Update

if TYPE_CHECKING:
    from telecast.bot.controller import Bot


class UpdateHandler(abc.ABC):
    """Base class for update handlers registered on a :class:`~telecast.bot.controller.Bot`."""

    def __init__(self, bot: Bot, update: Update) -> None:
        self.bot = bot
        self.update = update

    @classmethod
    @abc.abstractmethod
    def trigger(cls, update: Update) -> bool:
        """Return ``True`` if this handler should process *update*."""

    @abc.abstractmethod
    def handle(self) -> Any:
        """Process the update this instance was created for."""

    # ------------------------------------------------------------------
    #  Convenience accessors
    # ------------------------------------------------------------------

    @property
    def message(self) -> Message | None:
        return self.update.effective_message

    @property
    def chat_id(self) -> int | None:
        message = self.message
        return message.chat.id if message is not None and message.chat is not None else None


class _FieldHandler(UpdateHandler):
    """Triggers when the update carries the payload field named by ``update_field``."""

    update_field: ClassVar[str]

    @classmethod
    def trigger(cls, update: Update) -> bool:
        return cls.update_field in update


class MessageHandler(_FieldHandler):
    update_field = "message"


class EditedMessageHandler(_FieldHandler):
    update_field = "edited_message"


class ChannelPostHandler(_FieldHandler):
    update_field = "channel_post"


class CallbackQueryHandler(_FieldHandler):
    update_field = "callback_query"

    @property
    def callback_query(self):
        return self.update.callback_query


class InlineQueryHandler(_FieldHandler):
    update_field = "inline_query"

    @property
    def inline_query(self):
        return self.update.inline_query


class CommandHandler(MessageHandler):
    """Triggers on a message whose leading word is one of ``commands``.

    ``/start`` and ``/start@my_bot`` both match ``commands = ("/start",)``;
    entries may be given with or without the leading slash.
    """

    commands: ClassVar[tuple[str, ...]] = ()

    @classmethod
    def trigger(cls, update: Update) -> bool:
        if not super().trigger(update):
            return False
        command = update.message.command
        if command is None:
            return False
        return command in {c if c.startswith("/") else f"/{c}" for c in cls.commands}

    @property
    def arguments(self) -> list[str]:
        """Whitespace-separated words following the command."""
        return (self.message.text or "").split()[1:]
