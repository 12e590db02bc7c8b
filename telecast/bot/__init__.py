"""Bot application layer -- the Bot façade, update handlers and polling.

This package may import from ``core/`` and ``sdk/`` only.
"""

from telecast.bot.controller import Bot, CallOptions
from telecast.bot.dispatcher import iter_updates, run_polling, run_polling_async
from telecast.bot.handlers import (
    CallbackQueryHandler,
    ChannelPostHandler,
    CommandHandler,
    EditedMessageHandler,
    InlineQueryHandler,
    MessageHandler,
    UpdateHandler,
)
from telecast.bot.registry import HandlerEntry, HandlerRegistry

__all__ = [
    # Façade
    "Bot",
    "CallOptions",
    # Handlers
    "UpdateHandler",
    "MessageHandler",
    "EditedMessageHandler",
    "ChannelPostHandler",
    "CallbackQueryHandler",
    "InlineQueryHandler",
    "CommandHandler",
    "HandlerRegistry",
    "HandlerEntry",
    # Polling
    "iter_updates",
    "run_polling",
    "run_polling_async",
]
