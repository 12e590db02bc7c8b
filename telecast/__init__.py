"""telecast -- a typed Telegram Bot API client.

Usage::

    from telecast import Bot, MessageHandler

    bot = Bot("123:ABC")
    bot.send_message(chat_id=42, text="hello")
"""

from telecast.bot import (
    Bot,
    CallbackQueryHandler,
    ChannelPostHandler,
    CommandHandler,
    EditedMessageHandler,
    InlineQueryHandler,
    MessageHandler,
    UpdateHandler,
    run_polling,
    run_polling_async,
)
from telecast.core import (
    ConfigError,
    InputFile,
    InvalidHandler,
    MethodNotFound,
    RemoteCallError,
    TelecastError,
    TelegramObject,
    TransportError,
    TypeMismatch,
)
from telecast.sdk import Failure

__version__ = "0.1.0"

__all__ = [
    "Bot",
    "UpdateHandler",
    "MessageHandler",
    "EditedMessageHandler",
    "ChannelPostHandler",
    "CallbackQueryHandler",
    "InlineQueryHandler",
    "CommandHandler",
    "run_polling",
    "run_polling_async",
    "TelegramObject",
    "InputFile",
    "Failure",
    "TelecastError",
    "ConfigError",
    "MethodNotFound",
    "InvalidHandler",
    "TypeMismatch",
    "RemoteCallError",
    "TransportError",
]
