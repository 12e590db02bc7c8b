"""Telegram Bot API catalog -- object schemas, method specs and the request executor.

Usage::

    from telecast.sdk import TelegramMethod, get_method
    from telecast.sdk.models import User, Message, Update
"""

from telecast.sdk.client import Failure, TelegramMethod
from telecast.sdk.methods import METHODS, MethodSpec, get_method

__all__ = [
    "TelegramMethod",
    "Failure",
    "MethodSpec",
    "METHODS",
    "get_method",
]
