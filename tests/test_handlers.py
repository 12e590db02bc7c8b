"""Tests for UpdateHandler variants and the handler registry."""

import sys
import os

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from telecast.bot.handlers import (
    CallbackQueryHandler,
    ChannelPostHandler,
    CommandHandler,
    EditedMessageHandler,
    InlineQueryHandler,
    MessageHandler,
    UpdateHandler,
)
from telecast.bot.registry import HandlerRegistry
from telecast.core.exceptions import InvalidHandler
from telecast.sdk.models import Update


# ── Fixtures ─────────────────────────────────────────────────────────────────


def _message(text: str = "hello", chat_id: int = 1000) -> dict:
    return {
        "message_id": 1,
        "from": {"id": 42, "is_bot": False, "first_name": "Ann"},
        "chat": {"id": chat_id, "type": "private"},
        "date": 0,
        "text": text,
    }


def _make_update(field: str, payload: dict, update_id: int = 1) -> Update:
    return Update({"update_id": update_id, field: payload})


_CALLBACK = {
    "id": "cb123",
    "from": {"id": 42, "is_bot": False, "first_name": "Ann"},
    "chat_instance": "test",
    "message": _message("Pick one"),
    "data": "approve:400",
}

_INLINE = {"id": "iq1", "from": {"id": 42, "is_bot": False, "first_name": "Ann"}, "query": "cats", "offset": ""}


class Start(CommandHandler):
    commands = ("/start", "help")

    def handle(self):
        return self.arguments


class Clicks(CallbackQueryHandler):
    def handle(self):
        return self.callback_query.data


class Queries(InlineQueryHandler):
    def handle(self):
        return self.inline_query.query


class Edits(EditedMessageHandler):
    def handle(self):
        return self.message.text


class Posts(ChannelPostHandler):
    def handle(self):
        return self.chat_id


# ── Triggers ─────────────────────────────────────────────────────────────────


class TestTriggers:
    """Each handler variant selects its own update kind."""

    def test_message_handler(self) -> None:
        assert MessageHandler.trigger(_make_update("message", _message()))
        assert not MessageHandler.trigger(_make_update("edited_message", _message()))

    def test_edited_message_handler(self) -> None:
        update = _make_update("edited_message", _message("fixed"))
        assert Edits.trigger(update)
        assert Edits(None, update).handle() == "fixed"

    def test_channel_post_handler(self) -> None:
        update = _make_update("channel_post", _message(chat_id=-100))
        assert Posts.trigger(update)
        assert Posts(None, update).handle() == -100

    def test_callback_query_handler(self) -> None:
        update = _make_update("callback_query", _CALLBACK)
        assert Clicks.trigger(update)
        assert not MessageHandler.trigger(update)
        handler = Clicks(None, update)
        assert handler.handle() == "approve:400"
        assert handler.chat_id == 1000

    def test_inline_query_handler(self) -> None:
        update = _make_update("inline_query", _INLINE)
        assert Queries.trigger(update)
        assert Queries(None, update).handle() == "cats"
        assert Queries(None, update).message is None


class TestCommandHandler:
    """Slash-command matching."""

    @pytest.mark.parametrize("text", ["/start", "/start@my_bot", "/start now please", "/help", "/help@my_bot x"])
    def test_matches(self, text: str) -> None:
        assert Start.trigger(_make_update("message", _message(text)))

    @pytest.mark.parametrize("text", ["start", "/stop", "/starter", "hello /start", ""])
    def test_does_not_match(self, text: str) -> None:
        assert not Start.trigger(_make_update("message", _message(text)))

    def test_ignores_non_message_updates(self) -> None:
        assert not Start.trigger(_make_update("edited_message", _message("/start")))

    def test_arguments(self) -> None:
        update = _make_update("message", _message("/start@my_bot a b"))
        assert Start(None, update).handle() == ["a", "b"]


# ── Registry ─────────────────────────────────────────────────────────────────


class TestHandlerRegistry:
    """Ordered, validated registration and matching."""

    def test_mixed_entries_in_order(self) -> None:
        def on_update(update):
            return update.update_id

        registry = HandlerRegistry([on_update, Start, [Clicks]])
        assert [entry.name for entry in registry] == ["on_update", "Start", "Clicks"]
        assert [entry.is_class for entry in registry] == [False, True, True]

    def test_matching(self) -> None:
        registry = HandlerRegistry([lambda update: None, Start, Clicks])
        names = [entry.name for entry in registry.matching(_make_update("message", _message("/start")))]
        assert names == ["<lambda>", "Start"]

    def test_run_instantiates_per_update(self) -> None:
        registry = HandlerRegistry([Start])
        update = _make_update("message", _message("/start x"))
        entry = next(registry.matching(update))
        assert entry.run(bot=None, update=update) == ["x"]

    @pytest.mark.parametrize("bad", [42, "module.Handler", object(), int, UpdateHandler, CommandHandler])
    def test_rejects_invalid(self, bad) -> None:
        with pytest.raises(InvalidHandler) as exc_info:
            HandlerRegistry().add(bad)
        assert exc_info.value.handler is bad

    def test_invalid_handler_is_type_error(self) -> None:
        assert issubclass(InvalidHandler, TypeError)
