"""Tests for the long-polling loop."""

import sys
import threading
import os
from unittest.mock import patch, MagicMock

import pytest
import requests

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from telecast import Bot
from telecast.bot import dispatcher
from telecast.bot.dispatcher import iter_updates

TOKEN = "123:ABC"


def _response(body, status_code: int = 200) -> MagicMock:
    mock_resp = MagicMock()
    mock_resp.ok = 200 <= status_code < 300
    mock_resp.status_code = status_code
    mock_resp.json.return_value = body
    return mock_resp


def _batch(*update_ids: int) -> MagicMock:
    return _response({
        "ok": True,
        "result": [{"update_id": uid, "message": {"message_id": uid, "text": "hi"}} for uid in update_ids],
    })


class TestIterUpdates:
    """getUpdates polling with offset tracking."""

    @patch("telecast.sdk.client.requests.request")
    def test_offset_advances(self, mock_request: MagicMock) -> None:
        mock_request.side_effect = [_batch(10, 11), _batch(12)]

        updates = list(iter_updates(Bot(TOKEN), timeout=5, max_batches=2))

        assert [u.update_id for u in updates] == [10, 11, 12]
        first, second = (c.kwargs["json"] for c in mock_request.call_args_list)
        assert first == {"timeout": 5}
        assert second == {"timeout": 5, "offset": 12}

    @patch("telecast.sdk.client.requests.request")
    def test_http_timeout_exceeds_long_poll(self, mock_request: MagicMock) -> None:
        mock_request.return_value = _batch()
        list(iter_updates(Bot(TOKEN), timeout=30, max_batches=1))
        assert mock_request.call_args.kwargs["timeout"] > 30

    @patch("telecast.sdk.client.requests.request")
    def test_allowed_updates(self, mock_request: MagicMock) -> None:
        mock_request.return_value = _batch()
        list(iter_updates(Bot(TOKEN), allowed_updates=("message",), max_batches=1))
        assert mock_request.call_args.kwargs["json"]["allowed_updates"] == ["message"]

    @patch("telecast.bot.dispatcher.time.sleep")
    @patch("telecast.sdk.client.requests.request")
    def test_failure_backs_off_and_retries(self, mock_request: MagicMock, mock_sleep: MagicMock) -> None:
        mock_request.side_effect = [requests.ConnectionError("offline"), _batch(1)]

        updates = list(iter_updates(Bot(TOKEN), max_batches=2))

        assert [u.update_id for u in updates] == [1]
        mock_sleep.assert_called_once_with(dispatcher.RETRY_DELAY)

    @patch("telecast.bot.dispatcher.time.sleep")
    @patch("telecast.sdk.client.requests.request")
    def test_failure_ignores_bot_exception_policy(self, mock_request: MagicMock, mock_sleep: MagicMock) -> None:
        mock_request.return_value = _response({"ok": False, "error_code": 409, "description": "Conflict"}, 409)
        bot = Bot({"token": TOKEN, "exceptions": True})
        assert list(iter_updates(bot, max_batches=1)) == []
        mock_sleep.assert_called_once()


class TestRunPolling:
    """Polled updates reach the bot's handlers."""

    @patch("telecast.sdk.client.requests.request")
    def test_dispatches_each_update(self, mock_request: MagicMock) -> None:
        mock_request.side_effect = [_batch(1, 2), KeyboardInterrupt()]
        seen = []
        bot = Bot({"token": TOKEN, "handlers": [lambda update: seen.append(update.update_id)]})

        with pytest.raises(KeyboardInterrupt):
            dispatcher.run_polling(bot)

        assert seen == [1, 2]

    @patch("telecast.sdk.client.requests.request")
    def test_handler_error_does_not_stop_loop(self, mock_request: MagicMock) -> None:
        mock_request.side_effect = [_batch(1, 2), _batch(), KeyboardInterrupt()]
        seen = []

        def flaky(update):
            seen.append(update.update_id)
            if update.update_id == 1:
                raise RuntimeError("handler bug")

        bot = Bot({"token": TOKEN, "handlers": [flaky]})
        with patch.object(dispatcher.logger, "exception") as mock_log, pytest.raises(KeyboardInterrupt):
            dispatcher.run_polling(bot)

        assert seen == [1, 2]
        assert mock_log.call_args.kwargs["extra"] == {"update_id": 1}
        assert mock_request.call_args_list[1].kwargs["json"]["offset"] == 3


class TestMalformedUpdates:
    """Bad payloads from getUpdates are skipped, never fatal."""

    @patch("telecast.sdk.client.requests.request")
    def test_malformed_update_skipped_and_acknowledged(self, mock_request: MagicMock) -> None:
        bad = {"ok": True, "result": [
            {"update_id": 1, "message": "x"},
            {"update_id": 2, "message": {"message_id": 2, "text": "hi"}},
        ]}
        mock_request.side_effect = [_response(bad), _batch()]

        updates = list(iter_updates(Bot(TOKEN), max_batches=2))

        assert [u.update_id for u in updates] == [2]
        assert mock_request.call_args.kwargs["json"]["offset"] == 3

    @patch("telecast.sdk.client.requests.request")
    def test_malformed_last_update_still_advances_offset(self, mock_request: MagicMock) -> None:
        bad = {"ok": True, "result": [{"update_id": "abc"}, {"update_id": 4, "poll": 7}]}
        mock_request.side_effect = [_response(bad), _batch()]

        assert list(iter_updates(Bot(TOKEN), max_batches=2)) == []
        assert mock_request.call_args.kwargs["json"]["offset"] == 5

    @patch("telecast.bot.dispatcher.time.sleep")
    @patch("telecast.sdk.client.requests.request")
    def test_non_list_result_backs_off(self, mock_request: MagicMock, mock_sleep: MagicMock) -> None:
        mock_request.side_effect = [_response({"ok": True, "result": {"update_id": 1}}), _batch(9)]

        updates = list(iter_updates(Bot(TOKEN), max_batches=2))

        assert [u.update_id for u in updates] == [9]
        mock_sleep.assert_called_once_with(dispatcher.RETRY_DELAY)


class _Stop(Exception):
    pass


class TestRunPollingAsync:
    """The async loop survives handler errors."""

    @pytest.mark.asyncio
    async def test_handler_error_is_contained(self) -> None:
        seen = []
        both_ran = threading.Event()

        def flaky(update):
            seen.append(update.update_id)
            if len(seen) == 2:
                both_ran.set()
            if update.update_id == 1:
                raise RuntimeError("handler bug")

        calls = []

        def fake_request(*args, **kwargs):
            calls.append(kwargs)
            if len(calls) == 1:
                return _batch(1, 2)
            both_ran.wait(5)
            raise _Stop()

        bot = Bot({"token": TOKEN, "handlers": [flaky]})
        with patch("telecast.sdk.client.requests.request", side_effect=fake_request):
            with pytest.raises(_Stop):
                await dispatcher.run_polling_async(bot)

        assert sorted(seen) == [1, 2]
        assert calls[1]["json"]["offset"] == 3
