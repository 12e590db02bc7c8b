"""Tests for TelegramMethod, the method catalog and the error taxonomy."""

import asyncio
import io
import json
import sys
import os
from unittest.mock import patch, MagicMock

import pytest
import requests

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from telecast.core.exceptions import RemoteCallError, TransportError, TypeMismatch
from telecast.core.files import InputFile
from telecast.sdk.client import Failure, TelegramMethod
from telecast.sdk.methods import METHODS, get_method, snake_case
from telecast.sdk.models import InlineKeyboardMarkup, Message, User

TOKEN = "123:ABC"


def _response(body, status_code: int = 200) -> MagicMock:
    mock_resp = MagicMock()
    mock_resp.ok = 200 <= status_code < 300
    mock_resp.status_code = status_code
    mock_resp.json.return_value = body
    return mock_resp


def _method(name: str, arguments=None) -> TelegramMethod:
    return TelegramMethod(TOKEN, get_method(name), arguments, api_url="https://api.example.com")


# ── Exceptions ───────────────────────────────────────────────────────────────


class TestRemoteCallError:
    """Validate the API error class."""

    def test_attributes(self) -> None:
        exc = RemoteCallError(400, {"ok": False, "error_code": 400, "description": "Bad Request: chat not found"})
        assert exc.status_code == 400
        assert exc.error_code == 400
        assert exc.description == "Bad Request: chat not found"
        assert "400" in str(exc)
        assert "chat not found" in str(exc)

    def test_default_body(self) -> None:
        exc = RemoteCallError(500)
        assert exc.response_body == {}
        assert exc.error_code == 500
        assert "Unknown error" in str(exc)

    def test_response_parameters(self) -> None:
        exc = RemoteCallError(429, {"error_code": 429, "parameters": {"retry_after": 7}})
        assert exc.retry_after == 7
        assert exc.migrate_to_chat_id is None


# ── Method catalog ───────────────────────────────────────────────────────────


class TestMethodCatalog:
    """The registry covers the whole Bot API method set."""

    def test_snake_case(self) -> None:
        assert snake_case("sendMessage") == "send_message"
        assert snake_case("getMe") == "get_me"
        assert snake_case("setChatAdministratorCustomTitle") == "set_chat_administrator_custom_title"

    def test_both_spellings_resolve(self) -> None:
        assert get_method("sendMessage") is get_method("send_message")
        assert get_method("getYou") is None

    def test_all_74_methods_exist(self) -> None:
        expected_methods = [
            "get_updates", "set_webhook", "delete_webhook", "get_webhook_info",
            "get_me", "log_out", "close", "send_message", "forward_message",
            "copy_message", "send_photo", "send_audio", "send_document",
            "send_video", "send_animation", "send_voice", "send_video_note",
            "send_media_group", "send_location", "edit_message_live_location",
            "stop_message_live_location", "send_venue", "send_contact",
            "send_poll", "send_dice", "send_chat_action",
            "get_user_profile_photos", "get_file", "kick_chat_member",
            "unban_chat_member", "restrict_chat_member", "promote_chat_member",
            "set_chat_administrator_custom_title", "set_chat_permissions",
            "export_chat_invite_link", "set_chat_photo", "delete_chat_photo",
            "set_chat_title", "set_chat_description", "pin_chat_message",
            "unpin_chat_message", "unpin_all_chat_messages", "leave_chat",
            "get_chat", "get_chat_administrators", "get_chat_members_count",
            "get_chat_member", "set_chat_sticker_set", "delete_chat_sticker_set",
            "answer_callback_query", "set_my_commands", "get_my_commands",
            "edit_message_text", "edit_message_caption", "edit_message_media",
            "edit_message_reply_markup", "stop_poll", "delete_message",
            "send_sticker", "get_sticker_set", "upload_sticker_file",
            "create_new_sticker_set", "add_sticker_to_set",
            "set_sticker_position_in_set", "delete_sticker_from_set",
            "set_sticker_set_thumb", "answer_inline_query", "send_invoice",
            "answer_shipping_query", "answer_pre_checkout_query",
            "set_passport_data_errors", "send_game", "set_game_score",
            "get_game_high_scores",
        ]
        assert len(expected_methods) == 74
        assert len(METHODS) == 74
        for name in expected_methods:
            assert get_method(name) is not None, f"Missing method: {name}"

    def test_return_shapes_resolve(self) -> None:
        for spec in METHODS.values():
            returns = spec.returns
            while hasattr(returns, "item"):
                returns = returns.item
            if hasattr(returns, "resolve"):
                returns.resolve()


# ── Request construction ─────────────────────────────────────────────────────


class TestBuildRequest:
    """Validate URL and body construction."""

    def test_url(self) -> None:
        assert _method("getMe").url == "https://api.example.com/bot123:ABC/getMe"

    def test_no_body_without_parameters(self) -> None:
        request = _method("getMe").build_request()
        assert request["method"] == "POST"
        assert "json" not in request
        assert "data" not in request

    def test_json_body_is_cast_and_stripped(self) -> None:
        markup = InlineKeyboardMarkup(inline_keyboard=[[{"text": "OK", "callback_data": "ok"}]])
        request = _method("sendMessage", {
            "chat_id": 42,
            "text": "hello",
            "disable_notification": "true",
            "reply_markup": markup,
            "parse_mode": None,
            "not_a_parameter": 1,
        }).build_request()
        assert request["json"] == {
            "chat_id": "42",
            "text": "hello",
            "disable_notification": True,
            "reply_markup": {"inline_keyboard": [[{"text": "OK", "callback_data": "ok"}]]},
        }

    def test_reply_markup_from_plain_dict(self) -> None:
        request = _method("sendMessage", {
            "chat_id": 1, "text": "t", "reply_markup": {"remove_keyboard": True},
        }).build_request()
        assert request["json"]["reply_markup"] == {"remove_keyboard": True}

    def test_unrecognised_reply_markup_raises(self) -> None:
        with pytest.raises(TypeMismatch) as exc_info:
            _method("sendMessage", {
                "chat_id": 1, "text": "t", "reply_markup": {"inline_keybaord": []},
            }).build_request()
        assert exc_info.value.field == "reply_markup"

    def test_bad_argument_raises_at_build_time(self) -> None:
        with pytest.raises(TypeMismatch) as exc_info:
            _method("sendMessage", {"chat_id": 1, "reply_to_message_id": "abc"}).build_request()
        assert exc_info.value.field == "reply_to_message_id"

    def test_upload_uses_multipart(self) -> None:
        upload = InputFile(b"\x89PNG", filename="pic.png")
        request = _method("sendPhoto", {
            "chat_id": 5,
            "photo": upload,
            "caption": "look",
            "reply_markup": {"force_reply": True},
        }).build_request()
        assert "json" not in request
        assert request["data"] == {
            "chat_id": "5",
            "caption": "look",
            "reply_markup": json.dumps({"force_reply": True}),
        }
        filename, stream, mime = request["files"]["photo"]
        assert filename == "pic.png"
        assert stream.read() == b"\x89PNG"
        assert mime == "image/png"

    def test_nested_upload_is_attached(self) -> None:
        upload = InputFile(b"data", filename="a.jpg")
        request = _method("sendMediaGroup", {
            "chat_id": 5,
            "media": [{"type": "photo", "media": upload}, {"type": "photo", "media": "file-id"}],
        }).build_request()
        media = json.loads(request["data"]["media"])
        assert media == [{"type": "photo", "media": "attach://file0"}, {"type": "photo", "media": "file-id"}]
        assert "file0" in request["files"]


# ── Synchronous execution ────────────────────────────────────────────────────


class TestExecuteSync:
    """Blocking execution and the exception policy."""

    @patch("telecast.sdk.client.requests.request")
    def test_success_hydrates_result(self, mock_request: MagicMock) -> None:
        mock_request.return_value = _response({
            "ok": True,
            "result": {"message_id": 1, "chat": {"id": 42, "type": "private"}, "date": 0, "text": "hello"},
        })
        result = _method("sendMessage", {"chat_id": 42, "text": "hello"}).execute()
        assert isinstance(result, Message)
        assert result.chat.id == 42

        kwargs = mock_request.call_args.kwargs
        assert kwargs["method"] == "POST"
        assert kwargs["url"].endswith("/sendMessage")
        assert kwargs["json"] == {"chat_id": "42", "text": "hello"}
        assert kwargs["timeout"] == 10

    @patch("telecast.sdk.client.requests.request")
    def test_primitive_and_array_results(self, mock_request: MagicMock) -> None:
        mock_request.return_value = _response({"ok": True, "result": True})
        assert _method("deleteMessage", {"chat_id": 1, "message_id": 2}).execute() is True

        mock_request.return_value = _response({"ok": True, "result": "17"})
        assert _method("getChatMembersCount", {"chat_id": 1}).execute() == 17

        mock_request.return_value = _response({"ok": True, "result": [{"user": {"id": 1}, "status": "creator"}]})
        admins = _method("getChatAdministrators", {"chat_id": 1}).execute()
        assert admins[0].user.id == 1

    @patch("telecast.sdk.client.requests.request")
    def test_inline_edit_returns_true(self, mock_request: MagicMock) -> None:
        mock_request.return_value = _response({"ok": True, "result": True})
        assert _method("editMessageText", {"inline_message_id": "x", "text": "t"}).execute() is True

    @patch("telecast.sdk.client.requests.request")
    def test_api_error_raises(self, mock_request: MagicMock) -> None:
        mock_request.return_value = _response(
            {"ok": False, "error_code": 400, "description": "Bad Request: message text is empty"}, 400
        )
        with pytest.raises(RemoteCallError) as exc_info:
            _method("sendMessage", {"chat_id": 1, "text": ""}).execute(exceptions=True)
        assert exc_info.value.error_code == 400
        assert exc_info.value.status_code == 400
        assert "message text is empty" in exc_info.value.description

    @patch("telecast.sdk.client.requests.request")
    def test_api_error_soft_failure(self, mock_request: MagicMock) -> None:
        mock_request.return_value = _response({"ok": False, "error_code": 400, "description": "Bad"}, 400)
        result = _method("sendMessage", {"chat_id": 1, "text": ""}).execute(exceptions=False)
        assert isinstance(result, Failure)
        assert not result
        assert isinstance(result.error, RemoteCallError)

    @patch("telecast.sdk.client.requests.request")
    def test_ok_false_with_2xx_is_failure(self, mock_request: MagicMock) -> None:
        mock_request.return_value = _response({"ok": False, "description": "odd"}, 200)
        with pytest.raises(RemoteCallError):
            _method("getMe").execute()

    @patch("telecast.sdk.client.requests.request")
    def test_network_error(self, mock_request: MagicMock) -> None:
        mock_request.side_effect = requests.ConnectionError("offline")
        with pytest.raises(TransportError) as exc_info:
            _method("getMe").execute()
        assert isinstance(exc_info.value.cause, requests.ConnectionError)

        result = _method("getMe").execute(exceptions=False)
        assert isinstance(result, Failure)
        assert isinstance(result.error, TransportError)

    @patch("telecast.sdk.client.requests.request")
    def test_undecodable_body(self, mock_request: MagicMock) -> None:
        mock_resp = _response(None)
        mock_resp.json.side_effect = ValueError("No JSON")
        mock_request.return_value = mock_resp
        with pytest.raises(TransportError):
            _method("getMe").execute()

    @patch("telecast.sdk.client.requests.request")
    def test_undecodable_error_body(self, mock_request: MagicMock) -> None:
        mock_resp = _response(None, 502)
        mock_resp.json.side_effect = ValueError("No JSON")
        mock_request.return_value = mock_resp
        with pytest.raises(RemoteCallError) as exc_info:
            _method("getMe").execute()
        assert exc_info.value.status_code == 502

    @patch("telecast.sdk.client.requests.request")
    def test_result_shape_mismatch_raises(self, mock_request: MagicMock) -> None:
        mock_request.return_value = _response({"ok": True, "result": "not-a-user"})
        with pytest.raises(TypeMismatch):
            _method("getMe").execute(exceptions=False)


# ── Asynchronous execution ───────────────────────────────────────────────────


class TestExecuteAsync:
    """Async mode returns an awaitable resolving to the same outcome."""

    @pytest.mark.asyncio
    @patch("telecast.sdk.client.requests.request")
    async def test_async_matches_sync(self, mock_request: MagicMock) -> None:
        mock_request.return_value = _response({"ok": True, "result": {"id": 1, "is_bot": True, "first_name": "Bot"}})

        sync_result = _method("getMe").execute(run_async=False)
        pending = _method("getMe").execute(run_async=True)
        assert asyncio.iscoroutine(pending)
        async_result = await pending

        assert isinstance(async_result, User)
        assert async_result == sync_result

    @pytest.mark.asyncio
    @patch("telecast.sdk.client.requests.request")
    async def test_async_soft_failure(self, mock_request: MagicMock) -> None:
        mock_request.return_value = _response({"ok": False, "error_code": 403, "description": "Forbidden"}, 403)
        result = await _method("getMe").execute(exceptions=False, run_async=True)
        assert isinstance(result, Failure)
        assert result.error.error_code == 403

    @pytest.mark.asyncio
    @patch("telecast.sdk.client.requests.request")
    async def test_async_error_raises_on_await(self, mock_request: MagicMock) -> None:
        mock_request.return_value = _response({"ok": False, "error_code": 401, "description": "Unauthorized"}, 401)
        pending = _method("getMe").execute(exceptions=True, run_async=True)
        with pytest.raises(RemoteCallError):
            await pending

    def test_async_bad_argument_raises_immediately(self) -> None:
        with pytest.raises(TypeMismatch):
            _method("sendMessage", {"chat_id": {"nested": 1}}).execute(run_async=True)


# ── Uploads ──────────────────────────────────────────────────────────────────


class TestInputFile:
    """Upload sources: path, bytes and open stream."""

    def test_path(self, tmp_path) -> None:
        path = tmp_path / "report.pdf"
        path.write_bytes(b"%PDF")
        upload = InputFile(str(path))
        assert upload.read() == b"%PDF"
        assert upload.filename == "report.pdf"
        assert upload.mime_type == "application/pdf"

    def test_bytes_and_stream(self) -> None:
        assert InputFile(b"raw").read() == b"raw"
        name, stream, mime_type = InputFile(io.BytesIO(b"streamed"), filename="a.bin").as_multipart()
        assert (name, stream.read(), mime_type) == ("a.bin", b"streamed", "application/octet-stream")

    def test_missing_path(self, tmp_path) -> None:
        with pytest.raises(FileNotFoundError):
            InputFile(str(tmp_path / "nope.png"))
