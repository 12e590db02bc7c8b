"""Bot API method catalog.

Each remote method is declared once as a :class:`MethodSpec`: its name, the
HTTP verb, the parameter schema used to cast outgoing arguments and the
descriptor the ``result`` of a successful response is cast into.

Lookup accepts both the API spelling (``sendMessage``) and the Pythonic one
(``send_message``)::

    spec = get_method("send_message")
    spec.name          # "sendMessage"
    spec.returns       # ObjectRef("Message")
"""

from __future__ import annotations

import dataclasses
import re
from types import MappingProxyType

from telecast.core.schema import (
    BOOLEAN,
    FILE,
    FLOAT,
    INTEGER,
    STRING,
    ArrayOf,
    Descriptor,
    ObjectRef,
    Schema,
)

# Importing the catalog registers every object kind referenced below.
import telecast.sdk.models  # noqa: F401


@dataclasses.dataclass(frozen=True, slots=True)
class MethodSpec:
    """Declarative description of one remote method."""

    name: str                 # API spelling, e.g. "sendMessage"
    parameters: Schema        # argument name → descriptor
    returns: Descriptor       # shape of a successful ``result``
    http_method: str = "POST"


METHODS: dict[str, MethodSpec] = {}
_ALIASES: dict[str, str] = {}


def snake_case(name: str) -> str:
    """``sendMessage`` → ``send_message``."""
    return re.sub(r"(?<!^)(?=[A-Z])", "_", name).lower()


def _method(name: str, returns: Descriptor, /, **parameters: Descriptor) -> None:
    METHODS[name] = MethodSpec(name, MappingProxyType(parameters), returns)
    _ALIASES[snake_case(name)] = name


def get_method(name: str) -> MethodSpec | None:
    """Return the method registered under *name* (either spelling), or ``None``."""
    spec = METHODS.get(name)
    if spec is None and name in _ALIASES:
        spec = METHODS[_ALIASES[name]]
    return spec


# ── Shared descriptors ───────────────────────────────────────────────────────

_MESSAGE = ObjectRef("Message")
_MARKUP = ObjectRef("ReplyMarkup")
_INLINE_MARKUP = ObjectRef("InlineKeyboardMarkup")
_ENTITIES = ArrayOf(ObjectRef("MessageEntity"))
_STRINGS = ArrayOf(STRING)

# Options shared by every send* method.
_SEND_OPTIONS: dict[str, Descriptor] = {
    "disable_notification": BOOLEAN,
    "reply_to_message_id": INTEGER,
    "allow_sending_without_reply": BOOLEAN,
    "reply_markup": _MARKUP,
}

_CAPTION: dict[str, Descriptor] = {
    "caption": STRING,
    "parse_mode": STRING,
    "caption_entities": _ENTITIES,
}

# Identifies a message either by chat + id or by inline id (edit* methods).
_EDIT_TARGET: dict[str, Descriptor] = {
    "chat_id": STRING,
    "message_id": INTEGER,
    "inline_message_id": STRING,
}


# ── Getting updates ──────────────────────────────────────────────────────────

_method(
    "getUpdates", ArrayOf(ObjectRef("Update")),
    offset=INTEGER, limit=INTEGER, timeout=INTEGER, allowed_updates=_STRINGS,
)
_method(
    "setWebhook", BOOLEAN,
    url=STRING, certificate=FILE, ip_address=STRING, max_connections=INTEGER,
    allowed_updates=_STRINGS, drop_pending_updates=BOOLEAN,
)
_method("deleteWebhook", BOOLEAN, drop_pending_updates=BOOLEAN)
_method("getWebhookInfo", ObjectRef("WebhookInfo"))


# ── Available methods ────────────────────────────────────────────────────────

_method("getMe", ObjectRef("User"))
_method("logOut", BOOLEAN)
_method("close", BOOLEAN)

_method(
    "sendMessage", _MESSAGE,
    chat_id=STRING, text=STRING, parse_mode=STRING, entities=_ENTITIES,
    disable_web_page_preview=BOOLEAN, **_SEND_OPTIONS,
)
_method(
    "forwardMessage", _MESSAGE,
    chat_id=STRING, from_chat_id=STRING, disable_notification=BOOLEAN, message_id=INTEGER,
)
_method(
    "copyMessage", ObjectRef("MessageId"),
    chat_id=STRING, from_chat_id=STRING, message_id=INTEGER, **_CAPTION, **_SEND_OPTIONS,
)
_method("sendPhoto", _MESSAGE, chat_id=STRING, photo=FILE, **_CAPTION, **_SEND_OPTIONS)
_method(
    "sendAudio", _MESSAGE,
    chat_id=STRING, audio=FILE, **_CAPTION, duration=INTEGER, performer=STRING,
    title=STRING, thumb=FILE, **_SEND_OPTIONS,
)
_method(
    "sendDocument", _MESSAGE,
    chat_id=STRING, document=FILE, thumb=FILE, **_CAPTION,
    disable_content_type_detection=BOOLEAN, **_SEND_OPTIONS,
)
_method(
    "sendVideo", _MESSAGE,
    chat_id=STRING, video=FILE, duration=INTEGER, width=INTEGER, height=INTEGER,
    thumb=FILE, **_CAPTION, supports_streaming=BOOLEAN, **_SEND_OPTIONS,
)
_method(
    "sendAnimation", _MESSAGE,
    chat_id=STRING, animation=FILE, duration=INTEGER, width=INTEGER, height=INTEGER,
    thumb=FILE, **_CAPTION, **_SEND_OPTIONS,
)
_method(
    "sendVoice", _MESSAGE,
    chat_id=STRING, voice=FILE, **_CAPTION, duration=INTEGER, **_SEND_OPTIONS,
)
_method(
    "sendVideoNote", _MESSAGE,
    chat_id=STRING, video_note=FILE, duration=INTEGER, length=INTEGER, thumb=FILE,
    **_SEND_OPTIONS,
)
_method(
    "sendMediaGroup", ArrayOf(_MESSAGE),
    chat_id=STRING, media=ArrayOf(ObjectRef("InputMedia")), disable_notification=BOOLEAN,
    reply_to_message_id=INTEGER, allow_sending_without_reply=BOOLEAN,
)
_method(
    "sendLocation", _MESSAGE,
    chat_id=STRING, latitude=FLOAT, longitude=FLOAT, horizontal_accuracy=FLOAT,
    live_period=INTEGER, heading=INTEGER, proximity_alert_radius=INTEGER, **_SEND_OPTIONS,
)
_method(
    "editMessageLiveLocation", _MESSAGE,
    **_EDIT_TARGET, latitude=FLOAT, longitude=FLOAT, horizontal_accuracy=FLOAT,
    heading=INTEGER, proximity_alert_radius=INTEGER, reply_markup=_INLINE_MARKUP,
)
_method("stopMessageLiveLocation", _MESSAGE, **_EDIT_TARGET, reply_markup=_INLINE_MARKUP)
_method(
    "sendVenue", _MESSAGE,
    chat_id=STRING, latitude=FLOAT, longitude=FLOAT, title=STRING, address=STRING,
    foursquare_id=STRING, foursquare_type=STRING, google_place_id=STRING,
    google_place_type=STRING, **_SEND_OPTIONS,
)
_method(
    "sendContact", _MESSAGE,
    chat_id=STRING, phone_number=STRING, first_name=STRING, last_name=STRING,
    vcard=STRING, **_SEND_OPTIONS,
)
_method(
    "sendPoll", _MESSAGE,
    chat_id=STRING, question=STRING, options=_STRINGS, is_anonymous=BOOLEAN, type=STRING,
    allows_multiple_answers=BOOLEAN, correct_option_id=INTEGER, explanation=STRING,
    explanation_parse_mode=STRING, explanation_entities=_ENTITIES, open_period=INTEGER,
    close_date=INTEGER, is_closed=BOOLEAN, **_SEND_OPTIONS,
)
_method("sendDice", _MESSAGE, chat_id=STRING, emoji=STRING, **_SEND_OPTIONS)
_method("sendChatAction", BOOLEAN, chat_id=STRING, action=STRING)
_method(
    "getUserProfilePhotos", ObjectRef("UserProfilePhotos"),
    user_id=INTEGER, offset=INTEGER, limit=INTEGER,
)
_method("getFile", ObjectRef("File"), file_id=STRING)


# ── Chat administration ──────────────────────────────────────────────────────

_method("kickChatMember", BOOLEAN, chat_id=STRING, user_id=INTEGER, until_date=INTEGER)
_method("unbanChatMember", BOOLEAN, chat_id=STRING, user_id=INTEGER, only_if_banned=BOOLEAN)
_method(
    "restrictChatMember", BOOLEAN,
    chat_id=STRING, user_id=INTEGER, permissions=ObjectRef("ChatPermissions"), until_date=INTEGER,
)
_method(
    "promoteChatMember", BOOLEAN,
    chat_id=STRING, user_id=INTEGER, is_anonymous=BOOLEAN, can_change_info=BOOLEAN,
    can_post_messages=BOOLEAN, can_edit_messages=BOOLEAN, can_delete_messages=BOOLEAN,
    can_invite_users=BOOLEAN, can_restrict_members=BOOLEAN, can_pin_messages=BOOLEAN,
    can_promote_members=BOOLEAN,
)
_method(
    "setChatAdministratorCustomTitle", BOOLEAN,
    chat_id=STRING, user_id=INTEGER, custom_title=STRING,
)
_method("setChatPermissions", BOOLEAN, chat_id=STRING, permissions=ObjectRef("ChatPermissions"))
_method("exportChatInviteLink", STRING, chat_id=STRING)
_method("setChatPhoto", BOOLEAN, chat_id=STRING, photo=FILE)
_method("deleteChatPhoto", BOOLEAN, chat_id=STRING)
_method("setChatTitle", BOOLEAN, chat_id=STRING, title=STRING)
_method("setChatDescription", BOOLEAN, chat_id=STRING, description=STRING)
_method(
    "pinChatMessage", BOOLEAN,
    chat_id=STRING, message_id=INTEGER, disable_notification=BOOLEAN,
)
_method("unpinChatMessage", BOOLEAN, chat_id=STRING, message_id=INTEGER)
_method("unpinAllChatMessages", BOOLEAN, chat_id=STRING)
_method("leaveChat", BOOLEAN, chat_id=STRING)
_method("getChat", ObjectRef("Chat"), chat_id=STRING)
_method("getChatAdministrators", ArrayOf(ObjectRef("ChatMember")), chat_id=STRING)
_method("getChatMembersCount", INTEGER, chat_id=STRING)
_method("getChatMember", ObjectRef("ChatMember"), chat_id=STRING, user_id=INTEGER)
_method("setChatStickerSet", BOOLEAN, chat_id=STRING, sticker_set_name=STRING)
_method("deleteChatStickerSet", BOOLEAN, chat_id=STRING)
_method(
    "answerCallbackQuery", BOOLEAN,
    callback_query_id=STRING, text=STRING, show_alert=BOOLEAN, url=STRING, cache_time=INTEGER,
)
_method("setMyCommands", BOOLEAN, commands=ArrayOf(ObjectRef("BotCommand")))
_method("getMyCommands", ArrayOf(ObjectRef("BotCommand")))


# ── Updating messages ────────────────────────────────────────────────────────

_method(
    "editMessageText", _MESSAGE,
    **_EDIT_TARGET, text=STRING, parse_mode=STRING, entities=_ENTITIES,
    disable_web_page_preview=BOOLEAN, reply_markup=_INLINE_MARKUP,
)
_method("editMessageCaption", _MESSAGE, **_EDIT_TARGET, **_CAPTION, reply_markup=_INLINE_MARKUP)
_method(
    "editMessageMedia", _MESSAGE,
    **_EDIT_TARGET, media=ObjectRef("InputMedia"), reply_markup=_INLINE_MARKUP,
)
_method("editMessageReplyMarkup", _MESSAGE, **_EDIT_TARGET, reply_markup=_INLINE_MARKUP)
_method(
    "stopPoll", ObjectRef("Poll"),
    chat_id=STRING, message_id=INTEGER, reply_markup=_INLINE_MARKUP,
)
_method("deleteMessage", BOOLEAN, chat_id=STRING, message_id=INTEGER)


# ── Stickers ─────────────────────────────────────────────────────────────────

_method("sendSticker", _MESSAGE, chat_id=STRING, sticker=FILE, **_SEND_OPTIONS)
_method("getStickerSet", ObjectRef("StickerSet"), name=STRING)
_method("uploadStickerFile", ObjectRef("File"), user_id=INTEGER, png_sticker=FILE)
_method(
    "createNewStickerSet", BOOLEAN,
    user_id=INTEGER, name=STRING, title=STRING, png_sticker=FILE, tgs_sticker=FILE,
    emojis=STRING, contains_masks=BOOLEAN, mask_position=ObjectRef("MaskPosition"),
)
_method(
    "addStickerToSet", BOOLEAN,
    user_id=INTEGER, name=STRING, png_sticker=FILE, tgs_sticker=FILE, emojis=STRING,
    mask_position=ObjectRef("MaskPosition"),
)
_method("setStickerPositionInSet", BOOLEAN, sticker=STRING, position=INTEGER)
_method("deleteStickerFromSet", BOOLEAN, sticker=STRING)
_method("setStickerSetThumb", BOOLEAN, name=STRING, user_id=INTEGER, thumb=FILE)


# ── Inline mode ──────────────────────────────────────────────────────────────

_method(
    "answerInlineQuery", BOOLEAN,
    inline_query_id=STRING, results=ArrayOf(ObjectRef("InlineQueryResult")),
    cache_time=INTEGER, is_personal=BOOLEAN, next_offset=STRING,
    switch_pm_text=STRING, switch_pm_parameter=STRING,
)


# ── Payments ─────────────────────────────────────────────────────────────────

_method(
    "sendInvoice", _MESSAGE,
    chat_id=INTEGER, title=STRING, description=STRING, payload=STRING,
    provider_token=STRING, start_parameter=STRING, currency=STRING,
    prices=ArrayOf(ObjectRef("LabeledPrice")), provider_data=STRING, photo_url=STRING,
    photo_size=INTEGER, photo_width=INTEGER, photo_height=INTEGER, need_name=BOOLEAN,
    need_phone_number=BOOLEAN, need_email=BOOLEAN, need_shipping_address=BOOLEAN,
    send_phone_number_to_provider=BOOLEAN, send_email_to_provider=BOOLEAN,
    is_flexible=BOOLEAN, disable_notification=BOOLEAN, reply_to_message_id=INTEGER,
    allow_sending_without_reply=BOOLEAN, reply_markup=_INLINE_MARKUP,
)
_method(
    "answerShippingQuery", BOOLEAN,
    shipping_query_id=STRING, ok=BOOLEAN,
    shipping_options=ArrayOf(ObjectRef("ShippingOption")), error_message=STRING,
)
_method(
    "answerPreCheckoutQuery", BOOLEAN,
    pre_checkout_query_id=STRING, ok=BOOLEAN, error_message=STRING,
)


# ── Telegram Passport ────────────────────────────────────────────────────────

_method(
    "setPassportDataErrors", BOOLEAN,
    user_id=INTEGER, errors=ArrayOf(ObjectRef("PassportElementError")),
)


# ── Games ────────────────────────────────────────────────────────────────────

_method(
    "sendGame", _MESSAGE,
    chat_id=INTEGER, game_short_name=STRING, disable_notification=BOOLEAN,
    reply_to_message_id=INTEGER, allow_sending_without_reply=BOOLEAN,
    reply_markup=_INLINE_MARKUP,
)
_method(
    "setGameScore", _MESSAGE,
    user_id=INTEGER, score=INTEGER, force=BOOLEAN, disable_edit_message=BOOLEAN,
    chat_id=INTEGER, message_id=INTEGER, inline_message_id=STRING,
)
_method(
    "getGameHighScores", ArrayOf(ObjectRef("GameHighScore")),
    user_id=INTEGER, chat_id=INTEGER, message_id=INTEGER, inline_message_id=STRING,
)
