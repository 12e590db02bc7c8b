"""Telegram Bot API object catalog.

Every class corresponds to an object in the Bot API reference and declares its
fields as a ``__schema__`` table of type descriptors.  Hydration, projection
and read-only access come from :class:`~telecast.core.objects.TelegramObject`;
nothing here carries per-type casting code.

Polymorphic families (``ReplyMarkup``, ``InputMedia``, ``InlineQueryResult``,
``InputMessageContent``, ``PassportElementError``) pick their concrete variant
from the raw payload in :meth:`subtype_for` and reject a payload that matches
none of them.
"""

from __future__ import annotations

from typing import Any, Mapping

from telecast.core.exceptions import TypeMismatch
from telecast.core.objects import TelegramObject
from telecast.core.schema import (
    BOOLEAN,
    FILE,
    FLOAT,
    INTEGER,
    STRING,
    ArrayOf,
    ObjectRef,
)

_ENTITIES = ArrayOf(ObjectRef("MessageEntity"))
_INLINE_MARKUP = ObjectRef("InlineKeyboardMarkup")
_MESSAGE_CONTENT = ObjectRef("InputMessageContent")


# ── Updates & webhooks ───────────────────────────────────────────────────────


class ResponseParameters(TelegramObject):
    """Contains information about why a request was unsuccessful."""

    __schema__ = {
        "migrate_to_chat_id": INTEGER,
        "retry_after": INTEGER,
    }


class Update(TelegramObject):
    """This object represents an incoming update. At most **one** of the optional parameters can be present in any given update."""

    __schema__ = {
        "update_id": INTEGER,
        "message": ObjectRef("Message"),
        "edited_message": ObjectRef("Message"),
        "channel_post": ObjectRef("Message"),
        "edited_channel_post": ObjectRef("Message"),
        "inline_query": ObjectRef("InlineQuery"),
        "chosen_inline_result": ObjectRef("ChosenInlineResult"),
        "callback_query": ObjectRef("CallbackQuery"),
        "shipping_query": ObjectRef("ShippingQuery"),
        "pre_checkout_query": ObjectRef("PreCheckoutQuery"),
        "poll": ObjectRef("Poll"),
        "poll_answer": ObjectRef("PollAnswer"),
    }

    # Order matters: the first populated field names the update type.
    UPDATE_TYPES: tuple[str, ...] = tuple(k for k in __schema__ if k != "update_id")

    @property
    def update_type(self) -> str | None:
        """Name of the payload field this update carries (``"message"``, …)."""
        for name in self.UPDATE_TYPES:
            if name in self:
                return name
        return None

    @property
    def effective_message(self) -> Message | None:
        """The message carried by this update, including edits, posts and callback sources."""
        for name in ("message", "edited_message", "channel_post", "edited_channel_post"):
            if name in self:
                return self[name]
        if "callback_query" in self:
            return self.callback_query.message
        return None


class WebhookInfo(TelegramObject):
    """Contains information about the current status of a webhook."""

    __schema__ = {
        "url": STRING,
        "has_custom_certificate": BOOLEAN,
        "pending_update_count": INTEGER,
        "ip_address": STRING,
        "last_error_date": INTEGER,
        "last_error_message": STRING,
        "max_connections": INTEGER,
        "allowed_updates": ArrayOf(STRING),
    }


# ── Users, chats & messages ──────────────────────────────────────────────────


class User(TelegramObject):
    """This object represents a Telegram user or bot."""

    __schema__ = {
        "id": INTEGER,
        "is_bot": BOOLEAN,
        "first_name": STRING,
        "last_name": STRING,
        "username": STRING,
        "language_code": STRING,
        "can_join_groups": BOOLEAN,
        "can_read_all_group_messages": BOOLEAN,
        "supports_inline_queries": BOOLEAN,
    }


class Chat(TelegramObject):
    """This object represents a chat."""

    __schema__ = {
        "id": INTEGER,
        "type": STRING,
        "title": STRING,
        "username": STRING,
        "first_name": STRING,
        "last_name": STRING,
        "photo": ObjectRef("ChatPhoto"),
        "bio": STRING,
        "description": STRING,
        "invite_link": STRING,
        "pinned_message": ObjectRef("Message"),
        "permissions": ObjectRef("ChatPermissions"),
        "slow_mode_delay": INTEGER,
        "sticker_set_name": STRING,
        "can_set_sticker_set": BOOLEAN,
        "linked_chat_id": INTEGER,
        "location": ObjectRef("ChatLocation"),
    }


class Message(TelegramObject):
    """This object represents a message."""

    __schema__ = {
        "message_id": INTEGER,
        "from": ObjectRef("User"),
        "sender_chat": ObjectRef("Chat"),
        "date": INTEGER,
        "chat": ObjectRef("Chat"),
        "forward_from": ObjectRef("User"),
        "forward_from_chat": ObjectRef("Chat"),
        "forward_from_message_id": INTEGER,
        "forward_signature": STRING,
        "forward_sender_name": STRING,
        "forward_date": INTEGER,
        "reply_to_message": ObjectRef("Message"),
        "via_bot": ObjectRef("User"),
        "edit_date": INTEGER,
        "media_group_id": STRING,
        "author_signature": STRING,
        "text": STRING,
        "entities": _ENTITIES,
        "animation": ObjectRef("Animation"),
        "audio": ObjectRef("Audio"),
        "document": ObjectRef("Document"),
        "photo": ArrayOf(ObjectRef("PhotoSize")),
        "sticker": ObjectRef("Sticker"),
        "video": ObjectRef("Video"),
        "video_note": ObjectRef("VideoNote"),
        "voice": ObjectRef("Voice"),
        "caption": STRING,
        "caption_entities": _ENTITIES,
        "contact": ObjectRef("Contact"),
        "dice": ObjectRef("Dice"),
        "game": ObjectRef("Game"),
        "poll": ObjectRef("Poll"),
        "venue": ObjectRef("Venue"),
        "location": ObjectRef("Location"),
        "new_chat_members": ArrayOf(ObjectRef("User")),
        "left_chat_member": ObjectRef("User"),
        "new_chat_title": STRING,
        "new_chat_photo": ArrayOf(ObjectRef("PhotoSize")),
        "delete_chat_photo": BOOLEAN,
        "group_chat_created": BOOLEAN,
        "supergroup_chat_created": BOOLEAN,
        "channel_chat_created": BOOLEAN,
        "migrate_to_chat_id": INTEGER,
        "migrate_from_chat_id": INTEGER,
        "pinned_message": ObjectRef("Message"),
        "invoice": ObjectRef("Invoice"),
        "successful_payment": ObjectRef("SuccessfulPayment"),
        "connected_website": STRING,
        "passport_data": ObjectRef("PassportData"),
        "proximity_alert_triggered": ObjectRef("ProximityAlertTriggered"),
        "reply_markup": _INLINE_MARKUP,
    }

    @property
    def command(self) -> str | None:
        """The leading ``/command`` of the text, without any ``@botname`` suffix."""
        text = self.text or ""
        if not text.startswith("/"):
            return None
        return text.split()[0].split("@")[0]


class MessageId(TelegramObject):
    """This object represents a unique message identifier."""

    __schema__ = {
        "message_id": INTEGER,
    }


class MessageEntity(TelegramObject):
    """This object represents one special entity in a text message. For example, hashtags, usernames, URLs, etc."""

    __schema__ = {
        "type": STRING,
        "offset": INTEGER,
        "length": INTEGER,
        "url": STRING,
        "user": ObjectRef("User"),
        "language": STRING,
    }


# ── Media ────────────────────────────────────────────────────────────────────


class PhotoSize(TelegramObject):
    """This object represents one size of a photo or a file / sticker thumbnail."""

    __schema__ = {
        "file_id": STRING,
        "file_unique_id": STRING,
        "width": INTEGER,
        "height": INTEGER,
        "file_size": INTEGER,
    }


class Animation(TelegramObject):
    """This object represents an animation file (GIF or H.264/MPEG-4 AVC video without sound)."""

    __schema__ = {
        "file_id": STRING,
        "file_unique_id": STRING,
        "width": INTEGER,
        "height": INTEGER,
        "duration": INTEGER,
        "thumb": ObjectRef("PhotoSize"),
        "file_name": STRING,
        "mime_type": STRING,
        "file_size": INTEGER,
    }


class Audio(TelegramObject):
    """This object represents an audio file to be treated as music by the Telegram clients."""

    __schema__ = {
        "file_id": STRING,
        "file_unique_id": STRING,
        "duration": INTEGER,
        "performer": STRING,
        "title": STRING,
        "file_name": STRING,
        "mime_type": STRING,
        "file_size": INTEGER,
        "thumb": ObjectRef("PhotoSize"),
    }


class Document(TelegramObject):
    """This object represents a general file (as opposed to photos, voice messages and audio files)."""

    __schema__ = {
        "file_id": STRING,
        "file_unique_id": STRING,
        "thumb": ObjectRef("PhotoSize"),
        "file_name": STRING,
        "mime_type": STRING,
        "file_size": INTEGER,
    }


class Video(TelegramObject):
    """This object represents a video file."""

    __schema__ = {
        "file_id": STRING,
        "file_unique_id": STRING,
        "width": INTEGER,
        "height": INTEGER,
        "duration": INTEGER,
        "thumb": ObjectRef("PhotoSize"),
        "file_name": STRING,
        "mime_type": STRING,
        "file_size": INTEGER,
    }


class VideoNote(TelegramObject):
    """This object represents a video message."""

    __schema__ = {
        "file_id": STRING,
        "file_unique_id": STRING,
        "length": INTEGER,
        "duration": INTEGER,
        "thumb": ObjectRef("PhotoSize"),
        "file_size": INTEGER,
    }


class Voice(TelegramObject):
    """This object represents a voice note."""

    __schema__ = {
        "file_id": STRING,
        "file_unique_id": STRING,
        "duration": INTEGER,
        "mime_type": STRING,
        "file_size": INTEGER,
    }


class Contact(TelegramObject):
    """This object represents a phone contact."""

    __schema__ = {
        "phone_number": STRING,
        "first_name": STRING,
        "last_name": STRING,
        "user_id": INTEGER,
        "vcard": STRING,
    }


class Dice(TelegramObject):
    """This object represents an animated emoji that displays a random value."""

    __schema__ = {
        "emoji": STRING,
        "value": INTEGER,
    }


class PollOption(TelegramObject):
    """This object contains information about one answer option in a poll."""

    __schema__ = {
        "text": STRING,
        "voter_count": INTEGER,
    }


class PollAnswer(TelegramObject):
    """This object represents an answer of a user in a non-anonymous poll."""

    __schema__ = {
        "poll_id": STRING,
        "user": ObjectRef("User"),
        "option_ids": ArrayOf(INTEGER),
    }


class Poll(TelegramObject):
    """This object contains information about a poll."""

    __schema__ = {
        "id": STRING,
        "question": STRING,
        "options": ArrayOf(ObjectRef("PollOption")),
        "total_voter_count": INTEGER,
        "is_closed": BOOLEAN,
        "is_anonymous": BOOLEAN,
        "type": STRING,
        "allows_multiple_answers": BOOLEAN,
        "correct_option_id": INTEGER,
        "explanation": STRING,
        "explanation_entities": _ENTITIES,
        "open_period": INTEGER,
        "close_date": INTEGER,
    }


class Location(TelegramObject):
    """This object represents a point on the map."""

    __schema__ = {
        "longitude": FLOAT,
        "latitude": FLOAT,
        "horizontal_accuracy": FLOAT,
        "live_period": INTEGER,
        "heading": INTEGER,
        "proximity_alert_radius": INTEGER,
    }


class Venue(TelegramObject):
    """This object represents a venue."""

    __schema__ = {
        "location": ObjectRef("Location"),
        "title": STRING,
        "address": STRING,
        "foursquare_id": STRING,
        "foursquare_type": STRING,
        "google_place_id": STRING,
        "google_place_type": STRING,
    }


class ProximityAlertTriggered(TelegramObject):
    """Service message sent whenever a user in the chat triggers a proximity alert set by another user."""

    __schema__ = {
        "traveler": ObjectRef("User"),
        "watcher": ObjectRef("User"),
        "distance": INTEGER,
    }


class UserProfilePhotos(TelegramObject):
    """This object represent a user's profile pictures."""

    __schema__ = {
        "total_count": INTEGER,
        "photos": ArrayOf(ArrayOf(ObjectRef("PhotoSize"))),
    }


class File(TelegramObject):
    """This object represents a file ready to be downloaded via ``https://api.telegram.org/file/bot<token>/<file_path>``."""

    __schema__ = {
        "file_id": STRING,
        "file_unique_id": STRING,
        "file_size": INTEGER,
        "file_path": STRING,
    }


# ── Keyboards ────────────────────────────────────────────────────────────────


class ReplyMarkup(TelegramObject):
    """Any of the four ``reply_markup`` shapes a send method accepts."""

    __schema__ = {}

    @classmethod
    def subtype_for(cls, data: Mapping[str, Any]) -> type[TelegramObject]:
        if cls is not ReplyMarkup:
            return cls
        for key, variant in (
            ("inline_keyboard", InlineKeyboardMarkup),
            ("keyboard", ReplyKeyboardMarkup),
            ("remove_keyboard", ReplyKeyboardRemove),
            ("force_reply", ForceReply),
        ):
            if key in data:
                return variant
        raise TypeMismatch(cls.__name__, data)


class ReplyKeyboardMarkup(ReplyMarkup):
    """This object represents a custom keyboard with reply options."""

    __schema__ = {
        "keyboard": ArrayOf(ArrayOf(ObjectRef("KeyboardButton"))),
        "resize_keyboard": BOOLEAN,
        "one_time_keyboard": BOOLEAN,
        "selective": BOOLEAN,
    }


class KeyboardButton(TelegramObject):
    """This object represents one button of the reply keyboard."""

    __schema__ = {
        "text": STRING,
        "request_contact": BOOLEAN,
        "request_location": BOOLEAN,
        "request_poll": ObjectRef("KeyboardButtonPollType"),
    }


class KeyboardButtonPollType(TelegramObject):
    """This object represents type of a poll, which is allowed to be created and sent when the corresponding button is pressed."""

    __schema__ = {
        "type": STRING,
    }


class ReplyKeyboardRemove(ReplyMarkup):
    """Asks Telegram clients to remove the current custom keyboard."""

    __schema__ = {
        "remove_keyboard": BOOLEAN,
        "selective": BOOLEAN,
    }


class InlineKeyboardMarkup(ReplyMarkup):
    """This object represents an inline keyboard that appears right next to the message it belongs to."""

    __schema__ = {
        "inline_keyboard": ArrayOf(ArrayOf(ObjectRef("InlineKeyboardButton"))),
    }


class InlineKeyboardButton(TelegramObject):
    """This object represents one button of an inline keyboard. You **must** use exactly one of the optional fields."""

    __schema__ = {
        "text": STRING,
        "url": STRING,
        "login_url": ObjectRef("LoginUrl"),
        "callback_data": STRING,
        "switch_inline_query": STRING,
        "switch_inline_query_current_chat": STRING,
        "callback_game": ObjectRef("CallbackGame"),
        "pay": BOOLEAN,
    }


class LoginUrl(TelegramObject):
    """Parameter of an inline keyboard button used to automatically authorize a user."""

    __schema__ = {
        "url": STRING,
        "forward_text": STRING,
        "bot_username": STRING,
        "request_write_access": BOOLEAN,
    }


class ForceReply(ReplyMarkup):
    """Asks Telegram clients to display a reply interface to the user."""

    __schema__ = {
        "force_reply": BOOLEAN,
        "selective": BOOLEAN,
    }


class CallbackQuery(TelegramObject):
    """This object represents an incoming callback query from a callback button in an inline keyboard."""

    __schema__ = {
        "id": STRING,
        "from": ObjectRef("User"),
        "message": ObjectRef("Message"),
        "inline_message_id": STRING,
        "chat_instance": STRING,
        "data": STRING,
        "game_short_name": STRING,
    }


# ── Chat administration ──────────────────────────────────────────────────────


class ChatPhoto(TelegramObject):
    """This object represents a chat photo."""

    __schema__ = {
        "small_file_id": STRING,
        "small_file_unique_id": STRING,
        "big_file_id": STRING,
        "big_file_unique_id": STRING,
    }


class ChatMember(TelegramObject):
    """This object contains information about one member of a chat."""

    __schema__ = {
        "user": ObjectRef("User"),
        "status": STRING,
        "custom_title": STRING,
        "is_anonymous": BOOLEAN,
        "can_be_edited": BOOLEAN,
        "can_post_messages": BOOLEAN,
        "can_edit_messages": BOOLEAN,
        "can_delete_messages": BOOLEAN,
        "can_restrict_members": BOOLEAN,
        "can_promote_members": BOOLEAN,
        "can_change_info": BOOLEAN,
        "can_invite_users": BOOLEAN,
        "can_pin_messages": BOOLEAN,
        "is_member": BOOLEAN,
        "can_send_messages": BOOLEAN,
        "can_send_media_messages": BOOLEAN,
        "can_send_polls": BOOLEAN,
        "can_send_other_messages": BOOLEAN,
        "can_add_web_page_previews": BOOLEAN,
        "until_date": INTEGER,
    }


class ChatPermissions(TelegramObject):
    """Describes actions that a non-administrator user is allowed to take in a chat."""

    __schema__ = {
        "can_send_messages": BOOLEAN,
        "can_send_media_messages": BOOLEAN,
        "can_send_polls": BOOLEAN,
        "can_send_other_messages": BOOLEAN,
        "can_add_web_page_previews": BOOLEAN,
        "can_change_info": BOOLEAN,
        "can_invite_users": BOOLEAN,
        "can_pin_messages": BOOLEAN,
    }


class ChatLocation(TelegramObject):
    """Represents a location to which a chat is connected."""

    __schema__ = {
        "location": ObjectRef("Location"),
        "address": STRING,
    }


class BotCommand(TelegramObject):
    """This object represents a bot command."""

    __schema__ = {
        "command": STRING,
        "description": STRING,
    }


# ── Input media ──────────────────────────────────────────────────────────────


class InputMedia(TelegramObject):
    """The content of a media message to be sent; one of the ``InputMedia*`` variants."""

    __schema__ = {
        "type": STRING,
        "media": FILE,
    }

    @classmethod
    def subtype_for(cls, data: Mapping[str, Any]) -> type[TelegramObject]:
        if cls is not InputMedia:
            return cls
        variant = {
            "photo": InputMediaPhoto,
            "video": InputMediaVideo,
            "animation": InputMediaAnimation,
            "audio": InputMediaAudio,
            "document": InputMediaDocument,
        }.get(data.get("type"))
        if variant is None:
            raise TypeMismatch(cls.__name__, data)
        return variant


class InputMediaPhoto(InputMedia):
    """Represents a photo to be sent."""

    __schema__ = {
        "type": STRING,
        "media": FILE,
        "caption": STRING,
        "parse_mode": STRING,
        "caption_entities": _ENTITIES,
    }


class InputMediaVideo(InputMedia):
    """Represents a video to be sent."""

    __schema__ = {
        "type": STRING,
        "media": FILE,
        "thumb": FILE,
        "caption": STRING,
        "parse_mode": STRING,
        "caption_entities": _ENTITIES,
        "width": INTEGER,
        "height": INTEGER,
        "duration": INTEGER,
        "supports_streaming": BOOLEAN,
    }


class InputMediaAnimation(InputMedia):
    """Represents an animation file (GIF or H.264/MPEG-4 AVC video without sound) to be sent."""

    __schema__ = {
        "type": STRING,
        "media": FILE,
        "thumb": FILE,
        "caption": STRING,
        "parse_mode": STRING,
        "caption_entities": _ENTITIES,
        "width": INTEGER,
        "height": INTEGER,
        "duration": INTEGER,
    }


class InputMediaAudio(InputMedia):
    """Represents an audio file to be treated as music to be sent."""

    __schema__ = {
        "type": STRING,
        "media": FILE,
        "thumb": FILE,
        "caption": STRING,
        "parse_mode": STRING,
        "caption_entities": _ENTITIES,
        "duration": INTEGER,
        "performer": STRING,
        "title": STRING,
    }


class InputMediaDocument(InputMedia):
    """Represents a general file to be sent."""

    __schema__ = {
        "type": STRING,
        "media": FILE,
        "thumb": FILE,
        "caption": STRING,
        "parse_mode": STRING,
        "caption_entities": _ENTITIES,
        "disable_content_type_detection": BOOLEAN,
    }


# ── Stickers ─────────────────────────────────────────────────────────────────


class Sticker(TelegramObject):
    """This object represents a sticker."""

    __schema__ = {
        "file_id": STRING,
        "file_unique_id": STRING,
        "width": INTEGER,
        "height": INTEGER,
        "is_animated": BOOLEAN,
        "thumb": ObjectRef("PhotoSize"),
        "emoji": STRING,
        "set_name": STRING,
        "mask_position": ObjectRef("MaskPosition"),
        "file_size": INTEGER,
    }


class StickerSet(TelegramObject):
    """This object represents a sticker set."""

    __schema__ = {
        "name": STRING,
        "title": STRING,
        "is_animated": BOOLEAN,
        "contains_masks": BOOLEAN,
        "stickers": ArrayOf(ObjectRef("Sticker")),
        "thumb": ObjectRef("PhotoSize"),
    }


class MaskPosition(TelegramObject):
    """This object describes the position on faces where a mask should be placed by default."""

    __schema__ = {
        "point": STRING,
        "x_shift": FLOAT,
        "y_shift": FLOAT,
        "scale": FLOAT,
    }


# ── Inline mode ──────────────────────────────────────────────────────────────


class InlineQuery(TelegramObject):
    """This object represents an incoming inline query."""

    __schema__ = {
        "id": STRING,
        "from": ObjectRef("User"),
        "location": ObjectRef("Location"),
        "query": STRING,
        "offset": STRING,
    }


class InlineQueryResult(TelegramObject):
    """One result of an inline query; one of the ``InlineQueryResult*`` variants."""

    __schema__ = {
        "type": STRING,
        "id": STRING,
    }

    @classmethod
    def subtype_for(cls, data: Mapping[str, Any]) -> type[TelegramObject]:
        if cls is not InlineQueryResult:
            return cls
        result_type = data.get("type")
        cached = any(key.endswith("_file_id") for key in data)
        if cached and result_type in _CACHED_RESULTS:
            return _CACHED_RESULTS[result_type]
        if result_type not in _LINKED_RESULTS:
            raise TypeMismatch(cls.__name__, data)
        return _LINKED_RESULTS[result_type]


class InlineQueryResultArticle(InlineQueryResult):
    """Represents a link to an article or web page."""

    __schema__ = {
        "type": STRING,
        "id": STRING,
        "title": STRING,
        "input_message_content": _MESSAGE_CONTENT,
        "reply_markup": _INLINE_MARKUP,
        "url": STRING,
        "hide_url": BOOLEAN,
        "description": STRING,
        "thumb_url": STRING,
        "thumb_width": INTEGER,
        "thumb_height": INTEGER,
    }


class InlineQueryResultPhoto(InlineQueryResult):
    """Represents a link to a photo."""

    __schema__ = {
        "type": STRING,
        "id": STRING,
        "photo_url": STRING,
        "thumb_url": STRING,
        "photo_width": INTEGER,
        "photo_height": INTEGER,
        "title": STRING,
        "description": STRING,
        "caption": STRING,
        "parse_mode": STRING,
        "caption_entities": _ENTITIES,
        "reply_markup": _INLINE_MARKUP,
        "input_message_content": _MESSAGE_CONTENT,
    }


class InlineQueryResultGif(InlineQueryResult):
    """Represents a link to an animated GIF file."""

    __schema__ = {
        "type": STRING,
        "id": STRING,
        "gif_url": STRING,
        "gif_width": INTEGER,
        "gif_height": INTEGER,
        "gif_duration": INTEGER,
        "thumb_url": STRING,
        "thumb_mime_type": STRING,
        "title": STRING,
        "caption": STRING,
        "parse_mode": STRING,
        "caption_entities": _ENTITIES,
        "reply_markup": _INLINE_MARKUP,
        "input_message_content": _MESSAGE_CONTENT,
    }


class InlineQueryResultMpeg4Gif(InlineQueryResult):
    """Represents a link to a video animation (H.264/MPEG-4 AVC video without sound)."""

    __schema__ = {
        "type": STRING,
        "id": STRING,
        "mpeg4_url": STRING,
        "mpeg4_width": INTEGER,
        "mpeg4_height": INTEGER,
        "mpeg4_duration": INTEGER,
        "thumb_url": STRING,
        "thumb_mime_type": STRING,
        "title": STRING,
        "caption": STRING,
        "parse_mode": STRING,
        "caption_entities": _ENTITIES,
        "reply_markup": _INLINE_MARKUP,
        "input_message_content": _MESSAGE_CONTENT,
    }


class InlineQueryResultVideo(InlineQueryResult):
    """Represents a link to a page containing an embedded video player or a video file."""

    __schema__ = {
        "type": STRING,
        "id": STRING,
        "video_url": STRING,
        "mime_type": STRING,
        "thumb_url": STRING,
        "title": STRING,
        "caption": STRING,
        "parse_mode": STRING,
        "caption_entities": _ENTITIES,
        "video_width": INTEGER,
        "video_height": INTEGER,
        "video_duration": INTEGER,
        "description": STRING,
        "reply_markup": _INLINE_MARKUP,
        "input_message_content": _MESSAGE_CONTENT,
    }


class InlineQueryResultAudio(InlineQueryResult):
    """Represents a link to an MP3 audio file."""

    __schema__ = {
        "type": STRING,
        "id": STRING,
        "audio_url": STRING,
        "title": STRING,
        "caption": STRING,
        "parse_mode": STRING,
        "caption_entities": _ENTITIES,
        "performer": STRING,
        "audio_duration": INTEGER,
        "reply_markup": _INLINE_MARKUP,
        "input_message_content": _MESSAGE_CONTENT,
    }


class InlineQueryResultVoice(InlineQueryResult):
    """Represents a link to a voice recording in an .OGG container encoded with OPUS."""

    __schema__ = {
        "type": STRING,
        "id": STRING,
        "voice_url": STRING,
        "title": STRING,
        "caption": STRING,
        "parse_mode": STRING,
        "caption_entities": _ENTITIES,
        "voice_duration": INTEGER,
        "reply_markup": _INLINE_MARKUP,
        "input_message_content": _MESSAGE_CONTENT,
    }


class InlineQueryResultDocument(InlineQueryResult):
    """Represents a link to a file."""

    __schema__ = {
        "type": STRING,
        "id": STRING,
        "title": STRING,
        "caption": STRING,
        "parse_mode": STRING,
        "caption_entities": _ENTITIES,
        "document_url": STRING,
        "mime_type": STRING,
        "description": STRING,
        "reply_markup": _INLINE_MARKUP,
        "input_message_content": _MESSAGE_CONTENT,
        "thumb_url": STRING,
        "thumb_width": INTEGER,
        "thumb_height": INTEGER,
    }


class InlineQueryResultLocation(InlineQueryResult):
    """Represents a location on a map."""

    __schema__ = {
        "type": STRING,
        "id": STRING,
        "latitude": FLOAT,
        "longitude": FLOAT,
        "title": STRING,
        "horizontal_accuracy": FLOAT,
        "live_period": INTEGER,
        "heading": INTEGER,
        "proximity_alert_radius": INTEGER,
        "reply_markup": _INLINE_MARKUP,
        "input_message_content": _MESSAGE_CONTENT,
        "thumb_url": STRING,
        "thumb_width": INTEGER,
        "thumb_height": INTEGER,
    }


class InlineQueryResultVenue(InlineQueryResult):
    """Represents a venue."""

    __schema__ = {
        "type": STRING,
        "id": STRING,
        "latitude": FLOAT,
        "longitude": FLOAT,
        "title": STRING,
        "address": STRING,
        "foursquare_id": STRING,
        "foursquare_type": STRING,
        "google_place_id": STRING,
        "google_place_type": STRING,
        "reply_markup": _INLINE_MARKUP,
        "input_message_content": _MESSAGE_CONTENT,
        "thumb_url": STRING,
        "thumb_width": INTEGER,
        "thumb_height": INTEGER,
    }


class InlineQueryResultContact(InlineQueryResult):
    """Represents a contact with a phone number."""

    __schema__ = {
        "type": STRING,
        "id": STRING,
        "phone_number": STRING,
        "first_name": STRING,
        "last_name": STRING,
        "vcard": STRING,
        "reply_markup": _INLINE_MARKUP,
        "input_message_content": _MESSAGE_CONTENT,
        "thumb_url": STRING,
        "thumb_width": INTEGER,
        "thumb_height": INTEGER,
    }


class InlineQueryResultGame(InlineQueryResult):
    """Represents a Game."""

    __schema__ = {
        "type": STRING,
        "id": STRING,
        "game_short_name": STRING,
        "reply_markup": _INLINE_MARKUP,
    }


class InlineQueryResultCachedPhoto(InlineQueryResult):
    """Represents a link to a photo stored on the Telegram servers."""

    __schema__ = {
        "type": STRING,
        "id": STRING,
        "photo_file_id": STRING,
        "title": STRING,
        "description": STRING,
        "caption": STRING,
        "parse_mode": STRING,
        "caption_entities": _ENTITIES,
        "reply_markup": _INLINE_MARKUP,
        "input_message_content": _MESSAGE_CONTENT,
    }


class InlineQueryResultCachedGif(InlineQueryResult):
    """Represents a link to an animated GIF file stored on the Telegram servers."""

    __schema__ = {
        "type": STRING,
        "id": STRING,
        "gif_file_id": STRING,
        "title": STRING,
        "caption": STRING,
        "parse_mode": STRING,
        "caption_entities": _ENTITIES,
        "reply_markup": _INLINE_MARKUP,
        "input_message_content": _MESSAGE_CONTENT,
    }


class InlineQueryResultCachedMpeg4Gif(InlineQueryResult):
    """Represents a link to a video animation stored on the Telegram servers."""

    __schema__ = {
        "type": STRING,
        "id": STRING,
        "mpeg4_file_id": STRING,
        "title": STRING,
        "caption": STRING,
        "parse_mode": STRING,
        "caption_entities": _ENTITIES,
        "reply_markup": _INLINE_MARKUP,
        "input_message_content": _MESSAGE_CONTENT,
    }


class InlineQueryResultCachedSticker(InlineQueryResult):
    """Represents a link to a sticker stored on the Telegram servers."""

    __schema__ = {
        "type": STRING,
        "id": STRING,
        "sticker_file_id": STRING,
        "reply_markup": _INLINE_MARKUP,
        "input_message_content": _MESSAGE_CONTENT,
    }


class InlineQueryResultCachedDocument(InlineQueryResult):
    """Represents a link to a file stored on the Telegram servers."""

    __schema__ = {
        "type": STRING,
        "id": STRING,
        "title": STRING,
        "document_file_id": STRING,
        "description": STRING,
        "caption": STRING,
        "parse_mode": STRING,
        "caption_entities": _ENTITIES,
        "reply_markup": _INLINE_MARKUP,
        "input_message_content": _MESSAGE_CONTENT,
    }


class InlineQueryResultCachedVideo(InlineQueryResult):
    """Represents a link to a video file stored on the Telegram servers."""

    __schema__ = {
        "type": STRING,
        "id": STRING,
        "video_file_id": STRING,
        "title": STRING,
        "description": STRING,
        "caption": STRING,
        "parse_mode": STRING,
        "caption_entities": _ENTITIES,
        "reply_markup": _INLINE_MARKUP,
        "input_message_content": _MESSAGE_CONTENT,
    }


class InlineQueryResultCachedVoice(InlineQueryResult):
    """Represents a link to a voice message stored on the Telegram servers."""

    __schema__ = {
        "type": STRING,
        "id": STRING,
        "voice_file_id": STRING,
        "title": STRING,
        "caption": STRING,
        "parse_mode": STRING,
        "caption_entities": _ENTITIES,
        "reply_markup": _INLINE_MARKUP,
        "input_message_content": _MESSAGE_CONTENT,
    }


class InlineQueryResultCachedAudio(InlineQueryResult):
    """Represents a link to an MP3 audio file stored on the Telegram servers."""

    __schema__ = {
        "type": STRING,
        "id": STRING,
        "audio_file_id": STRING,
        "caption": STRING,
        "parse_mode": STRING,
        "caption_entities": _ENTITIES,
        "reply_markup": _INLINE_MARKUP,
        "input_message_content": _MESSAGE_CONTENT,
    }


_LINKED_RESULTS: dict[str, type[InlineQueryResult]] = {
    "article": InlineQueryResultArticle,
    "photo": InlineQueryResultPhoto,
    "gif": InlineQueryResultGif,
    "mpeg4_gif": InlineQueryResultMpeg4Gif,
    "video": InlineQueryResultVideo,
    "audio": InlineQueryResultAudio,
    "voice": InlineQueryResultVoice,
    "document": InlineQueryResultDocument,
    "location": InlineQueryResultLocation,
    "venue": InlineQueryResultVenue,
    "contact": InlineQueryResultContact,
    "game": InlineQueryResultGame,
}

_CACHED_RESULTS: dict[str, type[InlineQueryResult]] = {
    "photo": InlineQueryResultCachedPhoto,
    "gif": InlineQueryResultCachedGif,
    "mpeg4_gif": InlineQueryResultCachedMpeg4Gif,
    "sticker": InlineQueryResultCachedSticker,
    "document": InlineQueryResultCachedDocument,
    "video": InlineQueryResultCachedVideo,
    "voice": InlineQueryResultCachedVoice,
    "audio": InlineQueryResultCachedAudio,
}


class InputMessageContent(TelegramObject):
    """Content of a message to be sent as a result of an inline query."""

    __schema__ = {}

    @classmethod
    def subtype_for(cls, data: Mapping[str, Any]) -> type[TelegramObject]:
        if cls is not InputMessageContent:
            return cls
        # Venue content also carries latitude/longitude, so test it first.
        for key, variant in (
            ("message_text", InputTextMessageContent),
            ("address", InputVenueMessageContent),
            ("latitude", InputLocationMessageContent),
            ("phone_number", InputContactMessageContent),
        ):
            if key in data:
                return variant
        raise TypeMismatch(cls.__name__, data)


class InputTextMessageContent(InputMessageContent):
    """Represents the content of a text message to be sent as the result of an inline query."""

    __schema__ = {
        "message_text": STRING,
        "parse_mode": STRING,
        "entities": _ENTITIES,
        "disable_web_page_preview": BOOLEAN,
    }


class InputLocationMessageContent(InputMessageContent):
    """Represents the content of a location message to be sent as the result of an inline query."""

    __schema__ = {
        "latitude": FLOAT,
        "longitude": FLOAT,
        "horizontal_accuracy": FLOAT,
        "live_period": INTEGER,
        "heading": INTEGER,
        "proximity_alert_radius": INTEGER,
    }


class InputVenueMessageContent(InputMessageContent):
    """Represents the content of a venue message to be sent as the result of an inline query."""

    __schema__ = {
        "latitude": FLOAT,
        "longitude": FLOAT,
        "title": STRING,
        "address": STRING,
        "foursquare_id": STRING,
        "foursquare_type": STRING,
        "google_place_id": STRING,
        "google_place_type": STRING,
    }


class InputContactMessageContent(InputMessageContent):
    """Represents the content of a contact message to be sent as the result of an inline query."""

    __schema__ = {
        "phone_number": STRING,
        "first_name": STRING,
        "last_name": STRING,
        "vcard": STRING,
    }


class ChosenInlineResult(TelegramObject):
    """A result of an inline query that was chosen by the user and sent to their chat partner."""

    __schema__ = {
        "result_id": STRING,
        "from": ObjectRef("User"),
        "location": ObjectRef("Location"),
        "inline_message_id": STRING,
        "query": STRING,
    }


# ── Payments ─────────────────────────────────────────────────────────────────


class LabeledPrice(TelegramObject):
    """This object represents a portion of the price for goods or services."""

    __schema__ = {
        "label": STRING,
        "amount": INTEGER,
    }


class Invoice(TelegramObject):
    """This object contains basic information about an invoice."""

    __schema__ = {
        "title": STRING,
        "description": STRING,
        "start_parameter": STRING,
        "currency": STRING,
        "total_amount": INTEGER,
    }


class ShippingAddress(TelegramObject):
    """This object represents a shipping address."""

    __schema__ = {
        "country_code": STRING,
        "state": STRING,
        "city": STRING,
        "street_line1": STRING,
        "street_line2": STRING,
        "post_code": STRING,
    }


class OrderInfo(TelegramObject):
    """This object represents information about an order."""

    __schema__ = {
        "name": STRING,
        "phone_number": STRING,
        "email": STRING,
        "shipping_address": ObjectRef("ShippingAddress"),
    }


class ShippingOption(TelegramObject):
    """This object represents one shipping option."""

    __schema__ = {
        "id": STRING,
        "title": STRING,
        "prices": ArrayOf(ObjectRef("LabeledPrice")),
    }


class SuccessfulPayment(TelegramObject):
    """This object contains basic information about a successful payment."""

    __schema__ = {
        "currency": STRING,
        "total_amount": INTEGER,
        "invoice_payload": STRING,
        "shipping_option_id": STRING,
        "order_info": ObjectRef("OrderInfo"),
        "telegram_payment_charge_id": STRING,
        "provider_payment_charge_id": STRING,
    }


class ShippingQuery(TelegramObject):
    """This object contains information about an incoming shipping query."""

    __schema__ = {
        "id": STRING,
        "from": ObjectRef("User"),
        "invoice_payload": STRING,
        "shipping_address": ObjectRef("ShippingAddress"),
    }


class PreCheckoutQuery(TelegramObject):
    """This object contains information about an incoming pre-checkout query."""

    __schema__ = {
        "id": STRING,
        "from": ObjectRef("User"),
        "currency": STRING,
        "total_amount": INTEGER,
        "invoice_payload": STRING,
        "shipping_option_id": STRING,
        "order_info": ObjectRef("OrderInfo"),
    }


# ── Telegram Passport ────────────────────────────────────────────────────────


class PassportData(TelegramObject):
    """Contains information about Telegram Passport data shared with the bot by the user."""

    __schema__ = {
        "data": ArrayOf(ObjectRef("EncryptedPassportElement")),
        "credentials": ObjectRef("EncryptedCredentials"),
    }


class PassportFile(TelegramObject):
    """This object represents a file uploaded to Telegram Passport."""

    __schema__ = {
        "file_id": STRING,
        "file_unique_id": STRING,
        "file_size": INTEGER,
        "file_date": INTEGER,
    }


class EncryptedPassportElement(TelegramObject):
    """Contains information about documents or other Telegram Passport elements shared with the bot by the user."""

    __schema__ = {
        "type": STRING,
        "data": STRING,
        "phone_number": STRING,
        "email": STRING,
        "files": ArrayOf(ObjectRef("PassportFile")),
        "front_side": ObjectRef("PassportFile"),
        "reverse_side": ObjectRef("PassportFile"),
        "selfie": ObjectRef("PassportFile"),
        "translation": ArrayOf(ObjectRef("PassportFile")),
        "hash": STRING,
    }


class EncryptedCredentials(TelegramObject):
    """Contains data required for decrypting and authenticating an EncryptedPassportElement."""

    __schema__ = {
        "data": STRING,
        "hash": STRING,
        "secret": STRING,
    }


class PassportElementError(TelegramObject):
    """An error in a submitted Telegram Passport element; one of the ``PassportElementError*`` variants."""

    __schema__ = {
        "source": STRING,
        "type": STRING,
        "message": STRING,
    }

    @classmethod
    def subtype_for(cls, data: Mapping[str, Any]) -> type[TelegramObject]:
        if cls is not PassportElementError:
            return cls
        variant = {
            "data": PassportElementErrorDataField,
            "front_side": PassportElementErrorFrontSide,
            "reverse_side": PassportElementErrorReverseSide,
            "selfie": PassportElementErrorSelfie,
            "file": PassportElementErrorFile,
            "files": PassportElementErrorFiles,
            "translation_file": PassportElementErrorTranslationFile,
            "translation_files": PassportElementErrorTranslationFiles,
            "unspecified": PassportElementErrorUnspecified,
        }.get(data.get("source"))
        if variant is None:
            raise TypeMismatch(cls.__name__, data)
        return variant


class PassportElementErrorDataField(PassportElementError):
    """Represents an issue in one of the data fields that was provided by the user."""

    __schema__ = {
        "source": STRING,
        "type": STRING,
        "field_name": STRING,
        "data_hash": STRING,
        "message": STRING,
    }


class PassportElementErrorFrontSide(PassportElementError):
    """Represents an issue with the front side of a document."""

    __schema__ = {
        "source": STRING,
        "type": STRING,
        "file_hash": STRING,
        "message": STRING,
    }


class PassportElementErrorReverseSide(PassportElementError):
    """Represents an issue with the reverse side of a document."""

    __schema__ = {
        "source": STRING,
        "type": STRING,
        "file_hash": STRING,
        "message": STRING,
    }


class PassportElementErrorSelfie(PassportElementError):
    """Represents an issue with the selfie with a document."""

    __schema__ = {
        "source": STRING,
        "type": STRING,
        "file_hash": STRING,
        "message": STRING,
    }


class PassportElementErrorFile(PassportElementError):
    """Represents an issue with a document scan."""

    __schema__ = {
        "source": STRING,
        "type": STRING,
        "file_hash": STRING,
        "message": STRING,
    }


class PassportElementErrorFiles(PassportElementError):
    """Represents an issue with a list of scans."""

    __schema__ = {
        "source": STRING,
        "type": STRING,
        "file_hashes": ArrayOf(STRING),
        "message": STRING,
    }


class PassportElementErrorTranslationFile(PassportElementError):
    """Represents an issue with one of the files that constitute the translation of a document."""

    __schema__ = {
        "source": STRING,
        "type": STRING,
        "file_hash": STRING,
        "message": STRING,
    }


class PassportElementErrorTranslationFiles(PassportElementError):
    """Represents an issue with the translated version of a document."""

    __schema__ = {
        "source": STRING,
        "type": STRING,
        "file_hashes": ArrayOf(STRING),
        "message": STRING,
    }


class PassportElementErrorUnspecified(PassportElementError):
    """Represents an issue in an unspecified place."""

    __schema__ = {
        "source": STRING,
        "type": STRING,
        "element_hash": STRING,
        "message": STRING,
    }


# ── Games ────────────────────────────────────────────────────────────────────


class Game(TelegramObject):
    """This object represents a game."""

    __schema__ = {
        "title": STRING,
        "description": STRING,
        "photo": ArrayOf(ObjectRef("PhotoSize")),
        "text": STRING,
        "text_entities": _ENTITIES,
        "animation": ObjectRef("Animation"),
    }


class CallbackGame(TelegramObject):
    """A placeholder, currently holds no information."""

    __schema__ = {}


class GameHighScore(TelegramObject):
    """This object represents one row of the high scores table for a game."""

    __schema__ = {
        "position": INTEGER,
        "user": ObjectRef("User"),
        "score": INTEGER,
    }
