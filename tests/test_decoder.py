#  tgtypes
#  Copyright (C) 2019-2021  Florian Rädiker
#
#  This program is free software: you can redistribute it and/or modify
#  it under the terms of the GNU Affero General Public License as published
#  by the Free Software Foundation, either version 3 of the License, or
#  (at your option) any later version.
#
#  This program is distributed in the hope that it will be useful,
#  but WITHOUT ANY WARRANTY; without even the implied warranty of
#  MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
#  GNU Affero General Public License for more details.
#
#  You should have received a copy of the GNU Affero General Public License
#  along with this program.  If not, see <https://www.gnu.org/licenses/>.

import logging
from typing import List

import pytest
import yarl

from tgtypes import (CallbackQuery, ChatMember, ChatMemberAdministrator, ChatMemberBanned, ChatMemberMember,
                     DecodeError, InaccessibleMessage, InlineQueryResult, InlineQueryResultCachedGif,
                     InlineQueryResultGif, InputLocationMessageContent, InputTextMessageContent, Location, Message,
                     MessageOriginHiddenUser, ReactionTypeEmoji, Update, UnknownFieldError, UnknownVariantError,
                     User, decode, normalize)


def test_message_round_trip(message_payload, strict_settings):
    message = decode(message_payload, Message, strict_settings)
    assert message.message_id == 1
    assert message.from_.username == "test"
    assert message.chat.type == "private"
    assert message.text == "test"
    assert message.photo is None
    result = normalize(message, strict_settings)
    assert result == message_payload
    assert list(result) == list(message_payload)


def test_from_dict(message_payload, strict_settings):
    assert Message.from_dict(message_payload, strict_settings) == decode(message_payload, Message, strict_settings)


def test_update(callback_query_update, strict_settings):
    update = decode(callback_query_update, Update, strict_settings)
    assert update.update_type == "callback_query"
    query = update.callback_query
    assert isinstance(query, CallbackQuery)
    assert isinstance(query.message, Message)
    button = query.message.reply_markup.inline_keyboard[0][1]
    assert button.url == yarl.URL("https://example.com/path?q=1")
    assert normalize(update, strict_settings) == callback_query_update


def test_list_of_updates(callback_query_update, strict_settings):
    updates = decode([callback_query_update, {"update_id": 10001}], List[Update], strict_settings)
    assert [u.update_id for u in updates] == [10000, 10001]
    assert updates[1].update_type is None


def test_unknown_field(message_payload, strict_settings):
    message_payload["chat"]["brand_new_field"] = 1
    with pytest.raises(UnknownFieldError) as exc_info:
        decode(message_payload, Message, strict_settings)
    assert exc_info.value.path == ["chat"]
    assert "brand_new_field" in str(exc_info.value)


def test_unknown_field_permissive(message_payload, permissive_settings, caplog):
    message_payload["chat"]["brand_new_field"] = 1
    with caplog.at_level(logging.WARNING, logger="tgtypes"):
        message = decode(message_payload, Message, permissive_settings)
    assert message.chat.id == 1
    assert "brand_new_field" in caplog.text
    assert "brand_new_field" not in normalize(message, permissive_settings)["chat"]


def test_missing_required_field(message_payload, strict_settings):
    del message_payload["from"]["is_bot"]
    with pytest.raises(DecodeError) as exc_info:
        decode(message_payload, Message, strict_settings)
    assert exc_info.value.path == ["from"]
    assert "'is_bot'" in str(exc_info.value)


def test_wrong_type(message_payload, strict_settings):
    message_payload["date"] = "yesterday"
    with pytest.raises(DecodeError) as exc_info:
        decode(message_payload, Message, strict_settings)
    assert exc_info.value.path == ["date"]


def test_bool_is_not_int(strict_settings):
    with pytest.raises(DecodeError):
        decode({"id": True, "is_bot": False, "first_name": "a"}, User, strict_settings)
    with pytest.raises(DecodeError):
        decode({"id": 1, "is_bot": 1, "first_name": "a"}, User, strict_settings)


def test_int_widened_to_float(strict_settings):
    location = decode({"latitude": 52, "longitude": 13.4}, Location, strict_settings)
    assert location.latitude == 52.0
    assert type(location.latitude) is float


def test_null_optional_field(message_payload, strict_settings):
    message_payload["text"] = None
    message = decode(message_payload, Message, strict_settings)
    assert not message.is_set("text")


@pytest.mark.parametrize("data, cls", [
    ({"status": "member", "user": {"id": 1, "is_bot": False, "first_name": "a"}}, ChatMemberMember),
    ({"status": "kicked", "user": {"id": 1, "is_bot": False, "first_name": "a"}, "until_date": 0},
     ChatMemberBanned),
])
def test_chat_member_variants(data, cls, strict_settings):
    member = decode(data, ChatMember, strict_settings)
    assert type(member) is cls
    assert normalize(member, strict_settings) == data


def test_chat_member_administrator(strict_settings):
    data = {"status": "administrator", "user": {"id": 1, "is_bot": True, "first_name": "bot"}}
    for name in ("can_be_edited", "is_anonymous", "can_manage_chat", "can_delete_messages", "can_manage_video_chats",
                 "can_restrict_members", "can_promote_members", "can_change_info", "can_invite_users",
                 "can_post_stories", "can_edit_stories", "can_delete_stories"):
        data[name] = False
    member = decode(data, ChatMember, strict_settings)
    assert isinstance(member, ChatMemberAdministrator)
    assert member.status == "administrator"


def test_unknown_variant(strict_settings):
    with pytest.raises(UnknownVariantError) as exc_info:
        decode({"update_id": 1, "my_chat_member": {
            "chat": {"id": 1, "type": "private"},
            "from": {"id": 1, "is_bot": False, "first_name": "a"},
            "date": 1,
            "old_chat_member": {"status": "member", "user": {"id": 1, "is_bot": False, "first_name": "a"}},
            "new_chat_member": {"status": "superuser", "user": {"id": 1, "is_bot": False, "first_name": "a"}},
        }}, Update, strict_settings)
    assert exc_info.value.path == ["my_chat_member", "new_chat_member"]
    assert "superuser" in str(exc_info.value)


def test_missing_discriminator(strict_settings):
    with pytest.raises(UnknownVariantError):
        decode({"user": {"id": 1, "is_bot": False, "first_name": "a"}}, ChatMember, strict_settings)


def test_other_discriminator_values(strict_settings):
    origin = decode({"type": "hidden_user", "date": 5, "sender_user_name": "anon"}, MessageOriginHiddenUser,
                    strict_settings)
    assert origin.sender_user_name == "anon"
    reaction = decode({"type": "emoji", "emoji": "👍"}, ReactionTypeEmoji, strict_settings)
    assert normalize(reaction, strict_settings) == {"type": "emoji", "emoji": "👍"}


def test_inaccessible_message(strict_settings):
    data = {"chat": {"id": 1, "type": "private"}, "message_id": 7, "date": 0}
    query = decode({"id": "1", "from": {"id": 1, "is_bot": False, "first_name": "a"}, "message": data,
                    "chat_instance": "1"}, CallbackQuery, strict_settings)
    assert isinstance(query.message, InaccessibleMessage)
    assert normalize(query.message, strict_settings) == data


def test_shared_discriminator_value(strict_settings):
    cached = decode({"type": "gif", "id": "1", "gif_file_id": "abc"}, InlineQueryResult, strict_settings)
    assert type(cached) is InlineQueryResultCachedGif
    gif = decode({"type": "gif", "id": "2", "gif_url": "https://example.com/a.gif",
                  "thumbnail_url": "https://example.com/a.jpg"}, InlineQueryResult, strict_settings)
    assert type(gif) is InlineQueryResultGif
    with pytest.raises(DecodeError):
        decode({"type": "gif", "id": "3"}, InlineQueryResult, strict_settings)


def test_input_message_content_union(strict_settings):
    result = decode({"type": "gif", "id": "1", "gif_file_id": "abc",
                     "input_message_content": {"message_text": "hi"}}, InlineQueryResult, strict_settings)
    assert isinstance(result.input_message_content, InputTextMessageContent)
    result = decode({"type": "gif", "id": "1", "gif_file_id": "abc",
                     "input_message_content": {"latitude": 1.5, "longitude": 2}}, InlineQueryResult,
                    strict_settings)
    assert isinstance(result.input_message_content, InputLocationMessageContent)


def test_not_an_object(strict_settings):
    with pytest.raises(DecodeError):
        decode([1, 2], Message, strict_settings)
    with pytest.raises(DecodeError) as exc_info:
        decode([{"update_id": 1}, "x"], List[Update], strict_settings)
    assert exc_info.value.path == [1]
