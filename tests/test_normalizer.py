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

import pytest
import yarl

from tgtypes import (Chat, ChatPermissions, ExclusiveFieldsError, InlineKeyboardButton, InlineKeyboardMarkup,
                     LinkPreviewOptions, Message, MissingFieldError, PhotoSize, Poll, PollOption, User,
                     normalize, normalize_value)


def test_chat_only_required_fields(strict_settings):
    chat = Chat(id=123456789, type="private")
    assert normalize(chat, strict_settings) == {"id": 123456789, "type": "private"}


def test_poll_omits_unset_optional_field(strict_settings):
    poll = Poll(id="1", question="Lunch?", options=[PollOption(text="Pizza", voter_count=3),
                                                    PollOption(text="Pasta", voter_count=2)],
                total_voter_count=5, is_closed=False, is_anonymous=True, type="regular",
                allows_multiple_answers=False)
    result = normalize(poll, strict_settings)
    assert "correct_option_id" not in result
    assert result == {
        "id": "1",
        "question": "Lunch?",
        "options": [{"text": "Pizza", "voter_count": 3}, {"text": "Pasta", "voter_count": 2}],
        "total_voter_count": 5,
        "is_closed": False,
        "is_anonymous": True,
        "type": "regular",
        "allows_multiple_answers": False,
    }


def test_message_with_nested_chat_and_photo(strict_settings):
    message = Message(message_id=42, date=1700000000, chat=Chat(id=-100, type="group", title="Test"),
                      photo=[PhotoSize(file_id="a", file_unique_id="ua", width=90, height=90),
                             PhotoSize(file_id="b", file_unique_id="ub", width=320, height=320, file_size=2048)])
    assert normalize(message, strict_settings) == {
        "message_id": 42,
        "date": 1700000000,
        "chat": {"id": -100, "type": "group", "title": "Test"},
        "photo": [
            {"file_id": "a", "file_unique_id": "ua", "width": 90, "height": 90},
            {"file_id": "b", "file_unique_id": "ub", "width": 320, "height": 320, "file_size": 2048},
        ],
    }


def test_inline_keyboard_button_with_url(strict_settings):
    button = InlineKeyboardButton(text="Buy", url="https://example.com")
    assert normalize(button, strict_settings) == {"text": "Buy", "url": "https://example.com"}


def test_url_is_emitted_as_given(strict_settings):
    button = InlineKeyboardButton(text="Search", url=yarl.URL("https://example.com/a%20b?q=x%2By", encoded=True))
    assert normalize(button, strict_settings)["url"] == "https://example.com/a%20b?q=x%2By"


def test_empty_record(strict_settings):
    assert normalize(ChatPermissions(), strict_settings) == {}


def test_keys_follow_declaration_order(strict_settings):
    # set in reverse order
    user = User(username="test", first_name="test", is_bot=False, id=1)
    assert list(normalize(user, strict_settings)) == ["id", "is_bot", "first_name", "username"]


def test_falsy_values_are_kept(strict_settings):
    permissions = ChatPermissions(can_send_messages=False, can_send_polls=True)
    assert normalize(permissions, strict_settings) == {"can_send_messages": False, "can_send_polls": True}
    chat = Chat(id=0, type="private", title="")
    assert normalize(chat, strict_settings) == {"id": 0, "type": "private", "title": ""}


def test_large_identifiers(strict_settings):
    chat = Chat(id=-1001234567890123, type="channel")
    assert normalize(chat, strict_settings)["id"] == -1001234567890123


def test_missing_required_field(strict_settings):
    with pytest.raises(MissingFieldError) as exc_info:
        normalize(Chat(id=1), strict_settings)
    assert "'type'" in str(exc_info.value)


def test_missing_required_field_in_nested_record(strict_settings):
    message = Message(message_id=1, date=1, chat=Chat(id=1))
    with pytest.raises(MissingFieldError) as exc_info:
        normalize(message, strict_settings)
    assert exc_info.value.path == ["chat"]
    assert str(exc_info.value).startswith("chat: ")


def test_missing_required_field_in_list(strict_settings):
    markup = InlineKeyboardMarkup(inline_keyboard=[[InlineKeyboardButton(text="ok", callback_data="ok"),
                                                    InlineKeyboardButton(callback_data="no")]])
    with pytest.raises(MissingFieldError) as exc_info:
        normalize(markup, strict_settings)
    assert exc_info.value.path == ["inline_keyboard", 0, 1]


def test_missing_required_field_permissive(permissive_settings):
    assert normalize(Chat(id=1), permissive_settings) == {"id": 1, "type": None}


def test_exactly_one_violated(strict_settings):
    with pytest.raises(ExclusiveFieldsError):
        normalize(InlineKeyboardButton(text="nothing"), strict_settings)
    with pytest.raises(ExclusiveFieldsError):
        normalize(InlineKeyboardButton(text="both", url="https://example.com", callback_data="x"), strict_settings)


def test_at_most_one_violated(strict_settings):
    assert normalize(LinkPreviewOptions(), strict_settings) == {}
    options = LinkPreviewOptions(prefer_small_media=True, prefer_large_media=True)
    with pytest.raises(ExclusiveFieldsError):
        normalize(options, strict_settings)


def test_false_flags_do_not_count_in_groups(strict_settings):
    options = LinkPreviewOptions(prefer_small_media=False, prefer_large_media=True)
    assert normalize(options, strict_settings) == {"prefer_small_media": False, "prefer_large_media": True}
    button = InlineKeyboardButton(text="x", callback_data="y", pay=False)
    assert normalize(button, strict_settings) == {"text": "x", "callback_data": "y", "pay": False}
    with pytest.raises(ExclusiveFieldsError):
        normalize(InlineKeyboardButton(text="x", pay=False), strict_settings)


def test_field_groups_not_checked_when_disabled(permissive_settings):
    button = InlineKeyboardButton(text="both", url="https://example.com", callback_data="x")
    assert normalize(button, permissive_settings) == {"text": "both", "url": "https://example.com",
                                                      "callback_data": "x"}


def test_normalize_value(strict_settings):
    params = {
        "chat_id": 1,
        "text": "hi",
        "reply_to_message_id": None,
        "reply_markup": InlineKeyboardMarkup(inline_keyboard=[[InlineKeyboardButton(text="a", callback_data="a")]]),
    }
    assert normalize_value(params, strict_settings) == {
        "chat_id": 1,
        "text": "hi",
        "reply_markup": {"inline_keyboard": [[{"text": "a", "callback_data": "a"}]]},
    }
    assert normalize_value([1, "a", True], strict_settings) == [1, "a", True]


def test_to_dict(strict_settings):
    assert Chat(id=1, type="private").to_dict(strict_settings) == {"id": 1, "type": "private"}
