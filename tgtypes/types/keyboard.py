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

from typing import List, Literal, Optional

import yarl

from ..base import TelegramType
from ..schema import at_most_one, exactly_one
from .chat import ChatAdministratorRights, User
from .message import MaybeInaccessibleMessage


class WebAppInfo(TelegramType):
    url: yarl.URL


class WebAppData(TelegramType):
    data: str
    button_text: str


# ===================
# REPLY KEYBOARDS

class KeyboardButtonRequestUsers(TelegramType):
    request_id: int
    user_is_bot: Optional[bool]
    user_is_premium: Optional[bool]
    max_quantity: Optional[int]
    request_name: Optional[bool]
    request_username: Optional[bool]
    request_photo: Optional[bool]


class KeyboardButtonRequestChat(TelegramType):
    request_id: int
    chat_is_channel: bool
    chat_is_forum: Optional[bool]
    chat_has_username: Optional[bool]
    chat_is_created: Optional[bool]
    user_administrator_rights: Optional[ChatAdministratorRights]
    bot_administrator_rights: Optional[ChatAdministratorRights]
    bot_is_member: Optional[bool]
    request_title: Optional[bool]
    request_username: Optional[bool]
    request_photo: Optional[bool]


class KeyboardButtonPollType(TelegramType):
    # "quiz", "regular" or unset for any poll type
    type: Optional[str]


class KeyboardButton(TelegramType):
    __field_groups__ = (at_most_one("request_users", "request_chat", "request_contact", "request_location",
                                    "request_poll", "web_app"),)

    text: str
    request_users: Optional[KeyboardButtonRequestUsers]
    request_chat: Optional[KeyboardButtonRequestChat]
    request_contact: Optional[bool]
    request_location: Optional[bool]
    request_poll: Optional[KeyboardButtonPollType]
    web_app: Optional[WebAppInfo]


class ReplyKeyboardMarkup(TelegramType):
    keyboard: List[List[KeyboardButton]]
    is_persistent: Optional[bool]
    resize_keyboard: Optional[bool]
    one_time_keyboard: Optional[bool]
    input_field_placeholder: Optional[str]
    selective: Optional[bool]


class ReplyKeyboardRemove(TelegramType):
    remove_keyboard: Literal[True]
    selective: Optional[bool]


class ForceReply(TelegramType):
    force_reply: Literal[True]
    input_field_placeholder: Optional[str]
    selective: Optional[bool]


# ===================
# INLINE KEYBOARDS

class LoginUrl(TelegramType):
    url: yarl.URL
    forward_text: Optional[str]
    bot_username: Optional[str]
    request_write_access: Optional[bool]


class SwitchInlineQueryChosenChat(TelegramType):
    query: Optional[str]
    allow_user_chats: Optional[bool]
    allow_bot_chats: Optional[bool]
    allow_group_chats: Optional[bool]
    allow_channel_chats: Optional[bool]


class CopyTextButton(TelegramType):
    text: str


class CallbackGame(TelegramType):
    """Placeholder, holds no information."""


class InlineKeyboardButton(TelegramType):
    __field_groups__ = (exactly_one("url", "callback_data", "web_app", "login_url", "switch_inline_query",
                                    "switch_inline_query_current_chat", "switch_inline_query_chosen_chat",
                                    "copy_text", "callback_game", "pay"),)

    text: str
    url: Optional[yarl.URL]
    # 1-64 bytes
    callback_data: Optional[str]
    web_app: Optional[WebAppInfo]
    login_url: Optional[LoginUrl]
    switch_inline_query: Optional[str]
    switch_inline_query_current_chat: Optional[str]
    switch_inline_query_chosen_chat: Optional[SwitchInlineQueryChosenChat]
    copy_text: Optional[CopyTextButton]
    callback_game: Optional[CallbackGame]
    pay: Optional[bool]


class InlineKeyboardMarkup(TelegramType):
    inline_keyboard: List[List[InlineKeyboardButton]]


class CallbackQuery(TelegramType):
    id: str
    from_: User
    message: Optional[MaybeInaccessibleMessage]
    inline_message_id: Optional[str]
    chat_instance: str
    data: Optional[str]
    game_short_name: Optional[str]
