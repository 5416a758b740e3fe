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

from typing import Literal, Union

from ..base import TelegramType
from .keyboard import WebAppInfo


class BotCommand(TelegramType):
    # 1-32 characters, lowercase letters, digits and underscores
    command: str
    description: str


class BotName(TelegramType):
    name: str


class BotDescription(TelegramType):
    description: str


class BotShortDescription(TelegramType):
    short_description: str


# ===================
# COMMAND SCOPES

class BotCommandScope(TelegramType, discriminator="type"):
    pass


class BotCommandScopeDefault(BotCommandScope):
    type: Literal["default"]


class BotCommandScopeAllPrivateChats(BotCommandScope):
    type: Literal["all_private_chats"]


class BotCommandScopeAllGroupChats(BotCommandScope):
    type: Literal["all_group_chats"]


class BotCommandScopeAllChatAdministrators(BotCommandScope):
    type: Literal["all_chat_administrators"]


class BotCommandScopeChat(BotCommandScope):
    type: Literal["chat"]
    # chat id or "@channelusername"
    chat_id: Union[int, str]


class BotCommandScopeChatAdministrators(BotCommandScope):
    type: Literal["chat_administrators"]
    chat_id: Union[int, str]


class BotCommandScopeChatMember(BotCommandScope):
    type: Literal["chat_member"]
    chat_id: Union[int, str]
    user_id: int


# ===================
# MENU BUTTONS

class MenuButton(TelegramType, discriminator="type"):
    pass


class MenuButtonCommands(MenuButton):
    type: Literal["commands"]


class MenuButtonWebApp(MenuButton):
    type: Literal["web_app"]
    text: str
    web_app: WebAppInfo


class MenuButtonDefault(MenuButton):
    type: Literal["default"]
