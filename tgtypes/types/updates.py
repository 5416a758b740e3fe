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

from typing import List, Optional

import yarl

from ..base import TelegramType
from .chat import (BusinessConnection, BusinessMessagesDeleted, ChatBoostRemoved, ChatBoostUpdated, ChatJoinRequest,
                   ChatMemberUpdated)
from .inline import ChosenInlineResult, InlineQuery
from .keyboard import CallbackQuery
from .media import Poll, PollAnswer
from .message import Message, MessageReactionCountUpdated, MessageReactionUpdated
from .payments import PaidMediaPurchased, PreCheckoutQuery, ShippingQuery


class Update(TelegramType):
    """An incoming update. At most one of the optional fields is present."""

    update_id: int
    message: Optional[Message]
    edited_message: Optional[Message]
    channel_post: Optional[Message]
    edited_channel_post: Optional[Message]
    business_connection: Optional[BusinessConnection]
    business_message: Optional[Message]
    edited_business_message: Optional[Message]
    deleted_business_messages: Optional[BusinessMessagesDeleted]
    message_reaction: Optional[MessageReactionUpdated]
    message_reaction_count: Optional[MessageReactionCountUpdated]
    inline_query: Optional[InlineQuery]
    chosen_inline_result: Optional[ChosenInlineResult]
    callback_query: Optional[CallbackQuery]
    shipping_query: Optional[ShippingQuery]
    pre_checkout_query: Optional[PreCheckoutQuery]
    purchased_paid_media: Optional[PaidMediaPurchased]
    poll: Optional[Poll]
    poll_answer: Optional[PollAnswer]
    my_chat_member: Optional[ChatMemberUpdated]
    chat_member: Optional[ChatMemberUpdated]
    chat_join_request: Optional[ChatJoinRequest]
    chat_boost: Optional[ChatBoostUpdated]
    removed_chat_boost: Optional[ChatBoostRemoved]

    @property
    def update_type(self) -> Optional[str]:
        for field in self._fields():
            if field.name != "update_id" and self.is_set(field.name):
                return field.wire_name
        return None


class WebhookInfo(TelegramType):
    # empty if the bot uses getUpdates
    url: yarl.URL
    has_custom_certificate: bool
    pending_update_count: int
    ip_address: Optional[str]
    last_error_date: Optional[int]
    last_error_message: Optional[str]
    last_synchronization_error_date: Optional[int]
    max_connections: Optional[int]
    allowed_updates: Optional[List[str]]


class ResponseParameters(TelegramType):
    migrate_to_chat_id: Optional[int]
    retry_after: Optional[int]
