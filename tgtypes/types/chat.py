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

from ..base import TelegramType


class User(TelegramType):
    id: int
    is_bot: bool
    first_name: str
    last_name: Optional[str]
    username: Optional[str]
    language_code: Optional[str]
    is_premium: Optional[Literal[True]]
    added_to_attachment_menu: Optional[Literal[True]]
    can_join_groups: Optional[bool]
    can_read_all_group_messages: Optional[bool]
    supports_inline_queries: Optional[bool]
    can_connect_to_business: Optional[bool]
    has_main_web_app: Optional[bool]


class Chat(TelegramType):
    # may have more than 32 significant bits
    id: int
    # "private", "group", "supergroup" or "channel"
    type: str
    title: Optional[str]
    username: Optional[str]
    first_name: Optional[str]
    last_name: Optional[str]
    is_forum: Optional[Literal[True]]


class ChatPhoto(TelegramType):
    small_file_id: str
    small_file_unique_id: str
    big_file_id: str
    big_file_unique_id: str


class ChatLocation(TelegramType):
    location: "Location"
    address: str


class Birthdate(TelegramType):
    day: int
    month: int
    year: Optional[int]


class BusinessIntro(TelegramType):
    title: Optional[str]
    message: Optional[str]
    sticker: Optional["Sticker"]


class BusinessLocation(TelegramType):
    address: str
    location: Optional["Location"]


class BusinessOpeningHoursInterval(TelegramType):
    # minutes since the start of the week (monday), 0 - 7*24*60
    opening_minute: int
    closing_minute: int


class BusinessOpeningHours(TelegramType):
    time_zone_name: str
    opening_hours: List[BusinessOpeningHoursInterval]


class BusinessConnection(TelegramType):
    id: str
    user: User
    user_chat_id: int
    date: int
    can_reply: bool
    is_enabled: bool


class BusinessMessagesDeleted(TelegramType):
    business_connection_id: str
    chat: Chat
    message_ids: List[int]


class ChatFullInfo(TelegramType):
    """Full information about a chat, as returned by getChat."""
    id: int
    type: str
    title: Optional[str]
    username: Optional[str]
    first_name: Optional[str]
    last_name: Optional[str]
    is_forum: Optional[Literal[True]]
    accent_color_id: int
    max_reaction_count: int
    photo: Optional[ChatPhoto]
    active_usernames: Optional[List[str]]
    birthdate: Optional[Birthdate]
    business_intro: Optional[BusinessIntro]
    business_location: Optional[BusinessLocation]
    business_opening_hours: Optional[BusinessOpeningHours]
    personal_chat: Optional[Chat]
    available_reactions: Optional[List["ReactionType"]]
    background_custom_emoji_id: Optional[str]
    profile_accent_color_id: Optional[int]
    profile_background_custom_emoji_id: Optional[str]
    emoji_status_custom_emoji_id: Optional[str]
    emoji_status_expiration_date: Optional[int]
    bio: Optional[str]
    has_private_forwards: Optional[Literal[True]]
    has_restricted_voice_and_video_messages: Optional[Literal[True]]
    join_to_send_messages: Optional[Literal[True]]
    join_by_request: Optional[Literal[True]]
    description: Optional[str]
    invite_link: Optional[str]
    pinned_message: Optional["Message"]
    permissions: Optional["ChatPermissions"]
    can_send_gift: Optional[Literal[True]]
    can_send_paid_media: Optional[Literal[True]]
    slow_mode_delay: Optional[int]
    unrestrict_boost_count: Optional[int]
    message_auto_delete_time: Optional[int]
    has_aggressive_anti_spam_enabled: Optional[Literal[True]]
    has_hidden_members: Optional[Literal[True]]
    has_protected_content: Optional[Literal[True]]
    has_visible_history: Optional[Literal[True]]
    sticker_set_name: Optional[str]
    can_set_sticker_set: Optional[Literal[True]]
    custom_emoji_sticker_set_name: Optional[str]
    linked_chat_id: Optional[int]
    location: Optional[ChatLocation]


class ChatPermissions(TelegramType):
    can_send_messages: Optional[bool]
    can_send_audios: Optional[bool]
    can_send_documents: Optional[bool]
    can_send_photos: Optional[bool]
    can_send_videos: Optional[bool]
    can_send_video_notes: Optional[bool]
    can_send_voice_notes: Optional[bool]
    can_send_polls: Optional[bool]
    can_send_other_messages: Optional[bool]
    can_add_web_page_previews: Optional[bool]
    can_change_info: Optional[bool]
    can_invite_users: Optional[bool]
    can_pin_messages: Optional[bool]
    can_manage_topics: Optional[bool]


class ChatAdministratorRights(TelegramType):
    is_anonymous: bool
    can_manage_chat: bool
    can_delete_messages: bool
    can_manage_video_chats: bool
    can_restrict_members: bool
    can_promote_members: bool
    can_change_info: bool
    can_invite_users: bool
    can_post_stories: bool
    can_edit_stories: bool
    can_delete_stories: bool
    can_post_messages: Optional[bool]
    can_edit_messages: Optional[bool]
    can_pin_messages: Optional[bool]
    can_manage_topics: Optional[bool]


class ChatInviteLink(TelegramType):
    invite_link: str
    creator: User
    creates_join_request: bool
    is_primary: bool
    is_revoked: bool
    name: Optional[str]
    expire_date: Optional[int]
    member_limit: Optional[int]
    pending_join_request_count: Optional[int]
    subscription_period: Optional[int]
    subscription_price: Optional[int]


# ===================
# CHAT MEMBERS

class ChatMember(TelegramType, discriminator="status"):
    pass


class ChatMemberOwner(ChatMember):
    status: Literal["creator"]
    user: User
    is_anonymous: bool
    custom_title: Optional[str]


class ChatMemberAdministrator(ChatMember):
    status: Literal["administrator"]
    user: User
    can_be_edited: bool
    is_anonymous: bool
    can_manage_chat: bool
    can_delete_messages: bool
    can_manage_video_chats: bool
    can_restrict_members: bool
    can_promote_members: bool
    can_change_info: bool
    can_invite_users: bool
    can_post_stories: bool
    can_edit_stories: bool
    can_delete_stories: bool
    can_post_messages: Optional[bool]
    can_edit_messages: Optional[bool]
    can_pin_messages: Optional[bool]
    can_manage_topics: Optional[bool]
    custom_title: Optional[str]


class ChatMemberMember(ChatMember):
    status: Literal["member"]
    user: User
    until_date: Optional[int]


class ChatMemberRestricted(ChatMember):
    status: Literal["restricted"]
    user: User
    is_member: bool
    can_send_messages: bool
    can_send_audios: bool
    can_send_documents: bool
    can_send_photos: bool
    can_send_videos: bool
    can_send_video_notes: bool
    can_send_voice_notes: bool
    can_send_polls: bool
    can_send_other_messages: bool
    can_add_web_page_previews: bool
    can_change_info: bool
    can_invite_users: bool
    can_pin_messages: bool
    can_manage_topics: bool
    # 0 means restricted forever
    until_date: int


class ChatMemberLeft(ChatMember):
    status: Literal["left"]
    user: User


class ChatMemberBanned(ChatMember):
    status: Literal["kicked"]
    user: User
    until_date: int


class ChatMemberUpdated(TelegramType):
    chat: Chat
    from_: User
    date: int
    old_chat_member: ChatMember
    new_chat_member: ChatMember
    invite_link: Optional[ChatInviteLink]
    via_join_request: Optional[bool]
    via_chat_folder_invite_link: Optional[bool]


class ChatJoinRequest(TelegramType):
    chat: Chat
    from_: User
    user_chat_id: int
    date: int
    bio: Optional[str]
    invite_link: Optional[ChatInviteLink]


# ===================
# BOOSTS

class ChatBoostSource(TelegramType, discriminator="source"):
    pass


class ChatBoostSourcePremium(ChatBoostSource):
    source: Literal["premium"]
    user: User


class ChatBoostSourceGiftCode(ChatBoostSource):
    source: Literal["gift_code"]
    user: User


class ChatBoostSourceGiveaway(ChatBoostSource):
    source: Literal["giveaway"]
    giveaway_message_id: int
    user: Optional[User]
    prize_star_count: Optional[int]
    is_unclaimed: Optional[Literal[True]]


class ChatBoost(TelegramType):
    boost_id: str
    add_date: int
    expiration_date: int
    source: ChatBoostSource


class ChatBoostUpdated(TelegramType):
    chat: Chat
    boost: ChatBoost


class ChatBoostRemoved(TelegramType):
    chat: Chat
    boost_id: str
    remove_date: int
    source: ChatBoostSource


class UserChatBoosts(TelegramType):
    boosts: List[ChatBoost]


class ForumTopic(TelegramType):
    message_thread_id: int
    name: str
    icon_color: int
    icon_custom_emoji_id: Optional[str]
