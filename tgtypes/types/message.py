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

from typing import List, Literal, Mapping, Optional, Type, Union

import yarl

from ..base import TelegramType
from ..schema import at_most_one
from .chat import Chat, User


class MessageEntity(TelegramType):
    # "mention", "hashtag", "bot_command", "url", "bold", "text_link", "text_mention", "custom_emoji", ...
    type: str
    # offset and length in UTF-16 code units
    offset: int
    length: int
    url: Optional[yarl.URL]
    user: Optional[User]
    language: Optional[str]
    custom_emoji_id: Optional[str]


class TextQuote(TelegramType):
    text: str
    entities: Optional[List[MessageEntity]]
    position: int
    is_manual: Optional[Literal[True]]


class LinkPreviewOptions(TelegramType):
    __field_groups__ = (at_most_one("prefer_small_media", "prefer_large_media"),)

    is_disabled: Optional[bool]
    url: Optional[yarl.URL]
    prefer_small_media: Optional[bool]
    prefer_large_media: Optional[bool]
    show_above_text: Optional[bool]


class ReplyParameters(TelegramType):
    message_id: int
    chat_id: Optional[Union[int, str]]
    allow_sending_without_reply: Optional[bool]
    quote: Optional[str]
    quote_parse_mode: Optional[str]
    quote_entities: Optional[List[MessageEntity]]
    quote_position: Optional[int]


class MessageId(TelegramType):
    message_id: int


# ===================
# ORIGINS

class MessageOrigin(TelegramType, discriminator="type"):
    pass


class MessageOriginUser(MessageOrigin):
    type: Literal["user"]
    date: int
    sender_user: User


class MessageOriginHiddenUser(MessageOrigin):
    type: Literal["hidden_user"]
    date: int
    sender_user_name: str


class MessageOriginChat(MessageOrigin):
    type: Literal["chat"]
    date: int
    sender_chat: Chat
    author_signature: Optional[str]


class MessageOriginChannel(MessageOrigin):
    type: Literal["channel"]
    date: int
    chat: Chat
    message_id: int
    author_signature: Optional[str]


class ExternalReplyInfo(TelegramType):
    origin: MessageOrigin
    chat: Optional[Chat]
    message_id: Optional[int]
    link_preview_options: Optional[LinkPreviewOptions]
    animation: Optional["Animation"]
    audio: Optional["Audio"]
    document: Optional["Document"]
    paid_media: Optional["PaidMediaInfo"]
    photo: Optional[List["PhotoSize"]]
    sticker: Optional["Sticker"]
    story: Optional["Story"]
    video: Optional["Video"]
    video_note: Optional["VideoNote"]
    voice: Optional["Voice"]
    has_media_spoiler: Optional[Literal[True]]
    contact: Optional["Contact"]
    dice: Optional["Dice"]
    game: Optional["Game"]
    giveaway: Optional["Giveaway"]
    giveaway_winners: Optional["GiveawayWinners"]
    invoice: Optional["Invoice"]
    location: Optional["Location"]
    poll: Optional["Poll"]
    venue: Optional["Venue"]


# ===================
# MESSAGES

class MaybeInaccessibleMessage(TelegramType, discriminator="date"):
    """Either a Message or an InaccessibleMessage, which is sent with a date of 0."""

    @classmethod
    def select_variants(cls, data: Mapping) -> List[Type[TelegramType]]:
        if data.get("date") == 0:
            return [InaccessibleMessage]
        return [Message]


class InaccessibleMessage(MaybeInaccessibleMessage):
    chat: Chat
    message_id: int
    date: Literal[0]


class Message(MaybeInaccessibleMessage):
    message_id: int
    message_thread_id: Optional[int]
    from_: Optional[User]
    sender_chat: Optional[Chat]
    sender_boost_count: Optional[int]
    sender_business_bot: Optional[User]
    date: int
    business_connection_id: Optional[str]
    chat: Chat
    forward_origin: Optional[MessageOrigin]
    is_topic_message: Optional[Literal[True]]
    is_automatic_forward: Optional[Literal[True]]
    reply_to_message: Optional["Message"]
    external_reply: Optional[ExternalReplyInfo]
    quote: Optional[TextQuote]
    reply_to_story: Optional["Story"]
    via_bot: Optional[User]
    edit_date: Optional[int]
    has_protected_content: Optional[Literal[True]]
    is_from_offline: Optional[Literal[True]]
    media_group_id: Optional[str]
    author_signature: Optional[str]
    text: Optional[str]
    entities: Optional[List[MessageEntity]]
    link_preview_options: Optional[LinkPreviewOptions]
    effect_id: Optional[str]
    animation: Optional["Animation"]
    audio: Optional["Audio"]
    document: Optional["Document"]
    paid_media: Optional["PaidMediaInfo"]
    photo: Optional[List["PhotoSize"]]
    sticker: Optional["Sticker"]
    story: Optional["Story"]
    video: Optional["Video"]
    video_note: Optional["VideoNote"]
    voice: Optional["Voice"]
    caption: Optional[str]
    caption_entities: Optional[List[MessageEntity]]
    show_caption_above_media: Optional[Literal[True]]
    has_media_spoiler: Optional[Literal[True]]
    contact: Optional["Contact"]
    dice: Optional["Dice"]
    game: Optional["Game"]
    poll: Optional["Poll"]
    venue: Optional["Venue"]
    location: Optional["Location"]
    new_chat_members: Optional[List[User]]
    left_chat_member: Optional[User]
    new_chat_title: Optional[str]
    new_chat_photo: Optional[List["PhotoSize"]]
    delete_chat_photo: Optional[Literal[True]]
    group_chat_created: Optional[Literal[True]]
    supergroup_chat_created: Optional[Literal[True]]
    channel_chat_created: Optional[Literal[True]]
    message_auto_delete_timer_changed: Optional["MessageAutoDeleteTimerChanged"]
    migrate_to_chat_id: Optional[int]
    migrate_from_chat_id: Optional[int]
    pinned_message: Optional[MaybeInaccessibleMessage]
    invoice: Optional["Invoice"]
    successful_payment: Optional["SuccessfulPayment"]
    refunded_payment: Optional["RefundedPayment"]
    users_shared: Optional["UsersShared"]
    chat_shared: Optional["ChatShared"]
    connected_website: Optional[str]
    write_access_allowed: Optional["WriteAccessAllowed"]
    passport_data: Optional["PassportData"]
    proximity_alert_triggered: Optional["ProximityAlertTriggered"]
    boost_added: Optional["ChatBoostAdded"]
    chat_background_set: Optional["ChatBackground"]
    forum_topic_created: Optional["ForumTopicCreated"]
    forum_topic_edited: Optional["ForumTopicEdited"]
    forum_topic_closed: Optional["ForumTopicClosed"]
    forum_topic_reopened: Optional["ForumTopicReopened"]
    general_forum_topic_hidden: Optional["GeneralForumTopicHidden"]
    general_forum_topic_unhidden: Optional["GeneralForumTopicUnhidden"]
    giveaway_created: Optional["GiveawayCreated"]
    giveaway: Optional["Giveaway"]
    giveaway_winners: Optional["GiveawayWinners"]
    giveaway_completed: Optional["GiveawayCompleted"]
    video_chat_scheduled: Optional["VideoChatScheduled"]
    video_chat_started: Optional["VideoChatStarted"]
    video_chat_ended: Optional["VideoChatEnded"]
    video_chat_participants_invited: Optional["VideoChatParticipantsInvited"]
    web_app_data: Optional["WebAppData"]
    reply_markup: Optional["InlineKeyboardMarkup"]


# ===================
# SERVICE MESSAGES

class MessageAutoDeleteTimerChanged(TelegramType):
    message_auto_delete_time: int


class ForumTopicCreated(TelegramType):
    name: str
    icon_color: int
    icon_custom_emoji_id: Optional[str]


class ForumTopicClosed(TelegramType):
    pass


class ForumTopicEdited(TelegramType):
    name: Optional[str]
    icon_custom_emoji_id: Optional[str]


class ForumTopicReopened(TelegramType):
    pass


class GeneralForumTopicHidden(TelegramType):
    pass


class GeneralForumTopicUnhidden(TelegramType):
    pass


class SharedUser(TelegramType):
    user_id: int
    first_name: Optional[str]
    last_name: Optional[str]
    username: Optional[str]
    photo: Optional[List["PhotoSize"]]


class UsersShared(TelegramType):
    request_id: int
    users: List[SharedUser]


class ChatShared(TelegramType):
    request_id: int
    chat_id: int
    title: Optional[str]
    username: Optional[str]
    photo: Optional[List["PhotoSize"]]


class WriteAccessAllowed(TelegramType):
    from_request: Optional[bool]
    web_app_name: Optional[str]
    from_attachment_menu: Optional[bool]


class ProximityAlertTriggered(TelegramType):
    traveler: User
    watcher: User
    distance: int


class ChatBoostAdded(TelegramType):
    boost_count: int


class VideoChatScheduled(TelegramType):
    start_date: int


class VideoChatStarted(TelegramType):
    pass


class VideoChatEnded(TelegramType):
    duration: int


class VideoChatParticipantsInvited(TelegramType):
    users: List[User]


class Giveaway(TelegramType):
    chats: List[Chat]
    winners_selection_date: int
    winner_count: int
    only_new_members: Optional[Literal[True]]
    has_public_winners: Optional[Literal[True]]
    prize_description: Optional[str]
    country_codes: Optional[List[str]]
    prize_star_count: Optional[int]
    premium_subscription_month_count: Optional[int]


class GiveawayCreated(TelegramType):
    prize_star_count: Optional[int]


class GiveawayWinners(TelegramType):
    chat: Chat
    giveaway_message_id: int
    winners_selection_date: int
    winner_count: int
    winners: List[User]
    additional_chat_count: Optional[int]
    prize_star_count: Optional[int]
    premium_subscription_month_count: Optional[int]
    unclaimed_prize_count: Optional[int]
    only_new_members: Optional[Literal[True]]
    was_refunded: Optional[Literal[True]]
    prize_description: Optional[str]


class GiveawayCompleted(TelegramType):
    winner_count: int
    unclaimed_prize_count: Optional[int]
    giveaway_message: Optional[Message]
    is_star_giveaway: Optional[Literal[True]]


# ===================
# CHAT BACKGROUNDS

class BackgroundFill(TelegramType, discriminator="type"):
    pass


class BackgroundFillSolid(BackgroundFill):
    type: Literal["solid"]
    # RGB24
    color: int


class BackgroundFillGradient(BackgroundFill):
    type: Literal["gradient"]
    top_color: int
    bottom_color: int
    rotation_angle: int


class BackgroundFillFreeformGradient(BackgroundFill):
    type: Literal["freeform_gradient"]
    colors: List[int]


class BackgroundType(TelegramType, discriminator="type"):
    pass


class BackgroundTypeFill(BackgroundType):
    type: Literal["fill"]
    fill: BackgroundFill
    dark_theme_dimming: int


class BackgroundTypeWallpaper(BackgroundType):
    type: Literal["wallpaper"]
    document: "Document"
    dark_theme_dimming: int
    is_blurred: Optional[Literal[True]]
    is_moving: Optional[Literal[True]]


class BackgroundTypePattern(BackgroundType):
    type: Literal["pattern"]
    document: "Document"
    fill: BackgroundFill
    intensity: int
    is_inverted: Optional[Literal[True]]
    is_moving: Optional[Literal[True]]


class BackgroundTypeChatTheme(BackgroundType):
    type: Literal["chat_theme"]
    theme_name: str


class ChatBackground(TelegramType):
    type: BackgroundType


# ===================
# REACTIONS

class ReactionType(TelegramType, discriminator="type"):
    pass


class ReactionTypeEmoji(ReactionType):
    type: Literal["emoji"]
    emoji: str


class ReactionTypeCustomEmoji(ReactionType):
    type: Literal["custom_emoji"]
    custom_emoji_id: str


class ReactionTypePaid(ReactionType):
    type: Literal["paid"]


class ReactionCount(TelegramType):
    type: ReactionType
    total_count: int


class MessageReactionUpdated(TelegramType):
    chat: Chat
    message_id: int
    user: Optional[User]
    actor_chat: Optional[Chat]
    date: int
    old_reaction: List[ReactionType]
    new_reaction: List[ReactionType]


class MessageReactionCountUpdated(TelegramType):
    chat: Chat
    message_id: int
    date: int
    reactions: List[ReactionCount]
