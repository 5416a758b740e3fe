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
from .chat import Chat, User
from .message import MessageEntity


class PhotoSize(TelegramType):
    file_id: str
    file_unique_id: str
    width: int
    height: int
    file_size: Optional[int]


class Animation(TelegramType):
    file_id: str
    file_unique_id: str
    width: int
    height: int
    duration: int
    thumbnail: Optional[PhotoSize]
    file_name: Optional[str]
    mime_type: Optional[str]
    file_size: Optional[int]


class Audio(TelegramType):
    file_id: str
    file_unique_id: str
    duration: int
    performer: Optional[str]
    title: Optional[str]
    file_name: Optional[str]
    mime_type: Optional[str]
    file_size: Optional[int]
    thumbnail: Optional[PhotoSize]


class Document(TelegramType):
    file_id: str
    file_unique_id: str
    thumbnail: Optional[PhotoSize]
    file_name: Optional[str]
    mime_type: Optional[str]
    file_size: Optional[int]


class Story(TelegramType):
    chat: Chat
    id: int


class Video(TelegramType):
    file_id: str
    file_unique_id: str
    width: int
    height: int
    duration: int
    thumbnail: Optional[PhotoSize]
    cover: Optional[List[PhotoSize]]
    start_timestamp: Optional[int]
    file_name: Optional[str]
    mime_type: Optional[str]
    file_size: Optional[int]


class VideoNote(TelegramType):
    file_id: str
    file_unique_id: str
    length: int
    duration: int
    thumbnail: Optional[PhotoSize]
    file_size: Optional[int]


class Voice(TelegramType):
    file_id: str
    file_unique_id: str
    duration: int
    mime_type: Optional[str]
    file_size: Optional[int]


class File(TelegramType):
    file_id: str
    file_unique_id: str
    file_size: Optional[int]
    file_path: Optional[str]


class UserProfilePhotos(TelegramType):
    total_count: int
    # up to 4 sizes per photo
    photos: List[List[PhotoSize]]


# ===================
# PAID MEDIA

class PaidMedia(TelegramType, discriminator="type"):
    pass


class PaidMediaPreview(PaidMedia):
    type: Literal["preview"]
    width: Optional[int]
    height: Optional[int]
    duration: Optional[int]


class PaidMediaPhoto(PaidMedia):
    type: Literal["photo"]
    photo: List[PhotoSize]


class PaidMediaVideo(PaidMedia):
    type: Literal["video"]
    video: Video


class PaidMediaInfo(TelegramType):
    star_count: int
    paid_media: List[PaidMedia]


# ===================
# CONTACTS, LOCATIONS, POLLS

class Contact(TelegramType):
    phone_number: str
    first_name: str
    last_name: Optional[str]
    user_id: Optional[int]
    vcard: Optional[str]


class Dice(TelegramType):
    emoji: str
    value: int


class Location(TelegramType):
    latitude: float
    longitude: float
    horizontal_accuracy: Optional[float]
    live_period: Optional[int]
    heading: Optional[int]
    proximity_alert_radius: Optional[int]


class Venue(TelegramType):
    location: Location
    title: str
    address: str
    foursquare_id: Optional[str]
    foursquare_type: Optional[str]
    google_place_id: Optional[str]
    google_place_type: Optional[str]


class PollOption(TelegramType):
    text: str
    text_entities: Optional[List[MessageEntity]]
    voter_count: int


class InputPollOption(TelegramType):
    text: str
    text_parse_mode: Optional[str]
    text_entities: Optional[List[MessageEntity]]


class Poll(TelegramType):
    id: str
    question: str
    question_entities: Optional[List[MessageEntity]]
    options: List[PollOption]
    total_voter_count: int
    is_closed: bool
    is_anonymous: bool
    # "regular" or "quiz"
    type: str
    allows_multiple_answers: bool
    correct_option_id: Optional[int]
    explanation: Optional[str]
    explanation_entities: Optional[List[MessageEntity]]
    open_period: Optional[int]
    close_date: Optional[int]


class PollAnswer(TelegramType):
    poll_id: str
    voter_chat: Optional[Chat]
    user: Optional[User]
    option_ids: List[int]


# ===================
# STICKERS AND GAMES

class MaskPosition(TelegramType):
    # "forehead", "eyes", "mouth" or "chin"
    point: str
    x_shift: float
    y_shift: float
    scale: float


class Sticker(TelegramType):
    file_id: str
    file_unique_id: str
    # "regular", "mask" or "custom_emoji"
    type: str
    width: int
    height: int
    is_animated: bool
    is_video: bool
    thumbnail: Optional[PhotoSize]
    emoji: Optional[str]
    set_name: Optional[str]
    premium_animation: Optional[File]
    mask_position: Optional[MaskPosition]
    custom_emoji_id: Optional[str]
    needs_repainting: Optional[Literal[True]]
    file_size: Optional[int]


class StickerSet(TelegramType):
    name: str
    title: str
    sticker_type: str
    stickers: List[Sticker]
    thumbnail: Optional[PhotoSize]


class InputSticker(TelegramType):
    # file_id, HTTP URL or "attach://<file_attach_name>"
    sticker: str
    format: str
    emoji_list: List[str]
    mask_position: Optional[MaskPosition]
    keywords: Optional[List[str]]


class Game(TelegramType):
    title: str
    description: str
    photo: List[PhotoSize]
    text: Optional[str]
    text_entities: Optional[List[MessageEntity]]
    animation: Optional[Animation]


class GameHighScore(TelegramType):
    position: int
    user: User
    score: int


# ===================
# INPUT MEDIA
#
# "media" and "thumbnail" take a file_id, an HTTP URL or "attach://<file_attach_name>" for files uploaded in the
# same multipart request.

class InputMedia(TelegramType, discriminator="type"):
    pass


class InputMediaPhoto(InputMedia):
    type: Literal["photo"]
    media: str
    caption: Optional[str]
    parse_mode: Optional[str]
    caption_entities: Optional[List[MessageEntity]]
    show_caption_above_media: Optional[bool]
    has_spoiler: Optional[bool]


class InputMediaVideo(InputMedia):
    type: Literal["video"]
    media: str
    thumbnail: Optional[str]
    cover: Optional[str]
    start_timestamp: Optional[int]
    caption: Optional[str]
    parse_mode: Optional[str]
    caption_entities: Optional[List[MessageEntity]]
    show_caption_above_media: Optional[bool]
    width: Optional[int]
    height: Optional[int]
    duration: Optional[int]
    supports_streaming: Optional[bool]
    has_spoiler: Optional[bool]


class InputMediaAnimation(InputMedia):
    type: Literal["animation"]
    media: str
    thumbnail: Optional[str]
    caption: Optional[str]
    parse_mode: Optional[str]
    caption_entities: Optional[List[MessageEntity]]
    show_caption_above_media: Optional[bool]
    width: Optional[int]
    height: Optional[int]
    duration: Optional[int]
    has_spoiler: Optional[bool]


class InputMediaAudio(InputMedia):
    type: Literal["audio"]
    media: str
    thumbnail: Optional[str]
    caption: Optional[str]
    parse_mode: Optional[str]
    caption_entities: Optional[List[MessageEntity]]
    duration: Optional[int]
    performer: Optional[str]
    title: Optional[str]


class InputMediaDocument(InputMedia):
    type: Literal["document"]
    media: str
    thumbnail: Optional[str]
    caption: Optional[str]
    parse_mode: Optional[str]
    caption_entities: Optional[List[MessageEntity]]
    disable_content_type_detection: Optional[bool]


class InputPaidMedia(TelegramType, discriminator="type"):
    pass


class InputPaidMediaPhoto(InputPaidMedia):
    type: Literal["photo"]
    media: str


class InputPaidMediaVideo(InputPaidMedia):
    type: Literal["video"]
    media: str
    thumbnail: Optional[str]
    cover: Optional[str]
    start_timestamp: Optional[int]
    width: Optional[int]
    height: Optional[int]
    duration: Optional[int]
    supports_streaming: Optional[bool]
