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

from typing import List, Literal, Optional, Union

import yarl

from ..base import TelegramType
from ..schema import exactly_one
from .chat import User
from .keyboard import InlineKeyboardMarkup, WebAppInfo
from .media import Location
from .message import LinkPreviewOptions, MessageEntity
from .payments import LabeledPrice


class InlineQuery(TelegramType):
    id: str
    from_: User
    query: str
    offset: str
    chat_type: Optional[str]
    location: Optional[Location]


class InlineQueryResultsButton(TelegramType):
    __field_groups__ = (exactly_one("web_app", "start_parameter"),)

    text: str
    web_app: Optional[WebAppInfo]
    start_parameter: Optional[str]


# ===================
# INPUT MESSAGE CONTENT

class InputTextMessageContent(TelegramType):
    message_text: str
    parse_mode: Optional[str]
    entities: Optional[List[MessageEntity]]
    link_preview_options: Optional[LinkPreviewOptions]


class InputLocationMessageContent(TelegramType):
    latitude: float
    longitude: float
    horizontal_accuracy: Optional[float]
    live_period: Optional[int]
    heading: Optional[int]
    proximity_alert_radius: Optional[int]


class InputVenueMessageContent(TelegramType):
    latitude: float
    longitude: float
    title: str
    address: str
    foursquare_id: Optional[str]
    foursquare_type: Optional[str]
    google_place_id: Optional[str]
    google_place_type: Optional[str]


class InputContactMessageContent(TelegramType):
    phone_number: str
    first_name: str
    last_name: Optional[str]
    vcard: Optional[str]


class InputInvoiceMessageContent(TelegramType):
    title: str
    description: str
    payload: str
    provider_token: Optional[str]
    currency: str
    prices: List[LabeledPrice]
    max_tip_amount: Optional[int]
    suggested_tip_amounts: Optional[List[int]]
    provider_data: Optional[str]
    photo_url: Optional[yarl.URL]
    photo_size: Optional[int]
    photo_width: Optional[int]
    photo_height: Optional[int]
    need_name: Optional[bool]
    need_phone_number: Optional[bool]
    need_email: Optional[bool]
    need_shipping_address: Optional[bool]
    send_phone_number_to_provider: Optional[bool]
    send_email_to_provider: Optional[bool]
    is_flexible: Optional[bool]


# no discriminator, the contents are told apart by their fields, most specific first
InputMessageContent = Union[InputInvoiceMessageContent, InputVenueMessageContent, InputLocationMessageContent,
                            InputContactMessageContent, InputTextMessageContent]


# ===================
# INLINE QUERY RESULTS

class InlineQueryResult(TelegramType, discriminator="type"):
    pass


class InlineQueryResultArticle(InlineQueryResult):
    type: Literal["article"]
    id: str
    title: str
    input_message_content: InputMessageContent
    reply_markup: Optional[InlineKeyboardMarkup]
    url: Optional[yarl.URL]
    description: Optional[str]
    thumbnail_url: Optional[yarl.URL]
    thumbnail_width: Optional[int]
    thumbnail_height: Optional[int]


class InlineQueryResultPhoto(InlineQueryResult):
    type: Literal["photo"]
    id: str
    photo_url: yarl.URL
    thumbnail_url: yarl.URL
    photo_width: Optional[int]
    photo_height: Optional[int]
    title: Optional[str]
    description: Optional[str]
    caption: Optional[str]
    parse_mode: Optional[str]
    caption_entities: Optional[List[MessageEntity]]
    show_caption_above_media: Optional[bool]
    reply_markup: Optional[InlineKeyboardMarkup]
    input_message_content: Optional[InputMessageContent]


class InlineQueryResultGif(InlineQueryResult):
    type: Literal["gif"]
    id: str
    gif_url: yarl.URL
    gif_width: Optional[int]
    gif_height: Optional[int]
    gif_duration: Optional[int]
    thumbnail_url: yarl.URL
    thumbnail_mime_type: Optional[str]
    title: Optional[str]
    caption: Optional[str]
    parse_mode: Optional[str]
    caption_entities: Optional[List[MessageEntity]]
    show_caption_above_media: Optional[bool]
    reply_markup: Optional[InlineKeyboardMarkup]
    input_message_content: Optional[InputMessageContent]


class InlineQueryResultMpeg4Gif(InlineQueryResult):
    type: Literal["mpeg4_gif"]
    id: str
    mpeg4_url: yarl.URL
    mpeg4_width: Optional[int]
    mpeg4_height: Optional[int]
    mpeg4_duration: Optional[int]
    thumbnail_url: yarl.URL
    thumbnail_mime_type: Optional[str]
    title: Optional[str]
    caption: Optional[str]
    parse_mode: Optional[str]
    caption_entities: Optional[List[MessageEntity]]
    show_caption_above_media: Optional[bool]
    reply_markup: Optional[InlineKeyboardMarkup]
    input_message_content: Optional[InputMessageContent]


class InlineQueryResultVideo(InlineQueryResult):
    type: Literal["video"]
    id: str
    video_url: yarl.URL
    # "text/html" or "video/mp4"
    mime_type: str
    thumbnail_url: yarl.URL
    title: str
    caption: Optional[str]
    parse_mode: Optional[str]
    caption_entities: Optional[List[MessageEntity]]
    show_caption_above_media: Optional[bool]
    video_width: Optional[int]
    video_height: Optional[int]
    video_duration: Optional[int]
    description: Optional[str]
    reply_markup: Optional[InlineKeyboardMarkup]
    input_message_content: Optional[InputMessageContent]


class InlineQueryResultAudio(InlineQueryResult):
    type: Literal["audio"]
    id: str
    audio_url: yarl.URL
    title: str
    caption: Optional[str]
    parse_mode: Optional[str]
    caption_entities: Optional[List[MessageEntity]]
    performer: Optional[str]
    audio_duration: Optional[int]
    reply_markup: Optional[InlineKeyboardMarkup]
    input_message_content: Optional[InputMessageContent]


class InlineQueryResultVoice(InlineQueryResult):
    type: Literal["voice"]
    id: str
    voice_url: yarl.URL
    title: str
    caption: Optional[str]
    parse_mode: Optional[str]
    caption_entities: Optional[List[MessageEntity]]
    voice_duration: Optional[int]
    reply_markup: Optional[InlineKeyboardMarkup]
    input_message_content: Optional[InputMessageContent]


class InlineQueryResultDocument(InlineQueryResult):
    type: Literal["document"]
    id: str
    title: str
    caption: Optional[str]
    parse_mode: Optional[str]
    caption_entities: Optional[List[MessageEntity]]
    document_url: yarl.URL
    # "application/pdf" or "application/zip"
    mime_type: str
    description: Optional[str]
    reply_markup: Optional[InlineKeyboardMarkup]
    input_message_content: Optional[InputMessageContent]
    thumbnail_url: Optional[yarl.URL]
    thumbnail_width: Optional[int]
    thumbnail_height: Optional[int]


class InlineQueryResultLocation(InlineQueryResult):
    type: Literal["location"]
    id: str
    latitude: float
    longitude: float
    title: str
    horizontal_accuracy: Optional[float]
    live_period: Optional[int]
    heading: Optional[int]
    proximity_alert_radius: Optional[int]
    reply_markup: Optional[InlineKeyboardMarkup]
    input_message_content: Optional[InputMessageContent]
    thumbnail_url: Optional[yarl.URL]
    thumbnail_width: Optional[int]
    thumbnail_height: Optional[int]


class InlineQueryResultVenue(InlineQueryResult):
    type: Literal["venue"]
    id: str
    latitude: float
    longitude: float
    title: str
    address: str
    foursquare_id: Optional[str]
    foursquare_type: Optional[str]
    google_place_id: Optional[str]
    google_place_type: Optional[str]
    reply_markup: Optional[InlineKeyboardMarkup]
    input_message_content: Optional[InputMessageContent]
    thumbnail_url: Optional[yarl.URL]
    thumbnail_width: Optional[int]
    thumbnail_height: Optional[int]


class InlineQueryResultContact(InlineQueryResult):
    type: Literal["contact"]
    id: str
    phone_number: str
    first_name: str
    last_name: Optional[str]
    vcard: Optional[str]
    reply_markup: Optional[InlineKeyboardMarkup]
    input_message_content: Optional[InputMessageContent]
    thumbnail_url: Optional[yarl.URL]
    thumbnail_width: Optional[int]
    thumbnail_height: Optional[int]


class InlineQueryResultGame(InlineQueryResult):
    type: Literal["game"]
    id: str
    game_short_name: str
    reply_markup: Optional[InlineKeyboardMarkup]


# cached results share their "type" with the results above and differ in the file_id field

class InlineQueryResultCachedPhoto(InlineQueryResult):
    type: Literal["photo"]
    id: str
    photo_file_id: str
    title: Optional[str]
    description: Optional[str]
    caption: Optional[str]
    parse_mode: Optional[str]
    caption_entities: Optional[List[MessageEntity]]
    show_caption_above_media: Optional[bool]
    reply_markup: Optional[InlineKeyboardMarkup]
    input_message_content: Optional[InputMessageContent]


class InlineQueryResultCachedGif(InlineQueryResult):
    type: Literal["gif"]
    id: str
    gif_file_id: str
    title: Optional[str]
    caption: Optional[str]
    parse_mode: Optional[str]
    caption_entities: Optional[List[MessageEntity]]
    show_caption_above_media: Optional[bool]
    reply_markup: Optional[InlineKeyboardMarkup]
    input_message_content: Optional[InputMessageContent]


class InlineQueryResultCachedSticker(InlineQueryResult):
    type: Literal["sticker"]
    id: str
    sticker_file_id: str
    reply_markup: Optional[InlineKeyboardMarkup]
    input_message_content: Optional[InputMessageContent]


class InlineQueryResultCachedDocument(InlineQueryResult):
    type: Literal["document"]
    id: str
    title: str
    document_file_id: str
    description: Optional[str]
    caption: Optional[str]
    parse_mode: Optional[str]
    caption_entities: Optional[List[MessageEntity]]
    reply_markup: Optional[InlineKeyboardMarkup]
    input_message_content: Optional[InputMessageContent]


class InlineQueryResultCachedVoice(InlineQueryResult):
    type: Literal["voice"]
    id: str
    voice_file_id: str
    title: str
    caption: Optional[str]
    parse_mode: Optional[str]
    caption_entities: Optional[List[MessageEntity]]
    reply_markup: Optional[InlineKeyboardMarkup]
    input_message_content: Optional[InputMessageContent]


class ChosenInlineResult(TelegramType):
    result_id: str
    from_: User
    location: Optional[Location]
    inline_message_id: Optional[str]
    query: str


class SentWebAppMessage(TelegramType):
    inline_message_id: Optional[str]


class PreparedInlineMessage(TelegramType):
    id: str
    expiration_date: int
