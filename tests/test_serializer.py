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

import json
from typing import List

import pytest

from tgtypes import (ApiError, BotCommand, Chat, DecodeError, InlineKeyboardButton, InlineKeyboardMarkup, Message,
                     User, deserialize, deserialize_response, serialize)


def test_serialize(strict_settings):
    markup = InlineKeyboardMarkup(inline_keyboard=[[InlineKeyboardButton(text="Kaufen 🛒", url="https://example.com")]])
    assert serialize(markup, strict_settings) == \
        '{"inline_keyboard": [[{"text": "Kaufen 🛒", "url": "https://example.com"}]]}'


def test_serialize_list(strict_settings):
    commands = [BotCommand(command="start", description="Start"), BotCommand(command="help", description="Help")]
    assert json.loads(serialize(commands, strict_settings)) == [
        {"command": "start", "description": "Start"},
        {"command": "help", "description": "Help"},
    ]


def test_deserialize(message_payload, strict_settings):
    message = deserialize(json.dumps(message_payload), Message, strict_settings)
    assert message.chat == Chat(id=1, type="private", username="test", first_name="test")
    assert deserialize(json.dumps(message_payload).encode(), Message, strict_settings) == message


def test_deserialize_invalid_json(strict_settings):
    with pytest.raises(DecodeError):
        deserialize("{", Message, strict_settings)


def test_deserialize_invalid_utf8(strict_settings):
    with pytest.raises(DecodeError):
        deserialize(b'{"id": 1, "type": "\xff"}', Chat, strict_settings)


def test_response(strict_settings):
    response = '{"ok": true, "result": {"id": 1, "is_bot": true, "first_name": "Bot", "username": "test_bot"}}'
    user = deserialize_response(response, User, strict_settings)
    assert user.username == "test_bot"


def test_response_list(strict_settings):
    response = '{"ok": true, "result": [{"command": "start", "description": "Start"}]}'
    commands = deserialize_response(response, List[BotCommand], strict_settings)
    assert commands == [BotCommand(command="start", description="Start")]
    assert deserialize_response('{"ok": true, "result": true}', bool, strict_settings) is True


def test_response_decode_error_path(strict_settings):
    response = '{"ok": true, "result": {"id": "1", "is_bot": true, "first_name": "Bot"}}'
    with pytest.raises(DecodeError) as exc_info:
        deserialize_response(response, User, strict_settings)
    assert exc_info.value.path == ["result", "id"]


def test_response_error(strict_settings):
    response = ('{"ok": false, "error_code": 429, "description": "Too Many Requests: retry after 5", '
                '"parameters": {"retry_after": 5}}')
    with pytest.raises(ApiError) as exc_info:
        deserialize_response(response, Message, strict_settings)
    assert exc_info.value.error_code == 429
    assert exc_info.value.parameters.retry_after == 5
    assert str(exc_info.value) == "Bot API error 429: Too Many Requests: retry after 5"


def test_response_error_without_parameters(strict_settings):
    with pytest.raises(ApiError) as exc_info:
        deserialize_response('{"ok": false, "error_code": 400, "description": "Bad Request: chat not found"}',
                             Message, strict_settings)
    assert exc_info.value.parameters is None


def test_response_error_parameters_path(strict_settings):
    response = ('{"ok": false, "error_code": 429, "description": "Too Many Requests", '
                '"parameters": {"retry_after": "5"}}')
    with pytest.raises(DecodeError) as exc_info:
        deserialize_response(response, Message, strict_settings)
    assert exc_info.value.path == ["parameters", "retry_after"]


@pytest.mark.parametrize("response", ['[]', '{"result": {}}', '{"ok": "yes"}', '{"ok": true}'])
def test_not_a_response(response, strict_settings):
    with pytest.raises(DecodeError):
        deserialize_response(response, User, strict_settings)
