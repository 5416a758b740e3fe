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

import copy

import pytest

from tgtypes import Settings

MESSAGE_PAYLOAD = {
    "message_id": 1,
    "from": {
        "id": 1,
        "is_bot": True,
        "first_name": "test",
        "username": "test",
    },
    "date": 1,
    "chat": {
        "id": 1,
        "type": "private",
        "username": "test",
        "first_name": "test",
    },
    "text": "test",
}

CALLBACK_QUERY_UPDATE = {
    "update_id": 10000,
    "callback_query": {
        "id": "4382bfdwdsb323b2d9",
        "from": {"id": 1111111, "is_bot": False, "first_name": "Test", "language_code": "de"},
        "message": {
            "message_id": 1365,
            "date": 1441645532,
            "chat": {"id": -1001234567890, "type": "supergroup", "title": "Group"},
            "text": "Choose",
            "reply_markup": {
                "inline_keyboard": [[
                    {"text": "Yes", "callback_data": "yes"},
                    {"text": "Website", "url": "https://example.com/path?q=1"},
                ]],
            },
        },
        "chat_instance": "-12345",
        "data": "yes",
    },
}


@pytest.fixture
def strict_settings():
    return Settings(require_fields=True, check_field_groups=True, forbid_unknown_fields=True)


@pytest.fixture
def permissive_settings():
    return Settings(require_fields=False, check_field_groups=False, forbid_unknown_fields=False)


@pytest.fixture
def message_payload():
    return copy.deepcopy(MESSAGE_PAYLOAD)


@pytest.fixture
def callback_query_update():
    return copy.deepcopy(CALLBACK_QUERY_UPDATE)
