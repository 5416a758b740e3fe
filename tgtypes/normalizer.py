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

"""Conversion of Bot API objects into plain wire mappings.

Absent optional fields are left out of the result entirely. Nested objects and lists of objects are converted
recursively, and the keys of every mapping follow the declaration order of the object's fields.
"""

import logging
from typing import Any, Dict, Optional

import yarl

from .base import TelegramType
from .errors import MissingFieldError, TelegramTypeError
from .settings import Settings, get_settings

_LOGGER = logging.getLogger("tgtypes")


def normalize(record: TelegramType, settings: Optional[Settings] = None) -> Dict[str, Any]:
    if settings is None:
        settings = get_settings()
    if settings.check_field_groups:
        record.check_field_groups()
    result = {}
    for field in record._fields():
        value = record._values.get(field.name)
        if value is None:
            if field.optional:
                continue
            if settings.require_fields:
                raise MissingFieldError(f"Required field '{field.wire_name}' of {type(record).__name__} is not set")
            _LOGGER.debug(f"Required field '{field.wire_name}' of {type(record).__name__} is not set, emitting null")
            result[field.wire_name] = None
            continue
        try:
            result[field.wire_name] = normalize_value(value, settings)
        except TelegramTypeError as e:
            e.path.insert(0, field.wire_name)
            raise
    return result


def normalize_value(value: Any, settings: Optional[Settings] = None) -> Any:
    if isinstance(value, TelegramType):
        return normalize(value, settings)
    if isinstance(value, (list, tuple)):
        result = []
        for i, item in enumerate(value):
            try:
                result.append(normalize_value(item, settings))
            except TelegramTypeError as e:
                e.path.insert(0, i)
                raise
        return result
    if isinstance(value, dict):
        # method parameters, None means "not passed"
        result = {}
        for key, item in value.items():
            if item is None:
                continue
            try:
                result[key] = normalize_value(item, settings)
            except TelegramTypeError as e:
                e.path.insert(0, key)
                raise
        return result
    if isinstance(value, yarl.URL):
        return str(value)
    return value
