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

import logging
from typing import Any, List, Literal, Optional, Type, Union, get_args, get_origin

import yarl

from .base import TelegramType
from .errors import DecodeError, UnknownFieldError
from .schema import describe, literal_matches
from .settings import Settings, get_settings

_LOGGER = logging.getLogger("tgtypes")


def decode(data: Any, tp, settings: Optional[Settings] = None):
    """Build the Python value of type ``tp`` (a record class or a hint like ``List[Update]``) from wire data."""
    if settings is None:
        settings = get_settings()
    return _decode_value(tp, data, [], settings)


def _decode_value(hint, value, path: List, settings: Settings):
    if hint is Any:
        return value
    if isinstance(hint, type) and issubclass(hint, TelegramType):
        return _decode_record(hint, value, path, settings)
    if hint is bool:
        if isinstance(value, bool):
            return value
    elif hint is int:
        if isinstance(value, int) and not isinstance(value, bool):
            return value
    elif hint is float:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return float(value)
    elif hint is str:
        if isinstance(value, str):
            return value
    elif hint is yarl.URL:
        if isinstance(value, str):
            return yarl.URL(value, encoded=True)
    else:
        origin = get_origin(hint)
        if origin is Literal:
            if literal_matches(hint, value):
                return value
        elif origin is list:
            if isinstance(value, list):
                item_hint, = get_args(hint)
                return [_decode_value(item_hint, item, path + [i], settings) for i, item in enumerate(value)]
        elif origin is Union:
            return _decode_union(hint, value, path, settings)
        else:
            raise TypeError(f"Unsupported type hint {hint!r}")
    raise DecodeError(f"Expected {describe(hint)}, got {value!r}", path)


def _decode_union(hint, value, path: List, settings: Settings):
    for arg in get_args(hint):
        try:
            return _decode_value(arg, value, path, settings)
        except DecodeError:
            continue
    raise DecodeError(f"Value does not match any of {describe(hint)}", path)


def _decode_record(cls: Type[TelegramType], data, path: List, settings: Settings):
    if not isinstance(data, dict):
        raise DecodeError(f"Expected an object for {cls.__name__}, got {type(data).__name__}", path)
    if cls.is_family():
        return _decode_variant(cls, data, path, settings)

    unknown = [key for key in data if cls._field_by_wire_name(key) is None]
    if unknown:
        if settings.forbid_unknown_fields:
            raise UnknownFieldError(f"Unknown field(s) for {cls.__name__}: {', '.join(unknown)}", path)
        _LOGGER.warning(f"{'.'.join(str(p) for p in path) or '<root>'}: Ignoring unknown field(s) for "
                        f"{cls.__name__}: {', '.join(unknown)}")

    record = cls.__new__(cls)
    values = {}
    object.__setattr__(record, "_values", values)
    for field in cls._fields():
        value = data.get(field.wire_name)
        if value is None:
            if not field.optional:
                raise DecodeError(f"Missing required field '{field.wire_name}' of {cls.__name__}", path)
            continue
        values[field.name] = _decode_value(field.hint, value, path + [field.wire_name], settings)
    return record


def _decode_variant(cls: Type[TelegramType], data, path: List, settings: Settings):
    try:
        candidates = cls.select_variants(data)
    except DecodeError as e:
        e.path[:0] = path
        raise
    if len(candidates) == 1:
        _LOGGER.debug(f"Decoding {cls.__name__} as {candidates[0].__name__}")
        return _decode_record(candidates[0], data, path, settings)
    errors = []
    for candidate in candidates:
        try:
            record = _decode_record(candidate, data, path, settings)
        except DecodeError as e:
            errors.append(e)
            continue
        _LOGGER.debug(f"Decoding {cls.__name__} as {candidate.__name__}")
        return record
    raise DecodeError(f"{cls.__name__} matches none of {', '.join(c.__name__ for c in candidates)}: "
                      f"{'; '.join(str(e) for e in errors)}", path)
