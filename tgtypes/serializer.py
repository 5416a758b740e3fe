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
from typing import Any, Optional, Union

from .decoder import decode
from .errors import ApiError, DecodeError
from .normalizer import normalize_value
from .settings import Settings
from .types import ResponseParameters


def serialize(value: Any, settings: Optional[Settings] = None) -> str:
    return json.dumps(normalize_value(value, settings), ensure_ascii=False)


def _loads(json_string: Union[str, bytes]):
    try:
        return json.loads(json_string)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise DecodeError(f"Invalid JSON: {e}") from e


def deserialize(json_string: Union[str, bytes], tp, settings: Optional[Settings] = None):
    return decode(_loads(json_string), tp, settings)


def deserialize_response(json_string: Union[str, bytes], tp, settings: Optional[Settings] = None):
    """Read a Bot API response envelope and decode its result as ``tp``.

    Raises ApiError if the envelope says ``"ok": false``.
    """
    data = _loads(json_string)
    if type(data) != dict or not isinstance(data.get("ok"), bool):
        raise DecodeError("Not a Bot API response")
    if data["ok"]:
        if "result" not in data:
            raise DecodeError("Missing result in Bot API response")
        try:
            return decode(data["result"], tp, settings)
        except DecodeError as e:
            e.path.insert(0, "result")
            raise
    parameters = None
    if data.get("parameters") is not None:
        try:
            parameters = decode(data["parameters"], ResponseParameters, settings)
        except DecodeError as e:
            e.path.insert(0, "parameters")
            raise
    raise ApiError(data.get("error_code"), data.get("description", ""), parameters)
