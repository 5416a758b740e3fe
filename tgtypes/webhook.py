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
import logging
from functools import partial
from typing import Any, Dict, Optional

from aiohttp import web

from .decoder import decode
from .errors import DecodeError
from .normalizer import normalize_value
from .settings import Settings
from .types import Update

_LOGGER = logging.getLogger("tgtypes")


async def read_update(request: web.Request, settings: Optional[Settings] = None) -> Update:
    try:
        data = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise DecodeError(f"Invalid JSON in webhook request: {e}") from e
    update = decode(data, Update, settings)
    _LOGGER.debug(f"Received update {update.update_id} ({update.update_type})")
    return update


def method_response(method: str, params: Optional[Dict[str, Any]] = None, settings: Optional[Settings] = None,
                    **kwargs) -> web.Response:
    """Answer a webhook request with a Bot API method call.

    Parameters that are None are not sent, objects are normalized.
    """
    data = {"method": method}
    data.update(normalize_value({**(params or {}), **kwargs}, settings))
    return web.json_response(data, dumps=partial(json.dumps, ensure_ascii=False))
