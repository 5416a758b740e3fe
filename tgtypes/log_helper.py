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
import logging.handlers
import sys
from typing import Optional

from .settings import Settings, get_settings

_logger = logging.getLogger("tgtypes")

_log_formatter = logging.Formatter("{asctime} [{levelname:^8}]: {message}", style="{")
_handler: Optional[logging.Handler] = None


def init(filepath: Optional[str] = None, settings: Optional[Settings] = None) -> logging.Handler:
    global _handler
    if settings is None:
        settings = get_settings()
    if filepath:
        handler = logging.handlers.WatchedFileHandler(filepath, encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(_log_formatter)
    # calling init again replaces the handler it installed before
    if _handler is not None:
        _logger.removeHandler(_handler)
        _handler.close()
    _handler = handler
    _logger.addHandler(handler)
    _logger.setLevel(settings.log_level)
    return handler


def get_logger():
    return _logger
