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

from typing import Iterable, Optional, Union

PathItem = Union[str, int]


class TelegramTypeError(Exception):
    """Base class of all errors raised by tgtypes.

    ``path`` holds the wire names and list indices leading from the outermost value to the offending one. Callers
    that recurse into nested values prepend their own key before re-raising.
    """

    def __init__(self, message: str, path: Iterable[PathItem] = ()):
        super().__init__(message)
        self.message = message
        self.path = list(path)

    def __str__(self):
        if self.path:
            return f"{'.'.join(str(p) for p in self.path)}: {self.message}"
        return self.message


class DecodeError(TelegramTypeError, ValueError):
    pass


class UnknownFieldError(DecodeError):
    pass


class UnknownVariantError(DecodeError):
    pass


class ValidationError(TelegramTypeError, ValueError):
    pass


class MissingFieldError(ValidationError):
    pass


class ExclusiveFieldsError(ValidationError):
    pass


class ApiError(TelegramTypeError):
    """A Bot API response with ``"ok": false``."""

    def __init__(self, error_code: Optional[int], description: str, parameters=None):
        super().__init__(f"Bot API error {error_code}: {description}")
        self.error_code = error_code
        self.description = description
        # ResponseParameters or None
        self.parameters = parameters
