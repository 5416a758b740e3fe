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

"""Field descriptors and the handful of type-hint operations the record classes need.

Supported hints are ``int``, ``float``, ``str``, ``bool``, ``yarl.URL``, record classes, ``List[...]``,
``Union[...]`` and ``Literal[...]``; ``Optional[...]`` is unwrapped into the ``optional`` flag of a field.
"""

import dataclasses
import keyword
from typing import Any, List, Literal, Tuple, Union, get_args, get_origin

import yarl

_NO_CONSTANT = object()


def wire_name(attr_name: str) -> str:
    # "from_" -> "from"
    if attr_name.endswith("_") and keyword.iskeyword(attr_name[:-1]):
        return attr_name[:-1]
    return attr_name


def unwrap_optional(hint) -> Tuple[Any, bool]:
    if get_origin(hint) is Union:
        args = get_args(hint)
        if type(None) in args:
            rest = tuple(a for a in args if a is not type(None))
            if len(rest) == 1:
                return rest[0], True
            return Union[rest], True
    return hint, False


def is_literal(hint) -> bool:
    return get_origin(hint) is Literal


def is_list(hint) -> bool:
    return get_origin(hint) in (list, List)


def literal_matches(hint, value) -> bool:
    # True == 1, so the type has to match as well
    return any(value == arg and type(value) is type(arg) for arg in get_args(hint))


def matches(hint, value) -> bool:
    """Check whether ``value`` is acceptable for a (non-optional) field declared as ``hint``."""
    if hint is Any:
        return True
    if hint is int:
        return isinstance(value, int) and not isinstance(value, bool)
    if hint is float:
        return isinstance(value, (int, float)) and not isinstance(value, bool)
    if hint in (str, bool):
        return isinstance(value, hint)
    origin = get_origin(hint)
    if origin is Literal:
        return literal_matches(hint, value)
    if origin in (list, List):
        item_hint, = get_args(hint)
        return isinstance(value, list) and all(matches(item_hint, v) for v in value)
    if origin is Union:
        return any(matches(arg, value) for arg in get_args(hint))
    return isinstance(value, hint)


def coerce(hint, value):
    if isinstance(value, str) and (hint is yarl.URL or (get_origin(hint) is Union and yarl.URL in get_args(hint)
                                                        and str not in get_args(hint))):
        return yarl.URL(value, encoded=True)
    if hint is float and isinstance(value, int) and not isinstance(value, bool):
        return float(value)
    if isinstance(value, tuple) and is_list(hint):
        value = list(value)
    if isinstance(value, list) and is_list(hint):
        item_hint, = get_args(hint)
        return [coerce(item_hint, v) for v in value]
    return value


def describe(hint) -> str:
    origin = get_origin(hint)
    if origin is Literal:
        return " or ".join(repr(a) for a in get_args(hint))
    if origin in (list, List):
        return f"list of {describe(get_args(hint)[0])}"
    if origin is Union:
        return " or ".join(describe(a) for a in get_args(hint))
    return getattr(hint, "__name__", str(hint))


@dataclasses.dataclass(frozen=True)
class Field:
    name: str
    wire_name: str
    hint: Any
    optional: bool
    constant: Any = dataclasses.field(default=_NO_CONSTANT, compare=False)

    @classmethod
    def from_hint(cls, name: str, hint) -> "Field":
        hint, optional = unwrap_optional(hint)
        constant = _NO_CONSTANT
        if not optional and is_literal(hint) and len(get_args(hint)) == 1:
            constant = get_args(hint)[0]
        return cls(name, wire_name(name), hint, optional, constant)

    @property
    def has_constant(self) -> bool:
        return self.constant is not _NO_CONSTANT


@dataclasses.dataclass(frozen=True)
class FieldGroup:
    names: Tuple[str, ...]
    min_count: int
    max_count: int

    def count(self, values) -> int:
        # a flag set to False counts as not set
        return sum(1 for name in self.names if values.get(name) is not None and values.get(name) is not False)

    def describe(self) -> str:
        fields = ", ".join(self.names)
        if self.min_count == self.max_count == 1:
            return f"exactly one of {fields} must be set"
        return f"at most {self.max_count} of {fields} may be set"


def exactly_one(*names: str) -> FieldGroup:
    return FieldGroup(names, 1, 1)


def at_most_one(*names: str) -> FieldGroup:
    return FieldGroup(names, 0, 1)
