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

import typing
from typing import Any, Dict, List, Mapping, Optional, Tuple, Type

from .errors import ExclusiveFieldsError, MissingFieldError, UnknownVariantError
from .schema import Field, FieldGroup, coerce, describe, matches

# class name -> class, used to resolve forward references such as Optional["Message"] across modules
_REGISTRY: Dict[str, Type["TelegramType"]] = {}

_FIELDS: Dict[type, Tuple[Field, ...]] = {}
_FIELDS_BY_NAME: Dict[type, Dict[str, Field]] = {}
_FIELDS_BY_WIRE_NAME: Dict[type, Dict[str, Field]] = {}
_VARIANTS: Dict[type, Dict[Any, List[Type["TelegramType"]]]] = {}


class TelegramType:
    """Base class of all Bot API objects.

    Fields are declared as class annotations in wire order. ``Optional[...]`` fields may be left unset, all other
    fields are required. A subclass passing ``discriminator="<wire name>"`` becomes the abstract base of a
    polymorphic family whose variants declare that field as a single-valued ``Literal``.
    """

    __discriminator__: typing.ClassVar[Optional[str]] = None
    __field_groups__: typing.ClassVar[Tuple[FieldGroup, ...]] = ()

    def __init_subclass__(cls, discriminator: Optional[str] = None, **kwargs):
        super().__init_subclass__(**kwargs)
        _REGISTRY[cls.__name__] = cls
        cls.__is_family = discriminator is not None
        if discriminator is not None:
            cls.__discriminator__ = discriminator

    def __init__(self, **kwargs):
        if self.is_family():
            raise TypeError(f"{type(self).__name__} is abstract, use one of its variants")
        object.__setattr__(self, "_values", {})
        for field in self._fields():
            if field.has_constant:
                self._values[field.name] = field.constant
        for key, value in kwargs.items():
            setattr(self, key, value)

    # ==========
    # SCHEMA

    @classmethod
    def _fields(cls) -> Tuple[Field, ...]:
        try:
            return _FIELDS[cls]
        except KeyError:
            pass
        hints = typing.get_type_hints(cls, localns=_REGISTRY)
        fields = tuple(Field.from_hint(name, hint) for name, hint in hints.items()
                       if not name.startswith("_") and typing.get_origin(hint) is not typing.ClassVar)
        _FIELDS[cls] = fields
        _FIELDS_BY_NAME[cls] = {f.name: f for f in fields}
        _FIELDS_BY_WIRE_NAME[cls] = {f.wire_name: f for f in fields}
        return fields

    @classmethod
    def _field(cls, name: str) -> Optional[Field]:
        cls._fields()
        return _FIELDS_BY_NAME[cls].get(name)

    @classmethod
    def _field_by_wire_name(cls, wire_name: str) -> Optional[Field]:
        cls._fields()
        return _FIELDS_BY_WIRE_NAME[cls].get(wire_name)

    @classmethod
    def property_names(cls) -> List[str]:
        return [f.wire_name for f in cls._fields()]

    # ==========
    # FAMILIES

    @classmethod
    def is_family(cls) -> bool:
        return cls.__dict__.get("_TelegramType__is_family", False)

    @classmethod
    def variants(cls) -> Dict[Any, List[Type["TelegramType"]]]:
        try:
            return _VARIANTS[cls]
        except KeyError:
            pass
        variants = {}
        pending = list(cls.__subclasses__())
        while pending:
            subclass = pending.pop(0)
            pending.extend(subclass.__subclasses__())
            if subclass.is_family() or cls.__discriminator__ is None:
                continue
            field = subclass._field_by_wire_name(cls.__discriminator__)
            if field is None or not field.has_constant:
                continue
            variants.setdefault(field.constant, []).append(subclass)
        _VARIANTS[cls] = variants
        return variants

    @classmethod
    def select_variants(cls, data: Mapping[str, Any]) -> List[Type["TelegramType"]]:
        """Return the candidate variant classes for a wire mapping of this family."""
        key = cls.__discriminator__
        if key not in data:
            raise UnknownVariantError(f"Missing discriminator '{key}' for {cls.__name__}")
        value = data[key]
        try:
            return cls.variants()[value]
        except (KeyError, TypeError):
            raise UnknownVariantError(f"Unexpected {cls.__name__} {key}: {value!r}") from None

    # ==========
    # ACCESSORS

    def __getattr__(self, item):
        # only called if normal attribute lookup fails
        if item.startswith("_"):
            raise AttributeError(item)
        field = self._field(item)
        if field is None:
            raise AttributeError(f"'{type(self).__name__}' object has no field '{item}'")
        if field.name in self._values:
            return self._values[field.name]
        if field.optional:
            return None
        raise AttributeError(f"Required field '{item}' of {type(self).__name__} is not set")

    def __setattr__(self, key, value):
        field = self._field(key)
        if field is None:
            raise AttributeError(f"'{type(self).__name__}' object has no field '{key}'")
        if field.has_constant:
            if value != field.constant or type(value) is not type(field.constant):
                raise ValueError(f"Field '{key}' of {type(self).__name__} is always {field.constant!r}, "
                                 f"got {value!r}")
            return
        if value is None:
            self._values.pop(key, None)
            return
        value = coerce(field.hint, value)
        if not matches(field.hint, value):
            raise TypeError(f"Field '{key}' of {type(self).__name__} expects {describe(field.hint)}, "
                            f"got {type(value).__name__}")
        self._values[key] = value

    def __delattr__(self, item):
        self.__setattr__(item, None)

    def is_set(self, name: str) -> bool:
        return name in self._values

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._values == other._values

    def __repr__(self):
        values = ", ".join(f"{f.name}={self._values[f.name]!r}" for f in self._fields() if f.name in self._values)
        return f"{type(self).__name__}({values})"

    # ==========
    # VALIDATION

    def check_required(self):
        for field in self._fields():
            if not field.optional and field.name not in self._values:
                raise MissingFieldError(f"Required field '{field.wire_name}' of {type(self).__name__} is not set")

    def check_field_groups(self):
        for group in self.__field_groups__:
            count = group.count(self._values)
            if not group.min_count <= count <= group.max_count:
                raise ExclusiveFieldsError(f"{type(self).__name__}: {group.describe()}, {count} are set")

    def validate(self):
        """Check required fields and field groups of this object (nested objects are not checked)."""
        self.check_required()
        self.check_field_groups()

    # ==========
    # CONVERSION

    def to_dict(self, settings=None) -> Dict[str, Any]:
        from .normalizer import normalize
        return normalize(self, settings)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], settings=None):
        from .decoder import decode
        return decode(data, cls, settings)
