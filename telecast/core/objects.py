"""TelegramObject — base class for every typed Bot API object.

Subclasses only declare a class-level ``__schema__`` table::

    class User(TelegramObject):
        __schema__ = {
            "id": INTEGER,
            "first_name": STRING,
        }

Construction casts the raw input through :func:`~telecast.core.caster.cast_values`
and freezes the result.  Every field is optional: reading an absent field
yields ``None`` and the field is left out of :meth:`TelegramObject.to_dict`.
"""

from __future__ import annotations

import json
import keyword
from types import MappingProxyType
from typing import Any, ClassVar, Iterator, Mapping

from telecast.core.caster import cast_values, strip_arrays
from telecast.core.schema import Schema, register_object_type

# Field names that are Python keywords are exposed as ``<name>_field``.
_KEYWORD_SUFFIX = "_field"


class TelegramObject:
    """Immutable, schema-hydrated view over one Bot API object."""

    __schema__: ClassVar[Schema] = {}
    __slots__ = ("_properties",)

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls.__schema__ = MappingProxyType(dict(cls.__schema__))
        register_object_type(cls)

    def __init__(self, data: Mapping[str, Any] | None = None, **fields: Any) -> None:
        if fields:
            raw = {**(data or {}), **{_field_name(k): v for k, v in fields.items()}}
        else:
            raw = data
        object.__setattr__(self, "_properties", cast_values(raw, self.__schema__))

    # ------------------------------------------------------------------
    #  Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def subtype_for(cls, data: Mapping[str, Any]) -> type[TelegramObject]:
        """Return the concrete class to hydrate *data* into.

        Polymorphic bases (``InlineQueryResult``, ``InputMedia``, …) override
        this to pick a variant from a tag field; everything else is concrete.
        """
        return cls

    @classmethod
    def from_json(cls, payload: str | bytes) -> TelegramObject:
        """Hydrate an instance from a JSON document."""
        data = json.loads(payload)
        return cls.subtype_for(data)(data)

    @classmethod
    def schema(cls) -> Schema:
        return cls.__schema__

    # ------------------------------------------------------------------
    #  Read access
    # ------------------------------------------------------------------

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal lookup fails, i.e. for schema fields.
        field = _field_name(name)
        if field in type(self).__schema__:
            return self._properties.get(field)
        raise AttributeError(f"{type(self).__name__!r} object has no field {name!r}")

    def __getitem__(self, name: str) -> Any:
        if name not in type(self).__schema__:
            raise KeyError(name)
        return self._properties.get(name)

    def get(self, name: str, default: Any = None) -> Any:
        value = self._properties.get(_field_name(name))
        return default if value is None else value

    def __contains__(self, name: object) -> bool:
        return name in self._properties

    def __iter__(self) -> Iterator[str]:
        return iter(self._properties)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} objects are read-only")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} objects are read-only")

    # ------------------------------------------------------------------
    #  Projection
    # ------------------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        """Project back into plain data (the inverse of construction)."""
        return strip_arrays(self._properties)

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TelegramObject):
            return NotImplemented
        return type(self) is type(other) and self.to_dict() == other.to_dict()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        fields = ", ".join(f"{k}={v!r}" for k, v in self._properties.items())
        return f"{type(self).__name__}({fields})"


def _field_name(attr: str) -> str:
    """Map an attribute name to its schema field (``from_field`` → ``from``)."""
    if attr.endswith(_KEYWORD_SUFFIX):
        stem = attr[: -len(_KEYWORD_SUFFIX)]
        if keyword.iskeyword(stem):
            return stem
    return attr
