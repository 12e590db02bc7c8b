"""Type descriptors — the declarative vocabulary every schema is written in.

A schema is a mapping from field name to a descriptor.  Descriptors form a
closed set:

- :class:`Primitive` — a scalar kind (string, integer, float, boolean, file).
- :class:`ObjectRef` — a reference *by name* to a registered typed object
  kind.  Names are resolved lazily so schemas may reference classes declared
  later in the catalog (``Message`` ↔ ``Chat``).
- :class:`ArrayOf` — a homogeneous sequence of another descriptor.

This module also owns the object-kind registry that :class:`ObjectRef`
resolves against.  It must not import from :mod:`telecast.core.caster` or
:mod:`telecast.core.objects`.
"""

from __future__ import annotations

import dataclasses
import enum
from typing import Any, Mapping, Protocol, Union, runtime_checkable


class Kind(str, enum.Enum):
    """Primitive value kinds understood by the caster."""

    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    FILE = "file"  # InputFile upload, or a file_id / URL string


# ── Descriptors ──────────────────────────────────────────────────────────────

@dataclasses.dataclass(frozen=True, slots=True)
class Primitive:
    kind: Kind

    def __str__(self) -> str:
        return self.kind.value


@dataclasses.dataclass(frozen=True, slots=True)
class ObjectRef:
    kind: str

    def resolve(self) -> type:
        """Return the registered class for :attr:`kind`.

        Raises:
            LookupError: If no object kind with that name was registered.
        """
        try:
            return _OBJECT_TYPES[self.kind]
        except KeyError:
            raise LookupError(f"Unknown object kind: {self.kind!r}") from None

    def __str__(self) -> str:
        return self.kind


@dataclasses.dataclass(frozen=True, slots=True)
class ArrayOf:
    item: "Descriptor"

    def __str__(self) -> str:
        return f"{self.item}[]"


Descriptor = Union[Primitive, ObjectRef, ArrayOf]
Schema = Mapping[str, Descriptor]

STRING = Primitive(Kind.STRING)
INTEGER = Primitive(Kind.INTEGER)
FLOAT = Primitive(Kind.FLOAT)
BOOLEAN = Primitive(Kind.BOOLEAN)
FILE = Primitive(Kind.FILE)


# ── Typed-object protocol and registry ───────────────────────────────────────

@runtime_checkable
class Projectable(Protocol):
    """Anything that can project itself back into plain JSON-ready data."""

    def to_dict(self) -> dict[str, Any]: ...  # noqa: E704


_OBJECT_TYPES: dict[str, type] = {}


def register_object_type(cls: type, name: str | None = None) -> type:
    """Make *cls* resolvable through ``ObjectRef(name or cls.__name__)``."""
    _OBJECT_TYPES[name or cls.__name__] = cls
    return cls


def registered_object_types() -> dict[str, type]:
    """Return a *copy* of the name → class registry."""
    return dict(_OBJECT_TYPES)
