"""Schema-driven casting between raw JSON-like data and typed object graphs.

Three operations, all driven by the descriptors in :mod:`telecast.core.schema`:

- :func:`cast_value` — coerce one raw value to one descriptor.
- :func:`cast_values` — apply :func:`cast_value` to every schema field present
  in a raw mapping; the schema decides which keys survive.
- :func:`strip_arrays` — the inverse direction: project a cast value tree back
  to plain dicts/lists/scalars ready for ``json.dumps``.

Primitive coercion is delegated to pydantic's lax-mode validators, so
``"42"`` becomes ``42`` for an integer field and ``"true"``/``1`` become
``True`` for a boolean field.  ``None`` is never an error: it means *absent*.
"""

from __future__ import annotations

from typing import Any, Mapping

from pydantic import ConfigDict, TypeAdapter, ValidationError

from telecast.core.exceptions import TypeMismatch
from telecast.core.files import InputFile
from telecast.core.schema import (
    ArrayOf,
    Descriptor,
    Kind,
    ObjectRef,
    Primitive,
    Projectable,
    Schema,
)

_ADAPTERS: dict[Kind, TypeAdapter] = {
    Kind.STRING: TypeAdapter(str, config=ConfigDict(coerce_numbers_to_str=True)),
    Kind.INTEGER: TypeAdapter(int),
    Kind.FLOAT: TypeAdapter(float),
    Kind.BOOLEAN: TypeAdapter(bool),
}


# ── Single values ────────────────────────────────────────────────────────────


def cast_value(raw: Any, descriptor: Descriptor) -> Any:
    """Cast *raw* to the shape described by *descriptor*.

    Raises:
        TypeMismatch: If *raw* cannot be coerced to *descriptor*.
    """
    if raw is None:
        return None
    if isinstance(descriptor, Primitive):
        return _cast_primitive(raw, descriptor)
    if isinstance(descriptor, ObjectRef):
        return _cast_object(raw, descriptor)
    if isinstance(descriptor, ArrayOf):
        return _cast_array(raw, descriptor)
    raise TypeError(f"Unsupported type descriptor: {descriptor!r}")


def _cast_primitive(raw: Any, descriptor: Primitive) -> Any:
    if descriptor.kind is Kind.FILE:
        if isinstance(raw, (InputFile, str)):
            return raw
        raise TypeMismatch(str(descriptor), raw)

    if isinstance(raw, (Mapping, list, tuple, Projectable)):
        raise TypeMismatch(str(descriptor), raw)
    try:
        return _ADAPTERS[descriptor.kind].validate_python(raw)
    except ValidationError:
        raise TypeMismatch(str(descriptor), raw) from None


def _cast_object(raw: Any, descriptor: ObjectRef) -> Any:
    cls = descriptor.resolve()
    # Already hydrated: hand it back untouched rather than re-casting.
    if isinstance(raw, cls):
        return raw
    if isinstance(raw, Mapping):
        return cls.subtype_for(raw)(raw)
    raise TypeMismatch(str(descriptor), raw)


def _cast_array(raw: Any, descriptor: ArrayOf) -> list:
    if not isinstance(raw, (list, tuple)):
        raise TypeMismatch(str(descriptor), raw)
    items = []
    for index, item in enumerate(raw):
        try:
            items.append(cast_value(item, descriptor.item))
        except TypeMismatch as exc:
            raise exc.at(str(index)) from None
    return items


# ── Mappings ─────────────────────────────────────────────────────────────────


def cast_values(raw: Mapping[str, Any] | None, schema: Schema) -> dict[str, Any]:
    """Cast every field of *schema* that is present (and not ``None``) in *raw*.

    Keys of *raw* that the schema does not declare are dropped.

    Raises:
        TypeMismatch: If *raw* is not a mapping, or a field fails to cast.
    """
    if raw is None:
        return {}
    if not isinstance(raw, Mapping):
        raise TypeMismatch("mapping", raw)

    values: dict[str, Any] = {}
    for name, descriptor in schema.items():
        value = raw.get(name)
        if value is None:
            continue
        try:
            values[name] = cast_value(value, descriptor)
        except TypeMismatch as exc:
            raise exc.at(name) from None
    return values


def strip_arrays(value: Any) -> Any:
    """Project a cast value tree back into plain JSON-ready data.

    Typed objects become dicts, sequences become lists, ``None`` entries of
    mappings are dropped, and scalars (including :class:`InputFile`) are
    returned unchanged.
    """
    if isinstance(value, Projectable):
        return value.to_dict()
    if isinstance(value, Mapping):
        return {k: strip_arrays(v) for k, v in value.items() if v is not None}
    if isinstance(value, (list, tuple)):
        return [strip_arrays(v) for v in value]
    return value
