"""Serialization of values to, and deserialization from, [JSON](http://www.rfc-editor.org/rfc/rfc8259) text.

The text produced is compact -- no white-space is inserted between tokens -- and object members appear in insertion order, the same as with `JSON.stringify` in JavaScript. Deserialization, conversely, produces objects of a caller-specified class (dubbed "prototype" for the purposes of this module), with parsed members for [instance] attributes, so that the deserialized object has the methods of the prototype available.
"""

from .utils import public_attrs, qualified_type_name, setattrs

import dataclasses
from functools import singledispatch
import json
import math

from collections.abc import Mapping
from typing import Any, TypeVar

T = TypeVar('T')

@singledispatch
def serializable(obj: object) -> Any:
    """Convert an object the `json` module cannot serialize on its own, into one it can.

    The procedure is used as the `default` hook of `json.dumps` (see `to_json`) and is therefore only called for values other than those of the built-in JSON-compatible types (`dict`, `list`, `str` etc). Dataclass instances are converted into a mapping of their fields, other objects into a mapping of their own public attributes (see `public_attrs`), which mirrors how only the "own" properties of an object are serialized in JavaScript.

    Per the applied `singledispatch` decorator, this procedure is only called for objects for which no more applicable overload variant is defined (those are annotated with `serializable.register` decorator).

    :raises TypeError: if the object can't be converted, as required of the `default` hook by `json.dumps`
    """
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return { field.name: getattr(obj, field.name) for field in dataclasses.fields(obj) }
    if hasattr(obj, '__dict__'):
        return { name: getattr(obj, name) for name in public_attrs(obj) }
    raise TypeError(f"Object of type {qualified_type_name(type(obj))} is not JSON serializable")

@serializable.register
def _(obj: Mapping) -> Any:
    """Variant of `serializable` for mappings that aren't `dict` objects (which `json` handles itself), e.g. `types.MappingProxyType`."""
    return dict(obj)

@singledispatch
def finite(value: object) -> Any:
    """Replace non-finite numbers (NaN and the infinities) in a value with `None`.

    JSON has no notation for non-finite numbers, and `json.dumps` would otherwise emit the non-standard `NaN` and `Infinity` tokens for these; serializing them as `null` instead is what `JSON.stringify` does. Values other than floats, dictionaries, lists and tuples are returned as is.
    """
    return value

@finite.register
def _(value: float) -> Any:
    return value if math.isfinite(value) else None

@finite.register
def _(value: dict) -> Any:
    return { key: finite(item) for key, item in value.items() }

@finite.register(list)
@finite.register(tuple)
def _(value) -> Any:
    return [ finite(item) for item in value ]

def to_json(value: Any) -> str:
    """Serialize a value into compact JSON text.

    E.g. `to_json([1, 2, 3])` returns `'[1,2,3]'` and `to_json({ 'width': 10, 'height': 20 })` returns `'{"width":10,"height":20}'`. Non-finite numbers are serialized as `null` (see `finite`).

    :param value: The value to serialize; values of types other than those natively supported by `json` are first converted with `serializable`
    :raises TypeError: if the value (or a value it contains) can't be serialized
    :raises ValueError: if a non-finite number is used as a dictionary key
    """
    return json.dumps(finite(value), separators=(',', ':'), ensure_ascii=False, allow_nan=False, default=lambda obj: finite(serializable(obj)))

def from_json(prototype: type[T], text: str) -> T:
    """Deserialize JSON text into a new object of the specified class.

    The object is created _without_ its initializer being called -- the members of the parsed JSON object are set directly as the object's own attributes, while methods are those of `prototype`. E.g. `from_json(Rectangle, '{"width":10,"height":20}').area()` returns `200`.

    :param prototype: The class of the object to return
    :param text: JSON text of an object
    :raises json.JSONDecodeError: if `text` isn't valid JSON
    :raises TypeError: if `text` is valid JSON but not of an object
    :raises AttributeError: if `prototype` declares `__slots__` (e.g. a `dataclass` with `slots=True`) and the object has a member not featured in them
    """
    fields = json.loads(text)
    if not isinstance(fields, dict):
        raise TypeError(f"Expected JSON text of an object, got {qualified_type_name(type(fields))}")
    obj = prototype.__new__(prototype)
    setattrs(obj, **fields)
    return obj
