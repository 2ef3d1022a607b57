"""JSON values as a closed sum type.

Every parsed JSON fragment is exactly one of :class:`JSONArray`,
:class:`JSONObject`, :class:`JSONNull`, :class:`JSONNumber` or
:class:`JSONString`.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, TypeAlias

from .jsontypes import RawJson, RawJsonDict


@dataclass(frozen=True)
class JSONArray:
    items: tuple["JSONValue | None", ...]


@dataclass(frozen=True)
class JSONObject:
    # Values are the raw deserialized objects, not classified JSONValues.
    dictionary: RawJsonDict


@dataclass(frozen=True)
class JSONNull:
    pass


@dataclass(frozen=True)
class JSONNumber:
    value: int


@dataclass(frozen=True)
class JSONString:
    value: str


JSONValue: TypeAlias = JSONArray | JSONObject | JSONNull | JSONNumber | JSONString

_END: Any = object()


def integer_value(obj: Any) -> int | None:
    """Return ``obj`` as an int if JSON would read it as an integer.

    Booleans read as 1 and 0; floats only when they carry no fraction.
    """
    if isinstance(obj, int):
        return int(obj)

    if isinstance(obj, float) and obj.is_integer():
        return int(obj)

    return None


def classify(obj: RawJson) -> JSONValue:
    """Classify a deserialized object into one of the five JSON variants.

    Type tests run in order: dict, int, str, list. Anything else, including
    ``None`` and fractional floats, falls back to :class:`JSONNull`.

    Arrays are walked with an explicit stack, so nesting depth is not bound
    by the interpreter's recursion limit.
    """
    if not isinstance(obj, list):
        return _classify_scalar(obj)

    stack: list[tuple[Iterator[RawJson], list[JSONValue | None]]] = [
        (iter(obj), []),
    ]

    while True:
        items, classified = stack[-1]
        item = next(items, _END)

        if item is _END:
            stack.pop()
            array = JSONArray(tuple(classified))

            if not stack:
                return array

            stack[-1][1].append(array)

        elif isinstance(item, list):
            stack.append((iter(item), []))

        else:
            classified.append(_classify_scalar(item))


def _classify_scalar(obj: RawJson) -> JSONValue:
    if isinstance(obj, dict):
        return JSONObject(obj)

    integer = integer_value(obj)

    if integer is not None:
        return JSONNumber(integer)

    if isinstance(obj, str):
        return JSONString(obj)

    return JSONNull()
