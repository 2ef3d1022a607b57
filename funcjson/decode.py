from collections.abc import Callable
from typing import Any, TypeVar, cast

from .jsontypes import RawJsonDict
from .values import JSONValue, integer_value

T = TypeVar("T")

Decode = Callable[[JSONValue | None], T | None]


def value_for_key(
    key: str,
    dictionary: RawJsonDict | None,
    expected_type: type[T],
) -> T | None:
    """Return ``dictionary[key]`` if it is an instance of ``expected_type``.

    Integers follow :func:`~funcjson.values.integer_value`, so booleans and
    integral floats are read as ints.
    """
    if dictionary is None:
        return None

    value = dictionary.get(key)

    if expected_type is int:
        return cast("T | None", integer_value(value))

    if not isinstance(value, expected_type):
        return None

    return value


def string_for_key(key: str, dictionary: RawJsonDict | None) -> str | None:
    return value_for_key(key, dictionary, str)


def int_for_key(key: str, dictionary: RawJsonDict | None) -> int | None:
    return value_for_key(key, dictionary, int)


def dict_for_key(
    key: str,
    dictionary: RawJsonDict | None,
) -> dict[str, Any] | None:
    return value_for_key(key, dictionary, dict)


def list_for_key(key: str, dictionary: RawJsonDict | None) -> list[Any] | None:
    return value_for_key(key, dictionary, list)
