import json
import logging
from collections.abc import Callable
from typing import NoReturn

from .values import JSONValue, classify

logger = logging.getLogger(__name__)

Deserialize = Callable[[bytes], JSONValue | None]


def _reject_constant(constant: str) -> NoReturn:
    msg = f"{constant} is not valid JSON"
    raise ValueError(msg)


def json_deserializer() -> Deserialize:
    """Return a function parsing UTF-8 JSON bytes into a :data:`JSONValue`.

    Top-level scalars are accepted. Invalid input yields ``None``.
    """

    def deserialize(data: bytes) -> JSONValue | None:
        try:
            return classify(json.loads(data, parse_constant=_reject_constant))
        except (ValueError, RecursionError) as error:
            logger.debug("Could not deserialize JSON: %s", error)
            return None

    return deserialize
