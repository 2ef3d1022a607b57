from .avatars import AvatarClient, ClientError
from .decode import Decode, value_for_key
from .deserialize import Deserialize, json_deserializer
from .models import User, decode_user
from .values import (
    JSONArray,
    JSONNull,
    JSONNumber,
    JSONObject,
    JSONString,
    JSONValue,
    classify,
)

__all__ = [
    "AvatarClient",
    "ClientError",
    "Decode",
    "Deserialize",
    "JSONArray",
    "JSONNull",
    "JSONNumber",
    "JSONObject",
    "JSONString",
    "JSONValue",
    "User",
    "classify",
    "decode_user",
    "json_deserializer",
    "value_for_key",
]
