import logging
from typing import Annotated

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationError,
)
from rfc3986 import exceptions, misc, validators
from rfc3986.uri import URIReference

from .decode import Decode, string_for_key
from .values import JSONObject, JSONValue

logger = logging.getLogger(__name__)

_uri_validator = (
    validators.Validator()
    .allow_use_of_password()
    .check_validity_of(*validators.Validator.COMPONENT_NAMES)
)


def validate_uri_reference(value: str) -> str:
    """Check that ``value`` is an RFC 3986 URI reference, relative or absolute.

    The text is returned unchanged; components are validated as written,
    without percent-encoding.
    """
    match = misc.URI_MATCHER.fullmatch(value) if value else None

    if match is None:
        msg = f"{value!r} is not a URI reference"
        raise ValueError(msg)

    try:
        _uri_validator.validate(URIReference(**match.groupdict()))
    except exceptions.ValidationError as error:
        msg = f"{value!r} is not a valid URI reference"
        raise ValueError(msg) from error

    return value


UriReference = Annotated[str, AfterValidator(validate_uri_reference)]

_uri_adapter = TypeAdapter(UriReference)


class User(BaseModel):
    """Application user decoded from JSON"""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    avatar_url: UriReference | None = Field(default=None, alias="AvatarURL")
    first_name: str = Field(alias="FirstName")


def parse_url(value: str | None) -> str | None:
    if value is None:
        return None

    try:
        return _uri_adapter.validate_python(value)
    except ValidationError:
        logger.debug("Ignoring malformed URL: %r", value)
        return None


def decode_user() -> Decode[User]:
    """Return a decoder building a :class:`User` from a JSON object.

    ``FirstName`` is required. ``AvatarURL`` is dropped when missing,
    not a string or not a valid URI reference.
    """

    def decode(json_value: JSONValue | None) -> User | None:
        if not isinstance(json_value, JSONObject):
            logger.debug("Expected a JSON object, got %r", json_value)
            return None

        dictionary = json_value.dictionary
        first_name = string_for_key("FirstName", dictionary)

        if first_name is None:
            logger.debug("Missing or invalid FirstName")
            return None

        avatar_url = parse_url(string_for_key("AvatarURL", dictionary))

        return User(avatar_url=avatar_url, first_name=first_name)

    return decode
