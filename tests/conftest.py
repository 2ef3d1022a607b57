import pytest
import pytest_httpserver

from funcjson.avatars import AvatarClient
from funcjson.decode import Decode
from funcjson.deserialize import Deserialize, json_deserializer
from funcjson.models import User, decode_user


@pytest.fixture(name="deserialize")
def deserialize_fixture() -> Deserialize:
    return json_deserializer()


@pytest.fixture(name="decode")
def decode_fixture() -> Decode[User]:
    return decode_user()


@pytest.fixture(name="avatar_client")
def avatar_client_fixture() -> AvatarClient:
    return AvatarClient(timeout=5)


@pytest.fixture
def avatar_url(httpserver: pytest_httpserver.HTTPServer) -> str:
    return httpserver.url_for("/avatars/tyler.jpg")
