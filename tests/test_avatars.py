import logging

import pytest
import requests
from pytest_httpserver import HTTPServer

from funcjson.avatars import AvatarClient, ClientError
from funcjson.models import User

IMAGE = b"\x89PNG\r\n\x1a\nfake-image"


def test_fetch_avatar(
    httpserver: HTTPServer,
    avatar_client: AvatarClient,
    avatar_url: str,
) -> None:
    httpserver.expect_oneshot_request(
        "/avatars/tyler.jpg",
        method="GET",
    ).respond_with_data(IMAGE, content_type="image/png")
    user = User(first_name="Tyler", avatar_url=avatar_url)

    assert avatar_client.fetch_avatar(user) == IMAGE
    httpserver.check_assertions()


def test_fetch_avatar__no_url(
    httpserver: HTTPServer,
    avatar_client: AvatarClient,
) -> None:
    user = User(first_name="Tyler")

    assert avatar_client.fetch_avatar(user) is None
    assert len(httpserver.log) == 0


def test_fetch__sends_configured_headers(
    httpserver: HTTPServer,
    avatar_url: str,
    caplog: pytest.LogCaptureFixture,
) -> None:
    httpserver.expect_oneshot_request(
        "/avatars/tyler.jpg",
        headers={"Authorization": "Bearer secret-token-value"},
    ).respond_with_data(IMAGE)
    client = AvatarClient(headers={"Authorization": "Bearer secret-token-value"})

    with caplog.at_level(logging.INFO, logger="funcjson.avatars"):
        assert client.fetch(avatar_url) == IMAGE

    assert "Bearer sec*** (25 chars)" in caplog.text
    assert "secret-token-value" not in caplog.text


def test_fetch__client_error(
    httpserver: HTTPServer,
    avatar_client: AvatarClient,
    avatar_url: str,
) -> None:
    httpserver.expect_oneshot_request("/avatars/tyler.jpg").respond_with_data(
        "Not Found",
        status=404,
    )

    with pytest.raises(ClientError) as error:
        avatar_client.fetch(avatar_url)

    assert error.value.status_code == 404
    assert error.value.content == "Not Found"


def test_fetch__server_error(
    httpserver: HTTPServer,
    avatar_client: AvatarClient,
    avatar_url: str,
) -> None:
    httpserver.expect_oneshot_request("/avatars/tyler.jpg").respond_with_data(
        "Internal Server Error",
        status=500,
    )

    with pytest.raises(requests.HTTPError):
        avatar_client.fetch(avatar_url)


def test_fetch_avatar__relative_url(httpserver: HTTPServer) -> None:
    httpserver.expect_oneshot_request("/avatars/tyler.jpg").respond_with_data(IMAGE)
    client = AvatarClient(base_url=httpserver.url_for("/avatars/"))
    user = User(first_name="Tyler", avatar_url="tyler.jpg")

    assert client.fetch_avatar(user) == IMAGE
    httpserver.check_assertions()


@pytest.mark.parametrize(
    argnames=("base_url", "url", "expected"),
    argvalues=[
        (None, "avatars/t.png", "avatars/t.png"),
        ("https://cdn.example.com/users/", "t.png", "https://cdn.example.com/users/t.png"),
        ("https://cdn.example.com/users/", "/t.png", "https://cdn.example.com/t.png"),
        (
            "https://cdn.example.com/users/",
            "https://other.example.com/t.png",
            "https://other.example.com/t.png",
        ),
    ],
    ids=["no-base", "relative", "absolute-path", "absolute"],
)
def test_resolve(base_url: str | None, url: str, expected: str) -> None:
    assert AvatarClient(base_url=base_url).resolve(url) == expected


def test_fetch__relative_url_without_base(avatar_client: AvatarClient) -> None:
    with pytest.raises(requests.exceptions.MissingSchema):
        avatar_client.fetch("avatars/t.png")
