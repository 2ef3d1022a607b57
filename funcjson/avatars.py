import logging
from http import HTTPStatus

import requests
from rfc3986 import uri_reference

from .jsontypes import Headers
from .logs import request_repr
from .models import User

logger = logging.getLogger(__name__)

SENSITIVE_HEADERS = {"Authorization", "Cookie"}


class ClientError(Exception):
    def __init__(self, status_code: int, content: str) -> None:
        self.status_code = status_code
        self.content = content
        super().__init__(f"Client error: {status_code} {content}")


class AvatarClient:
    """Downloads avatar images referenced by decoded users."""

    def __init__(
        self,
        timeout: float = 30,
        headers: Headers | None = None,
        base_url: str | None = None,
    ) -> None:
        self.timeout = timeout
        self.base_url = base_url
        self._headers = headers or {}

    def fetch_avatar(self, user: User) -> bytes | None:
        if user.avatar_url is None:
            logger.info("User %s has no avatar URL", user.first_name)
            return None

        return self.fetch(user.avatar_url)

    def resolve(self, url: str) -> str:
        """Resolve a relative avatar reference against ``base_url``."""
        if self.base_url is None:
            return url

        return uri_reference(url).resolve_with(self.base_url).unsplit()

    def fetch(self, url: str) -> bytes:
        url = self.resolve(url)
        request = requests.Request("GET", url, headers=self._headers)
        prepared_request = request.prepare()

        with requests.Session() as session:
            response = session.send(prepared_request, timeout=self.timeout)

            logger.info(
                "Requested avatar: %s",
                request_repr(
                    method="GET",
                    url=url,
                    headers=self._headers,
                    sensitive_headers=SENSITIVE_HEADERS,
                ),
            )
            logger.info(
                "Avatar host responded: HTTP %s (%s bytes)",
                response.status_code,
                len(response.content),
            )

            if (
                response.status_code >= HTTPStatus.BAD_REQUEST
                and response.status_code < HTTPStatus.INTERNAL_SERVER_ERROR
            ):
                raise ClientError(
                    response.status_code,
                    response.content.decode(errors="replace"),
                )

            response.raise_for_status()

            return response.content
