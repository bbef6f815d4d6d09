"""A thin HTTP client for JSON requests."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Optional, Tuple

import httpx

from genai.webc.errors import (
    RequestFailedError,
    ResponseFailedNotJsonError,
    ResponseFailedStatusError,
)

Headers = Iterable[Tuple[str, str]]


@dataclass(frozen=True)
class WebResponse:
    """A successful response with its parsed JSON body."""

    status: int
    body: Any

    @classmethod
    def from_httpx_response(cls, response: httpx.Response) -> WebResponse:
        """Check a read response and parse its JSON body.

        Raises ResponseFailedStatusError for a non-success status and
        ResponseFailedNotJsonError when the content type is not JSON.
        """
        status = response.status_code
        if not response.is_success:
            raise ResponseFailedStatusError(status, response.text)

        content_type = response.headers.get("content-type", "")
        if not content_type.startswith("application/json"):
            raise ResponseFailedNotJsonError(content_type)

        try:
            body = response.json()
        except ValueError as exc:
            raise RequestFailedError(exc) from exc
        return cls(status, body)


class WebClient:
    """Sends GET and JSON POST requests over an ``httpx.AsyncClient``."""

    def __init__(self, http_client: Optional[httpx.AsyncClient] = None) -> None:
        self._client = http_client if http_client is not None else httpx.AsyncClient()

    @property
    def http_client(self) -> httpx.AsyncClient:
        return self._client

    async def do_get(self, url: str, headers: Headers = ()) -> WebResponse:
        try:
            response = await self._client.get(url, headers=list(headers))
        except httpx.HTTPError as exc:
            raise RequestFailedError(exc) from exc
        return WebResponse.from_httpx_response(response)

    async def do_post(self, url: str, headers: Headers, content: Any) -> WebResponse:
        request = self.new_request(url, headers, content)
        try:
            response = await self._client.send(request)
        except httpx.HTTPError as exc:
            raise RequestFailedError(exc) from exc
        return WebResponse.from_httpx_response(response)

    def new_request(self, url: str, headers: Headers, content: Any) -> httpx.Request:
        """Build a POST request with ``content`` as its JSON body."""
        return self._client.build_request("POST", url, headers=list(headers), json=content)

    async def aclose(self) -> None:
        await self._client.aclose()

    def __repr__(self) -> str:
        return "WebClient()"