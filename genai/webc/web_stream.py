"""A stream of string messages split out of a streaming HTTP response.

For services that do not speak ``text/event-stream``: messages are split
either by a delimiter or as the items of a pretty-printed JSON array.
"""

from __future__ import annotations

import enum
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, List, Optional

import httpx

from genai.webc.errors import RequestFailedError


class StreamMode(enum.Enum):
    """How messages are split out of the byte stream."""

    DELIMITER = "delimiter"
    PRETTY_JSON_ARRAY = "pretty_json_array"


@dataclass
class BuffResponse:
    """Messages found in one buffer, and the trailing part kept for the next one."""

    first_message: Optional[str] = None
    next_messages: List[str] = field(default_factory=list)
    candidate_message: Optional[str] = None


def split_pretty_json_array(buff_string: str) -> BuffResponse:
    """Split a buffer of a pretty-printed JSON array.

    An opening ``[`` and a closing ``]`` become messages of their own, the
    main object between them another; separating commas are dropped. Each
    buffer is assumed to hold whole array items.
    """
    rest = buff_string.strip()
    messages: List[str] = []

    array_start = rest.startswith("[")
    if array_start:
        rest = rest[1:].strip()

    rest = rest.removeprefix(",")
    rest = rest.removesuffix(",")

    array_end = rest.endswith("]")
    if array_end:
        rest = rest[:-1].strip()

    if array_start:
        messages.append("[")
    if rest:
        messages.append(rest)
    if array_end:
        messages.append("]")

    if not messages:
        return BuffResponse()
    return BuffResponse(first_message=messages[0], next_messages=messages[1:])


def split_delimited(
    buff_string: str, partial_message: Optional[str], delimiter: str
) -> BuffResponse:
    """Split a buffer on ``delimiter``; ``partial_message`` prefixes the first part.

    The last part is returned as the candidate, to be completed by the next buffer.
    Empty messages are skipped.
    """
    result = BuffResponse()
    candidate: Optional[str] = None

    for part in buff_string.split(delimiter):
        if candidate is not None:
            message, candidate = candidate, None
            if not message:
                continue
            if result.first_message is None:
                result.first_message = message
            else:
                result.next_messages.append(message)
        else:
            candidate = f"{partial_message}{part}" if partial_message is not None else part
            partial_message = None

    result.candidate_message = candidate
    return result


class WebStream:
    """Async iterator of string messages from a streamed HTTP request.

    The request is sent on the first iteration. The response status is not checked.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        request: httpx.Request,
        mode: StreamMode,
        delimiter: Optional[str] = None,
    ) -> None:
        if mode is StreamMode.DELIMITER and not delimiter:
            raise ValueError("delimiter mode needs a non-empty delimiter")
        self._client = client
        self._request: Optional[httpx.Request] = request
        self._mode = mode
        self._delimiter = delimiter
        self._response: Optional[httpx.Response] = None
        self._byte_iter = None
        self._partial: Optional[str] = None
        self._remaining: Deque[str] = deque()

    @classmethod
    def with_delimiter(
        cls, client: httpx.AsyncClient, request: httpx.Request, delimiter: str
    ) -> WebStream:
        return cls(client, request, StreamMode.DELIMITER, delimiter)

    @classmethod
    def with_pretty_json_array(cls, client: httpx.AsyncClient, request: httpx.Request) -> WebStream:
        return cls(client, request, StreamMode.PRETTY_JSON_ARRAY)

    @property
    def mode(self) -> StreamMode:
        return self._mode

    def __aiter__(self) -> WebStream:
        return self

    async def __anext__(self) -> str:
        if self._remaining:
            return self._remaining.popleft()

        while True:
            if self._byte_iter is None:
                if self._request is None:
                    raise StopAsyncIteration
                request, self._request = self._request, None
                try:
                    self._response = await self._client.send(request, stream=True)
                except httpx.HTTPError as exc:
                    raise RequestFailedError(exc) from exc
                self._byte_iter = self._response.aiter_bytes()

            try:
                chunk = await self._byte_iter.__anext__()
            except StopAsyncIteration:
                await self._close_response()
                partial, self._partial = self._partial, None
                if partial:
                    return partial
                continue
            except httpx.HTTPError as exc:
                await self._close_response()
                raise RequestFailedError(exc) from exc

            buff = self._split(chunk.decode("utf-8"))
            self._remaining.extend(buff.next_messages)
            if buff.candidate_message is not None:
                self._partial = buff.candidate_message
            if buff.first_message is not None:
                return buff.first_message

    def _split(self, text: str) -> BuffResponse:
        if self._mode is StreamMode.DELIMITER:
            partial, self._partial = self._partial, None
            return split_delimited(text, partial, self._delimiter)
        return split_pretty_json_array(text)

    async def _close_response(self) -> None:
        self._byte_iter = None
        if self._response is not None:
            response, self._response = self._response, None
            await response.aclose()