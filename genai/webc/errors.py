"""Errors raised by the web client."""

from __future__ import annotations


class WebcError(Exception):
    """Base class of every web client error."""


class ResponseFailedNotJsonError(WebcError):
    """A successful response did not carry a JSON body."""

    def __init__(self, content_type: str) -> None:
        self.content_type = content_type
        super().__init__(f"response is not JSON (content type: {content_type!r})")


class ResponseFailedStatusError(WebcError):
    """The response status was not a success."""

    def __init__(self, status: int, body: str) -> None:
        self.status = status
        self.body = body
        super().__init__(f"response failed with status {status}: {body}")


class RequestFailedError(WebcError):
    """The HTTP request, or reading its response, failed."""

    def __init__(self, cause: BaseException) -> None:
        self.cause = cause
        self.__cause__ = cause
        super().__init__(f"request failed: {cause}")