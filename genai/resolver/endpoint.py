"""Service endpoint description."""

from __future__ import annotations


class Endpoint:
    """The base URL of a service."""

    __slots__ = ("_url",)

    def __init__(self, url: str) -> None:
        if not isinstance(url, str):
            raise TypeError(f"endpoint url must be a str, not {type(url).__name__}")
        self._url = url

    @classmethod
    def from_static(cls, url: str) -> Endpoint:
        """Endpoint from a fixed URL."""
        return cls(url)

    @classmethod
    def from_owned(cls, url: str) -> Endpoint:
        """Endpoint from a URL built at run time."""
        return cls(url)

    def base_url(self) -> str:
        """The base URL of the service."""
        return self._url

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Endpoint):
            return NotImplemented
        return self._url == other._url

    def __hash__(self) -> int:
        return hash(self._url)

    def __repr__(self) -> str:
        return f"Endpoint({self._url!r})"