"""Errors raised by resolvers."""

from __future__ import annotations


class ResolverError(Exception):
    """Base class of every resolver error."""


class ApiKeyEnvNotFoundError(ResolverError):
    """The environment variable that should hold the API key is not set."""

    def __init__(self, env_name: str) -> None:
        self.env_name = env_name
        super().__init__(f"API key environment variable not found: {env_name}")


class AuthDataNotSingleValueError(ResolverError):
    """The auth data holds several values where one was expected."""

    def __init__(self) -> None:
        super().__init__("auth data is not a single value")


class CustomResolverError(ResolverError):
    """A resolver failed with a free-form message."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)