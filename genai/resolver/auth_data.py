"""Authentication data: a key, or where to find it."""

from __future__ import annotations

import enum
import os
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Union

from genai.resolver.errors import ApiKeyEnvNotFoundError, AuthDataNotSingleValueError


class AuthKind(enum.Enum):
    """How an AuthData holds its credentials."""

    FROM_ENV = "FromEnv"
    KEY = "Single"
    MULTI_KEYS = "Multi"


@dataclass(frozen=True, repr=False)
class AuthData:
    """Either an environment variable name, a key, or several named keys."""

    kind: AuthKind
    value: Union[str, Mapping[str, str]]

    @classmethod
    def from_env(cls, env_name: str) -> AuthData:
        """Auth data read from the environment variable ``env_name``."""
        return cls(AuthKind.FROM_ENV, str(env_name))

    @classmethod
    def from_single(cls, value: str) -> AuthData:
        """Auth data holding the key itself."""
        return cls(AuthKind.KEY, str(value))

    @classmethod
    def from_multi(cls, data: Mapping[str, str]) -> AuthData:
        """Auth data made of several named values."""
        return cls(AuthKind.MULTI_KEYS, MappingProxyType(dict(data)))

    def single_key_value(self) -> str:
        """Return the single key, reading the environment if needed."""
        if self.kind is AuthKind.FROM_ENV:
            try:
                return os.environ[self.value]
            except KeyError:
                raise ApiKeyEnvNotFoundError(self.value) from None
        if self.kind is AuthKind.KEY:
            return self.value
        raise AuthDataNotSingleValueError()

    def __repr__(self) -> str:
        # The environment name is hidden too, in case a key was passed by mistake.
        return f"AuthData.{self.kind.value}(REDACTED)"