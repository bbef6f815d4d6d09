"""User hooks that resolve auth data, model identity and service targets."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Union

from genai.common import ModelIden
from genai.resolver.auth_data import AuthData
from genai.service_target import ServiceTarget

AuthResolverFn = Callable[[ModelIden], Optional[AuthData]]
ModelMapperFn = Callable[[ModelIden], ModelIden]
ServiceTargetResolverFn = Callable[[ServiceTarget], ServiceTarget]


def _check_callable(fn: object, what: str) -> None:
    if not callable(fn):
        raise TypeError(f"{what} must be callable, not {type(fn).__name__}")


@dataclass(frozen=True, repr=False)
class AuthResolver:
    """Returns the AuthData for a model; ``None`` falls back to the default."""

    resolver_fn: AuthResolverFn

    def __post_init__(self) -> None:
        _check_callable(self.resolver_fn, "auth resolver function")

    @classmethod
    def from_resolver_fn(cls, resolver_fn: Union[AuthResolverFn, AuthResolver]) -> AuthResolver:
        """Create a resolver from a function (or reuse an existing resolver)."""
        if isinstance(resolver_fn, AuthResolver):
            return resolver_fn
        return cls(resolver_fn)

    def resolve(self, model_iden: ModelIden) -> Optional[AuthData]:
        """Call the function; resolver failures are raised as ResolverError."""
        auth = self.resolver_fn(model_iden)
        if auth is not None and not isinstance(auth, AuthData):
            raise TypeError(f"auth resolver returned {type(auth).__name__}, expected AuthData or None")
        return auth

    def __repr__(self) -> str:
        return "AuthResolver(AuthResolverFn)"


@dataclass(frozen=True, repr=False)
class ModelMapper:
    """Maps a resolved ModelIden to another one."""

    mapper_fn: ModelMapperFn

    def __post_init__(self) -> None:
        _check_callable(self.mapper_fn, "model mapper function")

    @classmethod
    def from_mapper_fn(cls, mapper_fn: Union[ModelMapperFn, ModelMapper]) -> ModelMapper:
        """Create a mapper from a function (or reuse an existing mapper)."""
        if isinstance(mapper_fn, ModelMapper):
            return mapper_fn
        return cls(mapper_fn)

    def map_model(self, model_iden: ModelIden) -> ModelIden:
        """Call the function and return the mapped model."""
        mapped = self.mapper_fn(model_iden)
        if not isinstance(mapped, ModelIden):
            raise TypeError(f"model mapper returned {type(mapped).__name__}, expected ModelIden")
        return mapped

    def __repr__(self) -> str:
        return "ModelMapper(ModelMapperFn)"


@dataclass(frozen=True, repr=False)
class ServiceTargetResolver:
    """Last step before a call: may override endpoint, auth and model."""

    resolver_fn: ServiceTargetResolverFn

    def __post_init__(self) -> None:
        _check_callable(self.resolver_fn, "service target resolver function")

    @classmethod
    def from_resolver_fn(
        cls, resolver_fn: Union[ServiceTargetResolverFn, ServiceTargetResolver]
    ) -> ServiceTargetResolver:
        """Create a resolver from a function (or reuse an existing resolver)."""
        if isinstance(resolver_fn, ServiceTargetResolver):
            return resolver_fn
        return cls(resolver_fn)

    def resolve(self, service_target: ServiceTarget) -> ServiceTarget:
        """Call the function and return the resolved service target."""
        target = self.resolver_fn(service_target)
        if not isinstance(target, ServiceTarget):
            raise TypeError(
                f"service target resolver returned {type(target).__name__}, expected ServiceTarget"
            )
        return target

    def __repr__(self) -> str:
        return "ServiceTargetResolver(ServiceTargetResolverFn)"