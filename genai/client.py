"""The client, its configuration, and the builder that puts them together."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Callable, Optional, Union

import httpx

from genai.chat.chat_options import ChatOptions
from genai.common import ModelIden
from genai.errors import ResolveFailedError
from genai.resolver.auth_data import AuthData
from genai.resolver.endpoint import Endpoint
from genai.resolver.errors import ResolverError
from genai.resolver.resolvers import AuthResolver, ModelMapper, ServiceTargetResolver
from genai.service_target import ServiceTarget
from genai.webc.web_client import WebClient

DefaultAuth = Union[AuthData, Callable[[Any], AuthData]]
DefaultEndpoint = Union[Endpoint, Callable[[Any], Endpoint]]


def _default_value(default: Any, adapter_kind: Any, expected: type) -> Any:
    value = default if isinstance(default, expected) else default(adapter_kind)
    if not isinstance(value, expected):
        raise TypeError(f"expected {expected.__name__}, got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class ClientConfig:
    """Resolvers and default chat options of a client.

    The ``with_*`` setters return new configurations.
    """

    auth_resolver: Optional[AuthResolver] = None
    service_target_resolver: Optional[ServiceTargetResolver] = None
    model_mapper: Optional[ModelMapper] = None
    chat_options: Optional[ChatOptions] = None

    def with_auth_resolver(self, auth_resolver: AuthResolver) -> ClientConfig:
        """Set the auth resolver; it runs before the service target resolver."""
        return dataclasses.replace(self, auth_resolver=auth_resolver)

    def with_model_mapper(self, model_mapper: ModelMapper) -> ClientConfig:
        """Set the model mapper; it runs before the other resolvers."""
        return dataclasses.replace(self, model_mapper=model_mapper)

    def with_service_target_resolver(
        self, service_target_resolver: ServiceTargetResolver
    ) -> ClientConfig:
        """Set the service target resolver, the last step before a call."""
        return dataclasses.replace(self, service_target_resolver=service_target_resolver)

    def with_chat_options(self, options: ChatOptions) -> ClientConfig:
        """Set the default chat options."""
        return dataclasses.replace(self, chat_options=options)

    def resolve_service_target(
        self,
        model: ModelIden,
        default_auth: DefaultAuth,
        default_endpoint: DefaultEndpoint,
    ) -> ServiceTarget:
        """Map the model, resolve its auth, then let the target resolver have the last word.

        ``default_auth`` and ``default_endpoint`` are values, or functions of the
        adapter kind, used when no resolver supplies them. Resolver failures are
        raised as ResolveFailedError.
        """
        if self.model_mapper is not None:
            try:
                mapped = self.model_mapper.map_model(model)
            except ResolverError as exc:
                raise ResolveFailedError(model, exc) from exc
        else:
            mapped = model

        auth: Optional[AuthData] = None
        if self.auth_resolver is not None:
            try:
                auth = self.auth_resolver.resolve(mapped)
            except ResolverError as exc:
                raise ResolveFailedError(mapped, exc) from exc
        if auth is None:
            auth = _default_value(default_auth, mapped.adapter_kind, AuthData)

        endpoint = _default_value(default_endpoint, mapped.adapter_kind, Endpoint)

        target = ServiceTarget(endpoint=endpoint, auth=auth, model=mapped)
        if self.service_target_resolver is not None:
            try:
                target = self.service_target_resolver.resolve(target)
            except ResolverError as exc:
                raise ResolveFailedError(mapped, exc) from exc
        return target


@dataclass(frozen=True)
class ClientBuilder:
    """Builds a Client; every setter returns a new builder."""

    web_client: Optional[WebClient] = None
    config: Optional[ClientConfig] = None

    def _config(self) -> ClientConfig:
        return self.config if self.config is not None else ClientConfig()

    def with_http_client(self, http_client: httpx.AsyncClient) -> ClientBuilder:
        """Use the given ``httpx.AsyncClient`` for web calls."""
        return dataclasses.replace(self, web_client=WebClient(http_client))

    def with_config(self, config: ClientConfig) -> ClientBuilder:
        return dataclasses.replace(self, config=config)

    def with_chat_options(self, options: ChatOptions) -> ClientBuilder:
        """Set the default chat options, creating the config if needed."""
        return self.with_config(self._config().with_chat_options(options))

    def with_auth_resolver(self, auth_resolver: AuthResolver) -> ClientBuilder:
        return self.with_config(self._config().with_auth_resolver(auth_resolver))

    def with_auth_resolver_fn(self, auth_resolver_fn: Callable) -> ClientBuilder:
        return self.with_auth_resolver(AuthResolver.from_resolver_fn(auth_resolver_fn))

    def with_service_target_resolver(self, target_resolver: ServiceTargetResolver) -> ClientBuilder:
        return self.with_config(self._config().with_service_target_resolver(target_resolver))

    def with_service_target_resolver_fn(self, target_resolver_fn: Callable) -> ClientBuilder:
        return self.with_service_target_resolver(
            ServiceTargetResolver.from_resolver_fn(target_resolver_fn)
        )

    def with_model_mapper(self, model_mapper: ModelMapper) -> ClientBuilder:
        return self.with_config(self._config().with_model_mapper(model_mapper))

    def with_model_mapper_fn(self, model_mapper_fn: Callable) -> ClientBuilder:
        return self.with_model_mapper(ModelMapper.from_mapper_fn(model_mapper_fn))

    def build(self) -> Client:
        """Build the client, with defaults for anything not set."""
        return Client(web_client=self.web_client, config=self.config)


class Client:
    """Client for AI requests; its web client and configuration are fixed once built."""

    __slots__ = ("_web_client", "_config")

    def __init__(
        self,
        web_client: Optional[WebClient] = None,
        config: Optional[ClientConfig] = None,
    ) -> None:
        self._web_client = web_client if web_client is not None else WebClient()
        self._config = config if config is not None else ClientConfig()

    @classmethod
    def builder(cls) -> ClientBuilder:
        return ClientBuilder()

    def web_client(self) -> WebClient:
        return self._web_client

    def config(self) -> ClientConfig:
        return self._config

    async def aclose(self) -> None:
        await self._web_client.aclose()

    async def __aenter__(self) -> Client:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    def __repr__(self) -> str:
        return f"Client(config={self._config!r})"