import pytest

from genai.common import ModelIden
from genai.resolver.auth_data import AuthData
from genai.resolver.endpoint import Endpoint
from genai.resolver.errors import CustomResolverError, ResolverError
from genai.resolver.resolvers import AuthResolver, ModelMapper, ServiceTargetResolver
from genai.service_target import ServiceTarget

MODEL = ModelIden("openai", "gpt-4o-mini")


def test_auth_resolver_returns_given_auth_data():
    auth_data = AuthData.from_env("OPENAI_API_KEY")
    resolver = AuthResolver.from_resolver_fn(lambda model_iden: auth_data)
    assert resolver.resolve(MODEL) is auth_data


def test_auth_resolver_receives_model():
    seen = []

    def resolver_fn(model_iden):
        seen.append(model_iden)
        return AuthData.from_single("ollama")

    AuthResolver.from_resolver_fn(resolver_fn).resolve(MODEL)
    assert seen == [MODEL]


def test_auth_resolver_may_return_none():
    assert AuthResolver.from_resolver_fn(lambda m: None).resolve(MODEL) is None


def test_auth_resolver_error_propagates():
    def failing(model_iden):
        raise CustomResolverError("no key for this model")

    with pytest.raises(ResolverError, match="no key for this model"):
        AuthResolver.from_resolver_fn(failing).resolve(MODEL)


def test_auth_resolver_rejects_wrong_return_type():
    with pytest.raises(TypeError):
        AuthResolver.from_resolver_fn(lambda m: "placeholder").resolve(MODEL)


def test_from_resolver_fn_reuses_existing_resolver():
    resolver = AuthResolver.from_resolver_fn(lambda m: None)
    assert AuthResolver.from_resolver_fn(resolver) is resolver


def test_non_callable_rejected():
    with pytest.raises(TypeError):
        AuthResolver.from_resolver_fn("not callable")
    with pytest.raises(TypeError):
        ModelMapper.from_mapper_fn(3)


def test_model_mapper_maps():
    mapper = ModelMapper.from_mapper_fn(lambda m: ModelIden(m.adapter_kind, "gpt-4o"))
    assert mapper.map_model(MODEL) == ModelIden("openai", "gpt-4o")


def test_model_mapper_rejects_wrong_return_type():
    with pytest.raises(TypeError):
        ModelMapper.from_mapper_fn(lambda m: "gpt-4o").map_model(MODEL)


def test_service_target_resolver_overrides_endpoint():
    target = ServiceTarget(
        endpoint=Endpoint.from_static("https://api.example.com/v1/"),
        auth=AuthData.from_single("placeholder"),
        model=MODEL,
    )
    custom = Endpoint.from_owned("http://localhost:8080/v1/")
    resolver = ServiceTargetResolver.from_resolver_fn(lambda t: t.replace(endpoint=custom))
    resolved = resolver.resolve(target)
    assert resolved.endpoint.base_url() == "http://localhost:8080/v1/"
    assert resolved.model == MODEL
    assert target.endpoint.base_url() == "https://api.example.com/v1/"


def test_service_target_resolver_rejects_wrong_return_type():
    with pytest.raises(TypeError):
        ServiceTargetResolver.from_resolver_fn(lambda t: None).resolve(None)


def test_reprs_hide_functions():
    assert repr(AuthResolver.from_resolver_fn(lambda m: None)) == "AuthResolver(AuthResolverFn)"
    assert repr(ModelMapper.from_mapper_fn(lambda m: m)) == "ModelMapper(ModelMapperFn)"