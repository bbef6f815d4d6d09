import pytest

from genai.common import ModelIden
from genai.errors import (
    ChatReqHasNoMessagesError,
    GenAIError,
    InvalidJsonResponseElementError,
    LastChatMessageIsNotUserError,
    MessageContentTypeNotSupportedError,
    MessageRoleNotSupportedError,
    ModelMapperFailedError,
    NoAuthDataError,
    NoAuthResolverError,
    NoChatResponseError,
    RequiresApiKeyError,
    ResolveFailedError,
    StreamEventError,
    StreamParseError,
    WebAdapterCallError,
    WebModelCallError,
    WebStreamError,
)

IDEN = ModelIden("openai", "gpt-4o-mini")


@pytest.mark.parametrize(
    "error_cls",
    [ChatReqHasNoMessagesError, NoChatResponseError, RequiresApiKeyError, NoAuthResolverError, NoAuthDataError],
)
def test_model_errors_carry_model_iden(error_cls):
    with pytest.raises(GenAIError) as info:
        raise error_cls(model_iden=IDEN)
    assert info.value.model_iden == IDEN
    assert "gpt-4o-mini" in str(info.value)


def test_last_message_not_user_keeps_role():
    err = LastChatMessageIsNotUserError(IDEN, "assistant")
    assert err.actual_role == "assistant"
    assert "assistant" in str(err)


def test_role_and_content_type_errors():
    role_err = MessageRoleNotSupportedError(IDEN, "tool")
    content_err = MessageContentTypeNotSupportedError(IDEN, "image url")
    assert role_err.role == "tool"
    assert content_err.cause == "image url"
    assert "image url" in str(content_err)


def test_invalid_json_element_info():
    err = InvalidJsonResponseElementError("missing content")
    assert err.info == "missing content"
    assert "missing content" in str(err)


@pytest.mark.parametrize(
    "factory, attr",
    [
        (lambda cause: WebModelCallError(IDEN, cause), "webc_error"),
        (lambda cause: WebAdapterCallError("openai", cause), "webc_error"),
        (lambda cause: StreamParseError(IDEN, cause), "serde_error"),
        (lambda cause: ResolveFailedError(IDEN, cause), "resolver_error"),
        (lambda cause: ModelMapperFailedError(IDEN, cause), "cause"),
    ],
)
def test_wrapping_errors_chain_their_cause(factory, attr):
    cause = ValueError("boom")
    err = factory(cause)
    assert getattr(err, attr) is cause
    assert err.__cause__ is cause
    assert "boom" in str(err)


def test_stream_errors_keep_payload():
    body = {"error": {"message": "overloaded"}}
    event_err = StreamEventError(IDEN, body)
    web_err = WebStreamError(IDEN, "connection reset")
    assert event_err.body == body
    assert web_err.cause == "connection reset"
    assert web_err.model_iden == IDEN