"""Errors raised by the client and the chat layer."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from genai.common import ModelIden


class GenAIError(Exception):
    """Base class of every error the library raises."""


# -- Chat input


class ChatReqHasNoMessagesError(GenAIError):
    """The chat request holds no message."""

    def __init__(self, model_iden: ModelIden) -> None:
        self.model_iden = model_iden
        super().__init__(f"chat request has no messages (model: {model_iden})")


class LastChatMessageIsNotUserError(GenAIError):
    """The last message of the chat request is not a user message."""

    def __init__(self, model_iden: ModelIden, actual_role: Any) -> None:
        self.model_iden = model_iden
        self.actual_role = actual_role
        super().__init__(
            f"last chat message is not from the user but {actual_role} (model: {model_iden})"
        )


class MessageRoleNotSupportedError(GenAIError):
    """A message role is not supported by the provider."""

    def __init__(self, model_iden: ModelIden, role: Any) -> None:
        self.model_iden = model_iden
        self.role = role
        super().__init__(f"message role {role} not supported (model: {model_iden})")


class MessageContentTypeNotSupportedError(GenAIError):
    """A message content type is not supported by the provider."""

    def __init__(self, model_iden: ModelIden, cause: str) -> None:
        self.model_iden = model_iden
        self.cause = cause
        super().__init__(f"message content type not supported: {cause} (model: {model_iden})")


class JsonModeWithoutInstructionError(GenAIError):
    """JSON mode was requested without any instruction to produce JSON."""

    def __init__(self) -> None:
        super().__init__("JSON mode requested without an instruction to produce JSON")


# -- Chat output


class NoChatResponseError(GenAIError):
    """The provider returned no chat response."""

    def __init__(self, model_iden: ModelIden) -> None:
        self.model_iden = model_iden
        super().__init__(f"no chat response (model: {model_iden})")


class InvalidJsonResponseElementError(GenAIError):
    """An element of the JSON response was not as expected."""

    def __init__(self, info: str) -> None:
        self.info = info
        super().__init__(f"invalid JSON response element: {info}")


# -- Auth


class RequiresApiKeyError(GenAIError):
    """The model requires an API key and none was found."""

    def __init__(self, model_iden: ModelIden) -> None:
        self.model_iden = model_iden
        super().__init__(f"an API key is required (model: {model_iden})")


class NoAuthResolverError(GenAIError):
    """No auth resolver is available for the model."""

    def __init__(self, model_iden: ModelIden) -> None:
        self.model_iden = model_iden
        super().__init__(f"no auth resolver (model: {model_iden})")


class NoAuthDataError(GenAIError):
    """The auth resolver produced no auth data."""

    def __init__(self, model_iden: ModelIden) -> None:
        self.model_iden = model_iden
        super().__init__(f"no auth data (model: {model_iden})")


# -- Model mapper


class ModelMapperFailedError(GenAIError):
    """The model mapper failed."""

    def __init__(self, model_iden: ModelIden, cause: BaseException) -> None:
        self.model_iden = model_iden
        self.cause = cause
        self.__cause__ = cause
        super().__init__(f"model mapper failed for {model_iden}: {cause}")


# -- Web calls


class WebAdapterCallError(GenAIError):
    """A web call made on behalf of an adapter failed."""

    def __init__(self, adapter_kind: Any, webc_error: BaseException) -> None:
        self.adapter_kind = adapter_kind
        self.webc_error = webc_error
        self.__cause__ = webc_error
        super().__init__(f"web call failed for adapter {adapter_kind}: {webc_error}")


class WebModelCallError(GenAIError):
    """A web call made for a model failed."""

    def __init__(self, model_iden: ModelIden, webc_error: BaseException) -> None:
        self.model_iden = model_iden
        self.webc_error = webc_error
        self.__cause__ = webc_error
        super().__init__(f"web call failed for model {model_iden}: {webc_error}")


# -- Chat stream


class StreamParseError(GenAIError):
    """A stream event could not be parsed."""

    def __init__(self, model_iden: ModelIden, serde_error: BaseException) -> None:
        self.model_iden = model_iden
        self.serde_error = serde_error
        self.__cause__ = serde_error
        super().__init__(f"stream parse error for model {model_iden}: {serde_error}")


class StreamEventError(GenAIError):
    """The stream delivered an error event."""

    def __init__(self, model_iden: ModelIden, body: Any) -> None:
        self.model_iden = model_iden
        self.body = body
        super().__init__(f"stream event error for model {model_iden}: {body}")


class WebStreamError(GenAIError):
    """The underlying web stream failed."""

    def __init__(self, model_iden: ModelIden, cause: str) -> None:
        self.model_iden = model_iden
        self.cause = cause
        super().__init__(f"web stream error for model {model_iden}: {cause}")


# -- Resolvers


class ResolveFailedError(GenAIError):
    """A resolver (auth, model mapper or service target) failed."""

    def __init__(self, model_iden: ModelIden, resolver_error: BaseException) -> None:
        self.model_iden = model_iden
        self.resolver_error = resolver_error
        self.__cause__ = resolver_error
        super().__init__(f"resolver failed for model {model_iden}: {resolver_error}")