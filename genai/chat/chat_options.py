"""Options for a chat request, and their resolution against client defaults."""

from __future__ import annotations

import dataclasses
import enum
import warnings
from dataclasses import dataclass
from typing import Any, Iterable, Optional, Tuple, Union

from genai.chat.response_format import JsonMode, JsonSpec

ChatResponseFormat = Union[JsonMode, JsonSpec]

_U32_MAX = 2**32 - 1


class ReasoningEffort(enum.Enum):
    """How much reasoning the model should spend."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    def to_lower_str(self) -> str:
        return self.value

    @classmethod
    def from_lower_str(cls, name: str) -> Optional[ReasoningEffort]:
        """The effort named by a lower-case string, or None."""
        try:
            return cls(name)
        except ValueError:
            return None

    @classmethod
    def from_model_name(cls, model_name: str) -> Tuple[Optional[ReasoningEffort], str]:
        """Split a trailing ``-low``/``-medium``/``-high`` off a model name.

        Returns ``(effort, model_name)``; the name is unchanged when there is no suffix.
        """
        prefix, sep, last = model_name.rpartition("-")
        if sep:
            effort = cls.from_lower_str(last)
            if effort is not None:
                return effort, prefix
        return None, model_name


@dataclass(frozen=True)
class ChatOptions:
    """Options for a chat call; the ``with_*`` setters return new options."""

    temperature: Optional[float] = None
    max_tokens: Optional[int] = None
    top_p: Optional[float] = None
    stop_sequences: Tuple[str, ...] = ()
    # Streaming only
    capture_usage: Optional[bool] = None
    capture_content: Optional[bool] = None
    capture_reasoning_content: Optional[bool] = None
    response_format: Optional[ChatResponseFormat] = None
    # Reasoning
    normalize_reasoning_content: Optional[bool] = None
    reasoning_effort: Optional[ReasoningEffort] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "stop_sequences", _check_stop_sequences(self.stop_sequences))
        if self.max_tokens is not None:
            _check_max_tokens(self.max_tokens)
        if self.response_format is not None:
            _check_response_format(self.response_format)
        if self.reasoning_effort is not None and not isinstance(self.reasoning_effort, ReasoningEffort):
            raise TypeError(
                f"reasoning_effort must be a ReasoningEffort, not {type(self.reasoning_effort).__name__}"
            )

    def _with(self, **changes: Any) -> ChatOptions:
        return dataclasses.replace(self, **changes)

    def with_temperature(self, value: float) -> ChatOptions:
        return self._with(temperature=float(value))

    def with_max_tokens(self, value: int) -> ChatOptions:
        return self._with(max_tokens=value)

    def with_top_p(self, value: float) -> ChatOptions:
        return self._with(top_p=float(value))

    def with_capture_usage(self, value: bool) -> ChatOptions:
        return self._with(capture_usage=bool(value))

    def with_capture_content(self, value: bool) -> ChatOptions:
        return self._with(capture_content=bool(value))

    def with_capture_reasoning_content(self, value: bool) -> ChatOptions:
        return self._with(capture_reasoning_content=bool(value))

    def with_stop_sequences(self, values: Iterable[str]) -> ChatOptions:
        return self._with(stop_sequences=tuple(values))

    def with_normalize_reasoning_content(self, value: bool) -> ChatOptions:
        return self._with(normalize_reasoning_content=bool(value))

    def with_response_format(self, response_format: ChatResponseFormat) -> ChatOptions:
        return self._with(response_format=response_format)

    def with_reasoning_effort(self, value: ReasoningEffort) -> ChatOptions:
        return self._with(reasoning_effort=value)

    def with_json_mode(self, value: bool) -> ChatOptions:
        """Deprecated: use ``with_response_format(JsonMode())``."""
        warnings.warn(
            "with_json_mode is deprecated; use with_response_format(JsonMode())",
            DeprecationWarning,
            stacklevel=2,
        )
        if value:
            return self._with(response_format=JsonMode())
        return self


def _check_stop_sequences(values: Iterable[str]) -> Tuple[str, ...]:
    if isinstance(values, str):
        raise TypeError("stop_sequences must be a sequence of str, not a single str")
    result = tuple(values)
    for value in result:
        if not isinstance(value, str):
            raise TypeError(f"stop sequence must be a str, not {type(value).__name__}")
    return result


def _check_max_tokens(value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"max_tokens must be an int, not {type(value).__name__}")
    if not 0 <= value <= _U32_MAX:
        raise ValueError(f"max_tokens out of range: {value}")


def _check_response_format(value: Any) -> None:
    if not isinstance(value, (JsonMode, JsonSpec)):
        raise TypeError(f"response_format must be JsonMode or JsonSpec, not {type(value).__name__}")


@dataclass(frozen=True)
class ChatOptionsSet:
    """Chat-level options, falling back to the client defaults per property."""

    client: Optional[ChatOptions] = None
    chat: Optional[ChatOptions] = None

    def _pick(self, name: str) -> Any:
        for options in (self.chat, self.client):
            if options is not None:
                value = getattr(options, name)
                if value is not None:
                    return value
        return None

    def temperature(self) -> Optional[float]:
        return self._pick("temperature")

    def max_tokens(self) -> Optional[int]:
        return self._pick("max_tokens")

    def top_p(self) -> Optional[float]:
        return self._pick("top_p")

    def stop_sequences(self) -> Tuple[str, ...]:
        """The chat-level sequences when chat options exist (even if empty), else the client's."""
        if self.chat is not None:
            return self.chat.stop_sequences
        if self.client is not None:
            return self.client.stop_sequences
        return ()

    def capture_usage(self) -> Optional[bool]:
        return self._pick("capture_usage")

    def capture_content(self) -> Optional[bool]:
        return self._pick("capture_content")

    def capture_reasoning_content(self) -> Optional[bool]:
        return self._pick("capture_reasoning_content")

    def response_format(self) -> Optional[ChatResponseFormat]:
        return self._pick("response_format")

    def normalize_reasoning_content(self) -> Optional[bool]:
        return self._pick("normalize_reasoning_content")

    def reasoning_effort(self) -> Optional[ReasoningEffort]:
        return self._pick("reasoning_effort")

    def json_mode(self) -> Optional[bool]:
        """Deprecated: True only for JsonMode, None when no format is set."""
        warnings.warn(
            "json_mode is deprecated; use response_format()",
            DeprecationWarning,
            stacklevel=2,
        )
        response_format = self.response_format()
        if response_format is None:
            return None
        return isinstance(response_format, JsonMode)