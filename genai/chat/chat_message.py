"""Chat messages and roles."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Iterable

from genai.chat.message_content import MessageContent
from genai.chat.tool import ToolCall, ToolResponse


class ChatRole(enum.Enum):
    """The role of a chat message."""

    SYSTEM = "System"
    USER = "User"
    ASSISTANT = "Assistant"
    TOOL = "Tool"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ChatMessage:
    """One message of a chat: a role and its content."""

    role: ChatRole
    content: MessageContent

    def __post_init__(self) -> None:
        if not isinstance(self.role, ChatRole):
            raise TypeError(f"role must be a ChatRole, not {type(self.role).__name__}")
        object.__setattr__(self, "content", MessageContent.coerce(self.content))

    @classmethod
    def system(cls, content: Any) -> ChatMessage:
        return cls(ChatRole.SYSTEM, content)

    @classmethod
    def assistant(cls, content: Any) -> ChatMessage:
        return cls(ChatRole.ASSISTANT, content)

    @classmethod
    def user(cls, content: Any) -> ChatMessage:
        return cls(ChatRole.USER, content)

    @classmethod
    def from_tool_calls(cls, tool_calls: Iterable[ToolCall]) -> ChatMessage:
        """An assistant message carrying the model's tool calls."""
        return cls(ChatRole.ASSISTANT, MessageContent.from_tool_calls(tool_calls))

    @classmethod
    def from_tool_response(cls, tool_response: ToolResponse) -> ChatMessage:
        """A tool message carrying one tool response."""
        return cls(ChatRole.TOOL, MessageContent.from_tool_responses([tool_response]))

    @classmethod
    def coerce(cls, value: Any) -> ChatMessage:
        """Accept a ChatMessage, a ToolResponse or a list of ToolCalls."""
        if isinstance(value, ChatMessage):
            return value
        if isinstance(value, ToolResponse):
            return cls.from_tool_response(value)
        if isinstance(value, (list, tuple)) and all(isinstance(item, ToolCall) for item in value):
            return cls.from_tool_calls(value)
        raise TypeError(f"cannot turn {type(value).__name__} into a chat message")