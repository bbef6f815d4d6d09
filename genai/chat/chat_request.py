"""The chat request: system content, messages and tools."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator, List, Optional

from genai.chat.chat_message import ChatMessage, ChatRole
from genai.chat.message_content import ContentKind
from genai.chat.tool import Tool


def _check_tool(tool: Any) -> Tool:
    if not isinstance(tool, Tool):
        raise TypeError(f"expected a Tool, not {type(tool).__name__}")
    return tool


@dataclass
class ChatRequest:
    """A chat request. The chainable setters return new requests."""

    messages: List[ChatMessage] = field(default_factory=list)
    system: Optional[str] = None
    tools: Optional[List[Tool]] = None

    def __post_init__(self) -> None:
        self.messages = [ChatMessage.coerce(message) for message in self.messages]
        if self.tools is not None:
            self.tools = [_check_tool(tool) for tool in self.tools]

    @classmethod
    def from_system(cls, content: str) -> ChatRequest:
        """A request with only the system content set."""
        return cls(system=str(content))

    @classmethod
    def from_user(cls, content: str) -> ChatRequest:
        """A request with one user message."""
        return cls([ChatMessage.user(str(content))])

    @classmethod
    def from_messages(cls, messages: Iterable[ChatMessage]) -> ChatRequest:
        return cls(list(messages))

    def with_system(self, system: str) -> ChatRequest:
        return dataclasses.replace(self, system=str(system))

    def append_message(self, message: Any) -> ChatRequest:
        """Append a ChatMessage (or a ToolResponse, or a list of ToolCalls)."""
        return dataclasses.replace(self, messages=[*self.messages, ChatMessage.coerce(message)])

    def append_messages(self, messages: Iterable[Any]) -> ChatRequest:
        return dataclasses.replace(self, messages=[*self.messages, *messages])

    def with_tools(self, tools: Iterable[Tool]) -> ChatRequest:
        return dataclasses.replace(self, tools=list(tools))

    def append_tool(self, tool: Tool) -> ChatRequest:
        return dataclasses.replace(self, tools=[*(self.tools or []), _check_tool(tool)])

    def iter_systems(self) -> Iterator[str]:
        """Yield ``system`` first, then the text of each system message."""
        if self.system is not None:
            yield self.system
        for message in self.messages:
            # System content that is not text is left out.
            if message.role is ChatRole.SYSTEM and message.content.kind is ContentKind.TEXT:
                yield message.content.value

    def combine_systems(self) -> Optional[str]:
        """Join all system content, separated by an empty line; None if there is none."""
        combined: Optional[str] = None
        for system in self.iter_systems():
            if combined is None:
                combined = ""
            if combined.endswith("\n"):
                combined += "\n"
            elif combined:
                combined += "\n\n"
            combined += system
        return combined