"""Content of a chat message: text, parts, tool calls or tool responses."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Iterable, Optional, Union

from genai.chat.tool import ToolCall, ToolResponse


@dataclass(frozen=True)
class ImageSource:
    """Where an image comes from: a URL or base64-encoded data."""

    url: Optional[str] = None
    base64: Optional[str] = None

    def __post_init__(self) -> None:
        if (self.url is None) == (self.base64 is None):
            raise ValueError("an image source needs exactly one of url or base64")
        for value in (self.url, self.base64):
            if value is not None and not isinstance(value, str):
                raise TypeError(f"image source must be a str, not {type(value).__name__}")

    @classmethod
    def from_url(cls, url: str) -> ImageSource:
        """Image reachable at ``url`` (few services support this)."""
        return cls(url=url)

    @classmethod
    def from_base64(cls, data: str) -> ImageSource:
        """Image given as a base64 string."""
        return cls(base64=data)

    @property
    def is_url(self) -> bool:
        return self.url is not None


@dataclass(frozen=True)
class ContentPart:
    """One part of a multi-part message: either text or an image."""

    text: Optional[str] = None
    content_type: Optional[str] = None
    source: Optional[ImageSource] = None

    def __post_init__(self) -> None:
        if self.text is not None:
            if not isinstance(self.text, str):
                raise TypeError(f"text part must be a str, not {type(self.text).__name__}")
            if self.content_type is not None or self.source is not None:
                raise ValueError("a text part cannot carry an image")
        else:
            if self.content_type is None or self.source is None:
                raise ValueError("an image part needs a content_type and a source")
            if not isinstance(self.source, ImageSource):
                raise TypeError(f"source must be an ImageSource, not {type(self.source).__name__}")

    @classmethod
    def from_text(cls, text: str) -> ContentPart:
        return cls(text=text)

    @classmethod
    def from_image_base64(cls, content_type: str, content: str) -> ContentPart:
        return cls(content_type=content_type, source=ImageSource.from_base64(content))

    @classmethod
    def from_image_url(cls, content_type: str, url: str) -> ContentPart:
        return cls(content_type=content_type, source=ImageSource.from_url(url))

    @property
    def is_image(self) -> bool:
        return self.source is not None


def _coerce_part(part: Union[ContentPart, str]) -> ContentPart:
    if isinstance(part, ContentPart):
        return part
    if isinstance(part, str):
        return ContentPart.from_text(part)
    raise TypeError(f"cannot use {type(part).__name__} as a content part")


class ContentKind(enum.Enum):
    """The kind of a MessageContent."""

    TEXT = "Text"
    PARTS = "Parts"
    TOOL_CALLS = "ToolCalls"
    TOOL_RESPONSES = "ToolResponses"


_ITEM_TYPES = {
    ContentKind.PARTS: ContentPart,
    ContentKind.TOOL_CALLS: ToolCall,
    ContentKind.TOOL_RESPONSES: ToolResponse,
}


@dataclass(frozen=True)
class MessageContent:
    """Message content; ``value`` is a str for text, else a tuple of items."""

    kind: ContentKind
    value: Union[str, tuple]

    def __post_init__(self) -> None:
        if self.kind is ContentKind.TEXT:
            if not isinstance(self.value, str):
                raise TypeError(f"text content must be a str, not {type(self.value).__name__}")
            return
        items = tuple(self.value)
        item_type = _ITEM_TYPES[self.kind]
        for item in items:
            if not isinstance(item, item_type):
                raise TypeError(
                    f"{self.kind.value} content cannot hold {type(item).__name__}"
                )
        object.__setattr__(self, "value", items)

    @classmethod
    def from_text(cls, content: str) -> MessageContent:
        return cls(ContentKind.TEXT, content)

    @classmethod
    def from_parts(cls, parts: Iterable[Union[ContentPart, str]]) -> MessageContent:
        return cls(ContentKind.PARTS, tuple(_coerce_part(part) for part in parts))

    @classmethod
    def from_tool_calls(cls, tool_calls: Iterable[ToolCall]) -> MessageContent:
        return cls(ContentKind.TOOL_CALLS, tuple(tool_calls))

    @classmethod
    def from_tool_responses(cls, tool_responses: Iterable[ToolResponse]) -> MessageContent:
        return cls(ContentKind.TOOL_RESPONSES, tuple(tool_responses))

    @classmethod
    def coerce(cls, value: Any) -> MessageContent:
        """Turn a str, ToolResponse or list of parts/calls/responses into content.

        An empty list becomes empty parts.
        """
        if isinstance(value, MessageContent):
            return value
        if isinstance(value, str):
            return cls.from_text(value)
        if isinstance(value, ContentPart):
            return cls.from_parts([value])
        if isinstance(value, ToolResponse):
            return cls.from_tool_responses([value])
        if isinstance(value, (list, tuple)):
            items = list(value)
            if all(isinstance(item, ToolCall) for item in items) and items:
                return cls.from_tool_calls(items)
            if all(isinstance(item, ToolResponse) for item in items) and items:
                return cls.from_tool_responses(items)
            if all(isinstance(item, (ContentPart, str)) for item in items):
                return cls.from_parts(items)
            raise TypeError("a list of content must hold one kind of item")
        raise TypeError(f"cannot turn {type(value).__name__} into message content")

    def text(self) -> Optional[str]:
        """The text, only for text content; parts are not concatenated."""
        return self.value if self.kind is ContentKind.TEXT else None

    def is_empty(self) -> bool:
        """True if the text, or the list of items, is empty."""
        return len(self) == 0

    def __len__(self) -> int:
        return len(self.value)