"""Tool definitions, tool calls made by a model, and responses to them."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class Tool:
    """A tool (typically a function) the model may call.

    ``schema`` is the JSON schema of the tool parameters.
    """

    name: str
    description: Optional[str] = None
    schema: Optional[Any] = None

    def __post_init__(self) -> None:
        if not isinstance(self.name, str):
            raise TypeError(f"tool name must be a str, not {type(self.name).__name__}")

    def with_description(self, description: str) -> Tool:
        """Return a copy with the given description."""
        return dataclasses.replace(self, description=str(description))

    def with_schema(self, parameters: Any) -> Tool:
        """Return a copy with the given parameter schema."""
        return dataclasses.replace(self, schema=parameters)


@dataclass(frozen=True)
class ToolCall:
    """A function call requested by the model."""

    call_id: str
    fn_name: str
    fn_arguments: Any


@dataclass(frozen=True)
class ToolResponse:
    """The result of a tool call, sent back to the model."""

    call_id: str
    content: str

    def __post_init__(self) -> None:
        if not isinstance(self.call_id, str):
            raise TypeError(f"call_id must be a str, not {type(self.call_id).__name__}")
        if not isinstance(self.content, str):
            raise TypeError(f"content must be a str, not {type(self.content).__name__}")