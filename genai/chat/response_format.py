"""Response formats for structured output."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Optional, Union


@dataclass(frozen=True)
class JsonMode:
    """Ask for a well-formed JSON reply (the prompt should ask for JSON too)."""


@dataclass(frozen=True)
class JsonSpec:
    """A named JSON schema the reply must follow.

    Some providers allow only letters, digits, ``-`` and ``_`` in ``name``.
    """

    name: str
    schema: Any
    description: Optional[str] = None

    def __post_init__(self) -> None:
        if not isinstance(self.name, str):
            raise TypeError(f"spec name must be a str, not {type(self.name).__name__}")

    def with_description(self, description: str) -> JsonSpec:
        """Return a copy with the given description."""
        return dataclasses.replace(self, description=str(description))


ChatResponseFormat = Union[JsonMode, JsonSpec]