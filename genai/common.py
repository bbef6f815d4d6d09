"""Model identity shared across the library."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Hashable


@dataclass(frozen=True)
class ModelIden:
    """An adapter kind together with a model name."""

    adapter_kind: Hashable
    model_name: str

    def __post_init__(self) -> None:
        if not isinstance(self.model_name, str):
            raise TypeError(f"model_name must be a str, not {type(self.model_name).__name__}")

    @classmethod
    def from_tuple(cls, pair: tuple[Any, str]) -> ModelIden:
        """Build a ModelIden from an ``(adapter_kind, model_name)`` pair."""
        adapter_kind, model_name = pair
        return cls(adapter_kind, model_name)

    def __str__(self) -> str:
        return f"{self.adapter_kind}/{self.model_name}"