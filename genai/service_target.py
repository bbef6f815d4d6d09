"""The resolved destination of a service call."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any

from genai.common import ModelIden
from genai.resolver.auth_data import AuthData
from genai.resolver.endpoint import Endpoint


@dataclass(frozen=True)
class ServiceTarget:
    """Endpoint, authentication and model for one service call."""

    endpoint: Endpoint
    auth: AuthData
    model: ModelIden

    def replace(self, **kwargs: Any) -> ServiceTarget:
        """Return a copy with the given fields replaced."""
        return dataclasses.replace(self, **kwargs)