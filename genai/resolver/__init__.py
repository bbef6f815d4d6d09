"""Hooks that resolve credentials, models and service targets."""

__all__ = ["auth_data", "endpoint", "errors", "resolvers"]