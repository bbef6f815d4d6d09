"""HTTP client, JSON responses and delimited web streams."""

__all__ = ["errors", "web_client", "web_stream"]