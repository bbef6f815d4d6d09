"""Chat requests, messages, content, tools, options and response formats."""

__all__ = [
    "chat_message",
    "chat_options",
    "chat_request",
    "message_content",
    "response_format",
    "tool",
]