import pytest

from genai.chat.chat_message import ChatMessage, ChatRole
from genai.chat.message_content import ContentKind, ContentPart, MessageContent
from genai.chat.tool import ToolCall, ToolResponse


@pytest.mark.parametrize(
    "factory, role",
    [
        (ChatMessage.system, ChatRole.SYSTEM),
        (ChatMessage.user, ChatRole.USER),
        (ChatMessage.assistant, ChatRole.ASSISTANT),
    ],
)
def test_constructors_set_role_and_text(factory, role):
    message = factory("Answer in one sentence")
    assert message.role is role
    assert message.content.text() == "Answer in one sentence"


def test_role_display():
    assert str(ChatRole.USER) == "User"
    assert ChatRole("Tool") is ChatRole.TOOL


def test_user_message_with_parts():
    parts = [
        ContentPart.from_text("What is in this picture?"),
        ContentPart.from_image_base64("image/jpeg", "aGVsbG8="),
    ]
    message = ChatMessage.user(parts)
    assert message.content.kind is ContentKind.PARTS
    assert list(message.content.value) == parts


def test_from_tool_calls_is_assistant():
    calls = [ToolCall("call-1", "get_weather", {"city": "Paris"})]
    message = ChatMessage.from_tool_calls(calls)
    assert message.role is ChatRole.ASSISTANT
    assert message.content == MessageContent.from_tool_calls(calls)


def test_from_tool_response_is_tool():
    response = ToolResponse("call-1", '{"weather": "Sunny", "temperature": "32C"}')
    message = ChatMessage.from_tool_response(response)
    assert message.role is ChatRole.TOOL
    assert message.content.value == (response,)


def test_coerce_variants():
    response = ToolResponse("call-1", "done")
    calls = [ToolCall("call-1", "f", {})]
    existing = ChatMessage.user("hi")
    assert ChatMessage.coerce(existing) is existing
    assert ChatMessage.coerce(response) == ChatMessage.from_tool_response(response)
    assert ChatMessage.coerce(calls) == ChatMessage.from_tool_calls(calls)


def test_coerce_rejects_plain_str():
    with pytest.raises(TypeError):
        ChatMessage.coerce("hi")


def test_role_must_be_chat_role():
    with pytest.raises(TypeError):
        ChatMessage("user", "hi")