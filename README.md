# genai

Provider-neutral building blocks for generative AI chat clients: one
vocabulary for chat requests, messages, tools and chat options; hooks
("resolvers") that decide which model, credentials and endpoint a call uses;
and small async HTTP helpers built on `httpx`.

## Building a chat request

```python
from genai.chat.chat_message import ChatMessage
from genai.chat.chat_request import ChatRequest

chat_req = ChatRequest(messages=[
    ChatMessage.system("Be very concise"),
    ChatMessage.system("Explain with bullet points"),
    ChatMessage.user("Why is the sky blue?"),
]).with_system("And end with 'Thank you'")

print(chat_req.combine_systems())
# And end with 'Thank you'
#
# Be very concise
#
# Explain with bullet points
```

`combine_systems()` starts with the request's own `system` text, then appends
the text of every system message, separated by a blank line (one newline only
if the previous text already ends with one). It returns `None` when there is
no system content. The `with_*` and `append_*` methods return new requests.

Message content (`MessageContent`) is text, multi-part content (text and
images), tool calls or tool responses:

```python
from genai.chat.message_content import ContentPart
from genai.chat.tool import Tool, ToolResponse

image_req = ChatRequest().with_system("Answer in one sentence").append_message(
    ChatMessage.user([
        ContentPart.from_text("What is in this picture?"),
        ContentPart.from_image_url("image/jpeg", "https://example.com/duck.jpg"),
    ])
)

tool_req = ChatRequest.from_user("What is the temperature in C, in Paris, France").append_tool(
    Tool("get_weather").with_schema({
        "type": "object",
        "properties": {
            "city": {"type": "string"},
            "country": {"type": "string"},
            "unit": {"type": "string", "enum": ["C", "F"]},
        },
        "required": ["city", "country", "unit"],
    })
)

# A tool response appended to a request becomes a message with the Tool role.
reply_req = tool_req.append_message(ToolResponse("call-1", '{"weather": "Sunny"}'))
```

## Chat options

`ChatOptions` holds per-request settings (temperature, max tokens, top-p, stop
sequences, capture flags, response format, reasoning settings). Its setters
return new options. `ChatOptionsSet` resolves each property from the chat-level
options first and the client defaults second.

```python
from genai.chat.chat_options import ChatOptions, ChatOptionsSet, ReasoningEffort
from genai.chat.response_format import JsonMode, JsonSpec

client_defaults = ChatOptions().with_temperature(0.5).with_capture_usage(True)
options = (
    ChatOptions()
    .with_temperature(0.0)
    .with_stop_sequences(["London"])
    .with_response_format(JsonSpec("some-schema", {"type": "object"}))
)

resolved = ChatOptionsSet(client=client_defaults, chat=options)
resolved.temperature()    # 0.0
resolved.capture_usage()  # True

effort, name = ReasoningEffort.from_model_name("o3-mini-low")
# effort is ReasoningEffort.LOW, name is "o3-mini"
```

## Resolvers and the client

A `Client` holds a `WebClient` and a `ClientConfig`, both fixed once built.
The configuration can carry a `ModelMapper`, an `AuthResolver`, a
`ServiceTargetResolver` and default `ChatOptions`.

```python
from genai.client import Client
from genai.common import ModelIden
from genai.resolver.auth_data import AuthData
from genai.resolver.endpoint import Endpoint

client = (
    Client.builder()
    .with_auth_resolver_fn(lambda model_iden: AuthData.from_single("placeholder"))
    .with_chat_options(ChatOptions().with_capture_content(True))
    .build()
)

target = client.config().resolve_service_target(
    ModelIden("openai", "gpt-4o-mini"),
    default_auth=AuthData.from_env("MY_PROVIDER_API_KEY"),
    default_endpoint=Endpoint.from_static("https://api.example.com/v1/"),
)
```

`resolve_service_target` maps the model, asks the auth resolver (falling back
to `default_auth` when it returns `None`), takes `default_endpoint`, and
finally passes the `ServiceTarget` to the service target resolver. The
defaults may be values or functions of the adapter kind. A `ResolverError`
raised by a resolver is wrapped in `ResolveFailedError` (a `GenAIError`).

`AuthData.from_env(...)` reads the key only when `single_key_value()` is
called; a missing variable raises `ApiKeyEnvNotFoundError`. The `repr` of an
`AuthData` never shows the key or the variable name.

## HTTP helpers

`WebClient` (in `genai.webc.web_client`) sends GET requests and JSON POST
requests and returns a `WebResponse` with the parsed JSON body. A non-success
status raises `ResponseFailedStatusError`, a non-JSON content type raises
`ResponseFailedNotJsonError`, and transport failures raise
`RequestFailedError`.

`WebStream` (in `genai.webc.web_stream`) is an async iterator of string
messages split out of a streamed response, either by a delimiter or as the
items of a pretty-printed JSON array. The splitting functions can be used on
their own:

```python
from genai.webc.web_stream import split_delimited

buff = split_delimited("a\nb\nc", None, "\n")
# buff.first_message == "a", buff.next_messages == ["b"],
# buff.candidate_message == "c"  (kept until the next buffer completes it)
```

## What this package does not do

There are no provider adapters here. The `Client` does not send chat requests,
list models or know any provider's endpoint or credentials by itself: callers
supply the defaults to `resolve_service_target` and build provider payloads
themselves. There are no chat response or chat stream event types and no
stream printer.