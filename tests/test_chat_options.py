import pytest

from genai.chat.chat_options import ChatOptions, ChatOptionsSet, ReasoningEffort
from genai.chat.response_format import JsonMode, JsonSpec


def test_reasoning_effort_from_model_name_with_suffix():
    assert ReasoningEffort.from_model_name("o3-mini-low") == (ReasoningEffort.LOW, "o3-mini")


@pytest.mark.parametrize("name", ["o3-mini", "gpt-4o", "deepseek-chat", "plain"])
def test_reasoning_effort_from_model_name_without_suffix(name):
    assert ReasoningEffort.from_model_name(name) == (None, name)


@pytest.mark.parametrize("effort", list(ReasoningEffort))
def test_reasoning_effort_lower_str_round_trip(effort):
    assert ReasoningEffort.from_lower_str(effort.to_lower_str()) is effort


def test_reasoning_effort_lower_str_values():
    parsed = [ReasoningEffort.from_lower_str(name) for name in ("low", "medium", "high")]
    assert parsed == [ReasoningEffort.LOW, ReasoningEffort.MEDIUM, ReasoningEffort.HIGH]


@pytest.mark.parametrize("name", ["High", "LOW", "", "extreme"])
def test_reasoning_effort_unknown_names(name):
    assert ReasoningEffort.from_lower_str(name) is None


def test_setters_return_new_options():
    base = ChatOptions()
    changed = base.with_temperature(0.5)
    assert base.temperature is None
    assert changed.temperature == 0.5


def test_setters_chain():
    options = (
        ChatOptions()
        .with_max_tokens(100)
        .with_top_p(0.9)
        .with_capture_usage(True)
        .with_capture_content(True)
        .with_capture_reasoning_content(False)
        .with_stop_sequences(["London"])
        .with_normalize_reasoning_content(True)
        .with_reasoning_effort(ReasoningEffort.HIGH)
    )
    assert options.max_tokens == 100
    assert options.top_p == 0.9
    assert options.capture_usage is True
    assert options.capture_content is True
    assert options.capture_reasoning_content is False
    assert options.stop_sequences == ("London",)
    assert options.normalize_reasoning_content is True
    assert options.reasoning_effort is ReasoningEffort.HIGH


def test_with_response_format_json_spec():
    spec = JsonSpec("some-schema", {"type": "object"})
    assert ChatOptions().with_response_format(spec).response_format == spec


def test_with_response_format_rejects_other_values():
    with pytest.raises(TypeError):
        ChatOptions().with_response_format("json")


def test_with_max_tokens_rejects_negative():
    with pytest.raises(ValueError):
        ChatOptions().with_max_tokens(-1)


def test_with_stop_sequences_rejects_single_string():
    with pytest.raises(TypeError):
        ChatOptions().with_stop_sequences("London")


def test_with_json_mode_true_sets_json_mode():
    with pytest.warns(DeprecationWarning):
        options = ChatOptions().with_json_mode(True)
    assert options.response_format == JsonMode()


def test_with_json_mode_false_keeps_format():
    with pytest.warns(DeprecationWarning):
        options = ChatOptions().with_json_mode(False)
    assert options.response_format is None


def test_options_set_prefers_chat_value():
    options_set = ChatOptionsSet(
        client=ChatOptions().with_temperature(0.2).with_max_tokens(10),
        chat=ChatOptions().with_temperature(0.7),
    )
    assert options_set.temperature() == 0.7
    assert options_set.max_tokens() == 10


def test_options_set_falls_back_to_client():
    options_set = ChatOptionsSet(
        client=ChatOptions().with_capture_content(True).with_reasoning_effort(ReasoningEffort.MEDIUM),
        chat=ChatOptions(),
    )
    assert options_set.capture_content() is True
    assert options_set.reasoning_effort() is ReasoningEffort.MEDIUM
    assert options_set.capture_usage() is None


def test_options_set_empty():
    options_set = ChatOptionsSet()
    assert options_set.top_p() is None
    assert options_set.response_format() is None
    assert options_set.stop_sequences() == ()


def test_stop_sequences_chat_level_wins_even_when_empty():
    options_set = ChatOptionsSet(
        client=ChatOptions().with_stop_sequences(["London"]),
        chat=ChatOptions(),
    )
    assert options_set.stop_sequences() == ()


def test_stop_sequences_from_client_without_chat():
    options_set = ChatOptionsSet(client=ChatOptions().with_stop_sequences(["London"]))
    assert options_set.stop_sequences() == ("London",)


@pytest.mark.parametrize(
    "response_format, expected",
    [(None, None), (JsonMode(), True), (JsonSpec("some-schema", {}), False)],
)
def test_json_mode(response_format, expected):
    options_set = ChatOptionsSet(chat=ChatOptions(response_format=response_format))
    with pytest.warns(DeprecationWarning):
        assert options_set.json_mode() is expected