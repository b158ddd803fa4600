from types import SimpleNamespace
from unittest.mock import MagicMock

from finance_analyst.core.llm.providers.openai import OpenAIProvider
from finance_analyst.core.llm.schemas import GenerateConfig


def test_build_params_omits_none_optionals():
    provider = OpenAIProvider(api_key="test", model="gpt-4o")

    params = provider._build_params(
        messages=[{"role": "user", "content": "hello"}],
        config=GenerateConfig(max_tokens=None, stop=None),
    )

    assert params["model"] == "gpt-4o"
    assert "max_tokens" not in params
    assert "stop" not in params
    assert "tools" not in params


def test_build_params_includes_optional_values_when_provided():
    provider = OpenAIProvider(api_key="test", model="gpt-4o")
    tools = [{"type": "function", "function": {"name": "generate_graph_data"}}]

    params = provider._build_params(
        messages=[{"role": "user", "content": "hello"}],
        config=GenerateConfig(max_tokens=128, stop=["DONE"]),
        tools=tools,
    )

    assert params["max_tokens"] == 128
    assert params["stop"] == ["DONE"]
    assert params["tools"] == tools


def test_build_params_converts_image_reference_to_data_url():
    provider = OpenAIProvider(api_key="test", model="gpt-4o")
    image = {"type": "image", "source": {"type": "base64", "media_type": "image/png", "data": "iVBORw0KGgo="}}

    params = provider._build_params(
        messages=[
            {"role": "system", "content": "sys"},
            {"role": "user", "content": image},
        ],
        config=GenerateConfig(),
    )

    assert params["messages"][0] == {"role": "system", "content": "sys"}
    assert params["messages"][1]["content"] == [
        {"type": "image_url", "image_url": {"url": "data:image/png;base64,iVBORw0KGgo="}}
    ]


def test_generate_parses_text_and_tool_calls():
    provider = OpenAIProvider(api_key="test", model="gpt-4o")
    tool_call = SimpleNamespace(
        id="call_9",
        function=SimpleNamespace(name="generate_graph_data", arguments='{"chartType": "bar"}'),
    )
    completion = SimpleNamespace(
        choices=[
            SimpleNamespace(
                message=SimpleNamespace(content=None, tool_calls=[tool_call]),
                finish_reason="tool_calls",
            )
        ],
        usage=SimpleNamespace(prompt_tokens=12, completion_tokens=7, total_tokens=19),
    )
    provider._client = MagicMock()
    provider._client.chat.completions.create.return_value = completion

    response = provider.generate(
        messages=[{"role": "user", "content": "chart it"}],
        config=GenerateConfig(temperature=0.7, max_tokens=16384),
    )

    assert response.text == ""
    assert response.finish_reason == "tool_calls"
    assert response.usage["total_tokens"] == 19
    assert len(response.tool_calls) == 1
    assert response.tool_calls[0].id == "call_9"
    assert response.tool_calls[0].name == "generate_graph_data"
    assert response.tool_calls[0].arguments == '{"chartType": "bar"}'
    kwargs = provider._client.chat.completions.create.call_args.kwargs
    assert kwargs["temperature"] == 0.7
    assert kwargs["max_tokens"] == 16384


def test_generate_without_usage_or_tool_calls():
    provider = OpenAIProvider(api_key="test", model="gpt-4o")
    completion = SimpleNamespace(
        choices=[
            SimpleNamespace(
                message=SimpleNamespace(content="plain answer", tool_calls=None),
                finish_reason="stop",
            )
        ],
        usage=None,
    )
    provider._client = MagicMock()
    provider._client.chat.completions.create.return_value = completion

    response = provider.generate(messages=[{"role": "user", "content": "hi"}])

    assert response.text == "plain answer"
    assert response.usage == {}
    assert response.tool_calls == []
