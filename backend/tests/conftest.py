import json

import pytest
from fastapi.testclient import TestClient

from finance_analyst.agents.finance.router import get_llm_factory
from finance_analyst.core.llm.base import BaseLLM
from finance_analyst.core.llm.schemas import GenerateConfig, LLMResponse, ToolCall
from finance_analyst.main import app


class FakeLLM(BaseLLM):
    def __init__(self, text: str = "", tool_calls: list[ToolCall] | None = None, error: Exception | None = None):
        self.text = text
        self.tool_calls = tool_calls or []
        self.error = error
        self.calls: list[dict] = []

    def generate(self, messages, config=None, tools=None) -> LLMResponse:
        self.calls.append({"messages": messages, "config": config or GenerateConfig(), "tools": tools})
        if self.error is not None:
            raise self.error
        return LLMResponse(
            text=self.text,
            usage={},
            tool_calls=self.tool_calls,
            finish_reason="tool_calls" if self.tool_calls else "stop",
        )


@pytest.fixture()
def make_llm():
    return FakeLLM


@pytest.fixture()
def make_tool_call():
    def _make(arguments) -> ToolCall:
        raw = arguments if isinstance(arguments, str) else json.dumps(arguments)
        return ToolCall(id="call_1", name="generate_graph_data", arguments=raw)

    return _make


@pytest.fixture()
def fake_llm():
    return FakeLLM(text="Here is the breakdown.")


@pytest.fixture()
def client(fake_llm):
    requested_models: list[str] = []

    def factory(model: str) -> BaseLLM:
        requested_models.append(model)
        return fake_llm

    app.dependency_overrides[get_llm_factory] = lambda: factory
    with TestClient(app) as c:
        c.requested_models = requested_models
        yield c
    app.dependency_overrides.clear()
