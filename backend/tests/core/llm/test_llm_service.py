import pytest

from finance_analyst.core.llm import clear_llm_cache, create_llm, list_llm_options
from finance_analyst.core.llm.providers.openai import OpenAIProvider


@pytest.fixture(autouse=True)
def _fresh_cache():
    clear_llm_cache()
    yield
    clear_llm_cache()


def test_create_llm_caches_per_model():
    first = create_llm(model="gpt-4o", api_key="test")
    second = create_llm(model="gpt-4o", api_key="test")
    other = create_llm(model="gpt-4o-mini", api_key="test")

    assert isinstance(first, OpenAIProvider)
    assert first is second
    assert other is not first


def test_create_llm_requires_api_key(monkeypatch):
    monkeypatch.setattr("finance_analyst.core.llm.service.settings.OPENAI_API_KEY", "")

    with pytest.raises(ValueError, match="Missing API key"):
        create_llm(model="gpt-4o")


def test_create_llm_rejects_unknown_provider():
    with pytest.raises(ValueError, match="Unsupported LLM provider"):
        create_llm(model="gpt-4o", provider="acme", api_key="test")


def test_list_llm_options():
    options = list_llm_options()

    assert options["provider"] == "openai"
    assert "gpt-4o" in options["models"]
