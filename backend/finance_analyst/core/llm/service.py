from typing import Dict, Tuple

from finance_analyst.core.config import settings
from finance_analyst.core.llm.base import BaseLLM
from finance_analyst.core.llm.providers.openai import OpenAIProvider

DEFAULT_PROVIDER = "openai"

LLM_REGISTRY = {
    "openai": OpenAIProvider,
}

PROVIDER_CONFIG: Dict[str, dict[str, str]] = {
    "openai": {
        "api_key_attr": "OPENAI_API_KEY",
        "base_url_attr": "OPENAI_BASE_URL",
    },
}

# Models that support function tools and image input.
LLM_MODEL_REGISTRY: Dict[str, list[str]] = {
    "openai": [
        "gpt-4.1",
        "gpt-4.1-mini",
        "gpt-4.1-nano",
        "gpt-4o",
        "gpt-4o-mini",
        "gpt-4-turbo",
        "o3",
        "o4-mini",
    ],
}


def list_llm_options(provider: str = DEFAULT_PROVIDER) -> dict[str, object]:
    return {"provider": provider, "models": LLM_MODEL_REGISTRY.get(provider, [])}


# cache instance per (provider, model)
_instances: Dict[Tuple[str, str], BaseLLM] = {}


def _resolve_setting(provider: str, key: str) -> str:
    attr = PROVIDER_CONFIG.get(provider, {}).get(key, "")
    if not attr:
        return ""
    return str(getattr(settings, attr, "") or "")


def create_llm(
    model: str,
    provider: str = DEFAULT_PROVIDER,
    api_key: str | None = None,
    base_url: str | None = None,
    use_cache: bool = True,
) -> BaseLLM:
    if provider not in LLM_REGISTRY:
        raise ValueError(f"Unsupported LLM provider: {provider}")
    if not model:
        raise ValueError("Model is required to create an LLM client.")

    api_key = api_key or _resolve_setting(provider, "api_key_attr")
    base_url = base_url or _resolve_setting(provider, "base_url_attr") or None
    if not api_key:
        attr = PROVIDER_CONFIG.get(provider, {}).get("api_key_attr", "")
        hint = f" Set {attr} in env." if attr else ""
        raise ValueError(f"Missing API key for provider '{provider}'.{hint}")
    key = (provider, model)

    if use_cache and key in _instances:
        return _instances[key]

    llm_class = LLM_REGISTRY[provider]

    instance = llm_class(
        api_key=api_key,
        model=model,
        base_url=base_url,
    )

    if use_cache:
        _instances[key] = instance

    return instance


def clear_llm_cache() -> None:
    """Clear cached LLM instances so next call picks up new config."""
    _instances.clear()
