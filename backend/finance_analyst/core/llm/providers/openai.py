from typing import Any

from openai import OpenAI

from finance_analyst.core.llm.base import BaseLLM
from finance_analyst.core.llm.schemas import GenerateConfig, LLMResponse, ToolCall


class OpenAIProvider(BaseLLM):
    def __init__(self, api_key: str, model: str, base_url: str | None = None):
        self._client = OpenAI(api_key=api_key, base_url=base_url or None)
        self._model = model

    @staticmethod
    def _convert_content(content: Any) -> Any:
        """Map an image reference to an OpenAI ``image_url`` part.

        Image references look like
        ``{"type": "image", "source": {"type": "base64", "media_type": ..., "data": ...}}``.
        Strings and lists of parts pass through untouched.
        """
        if isinstance(content, dict) and content.get("type") == "image":
            source = content.get("source") or {}
            data_url = f"data:{source.get('media_type')};base64,{source.get('data')}"
            return [{"type": "image_url", "image_url": {"url": data_url}}]
        return content

    def _convert_messages(self, messages: list[dict]) -> list[dict]:
        return [
            {**message, "content": self._convert_content(message.get("content", ""))}
            for message in messages
        ]

    def _build_params(
        self,
        messages: list[dict],
        config: GenerateConfig,
        tools: list[dict] | None = None,
    ) -> dict:
        params = {
            "model": self._model,
            "messages": self._convert_messages(messages),
            "temperature": config.temperature,
            "top_p": config.top_p,
        }
        if config.max_tokens is not None:
            params["max_tokens"] = config.max_tokens
        if config.stop is not None:
            params["stop"] = config.stop
        if tools:
            params["tools"] = tools
        return params

    @staticmethod
    def _parse_tool_calls(message: Any) -> list[ToolCall]:
        calls: list[ToolCall] = []
        for call in getattr(message, "tool_calls", None) or []:
            function = getattr(call, "function", None)
            if function is None:
                continue
            calls.append(
                ToolCall(
                    id=getattr(call, "id", "") or "",
                    name=function.name,
                    arguments=function.arguments or "",
                )
            )
        return calls

    def generate(
        self,
        messages: list[dict],
        config: GenerateConfig | None = None,
        tools: list[dict] | None = None,
    ) -> LLMResponse:
        config = config or GenerateConfig()

        response = self._client.chat.completions.create(
            **self._build_params(messages, config, tools),
        )
        choice = response.choices[0]

        usage = {}
        if getattr(response, "usage", None):
            usage = {
                "prompt_tokens": response.usage.prompt_tokens,
                "completion_tokens": response.usage.completion_tokens,
                "total_tokens": response.usage.total_tokens,
            }

        return LLMResponse(
            text=choice.message.content or "",
            usage=usage,
            tool_calls=self._parse_tool_calls(choice.message),
            finish_reason=choice.finish_reason,
        )
