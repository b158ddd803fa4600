from abc import ABC, abstractmethod

from finance_analyst.core.llm.schemas import GenerateConfig, LLMResponse


class BaseLLM(ABC):
    @abstractmethod
    def generate(
        self,
        messages: list[dict],
        config: GenerateConfig | None = None,
        tools: list[dict] | None = None,
    ) -> LLMResponse:
        """Generate a response from the LLM based on the provided messages.

        ``tools`` is a list of function-tool definitions in the chat-completions
        format; any tool calls the model makes are returned on the response.
        """
        pass
