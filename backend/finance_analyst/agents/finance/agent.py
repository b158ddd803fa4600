import json
import logging
from typing import Any

from finance_analyst.agents.finance.api_schemas import FinanceChatResponse
from finance_analyst.agents.finance.errors import (
    InvalidChartDataError,
    UpstreamError,
    UNKNOWN_ERROR_MESSAGE,
)
from finance_analyst.agents.finance.prompts import FINANCE_SYSTEM_PROMPT, FINANCE_TOOLS
from finance_analyst.agents.finance.schemas import ChartToolResponse, ChatMessage
from finance_analyst.core.llm.base import BaseLLM
from finance_analyst.core.llm.schemas import GenerateConfig, LLMResponse, ToolCall

TEMPERATURE = 0.7
MAX_TOKENS = 16384

PIE_SEGMENT_KEY = "segment"
_SEGMENT_FALLBACK_KEYS = ("segment", "category", "name")
_MESSAGE_PREVIEW_CHARS = 50

logger = logging.getLogger(__name__)


def chart_color(position: int) -> str:
    return f"hsl(var(--chart-{position}))"


def _first_present(item: dict[str, Any], keys: tuple[str | None, ...]) -> Any:
    for key in keys:
        if key is None:
            continue
        value = item.get(key)
        if value is not None:
            return value
    return None


class FinanceAgent:
    def __init__(self, llm: BaseLLM, log: logging.Logger | None = None):
        self.llm = llm
        self.logger = log or logger

    # ── prompt assembly ──

    @staticmethod
    def _build_llm_messages(messages: list[ChatMessage]) -> list[dict]:
        return [{"role": "system", "content": FINANCE_SYSTEM_PROMPT}] + [
            message.to_llm_message() for message in messages
        ]

    @staticmethod
    def _preview(message: ChatMessage) -> dict[str, str]:
        if isinstance(message.content, str):
            return {"role": message.role, "content": message.content[:_MESSAGE_PREVIEW_CHARS] + "..."}
        return {"role": message.role, "content": "[Complex Content]"}

    # ── chart normalization ──

    @staticmethod
    def _parse_arguments(tool_call: ToolCall) -> dict[str, Any]:
        try:
            payload = json.loads(tool_call.arguments)
        except json.JSONDecodeError as exc:
            raise InvalidChartDataError(f"Invalid tool arguments JSON: {exc}") from exc
        if not isinstance(payload, dict):
            raise InvalidChartDataError("Invalid chart data structure: tool arguments must be an object")
        return payload

    def _validate_structure(self, chart: dict[str, Any]) -> None:
        if not chart.get("chartType"):
            self.logger.error("Missing 'chartType' in chart data")
            raise InvalidChartDataError("Invalid chart data structure: Missing 'chartType'")

        if chart.get("data") is None:
            self.logger.error("'data' is undefined or null in chart data")
            raise InvalidChartDataError("Invalid chart data structure: 'data' is undefined or null")

        if not isinstance(chart["data"], list):
            self.logger.error("'data' should be an array, got %s", type(chart["data"]).__name__)
            raise InvalidChartDataError("Invalid chart data structure: 'data' is not an array")

    def _as_mapping(self, chart: dict[str, Any], key: str) -> dict[str, Any]:
        value = chart.get(key)
        if value is None:
            return {}
        if not isinstance(value, dict):
            self.logger.warning("Ignoring non-object '%s' in chart data: %r", key, value)
            return {}
        return dict(value)

    def _remap_pie(self, chart: dict[str, Any]) -> None:
        config = chart["config"]
        value_key = next(iter(chart["chartConfig"]), None)
        segment_key = config.get("xAxisKey")
        if not isinstance(segment_key, str) or not segment_key:
            segment_key = PIE_SEGMENT_KEY

        remapped = []
        for item in chart["data"]:
            item = item if isinstance(item, dict) else {}
            transformed = {
                "segment": _first_present(item, (segment_key, *_SEGMENT_FALLBACK_KEYS)),
                "value": _first_present(item, (value_key, "value")),
            }
            self.logger.debug("Transformed item: %s", transformed)
            remapped.append(transformed)

        chart["data"] = remapped
        config["xAxisKey"] = PIE_SEGMENT_KEY

    def _colorize(self, chart_config: dict[str, Any]) -> dict[str, dict[str, Any]]:
        processed: dict[str, dict[str, Any]] = {}
        for index, (key, entry) in enumerate(chart_config.items(), start=1):
            processed[key] = {**(entry if isinstance(entry, dict) else {}), "color": chart_color(index)}
            self.logger.debug("Processed chart config for key %s: %s", key, processed[key])
        return processed

    def process_tool_call(self, tool_call: ToolCall) -> ChartToolResponse:
        chart = self._parse_arguments(tool_call)
        self.logger.info("Parsed tool input: %s", json.dumps(chart, ensure_ascii=False))

        self._validate_structure(chart)
        chart["config"] = self._as_mapping(chart, "config")
        chart["chartConfig"] = self._as_mapping(chart, "chartConfig")

        self.logger.info("Transforming data for chart type: %s", chart["chartType"])
        if chart["chartType"] == "pie":
            self._remap_pie(chart)

        chart["chartConfig"] = self._colorize(chart["chartConfig"])

        return ChartToolResponse.model_validate(chart)

    # ── request flow ──

    def _complete(self, messages: list[ChatMessage]) -> LLMResponse:
        try:
            return self.llm.generate(
                messages=self._build_llm_messages(messages),
                config=GenerateConfig(temperature=TEMPERATURE, max_tokens=MAX_TOKENS),
                tools=list(FINANCE_TOOLS),
            )
        except Exception as exc:
            raise UpstreamError(str(exc) or UNKNOWN_ERROR_MESSAGE) from exc

    def execute(self, model: str, messages: list[ChatMessage]) -> FinanceChatResponse:
        self.logger.info(
            "Final chat-completion request: %s",
            {
                "model": model,
                "max_tokens": MAX_TOKENS,
                "temperature": TEMPERATURE,
                "message_count": len(messages),
                "tools": [tool["function"]["name"] for tool in FINANCE_TOOLS],
                "messages": [self._preview(message) for message in messages],
            },
        )
        response = self._complete(messages)
        self.logger.info(
            "Chat-completion response received, finish reason: %s, usage: %s",
            response.finish_reason,
            response.usage,
        )

        tool_call = response.tool_calls[0] if response.tool_calls else None
        self.logger.info("Received tool call: %s", tool_call.model_dump() if tool_call else None)
        self.logger.info("Received text content: %s", response.text)

        chart = None
        if tool_call is not None:
            chart = self.process_tool_call(tool_call)
        else:
            self.logger.info("No tool call to process")

        return FinanceChatResponse(
            content=response.text or "",
            toolUse=chart,
            chartData=chart,
        )
