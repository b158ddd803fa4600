import logging
from collections.abc import Callable
from typing import Any

from finance_analyst.agents.finance import create_finance_agent
from finance_analyst.agents.finance.api_schemas import (
    FinanceChatRequest,
    FinanceChatResponse,
    ModelOptionsResponse,
)
from finance_analyst.agents.finance.errors import ValidationError
from finance_analyst.agents.finance.messages import build_messages
from finance_analyst.core.llm import create_llm, list_llm_options
from finance_analyst.core.llm.base import BaseLLM

logger = logging.getLogger(__name__)

LLMFactory = Callable[[str], BaseLLM]


def default_llm_factory(model: str) -> BaseLLM:
    return create_llm(model=model)


def _describe_payload(payload: Any) -> dict[str, Any]:
    body = payload if isinstance(payload, dict) else {}
    messages = body.get("messages")
    file_data = body.get("fileData")
    return {
        "has_messages": bool(messages),
        "message_count": len(messages) if isinstance(messages, list) else None,
        "has_file_data": bool(file_data),
        "file_type": file_data.get("mediaType") if isinstance(file_data, dict) else None,
        "model": body.get("model"),
    }


def validate_payload(payload: Any) -> FinanceChatRequest:
    """Run the request pre-checks, then parse the body.

    Only the two explicit checks map to 400; a body that passes them but is
    otherwise malformed fails request parsing and surfaces as a server error.
    """
    body = payload if isinstance(payload, dict) else {}

    if not isinstance(body.get("messages"), list):
        logger.warning("Messages array is missing or invalid")
        raise ValidationError("Messages array is required")

    if not body.get("model"):
        logger.warning("Model selection is missing")
        raise ValidationError("Model selection is required")

    return FinanceChatRequest.model_validate(body)


def run_finance_chat(payload: Any, llm_factory: LLMFactory = default_llm_factory) -> FinanceChatResponse:
    logger.info("Initial request data: %s", _describe_payload(payload))
    request = validate_payload(payload)

    # Attachment errors must surface before any upstream client is built.
    messages = build_messages(request)

    agent = create_finance_agent(model=request.model, llm=llm_factory(request.model))
    response = agent.execute(request.model, messages)

    logger.info("Returning processed response, has chart: %s", response.chartData is not None)
    return response


def get_model_options() -> ModelOptionsResponse:
    return ModelOptionsResponse.model_validate(list_llm_options())
