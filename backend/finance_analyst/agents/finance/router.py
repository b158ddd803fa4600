import logging

from fastapi import APIRouter, Depends, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from finance_analyst.agents.finance.api_schemas import FinanceChatResponse, ModelOptionsResponse
from finance_analyst.agents.finance.errors import FinanceError, UNKNOWN_ERROR_MESSAGE
from finance_analyst.agents.finance.service import (
    LLMFactory,
    default_llm_factory,
    get_model_options,
    run_finance_chat,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Finance"], prefix="/api/finance")


def get_llm_factory() -> LLMFactory:
    return default_llm_factory


def _error_response(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(content={"error": message}, status_code=status_code)


@router.post("", response_model=FinanceChatResponse)
async def finance_chat_endpoint(
    request: Request,
    llm_factory: LLMFactory = Depends(get_llm_factory),
):
    try:
        payload = await request.json()
        result = await run_in_threadpool(run_finance_chat, payload, llm_factory=llm_factory)
    except FinanceError as exc:
        if exc.status_code >= 500:
            logger.exception("Finance API error: %s", exc.message)
        return _error_response(exc.message, exc.status_code)
    except Exception as exc:
        logger.exception("Finance API error")
        return _error_response(str(exc) or UNKNOWN_ERROR_MESSAGE, 500)

    return JSONResponse(
        content=result.to_payload(),
        headers={"Cache-Control": "no-cache"},
    )


@router.get("/models", response_model=ModelOptionsResponse)
async def list_models_endpoint():
    return get_model_options()
