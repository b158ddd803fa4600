from finance_analyst.agents.finance.agent import FinanceAgent
from finance_analyst.core.llm import create_llm
from finance_analyst.core.llm.base import BaseLLM


def create_finance_agent(model: str, llm: BaseLLM | None = None) -> FinanceAgent:
    finance_llm = llm or create_llm(model=model)
    return FinanceAgent(llm=finance_llm)


__all__ = ["FinanceAgent", "create_finance_agent"]
