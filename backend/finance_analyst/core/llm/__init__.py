from finance_analyst.core.llm.service import clear_llm_cache, create_llm, list_llm_options

__all__ = ["clear_llm_cache", "create_llm", "list_llm_options"]
