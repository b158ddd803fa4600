from pydantic import BaseModel, Field


class GenerateConfig(BaseModel):
    temperature: float = 1.0
    max_tokens: int | None = None
    top_p: float = 1.0
    stop: list[str] | None = None


class ToolCall(BaseModel):
    id: str = ""
    name: str
    # Raw JSON string exactly as returned by the model
    arguments: str = ""


class LLMResponse(BaseModel):
    text: str
    usage: dict
    tool_calls: list[ToolCall] = Field(default_factory=list)
    finish_reason: str | None = None
