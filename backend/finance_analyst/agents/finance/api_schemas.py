from typing import Any

from pydantic import BaseModel, Field

from finance_analyst.agents.finance.schemas import ChartToolResponse, MessageContent


class HistoryMessage(BaseModel):
    role: str
    content: MessageContent


class FileAttachment(BaseModel):
    base64: str | None = None
    mediaType: str | None = None
    isText: bool = False
    fileName: str = ""


class FinanceChatRequest(BaseModel):
    messages: list[HistoryMessage] = Field(default_factory=list)
    model: str
    fileData: FileAttachment | None = None


class FinanceChatResponse(BaseModel):
    content: str = ""
    toolUse: ChartToolResponse | None = None
    chartData: ChartToolResponse | None = None

    def to_payload(self) -> dict[str, Any]:
        # exclude_unset keeps optional chart fields the model never sent out of the JSON
        return self.model_dump(mode="json", exclude_unset=True)


class ModelOptionsResponse(BaseModel):
    provider: str
    models: list[str]
