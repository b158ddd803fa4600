from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class ImageSource(BaseModel):
    type: Literal["base64"] = "base64"
    media_type: str
    data: str


class ImageContent(BaseModel):
    type: Literal["image"] = "image"
    source: ImageSource


# Closed union of what a transcript entry can carry.
MessageContent = str | ImageContent


class ChatMessage(BaseModel):
    role: str
    content: MessageContent

    def to_llm_message(self) -> dict:
        if isinstance(self.content, ImageContent):
            return {"role": self.role, "content": self.content.model_dump()}
        return {"role": self.role, "content": self.content}


# The model's chart output is open-ended: beyond chartType and a data list,
# fields pass through to the renderer as given.


class ChartMeta(BaseModel):
    model_config = ConfigDict(extra="allow")

    title: Any = ""
    description: Any = ""
    trend: Any = None
    footer: Any = None
    totalLabel: Any = None
    xAxisKey: Any = None


class SeriesConfig(BaseModel):
    model_config = ConfigDict(extra="allow")

    label: Any = ""
    stacked: Any = None
    color: str | None = None


class ChartToolResponse(BaseModel):
    """Chart spec handed to the front-end chart renderer."""

    model_config = ConfigDict(extra="allow")

    chartType: Any
    config: ChartMeta = Field(default_factory=ChartMeta)
    data: list[Any]
    chartConfig: dict[str, SeriesConfig] = Field(default_factory=dict)
