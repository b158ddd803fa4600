import base64
import binascii
import logging

from finance_analyst.agents.finance.api_schemas import FileAttachment, FinanceChatRequest
from finance_analyst.agents.finance.errors import FileProcessingError, ValidationError
from finance_analyst.agents.finance.prompts import FILE_CONTENT_TEMPLATE
from finance_analyst.agents.finance.schemas import ChatMessage, ImageContent, ImageSource

_TEXT_PREVIEW_CHARS = 100

logger = logging.getLogger(__name__)


def decode_text(payload: str) -> str:
    """Decode a base64 payload as UTF-8, ignoring embedded whitespace and missing padding."""
    compact = "".join(payload.split())
    compact += "=" * (-len(compact) % 4)
    return base64.b64decode(compact, validate=True).decode("utf-8")


def attach_file(
    messages: list[ChatMessage],
    attachment: FileAttachment,
    log: logging.Logger = logger,
) -> None:
    """Merge *attachment* into the last message of *messages* in place."""
    log.info(
        "Processing file data, media type: %s, is text: %s",
        attachment.mediaType,
        attachment.isText,
    )
    if not attachment.base64:
        log.error("No base64 data received")
        raise ValidationError("No file data")

    try:
        if not messages:
            raise IndexError("no message to attach the file to")
        last = messages[-1]

        if attachment.isText:
            text = decode_text(attachment.base64)
            log.info("Decoded text content: %s...", text[:_TEXT_PREVIEW_CHARS])
            messages[-1] = ChatMessage(
                role="user",
                content=FILE_CONTENT_TEMPLATE.format(
                    file_name=attachment.fileName,
                    text=text,
                    message=last.content if isinstance(last.content, str) else "",
                ),
            )
        elif attachment.mediaType.startswith("image/"):
            log.info("Processing as image file")
            messages[-1] = ChatMessage(
                role="user",
                content=ImageContent(
                    source=ImageSource(media_type=attachment.mediaType, data=attachment.base64),
                ),
            )
        else:
            log.warning("Unsupported attachment type %s, message left unchanged", attachment.mediaType)
    except (AttributeError, IndexError, binascii.Error, UnicodeDecodeError) as exc:
        log.error("Error processing file content: %s", exc)
        raise FileProcessingError("Failed to process file content") from exc


def build_messages(request: FinanceChatRequest, log: logging.Logger = logger) -> list[ChatMessage]:
    messages: list[ChatMessage] = []
    for message in request.messages:
        log.debug("Message role: %s, content: %s", message.role, message.content)
        messages.append(ChatMessage(role=message.role, content=message.content))

    if request.fileData is not None:
        attach_file(messages, request.fileData, log=log)
    return messages
