"""Message types and the completion client protocol."""

from dataclasses import dataclass
from typing import Literal, Protocol

Role = Literal["system", "user", "assistant"]

MAX_TEMPERATURE = 2.0
MAX_TOKENS_LIMIT = 4000


@dataclass(frozen=True)
class TextPart:
    """A text segment of a multimodal message."""

    text: str


@dataclass(frozen=True)
class ImagePart:
    """An image segment of a multimodal message, as a ``data:`` URI."""

    data_uri: str


ContentPart = TextPart | ImagePart


@dataclass(frozen=True)
class ChatMessage:
    """A single chat message; content is plain text or ordered parts."""

    role: Role
    content: str | tuple[ContentPart, ...]

    @classmethod
    def user(cls, content: str | tuple[ContentPart, ...]) -> "ChatMessage":
        return cls(role="user", content=content)

    @classmethod
    def system(cls, content: str) -> "ChatMessage":
        return cls(role="system", content=content)


class CompletionClient(Protocol):
    """Interface for chat-completion providers."""

    async def complete(
        self,
        system_prompt: str,
        messages: list[ChatMessage],
        *,
        temperature: float = 0.2,
        max_tokens: int = 2000,
        json_mode: bool = False,
    ) -> str:
        """Send one chat completion request and return the raw text reply.

        Args:
            system_prompt: Prepended as the first message unless the caller
                already supplied a system message.
            messages: Conversation messages in order.
            temperature: Sampling temperature (0-2).
            max_tokens: Maximum tokens in the reply (1-4000).
            json_mode: Ask the provider for a single JSON object.

        Raises:
            CompletionFailed: On a provider error or an empty reply.
        """
        ...


def with_system_prompt(system_prompt: str, messages: list[ChatMessage]) -> list[ChatMessage]:
    """Prepend the system prompt unless a system message is already present."""
    if any(m.role == "system" for m in messages):
        return list(messages)
    return [ChatMessage.system(system_prompt), *messages]


def check_options(temperature: float, max_tokens: int) -> None:
    if not 0 <= temperature <= MAX_TEMPERATURE:
        raise ValueError(f"temperature must be between 0 and {MAX_TEMPERATURE}, got {temperature}")
    if not 1 <= max_tokens <= MAX_TOKENS_LIMIT:
        raise ValueError(f"max_tokens must be between 1 and {MAX_TOKENS_LIMIT}, got {max_tokens}")


def image_data_uri(image: str, *, media_type: str = "image/jpeg") -> str:
    """Return ``image`` as a data URI, wrapping bare base64 if needed."""
    image = image.strip()
    if image.startswith("data:"):
        return image
    return f"data:{media_type};base64,{image}"


def split_data_uri(uri: str) -> tuple[str, str]:
    """Split a base64 data URI into ``(media_type, data)``.

    Raises:
        ValueError: If ``uri`` is not a base64 data URI.
    """
    if not uri.startswith("data:") or "," not in uri:
        raise ValueError("Expected a data: URI")
    header, data = uri[5:].split(",", 1)
    media_type, _, encoding = header.partition(";")
    if encoding != "base64":
        raise ValueError("Only base64 data URIs are supported")
    return (media_type or "image/jpeg", data)
