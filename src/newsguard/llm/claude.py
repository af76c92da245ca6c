"""Chat completions using Anthropic's Claude API."""

import logging
import os
from typing import Any

import anthropic

from newsguard.errors import CompletionFailed
from newsguard.llm.base import (
    ChatMessage,
    TextPart,
    check_options,
    split_data_uri,
    with_system_prompt,
)

DEFAULT_MODEL = "claude-haiku-4-5-20251001"

JSON_MODE_INSTRUCTION = (
    "\n\nRespond with a single JSON object only: no markdown fences, no commentary."
)

logger = logging.getLogger(__name__)


def _to_claude_content(message: ChatMessage) -> str | list[dict[str, Any]]:
    if isinstance(message.content, str):
        return message.content
    blocks: list[dict[str, Any]] = []
    for part in message.content:
        if isinstance(part, TextPart):
            blocks.append({"type": "text", "text": part.text})
        else:
            media_type, data = split_data_uri(part.data_uri)
            blocks.append(
                {
                    "type": "image",
                    "source": {"type": "base64", "media_type": media_type, "data": data},
                }
            )
    return blocks


class ClaudeCompletionClient:
    """Chat completions using Anthropic's Messages API.

    System messages are sent through the ``system`` parameter. The Messages
    API has no JSON response format, so JSON mode is requested through the
    system prompt instead.

    Args:
        model: Anthropic model ID to use.
        api_key: API key (defaults to CLAUDE_API_KEY env var).
    """

    def __init__(
        self,
        *,
        model: str = DEFAULT_MODEL,
        api_key: str | None = None,
    ) -> None:
        resolved_key = api_key or os.environ.get("CLAUDE_API_KEY")
        if not resolved_key:
            raise ValueError("Claude API key required. Pass api_key or set CLAUDE_API_KEY env var.")
        self._model = model
        self._client = anthropic.AsyncAnthropic(api_key=resolved_key, max_retries=0)

    @property
    def model(self) -> str:
        return self._model

    async def complete(
        self,
        system_prompt: str,
        messages: list[ChatMessage],
        *,
        temperature: float = 0.2,
        max_tokens: int = 2000,
        json_mode: bool = False,
    ) -> str:
        check_options(temperature, max_tokens)
        # Claude caps temperature at 1.0
        temperature = min(temperature, 1.0)

        all_messages = with_system_prompt(system_prompt, messages)
        system = "\n\n".join(str(m.content) for m in all_messages if m.role == "system")
        if json_mode:
            system += JSON_MODE_INSTRUCTION
        conversation = [
            {"role": m.role, "content": _to_claude_content(m)}
            for m in all_messages
            if m.role != "system"
        ]

        try:
            response = await self._client.messages.create(
                model=self._model,
                max_tokens=max_tokens,
                temperature=temperature,
                system=system,
                messages=conversation,  # type: ignore[arg-type]
            )
        except anthropic.APIStatusError as e:
            raise CompletionFailed(
                f"Claude API error {e.status_code}: {e.message}",
                status_code=e.status_code,
            ) from e
        except anthropic.APIError as e:
            raise CompletionFailed(f"Claude request failed: {e}") from e

        response_text = ""
        for block in response.content:
            if hasattr(block, "text"):
                response_text += block.text

        if not response_text:
            raise CompletionFailed(f"No response received from {self._model}")

        logger.debug("Completion from %s: %d chars", self._model, len(response_text))
        return response_text
