"""OpenAI-compatible chat completions through OpenRouter."""

import logging
import os
from typing import Any

import openai

from newsguard.errors import CompletionFailed
from newsguard.llm.base import ChatMessage, TextPart, check_options, with_system_prompt

OPENROUTER_BASE_URL = "https://openrouter.ai/api/v1"
DEFAULT_MODEL = "deepseek/deepseek-chat-v3-0324:free"

logger = logging.getLogger(__name__)


def _to_openai_message(message: ChatMessage) -> dict[str, Any]:
    if isinstance(message.content, str):
        return {"role": message.role, "content": message.content}
    parts: list[dict[str, Any]] = []
    for part in message.content:
        if isinstance(part, TextPart):
            parts.append({"type": "text", "text": part.text})
        else:
            parts.append({"type": "image_url", "image_url": {"url": part.data_uri}})
    return {"role": message.role, "content": parts}


class OpenRouterClient:
    """Chat completions against an OpenAI-compatible endpoint (OpenRouter by default).

    Args:
        model: Model ID to request.
        api_key: API key (defaults to OPENROUTER_API_KEY env var).
        base_url: Endpoint base URL.
        app_url: Sent as ``HTTP-Referer`` for OpenRouter attribution.
        app_title: Sent as ``X-Title`` for OpenRouter attribution.
        timeout: Request timeout in seconds.
    """

    def __init__(
        self,
        *,
        model: str = DEFAULT_MODEL,
        api_key: str | None = None,
        base_url: str = OPENROUTER_BASE_URL,
        app_url: str = "http://localhost:3000",
        app_title: str = "NewsGuardAI",
        timeout: float = 60.0,
    ) -> None:
        resolved_key = api_key or os.environ.get("OPENROUTER_API_KEY")
        if not resolved_key:
            raise ValueError(
                "OpenRouter API key required. Pass api_key or set OPENROUTER_API_KEY env var."
            )
        self._model = model
        self._client = openai.AsyncOpenAI(
            api_key=resolved_key,
            base_url=base_url,
            default_headers={"HTTP-Referer": app_url, "X-Title": app_title},
            timeout=timeout,
            max_retries=0,
        )

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
        payload = [_to_openai_message(m) for m in with_system_prompt(system_prompt, messages)]

        try:
            completion = await self._client.chat.completions.create(
                model=self._model,
                messages=payload,  # type: ignore[arg-type]
                temperature=temperature,
                max_tokens=max_tokens,
                response_format={"type": "json_object" if json_mode else "text"},
            )
        except openai.APIStatusError as e:
            raise CompletionFailed(
                f"OpenRouter API error {e.status_code}: {e.message}",
                status_code=e.status_code,
            ) from e
        except openai.APIError as e:
            raise CompletionFailed(f"OpenRouter request failed: {e}") from e

        content = completion.choices[0].message.content if completion.choices else None
        if not content:
            raise CompletionFailed(f"No response received from {self._model}")

        logger.debug("Completion from %s: %d chars", self._model, len(content))
        return content
