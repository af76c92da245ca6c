from newsguard.llm.base import (
    ChatMessage,
    CompletionClient,
    ContentPart,
    ImagePart,
    TextPart,
    image_data_uri,
    split_data_uri,
    with_system_prompt,
)
from newsguard.llm.claude import ClaudeCompletionClient
from newsguard.llm.openrouter import OpenRouterClient

__all__ = [
    "ChatMessage",
    "ClaudeCompletionClient",
    "CompletionClient",
    "ContentPart",
    "ImagePart",
    "OpenRouterClient",
    "TextPart",
    "image_data_uri",
    "split_data_uri",
    "with_system_prompt",
]
