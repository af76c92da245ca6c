"""Fact-check orchestrator: search grounding, model call, normalization."""

import asyncio
import logging
import math
import time
from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import ValidationError

from newsguard.data import FactCheckResult, SearchResultItem
from newsguard.errors import InvalidRequestError
from newsguard.factcheck.options import FactCheckSettings, TextCheckOptions
from newsguard.factcheck.prompts import (
    FACT_CHECK_SYSTEM_PROMPT,
    NO_RESULTS_CONTEXT,
    OCR_INSTRUCTION,
    OCR_SYSTEM_PROMPT,
    build_image_prompt,
    build_text_prompt,
    render_search_context,
)
from newsguard.llm import ChatMessage, CompletionClient, ImagePart, TextPart, image_data_uri
from newsguard.normalizer import degraded_result, normalize
from newsguard.query import QueryExtractor, SentenceQueryExtractor
from newsguard.search import Searcher

MIN_CLAIM_LENGTH = 10
IMAGE_FALLBACK_CLAIM = "Image content analysis"

logger = logging.getLogger(__name__)


def merge_unique(branches: Iterable[list[SearchResultItem]]) -> list[SearchResultItem]:
    """Flatten result lists in order, keeping the first item seen for each link."""
    seen_links: set[str] = set()
    merged: list[SearchResultItem] = []
    for branch in branches:
        for item in branch:
            if item.link not in seen_links:
                seen_links.add(item.link)
                merged.append(item)
    return merged


class FactChecker:
    """Fact-check text or images against web search results with a language model.

    Flow (both entry points):
    1. Derive search queries from the content (OCR first, for images)
    2. Search for grounding results, best-effort
    3. Prompt the model with the claim and the rendered results
    4. Normalize the model output into a ``FactCheckResult``

    Upstream failures never escape a check; they produce an ``unverifiable``
    result with low confidence. Only precondition failures raise.

    Args:
        searcher: Search provider used for grounding.
        completion: Language-model client for fact-check calls.
        vision: Client used for image calls (OCR and image fact-check).
            Defaults to ``completion``.
        query_extractor: Derives search queries from text.
            Defaults to ``SentenceQueryExtractor``.
        settings: Defaults for result counts, temperatures and token limits.
        system_prompt: System prompt for fact-check calls.
    """

    def __init__(
        self,
        searcher: Searcher,
        completion: CompletionClient,
        *,
        vision: CompletionClient | None = None,
        query_extractor: QueryExtractor | None = None,
        settings: FactCheckSettings | None = None,
        system_prompt: str = FACT_CHECK_SYSTEM_PROMPT,
    ) -> None:
        self._searcher = searcher
        self._completion = completion
        self._vision = vision or completion
        self._extractor = query_extractor or SentenceQueryExtractor()
        self._settings = settings or FactCheckSettings()
        self._system_prompt = system_prompt

    @property
    def settings(self) -> FactCheckSettings:
        return self._settings

    async def check_text(
        self,
        text: str,
        options: TextCheckOptions | Mapping[str, Any] | None = None,
    ) -> FactCheckResult:
        """Fact-check a piece of text.

        Args:
            text: Claim to check (at least 10 characters).
            options: Optional search query override and model options.

        Returns:
            The normalized result, or a degraded result if any upstream
            step failed.

        Raises:
            InvalidRequestError: If ``text`` is too short or ``options`` are
                out of range.
        """
        opts = _validate_text_request(text, options)
        max_results = opts.max_results or self._settings.max_results
        temperature = (
            opts.temperature if opts.temperature is not None else self._settings.temperature
        )
        max_tokens = opts.max_tokens or self._settings.max_tokens

        try:
            search_query = opts.search_query if opts.search_query is not None else text
            logger.info("Fact-checking text (%d chars)", len(text))

            queries = self._extractor.extract(search_query)
            results = await self._gather_news(queries, max_results)
            search_context = render_search_context(results)

            message = ChatMessage.user(build_text_prompt(text, search_context))
            t0 = time.monotonic()
            raw = await self._completion.complete(
                self._system_prompt,
                [message],
                temperature=temperature,
                max_tokens=max_tokens,
                json_mode=True,
            )
            logger.info("Model answered in %.2fs", time.monotonic() - t0)
        except Exception as e:
            logger.exception("Text fact-check failed")
            return degraded_result(text, f"An error occurred: {e}")

        return normalize(raw, text)

    async def check_image(self, image_base64: str) -> FactCheckResult:
        """Fact-check the content of an image.

        The image is first transcribed by the vision model. The transcript
        only drives the grounding search; the final claim comes from the
        model's own answer, or ``"Image content analysis"`` if it gives none.

        Args:
            image_base64: Base64 image data, bare or as a ``data:`` URI.

        Returns:
            The normalized result, or a degraded result if any upstream
            step failed.

        Raises:
            InvalidRequestError: If no image data is given.
        """
        if not isinstance(image_base64, str) or not image_base64.strip():
            raise InvalidRequestError("Image data must be a non-empty base64 string")
        image = ImagePart(image_data_uri(image_base64))

        try:
            logger.info("Extracting text from image")
            extracted_text = await self._vision.complete(
                OCR_SYSTEM_PROMPT,
                [ChatMessage.user((TextPart(OCR_INSTRUCTION), image))],
                temperature=self._settings.ocr_temperature,
                max_tokens=self._settings.ocr_max_tokens,
                json_mode=False,
            )
            logger.info("Extracted %d chars of text from image", len(extracted_text))

            search_context = NO_RESULTS_CONTEXT
            if extracted_text.strip():
                queries = self._extractor.extract(extracted_text)
                if queries:
                    results = await self._search_news_best_effort(
                        queries[0], self._settings.image_search_results
                    )
                    search_context = render_search_context(
                        results, header="Relevant search results for fact-checking:"
                    )

            message = ChatMessage.user((TextPart(build_image_prompt(search_context)), image))
            raw = await self._vision.complete(
                self._system_prompt,
                [message],
                temperature=self._settings.temperature,
                max_tokens=self._settings.max_tokens,
                json_mode=True,
            )
        except Exception as e:
            logger.exception("Image fact-check failed")
            return degraded_result(
                IMAGE_FALLBACK_CLAIM, f"An error occurred while analyzing the image: {e}"
            )

        return normalize(raw, IMAGE_FALLBACK_CLAIM)

    async def find_resources(self, query: str, limit: int = 5) -> list[SearchResultItem]:
        """Collect news and web results that could help a reader check a claim.

        Both searches run concurrently and each is best-effort. News results
        come first; duplicates by link are dropped.

        Args:
            query: Search query.
            limit: Results requested from each search.

        Returns:
            Up to ``2 * limit`` unique results.
        """
        if not isinstance(query, str) or not query.strip():
            return []
        news, organic = await asyncio.gather(
            self._search_news_best_effort(query, limit),
            self._search_organic_best_effort(query, limit),
        )
        return merge_unique([news, organic])[: 2 * limit]

    async def _gather_news(self, queries: list[str], max_results: int) -> list[SearchResultItem]:
        """Search all queries concurrently and merge them in query order."""
        if not queries:
            logger.info("No search queries extracted; skipping search")
            return []

        per_query = math.ceil(max_results / len(queries))
        t0 = time.monotonic()
        branches = await asyncio.gather(
            *(self._search_news_best_effort(q, per_query) for q in queries)
        )
        merged = merge_unique(branches)[:max_results]
        logger.info(
            "Found %d search results for %d queries in %.2fs",
            len(merged),
            len(queries),
            time.monotonic() - t0,
        )
        return merged

    async def _search_news_best_effort(self, query: str, limit: int) -> list[SearchResultItem]:
        try:
            return await self._searcher.search_news(query, limit)
        except Exception as e:
            logger.warning("News search failed for %r: %s", query, e)
            return []

    async def _search_organic_best_effort(self, query: str, limit: int) -> list[SearchResultItem]:
        try:
            return await self._searcher.search_organic(query, limit)
        except Exception as e:
            logger.warning("Organic search failed for %r: %s", query, e)
            return []


def _validate_text_request(
    text: object,
    options: TextCheckOptions | Mapping[str, Any] | None,
) -> TextCheckOptions:
    if not isinstance(text, str) or len(text) < MIN_CLAIM_LENGTH:
        raise InvalidRequestError(f"Text must be at least {MIN_CLAIM_LENGTH} characters long")
    if options is None:
        return TextCheckOptions()
    if isinstance(options, TextCheckOptions):
        return options
    try:
        return TextCheckOptions.model_validate(dict(options))
    except ValidationError as e:
        raise InvalidRequestError(f"Invalid fact-check options: {e}") from e
