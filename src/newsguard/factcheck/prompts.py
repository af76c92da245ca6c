"""Prompt text used by the fact-check orchestrator."""

from newsguard.data import SearchResultItem

FACT_CHECK_SYSTEM_PROMPT = """\
You are a fact-checking assistant. Analyze the user's input and provide a \
factual assessment with sources. Always respond with valid JSON in this exact format:

{
  "claim": "[original claim]",
  "verdict": "[true/false/misleading/unverifiable]",
  "confidence": "[low/medium/high]",
  "explanation": "[detailed analysis with reasoning]",
  "sources": [
    {
      "title": "[source title]",
      "url": "[source URL]",
      "relevance": "[high/medium/low]"
    }
  ],
  "additional_context": "[any relevant context]"
}

Guidelines:
1. Be objective and evidence-based
2. Use reliable, verifiable sources (prefer .gov, .edu, established news organizations)
3. Clearly explain your reasoning
4. Provide direct links to sources when available
5. Use "unverifiable" when there's insufficient evidence
6. Be concise but thorough in explanations
7. Rate the confidence of your assessment (low/medium/high)
8. Include the original claim in your response\
"""

OCR_SYSTEM_PROMPT = """\
You are a careful transcription assistant. Reply with the text you can read \
in the image and nothing else.\
"""

OCR_INSTRUCTION = (
    "Extract all text from this image. Be thorough and include any visible text, "
    "including small print."
)

NO_RESULTS_CONTEXT = "No search results available for this query."


def render_search_context(
    results: list[SearchResultItem],
    *,
    header: str = "Search Results for Context:",
) -> str:
    """Render search results as a numbered grounding block.

    Returns the no-results placeholder when ``results`` is empty.
    """
    if not results:
        return NO_RESULTS_CONTEXT
    blocks = [
        f"[{i}] {r.title or 'No title'}\n{r.link}\n{r.snippet or 'No snippet available'}\n"
        for i, r in enumerate(results, 1)
    ]
    return f"{header}\n" + "\n".join(blocks)


def build_text_prompt(claim: str, search_context: str) -> str:
    return (
        "Please fact-check the following claim. Be objective, evidence-based, "
        "and provide sources when possible.\n\n"
        f'CLAIM TO FACT-CHECK:"""\n{claim}\n"""\n\n'
        f"{search_context}\n\n"
        "IMPORTANT: Your response must be valid JSON that follows the exact format "
        "specified in the system prompt."
    )


def build_image_prompt(search_context: str) -> str:
    return (
        "Analyze this image and fact-check any claims it makes. "
        "Consider the following context from web search:\n\n"
        f"{search_context}\n\n"
        "IMPORTANT: Your response must be valid JSON that follows the exact format "
        "specified in the system prompt."
    )
