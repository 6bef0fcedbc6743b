"""Extraction of household items from free text via the completion provider."""

import logging
from typing import Optional

from wpclife.engine.prompts import build_system_prompt
from wpclife.integrations.openai_client import OpenAIClient

logger = logging.getLogger(__name__)

# Initialize OpenAI client (singleton pattern)
_openai_client: Optional[OpenAIClient] = None


def get_openai_client() -> OpenAIClient:
    """Get or create OpenAI client instance."""
    global _openai_client
    if _openai_client is None:
        _openai_client = OpenAIClient()
    return _openai_client


def extract_items_text(
    text: str,
    timezone: Optional[str] = None,
    client: Optional[OpenAIClient] = None,
) -> Optional[str]:
    """Ask the completion provider to extract items from ``text``.

    Args:
        text: User's free-form text
        timezone: Caller's IANA timezone, used for the prompt's "today"
        client: Provider client (defaults to the shared instance)

    Returns:
        Raw provider text, or None if the provider is unavailable or the text is empty
    """
    if not text or not text.strip():
        logger.debug("Empty text provided. Skipping extraction.")
        return None

    client = client or get_openai_client()
    system_prompt = build_system_prompt(timezone)
    try:
        return client.complete(system_prompt, text.strip())
    except Exception as e:
        # The provider contract is "text or None"; keep the request alive either way.
        logger.error(f"Error extracting items: {type(e).__name__}")
        return None
