"""OpenAI API integration for wpclife.

This module provides the completion provider used to extract household items
(chores, reminders, medications, groceries) from free-form text.
"""

import os
import logging
from typing import Optional
from openai import OpenAI, APIError, APITimeoutError
from dotenv import load_dotenv

from wpclife.models.constants import (
    OPENAI_MODEL,
    EXTRACTION_TEMPERATURE,
    EXTRACTION_MAX_TOKENS,
    DEFAULT_OPENAI_TIMEOUT_SEC,
)

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)


def _timeout_from_env() -> float:
    raw = os.getenv("OPENAI_TIMEOUT_SEC")
    if not raw:
        return DEFAULT_OPENAI_TIMEOUT_SEC
    try:
        value = float(raw)
    except ValueError:
        logger.warning(f"Invalid OPENAI_TIMEOUT_SEC '{raw[:20]}'. Using {DEFAULT_OPENAI_TIMEOUT_SEC}s.")
        return DEFAULT_OPENAI_TIMEOUT_SEC
    return value if value > 0 else DEFAULT_OPENAI_TIMEOUT_SEC


class OpenAIClient:
    """Client for OpenAI API integration."""

    def __init__(self, api_key: Optional[str] = None, timeout: Optional[float] = None):
        """Initialize OpenAI client.

        Args:
            api_key: OpenAI API key. If None, reads from OPENAI_API_KEY environment variable.
            timeout: Request timeout in seconds. If None, reads OPENAI_TIMEOUT_SEC (default 15s).

        Note:
            If API key is not provided and not found in environment, the client will still
            initialize but every completion returns None. This allows graceful degradation.
        """
        self.api_key = api_key or os.getenv("OPENAI_API_KEY")
        self.timeout = timeout if timeout is not None else _timeout_from_env()
        self.client = None

        if self.api_key:
            # A timed-out request is reported as unavailable, not retried.
            self.client = OpenAI(api_key=self.api_key, timeout=self.timeout, max_retries=0)
        else:
            logger.warning("OPENAI_API_KEY not found in environment. AI scheduling will not be available.")

    @property
    def is_configured(self) -> bool:
        """Whether provider credentials are available."""
        return self.client is not None

    def complete(self, system_prompt: str, user_text: str) -> Optional[str]:
        """Send a system prompt and user text, returning the raw completion text.

        Args:
            system_prompt: Instruction prompt for the model
            user_text: The user's free-form text

        Returns:
            Raw completion text, or None if:
            - API key is not configured
            - API call fails or times out
            - Response is empty
        """
        # Check if client is available
        if not self.client:
            logger.debug("OpenAI client not initialized. Returning no completion.")
            return None

        try:
            response = self.client.chat.completions.create(
                model=OPENAI_MODEL,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_text},
                ],
                temperature=EXTRACTION_TEMPERATURE,  # Low temperature for deterministic extraction
                max_tokens=EXTRACTION_MAX_TOKENS,
            )

            if not response.choices:
                logger.warning("OpenAI returned no choices")
                return None

            content = response.choices[0].message.content
            if not content or not content.strip():
                logger.warning("OpenAI returned empty completion")
                return None

            logger.debug(f"OpenAI completion received ({len(content)} chars)")
            return content

        except APITimeoutError:
            logger.warning(f"OpenAI API request timed out after {self.timeout}s.")
            return None
        except APIError as e:
            # Handle OpenAI API errors (rate limits, quota issues, invalid key, etc.)
            error_code = getattr(e, 'code', None)
            status_code = getattr(e, 'status_code', None)

            if error_code == 'insufficient_quota':
                logger.warning("OpenAI API quota insufficient. Please check billing/payment method in OpenAI dashboard.")
            elif status_code == 429:
                logger.warning("OpenAI API rate limit exceeded. Please wait before retrying.")
            else:
                logger.error(f"OpenAI API error: {status_code or 'unknown'} ({error_code or 'unknown'})")

            # Don't log full error message as it might contain sensitive info
            return None
        except Exception as e:
            # Handle any other errors (network, parsing, etc.)
            logger.error(f"Error calling OpenAI API: {type(e).__name__}")
            # Don't log full error message as it might contain sensitive info
            return None
