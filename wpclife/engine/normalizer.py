"""Normalization of raw provider output into item dictionaries.

Malformed output never raises past this module: anything that cannot be read
as a JSON array of objects yields an empty list. Per-item typing is deferred
to ``parse_candidate`` so the dispatcher can drop individual bad items.
"""

import json
import logging
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)


def strip_code_fences(text: str) -> str:
    """Remove one leading ```json / ``` fence and one trailing ``` fence."""
    cleaned = text.strip()
    if cleaned.startswith("```json"):
        cleaned = cleaned[7:]  # Remove ```json
    elif cleaned.startswith("```"):
        cleaned = cleaned[3:]   # Remove ```
    if cleaned.endswith("```"):
        cleaned = cleaned[:-3]  # Remove trailing ```
    return cleaned.strip()


def normalize_response(raw: Optional[str]) -> List[Dict[str, Any]]:
    """Parse provider text into a list of item dictionaries.

    Args:
        raw: Raw provider output (may be None)

    Returns:
        List of item dicts in provider order; empty on missing or malformed output
    """
    if not raw or not raw.strip():
        return []

    cleaned = strip_code_fences(raw)
    try:
        parsed = json.loads(cleaned)
    except json.JSONDecodeError as e:
        logger.warning(f"Failed to parse AI response as JSON: {e}. Response: {cleaned[:100]}")
        return []

    if isinstance(parsed, dict):
        parsed = [parsed]
    if not isinstance(parsed, list):
        logger.warning(f"AI response is not a JSON array (got {type(parsed).__name__})")
        return []

    items = [entry for entry in parsed if isinstance(entry, dict)]
    if len(items) != len(parsed):
        logger.debug(f"Dropped {len(parsed) - len(items)} non-object entries from AI response")
    return items
