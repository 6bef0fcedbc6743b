"""End-to-end processing of free text into household records.

Each early exit (empty text, missing credentials, no provider response) is a
recoverable outcome reported through the result message, never an exception.
"""

import logging
from typing import Optional

from wpclife.engine.composer import (
    EMPTY_TEXT_MESSAGE,
    MISSING_API_KEY_MESSAGE,
    NO_FAMILY_MESSAGE,
    NO_RESPONSE_MESSAGE,
    compose_message,
)
from wpclife.engine.dispatcher import DispatchResult, ScheduleDispatcher, default_family_fallback_enabled
from wpclife.engine.extraction import extract_items_text, get_openai_client
from wpclife.engine.normalizer import normalize_response
from wpclife.integrations.openai_client import OpenAIClient

logger = logging.getLogger(__name__)


def _message_only(message: str) -> DispatchResult:
    result = DispatchResult()
    result.message = message
    return result


def process_schedule_text(
    text: Optional[str],
    family_id: Optional[str],
    tz_name: Optional[str],
    dispatcher: ScheduleDispatcher,
    client: Optional[OpenAIClient] = None,
) -> DispatchResult:
    """Extract items from ``text`` and create them for a family.

    Args:
        text: User's free-form text
        family_id: Target family (optional, see ScheduleDispatcher.resolve_family_id)
        tz_name: Caller's IANA timezone
        dispatcher: Dispatcher bound to the request's repositories
        client: Completion provider (defaults to the shared instance)

    Returns:
        DispatchResult with its message filled in
    """
    if not text or not text.strip():
        return _message_only(EMPTY_TEXT_MESSAGE)

    if not family_id and not default_family_fallback_enabled():
        return _message_only(NO_FAMILY_MESSAGE)

    client = client or get_openai_client()
    if not client.is_configured:
        return _message_only(MISSING_API_KEY_MESSAGE)

    raw = extract_items_text(text, tz_name, client=client)
    if raw is None:
        return _message_only(NO_RESPONSE_MESSAGE)

    extracted = normalize_response(raw)
    if not extracted:
        result = DispatchResult()
        result.message = compose_message(result, 0)
        return result

    result = dispatcher.dispatch(extracted, family_id, tz_name)
    result.message = compose_message(result, len(extracted))
    logger.info(
        f"AI schedule: {len(extracted)} extracted, {result.total_created} classified, {result.failed} failed"
    )
    return result
