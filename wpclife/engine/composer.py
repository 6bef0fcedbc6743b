"""User-facing summary messages for AI scheduling."""

from wpclife.engine.dispatcher import DispatchResult

EMPTY_TEXT_MESSAGE = "Please provide some text to process."
MISSING_API_KEY_MESSAGE = (
    "AI feature requires OpenAI API key. Please configure OPENAI_API_KEY in your secrets."
)
NO_RESPONSE_MESSAGE = "Could not get a response from AI. Please try again."
NO_ITEMS_MESSAGE = (
    "I couldn't identify any tasks, reminders, medications, or grocery items in your message. "
    "Please try being more specific."
)
NO_VALID_ITEMS_MESSAGE = "I understood your message but couldn't identify any valid items."
NO_FAMILY_MESSAGE = "Please choose a family before adding items."
NONE_SAVED_MESSAGE = "I understood your message but couldn't save any of the items. Please try again."
SUCCESS_MESSAGE_TEMPLATE = "Successfully created {count} item(s) from your input!"
FAILED_SUFFIX_TEMPLATE = " {count} item(s) could not be saved."


def compose_message(result: DispatchResult, extracted_count: int) -> str:
    """Build the summary message from dispatch counters.

    Args:
        result: Dispatch result with per-type counters
        extracted_count: Number of items the normalizer produced

    Returns:
        Summary message
    """
    if extracted_count == 0:
        return NO_ITEMS_MESSAGE

    total = result.total_created
    if total == 0:
        return NO_VALID_ITEMS_MESSAGE

    if result.failed >= total:
        return NONE_SAVED_MESSAGE

    message = SUCCESS_MESSAGE_TEMPLATE.format(count=total)
    if result.failed:
        message += FAILED_SUFFIX_TEMPLATE.format(count=result.failed)
    return message
