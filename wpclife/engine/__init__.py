"""AI scheduling and quick-add engine for wpclife."""

from wpclife.engine.quick_add import parse_quick_add, guess_category, QuickAddResult
from wpclife.engine.prompts import build_system_prompt
from wpclife.engine.extraction import extract_items_text
from wpclife.engine.normalizer import normalize_response, strip_code_fences
from wpclife.engine.timezones import local_to_utc, local_today
from wpclife.engine.dispatcher import ScheduleDispatcher, DispatchResult, find_member_by_name
from wpclife.engine.composer import compose_message
from wpclife.engine.pipeline import process_schedule_text

__all__ = [
    "parse_quick_add",
    "guess_category",
    "QuickAddResult",
    "build_system_prompt",
    "extract_items_text",
    "normalize_response",
    "strip_code_fences",
    "local_to_utc",
    "local_today",
    "ScheduleDispatcher",
    "DispatchResult",
    "find_member_by_name",
    "compose_message",
    "process_schedule_text",
]
