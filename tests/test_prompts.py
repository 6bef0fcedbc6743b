"""Tests for the extraction system prompt."""

from datetime import datetime, timezone

from wpclife.engine.prompts import build_system_prompt


def test_prompt_embeds_callers_today():
    # 02:00 UTC on July 5 is still July 4 in Los Angeles
    now = datetime(2024, 7, 5, 2, 0, tzinfo=timezone.utc)
    prompt = build_system_prompt("America/Los_Angeles", now=now)
    assert "Today is: 2024-07-04" in prompt
    assert '"startDate":"2024-07-04","endDate":"2024-08-03"' in prompt


def test_prompt_defaults_to_utc():
    now = datetime(2024, 7, 5, 2, 0, tzinfo=timezone.utc)
    assert "Today is: 2024-07-05" in build_system_prompt(None, now=now)


def test_prompt_lists_kinds_and_categories():
    prompt = build_system_prompt("UTC")
    for kind in ("chore", "reminder", "grocery", "medication"):
        assert f'"{kind}"' in prompt
    assert '"Vegetables" | "Fruits"' in prompt
    assert "assignedToName" in prompt


def test_prompt_demands_bare_json_array():
    prompt = build_system_prompt("UTC")
    assert prompt.rstrip().endswith("No prose, no explanation, no markdown code fences.")
    # Literal braces survive formatting
    assert "{{" not in prompt
    assert '{"type":"chore"' in prompt
