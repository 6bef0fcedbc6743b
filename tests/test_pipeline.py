"""End-to-end tests for free text processing."""

import json
from unittest.mock import patch

from wpclife.engine.composer import (
    EMPTY_TEXT_MESSAGE,
    MISSING_API_KEY_MESSAGE,
    NO_FAMILY_MESSAGE,
    NONE_SAVED_MESSAGE,
    NO_ITEMS_MESSAGE,
    NO_RESPONSE_MESSAGE,
    NO_VALID_ITEMS_MESSAGE,
)
from wpclife.engine.pipeline import process_schedule_text


def test_milk_and_call_mom(dispatcher, stub_client, household_repository, test_family_id):
    stub_client.complete.return_value = json.dumps([
        {"type": "grocery", "title": "Milk", "category": "Dairy"},
        {"type": "reminder", "title": "Call mom", "dateTime": "2024-07-04T17:00:00"},
    ])

    result = process_schedule_text(
        "buy milk tomorrow, remind me to call mom at 5pm",
        test_family_id,
        "America/New_York",
        dispatcher,
        client=stub_client,
    )

    assert result.message == "Successfully created 2 item(s) from your input!"
    assert result.groceries_created == 1
    assert result.reminders_created == 1
    assert result.chores_created == 0
    assert result.medications_created == 0
    assert [i["title"] for i in result.items] == ["Milk", "Call mom"]
    assert len(household_repository.list_grocery_items(test_family_id)) == 1
    assert len(household_repository.list_reminders(test_family_id)) == 1


def test_user_text_is_trimmed_and_prompt_has_today(dispatcher, stub_client, test_family_id):
    process_schedule_text("  buy milk  ", test_family_id, None, dispatcher, client=stub_client)

    system_prompt, user_text = stub_client.complete.call_args.args
    assert user_text == "buy milk"
    assert "Today is:" in system_prompt


def test_blank_text_skips_provider(dispatcher, stub_client, test_family_id):
    for text in (None, "", "   "):
        result = process_schedule_text(text, test_family_id, None, dispatcher, client=stub_client)
        assert result.message == EMPTY_TEXT_MESSAGE
        assert result.items == []
    stub_client.complete.assert_not_called()


def test_missing_api_key(dispatcher, stub_client, test_family_id):
    stub_client.is_configured = False
    result = process_schedule_text("buy milk", test_family_id, None, dispatcher, client=stub_client)
    assert result.message == MISSING_API_KEY_MESSAGE
    stub_client.complete.assert_not_called()


def test_provider_unavailable(dispatcher, stub_client, test_family_id):
    stub_client.complete.return_value = None
    result = process_schedule_text("buy milk", test_family_id, None, dispatcher, client=stub_client)
    assert result.message == NO_RESPONSE_MESSAGE
    assert result.total_created == 0


def test_provider_raises(dispatcher, stub_client, test_family_id):
    stub_client.complete.side_effect = RuntimeError("socket closed")
    result = process_schedule_text("buy milk", test_family_id, None, dispatcher, client=stub_client)
    assert result.message == NO_RESPONSE_MESSAGE


def test_prose_response(dispatcher, stub_client, test_family_id):
    stub_client.complete.return_value = "I could not find anything to do."
    result = process_schedule_text("hello there", test_family_id, None, dispatcher, client=stub_client)
    assert result.message == NO_ITEMS_MESSAGE
    assert result.items == []


def test_empty_array_response(dispatcher, stub_client, test_family_id):
    stub_client.complete.return_value = "[]"
    result = process_schedule_text("hello there", test_family_id, None, dispatcher, client=stub_client)
    assert result.message == NO_ITEMS_MESSAGE


def test_only_invalid_items(dispatcher, stub_client, test_family_id):
    stub_client.complete.return_value = '[{"type": "spaceship", "title": "Rocket"}, {"title": "untyped"}]'
    result = process_schedule_text("build a rocket", test_family_id, None, dispatcher, client=stub_client)
    assert result.message == NO_VALID_ITEMS_MESSAGE
    assert result.items == []


def test_fenced_response(dispatcher, stub_client, test_family_id):
    stub_client.complete.return_value = '```json\n[{"type": "chore", "title": "Dishes", "points": 8}]\n```'
    result = process_schedule_text("do the dishes", test_family_id, None, dispatcher, client=stub_client)
    assert result.chores_created == 1
    assert result.items == [{"type": "chore", "title": "Dishes", "points": 8}]


def test_no_family_with_fallback_disabled(dispatcher, stub_client, monkeypatch):
    monkeypatch.setenv("ALLOW_DEFAULT_FAMILY_FALLBACK", "false")
    result = process_schedule_text("buy milk", None, None, dispatcher, client=stub_client)
    assert result.message == NO_FAMILY_MESSAGE
    stub_client.complete.assert_not_called()


def test_shared_client_is_used_by_default(dispatcher, stub_client, test_family_id):
    stub_client.complete.return_value = '[{"type": "grocery", "title": "Milk"}]'
    with patch("wpclife.engine.pipeline.get_openai_client", return_value=stub_client):
        result = process_schedule_text("buy milk", test_family_id, None, dispatcher)
    assert result.groceries_created == 1


def test_unknown_family_reports_nothing_saved(dispatcher, stub_client):
    stub_client.complete.return_value = '[{"type": "grocery", "title": "Milk"}]'
    result = process_schedule_text("buy milk", "no-such-family", None, dispatcher, client=stub_client)
    assert result.message == NONE_SAVED_MESSAGE
    assert result.groceries_created == 1
