"""Tests for summary message composition."""

from wpclife.engine.composer import (
    NONE_SAVED_MESSAGE,
    NO_ITEMS_MESSAGE,
    NO_VALID_ITEMS_MESSAGE,
    compose_message,
)
from wpclife.engine.dispatcher import DispatchResult


def _result(chores=0, reminders=0, groceries=0, medications=0, failed=0):
    result = DispatchResult()
    result.chores_created = chores
    result.reminders_created = reminders
    result.groceries_created = groceries
    result.medications_created = medications
    result.failed = failed
    return result


def test_nothing_extracted():
    assert compose_message(_result(), 0) == NO_ITEMS_MESSAGE


def test_extracted_but_nothing_valid():
    assert compose_message(_result(), 3) == NO_VALID_ITEMS_MESSAGE


def test_success_counts_all_kinds():
    message = compose_message(_result(chores=1, reminders=2, groceries=3, medications=1), 7)
    assert message == "Successfully created 7 item(s) from your input!"


def test_success_counts_only_valid_items():
    assert compose_message(_result(groceries=1), 4) == "Successfully created 1 item(s) from your input!"


def test_failed_items_are_reported():
    message = compose_message(_result(groceries=2, failed=1), 2)
    assert message == "Successfully created 2 item(s) from your input! 1 item(s) could not be saved."


def test_nothing_saved_is_not_reported_as_success():
    assert compose_message(_result(groceries=1, failed=1), 1) == NONE_SAVED_MESSAGE
    assert compose_message(_result(chores=2, reminders=1, failed=3), 3) == NONE_SAVED_MESSAGE
