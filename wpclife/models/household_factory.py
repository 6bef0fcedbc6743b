"""Household record factory for wpclife.

This module centralizes record creation so that every caller (the AI
dispatcher, quick-add) applies the same defaults from constants.
"""

import uuid
from datetime import date, datetime, timezone
from typing import Iterable, Optional

from wpclife.models.household import (
    Chore,
    ChoreStatus,
    GroceryItem,
    GroceryStatus,
    Medicine,
    Reminder,
)
from wpclife.models.constants import (
    DEFAULT_CHORE_POINTS,
    DEFAULT_GROCERY_CATEGORY,
    DEFAULT_GROCERY_STORE,
    DEFAULT_MEDICATION_INVENTORY,
    DEFAULT_MEDICATION_TIMES,
    DEFAULT_REMINDER_TYPE,
    MEDICATION_SCHEDULE_DAILY,
    REMINDER_SCHEDULE_ONCE,
)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


def create_chore_base(
    family_id: str,
    title: str,
    due_date: date,
    points: Optional[int] = None,
    assigned_to: Optional[str] = None,
) -> Chore:
    """Create a pending chore.

    Args:
        family_id: Owning family
        title: Chore title
        due_date: Due date in the caller's calendar
        points: Points for the chore (defaults to DEFAULT_CHORE_POINTS)
        assigned_to: User ID of the assignee, or None for unassigned

    Returns:
        Chore object with defaults applied
    """
    return Chore(
        id=str(uuid.uuid4()),
        family_id=family_id,
        title=title,
        assigned_to=assigned_to,
        due_date=due_date,
        points=points if points is not None else DEFAULT_CHORE_POINTS,
        status=ChoreStatus.PENDING,
        created_at=_utcnow(),
    )


def create_reminder_base(
    family_id: str,
    title: str,
    start_time: datetime,
    end_time: Optional[datetime] = None,
    description: Optional[str] = None,
    tz_name: Optional[str] = None,
) -> Reminder:
    """Create a one-off custom reminder.

    ``start_time`` and ``end_time`` must already be UTC instants.
    """
    now = _utcnow()
    return Reminder(
        id=str(uuid.uuid4()),
        family_id=family_id,
        title=title,
        description=description,
        type=DEFAULT_REMINDER_TYPE,
        schedule={"type": REMINDER_SCHEDULE_ONCE},
        start_time=start_time,
        end_time=end_time,
        timezone=tz_name,
        is_active=True,
        created_at=now,
        updated_at=now,
    )


def create_grocery_item_base(
    family_id: str,
    name: str,
    category: Optional[str] = None,
    store: Optional[str] = None,
    quantity: Optional[str] = None,
) -> GroceryItem:
    """Create a grocery item in the NEEDED state."""
    return GroceryItem(
        id=str(uuid.uuid4()),
        family_id=family_id,
        name=name,
        quantity=quantity or None,
        category=category or DEFAULT_GROCERY_CATEGORY,
        store=store if store else DEFAULT_GROCERY_STORE,
        status=GroceryStatus.NEEDED,
        purchase_count=0,
        updated_at=_utcnow(),
    )


def create_medicine_base(
    family_id: str,
    name: str,
    start_date: date,
    end_date: Optional[date] = None,
    times: Optional[Iterable[str]] = None,
    dosage: Optional[str] = None,
) -> Medicine:
    """Create an active medicine on a daily schedule.

    The extraction model is never asked about inventory, so the course starts
    with DEFAULT_MEDICATION_INVENTORY doses.
    """
    schedule_times = [t for t in (times or []) if t] or list(DEFAULT_MEDICATION_TIMES)
    return Medicine(
        id=str(uuid.uuid4()),
        family_id=family_id,
        name=name,
        dosage=dosage,
        schedule={"type": MEDICATION_SCHEDULE_DAILY, "times": schedule_times},
        active=True,
        inventory=DEFAULT_MEDICATION_INVENTORY,
        start_date=start_date,
        end_date=end_date,
        created_at=_utcnow(),
    )
