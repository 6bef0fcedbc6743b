"""Dispatch of extracted candidate items into household records.

For each candidate, in input order, the dispatcher:
1. Drops items without a type or title, or with an unsupported type
2. Resolves defaults (points, category, times, dates) from constants
3. Resolves a chore assignee by fuzzy name match against the family
4. Converts caller-local times to UTC using the caller's timezone
5. Calls the matching repository create method

Counters and the echo list are updated for every classified item, whether or
not its create call succeeds. Create calls run sequentially and each failure
is isolated: it is logged, counted in ``failed``, and the batch continues.
"""

import logging
import os
from datetime import date, datetime, timezone
from typing import Any, Callable, Dict, Iterable, List, Optional

from dotenv import load_dotenv

from wpclife.engine.timezones import local_today, local_to_utc, parse_local_date
from wpclife.models.candidate import (
    ChoreCandidate,
    GroceryCandidate,
    MedicationCandidate,
    ReminderCandidate,
    parse_candidate,
)
from wpclife.models.household import User
from wpclife.models.household_factory import (
    create_chore_base,
    create_grocery_item_base,
    create_medicine_base,
    create_reminder_base,
)

load_dotenv()

logger = logging.getLogger(__name__)


def default_family_fallback_enabled() -> bool:
    """Whether a missing familyId falls back to the first family in the system."""
    return os.getenv("ALLOW_DEFAULT_FAMILY_FALLBACK", "True").lower() == "true"


def find_member_by_name(members: Iterable[User], name: str) -> Optional[User]:
    """Fuzzy-match a free-text name to a family member.

    A member matches when their lower-cased, trimmed name contains the search
    term or is contained by it. The first match in member order wins; members
    without a name are ignored. A blank search term matches nobody.
    """
    search = (name or "").lower().strip()
    if not search:
        return None
    for member in members:
        if not member.name:
            continue
        member_name = member.name.lower().strip()
        if not member_name:
            continue
        if search in member_name or member_name in search:
            return member
    return None


def resolve_family_id(family_repository, family_id: Optional[str]) -> Optional[str]:
    """Explicit family wins; otherwise fall back to the first family in the system.

    The fallback is a compatibility default for single-household deployments and
    can be disabled with ALLOW_DEFAULT_FAMILY_FALLBACK=false.
    """
    if family_id:
        return family_id
    if not default_family_fallback_enabled():
        return None
    fallback = family_repository.get_default_family_id()
    if fallback:
        logger.warning(f"No familyId supplied. Falling back to first family {fallback}.")
    return fallback


class DispatchResult:
    """Result of a dispatch operation."""

    def __init__(self):
        self.items: List[Dict[str, Any]] = []
        self.chores_created = 0
        self.reminders_created = 0
        self.groceries_created = 0
        self.medications_created = 0
        # Classified items whose create call failed (or had no family to go to)
        self.failed = 0
        self.message = ""

    @property
    def total_created(self) -> int:
        return self.chores_created + self.reminders_created + self.groceries_created + self.medications_created

    def to_response(self) -> Dict[str, Any]:
        """Wire representation of the result."""
        return {
            "message": self.message,
            "items": list(self.items),
            "choresCreated": self.chores_created,
            "remindersCreated": self.reminders_created,
            "groceriesCreated": self.groceries_created,
            "medicationsCreated": self.medications_created,
        }


class ScheduleDispatcher:
    """Turns candidate items into persisted chores, reminders, groceries and medicines."""

    def __init__(
        self,
        household_repository,
        family_repository,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """Initialize dispatcher.

        Args:
            household_repository: Provides create_chore / create_reminder /
                create_grocery_item / create_medicine
            family_repository: Provides list_members and get_default_family_id
            clock: Returns the current UTC instant (defaults to the system clock)
        """
        self.household_repository = household_repository
        self.family_repository = family_repository
        self.clock = clock or (lambda: datetime.now(timezone.utc))

    def resolve_family_id(self, family_id: Optional[str]) -> Optional[str]:
        return resolve_family_id(self.family_repository, family_id)

    def dispatch(
        self,
        items: Iterable[Any],
        family_id: Optional[str],
        tz_name: Optional[str] = None,
    ) -> DispatchResult:
        """Dispatch candidate items for a family.

        Args:
            items: Raw item dicts (or candidate models) in provider order
            family_id: Target family (falls back per resolve_family_id)
            tz_name: Caller's IANA timezone for dates and times

        Returns:
            DispatchResult with counters and the echo list
        """
        result = DispatchResult()
        target_family_id = self.resolve_family_id(family_id)
        if not target_family_id:
            logger.warning("No family available. Items will be classified but not saved.")

        now = self.clock()
        members: Optional[List[User]] = None

        for raw in items:
            candidate = parse_candidate(raw)
            if candidate is None:
                continue

            if isinstance(candidate, ChoreCandidate):
                result.chores_created += 1
            elif isinstance(candidate, ReminderCandidate):
                result.reminders_created += 1
            elif isinstance(candidate, GroceryCandidate):
                result.groceries_created += 1
            elif isinstance(candidate, MedicationCandidate):
                result.medications_created += 1
            result.items.append(candidate.to_echo())

            if not target_family_id:
                result.failed += 1
                continue

            try:
                if isinstance(candidate, ChoreCandidate):
                    if candidate.assigned_to_name and members is None:
                        members = self.family_repository.list_members(target_family_id)
                    self._create_chore(candidate, target_family_id, tz_name, now, members or [])
                elif isinstance(candidate, ReminderCandidate):
                    self._create_reminder(candidate, target_family_id, tz_name, now)
                elif isinstance(candidate, GroceryCandidate):
                    self._create_grocery_item(candidate, target_family_id)
                elif isinstance(candidate, MedicationCandidate):
                    self._create_medicine(candidate, target_family_id, tz_name, now)
            except Exception as e:
                result.failed += 1
                logger.error(f"Failed to save {candidate.type} '{candidate.title[:50]}': {type(e).__name__}")

        logger.debug(
            f"Dispatched {len(result.items)} items "
            f"(chores={result.chores_created}, reminders={result.reminders_created}, "
            f"groceries={result.groceries_created}, medications={result.medications_created}, "
            f"failed={result.failed})"
        )
        return result

    def _today(self, tz_name: Optional[str], now: datetime) -> date:
        return local_today(tz_name, now=now)

    def _create_chore(
        self,
        candidate: ChoreCandidate,
        family_id: str,
        tz_name: Optional[str],
        now: datetime,
        members: List[User],
    ):
        assigned_to = None
        if candidate.assigned_to_name:
            member = find_member_by_name(members, candidate.assigned_to_name)
            if member:
                assigned_to = member.id
            else:
                logger.debug(f"No family member matches '{candidate.assigned_to_name[:50]}'. Leaving chore unassigned.")

        due_date = parse_local_date(candidate.date_time) or self._today(tz_name, now)
        chore = create_chore_base(
            family_id=family_id,
            title=candidate.title,
            due_date=due_date,
            points=candidate.points,
            assigned_to=assigned_to,
        )
        return self.household_repository.create_chore(chore)

    def _to_utc(self, value: Optional[str], tz_name: Optional[str]) -> Optional[datetime]:
        if not value:
            return None
        try:
            return local_to_utc(value, tz_name)
        except (ValueError, OverflowError):
            logger.warning(f"Ignoring unparseable datetime '{value[:40]}'")
            return None

    def _create_reminder(
        self,
        candidate: ReminderCandidate,
        family_id: str,
        tz_name: Optional[str],
        now: datetime,
    ):
        start_time = self._to_utc(candidate.date_time, tz_name) or now
        end_time = self._to_utc(candidate.end_date_time, tz_name)
        reminder = create_reminder_base(
            family_id=family_id,
            title=candidate.title,
            start_time=start_time,
            end_time=end_time,
            description=candidate.description,
            tz_name=tz_name,
        )
        return self.household_repository.create_reminder(reminder)

    def _create_grocery_item(self, candidate: GroceryCandidate, family_id: str):
        item = create_grocery_item_base(
            family_id=family_id,
            name=candidate.title,
            category=candidate.category,
            store=candidate.store,
        )
        return self.household_repository.create_grocery_item(item)

    def _create_medicine(
        self,
        candidate: MedicationCandidate,
        family_id: str,
        tz_name: Optional[str],
        now: datetime,
    ):
        medicine = create_medicine_base(
            family_id=family_id,
            name=candidate.title,
            start_date=parse_local_date(candidate.start_date) or self._today(tz_name, now),
            end_date=parse_local_date(candidate.end_date),
            times=candidate.times,
            dosage=candidate.dosage,
        )
        return self.household_repository.create_medicine(medicine)
