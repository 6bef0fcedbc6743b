"""Data models for wpclife."""

from wpclife.models.household import (
    Family,
    User,
    FamilyMember,
    MemberStatus,
    Chore,
    ChoreStatus,
    Reminder,
    GroceryItem,
    GroceryStatus,
    Medicine,
)
from wpclife.models.candidate import (
    CandidateItem,
    ChoreCandidate,
    ReminderCandidate,
    GroceryCandidate,
    MedicationCandidate,
    parse_candidate,
)

__all__ = [
    "Family",
    "User",
    "FamilyMember",
    "MemberStatus",
    "Chore",
    "ChoreStatus",
    "Reminder",
    "GroceryItem",
    "GroceryStatus",
    "Medicine",
    "CandidateItem",
    "ChoreCandidate",
    "ReminderCandidate",
    "GroceryCandidate",
    "MedicationCandidate",
    "parse_candidate",
]
