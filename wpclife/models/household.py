"""Household record models for wpclife."""

from datetime import date, datetime
from typing import Any, Dict, List, Optional
from enum import Enum
from pydantic import BaseModel, Field

from wpclife.models.constants import (
    DEFAULT_CHORE_POINTS,
    DEFAULT_GROCERY_CATEGORY,
    DEFAULT_MEDICATION_INVENTORY,
    DEFAULT_REMINDER_TYPE,
)


class ChoreStatus(str, Enum):
    """Chore status enumeration."""
    PENDING = "PENDING"
    DONE = "DONE"


class GroceryStatus(str, Enum):
    """Grocery item status enumeration."""
    NEEDED = "NEEDED"
    GOT = "GOT"


class MemberStatus(str, Enum):
    """Family membership status enumeration."""
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"


class Family(BaseModel):
    """A household."""

    id: str = Field(..., description="Unique family identifier (UUID v4)")
    name: str = Field(..., description="Family display name")
    timezone: Optional[str] = Field(None, description="IANA timezone of the household")
    created_at: datetime = Field(..., description="Family creation timestamp")


class User(BaseModel):
    """A person who can be a member of a family."""

    id: str = Field(..., description="Unique user identifier (UUID v4)")
    name: str = Field(..., description="User display name")
    email: Optional[str] = Field(None, description="User email address (kids may have none)")
    is_child: bool = Field(False, description="Whether the user is a child account")
    created_at: datetime = Field(..., description="User creation timestamp")


class FamilyMember(BaseModel):
    """Membership of a user in a family."""

    id: str
    family_id: str
    user_id: str
    status: MemberStatus = MemberStatus.ACTIVE
    joined_at: datetime

    class Config:
        """Pydantic configuration."""
        use_enum_values = True


class Chore(BaseModel):
    """A chore owed by a family member."""

    id: str = Field(..., description="Unique chore identifier (UUID v4)")
    family_id: str = Field(..., description="Owning family")
    title: str = Field(..., description="Chore title")
    assigned_to: Optional[str] = Field(None, description="User ID of the assignee (null if unassigned)")
    due_date: Optional[date] = Field(None, description="Due date (date-only, caller's calendar)")
    points: int = Field(DEFAULT_CHORE_POINTS, description="Points earned on completion")
    status: ChoreStatus = Field(ChoreStatus.PENDING, description="Chore status")
    created_at: datetime = Field(..., description="Chore creation timestamp")

    class Config:
        """Pydantic configuration."""
        use_enum_values = True


class Reminder(BaseModel):
    """A one-off or repeating reminder.

    Start and end times are always UTC instants; ``timezone`` records the zone
    the caller used when the reminder was created.
    """

    id: str = Field(..., description="Unique reminder identifier (UUID v4)")
    family_id: str = Field(..., description="Owning family")
    title: str = Field(..., description="Reminder title")
    description: Optional[str] = Field(None, description="Free-text description")
    type: str = Field(DEFAULT_REMINDER_TYPE, description="Reminder kind")
    schedule: Dict[str, Any] = Field(..., description="Schedule definition, e.g. {'type': 'ONCE'}")
    start_time: Optional[datetime] = Field(None, description="Start instant (UTC)")
    end_time: Optional[datetime] = Field(None, description="End instant (UTC)")
    timezone: Optional[str] = Field(None, description="Caller's IANA timezone")
    is_active: bool = Field(True, description="Whether the reminder fires")
    created_at: datetime = Field(..., description="Reminder creation timestamp")
    updated_at: datetime = Field(..., description="Reminder last update timestamp")


class GroceryItem(BaseModel):
    """An entry on the family grocery list."""

    id: str = Field(..., description="Unique grocery item identifier (UUID v4)")
    family_id: str = Field(..., description="Owning family")
    name: str = Field(..., description="Item name")
    quantity: Optional[str] = Field(None, description="Free-form quantity, e.g. '2L'")
    category: str = Field(DEFAULT_GROCERY_CATEGORY, description="Grocery category")
    store: Optional[str] = Field(None, description="Store to buy from")
    notes: Optional[str] = Field(None, description="Item notes")
    status: GroceryStatus = Field(GroceryStatus.NEEDED, description="Grocery status")
    purchase_count: int = Field(0, description="How many times the item was bought")
    updated_at: datetime = Field(..., description="Last update timestamp")

    class Config:
        """Pydantic configuration."""
        use_enum_values = True


class Medicine(BaseModel):
    """A medication course with a daily dosing schedule."""

    id: str = Field(..., description="Unique medicine identifier (UUID v4)")
    family_id: str = Field(..., description="Owning family")
    name: str = Field(..., description="Medicine name")
    dosage: Optional[str] = Field(None, description="Dosage, e.g. '500mg'")
    schedule: Dict[str, Any] = Field(..., description="Schedule, e.g. {'type': 'DAILY', 'times': ['08:00']}")
    assigned_to: Optional[str] = Field(None, description="User ID taking the medicine")
    active: bool = Field(True, description="Whether the course is active")
    inventory: int = Field(DEFAULT_MEDICATION_INVENTORY, description="Doses on hand")
    start_date: Optional[date] = Field(None, description="First day of the course")
    end_date: Optional[date] = Field(None, description="Last day of the course (null if open-ended)")
    created_at: datetime = Field(..., description="Medicine creation timestamp")

    @property
    def times(self) -> List[str]:
        return list(self.schedule.get("times") or [])
