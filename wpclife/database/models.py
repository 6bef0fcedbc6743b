"""SQLAlchemy database models for wpclife."""

from datetime import datetime, timezone
from typing import Optional, Union, TypeVar, Type
import uuid
from sqlalchemy import Column, String, Integer, Boolean, Date, DateTime, JSON, ForeignKey, Text

from wpclife.database.database import Base
from wpclife.models.household import ChoreStatus, GroceryStatus, MemberStatus
from wpclife.models.constants import (
    DEFAULT_CHORE_POINTS,
    DEFAULT_GROCERY_CATEGORY,
    DEFAULT_MEDICATION_INVENTORY,
)

T = TypeVar('T')


def enum_to_value(enum_obj: Union[str, T]) -> str:
    """Convert enum to string value (handles both enum and string).

    Args:
        enum_obj: Enum instance or string value

    Returns:
        String value of the enum, or the string itself if already a string
    """
    if hasattr(enum_obj, 'value'):
        return enum_obj.value
    return str(enum_obj)


def value_to_enum(value: str, enum_class: Type[T], default: T) -> T:
    """Convert string to enum with fallback to default.

    Household statuses are stored upper-case (e.g. 'PENDING', 'NEEDED').
    """
    if not value:
        return default
    try:
        return enum_class(value.upper())
    except (ValueError, AttributeError):
        return default


def to_naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Normalize an instant to naive UTC for storage."""
    if value is None:
        return None
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def from_naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Re-attach UTC to a stored naive instant."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class FamilyDB(Base):
    """Database model for Family."""

    __tablename__ = "families"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String(100), nullable=False)
    timezone = Column(String(50), nullable=True)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow, index=True)

    def to_pydantic(self):
        """Convert database model to Pydantic model."""
        from wpclife.models.household import Family
        return Family(
            id=self.id,
            name=self.name,
            timezone=self.timezone,
            created_at=self.created_at,
        )


class UserDB(Base):
    """Database model for User."""

    __tablename__ = "users"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String(100), nullable=False)
    email = Column(String(150), nullable=True, unique=True)
    is_child = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)

    def to_pydantic(self):
        """Convert database model to Pydantic model."""
        from wpclife.models.household import User
        return User(
            id=self.id,
            name=self.name,
            email=self.email,
            is_child=self.is_child,
            created_at=self.created_at,
        )


class FamilyMemberDB(Base):
    """Database model for FamilyMember (user <-> family link)."""

    __tablename__ = "family_members"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    family_id = Column(String, ForeignKey("families.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(String, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    status = Column(String(20), nullable=False, default=MemberStatus.ACTIVE.value)
    joined_at = Column(DateTime, nullable=False, default=datetime.utcnow)


class ChoreDB(Base):
    """Database model for Chore."""

    __tablename__ = "chores"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    family_id = Column(String, ForeignKey("families.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String(200), nullable=False)
    assigned_to = Column(String, ForeignKey("users.id"), nullable=True, index=True)
    due_date = Column(Date, nullable=True)
    points = Column(Integer, nullable=False, default=DEFAULT_CHORE_POINTS)
    status = Column(String(20), nullable=False, default=ChoreStatus.PENDING.value)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)

    def to_pydantic(self):
        """Convert database model to Pydantic model."""
        from wpclife.models.household import Chore
        return Chore(
            id=self.id,
            family_id=self.family_id,
            title=self.title,
            assigned_to=self.assigned_to,
            due_date=self.due_date,
            points=self.points,
            status=value_to_enum(self.status, ChoreStatus, ChoreStatus.PENDING),
            created_at=self.created_at,
        )

    @classmethod
    def from_pydantic(cls, chore):
        """Create database model from Pydantic model."""
        return cls(
            id=chore.id,
            family_id=chore.family_id,
            title=chore.title,
            assigned_to=chore.assigned_to,
            due_date=chore.due_date,
            points=chore.points,
            status=enum_to_value(chore.status),
            created_at=chore.created_at,
        )


class ReminderDB(Base):
    """Database model for Reminder. Times are stored as naive UTC."""

    __tablename__ = "reminders"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    family_id = Column(String, ForeignKey("families.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=True)
    type = Column(String(30), nullable=False)
    schedule = Column(JSON, nullable=False)
    start_time = Column(DateTime, nullable=True)
    end_time = Column(DateTime, nullable=True)
    timezone = Column(String(50), nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    def to_pydantic(self):
        """Convert database model to Pydantic model."""
        from wpclife.models.household import Reminder
        return Reminder(
            id=self.id,
            family_id=self.family_id,
            title=self.title,
            description=self.description,
            type=self.type,
            schedule=self.schedule or {},
            start_time=from_naive_utc(self.start_time),
            end_time=from_naive_utc(self.end_time),
            timezone=self.timezone,
            is_active=self.is_active,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )

    @classmethod
    def from_pydantic(cls, reminder):
        """Create database model from Pydantic model."""
        return cls(
            id=reminder.id,
            family_id=reminder.family_id,
            title=reminder.title,
            description=reminder.description,
            type=reminder.type,
            schedule=reminder.schedule,
            start_time=to_naive_utc(reminder.start_time),
            end_time=to_naive_utc(reminder.end_time),
            timezone=reminder.timezone,
            is_active=reminder.is_active,
            created_at=reminder.created_at,
            updated_at=reminder.updated_at,
        )


class GroceryItemDB(Base):
    """Database model for GroceryItem."""

    __tablename__ = "grocery_items"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    family_id = Column(String, ForeignKey("families.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(100), nullable=False)
    quantity = Column(String(50), nullable=True)
    category = Column(String(50), nullable=False, default=DEFAULT_GROCERY_CATEGORY)
    store = Column(String(100), nullable=True)
    notes = Column(Text, nullable=True)
    status = Column(String(20), nullable=False, default=GroceryStatus.NEEDED.value)
    purchase_count = Column(Integer, nullable=False, default=0)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    def to_pydantic(self):
        """Convert database model to Pydantic model."""
        from wpclife.models.household import GroceryItem
        return GroceryItem(
            id=self.id,
            family_id=self.family_id,
            name=self.name,
            quantity=self.quantity,
            category=self.category or DEFAULT_GROCERY_CATEGORY,
            store=self.store,
            notes=self.notes,
            status=value_to_enum(self.status, GroceryStatus, GroceryStatus.NEEDED),
            purchase_count=self.purchase_count or 0,
            updated_at=self.updated_at,
        )

    @classmethod
    def from_pydantic(cls, item):
        """Create database model from Pydantic model."""
        return cls(
            id=item.id,
            family_id=item.family_id,
            name=item.name,
            quantity=item.quantity,
            category=item.category,
            store=item.store,
            notes=item.notes,
            status=enum_to_value(item.status),
            purchase_count=item.purchase_count,
            updated_at=item.updated_at,
        )


class MedicineDB(Base):
    """Database model for Medicine."""

    __tablename__ = "medicines"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    family_id = Column(String, ForeignKey("families.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(100), nullable=False)
    dosage = Column(String(50), nullable=True)
    schedule = Column(JSON, nullable=False)
    assigned_to = Column(String, ForeignKey("users.id"), nullable=True)
    active = Column(Boolean, nullable=False, default=True)
    inventory = Column(Integer, nullable=False, default=DEFAULT_MEDICATION_INVENTORY)
    start_date = Column(Date, nullable=True)
    end_date = Column(Date, nullable=True)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)

    def to_pydantic(self):
        """Convert database model to Pydantic model."""
        from wpclife.models.household import Medicine
        return Medicine(
            id=self.id,
            family_id=self.family_id,
            name=self.name,
            dosage=self.dosage,
            schedule=self.schedule or {},
            assigned_to=self.assigned_to,
            active=self.active,
            inventory=self.inventory,
            start_date=self.start_date,
            end_date=self.end_date,
            created_at=self.created_at,
        )

    @classmethod
    def from_pydantic(cls, medicine):
        """Create database model from Pydantic model."""
        return cls(
            id=medicine.id,
            family_id=medicine.family_id,
            name=medicine.name,
            dosage=medicine.dosage,
            schedule=medicine.schedule,
            assigned_to=medicine.assigned_to,
            active=medicine.active,
            inventory=medicine.inventory,
            start_date=medicine.start_date,
            end_date=medicine.end_date,
            created_at=medicine.created_at,
        )
