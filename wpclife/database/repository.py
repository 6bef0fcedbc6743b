"""Repository layer for household record operations."""

import logging
from typing import List
from sqlalchemy.orm import Session
from sqlalchemy import desc

from wpclife.models.household import Chore, Reminder, GroceryItem, Medicine
from wpclife.database.models import ChoreDB, ReminderDB, GroceryItemDB, MedicineDB

logger = logging.getLogger(__name__)


class HouseholdRepository:
    """Repository for chores, reminders, grocery items and medicines."""

    def __init__(self, db: Session):
        self.db = db

    def _add(self, row, kind: str, record_id: str, label: str):
        try:
            self.db.add(row)
            self.db.commit()
            self.db.refresh(row)
            logger.debug(f"Created {kind} {record_id}: {label[:50]}")
            return row.to_pydantic()
        except Exception as e:
            self.db.rollback()
            logger.error(f"Failed to create {kind} {record_id}: {type(e).__name__}: {str(e)}")
            raise

    def create_chore(self, chore: Chore) -> Chore:
        """Create a new chore."""
        return self._add(ChoreDB.from_pydantic(chore), "chore", chore.id, chore.title)

    def create_reminder(self, reminder: Reminder) -> Reminder:
        """Create a new reminder."""
        return self._add(ReminderDB.from_pydantic(reminder), "reminder", reminder.id, reminder.title)

    def create_grocery_item(self, item: GroceryItem) -> GroceryItem:
        """Create a new grocery item."""
        return self._add(GroceryItemDB.from_pydantic(item), "grocery item", item.id, item.name)

    def create_medicine(self, medicine: Medicine) -> Medicine:
        """Create a new medicine."""
        return self._add(MedicineDB.from_pydantic(medicine), "medicine", medicine.id, medicine.name)

    def list_chores(self, family_id: str) -> List[Chore]:
        """Get all chores for a family (oldest first)."""
        rows = self.db.query(ChoreDB).filter(ChoreDB.family_id == family_id).order_by(ChoreDB.created_at).all()
        return [row.to_pydantic() for row in rows]

    def list_reminders(self, family_id: str) -> List[Reminder]:
        """Get all reminders for a family (oldest first)."""
        rows = self.db.query(ReminderDB).filter(ReminderDB.family_id == family_id).order_by(ReminderDB.created_at).all()
        return [row.to_pydantic() for row in rows]

    def list_grocery_items(self, family_id: str) -> List[GroceryItem]:
        """Get all grocery items for a family (most recently updated first)."""
        rows = (
            self.db.query(GroceryItemDB)
            .filter(GroceryItemDB.family_id == family_id)
            .order_by(desc(GroceryItemDB.updated_at))
            .all()
        )
        return [row.to_pydantic() for row in rows]

    def list_medicines(self, family_id: str) -> List[Medicine]:
        """Get all medicines for a family (oldest first)."""
        rows = self.db.query(MedicineDB).filter(MedicineDB.family_id == family_id).order_by(MedicineDB.created_at).all()
        return [row.to_pydantic() for row in rows]
