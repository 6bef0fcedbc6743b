"""Repository for Family and membership database operations."""

import logging
from typing import List, Optional
from sqlalchemy.orm import Session

from wpclife.models.household import Family, User, MemberStatus
from wpclife.database.models import FamilyDB, UserDB, FamilyMemberDB

logger = logging.getLogger(__name__)


class FamilyRepository:
    """Repository for Family database operations (the family directory)."""

    def __init__(self, db: Session):
        self.db = db

    def get(self, family_id: str) -> Optional[Family]:
        """Get family by ID."""
        family_db = self.db.query(FamilyDB).filter(FamilyDB.id == family_id).first()
        return family_db.to_pydantic() if family_db else None

    def get_default_family_id(self) -> Optional[str]:
        """Return the first family in the system (oldest first), if any."""
        row = self.db.query(FamilyDB.id).order_by(FamilyDB.created_at, FamilyDB.id).first()
        return row[0] if row else None

    def list_members(self, family_id: str) -> List[User]:
        """List active members of a family in join order."""
        users_db = (
            self.db.query(UserDB)
            .join(FamilyMemberDB, FamilyMemberDB.user_id == UserDB.id)
            .filter(
                FamilyMemberDB.family_id == family_id,
                FamilyMemberDB.status == MemberStatus.ACTIVE.value,
            )
            .order_by(FamilyMemberDB.joined_at, FamilyMemberDB.id)
            .all()
        )
        return [user_db.to_pydantic() for user_db in users_db]

    def create_family(self, name: str, timezone: Optional[str] = None) -> Family:
        """Create a new family."""
        try:
            family_db = FamilyDB(name=name, timezone=timezone)
            self.db.add(family_db)
            self.db.commit()
            self.db.refresh(family_db)
            logger.debug(f"Created family {family_db.id}")
            return family_db.to_pydantic()
        except Exception as e:
            self.db.rollback()
            logger.error(f"Failed to create family: {type(e).__name__}: {str(e)}")
            raise

    def add_member(self, family_id: str, name: str, email: Optional[str] = None, is_child: bool = False) -> User:
        """Create a user and add them to a family."""
        try:
            user_db = UserDB(name=name, email=email, is_child=is_child)
            self.db.add(user_db)
            self.db.flush()
            self.db.add(FamilyMemberDB(family_id=family_id, user_id=user_db.id))
            self.db.commit()
            self.db.refresh(user_db)
            logger.debug(f"Added member {user_db.id} to family {family_id}")
            return user_db.to_pydantic()
        except Exception as e:
            self.db.rollback()
            logger.error(f"Failed to add member to family {family_id}: {type(e).__name__}: {str(e)}")
            raise
