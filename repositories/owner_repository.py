"""
Owner Repository - Data access layer for registered identities
"""

from typing import Optional
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError

from repositories.base import BaseRepository
from domain.models import Owner
from app.exceptions import DuplicateContactError


class OwnerRepository(BaseRepository[Owner]):
    """Repository for owner data access"""

    def __init__(self, db: Session):
        super().__init__(db, Owner)

    def get_by_email(self, email: str) -> Optional[Owner]:
        """Get owner by contact address"""
        return self.db.query(Owner).filter(Owner.email == email).first()

    def get_by_session_id(self, session_id: str) -> Optional[Owner]:
        """Get the owner holding a session token"""
        return self.db.query(Owner).filter(Owner.session_id == session_id).first()

    def create_owner(self, name: str, email: str, session_id: str) -> Owner:
        """Insert a new owner.

        The unique constraint on ``email`` is the authoritative duplicate
        guard; a violation is rolled back and raised as DuplicateContactError.
        """
        owner = Owner(name=name, email=email, session_id=session_id)
        try:
            self.db.add(owner)
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise DuplicateContactError(email)
        self.db.refresh(owner)
        return owner
