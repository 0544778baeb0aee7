"""
Identity resolution and owner registration.

Identity is re-derived from storage on every call; nothing is cached in
process, so concurrent requests never share session state.
"""

from typing import Optional
from sqlalchemy.orm import Session
import logging
import uuid

from domain.models import Owner
from repositories import OwnerRepository
from app.exceptions import DuplicateContactError, UnauthorizedError

logger = logging.getLogger("dietlog.identity")


def new_session_token() -> str:
    """Mint a fresh, globally unique opaque session token"""
    return str(uuid.uuid4())


class IdentityService:
    """Business logic for session-token identities"""

    @staticmethod
    def resolve_owner(db: Session, session_id: Optional[str]) -> Owner:
        """
        Map a session token to its owner.

        Raises:
            UnauthorizedError: token absent, or no owner holds it
        """
        if not session_id:
            raise UnauthorizedError()

        owner = OwnerRepository(db).get_by_session_id(session_id)
        if owner is None:
            logger.info("session_rejected reason=unknown_token")
            raise UnauthorizedError()
        return owner

    @staticmethod
    def register_owner(db: Session, name: str, email: str) -> Owner:
        """
        Create a new owner and issue its session token.

        The email pre-check is advisory; the unique constraint in storage
        decides races and surfaces them as DuplicateContactError too.

        Raises:
            DuplicateContactError: an owner with this email already exists
        """
        repo = OwnerRepository(db)
        if repo.get_by_email(email) is not None:
            logger.info("owner_registration_rejected reason=duplicate_email")
            raise DuplicateContactError(email)

        owner = repo.create_owner(name=name, email=email, session_id=new_session_token())
        logger.info(f"owner_registered owner_id={owner.id}")
        return owner
