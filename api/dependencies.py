"""
API dependencies for dependency injection
"""

from typing import Generator, Optional
from fastapi import Depends, Request
from sqlalchemy.orm import Session

from app.config import settings
from domain.models import Owner
from domain.models import get_db_session as _session_scope
from services.identity_service import IdentityService


def get_db_session() -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI routes.

    Usage:
        @router.get("/example")
        def example(db: Session = Depends(get_db_session)):
            # Use db session here
            pass
    """
    yield from _session_scope()


def get_session_token(request: Request) -> Optional[str]:
    """Session token carried by the configured cookie, if any"""
    return request.cookies.get(settings.session_cookie_name)


def get_current_owner(
    session_id: Optional[str] = Depends(get_session_token),
    db: Session = Depends(get_db_session),
) -> Owner:
    """
    Resolve the calling owner; raises UnauthorizedError before the route
    body runs when the token is missing or unknown.
    """
    return IdentityService.resolve_owner(db, session_id)
