"""User registration routes"""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
import logging

from api.dependencies import get_db_session, get_current_owner
from api.responses import BAD_REQUEST, UNAUTHORIZED
from app.config import settings
from domain.models import Owner
from domain.schemas import UserCreate, SessionResponse, OwnerResponse
from services.identity_service import IdentityService

router = APIRouter(prefix="/users", tags=["Users"])
logger = logging.getLogger("dietlog.api.users")


@router.post(
    "",
    response_model=SessionResponse,
    status_code=status.HTTP_201_CREATED,
    responses=BAD_REQUEST,
)
def create_user(
    user: UserCreate, response: Response, db: Session = Depends(get_db_session)
):
    """Register a new user and hand back its session token as a cookie."""
    owner = IdentityService.register_owner(db, user.name, user.email)
    response.set_cookie(
        key=settings.session_cookie_name,
        value=owner.session_id,
        max_age=settings.session_cookie_max_age,
        path="/",
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="lax",
    )
    return SessionResponse(session_id=owner.session_id)


@router.get("/me", response_model=OwnerResponse, responses=UNAUTHORIZED)
def get_me(owner: Owner = Depends(get_current_owner)):
    """Return the user bound to the session cookie."""
    return OwnerResponse.model_validate(owner)
