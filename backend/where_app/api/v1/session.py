"""Session endpoints. Identity only, no credentials."""

import uuid

from fastapi import APIRouter, Depends, HTTPException

from where_app.dependencies.auth import require_user_api
from where_app.dependencies.services import get_referral_service, get_session
from where_app.models.user import SessionUser
from where_app.schemas.session import LoginRequest, SessionRead
from where_app.services.referral_service import ReferralService
from where_app.services.session import RequestSession

router = APIRouter(prefix="/session", tags=["session"])


@router.post("/login", response_model=SessionRead)
def login(
    payload: LoginRequest,
    session: RequestSession = Depends(get_session),
    referrals: ReferralService = Depends(get_referral_service),
):
    """Start a named session. Claims ``referral_code`` for the new user if given."""
    username = payload.username.strip()
    if not username:
        raise HTTPException(status_code=400, detail="Username is required")

    user = SessionUser(id=f"user_{uuid.uuid4().hex[:12]}", username=username)
    session.login(user)
    referrals.generate_referral_code(user.id)
    if payload.referral_code:
        referrals.claim_referral(payload.referral_code, user.id)
    return SessionRead.model_validate(session.current_user())


@router.post("/guest", response_model=SessionRead)
def continue_as_guest(session: RequestSession = Depends(get_session)):
    user = SessionUser(id=f"anonymous_{uuid.uuid4().hex[:12]}", is_anonymous=True)
    session.login(user)
    return SessionRead.model_validate(session.current_user())


@router.post("/logout", status_code=204)
def logout(session: RequestSession = Depends(get_session)):
    session.logout()


@router.get("/me", response_model=SessionRead)
def me(user: SessionUser = Depends(require_user_api)):
    return SessionRead.model_validate(user)
