"""Referral endpoints."""

from fastapi import APIRouter, Depends, HTTPException

from where_app.dependencies.auth import require_user_api
from where_app.dependencies.services import get_referral_service
from where_app.models.user import SessionUser
from where_app.schemas.session import ReferralClaim, ReferralCode, ReferralRead, UserReferrals
from where_app.services.referral_service import ReferralService

router = APIRouter(prefix="/referrals", tags=["referrals"])


@router.post("/code", response_model=ReferralCode)
def get_or_create_code(
    user: SessionUser = Depends(require_user_api),
    referrals: ReferralService = Depends(get_referral_service),
):
    return ReferralCode(code=referrals.generate_referral_code(user.id))


@router.post("/claim", status_code=204)
def claim(
    payload: ReferralClaim,
    user: SessionUser = Depends(require_user_api),
    referrals: ReferralService = Depends(get_referral_service),
):
    if not referrals.claim_referral(payload.code, user.id):
        raise HTTPException(status_code=400, detail="Invalid or already claimed referral code")


@router.get("/users/{user_id}", response_model=UserReferrals)
def get_user_referrals(
    user_id: str,
    referrals: ReferralService = Depends(get_referral_service),
):
    items = referrals.get_user_referrals(user_id)
    return UserReferrals(
        user_id=user_id,
        code=referrals.get_referral_code(user_id),
        count=referrals.get_referral_count(user_id),
        referrals=[ReferralRead.model_validate(r) for r in items],
    )
