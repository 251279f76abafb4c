"""Pydantic schemas for session identity and referrals."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class LoginRequest(BaseModel):
    username: str
    referral_code: str | None = None


class SessionRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    username: str | None = None
    is_anonymous: bool
    points: float


class ReferralCode(BaseModel):
    code: str


class ReferralClaim(BaseModel):
    code: str


class ReferralRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    referrer_id: str
    referred_id: str
    code: str
    created_at: datetime
    claimed: bool


class UserReferrals(BaseModel):
    user_id: str
    code: str | None = None
    count: int
    referrals: list[ReferralRead]
