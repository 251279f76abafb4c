"""API v1 router aggregation."""

from fastapi import APIRouter

from where_app.api.v1.locations import router as locations_router
from where_app.api.v1.points import router as points_router
from where_app.api.v1.referrals import router as referrals_router
from where_app.api.v1.session import router as session_router

router = APIRouter(prefix="/api/v1")

router.include_router(session_router)
router.include_router(locations_router)
router.include_router(points_router)
router.include_router(referrals_router)
