"""Points API endpoints — user totals and image likes."""

from fastapi import APIRouter, Depends, HTTPException, Query

from where_app.dependencies.auth import get_current_user, require_user_api
from where_app.dependencies.services import get_points_service
from where_app.models.user import SessionUser
from where_app.schemas.points import ImageLikes, LikeRequest, PointActivityRead, UserPoints
from where_app.services.points_service import PointsService

router = APIRouter(prefix="/points", tags=["points"])


@router.get("/users/{user_id}", response_model=UserPoints)
def get_user_points(
    user_id: str,
    points: PointsService = Depends(get_points_service),
):
    """Ledger total and activity history for a user."""
    activities = points.get_user_activities(user_id)
    return UserPoints(
        user_id=user_id,
        total_points=points.get_user_points(user_id),
        activities=[PointActivityRead.from_activity(a) for a in activities],
    )


@router.get("/likes", response_model=ImageLikes)
def get_image_likes(
    image_url: str = Query(...),
    user: SessionUser | None = Depends(get_current_user),
    points: PointsService = Depends(get_points_service),
):
    return ImageLikes(
        image_url=image_url,
        likes=points.get_image_likes(image_url),
        liked_by_me=points.is_image_liked_by_user(user.id, image_url) if user else False,
    )


@router.post("/likes", response_model=ImageLikes)
def like_image(
    payload: LikeRequest,
    user: SessionUser = Depends(require_user_api),
    points: PointsService = Depends(get_points_service),
):
    """Like an image of a location. Repeat likes are ignored."""
    location = points.store.get_location(payload.location_id)
    if not location:
        raise HTTPException(status_code=404, detail="Location not found")
    if payload.image_url not in location.all_images:
        raise HTTPException(status_code=400, detail="Image does not belong to this location")

    points.like_image(user.id, payload.location_id, payload.image_url)
    points.refresh_cached_total(user.id)
    return ImageLikes(
        image_url=payload.image_url,
        likes=points.get_image_likes(payload.image_url),
        liked_by_me=True,
    )


@router.delete("/likes", response_model=ImageLikes)
def unlike_image(
    location_id: str = Query(...),
    image_url: str = Query(...),
    user: SessionUser = Depends(require_user_api),
    points: PointsService = Depends(get_points_service),
):
    """Remove a like. Engagement points already paid out are kept."""
    points.unlike_image(user.id, location_id, image_url)
    return ImageLikes(
        image_url=image_url,
        likes=points.get_image_likes(image_url),
        liked_by_me=False,
    )
