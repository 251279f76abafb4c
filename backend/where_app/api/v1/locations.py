"""Location API endpoints — creation and engagement actions."""

from fastapi import APIRouter, Depends, HTTPException, Query

from where_app.dependencies.auth import require_user_api
from where_app.dependencies.services import get_location_service
from where_app.exceptions import LocationNotFoundError, NotAuthorizedError
from where_app.models.user import SessionUser
from where_app.schemas.location import (
    CommentCreate,
    CommentRead,
    ImageCreate,
    LocationCreate,
    LocationRead,
    LocationSummary,
    RatingInput,
)
from where_app.services.location_service import LocationService

router = APIRouter(prefix="/locations", tags=["locations"])


@router.get("", response_model=list[LocationSummary])
def list_locations(
    service: LocationService = Depends(get_location_service),
    verified: bool | None = Query(None, description="Filter by verification status"),
):
    """List locations, most rated first."""
    locations = service.list_locations()
    if verified is not None:
        locations = [loc for loc in locations if loc.verified == verified]
    locations.sort(key=lambda loc: loc.rating_count, reverse=True)
    return [LocationSummary.model_validate(loc) for loc in locations]


@router.post("", response_model=LocationRead, status_code=201)
def create_location(
    payload: LocationCreate,
    service: LocationService = Depends(get_location_service),
):
    location = service.add_location(
        name=payload.name,
        description=payload.description,
        latitude=payload.latitude,
        longitude=payload.longitude,
        images=payload.images,
        ratings=payload.ratings.model_dump() if payload.ratings else None,
    )
    return LocationRead.model_validate(location)


@router.get("/{location_id}", response_model=LocationRead)
def get_location(
    location_id: str,
    service: LocationService = Depends(get_location_service),
):
    """Get a single location by ID."""
    try:
        location = service.get_location(location_id)
    except LocationNotFoundError:
        raise HTTPException(status_code=404, detail="Location not found")
    return LocationRead.model_validate(location)


@router.post("/{location_id}/ratings", response_model=LocationRead)
def rate_location(
    location_id: str,
    payload: RatingInput,
    service: LocationService = Depends(get_location_service),
):
    """Submit a rating vector; returns the location with updated averages."""
    try:
        location = service.rate_location(location_id, payload.model_dump())
    except LocationNotFoundError:
        raise HTTPException(status_code=404, detail="Location not found")
    return LocationRead.model_validate(location)


@router.post("/{location_id}/comments", response_model=CommentRead, status_code=201)
def add_comment(
    location_id: str,
    payload: CommentCreate,
    service: LocationService = Depends(get_location_service),
):
    text = payload.text.strip()
    if not text:
        raise HTTPException(status_code=400, detail="Comment text is required")
    try:
        comment = service.add_comment(location_id, text)
    except LocationNotFoundError:
        raise HTTPException(status_code=404, detail="Location not found")
    return CommentRead.model_validate(comment)


@router.post("/{location_id}/verify", response_model=LocationRead)
def verify_location(
    location_id: str,
    service: LocationService = Depends(get_location_service),
):
    try:
        location = service.verify_location(location_id)
    except LocationNotFoundError:
        raise HTTPException(status_code=404, detail="Location not found")
    return LocationRead.model_validate(location)


@router.post("/{location_id}/images", response_model=LocationRead, status_code=201)
def add_image(
    location_id: str,
    payload: ImageCreate,
    service: LocationService = Depends(get_location_service),
):
    try:
        location = service.add_image(location_id, payload.image_url)
    except LocationNotFoundError:
        raise HTTPException(status_code=404, detail="Location not found")
    return LocationRead.model_validate(location)


@router.delete("/{location_id}/images", response_model=LocationRead)
def remove_image(
    location_id: str,
    image_url: str = Query(..., description="URL of the image to remove"),
    user: SessionUser = Depends(require_user_api),
    service: LocationService = Depends(get_location_service),
):
    """Remove an image (creator only)."""
    try:
        location = service.remove_image(location_id, image_url)
    except LocationNotFoundError:
        raise HTTPException(status_code=404, detail="Location not found")
    except NotAuthorizedError as e:
        raise HTTPException(status_code=403, detail=str(e))
    return LocationRead.model_validate(location)
