from fastapi import APIRouter, Depends, status

from core.context import ViewerContext
from database.store import RowStore, get_store
from routers.auth import get_viewer_context
from schemas.rating import RatingCreate, RatingDetails, RatingResponse
from services.rating import RatingService

router = APIRouter(prefix="/api", tags=["ratings"])

# Public endpoints
@router.get("/services/{service_id}/rating", response_model=RatingDetails)
def get_service_rating(
    service_id: str,
    store: RowStore = Depends(get_store),
    ctx: ViewerContext = Depends(get_viewer_context)
):
    """Rating summary for a service's rating dialog"""
    return RatingService.get_rating_details(store=store, ctx=ctx, service_id=service_id)

# Authenticated endpoints
@router.post("/services/{service_id}/ratings", response_model=RatingResponse, status_code=status.HTTP_201_CREATED)
def create_rating(
    service_id: str,
    rating_data: RatingCreate,
    store: RowStore = Depends(get_store),
    ctx: ViewerContext = Depends(get_viewer_context)
):
    """Submit the viewer's one rating for a service"""
    return RatingService.submit_rating(
        store=store,
        ctx=ctx,
        service_id=service_id,
        rating_data=rating_data
    )
