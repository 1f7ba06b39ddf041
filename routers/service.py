from typing import Optional
import logging

from fastapi import APIRouter, Depends, Query, status

from core.context import ViewerContext
from core.response import directory_response, success_response
from database.store import RowStore, get_store
from routers.auth import get_viewer_context
from schemas.filters import ServiceFilter, parse_filter
from schemas.service import ServiceListingForm
from services.directory import load_own_service, load_service_directory
from services.listings import delete_service_listing, save_service_listing
from services.presentation import service_card

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("")
def list_services(
    category: Optional[str] = Query(None),
    subcategory: Optional[str] = Query(None),
    rating: Optional[str] = Query(None, description="all, no-rating or a minimum score 1-5"),
    location: Optional[str] = Query(None),
    store: RowStore = Depends(get_store),
    ctx: ViewerContext = Depends(get_viewer_context)
):
    """Visible service providers matching the filters."""
    state = parse_filter(
        ServiceFilter,
        category=category,
        subcategory=subcategory,
        rating=rating,
        location=location
    )
    page = load_service_directory(store, ctx, state)
    return directory_response(page, "services", empty_reason="No services match your filters")


@router.get("/me")
def get_my_service(
    store: RowStore = Depends(get_store),
    ctx: ViewerContext = Depends(get_viewer_context)
):
    """The viewer's own profile, or null when they have none yet."""
    service = load_own_service(store, ctx)
    if service is None:
        return success_response(data=None, message="No service profile yet")
    return success_response(data=service_card(service, ctx).model_dump(mode="json"))


@router.put("/me")
def save_my_service(
    form: ServiceListingForm,
    store: RowStore = Depends(get_store),
    ctx: ViewerContext = Depends(get_viewer_context)
):
    service = save_service_listing(store, ctx, form)
    return success_response(
        data=service_card(service, ctx).model_dump(mode="json"),
        message="Service profile saved"
    )


@router.delete("/me", status_code=status.HTTP_200_OK)
def delete_my_service(
    store: RowStore = Depends(get_store),
    ctx: ViewerContext = Depends(get_viewer_context)
):
    delete_service_listing(store, ctx)
    return success_response(message="Service profile deleted")
