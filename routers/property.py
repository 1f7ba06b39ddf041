from typing import Optional
import logging

from fastapi import APIRouter, Depends, Query, status

from core.context import ViewerContext
from core.parsing import coerce_amount
from core.response import directory_response, success_response
from database.store import RowStore, get_store
from routers.auth import get_viewer_context
from schemas.filters import PropertyFilter, parse_filter
from schemas.property import PropertyForm
from services.directory import get_property_detail, load_own_properties, load_property_directory
from services.listings import delete_property, save_property
from services.presentation import property_card

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("")
def list_properties(
    buy_rent: Optional[str] = Query(None, description="all, buy or rent"),
    location: Optional[str] = Query(None),
    property_type: Optional[str] = Query(None),
    min_bedrooms: Optional[int] = Query(None, ge=0),
    min_bathrooms: Optional[int] = Query(None, ge=0),
    max_price: Optional[str] = Query(None),
    min_area: Optional[str] = Query(None),
    max_area: Optional[str] = Query(None),
    sort: Optional[str] = Query(None, description="default, price-asc or price-desc"),
    store: RowStore = Depends(get_store),
    ctx: ViewerContext = Depends(get_viewer_context)
):
    """Active property listings matching the filters."""
    state = parse_filter(
        PropertyFilter,
        buy_rent=buy_rent,
        location=location,
        property_type=property_type,
        min_bedrooms=min_bedrooms,
        min_bathrooms=min_bathrooms,
        max_price=coerce_amount(max_price),
        min_area=coerce_amount(min_area),
        max_area=coerce_amount(max_area),
        sort=sort
    )
    page = load_property_directory(store, ctx, state)
    return directory_response(page, "properties", empty_reason="No properties match your filters")


@router.get("/mine")
def list_my_properties(
    store: RowStore = Depends(get_store),
    ctx: ViewerContext = Depends(get_viewer_context)
):
    cards = load_own_properties(store, ctx)
    return success_response(
        data=[card.model_dump(mode="json") for card in cards],
        meta={"count": len(cards)}
    )


@router.get("/{property_id}")
def get_property(
    property_id: str,
    store: RowStore = Depends(get_store),
    ctx: ViewerContext = Depends(get_viewer_context)
):
    card = get_property_detail(store, ctx, property_id)
    return success_response(data=card.model_dump(mode="json"))


@router.post("", status_code=status.HTTP_201_CREATED)
def create_property(
    form: PropertyForm,
    store: RowStore = Depends(get_store),
    ctx: ViewerContext = Depends(get_viewer_context)
):
    prop = save_property(store, ctx, form)
    return success_response(data=property_card(prop, ctx).model_dump(mode="json"), message="Property listed")


@router.put("/{property_id}")
def update_property(
    property_id: str,
    form: PropertyForm,
    store: RowStore = Depends(get_store),
    ctx: ViewerContext = Depends(get_viewer_context)
):
    prop = save_property(store, ctx, form, property_id=property_id)
    return success_response(data=property_card(prop, ctx).model_dump(mode="json"), message="Property updated")


@router.delete("/{property_id}")
def remove_property(
    property_id: str,
    store: RowStore = Depends(get_store),
    ctx: ViewerContext = Depends(get_viewer_context)
):
    delete_property(store, ctx, property_id)
    return success_response(message="Property deleted")
