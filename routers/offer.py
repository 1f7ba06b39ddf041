from typing import Optional
import logging

from fastapi import APIRouter, Depends, Query, status

from core.context import ViewerContext
from core.parsing import coerce_amount
from core.response import directory_response, success_response
from database.store import RowStore, get_store
from routers.auth import get_viewer_context
from schemas.filters import OfferFilter, parse_filter
from schemas.offer import OfferForm
from services.directory import load_offer_directory, load_own_offers
from services.listings import delete_offer, save_offer
from services.presentation import offer_card

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("")
def list_offers(
    category: Optional[str] = Query(None),
    subcategory: Optional[str] = Query(None),
    only_highlighted: bool = Query(False),
    max_price: Optional[str] = Query(None, description="Maximum price the customer pays"),
    location: Optional[str] = Query(None),
    sort: Optional[str] = Query(None, description="default, price-asc or price-desc"),
    store: RowStore = Depends(get_store),
    ctx: ViewerContext = Depends(get_viewer_context)
):
    """Live offers matching the filters; expired offers are never listed."""
    state = parse_filter(
        OfferFilter,
        category=category,
        subcategory=subcategory,
        only_highlighted=only_highlighted,
        max_price=coerce_amount(max_price),
        location=location,
        sort=sort
    )
    page = load_offer_directory(store, ctx, state)
    return directory_response(page, "offers", empty_reason="No offers match your filters")


@router.get("/mine")
def list_my_offers(
    store: RowStore = Depends(get_store),
    ctx: ViewerContext = Depends(get_viewer_context)
):
    cards = load_own_offers(store, ctx)
    return success_response(
        data=[card.model_dump(mode="json") for card in cards],
        meta={"count": len(cards)}
    )


@router.post("", status_code=status.HTTP_201_CREATED)
def create_offer(
    form: OfferForm,
    store: RowStore = Depends(get_store),
    ctx: ViewerContext = Depends(get_viewer_context)
):
    offer = save_offer(store, ctx, form)
    return success_response(data=offer_card(offer, ctx).model_dump(mode="json"), message="Offer created")


@router.put("/{offer_id}")
def update_offer(
    offer_id: str,
    form: OfferForm,
    store: RowStore = Depends(get_store),
    ctx: ViewerContext = Depends(get_viewer_context)
):
    offer = save_offer(store, ctx, form, offer_id=offer_id)
    return success_response(data=offer_card(offer, ctx).model_dump(mode="json"), message="Offer updated")


@router.delete("/{offer_id}")
def remove_offer(
    offer_id: str,
    store: RowStore = Depends(get_store),
    ctx: ViewerContext = Depends(get_viewer_context)
):
    delete_offer(store, ctx, offer_id)
    return success_response(message="Offer deleted")
