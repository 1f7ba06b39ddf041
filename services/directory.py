"""
Directory page loaders.

Each loader reads raw rows, maps them, merges ratings where relevant, applies
the viewer's filters and builds the display cards. Read failures are logged
and degrade to an empty page; they never escape the loader.
"""
import logging
from typing import List, Optional

from core.context import ViewerContext
from core.exceptions import AuthenticationError, ResourceNotFoundError, StoreReadError
from core.i18n import translate
from database.store import RowStore
from schemas.directory import DirectoryPage
from schemas.filters import OfferFilter, PropertyFilter, ServiceFilter
from schemas.offer import Offer, OfferCard
from schemas.property import Property, PropertyCard
from schemas.service import ServiceCard, ServiceListing
from services.filtering import filter_offers, filter_properties, filter_services
from services.presentation import offer_card, property_card, service_card
from services.rating import RatingService, merge_ratings
from services.row_mapper import map_offer_row, map_property_row, map_service_row

logger = logging.getLogger(__name__)

SERVICES = "service_listings"
OFFERS = "service_offers"
PROPERTIES = "property_listings"


def _require_user(ctx: ViewerContext, message_key: str) -> str:
    if not ctx.is_authenticated:
        raise AuthenticationError(translate(message_key, ctx.locale))
    return ctx.user_id


def load_services(store: RowStore, ctx: ViewerContext) -> List[ServiceListing]:
    """Visible listings with their rating summaries merged in.

    A failed ratings read keeps the listings, just without summaries.
    """
    rows = store.select(SERVICES, order_by="created_at", descending=True, show_online=True)
    listings = [map_service_row(row, ctx) for row in rows]

    try:
        summaries = RatingService.load_summaries(store)
    except StoreReadError as e:
        logger.error(f"Ratings unavailable, showing services without them: {e.message}")
        return listings
    return merge_ratings(listings, summaries)


def load_service_directory(
    store: RowStore,
    ctx: ViewerContext,
    state: Optional[ServiceFilter] = None
) -> DirectoryPage[ServiceCard]:
    try:
        listings = load_services(store, ctx)
    except StoreReadError as e:
        logger.error(f"Failed to load service directory: {e.message}")
        return DirectoryPage[ServiceCard](items=[])

    visible = filter_services(listings, state or ServiceFilter())
    return DirectoryPage[ServiceCard](items=[service_card(s, ctx) for s in visible])


def load_offers(store: RowStore, ctx: ViewerContext, **filters) -> List[Offer]:
    rows = store.select(OFFERS, order_by="created_at", descending=True, **filters)
    return [map_offer_row(row, ctx) for row in rows]


def load_offer_directory(
    store: RowStore,
    ctx: ViewerContext,
    state: Optional[OfferFilter] = None
) -> DirectoryPage[OfferCard]:
    try:
        offers = load_offers(store, ctx)
    except StoreReadError as e:
        logger.error(f"Failed to load offers: {e.message}")
        return DirectoryPage[OfferCard](items=[])

    visible = filter_offers(offers, state or OfferFilter(), ctx.today)
    return DirectoryPage[OfferCard](items=[offer_card(o, ctx) for o in visible])


def load_properties(store: RowStore, ctx: ViewerContext, **filters) -> List[Property]:
    rows = store.select(PROPERTIES, order_by="created_at", descending=True, **filters)
    return [map_property_row(row, ctx) for row in rows]


def load_property_directory(
    store: RowStore,
    ctx: ViewerContext,
    state: Optional[PropertyFilter] = None
) -> DirectoryPage[PropertyCard]:
    try:
        properties = load_properties(store, ctx, status="active")
    except StoreReadError as e:
        logger.error(f"Failed to load properties: {e.message}")
        return DirectoryPage[PropertyCard](
            items=[],
            message=translate("failed_to_load_properties", ctx.locale)
        )

    visible = filter_properties(properties, state or PropertyFilter())
    return DirectoryPage[PropertyCard](items=[property_card(p, ctx) for p in visible])


def get_property_detail(store: RowStore, ctx: ViewerContext, property_id: str) -> PropertyCard:
    """One listing; sold or rented listings are only visible to their owner."""
    row = store.select_one(PROPERTIES, id=property_id)
    if row is None:
        raise ResourceNotFoundError("Property", property_id)

    prop = map_property_row(row, ctx)
    if prop.status != "active" and prop.owner_id != ctx.user_id:
        raise ResourceNotFoundError("Property", property_id)
    return property_card(prop, ctx)


def load_own_service(store: RowStore, ctx: ViewerContext) -> Optional[ServiceListing]:
    """The viewer's profile, shown whether or not it is online."""
    user_id = _require_user(ctx, "sign_in_to_edit_service")
    row = store.select_one(SERVICES, user_id=user_id)
    if row is None:
        return None
    return map_service_row(row, ctx)


def load_own_offers(store: RowStore, ctx: ViewerContext) -> List[OfferCard]:
    """All of the viewer's offers, expired ones included."""
    user_id = _require_user(ctx, "sign_in_to_create_offer")
    return [offer_card(o, ctx) for o in load_offers(store, ctx, user_id=user_id)]


def load_own_properties(store: RowStore, ctx: ViewerContext) -> List[PropertyCard]:
    user_id = _require_user(ctx, "sign_in_to_list_property")
    return [property_card(p, ctx) for p in load_properties(store, ctx, user_id=user_id)]
