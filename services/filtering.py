"""
Filter and sort engine for the three directory lists.

Every function is pure: it returns a new list and leaves its input alone.
Active predicates combine with AND. Sorting is stable, and entities with
an unknown price sort last in both directions.
"""
from datetime import date
from typing import Callable, List, Optional, Sequence, TypeVar

from schemas.filters import ALL, OfferFilter, PropertyFilter, ServiceFilter, SortOrder
from schemas.offer import Offer
from schemas.property import Property
from schemas.service import ServiceListing

T = TypeVar("T")
Predicate = Callable[[T], bool]


def _is_set(value: Optional[str]) -> bool:
    return value is not None and value != "" and value != ALL


def apply_filters(items: Sequence[T], predicates: List[Predicate]) -> List[T]:
    return [item for item in items if all(predicate(item) for predicate in predicates)]


def sort_by_price(items: Sequence[T], order: SortOrder, price_of: Callable[[T], Optional[float]]) -> List[T]:
    """Stable price sort; ``default`` keeps retrieval order."""
    if order == "default":
        return list(items)
    known = [item for item in items if price_of(item) is not None]
    unknown = [item for item in items if price_of(item) is None]
    known = sorted(known, key=price_of, reverse=(order == "price-desc"))
    return known + unknown


# Shared predicates

def category_predicate(category: str, subcategory: str) -> List[Predicate]:
    predicates: List[Predicate] = []
    if _is_set(category):
        predicates.append(lambda item: item.category_id == category)
        if _is_set(subcategory):
            predicates.append(lambda item: item.subcategory_id == subcategory)
    return predicates


def location_predicate(location: Optional[str]) -> List[Predicate]:
    if not _is_set(location):
        return []
    return [lambda item: item.location == location]


def max_price_predicate(max_price: Optional[float], price_of: Callable) -> List[Predicate]:
    if max_price is None:
        return []

    def within(item) -> bool:
        price = price_of(item)
        return price is not None and price <= max_price

    return [within]


def not_expired(offer: Offer, today: date) -> bool:
    """An offer stays listed through its valid-until day; no date never expires."""
    return offer.valid_until is None or offer.valid_until >= today


# Services

def rating_predicate(rating) -> List[Predicate]:
    if rating == ALL or rating is None:
        return []
    if rating == "no-rating":
        return [lambda service: service.rating is None]
    minimum = float(rating)
    return [lambda service: service.rating is not None and service.rating.overall >= minimum]


def filter_services(services: Sequence[ServiceListing], state: ServiceFilter) -> List[ServiceListing]:
    predicates = (
        category_predicate(state.category, state.subcategory)
        + rating_predicate(state.rating)
        + location_predicate(state.location)
    )
    return apply_filters(services, predicates)


# Offers

def offer_price(offer: Offer) -> Optional[float]:
    return offer.effective_price


def filter_offers(offers: Sequence[Offer], state: OfferFilter, today: date) -> List[Offer]:
    """Drop expired offers first, then apply the viewer's filters and sort."""
    live = [offer for offer in offers if not_expired(offer, today)]

    predicates = category_predicate(state.category, state.subcategory)
    if state.only_highlighted:
        predicates.append(lambda offer: offer.highlight is not None)
    predicates += max_price_predicate(state.max_price, offer_price)
    predicates += location_predicate(state.location)

    return sort_by_price(apply_filters(live, predicates), state.sort, offer_price)


# Properties

def property_price(prop: Property) -> Optional[float]:
    return prop.price


def _minimum_count(minimum: Optional[int], count_of: Callable) -> List[Predicate]:
    if minimum is None:
        return []

    def at_least(prop) -> bool:
        count = count_of(prop)
        return count is not None and count >= minimum

    return [at_least]


def area_predicate(min_area: Optional[float], max_area: Optional[float]) -> List[Predicate]:
    if min_area is None and max_area is None:
        return []

    def within(prop: Property) -> bool:
        area = prop.relevant_area
        if area is None:
            return False
        if min_area is not None and area < min_area:
            return False
        if max_area is not None and area > max_area:
            return False
        return True

    return [within]


def filter_properties(properties: Sequence[Property], state: PropertyFilter) -> List[Property]:
    predicates: List[Predicate] = []
    if _is_set(state.buy_rent):
        predicates.append(lambda prop: prop.buy_rent == state.buy_rent)
    if _is_set(state.property_type):
        predicates.append(lambda prop: prop.property_type == state.property_type)
    predicates += location_predicate(state.location)
    predicates += _minimum_count(state.min_bedrooms, lambda prop: prop.bedrooms)
    predicates += _minimum_count(state.min_bathrooms, lambda prop: prop.bathrooms)
    predicates += max_price_predicate(state.max_price, property_price)
    predicates += area_predicate(state.min_area, state.max_area)

    return sort_by_price(apply_filters(properties, predicates), state.sort, property_price)
