"""
Create, edit and delete the viewer's own service profile, offers and
property listings, plus the write-only property search request intake.

Forms are validated before any store call; the first failing check raises
a ValidationError carrying the localized message. Every mutation carries
the owner filter, and a mutation that matches no row is reported as not
found.
"""
import logging
from datetime import date
from typing import Any, Dict, Optional

from pydantic import EmailStr, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from core.context import ViewerContext
from core.exceptions import AuthenticationError, ResourceNotFoundError, ValidationError
from core.i18n import translate
from core.parsing import (
    coerce_amount, is_valid_phone, parse_amount, parse_count, parse_digits, phone_input_to_db
)
from database.store import RowStore
from schemas.offer import PRICE_MAX_DIGITS as OFFER_PRICE_MAX_DIGITS, Offer, OfferForm
from schemas.property import (
    AREA_MAX_DIGITS, PRICE_MAX_DIGITS, Property, PropertyForm, PropertySearchRequestCreate
)
from schemas.service import ServiceListing, ServiceListingForm
from services.categories import is_known_category, is_known_subcategory
from services.opening_hours import default_schedule, serialize_schedule
from services.row_mapper import map_offer_row, map_property_row, map_service_row

logger = logging.getLogger(__name__)

SERVICES = "service_listings"
RATINGS = "service_ratings"
OFFERS = "service_offers"
PROPERTIES = "property_listings"
SEARCH_REQUESTS = "property_search_requests"

USABLE_AREA_TYPES = ("apartment", "house", "commercial", "garage", "warehouse")
ROOM_TYPES = ("apartment", "house")

_email_adapter = TypeAdapter(EmailStr)


def _require_user(ctx: ViewerContext, message_key: str) -> str:
    if not ctx.is_authenticated:
        raise AuthenticationError(translate(message_key, ctx.locale))
    return ctx.user_id


def _fail(ctx: ViewerContext, message_key: str, field: str):
    raise ValidationError(translate(message_key, ctx.locale), field=field)


def _clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


def _check_email(ctx: ViewerContext, value: str, field: str, missing_key: str) -> str:
    value = (value or "").strip()
    if not value:
        _fail(ctx, missing_key, field)
    try:
        _email_adapter.validate_python(value)
    except PydanticValidationError:
        _fail(ctx, "invalid_email", field)
    return value


def _socials(form) -> Dict[str, Optional[str]]:
    return {
        "website": _clean(form.website),
        "instagram": _clean(form.instagram),
        "facebook": _clean(form.facebook),
        "tiktok": _clean(form.tiktok),
        "linkedin": _clean(form.linkedin),
    }


def _subcategory(category_id: str, subcategory_id: Optional[str]) -> Optional[str]:
    if subcategory_id and is_known_subcategory(category_id, subcategory_id):
        return subcategory_id
    return None


# Service profile

def validate_service_form(ctx: ViewerContext, form: ServiceListingForm) -> Dict[str, Any]:
    """Check the profile form and return the row values to store."""
    if not form.service_name.strip():
        _fail(ctx, "enter_service_name", "service_name")
    contact_email = _check_email(ctx, form.contact_email, "contact_email", "enter_contact_email")
    if not is_known_category(form.category_id):
        _fail(ctx, "choose_category", "category_id")
    if not is_valid_phone(form.phone):
        _fail(ctx, "phone_nine_digits", "phone")
    if not form.location.strip():
        _fail(ctx, "choose_service_area", "location")

    schedule = form.opening_hours or default_schedule()
    return {
        "service_name": form.service_name.strip(),
        "description": form.description.strip(),
        "category_id": form.category_id,
        "subcategory_id": _subcategory(form.category_id, form.subcategory_id),
        "location": [form.location.strip()],
        "contact_email": contact_email,
        "phone": phone_input_to_db(form.phone),
        "opening_hours": serialize_schedule(schedule),
        "show_online": form.show_online,
        "languages": form.languages,
        "provider_profile_image_url": _clean(form.provider_profile_image_url),
        **_socials(form),
    }


def save_service_listing(store: RowStore, ctx: ViewerContext, form: ServiceListingForm) -> ServiceListing:
    """Create the viewer's profile, or update it when one exists."""
    user_id = _require_user(ctx, "sign_in_to_edit_service")
    values = validate_service_form(ctx, form)

    existing = store.select_one(SERVICES, user_id=user_id)
    if existing:
        row = store.update(SERVICES, existing["id"], values, user_id=user_id)
        if row is None:
            raise ResourceNotFoundError("Service", existing["id"])
        logger.info(f"Service profile {row['id']} updated by user {user_id}")
    else:
        row = store.insert(SERVICES, dict(values, user_id=user_id))
        logger.info(f"Service profile {row['id']} created by user {user_id}")
    return map_service_row(row, ctx)


def delete_service_listing(store: RowStore, ctx: ViewerContext) -> None:
    """Remove the viewer's profile along with the ratings it received."""
    user_id = _require_user(ctx, "sign_in_to_edit_service")
    existing = store.select_one(SERVICES, user_id=user_id)
    if existing is None:
        raise ResourceNotFoundError("Service", user_id)

    for rating in store.select(RATINGS, service_id=existing["id"]):
        store.delete(RATINGS, rating["id"])
    if not store.delete(SERVICES, existing["id"], user_id=user_id):
        raise ResourceNotFoundError("Service", existing["id"])
    logger.info(f"Service profile {existing['id']} deleted by user {user_id}")


# Offers

def _offer_price(ctx: ViewerContext, value: Any, message_key: str, field: str) -> Optional[float]:
    try:
        price = parse_amount(value)
    except ValueError:
        _fail(ctx, message_key, field)
    if price is None:
        return None
    if price < 0 or int(price) >= 10 ** OFFER_PRICE_MAX_DIGITS:
        _fail(ctx, message_key, field)
    return price


def validate_offer_form(ctx: ViewerContext, form: OfferForm) -> Dict[str, Any]:
    if not form.title.strip():
        _fail(ctx, "enter_offer_title", "title")
    if not form.service_name.strip():
        _fail(ctx, "enter_service_name", "service_name")
    if not is_known_category(form.category_id):
        _fail(ctx, "choose_category", "category_id")
    if not form.location.strip():
        _fail(ctx, "choose_service_area", "location")
    contact_email = _check_email(ctx, form.contact_email, "contact_email", "enter_contact_email")
    if not is_valid_phone(form.phone):
        _fail(ctx, "phone_nine_digits", "phone")

    original_price = _offer_price(ctx, form.original_price, "invalid_list_price", "original_price")
    discounted_price = _offer_price(ctx, form.discounted_price, "invalid_offer_price", "discounted_price")

    valid_until = None
    if form.valid_until and form.valid_until.strip():
        try:
            valid_until = date.fromisoformat(form.valid_until.strip())
        except ValueError:
            _fail(ctx, "invalid_valid_until", "valid_until")
        if valid_until <= ctx.today:
            _fail(ctx, "valid_until_after_today", "valid_until")

    return {
        "title": form.title.strip(),
        "short_label": _clean(form.short_label),
        "description": form.description.strip(),
        "category_id": form.category_id,
        "subcategory_id": _subcategory(form.category_id, form.subcategory_id),
        "service_name": form.service_name.strip(),
        "location": [form.location.strip()],
        "languages": [code.strip().lower() for code in form.languages if code.strip()],
        "original_price": original_price,
        "discounted_price": discounted_price,
        "valid_until": valid_until,
        "image_url": _clean(form.image_url),
        "contact_email": contact_email,
        "phone": phone_input_to_db(form.phone),
        **_socials(form),
    }


def save_offer(
    store: RowStore,
    ctx: ViewerContext,
    form: OfferForm,
    offer_id: Optional[str] = None
) -> Offer:
    """Insert a new offer, or update one of the viewer's own offers."""
    user_id = _require_user(ctx, "sign_in_to_create_offer")
    values = validate_offer_form(ctx, form)

    if offer_id is None:
        row = store.insert(OFFERS, dict(values, user_id=user_id))
        logger.info(f"Offer {row['id']} created by user {user_id}")
    else:
        row = store.update(OFFERS, offer_id, values, user_id=user_id)
        if row is None:
            raise ResourceNotFoundError("Offer", offer_id)
        logger.info(f"Offer {offer_id} updated by user {user_id}")
    return map_offer_row(row, ctx)


def delete_offer(store: RowStore, ctx: ViewerContext, offer_id: str) -> None:
    user_id = _require_user(ctx, "sign_in_to_create_offer")
    if not store.delete(OFFERS, offer_id, user_id=user_id):
        raise ResourceNotFoundError("Offer", offer_id)
    logger.info(f"Offer {offer_id} deleted by user {user_id}")


# Properties

def _property_price(value: Any) -> Optional[int]:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        amount = coerce_amount(value)
        if amount is None or amount <= 0 or amount >= 10 ** PRICE_MAX_DIGITS:
            return None
        return int(amount)
    return parse_digits(value, PRICE_MAX_DIGITS)


def _area(value: Any) -> Optional[float]:
    area = coerce_amount(value)
    if area is None or area <= 0 or int(area) >= 10 ** AREA_MAX_DIGITS:
        return None
    return area


def validate_property_form(ctx: ViewerContext, form: PropertyForm) -> Dict[str, Any]:
    if not form.title.strip():
        _fail(ctx, "enter_title", "title")
    if not form.location.strip():
        _fail(ctx, "choose_location", "location")
    if not form.description.strip():
        _fail(ctx, "write_description", "description")

    price = _property_price(form.price)
    if not price:
        _fail(ctx, "invalid_price", "price")

    if not form.contact_name.strip():
        _fail(ctx, "enter_contact_name", "contact_name")
    contact_email = _check_email(ctx, form.contact_email, "contact_email", "enter_email")

    usable_area = _area(form.usable_area)
    land_area = _area(form.land_area)
    bedrooms = parse_count(form.bedrooms)
    bathrooms = parse_count(form.bathrooms)

    if form.property_type in USABLE_AREA_TYPES and usable_area is None:
        _fail(ctx, "enter_usable_area", "usable_area")
    if form.property_type == "land" and land_area is None:
        _fail(ctx, "enter_land_area", "land_area")
    if form.property_type in ROOM_TYPES and bedrooms is None:
        _fail(ctx, "select_bedrooms", "bedrooms")
    if form.property_type in ROOM_TYPES + ("commercial",) and bathrooms is None:
        _fail(ctx, "select_bathrooms", "bathrooms")

    return {
        "buy_rent": form.buy_rent,
        "property_type": form.property_type,
        "status": form.status,
        "title": form.title.strip(),
        "location": form.location.strip(),
        "description": form.description.strip(),
        "price": float(price),
        "is_price_negotiable": form.is_price_negotiable,
        "bedrooms": bedrooms,
        "bathrooms": bathrooms,
        "usable_area": usable_area,
        "land_area": land_area,
        "gross_area": _area(form.gross_area),
        "condition": _clean(form.condition),
        "furnished": form.furnished,
        "divisions": parse_count(form.divisions),
        "energy_certificate": _clean(form.energy_certificate),
        "images": list(form.images),
        "contact_name": form.contact_name.strip(),
        "contact_email": contact_email,
        "contact_phone": phone_input_to_db(form.contact_phone),
    }


def save_property(
    store: RowStore,
    ctx: ViewerContext,
    form: PropertyForm,
    property_id: Optional[str] = None
) -> Property:
    user_id = _require_user(ctx, "sign_in_to_list_property")
    values = validate_property_form(ctx, form)

    if property_id is None:
        row = store.insert(PROPERTIES, dict(values, user_id=user_id))
        logger.info(f"Property {row['id']} listed by user {user_id}")
    else:
        row = store.update(PROPERTIES, property_id, values, user_id=user_id)
        if row is None:
            raise ResourceNotFoundError("Property", property_id)
        logger.info(f"Property {property_id} updated by user {user_id}")
    return map_property_row(row, ctx)


def delete_property(store: RowStore, ctx: ViewerContext, property_id: str) -> None:
    user_id = _require_user(ctx, "sign_in_to_list_property")
    if not store.delete(PROPERTIES, property_id, user_id=user_id):
        raise ResourceNotFoundError("Property", property_id)
    logger.info(f"Property {property_id} deleted by user {user_id}")


# Search requests

def submit_search_request(store: RowStore, ctx: ViewerContext, form: PropertySearchRequestCreate) -> str:
    """Store a 'find me a property' request and return the thank-you message.

    Dates only apply to rentals and are dropped for purchases.
    """
    if not form.name.strip():
        _fail(ctx, "enter_name", "name")
    email = _check_email(ctx, form.email, "email", "enter_email")

    from_date = form.from_date if form.type == "rent" else None
    to_date = form.to_date if form.type == "rent" else None
    if from_date and to_date and to_date <= from_date:
        _fail(ctx, "request_dates_order", "to_date")

    row = store.insert(SEARCH_REQUESTS, {
        "type": form.type,
        "name": form.name.strip(),
        "email": email,
        "phone": phone_input_to_db(form.phone),
        "from_date": from_date,
        "to_date": to_date,
        "min_size": coerce_amount(form.min_size),
        "notes": _clean(form.notes),
    })
    logger.info(f"Property search request {row['id']} received ({form.type})")
    return translate("request_received", ctx.locale)
