"""
Row mapping: raw store rows into immutable display entities.

Mapping never raises. Missing or malformed optional fields degrade to
empty strings, empty lists or None, and a malformed schedule degrades to
the fully closed week.
"""
from datetime import date, datetime, timezone
from typing import Any, Dict, List, Optional

from core.context import ViewerContext
from core.parsing import coerce_amount, parse_count
from schemas.offer import HIGHLIGHTS, Offer
from schemas.property import Property
from schemas.rating import RatingSummary
from schemas.service import ServiceListing
from services.opening_hours import format_opening_hours, parse_schedule

Row = Dict[str, Any]

PROPERTY_STATUSES = ("active", "sold", "rented")
BUY_RENT = ("buy", "rent")
PROPERTY_TYPES = (
    "apartment", "house", "villa", "studio", "land", "commercial", "warehouse", "garage"
)
FURNISHED = ("yes", "no", "partial")


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def _optional_text(value: Any) -> Optional[str]:
    text = _text(value)
    return text or None


def _split_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        parts = value.split(",")
    elif isinstance(value, (list, tuple)):
        parts = [item for item in value if item is not None]
    else:
        return []
    return [str(part).strip() for part in parts if str(part).strip()]


def normalize_languages(value: Any) -> List[str]:
    """List or comma-separated string of codes into a clean ordered list."""
    return _split_list(value)


def normalize_locations(value: Any) -> List[str]:
    """List or comma-separated string of areas into a clean ordered list."""
    return _split_list(value)


def coerce_datetime(value: Any) -> Optional[datetime]:
    """Timezone-aware datetime from a datetime or ISO string; naive means UTC."""
    if value is None:
        return None
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str) and value.strip():
        try:
            parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
        except ValueError:
            return None
    else:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def coerce_date(value: Any) -> Optional[date]:
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str) and value.strip():
        try:
            return date.fromisoformat(value.strip()[:10])
        except ValueError:
            return None
    return None


def _choice(value: Any, allowed) -> Optional[str]:
    text = _text(value).lower()
    return text if text in allowed else None


def map_service_row(
    row: Row,
    ctx: ViewerContext,
    rating: Optional[RatingSummary] = None
) -> ServiceListing:
    locations = normalize_locations(row.get("location"))
    schedule = parse_schedule(row.get("opening_hours"))
    show_online = row.get("show_online")

    return ServiceListing(
        id=_text(row.get("id")),
        owner_id=_optional_text(row.get("user_id")),
        name=_text(row.get("service_name")),
        description=_text(row.get("description")),
        category_id=_text(row.get("category_id")),
        subcategory_id=_optional_text(row.get("subcategory_id")),
        location=locations[0] if locations else "",
        email=_optional_text(row.get("contact_email")),
        phone=_optional_text(row.get("phone")),
        website=_optional_text(row.get("website")),
        instagram=_optional_text(row.get("instagram")),
        facebook=_optional_text(row.get("facebook")),
        tiktok=_optional_text(row.get("tiktok")),
        linkedin=_optional_text(row.get("linkedin")),
        languages=normalize_languages(row.get("languages")),
        opening_hours=schedule,
        opening_hours_text=format_opening_hours(schedule, ctx.locale),
        is_visible=True if show_online is None else bool(show_online),
        avatar_url=_optional_text(row.get("provider_profile_image_url")),
        created_at=coerce_datetime(row.get("created_at")),
        rating=rating,
    )


def map_offer_row(row: Row, ctx: ViewerContext) -> Offer:
    locations = normalize_locations(row.get("location"))

    return Offer(
        id=_text(row.get("id")),
        owner_id=_optional_text(row.get("user_id")),
        title=_text(row.get("title")),
        short_label=_text(row.get("short_label")),
        description=_text(row.get("description")),
        category_id=_text(row.get("category_id")),
        subcategory_id=_optional_text(row.get("subcategory_id")),
        service_name=_text(row.get("service_name")),
        location=locations[0] if locations else "",
        locations=locations,
        languages=normalize_languages(row.get("languages")),
        original_price=coerce_amount(row.get("original_price")),
        discounted_price=coerce_amount(row.get("discounted_price")),
        valid_until=coerce_date(row.get("valid_until")),
        highlight=_choice(row.get("highlight"), HIGHLIGHTS),
        image_url=_optional_text(row.get("image_url")),
        phone=_optional_text(row.get("phone")),
        contact_email=_optional_text(row.get("contact_email")),
        website=_optional_text(row.get("website")),
        instagram=_optional_text(row.get("instagram")),
        facebook=_optional_text(row.get("facebook")),
        tiktok=_optional_text(row.get("tiktok")),
        linkedin=_optional_text(row.get("linkedin")),
        created_at=coerce_datetime(row.get("created_at")),
    )


def map_property_row(row: Row, ctx: ViewerContext) -> Property:
    images = row.get("images")
    if not isinstance(images, list):
        images = []

    return Property(
        id=_text(row.get("id")),
        owner_id=_optional_text(row.get("user_id")),
        status=_choice(row.get("status"), PROPERTY_STATUSES) or "active",
        buy_rent=_choice(row.get("buy_rent"), BUY_RENT),
        property_type=_choice(row.get("property_type"), PROPERTY_TYPES),
        title=_text(row.get("title")),
        description=_text(row.get("description")),
        price=coerce_amount(row.get("price")),
        currency=_text(row.get("currency")) or "EUR",
        location=_text(row.get("location")),
        bedrooms=parse_count(row.get("bedrooms")),
        bathrooms=parse_count(row.get("bathrooms")),
        usable_area=coerce_amount(row.get("usable_area")),
        gross_area=coerce_amount(row.get("gross_area")),
        land_area=coerce_amount(row.get("land_area")),
        condition=_optional_text(row.get("condition")),
        furnished=_choice(row.get("furnished"), FURNISHED),
        energy_certificate=_optional_text(row.get("energy_certificate")),
        divisions=parse_count(row.get("divisions")),
        images=[str(url) for url in images if url],
        is_price_negotiable=bool(row.get("is_price_negotiable")),
        contact_name=_optional_text(row.get("contact_name")),
        contact_email=_optional_text(row.get("contact_email")),
        contact_phone=_optional_text(row.get("contact_phone")),
        created_at=coerce_datetime(row.get("created_at")),
    )
