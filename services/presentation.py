"""
Display helpers: labels, flags, social links, formatted prices and the
card models the directory pages render.
"""
from datetime import date
from typing import Dict, List, Optional

from core.context import ViewerContext
from core.parsing import round_half_up
from schemas.offer import Offer, OfferCard
from schemas.property import Property, PropertyCard
from schemas.service import ServiceCard, ServiceListing
from services.categories import get_category_label, get_subcategory_label
from services.pricing import discount_amount, discount_badge, discount_percent, price_per_area
from services.rating import stars_text

PLACEHOLDER_FLAG = "🏳️"

LANGUAGE_FLAGS = {
    "en": "🇬🇧",
    "pt": "🇵🇹",
    "es": "🇪🇸",
    "fr": "🇫🇷",
    "de": "🇩🇪",
    "it": "🇮🇹",
    "ru": "🇷🇺",
}

SOCIAL_NETWORKS = ("instagram", "facebook", "tiktok", "linkedin")

HIGHLIGHT_LABELS = {
    "new": ("New", "Novo"),
    "last-minute": ("Last minute", "Última hora"),
    "popular": ("Popular", "Popular"),
}

PROPERTY_TYPE_LABELS = {
    "apartment": ("Apartment", "Apartamento"),
    "house": ("House", "Moradia"),
    "villa": ("Villa", "Villa"),
    "studio": ("Studio", "Estúdio"),
    "land": ("Land", "Terreno"),
    "commercial": ("Commercial", "Comercial"),
    "warehouse": ("Warehouse", "Armazém"),
    "garage": ("Garage", "Garagem"),
}

CONDITION_LABELS = {
    "usado": ("Used", "Usado"),
    "renovado": ("Renovated", "Renovado"),
    "novo": ("New", "Novo"),
    "para_recuperar": ("To restore", "Para recuperar"),
    "em_construcao": ("Under construction", "Em construção"),
    "ruina": ("Ruins", "Ruína"),
}

FURNISHED_LABELS = {
    "yes": ("Yes", "Sim"),
    "no": ("No", "Não"),
    "partial": ("Partial", "Parcial"),
}

BUY_RENT_LABELS = {
    "rent": ("For rent", "Para arrendar"),
    "buy": ("For sale", "Para venda"),
}

MONTHS = {
    "en": ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"],
    "pt": ["jan", "fev", "mar", "abr", "mai", "jun", "jul", "ago", "set", "out", "nov", "dez"],
}


def _label(table: Dict[str, tuple], key: Optional[str], is_pt: bool) -> Optional[str]:
    if not key:
        return None
    labels = table.get(key)
    if labels is None:
        return key
    return labels[1] if is_pt else labels[0]


def language_flag(code: Optional[str]) -> str:
    return LANGUAGE_FLAGS.get((code or "").strip().lower(), PLACEHOLDER_FLAG)


def language_flags(codes: List[str]) -> List[str]:
    return [language_flag(code) for code in codes]


def social_url(network: str, value: Optional[str]) -> Optional[str]:
    """Profile URL for a handle; full URLs pass through unchanged."""
    handle = (value or "").strip()
    if not handle:
        return None
    if handle.startswith("http://") or handle.startswith("https://"):
        return handle

    if network == "instagram":
        return f"https://instagram.com/{handle.lstrip('@')}"
    if network == "facebook":
        return f"https://facebook.com/{handle}"
    if network == "tiktok":
        return f"https://www.tiktok.com/@{handle.lstrip('@')}"
    if network == "linkedin":
        return f"https://www.linkedin.com/{handle}"
    return None


def social_links(entity) -> Dict[str, str]:
    """Only the networks the entity actually has."""
    links = {}
    for network in SOCIAL_NETWORKS:
        url = social_url(network, getattr(entity, network, None))
        if url:
            links[network] = url
    return links


def highlight_label(highlight: Optional[str], is_pt: bool) -> str:
    return _label(HIGHLIGHT_LABELS, highlight, is_pt) or ""


def property_type_label(value: Optional[str], is_pt: bool) -> str:
    return _label(PROPERTY_TYPE_LABELS, value, is_pt) or "-"


def condition_label(value: Optional[str], is_pt: bool) -> Optional[str]:
    return _label(CONDITION_LABELS, value, is_pt)


def furnished_label(value: Optional[str], is_pt: bool) -> Optional[str]:
    return _label(FURNISHED_LABELS, value, is_pt)


def buy_rent_label(value: Optional[str], is_pt: bool) -> str:
    return _label(BUY_RENT_LABELS, value, is_pt) or "-"


def format_price(value: Optional[float], currency_symbol: str = "€") -> str:
    """'€300,000' for whole amounts, '€99.90' otherwise; '-' when unknown."""
    if value is None:
        return "-"
    rounded = round_half_up(value, 2)
    if rounded == int(rounded):
        return f"{currency_symbol}{int(rounded):,}"
    return f"{currency_symbol}{rounded:,.2f}"


def format_valid_until(valid_until: Optional[date], is_pt: bool) -> str:
    if valid_until is None:
        return ""
    month = MONTHS["pt" if is_pt else "en"][valid_until.month - 1]
    formatted = f"{valid_until.day:02d} {month} {valid_until.year}"
    return f"Válido até {formatted}" if is_pt else f"Valid until {formatted}"


def service_card(service: ServiceListing, ctx: ViewerContext) -> ServiceCard:
    return ServiceCard(
        service=service,
        category_label=get_category_label(service.category_id, ctx.is_pt),
        subcategory_label=(
            get_subcategory_label(service.category_id, service.subcategory_id, ctx.is_pt)
            if service.subcategory_id else None
        ),
        language_flags=language_flags(service.languages),
        social_links=social_links(service),
        stars_text=stars_text(service.rating, ctx.locale),
    )


def offer_card(offer: Offer, ctx: ViewerContext) -> OfferCard:
    return OfferCard(
        offer=offer,
        category_label=get_category_label(offer.category_id, ctx.is_pt),
        subcategory_label=(
            get_subcategory_label(offer.category_id, offer.subcategory_id, ctx.is_pt)
            if offer.subcategory_id else None
        ),
        highlight_label=highlight_label(offer.highlight, ctx.is_pt),
        discount_percent=discount_percent(offer.original_price, offer.discounted_price),
        discount_amount=discount_amount(offer.original_price, offer.discounted_price),
        discount_badge=discount_badge(offer.original_price, offer.discounted_price),
        original_price_text=format_price(offer.original_price),
        discounted_price_text=format_price(offer.discounted_price),
        valid_until_text=format_valid_until(offer.valid_until, ctx.is_pt),
        language_flags=language_flags(offer.languages),
        social_links=social_links(offer),
        can_edit=ctx.is_authenticated and offer.owner_id == ctx.user_id,
    )


def property_card(prop: Property, ctx: ViewerContext) -> PropertyCard:
    return PropertyCard(
        property=prop,
        type_label=property_type_label(prop.property_type, ctx.is_pt),
        buy_rent_label=buy_rent_label(prop.buy_rent, ctx.is_pt),
        condition_label=condition_label(prop.condition, ctx.is_pt),
        furnished_label=furnished_label(prop.furnished, ctx.is_pt),
        price_text=format_price(prop.price),
        price_per_area=price_per_area(prop.price, prop.relevant_area),
        cover_image=prop.images[0] if prop.images else None,
        can_edit=ctx.is_authenticated and prop.owner_id == ctx.user_id,
    )
