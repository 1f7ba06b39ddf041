from datetime import date

from schemas.offer import Offer
from schemas.property import Property
from services.presentation import (
    buy_rent_label, condition_label, format_price, format_valid_until, furnished_label,
    highlight_label, language_flag, language_flags, offer_card, property_card,
    property_type_label, social_links, social_url
)
from services.categories import get_category_label, get_subcategory_label


def test_language_flags():
    assert language_flag("PT") == "🇵🇹"
    assert language_flag(" en ") == "🇬🇧"
    assert language_flag("nl") == "🏳️"
    assert language_flags(["de", "ru"]) == ["🇩🇪", "🇷🇺"]


class TestSocialUrls:

    def test_handles_become_profile_urls(self):
        assert social_url("instagram", "@cascais.surf") == "https://instagram.com/cascais.surf"
        assert social_url("facebook", "cascaissurf") == "https://facebook.com/cascaissurf"
        assert social_url("tiktok", "cascaissurf") == "https://www.tiktok.com/@cascaissurf"
        assert social_url("tiktok", "@cascaissurf") == "https://www.tiktok.com/@cascaissurf"
        assert social_url("linkedin", "in/ana") == "https://www.linkedin.com/in/ana"

    def test_full_urls_pass_through(self):
        url = "https://www.instagram.com/cascais.surf/"
        assert social_url("instagram", url) == url
        assert social_url("facebook", "http://fb.me/x") == "http://fb.me/x"

    def test_blank_is_none(self):
        assert social_url("instagram", "  ") is None
        assert social_url("linkedin", None) is None

    def test_links_only_include_present_networks(self):
        offer = Offer(id="o1", category_id="food", instagram="@chef", tiktok="")
        assert social_links(offer) == {"instagram": "https://instagram.com/chef"}


def test_category_labels_fall_back_to_raw_id():
    assert get_category_label("home-services", False) == "Home Services"
    assert get_category_label("home-services", True) == "Serviços para Casa"
    assert get_category_label("space-travel", False) == "space-travel"
    assert get_subcategory_label("home-services", "plumber", True) == "Canalizador"
    assert get_subcategory_label("home-services", "astronaut", False) == "astronaut"


def test_listing_labels():
    assert highlight_label("last-minute", False) == "Last minute"
    assert highlight_label("last-minute", True) == "Última hora"
    assert highlight_label(None, False) == ""
    assert property_type_label("house", True) == "Moradia"
    assert condition_label("em_construcao", False) == "Under construction"
    assert condition_label("like-new", False) == "like-new"
    assert condition_label(None, False) is None
    assert furnished_label("partial", True) == "Parcial"
    assert buy_rent_label("rent", False) == "For rent"
    assert buy_rent_label("buy", True) == "Para venda"


def test_format_price():
    assert format_price(300000) == "€300,000"
    assert format_price(99.9) == "€99.90"
    assert format_price(None) == "-"


def test_format_valid_until():
    assert format_valid_until(date(2026, 12, 31), False) == "Valid until 31 Dec 2026"
    assert format_valid_until(date(2026, 2, 5), True) == "Válido até 05 fev 2026"
    assert format_valid_until(None, False) == ""


def test_offer_card(ctx, other_ctx):
    offer = Offer(
        id="o1", owner_id=ctx.user_id, category_id="food", subcategory_id=None,
        original_price=80, discounted_price=60, valid_until=date(2026, 6, 1),
        highlight="new", languages=["pt", "xx"]
    )
    card = offer_card(offer, ctx)

    assert card.category_label == "Food & Dining"
    assert card.discount_percent == 25
    assert card.discount_badge == "-25%"
    assert card.original_price_text == "€80"
    assert card.highlight_label == "New"
    assert card.language_flags == ["🇵🇹", "🏳️"]
    assert card.can_edit
    assert not offer_card(offer, other_ctx).can_edit


def test_property_card(ctx):
    prop = Property(
        id="p1", property_type="land", buy_rent="buy", price=180000,
        land_area=1200, images=["https://cdn/1.jpg", "https://cdn/2.jpg"]
    )
    card = property_card(prop, ctx)

    assert card.type_label == "Land"
    assert card.price_text == "€180,000"
    assert card.price_per_area == 150.0
    assert card.cover_image == "https://cdn/1.jpg"
    assert not card.can_edit
