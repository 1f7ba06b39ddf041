from datetime import date, datetime

import pytest

from core.exceptions import AuthenticationError, ResourceNotFoundError, StoreReadError
from schemas.filters import OfferFilter, PropertyFilter, ServiceFilter
from services import directory
from services.directory import (
    get_property_detail, load_offer_directory, load_own_offers, load_own_service,
    load_property_directory, load_service_directory
)
from services.rating import RatingService


def add_service(store, user_id, name, created_at, show_online=True, category_id="home-services"):
    return store.insert("service_listings", {
        "user_id": user_id,
        "service_name": name,
        "category_id": category_id,
        "location": ["Cascais"],
        "languages": "pt,en",
        "show_online": show_online,
        "created_at": created_at,
    })


def add_rating(store, service_id, user_id, score):
    store.insert("service_ratings", {
        "service_id": service_id, "user_id": user_id,
        "work_quality": score, "punctuality": score,
    })


class TestServiceDirectory:

    def test_lists_visible_services_newest_first_with_ratings(self, store, ctx):
        old = add_service(store, "u1", "Old Plumber", datetime(2026, 1, 1))
        add_service(store, "u2", "New Cleaner", datetime(2026, 2, 1))
        add_service(store, "u3", "Hidden", datetime(2026, 3, 1), show_online=False)
        add_rating(store, old["id"], "r1", 4)

        page = load_service_directory(store, ctx)

        assert page.loaded
        assert [card.service.name for card in page.items] == ["New Cleaner", "Old Plumber"]
        assert page.items[0].stars_text == "No rating yet"
        assert page.items[1].service.rating.overall == 4.0
        assert page.items[1].language_flags == ["🇵🇹", "🇬🇧"]

    def test_rating_filter_applies_after_merge(self, store, ctx):
        rated = add_service(store, "u1", "Rated", datetime(2026, 1, 1))
        add_service(store, "u2", "Unrated", datetime(2026, 2, 1))
        add_rating(store, rated["id"], "r1", 5)

        page = load_service_directory(store, ctx, ServiceFilter(rating=5))
        assert [card.service.name for card in page.items] == ["Rated"]

    def test_ratings_failure_keeps_listings(self, store, ctx, monkeypatch):
        add_service(store, "u1", "Plumber", datetime(2026, 1, 1))

        def broken(store):
            raise StoreReadError("service_ratings", "read failed")

        monkeypatch.setattr(RatingService, "load_summaries", staticmethod(broken))
        page = load_service_directory(store, ctx)
        assert [card.service.rating for card in page.items] == [None]

    def test_read_failure_gives_empty_page(self, store, ctx, monkeypatch):
        def broken(*args, **kwargs):
            raise StoreReadError("service_listings", "read failed")

        monkeypatch.setattr(directory, "load_services", broken)
        page = load_service_directory(store, ctx)
        assert page.loaded
        assert page.is_empty


class TestOfferDirectory:

    def test_expired_offers_are_hidden(self, store, ctx):
        for title, valid_until in (("expired", date(2026, 4, 30)), ("last day", ctx.today), ("forever", None)):
            store.insert("service_offers", {
                "user_id": "u1", "title": title, "category_id": "food",
                "location": ["Cascais"], "valid_until": valid_until,
                "original_price": 50.0,
            })

        page = load_offer_directory(store, ctx, OfferFilter())
        assert sorted(card.offer.title for card in page.items) == ["forever", "last day"]

    def test_own_offers_include_expired(self, store, ctx):
        store.insert("service_offers", {
            "user_id": ctx.user_id, "title": "expired", "valid_until": date(2026, 1, 1)
        })
        cards = load_own_offers(store, ctx)
        assert [card.offer.title for card in cards] == ["expired"]
        assert cards[0].can_edit

    def test_own_offers_require_sign_in(self, store, anon_ctx):
        with pytest.raises(AuthenticationError):
            load_own_offers(store, anon_ctx)


class TestPropertyDirectory:

    def add_property(self, store, user_id, title, status="active", price=300000.0):
        return store.insert("property_listings", {
            "user_id": user_id, "title": title, "status": status,
            "buy_rent": "buy", "property_type": "apartment",
            "price": price, "usable_area": 100.0,
        })

    def test_only_active_listings(self, store, ctx):
        self.add_property(store, "u1", "Available")
        self.add_property(store, "u1", "Gone", status="sold")

        page = load_property_directory(store, ctx, PropertyFilter())
        assert [card.property.title for card in page.items] == ["Available"]
        assert page.items[0].price_per_area == 3000.0
        assert page.message is None

    def test_read_failure_sets_diagnostic(self, store, ctx, monkeypatch):
        def broken(*args, **kwargs):
            raise StoreReadError("property_listings", "read failed")

        monkeypatch.setattr(store, "select", broken)
        page = load_property_directory(store, ctx)
        assert page.is_empty
        assert page.message == "Failed to load properties."

    def test_detail_hides_sold_listing_from_others(self, store, ctx, other_ctx):
        sold = self.add_property(store, ctx.user_id, "Sold flat", status="sold")

        assert get_property_detail(store, ctx, sold["id"]).can_edit
        with pytest.raises(ResourceNotFoundError):
            get_property_detail(store, other_ctx, sold["id"])

    def test_detail_unknown_id(self, store, ctx):
        with pytest.raises(ResourceNotFoundError):
            get_property_detail(store, ctx, "missing")


def test_own_service_includes_hidden_profile(store, ctx):
    add_service(store, ctx.user_id, "Offline Chef", datetime(2026, 1, 1), show_online=False)
    service = load_own_service(store, ctx)
    assert service.name == "Offline Chef"
    assert not service.is_visible
