from datetime import date, datetime, timezone

from services.opening_hours import default_schedule, serialize_schedule
from services.row_mapper import (
    coerce_date, coerce_datetime, map_offer_row, map_property_row, map_service_row,
    normalize_languages, normalize_locations
)


def test_languages_from_list_or_comma_string():
    assert normalize_languages("pt, en ,,") == ["pt", "en"]
    assert normalize_languages(["en", "", " fr"]) == ["en", "fr"]
    assert normalize_languages(None) == []
    assert normalize_languages(42) == []


def test_locations_keep_order():
    assert normalize_locations("Parede, Carcavelos") == ["Parede", "Carcavelos"]
    assert normalize_locations(["Cascais"]) == ["Cascais"]


def test_timestamps_become_utc_aware():
    naive = datetime(2026, 1, 2, 10, 0)
    assert coerce_datetime(naive) == naive.replace(tzinfo=timezone.utc)
    assert coerce_datetime("2026-01-02T10:00:00Z") == naive.replace(tzinfo=timezone.utc)
    assert coerce_datetime("yesterday") is None


def test_dates_from_strings():
    assert coerce_date("2026-06-30") == date(2026, 6, 30)
    assert coerce_date("2026-06-30T12:00:00") == date(2026, 6, 30)
    assert coerce_date("soon") is None


class TestServiceRows:

    def test_full_row(self, ctx):
        service = map_service_row({
            "id": "s1",
            "user_id": "u1",
            "service_name": "Cascais Plumbing",
            "category_id": "home-services",
            "subcategory_id": "plumber",
            "location": ["Cascais"],
            "languages": "pt,en",
            "opening_hours": serialize_schedule(default_schedule()),
            "show_online": True,
            "created_at": datetime(2026, 1, 1),
        }, ctx)

        assert service.name == "Cascais Plumbing"
        assert service.location == "Cascais"
        assert service.languages == ["pt", "en"]
        assert service.opening_hours_text == "Mon–Fri 09:00-18:00"
        assert service.rating is None

    def test_sparse_row_degrades_to_defaults(self, ctx):
        service = map_service_row({"id": "s2", "opening_hours": "not a schedule"}, ctx)

        assert service.name == ""
        assert service.location == ""
        assert service.languages == []
        assert len(service.opening_hours) == 7
        assert service.opening_hours_text == ""
        assert service.email is None

    def test_schedule_text_follows_locale(self, ctx):
        pt_ctx = ctx.model_copy(update={"locale": "pt"})
        row = {"id": "s3", "opening_hours": serialize_schedule(default_schedule())}
        assert map_service_row(row, pt_ctx).opening_hours_text == "Seg–Sex 09:00-18:00"


class TestOfferRows:

    def test_first_location_is_displayed(self, ctx):
        offer = map_offer_row({"id": "o1", "location": ["Estoril", "Parede"]}, ctx)
        assert offer.location == "Estoril"
        assert offer.locations == ["Estoril", "Parede"]

    def test_unparsable_prices_are_unknown_not_zero(self, ctx):
        offer = map_offer_row({
            "id": "o2",
            "original_price": "abc",
            "discounted_price": "45,50",
        }, ctx)
        assert offer.original_price is None
        assert offer.discounted_price == 45.5

    def test_highlight_outside_closed_set_is_dropped(self, ctx):
        assert map_offer_row({"id": "o3", "highlight": "hot"}, ctx).highlight is None
        assert map_offer_row({"id": "o4", "highlight": "NEW"}, ctx).highlight == "new"

    def test_valid_until_string(self, ctx):
        offer = map_offer_row({"id": "o5", "valid_until": "2026-05-10"}, ctx)
        assert offer.valid_until == date(2026, 5, 10)


class TestPropertyRows:

    def test_status_defaults_to_active(self, ctx):
        prop = map_property_row({"id": "p1"}, ctx)
        assert prop.status == "active"
        assert prop.images == []
        assert prop.currency == "EUR"

    def test_numbers_are_parsed_or_unknown(self, ctx):
        prop = map_property_row({
            "id": "p2",
            "property_type": "apartment",
            "price": "450.000",
            "bedrooms": "2",
            "bathrooms": "lots",
            "usable_area": 95,
        }, ctx)
        assert prop.price == 450000.0
        assert prop.bedrooms == 2
        assert prop.bathrooms is None
        assert prop.relevant_area == 95.0

    def test_land_uses_land_area(self, ctx):
        prop = map_property_row({
            "id": "p3",
            "property_type": "land",
            "usable_area": 10,
            "land_area": 1200,
        }, ctx)
        assert prop.relevant_area == 1200.0

    def test_unknown_choices_are_dropped(self, ctx):
        prop = map_property_row({"id": "p4", "furnished": "maybe", "property_type": "castle"}, ctx)
        assert prop.furnished is None
        assert prop.property_type is None
