from datetime import datetime

import pytest

from core.exceptions import (
    AuthenticationError, RatingConflictError, ResourceNotFoundError, ValidationError
)
from schemas.rating import RatingCreate
from services.opening_hours import closed_schedule
from services.rating import RatingService, aggregate_ratings, merge_ratings, stars_text
from schemas.service import ServiceListing


def rating_row(service_id, work, punctuality, comment=None, created_at=None):
    return {
        "service_id": service_id,
        "work_quality": work,
        "punctuality": punctuality,
        "comment": comment,
        "created_at": created_at,
    }


class TestAggregateRatings:

    def test_means_and_overall(self):
        summaries = aggregate_ratings([
            rating_row("s1", 5, 3, "old", datetime(2026, 1, 1)),
            rating_row("s1", 4, 4, "new", datetime(2026, 2, 1)),
            rating_row("s2", 2, 2),
        ])

        s1 = summaries["s1"]
        assert s1.work_quality == 4.5
        assert s1.punctuality == 3.5
        assert s1.overall == 4.0
        assert s1.count == 2
        assert s1.latest_comment == "new"
        assert summaries["s2"].overall == 2.0

    def test_services_without_rows_are_absent(self):
        assert aggregate_ratings([]) == {}
        assert "s9" not in aggregate_ratings([rating_row("s1", 5, 5)])

    def test_ties_keep_first_seen(self):
        stamp = datetime(2026, 3, 1)
        summary = aggregate_ratings([
            rating_row("s1", 5, 5, "first", stamp),
            rating_row("s1", 5, 5, "second", stamp),
        ])["s1"]
        assert summary.latest_comment == "first"

    def test_unknown_timestamp_never_displaces_known(self):
        summary = aggregate_ratings([
            rating_row("s1", 5, 5, "dated", datetime(2026, 3, 1)),
            rating_row("s1", 5, 5, "undated", None),
        ])["s1"]
        assert summary.latest_comment == "dated"

    def test_known_timestamp_displaces_unknown(self):
        summary = aggregate_ratings([
            rating_row("s1", 5, 5, "undated", None),
            rating_row("s1", 5, 5, "dated", "2026-03-01T10:00:00Z"),
        ])["s1"]
        assert summary.latest_comment == "dated"

    def test_mixed_naive_and_iso_timestamps(self):
        summary = aggregate_ratings([
            rating_row("s1", 5, 5, "naive", datetime(2026, 3, 2)),
            rating_row("s1", 5, 5, "iso", "2026-03-01T10:00:00Z"),
        ])["s1"]
        assert summary.latest_comment == "naive"


def test_merge_only_attaches_existing_summaries():
    listings = [
        ServiceListing(id="s1", name="A", category_id="food", opening_hours=closed_schedule()),
        ServiceListing(id="s2", name="B", category_id="food", opening_hours=closed_schedule()),
    ]
    merged = merge_ratings(listings, aggregate_ratings([rating_row("s1", 4, 2)]))

    assert [s.id for s in merged] == ["s1", "s2"]
    assert merged[0].rating.overall == 3.0
    assert merged[1].rating is None
    assert listings[0].rating is None


def test_stars_text():
    summary = aggregate_ratings([rating_row("s1", 5, 4)])["s1"]
    assert stars_text(summary, "en") == "4.5 / 5 (1)"
    assert stars_text(None, "en") == "No rating yet"
    assert stars_text(None, "pt") == "Sem avaliação"


class TestSubmitRating:

    @pytest.fixture
    def service_id(self, store, other_ctx):
        row = store.insert("service_listings", {
            "user_id": other_ctx.user_id,
            "service_name": "Estoril Yoga",
            "category_id": "wellness-beauty",
        })
        return row["id"]

    def test_stores_rating(self, store, ctx, service_id):
        response = RatingService.submit_rating(
            store, ctx, service_id, RatingCreate(work_quality=5, punctuality=4, comment="  Great  ")
        )
        assert response.user_id == ctx.user_id
        assert response.comment == "Great"

        details = RatingService.get_rating_details(store, ctx, service_id)
        assert details.summary.overall == 4.5
        assert details.service_name == "Estoril Yoga"

    def test_second_rating_is_rejected(self, store, ctx, service_id):
        RatingService.submit_rating(store, ctx, service_id, RatingCreate(work_quality=5, punctuality=5))

        with pytest.raises(RatingConflictError) as exc:
            RatingService.submit_rating(store, ctx, service_id, RatingCreate(work_quality=1, punctuality=1))

        assert "already rated" in exc.value.message
        assert exc.value.status_code == 409
        assert RatingService.get_rating_details(store, ctx, service_id).summary.overall == 5.0

    def test_both_criteria_required(self, store, ctx, service_id):
        with pytest.raises(ValidationError):
            RatingService.submit_rating(store, ctx, service_id, RatingCreate(work_quality=5))

    def test_own_service_cannot_be_rated(self, store, other_ctx, service_id):
        with pytest.raises(ValidationError):
            RatingService.submit_rating(
                store, other_ctx, service_id, RatingCreate(work_quality=5, punctuality=5)
            )

    def test_sign_in_required(self, store, anon_ctx, service_id):
        with pytest.raises(AuthenticationError) as exc:
            RatingService.submit_rating(
                store, anon_ctx, service_id, RatingCreate(work_quality=5, punctuality=5)
            )
        assert exc.value.message == "You need to be signed in to rate a service."

    def test_unknown_service(self, store, ctx):
        with pytest.raises(ResourceNotFoundError):
            RatingService.submit_rating(store, ctx, "missing", RatingCreate(work_quality=5, punctuality=5))

    def test_details_without_ratings(self, store, ctx, service_id):
        details = RatingService.get_rating_details(store, ctx, service_id)
        assert details.summary is None
        assert details.stars_text == "No rating yet"
