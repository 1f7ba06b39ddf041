import logging
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional

from core.context import ViewerContext
from core.exceptions import (
    AuthenticationError, RatingConflictError, ResourceNotFoundError,
    StoreConflictError, ValidationError
)
from core.i18n import translate
from database.store import RowStore
from schemas.rating import RatingCreate, RatingDetails, RatingResponse, RatingSummary
from schemas.service import ServiceListing
from services.row_mapper import coerce_datetime

logger = logging.getLogger(__name__)

RATINGS = "service_ratings"
SERVICES = "service_listings"


class _Accumulator:
    __slots__ = ("work_sum", "punctuality_sum", "count", "latest_comment", "latest_created_at")

    def __init__(self):
        self.work_sum = 0
        self.punctuality_sum = 0
        self.count = 0
        self.latest_comment: Optional[str] = None
        self.latest_created_at: Optional[datetime] = None

    def add(self, row: Dict[str, Any]) -> None:
        self.work_sum += row.get("work_quality") or 0
        self.punctuality_sum += row.get("punctuality") or 0
        self.count += 1

        created_at = coerce_datetime(row.get("created_at"))
        # strictly newer wins; an unknown timestamp never displaces a known one
        if self.count == 1 or (
            created_at is not None
            and (self.latest_created_at is None or created_at > self.latest_created_at)
        ):
            self.latest_comment = (row.get("comment") or "").strip() or None
            self.latest_created_at = created_at

    def summary(self) -> RatingSummary:
        work = self.work_sum / self.count
        punctuality = self.punctuality_sum / self.count
        return RatingSummary(
            work_quality=work,
            punctuality=punctuality,
            overall=(work + punctuality) / 2,
            count=self.count,
            latest_comment=self.latest_comment,
            latest_created_at=self.latest_created_at,
        )


def aggregate_ratings(rows: Iterable[Dict[str, Any]]) -> Dict[str, RatingSummary]:
    """Group rating rows by service id in one pass.

    Services without rows are simply absent from the result.
    """
    groups: Dict[str, _Accumulator] = {}
    for row in rows:
        service_id = row.get("service_id")
        if not service_id:
            continue
        groups.setdefault(str(service_id), _Accumulator()).add(row)
    return {service_id: acc.summary() for service_id, acc in groups.items()}


def merge_ratings(
    listings: List[ServiceListing],
    summaries: Dict[str, RatingSummary]
) -> List[ServiceListing]:
    """Attach summaries to listings, returning new objects in the same order."""
    merged = []
    for listing in listings:
        summary = summaries.get(listing.id)
        if summary is not None:
            listing = listing.model_copy(update={"rating": summary})
        merged.append(listing)
    return merged


def stars_text(summary: Optional[RatingSummary], locale: str) -> str:
    """'4.5 / 5 (3)' for rated services; a localized placeholder otherwise."""
    if summary is None:
        return translate("no_rating_yet", locale)
    return f"{summary.overall:.1f} / 5 ({summary.count})"


class RatingService:

    @staticmethod
    def load_summaries(store: RowStore) -> Dict[str, RatingSummary]:
        rows = store.select(RATINGS)
        return aggregate_ratings(rows)

    @staticmethod
    def submit_rating(
        store: RowStore,
        ctx: ViewerContext,
        service_id: str,
        rating_data: RatingCreate
    ) -> RatingResponse:
        """Store the viewer's single rating for a service.

        A second rating by the same viewer is rejected, never overwritten.
        """
        if not ctx.is_authenticated:
            raise AuthenticationError(translate("sign_in_to_rate", ctx.locale))

        if rating_data.work_quality < 1 or rating_data.punctuality < 1:
            raise ValidationError(translate("rating_both_criteria", ctx.locale), field="rating")

        service = store.select_one(SERVICES, id=service_id)
        if service is None:
            raise ResourceNotFoundError("Service", service_id)

        if service.get("user_id") == ctx.user_id:
            raise ValidationError(translate("rating_own_service", ctx.locale), field="service_id")

        comment = (rating_data.comment or "").strip() or None
        try:
            row = store.insert(RATINGS, {
                "service_id": service_id,
                "user_id": ctx.user_id,
                "work_quality": rating_data.work_quality,
                "punctuality": rating_data.punctuality,
                "comment": comment,
            })
        except StoreConflictError:
            logger.info(f"User {ctx.user_id} tried to rate service {service_id} twice")
            raise RatingConflictError(translate("rating_already_submitted", ctx.locale))

        logger.info(f"Rating stored for service {service_id} by user {ctx.user_id}")
        return RatingResponse.model_validate(row)

    @staticmethod
    def get_rating_details(store: RowStore, ctx: ViewerContext, service_id: str) -> RatingDetails:
        """Summary and star text for one service's rating dialog."""
        service = store.select_one(SERVICES, id=service_id)
        if service is None:
            raise ResourceNotFoundError("Service", service_id)

        summary = aggregate_ratings(store.select(RATINGS, service_id=service_id)).get(service_id)
        return RatingDetails(
            service_id=service_id,
            service_name=service.get("service_name") or "",
            summary=summary,
            stars_text=stars_text(summary, ctx.locale),
        )
