"""
Row-oriented data store over the relational backend.

Every resource is addressed by its table name and exchanged as plain dict
rows, so the aggregation and filtering pipeline never depends on ORM objects.
Mutations take owner predicates (``user_id=...``) the same way row-level
policies guard them on the backend.
"""
import logging
from typing import Any, Dict, List, Optional, Type

from fastapi import Depends
from sqlalchemy import asc, desc
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from core.exceptions import StoreConflictError, StoreReadError, StoreWriteError
from database.base import Base
from database.connection import get_db
from models.offer import OfferRow
from models.property_listing import PropertyListingRow
from models.rating import ServiceRatingRow
from models.search_request import PropertySearchRequestRow
from models.service_listing import ServiceListingRow

logger = logging.getLogger(__name__)

Row = Dict[str, Any]

RESOURCES: Dict[str, Type[Base]] = {
    "service_listings": ServiceListingRow,
    "service_ratings": ServiceRatingRow,
    "service_offers": OfferRow,
    "property_listings": PropertyListingRow,
    "property_search_requests": PropertySearchRequestRow,
}


def row_to_dict(obj: Base) -> Row:
    return {column.name: getattr(obj, column.name) for column in obj.__table__.columns}


class RowStore:
    """CRUD access to the directory tables, one session per request."""

    def __init__(self, db: Session):
        self.db = db

    def _model(self, resource: str) -> Type[Base]:
        try:
            return RESOURCES[resource]
        except KeyError:
            raise ValueError(f"Unknown resource: {resource}")

    def _filtered(self, model: Type[Base], filters: Dict[str, Any]):
        query = self.db.query(model)
        for field, value in filters.items():
            query = query.filter(getattr(model, field) == value)
        return query

    def select(
        self,
        resource: str,
        order_by: Optional[str] = None,
        descending: bool = False,
        **filters: Any
    ) -> List[Row]:
        """Read every row matching the equality filters."""
        model = self._model(resource)
        try:
            query = self._filtered(model, filters)
            if order_by:
                column = getattr(model, order_by)
                query = query.order_by(desc(column) if descending else asc(column))
            return [row_to_dict(obj) for obj in query.all()]
        except SQLAlchemyError as e:
            logger.error(f"Error reading {resource} with filters {filters}: {str(e)}")
            raise StoreReadError(resource, "read failed")

    def select_one(self, resource: str, **filters: Any) -> Optional[Row]:
        rows = self.select(resource, **filters)
        return rows[0] if rows else None

    def insert(self, resource: str, values: Dict[str, Any]) -> Row:
        """Insert one row and return it as stored."""
        model = self._model(resource)
        obj = model(**values)
        try:
            self.db.add(obj)
            self.db.commit()
            self.db.refresh(obj)
        except IntegrityError as e:
            self.db.rollback()
            logger.warning(f"Integrity conflict inserting into {resource}: {str(e.orig)}")
            raise StoreConflictError(resource, "duplicate key")
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error inserting into {resource}: {str(e)}")
            raise StoreWriteError(resource, "insert failed")
        logger.info(f"Inserted {resource} row {obj.id}")
        return row_to_dict(obj)

    def update(self, resource: str, row_id: str, values: Dict[str, Any], **filters: Any) -> Optional[Row]:
        """Update the row with ``row_id`` if it also matches ``filters``.

        Returns None when no row matched, which callers treat as not found.
        """
        model = self._model(resource)
        try:
            obj = self._filtered(model, dict(filters, id=row_id)).first()
            if obj is None:
                return None
            for field, value in values.items():
                setattr(obj, field, value)
            self.db.commit()
            self.db.refresh(obj)
        except IntegrityError as e:
            self.db.rollback()
            logger.warning(f"Integrity conflict updating {resource} {row_id}: {str(e.orig)}")
            raise StoreConflictError(resource, "duplicate key")
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error updating {resource} {row_id}: {str(e)}")
            raise StoreWriteError(resource, "update failed")
        logger.info(f"Updated {resource} row {row_id}")
        return row_to_dict(obj)

    def delete(self, resource: str, row_id: str, **filters: Any) -> bool:
        """Delete the row with ``row_id`` if it also matches ``filters``."""
        model = self._model(resource)
        try:
            deleted = self._filtered(model, dict(filters, id=row_id)).delete(synchronize_session=False)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error deleting {resource} {row_id}: {str(e)}")
            raise StoreWriteError(resource, "delete failed")
        if deleted:
            logger.info(f"Deleted {resource} row {row_id}")
        return bool(deleted)


def get_store(db: Session = Depends(get_db)) -> RowStore:
    return RowStore(db)
