import uuid
from datetime import datetime
from sqlalchemy import Column, String, Date, DateTime, Text, Float
from database.base import Base

class PropertySearchRequestRow(Base):
    """Write-only intake of 'find me a property' requests."""
    __tablename__ = "property_search_requests"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()), index=True)
    type = Column(String, nullable=False)  # rent or buy
    name = Column(String, nullable=False)
    email = Column(String, nullable=False)
    phone = Column(String, nullable=True)
    from_date = Column(Date, nullable=True)
    to_date = Column(Date, nullable=True)
    min_size = Column(Float, nullable=True)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)
