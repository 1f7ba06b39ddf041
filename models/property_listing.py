import uuid
import enum
from datetime import datetime
from sqlalchemy import Column, String, Boolean, DateTime, Text, Float, Integer, JSON
from database.base import Base

class PropertyStatus(str, enum.Enum):
    ACTIVE = "active"
    SOLD = "sold"
    RENTED = "rented"

class PropertyListingRow(Base):
    __tablename__ = "property_listings"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()), index=True)
    user_id = Column(String, nullable=False, index=True)
    status = Column(String, default=PropertyStatus.ACTIVE.value, index=True)
    buy_rent = Column(String, nullable=False)
    property_type = Column(String, nullable=False)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    price = Column(Float, nullable=True)
    currency = Column(String, default="EUR")
    location = Column(String, nullable=True)
    bedrooms = Column(Integer, nullable=True)
    bathrooms = Column(Integer, nullable=True)
    usable_area = Column(Float, nullable=True)
    gross_area = Column(Float, nullable=True)
    land_area = Column(Float, nullable=True)
    condition = Column(String, nullable=True)
    furnished = Column(String, nullable=True)  # yes, no, partial
    divisions = Column(Integer, nullable=True)
    energy_certificate = Column(String, nullable=True)
    images = Column(JSON, nullable=True)
    is_price_negotiable = Column(Boolean, default=False)
    contact_name = Column(String, nullable=True)
    contact_email = Column(String, nullable=True)
    contact_phone = Column(String, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, index=True)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def __repr__(self):
        return f"<PropertyListingRow(id={self.id}, title={self.title}, status={self.status})>"
