import uuid
from datetime import datetime
from sqlalchemy import Column, String, Date, DateTime, Text, Float, JSON
from database.base import Base

class OfferRow(Base):
    __tablename__ = "service_offers"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()), index=True)
    user_id = Column(String, nullable=True, index=True)
    title = Column(String, nullable=False)
    short_label = Column(String, nullable=True)
    description = Column(Text, nullable=True)
    category_id = Column(String, nullable=True, index=True)
    subcategory_id = Column(String, nullable=True)
    service_name = Column(String, nullable=True)
    location = Column(JSON, nullable=True)
    languages = Column(JSON, nullable=True)
    original_price = Column(Float, nullable=True)
    discounted_price = Column(Float, nullable=True)
    valid_until = Column(Date, nullable=True)  # NULL never expires
    highlight = Column(String, nullable=True)  # new, last-minute, popular
    image_url = Column(String, nullable=True)
    phone = Column(String, nullable=True)
    contact_email = Column(String, nullable=True)
    website = Column(String, nullable=True)
    instagram = Column(String, nullable=True)
    facebook = Column(String, nullable=True)
    tiktok = Column(String, nullable=True)
    linkedin = Column(String, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, index=True)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def __repr__(self):
        return f"<OfferRow(id={self.id}, title={self.title}, valid_until={self.valid_until})>"
