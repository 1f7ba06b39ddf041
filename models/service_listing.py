import uuid
from datetime import datetime
from sqlalchemy import Column, String, Boolean, DateTime, Text, JSON
from database.base import Base

class ServiceListingRow(Base):
    """One provider profile; the application keeps at most one per user."""
    __tablename__ = "service_listings"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()), index=True)
    user_id = Column(String, nullable=False, index=True)
    service_name = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    category_id = Column(String, nullable=False, index=True)
    subcategory_id = Column(String, nullable=True)
    location = Column(JSON, nullable=True)  # list of areas, or a legacy comma string
    contact_email = Column(String, nullable=True)
    phone = Column(String, nullable=True)
    website = Column(String, nullable=True)
    instagram = Column(String, nullable=True)
    facebook = Column(String, nullable=True)
    tiktok = Column(String, nullable=True)
    linkedin = Column(String, nullable=True)
    opening_hours = Column(JSON, nullable=True)
    show_online = Column(Boolean, default=True)
    languages = Column(JSON, nullable=True)  # list of codes, or a legacy comma string
    provider_profile_image_url = Column(String, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def __repr__(self):
        return f"<ServiceListingRow(id={self.id}, user_id={self.user_id}, name={self.service_name})>"
