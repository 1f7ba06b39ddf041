import uuid
from datetime import datetime
from sqlalchemy import Column, String, Integer, Text, DateTime, ForeignKey, UniqueConstraint
from database.base import Base

class ServiceRatingRow(Base):
    __tablename__ = "service_ratings"
    __table_args__ = (
        UniqueConstraint("service_id", "user_id", name="unique_user_service_rating"),
    )

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()), index=True)
    service_id = Column(String, ForeignKey("service_listings.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(String, nullable=False, index=True)
    work_quality = Column(Integer, nullable=False)  # 1-5 stars
    punctuality = Column(Integer, nullable=False)  # 1-5 stars
    comment = Column(Text, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, index=True)

    def __repr__(self):
        return (
            f"<ServiceRatingRow(service_id={self.service_id}, user_id={self.user_id}, "
            f"work_quality={self.work_quality}, punctuality={self.punctuality})>"
        )
