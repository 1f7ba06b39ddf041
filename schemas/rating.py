from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field

# Rating Schemas
class RatingCreate(BaseModel):
    work_quality: int = Field(0, ge=0, le=5, description="Work quality from 1 to 5 stars, 0 = not given")
    punctuality: int = Field(0, ge=0, le=5, description="Punctuality from 1 to 5 stars, 0 = not given")
    comment: Optional[str] = Field(None, max_length=2000, description="Optional comment")

class RatingResponse(BaseModel):
    id: str
    service_id: str
    user_id: str
    work_quality: int
    punctuality: int
    comment: Optional[str]
    created_at: Optional[datetime]

    class Config:
        from_attributes = True

# Per-service aggregate; absent entirely when a service has no ratings
class RatingSummary(BaseModel):
    work_quality: float
    punctuality: float
    overall: float
    count: int = Field(..., gt=0)
    latest_comment: Optional[str] = None
    latest_created_at: Optional[datetime] = None

    class Config:
        frozen = True

class RatingDetails(BaseModel):
    service_id: str
    service_name: str
    summary: Optional[RatingSummary]
    stars_text: str
