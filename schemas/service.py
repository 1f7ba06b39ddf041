from datetime import datetime
from typing import List, Literal, Optional
from pydantic import BaseModel, Field, validator

from schemas.rating import RatingSummary

DayKey = Literal["mon", "tue", "wed", "thu", "fri", "sat", "sun"]

SERVICE_NAME_MAX_LENGTH = 30
DESCRIPTION_MAX_LENGTH = 800

# Opening hours, stored as a camelCase JSON list on the listing row
class OpeningHourEntry(BaseModel):
    day_key: DayKey = Field(..., alias="dayKey")
    label_en: str = Field("", alias="labelEn")
    label_pt: str = Field("", alias="labelPt")
    open: Optional[str] = None
    close: Optional[str] = None
    closed: bool = False

    class Config:
        frozen = True
        populate_by_name = True

    @property
    def is_open(self) -> bool:
        return not self.closed and bool(self.open) and bool(self.close)

# Display entity
class ServiceListing(BaseModel):
    id: str
    owner_id: Optional[str] = None
    name: str
    description: str = ""
    category_id: str
    subcategory_id: Optional[str] = None
    location: str = ""
    email: Optional[str] = None
    phone: Optional[str] = None
    website: Optional[str] = None
    instagram: Optional[str] = None
    facebook: Optional[str] = None
    tiktok: Optional[str] = None
    linkedin: Optional[str] = None
    languages: List[str] = Field(default_factory=list)
    opening_hours: List[OpeningHourEntry]
    opening_hours_text: str = ""
    is_visible: bool = True
    avatar_url: Optional[str] = None
    created_at: Optional[datetime] = None
    rating: Optional[RatingSummary] = None

    class Config:
        frozen = True

# Own-profile form
class ServiceListingForm(BaseModel):
    service_name: str = Field("", max_length=SERVICE_NAME_MAX_LENGTH)
    description: str = Field("", max_length=DESCRIPTION_MAX_LENGTH)
    category_id: str = "all"
    subcategory_id: Optional[str] = None
    location: str = ""
    contact_email: str = ""
    phone: str = ""
    website: Optional[str] = None
    instagram: Optional[str] = None
    facebook: Optional[str] = None
    tiktok: Optional[str] = None
    linkedin: Optional[str] = None
    opening_hours: Optional[List[OpeningHourEntry]] = None
    show_online: bool = True
    provider_profile_image_url: Optional[str] = None
    languages: List[str] = Field(default_factory=list)

    @validator('opening_hours')
    def validate_opening_hours(cls, v):
        if v is None:
            return v
        keys = [entry.day_key for entry in v]
        if len(keys) != 7 or len(set(keys)) != 7:
            raise ValueError('Opening hours must contain exactly one entry per weekday')
        return v

    @validator('languages')
    def validate_languages(cls, v):
        seen = []
        for code in v:
            code = code.strip().lower()
            if code and code not in seen:
                seen.append(code)
        return seen

class ServiceCard(BaseModel):
    service: ServiceListing
    category_label: str
    subcategory_label: Optional[str]
    language_flags: List[str]
    social_links: dict
    stars_text: str
