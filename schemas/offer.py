from datetime import date, datetime
from typing import List, Literal, Optional, Union
from pydantic import BaseModel, Field

Highlight = Literal["new", "last-minute", "popular"]
HIGHLIGHTS = ("new", "last-minute", "popular")

TITLE_MAX_LENGTH = 50
SERVICE_NAME_MAX_LENGTH = 30
DESCRIPTION_MAX_LENGTH = 800
PRICE_MAX_DIGITS = 8

# Display entity
class Offer(BaseModel):
    id: str
    owner_id: Optional[str] = None
    title: str = ""
    short_label: str = ""
    description: str = ""
    category_id: str
    subcategory_id: Optional[str] = None
    service_name: str = ""
    location: str = ""
    locations: List[str] = Field(default_factory=list)
    languages: List[str] = Field(default_factory=list)
    original_price: Optional[float] = None
    discounted_price: Optional[float] = None
    valid_until: Optional[date] = None
    highlight: Optional[Highlight] = None
    image_url: Optional[str] = None
    phone: Optional[str] = None
    contact_email: Optional[str] = None
    website: Optional[str] = None
    instagram: Optional[str] = None
    facebook: Optional[str] = None
    tiktok: Optional[str] = None
    linkedin: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        frozen = True

    @property
    def effective_price(self) -> Optional[float]:
        """What the customer pays: the discounted price when there is one."""
        if self.discounted_price is not None:
            return self.discounted_price
        return self.original_price

# Create/edit form; prices and date arrive as typed by the user
class OfferForm(BaseModel):
    title: str = Field("", max_length=TITLE_MAX_LENGTH)
    short_label: Optional[str] = Field(None, max_length=40)
    description: str = Field("", max_length=DESCRIPTION_MAX_LENGTH)
    category_id: str = "all"
    subcategory_id: Optional[str] = None
    service_name: str = Field("", max_length=SERVICE_NAME_MAX_LENGTH)
    location: str = ""
    original_price: Optional[Union[float, str]] = None
    discounted_price: Optional[Union[float, str]] = None
    valid_until: Optional[str] = None
    image_url: Optional[str] = None
    contact_email: str = ""
    phone: str = ""
    website: Optional[str] = None
    instagram: Optional[str] = None
    facebook: Optional[str] = None
    tiktok: Optional[str] = None
    linkedin: Optional[str] = None
    languages: List[str] = Field(default_factory=list)

class OfferCard(BaseModel):
    offer: Offer
    category_label: str
    subcategory_label: Optional[str]
    highlight_label: str
    discount_percent: Optional[int]
    discount_amount: Optional[float]
    discount_badge: Optional[str]
    original_price_text: str
    discounted_price_text: str
    valid_until_text: str
    language_flags: List[str]
    social_links: dict
    can_edit: bool
