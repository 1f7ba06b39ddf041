from datetime import date, datetime
from typing import List, Literal, Optional, Union
from pydantic import BaseModel, Field, validator

PropertyStatusValue = Literal["active", "sold", "rented"]
BuyRent = Literal["buy", "rent"]
PropertyType = Literal[
    "apartment", "house", "villa", "studio", "land", "commercial", "warehouse", "garage"
]
Furnished = Literal["yes", "no", "partial"]

MAX_IMAGES = 8
TITLE_MAX_LENGTH = 70
NAME_MAX_LENGTH = 30
DESCRIPTION_MAX_LENGTH = 800
PRICE_MAX_DIGITS = 8
AREA_MAX_DIGITS = 6

# Display entity
class Property(BaseModel):
    id: str
    owner_id: Optional[str] = None
    status: PropertyStatusValue = "active"
    buy_rent: Optional[BuyRent] = None
    property_type: Optional[PropertyType] = None
    title: str = ""
    description: str = ""
    price: Optional[float] = None
    currency: str = "EUR"
    location: str = ""
    bedrooms: Optional[int] = None
    bathrooms: Optional[int] = None
    usable_area: Optional[float] = None
    gross_area: Optional[float] = None
    land_area: Optional[float] = None
    condition: Optional[str] = None
    furnished: Optional[Furnished] = None
    energy_certificate: Optional[str] = None
    divisions: Optional[int] = None
    images: List[str] = Field(default_factory=list)
    is_price_negotiable: bool = False
    contact_name: Optional[str] = None
    contact_email: Optional[str] = None
    contact_phone: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        frozen = True

    @property
    def relevant_area(self) -> Optional[float]:
        """Land area for plots, usable area for everything else."""
        if self.property_type == "land":
            return self.land_area
        return self.usable_area

# Create/edit form; numeric inputs arrive as typed by the user
class PropertyForm(BaseModel):
    buy_rent: BuyRent = "buy"
    property_type: PropertyType = "apartment"
    status: PropertyStatusValue = "active"
    title: str = Field("", max_length=TITLE_MAX_LENGTH)
    location: str = ""
    description: str = Field("", max_length=DESCRIPTION_MAX_LENGTH)
    price: Optional[Union[int, float, str]] = None
    is_price_negotiable: bool = False
    bedrooms: Optional[Union[int, str]] = None
    bathrooms: Optional[Union[int, str]] = None
    usable_area: Optional[Union[int, float, str]] = None
    land_area: Optional[Union[int, float, str]] = None
    gross_area: Optional[Union[int, float, str]] = None
    condition: Optional[str] = None
    furnished: Optional[Furnished] = None
    divisions: Optional[Union[int, str]] = None
    energy_certificate: Optional[str] = None
    images: List[str] = Field(default_factory=list)
    contact_name: str = Field("", max_length=NAME_MAX_LENGTH)
    contact_email: str = ""
    contact_phone: str = ""

    @validator('images')
    def validate_images(cls, v):
        if len(v) > MAX_IMAGES:
            raise ValueError(f'A listing can have at most {MAX_IMAGES} images')
        return v

class PropertyCard(BaseModel):
    property: Property
    type_label: str
    buy_rent_label: str
    condition_label: Optional[str]
    furnished_label: Optional[str]
    price_text: str
    price_per_area: Optional[float]
    cover_image: Optional[str]
    can_edit: bool

# Write-only concierge intake
class PropertySearchRequestCreate(BaseModel):
    type: Literal["rent", "buy"] = "rent"
    name: str = Field("", max_length=NAME_MAX_LENGTH * 2)
    email: str = ""
    phone: Optional[str] = None
    from_date: Optional[date] = None
    to_date: Optional[date] = None
    min_size: Optional[Union[int, float, str]] = None
    notes: Optional[str] = Field(None, max_length=DESCRIPTION_MAX_LENGTH)
