from typing import Literal, Optional, Union
from pydantic import BaseModel, Field, validator
from pydantic import ValidationError as PydanticValidationError

from core.exceptions import ValidationError

ALL = "all"

SortOrder = Literal["default", "price-asc", "price-desc"]
RatingFilter = Union[Literal["all", "no-rating"], int]

class ServiceFilter(BaseModel):
    category: str = ALL
    subcategory: str = ALL
    rating: RatingFilter = ALL  # "all", "no-rating" or a minimum overall score
    location: Optional[str] = None

    class Config:
        frozen = True

    @validator('rating', pre=True)
    def validate_rating(cls, v):
        if isinstance(v, str) and v.strip().isdigit():
            v = int(v.strip())
        if isinstance(v, int) and not 1 <= v <= 5:
            raise ValueError('Minimum rating must be between 1 and 5')
        return v

class OfferFilter(BaseModel):
    category: str = ALL
    subcategory: str = ALL
    only_highlighted: bool = False
    max_price: Optional[float] = Field(None, ge=0)
    location: Optional[str] = None
    sort: SortOrder = "default"

    class Config:
        frozen = True

class PropertyFilter(BaseModel):
    buy_rent: Literal["all", "buy", "rent"] = ALL
    location: Optional[str] = None
    property_type: str = ALL
    min_bedrooms: Optional[int] = Field(None, ge=0)
    min_bathrooms: Optional[int] = Field(None, ge=0)
    max_price: Optional[float] = Field(None, ge=0)
    min_area: Optional[float] = Field(None, ge=0)
    max_area: Optional[float] = Field(None, ge=0)
    sort: SortOrder = "default"

    class Config:
        frozen = True


def parse_filter(model, **params):
    """Build a filter state from query parameters, dropping unset ones."""
    values = {key: value for key, value in params.items() if value is not None and value != ""}
    try:
        return model(**values)
    except PydanticValidationError as e:
        error = e.errors()[0]
        field = ".".join(str(part) for part in error["loc"])
        raise ValidationError(f"Invalid filter '{field}': {error['msg']}", field=field)
