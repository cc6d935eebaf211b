from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, constr, model_validator


class ItemCreateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: constr(strip_whitespace=True, min_length=1, max_length=200)
    image: Optional[constr(strip_whitespace=True, max_length=500)] = None
    price: float = Field(ge=0)
    description: constr(strip_whitespace=True, min_length=1)
    available_count: int = Field(ge=0, alias="availableCount")
    category: constr(strip_whitespace=True, min_length=1, max_length=100)


# Only the image may be cleared; the other columns are NOT NULL.
REQUIRED_ON_UPDATE = ("title", "price", "description", "availableCount", "available_count", "category")


class ItemUpdateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: Optional[constr(strip_whitespace=True, min_length=1, max_length=200)] = None
    image: Optional[constr(strip_whitespace=True, max_length=500)] = None
    price: Optional[float] = Field(default=None, ge=0)
    description: Optional[constr(strip_whitespace=True, min_length=1)] = None
    available_count: Optional[int] = Field(default=None, ge=0, alias="availableCount")
    category: Optional[constr(strip_whitespace=True, min_length=1, max_length=100)] = None

    @model_validator(mode="before")
    @classmethod
    def _no_null_required_fields(cls, data):
        if isinstance(data, dict):
            nulls = [key for key in REQUIRED_ON_UPDATE if key in data and data[key] is None]
            if nulls:
                raise ValueError(f"{', '.join(nulls)} cannot be null")
        return data
