import re
from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from pydantic.alias_generators import to_camel

from .errors import ValidationError

_NUMERIC_ID = re.compile(r"[+-]?[0-9]+")

# ---------- ENUM ----------
class Category(str, Enum):
    action = "action"
    comedy = "comedy"
    drama  = "drama"
    horror = "horror"
    sci_fi = "sci-fi"

ALL_CATEGORIES = "all"   # selector value meaning "no category filter"
PLACEHOLDER_POSTER = "/placeholder.jpg"


def normalize_movie_id(value) -> int:
    """Turn an id given as int, integral float or digit string into an int.

    Anything else (None, bool, "1abc", "1.5", "") raises ValidationError.
    """
    if value is None:
        raise ValidationError("Movie id is required")
    if isinstance(value, bool):
        raise ValidationError(f"Invalid movie id: {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if value.is_integer():
            return int(value)
        raise ValidationError(f"Invalid movie id: {value!r}")
    if isinstance(value, str) and _NUMERIC_ID.fullmatch(value.strip()):
        try:
            return int(value.strip())
        except ValueError as exc:  # longer than the int conversion limit
            raise ValidationError(f"Invalid movie id: {value[:20]!r}...") from exc
    raise ValidationError(f"Invalid movie id: {value!r}")


# ---------- MOVIE ----------
class Movie(BaseModel):
    # NaN/inf ratings could not be rendered or serialized
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    id: int = Field(..., examples=[1])
    title: Optional[str] = Field(None, examples=["Avatar: The Way of Water"])
    category: Optional[Category] = Field(None, examples=["action"])
    rating: Optional[float] = Field(None, examples=[8.2])  # 0-10, not enforced
    description: Optional[str] = None
    poster: Optional[str] = Field(None, examples=["https://example.com/avatar2.jpg"])
    duration: Optional[int] = Field(None, examples=[192])  # minutes
    director: Optional[str] = None

    # derived, never written back to the catalog
    recommended: Optional[bool] = None

class MovieSummary(BaseModel):
    """Card shown in the catalog grid."""
    id: int
    title: Optional[str] = None
    category: Optional[Category] = None
    rating: Optional[float] = None
    stars: str
    excerpt: str
    poster: str
    recommended: Optional[bool] = None

# ---------- BOOKING ----------
class BookingRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    movie_id: Optional[int] = Field(None, examples=[1])
    user_id: Optional[int] = Field(None, examples=[9])
    seats: Optional[List[str]] = Field(None, examples=[["A1", "A2"]])
    showtime: Optional[str] = Field(None, examples=["19:00"])

    @field_validator("movie_id", mode="before")
    @classmethod
    def _movie_id(cls, v):
        return None if v is None else normalize_movie_id(v)

class Booking(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    id: int
    movie_id: int
    user_id: Optional[int] = None
    seats: List[str]
    showtime: Optional[str] = None
    total_price: float
    created_at: datetime

# ---------- AUTH ----------
class LoginRequest(BaseModel):
    email: EmailStr
    password: str

class AuthToken(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user_id: int
    email: EmailStr
    role: str = "user"
