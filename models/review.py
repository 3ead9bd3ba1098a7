# models/review.py
from pydantic import BaseModel, field_validator
from typing import Any, Optional

DEFAULT_RATING = 5


class ReviewCreate(BaseModel):
    mobile: str
    review: str
    rating: Optional[int] = DEFAULT_RATING  # 1-5

    @field_validator("mobile", mode="before")
    @classmethod
    def mobile_as_text(cls, v: Any):
        # mobile numbers sometimes arrive as numbers
        if isinstance(v, int):
            return str(v)
        return v

    @field_validator("rating", mode="before")
    @classmethod
    def default_rating(cls, v: Any):
        if not v:
            return DEFAULT_RATING
        return v

    @field_validator("rating")
    @classmethod
    def validate_rating(cls, v: int):
        if not 1 <= v <= 5:
            raise ValueError("Rating must be between 1 and 5")
        return v


class ReviewOut(BaseModel):
    name: str
    review: str
    date: Optional[str] = None
    rating: int = DEFAULT_RATING
