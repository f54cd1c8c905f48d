from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from luct_reports.models import MAX_RATING, MIN_RATING


class RatingCreate(BaseModel):
    lecturer_id: int
    rating: int = Field(ge=MIN_RATING, le=MAX_RATING)
    comments: str = ""


class RatingOut(BaseModel):
    rating_id: int
    lecturer_id: int
    lecturer_name: Optional[str] = None
    user_id: int
    rater_name: Optional[str] = None
    rating: int
    comments: Optional[str] = None
    created_at: Optional[datetime] = None
