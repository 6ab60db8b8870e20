from pydantic import BaseModel, ConfigDict
from typing import Optional, Dict
from datetime import datetime


class ReviewCreate(BaseModel):
    # All optional so the endpoint can answer a missing field with its own 400.
    # Storefront templates often send numeric product ids; store them as text.
    model_config = ConfigDict(coerce_numbers_to_str=True)

    product_id: Optional[str] = None
    customer_name: Optional[str] = None
    rating: Optional[int] = None
    comment: Optional[str] = None


class ReviewOut(BaseModel):
    id: str
    product_id: str
    customer_name: str
    rating: int
    comment: str
    helpful: int = 0
    created_at: datetime

    class Config:
        from_attributes = True


class HelpfulRequest(BaseModel):
    review_id: Optional[str] = None


class SuccessOut(BaseModel):
    success: bool = True


class HelpfulOut(SuccessOut):
    helpful: int


class ReviewStats(BaseModel):
    totalReviews: int
    ratings: Dict[str, int]
