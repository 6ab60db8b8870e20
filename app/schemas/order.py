from pydantic import BaseModel, Field


class OrderCountOut(BaseModel):
    count: int = Field(..., ge=0)
