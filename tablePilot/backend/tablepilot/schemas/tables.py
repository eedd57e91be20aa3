from pydantic import BaseModel, Field, model_validator
from datetime import datetime
from typing import Optional


class TableBase(BaseModel):
    table_number: int = Field(gt=0)
    min_capacity: int = Field(default=1, ge=1)
    max_capacity: int = Field(ge=1)

    @model_validator(mode="after")
    def check_capacity(self):
        if self.min_capacity > self.max_capacity:
            raise ValueError("min_capacity cannot be greater than max_capacity")
        return self


class TableCreate(TableBase):
    pass


class TableUpdate(BaseModel):
    table_number: Optional[int] = Field(default=None, gt=0)
    min_capacity: Optional[int] = Field(default=None, ge=1)
    max_capacity: Optional[int] = Field(default=None, ge=1)


class TableResponse(TableBase):
    id: int
    business_id: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class TableAvailabilityResponse(BaseModel):
    id: int
    table_number: Optional[int]
    min_capacity: int
    max_capacity: int
    is_available: bool
