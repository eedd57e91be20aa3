from pydantic import BaseModel, model_validator
from datetime import date, datetime
from typing import Optional


class VacationBase(BaseModel):
    start_date: date
    end_date: date
    notes: Optional[str] = None

    @model_validator(mode="after")
    def check_range(self):
        if self.start_date > self.end_date:
            raise ValueError("start_date must be on or before end_date")
        return self


class VacationCreate(VacationBase):
    pass


class VacationResponse(VacationBase):
    id: int
    employee_id: int
    created_at: datetime

    class Config:
        from_attributes = True
