from pydantic import BaseModel, Field, model_validator
from datetime import date, time
from typing import Optional


class TimeSlotIn(BaseModel):
    start_time: time
    end_time: time


class ScheduleSlotResponse(BaseModel):
    employee_id: int
    date: date
    is_day_off: bool
    start_time: Optional[time] = None
    end_time: Optional[time] = None
    order: int

    class Config:
        from_attributes = True


class CellSlotIn(BaseModel):
    is_day_off: bool = False
    start_time: Optional[time] = None
    end_time: Optional[time] = None
    order: int = Field(default=1, ge=1)


class CellUpdate(BaseModel):
    """Either a day off, or a list of shifts. An empty request clears the cell."""
    is_day_off: bool = False
    time_slots: list[TimeSlotIn] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_day_off(self):
        if self.is_day_off and self.time_slots:
            raise ValueError("A day off cannot have time slots")
        return self


class DateSelectionIn(BaseModel):
    date_from: Optional[date] = None
    date_to: Optional[date] = None
    dates: Optional[list[date]] = None


class FixedScheduleRequest(BaseModel):
    employee_ids: list[int] = Field(min_length=1)
    # 0=Sunday .. 6=Saturday
    days_of_week: list[int] = Field(min_length=1)
    time_slots: list[TimeSlotIn] = Field(min_length=1)
    selection: DateSelectionIn
    # write even if the conflict check finds something
    force: bool = False

    @model_validator(mode="after")
    def check_days(self):
        invalid = [d for d in self.days_of_week if d < 0 or d > 6]
        if invalid:
            raise ValueError(f"days_of_week must be between 0 (Sunday) and 6 (Saturday), got {invalid}")
        return self


class VacationConflictResponse(BaseModel):
    employee_name: str
    start: str
    end: str


class ScheduleConflictResponse(BaseModel):
    schedule_conflicts: list[str]
    vacation_conflicts: list[VacationConflictResponse]


class CellRef(BaseModel):
    employee_id: int
    date: date


class CopyScheduleRequest(BaseModel):
    source_slots: list[CellSlotIn]
    target_cells: list[CellRef] = Field(min_length=1)
