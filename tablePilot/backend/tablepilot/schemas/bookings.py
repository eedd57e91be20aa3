from pydantic import BaseModel, Field, model_validator
from datetime import date, datetime, time
from typing import Optional
from tablepilot.db.models.bookings import BookingStatus


NON_NULLABLE_UPDATE_FIELDS = {"client_name", "booking_date", "start_time", "end_time", "party_size"}


class BookingBase(BaseModel):
    client_name: str = Field(min_length=1, max_length=100)
    client_email: Optional[str] = Field(default=None, max_length=255)
    client_phone: Optional[str] = Field(default=None, max_length=20)
    booking_date: date
    start_time: time
    party_size: int = Field(ge=1, le=50)
    notes: Optional[str] = Field(default=None, max_length=500)


class BookingCreate(BookingBase):
    # defaults to start_time + the business slot duration
    end_time: Optional[time] = None


class BookingUpdate(BaseModel):
    client_name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    client_email: Optional[str] = Field(default=None, max_length=255)
    client_phone: Optional[str] = Field(default=None, max_length=20)
    booking_date: Optional[date] = None
    start_time: Optional[time] = None
    end_time: Optional[time] = None
    party_size: Optional[int] = Field(default=None, ge=1, le=50)
    notes: Optional[str] = Field(default=None, max_length=500)
    # None = assign automatically
    table_id: Optional[int] = None

    @model_validator(mode="after")
    def check_required_not_null(self):
        # omitted means unchanged; only table_id may be sent as null
        nulls = sorted(
            name for name in self.model_fields_set & NON_NULLABLE_UPDATE_FIELDS
            if getattr(self, name) is None
        )
        if nulls:
            raise ValueError(f"Fields cannot be null: {', '.join(nulls)}")
        return self


class BookingStatusUpdate(BaseModel):
    status: BookingStatus


class BookingResponse(BookingBase):
    id: int
    business_id: int
    end_time: time
    table_id: Optional[int]
    status: BookingStatus
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class StatusAdvanceRequest(BaseModel):
    # local time in the business time zone; defaults to the current time
    now: Optional[datetime] = None


class StatusAdvanceResponse(BaseModel):
    changed: list[BookingResponse]
