from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional
from tablepilot.core.config import settings


class BusinessBase(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    address: Optional[str] = None
    timezone: str = settings.DEFAULT_TIMEZONE
    booking_slot_duration_minutes: int = Field(default=settings.DEFAULT_SLOT_DURATION_MINUTES, gt=0, le=24 * 60)
    auto_mark_in_progress: bool = True
    auto_complete_in_progress: bool = True
    auto_complete_delayed: bool = True
    mark_delayed_as_no_show: bool = False


class BusinessCreate(BusinessBase):
    pass


class BusinessUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    address: Optional[str] = None
    timezone: Optional[str] = None
    booking_slot_duration_minutes: Optional[int] = Field(default=None, gt=0, le=24 * 60)
    is_active: Optional[bool] = None
    auto_mark_in_progress: Optional[bool] = None
    auto_complete_in_progress: Optional[bool] = None
    auto_complete_delayed: Optional[bool] = None
    mark_delayed_as_no_show: Optional[bool] = None


class BusinessResponse(BusinessBase):
    id: int
    is_active: bool
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
