from sqlalchemy import Boolean, Integer, String, DateTime, func
from datetime import datetime
from sqlalchemy.orm import Mapped, mapped_column
from tablepilot.core.config import settings
from tablepilot.db.database import Base


class Businesses(Base):
    __tablename__ = "businesses"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    address: Mapped[str] = mapped_column(String(255), nullable=True)
    timezone: Mapped[str] = mapped_column(String(50), nullable=False, default=settings.DEFAULT_TIMEZONE)
    booking_slot_duration_minutes: Mapped[int] = mapped_column(Integer, nullable=False, default=settings.DEFAULT_SLOT_DURATION_MINUTES)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    # status automation toggles
    auto_mark_in_progress: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    auto_complete_in_progress: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    auto_complete_delayed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    mark_delayed_as_no_show: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)
