from sqlalchemy import Integer, String, Date, Time, DateTime, ForeignKey, Enum as SQLEnum, Index, func
from datetime import date, datetime, time
from sqlalchemy.orm import Mapped, mapped_column
from enum import Enum
from typing import Optional
from tablepilot.db.database import Base


class BookingStatus(str, Enum):
    RESERVED = "reserved"
    PENDING = "pending"
    OCCUPIED = "occupied"
    IN_PROGRESS = "in_progress"
    DELAYED = "delayed"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    NO_SHOW = "no_show"


class Bookings(Base):
    __tablename__ = "bookings"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    business_id: Mapped[int] = mapped_column(Integer, ForeignKey("businesses.id"), nullable=False)
    table_id: Mapped[Optional[int]] = mapped_column(Integer, ForeignKey("tables.id"), nullable=True)
    client_name: Mapped[str] = mapped_column(String(100), nullable=False)
    client_email: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    client_phone: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    booking_date: Mapped[date] = mapped_column(Date, nullable=False)
    start_time: Mapped[time] = mapped_column(Time, nullable=False)
    end_time: Mapped[time] = mapped_column(Time, nullable=False)
    party_size: Mapped[int] = mapped_column(Integer, nullable=False)
    notes: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    status: Mapped[BookingStatus] = mapped_column(SQLEnum(BookingStatus, name="booking_status_enum"), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    __table_args__ = (
        Index("ix_bookings_business_date", "business_id", "booking_date"),
    )
