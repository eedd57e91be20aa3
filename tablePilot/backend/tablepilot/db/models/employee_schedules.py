from sqlalchemy import Integer, Boolean, Date, Time, DateTime, ForeignKey, Index, UniqueConstraint, func
from datetime import date as date_type, datetime, time
from sqlalchemy.orm import Mapped, mapped_column
from typing import Optional
from tablepilot.db.database import Base


class EmployeeWeeklySchedules(Base):
    """One row per (employee, date, slot). Day-off rows carry no times."""
    __tablename__ = "employee_weekly_schedules"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    employee_id: Mapped[int] = mapped_column(Integer, ForeignKey("employees.id"), nullable=False)
    date: Mapped[date_type] = mapped_column(Date, nullable=False)
    is_day_off: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    start_time: Mapped[Optional[time]] = mapped_column(Time, nullable=True)
    end_time: Mapped[Optional[time]] = mapped_column(Time, nullable=True)
    slot_order: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    __table_args__ = (
        UniqueConstraint("employee_id", "date", "slot_order", name="uq_weekly_schedules_cell_order"),
        Index("ix_weekly_schedules_employee_date", "employee_id", "date"),
    )


class EmployeeSchedules(Base):
    """Recurring weekly template, day_of_week uses 0=Sunday..6=Saturday."""
    __tablename__ = "employee_schedules"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    employee_id: Mapped[int] = mapped_column(Integer, ForeignKey("employees.id"), nullable=False, index=True)
    day_of_week: Mapped[int] = mapped_column(Integer, nullable=False)
    start_time: Mapped[time] = mapped_column(Time, nullable=False)
    end_time: Mapped[time] = mapped_column(Time, nullable=False)
    slot_order: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), nullable=False)
