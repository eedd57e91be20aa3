from sqlalchemy import Integer, DateTime, ForeignKey, UniqueConstraint, CheckConstraint, func
from datetime import datetime
from sqlalchemy.orm import Mapped, mapped_column
from tablepilot.db.database import Base


class DiningTables(Base):
    __tablename__ = "tables"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    business_id: Mapped[int] = mapped_column(Integer, ForeignKey("businesses.id"), nullable=False, index=True)
    table_number: Mapped[int] = mapped_column(Integer, nullable=False)
    min_capacity: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    max_capacity: Mapped[int] = mapped_column(Integer, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    __table_args__ = (
        UniqueConstraint("business_id", "table_number", name="uq_tables_business_number"),
        CheckConstraint("min_capacity <= max_capacity", name="ck_tables_capacity"),
    )
