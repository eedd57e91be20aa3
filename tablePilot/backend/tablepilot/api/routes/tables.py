import logging
from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from tablepilot.api.deps import get_db, get_business
from tablepilot.db.models.bookings import Bookings, BookingStatus
from tablepilot.db.models.businesses import Businesses
from tablepilot.db.models.tables import DiningTables
from tablepilot.schemas.tables import TableCreate, TableUpdate, TableResponse

router = APIRouter(prefix="/businesses/{business_id}/tables", tags=["tables"])

logger = logging.getLogger(__name__)


def _commit_table(db: Session, table: DiningTables) -> None:
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.warning(f"Table number {table.table_number} rejected for business {table.business_id}: {e.orig}")
        raise HTTPException(status_code=409, detail=f"Table number {table.table_number} already exists")
    db.refresh(table)


def _get_table(db: Session, business_id: int, table_id: int) -> DiningTables:
    table = db.query(DiningTables).filter(
        DiningTables.id == table_id,
        DiningTables.business_id == business_id,
    ).first()
    if not table:
        raise HTTPException(status_code=404, detail="Table not found")
    return table


@router.post("", response_model=TableResponse, status_code=status.HTTP_201_CREATED)
def create_table(
    payload: TableCreate,
    business: Businesses = Depends(get_business),
    db: Session = Depends(get_db),
):
    table = DiningTables(**payload.model_dump(), business_id=business.id)
    db.add(table)
    _commit_table(db, table)
    return table


@router.get("", response_model=List[TableResponse])
def list_tables(
    business: Businesses = Depends(get_business),
    db: Session = Depends(get_db),
):
    return db.query(DiningTables).filter(
        DiningTables.business_id == business.id
    ).order_by(DiningTables.table_number).all()


@router.put("/{table_id}", response_model=TableResponse)
def update_table(
    table_id: int,
    payload: TableUpdate,
    business: Businesses = Depends(get_business),
    db: Session = Depends(get_db),
):
    table = _get_table(db, business.id, table_id)

    update_data = payload.model_dump(exclude_unset=True)
    min_capacity = update_data.get("min_capacity", table.min_capacity)
    max_capacity = update_data.get("max_capacity", table.max_capacity)
    if min_capacity > max_capacity:
        raise HTTPException(status_code=400, detail="min_capacity cannot be greater than max_capacity")

    for field, value in update_data.items():
        setattr(table, field, value)

    _commit_table(db, table)
    return table


@router.delete("/{table_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_table(
    table_id: int,
    business: Businesses = Depends(get_business),
    db: Session = Depends(get_db),
):
    table = _get_table(db, business.id, table_id)

    # bookings holding this table go back to waiting for one
    db.query(Bookings).filter(
        Bookings.table_id == table.id,
        Bookings.status == BookingStatus.RESERVED,
    ).update({Bookings.status: BookingStatus.PENDING}, synchronize_session=False)
    db.query(Bookings).filter(Bookings.table_id == table.id).update(
        {Bookings.table_id: None}, synchronize_session=False
    )

    db.delete(table)
    db.commit()
