import logging
from datetime import date, time
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from tablepilot.api.deps import get_db, get_business
from tablepilot.db.models.bookings import Bookings, BookingStatus
from tablepilot.db.models.businesses import Businesses
from tablepilot.db.models.tables import DiningTables
from tablepilot.schemas.bookings import (
    BookingCreate,
    BookingUpdate,
    BookingStatusUpdate,
    BookingResponse,
    StatusAdvanceRequest,
    StatusAdvanceResponse,
)
from tablepilot.schemas.tables import TableAvailabilityResponse
from tablepilot.services.booking import (
    TimeInterval,
    TableUnavailableError,
    assign_table_for_create,
    assign_table_for_edit,
    list_table_availability,
    advance_business_bookings,
    default_end_time,
    releases_table,
)

router = APIRouter(prefix="/businesses/{business_id}", tags=["bookings"])

logger = logging.getLogger(__name__)

# fields whose change means the table has to be chosen again
ASSIGNMENT_FIELDS = {"booking_date", "start_time", "end_time", "party_size", "table_id"}
CLOSED_STATUSES = {BookingStatus.CANCELLED, BookingStatus.COMPLETED, BookingStatus.NO_SHOW}


def _get_booking(db: Session, business_id: int, booking_id: int) -> Bookings:
    booking = db.query(Bookings).filter(
        Bookings.id == booking_id,
        Bookings.business_id == business_id,
    ).first()
    if not booking:
        raise HTTPException(status_code=404, detail="Booking not found")
    return booking


@router.post("/bookings", response_model=BookingResponse, status_code=status.HTTP_201_CREATED)
def create_booking(
    payload: BookingCreate,
    business: Businesses = Depends(get_business),
    db: Session = Depends(get_db),
):
    """Create a booking and assign the best free table, or leave it pending"""
    end_time = payload.end_time or default_end_time(payload.start_time, business.booking_slot_duration_minutes)
    interval = TimeInterval(start=payload.start_time, end=end_time)

    assignment = assign_table_for_create(
        db, business.id, payload.booking_date, interval, payload.party_size
    )

    booking = Bookings(
        **payload.model_dump(exclude={"end_time"}),
        end_time=end_time,
        business_id=business.id,
        table_id=assignment.table_id,
        status=BookingStatus(assignment.status.value),
    )
    db.add(booking)
    db.commit()
    db.refresh(booking)
    return booking


@router.get("/bookings", response_model=List[BookingResponse])
def list_bookings(
    booking_date: Optional[date] = None,
    booking_status: Optional[BookingStatus] = None,
    skip: int = 0,
    limit: int = 100,
    business: Businesses = Depends(get_business),
    db: Session = Depends(get_db),
):
    query = db.query(Bookings).filter(Bookings.business_id == business.id)

    if booking_date:
        query = query.filter(Bookings.booking_date == booking_date)
    if booking_status:
        query = query.filter(Bookings.status == booking_status)

    return query.order_by(Bookings.booking_date, Bookings.start_time).offset(skip).limit(limit).all()


@router.get("/table-availability", response_model=List[TableAvailabilityResponse])
def get_table_availability(
    booking_date: date,
    start_time: time,
    end_time: time,
    exclude_booking_id: Optional[int] = None,
    business: Businesses = Depends(get_business),
    db: Session = Depends(get_db),
):
    """Every table with whether it is free for the slot (edit dialog listing)"""
    interval = TimeInterval(start=start_time, end=end_time)
    availability = list_table_availability(db, business.id, booking_date, interval, exclude_booking_id)
    return [
        TableAvailabilityResponse(
            id=a.table.id,
            table_number=a.table.table_number,
            min_capacity=a.table.min_capacity,
            max_capacity=a.table.max_capacity,
            is_available=a.is_available,
        )
        for a in availability
    ]


@router.post("/bookings/advance-status", response_model=StatusAdvanceResponse)
def advance_statuses(
    payload: StatusAdvanceRequest,
    business: Businesses = Depends(get_business),
    db: Session = Depends(get_db),
):
    """Apply the time-based status rules now (or at the given local time)"""
    changed = advance_business_bookings(db, business, payload.now)
    return StatusAdvanceResponse(changed=[BookingResponse.model_validate(b) for b in changed])


@router.get("/bookings/{booking_id}", response_model=BookingResponse)
def get_booking(
    booking_id: int,
    business: Businesses = Depends(get_business),
    db: Session = Depends(get_db),
):
    return _get_booking(db, business.id, booking_id)


@router.put("/bookings/{booking_id}", response_model=BookingResponse)
def update_booking(
    booking_id: int,
    payload: BookingUpdate,
    business: Businesses = Depends(get_business),
    db: Session = Depends(get_db),
):
    """
    Update a booking:
    - changing date, times or party size re-assigns the table automatically
    - passing table_id picks that table, which must be free for the slot
    """
    booking = _get_booking(db, business.id, booking_id)
    update_data = payload.model_dump(exclude_unset=True)

    # a new start without an explicit end keeps the business slot length
    if "start_time" in update_data and "end_time" not in update_data:
        update_data["end_time"] = default_end_time(
            update_data["start_time"], business.booking_slot_duration_minutes
        )

    selected_table_id = update_data.pop("table_id", None)
    needs_assignment = selected_table_id is not None or bool(ASSIGNMENT_FIELDS & update_data.keys())

    if needs_assignment and booking.status in CLOSED_STATUSES:
        raise HTTPException(status_code=400, detail=f"Cannot move a {booking.status.value} booking")

    for field, value in update_data.items():
        setattr(booking, field, value)

    if needs_assignment:
        if selected_table_id is not None:
            table = db.query(DiningTables).filter(
                DiningTables.id == selected_table_id,
                DiningTables.business_id == business.id,
            ).first()
            if not table:
                raise HTTPException(status_code=404, detail="Table not found")

        interval = TimeInterval(start=booking.start_time, end=booking.end_time)
        try:
            assignment = assign_table_for_edit(
                db, booking, booking.booking_date, interval, booking.party_size, selected_table_id
            )
        except TableUnavailableError as e:
            db.rollback()
            raise HTTPException(status_code=409, detail=str(e))

        booking.table_id = assignment.table_id
        booking.status = BookingStatus(assignment.status.value)

    db.commit()
    db.refresh(booking)
    return booking


@router.post("/bookings/{booking_id}/status", response_model=BookingResponse)
def change_booking_status(
    booking_id: int,
    payload: BookingStatusUpdate,
    business: Businesses = Depends(get_business),
    db: Session = Depends(get_db),
):
    """Manual status change (guest arrived, running late, ...)"""
    booking = _get_booking(db, business.id, booking_id)
    booking.status = payload.status
    if releases_table(payload.status.value):
        booking.table_id = None
    db.commit()
    db.refresh(booking)
    return booking


@router.post("/bookings/{booking_id}/cancel", response_model=BookingResponse)
def cancel_booking(
    booking_id: int,
    business: Businesses = Depends(get_business),
    db: Session = Depends(get_db),
):
    """Cancel and release the table"""
    booking = _get_booking(db, business.id, booking_id)
    booking.status = BookingStatus.CANCELLED
    booking.table_id = None
    db.commit()
    db.refresh(booking)
    return booking


@router.post("/bookings/{booking_id}/complete", response_model=BookingResponse)
def complete_booking(
    booking_id: int,
    business: Businesses = Depends(get_business),
    db: Session = Depends(get_db),
):
    """Complete and release the table"""
    booking = _get_booking(db, business.id, booking_id)
    booking.status = BookingStatus.COMPLETED
    booking.table_id = None
    db.commit()
    db.refresh(booking)
    return booking


@router.delete("/bookings/{booking_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_booking(
    booking_id: int,
    business: Businesses = Depends(get_business),
    db: Session = Depends(get_db),
):
    booking = _get_booking(db, business.id, booking_id)
    db.delete(booking)
    db.commit()
