import logging
from datetime import date
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from tablepilot.api.deps import get_db, get_business, get_business_employee, check_employees_in_business
from tablepilot.db.models.businesses import Businesses
from tablepilot.db.models.employees import Employees
from tablepilot.schemas.schedules import (
    CellUpdate,
    CopyScheduleRequest,
    DateSelectionIn,
    FixedScheduleRequest,
    ScheduleConflictResponse,
    ScheduleSlotResponse,
    TimeSlotIn,
    VacationConflictResponse,
)
from tablepilot.services.booking import TimeInterval
from tablepilot.services.scheduling import (
    CellSlot,
    DateSelection,
    ScheduleCell,
    ScheduleConflictReport,
    ScheduleSlot,
    apply_cell,
    apply_copy,
    apply_fixed_schedule,
    check_fixed_schedule_conflicts,
    find_overlapping_slots,
)
from tablepilot.services.scheduling.data_loader import load_schedule_slots

router = APIRouter(prefix="/businesses/{business_id}/schedules", tags=["schedules"])

logger = logging.getLogger(__name__)


def _to_selection(payload: DateSelectionIn) -> DateSelection:
    try:
        return DateSelection(
            date_from=payload.date_from,
            date_to=payload.date_to,
            explicit_dates=payload.dates,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


def _to_intervals(time_slots: list[TimeSlotIn]) -> list[TimeInterval]:
    intervals = [TimeInterval(start=s.start_time, end=s.end_time) for s in time_slots]
    overlapping = find_overlapping_slots(intervals)
    if overlapping:
        first, second = overlapping[0]
        raise HTTPException(
            status_code=400,
            detail=f"Time slots {first + 1} and {second + 1} overlap",
        )
    return intervals


def _to_response(slots: list[ScheduleSlot]) -> list[ScheduleSlotResponse]:
    return [ScheduleSlotResponse.model_validate(s) for s in slots]


def _report_to_response(report: ScheduleConflictReport) -> ScheduleConflictResponse:
    return ScheduleConflictResponse(
        schedule_conflicts=report.schedule_conflicts,
        vacation_conflicts=[
            VacationConflictResponse(employee_name=c.employee_name, start=c.start, end=c.end)
            for c in report.vacation_conflicts
        ],
    )


@router.get("", response_model=List[ScheduleSlotResponse])
def list_schedules(
    start_date: date,
    end_date: date,
    employee_id: Optional[int] = None,
    business: Businesses = Depends(get_business),
    db: Session = Depends(get_db),
):
    if start_date > end_date:
        raise HTTPException(status_code=400, detail="start_date must be on or before end_date")

    if employee_id is not None:
        employee_ids = [get_business_employee(db, business.id, employee_id).id]
    else:
        employee_ids = [
            e.id for e in db.query(Employees.id).filter(Employees.business_id == business.id).all()
        ]
    return _to_response(load_schedule_slots(db, employee_ids, start_date, end_date))


@router.put("/{employee_id}/{cell_date}", response_model=List[ScheduleSlotResponse])
def update_cell(
    employee_id: int,
    cell_date: date,
    payload: CellUpdate,
    business: Businesses = Depends(get_business),
    db: Session = Depends(get_db),
):
    """Replace one employee's day: a day off, one or more shifts, or nothing"""
    employee = get_business_employee(db, business.id, employee_id)

    if payload.is_day_off:
        cell_slots = [CellSlot(is_day_off=True)]
    else:
        cell_slots = [
            CellSlot(is_day_off=False, start_time=i.start, end_time=i.end, order=index + 1)
            for index, i in enumerate(_to_intervals(payload.time_slots))
        ]

    try:
        slots = apply_cell(db, ScheduleCell(employee.id, cell_date), cell_slots)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _to_response(slots)


@router.post("/fixed/conflicts", response_model=ScheduleConflictResponse)
def check_fixed_schedule(
    payload: FixedScheduleRequest,
    business: Businesses = Depends(get_business),
    db: Session = Depends(get_db),
):
    """What a recurring schedule would overwrite or collide with; writes nothing"""
    check_employees_in_business(db, business.id, payload.employee_ids)
    selection = _to_selection(payload.selection)
    report = check_fixed_schedule_conflicts(db, payload.employee_ids, payload.days_of_week, selection)
    return _report_to_response(report)


@router.post("/fixed", response_model=List[ScheduleSlotResponse], status_code=status.HTTP_201_CREATED)
def create_fixed_schedule(
    payload: FixedScheduleRequest,
    business: Businesses = Depends(get_business),
    db: Session = Depends(get_db),
):
    """
    Create a recurring schedule.
    - existing rows on the written dates are replaced
    - vacation days are skipped
    - any conflict aborts with 409 and the report, unless force is set
    """
    check_employees_in_business(db, business.id, payload.employee_ids)
    selection = _to_selection(payload.selection)
    intervals = _to_intervals(payload.time_slots)

    if not payload.force:
        report = check_fixed_schedule_conflicts(db, payload.employee_ids, payload.days_of_week, selection)
        if report.has_conflicts:
            logger.info(f"Fixed schedule for business {business.id} refused: conflicts found")
            raise HTTPException(
                status_code=409,
                detail=_report_to_response(report).model_dump(),
            )

    slots = apply_fixed_schedule(db, payload.employee_ids, payload.days_of_week, intervals, selection)
    return _to_response(slots)


@router.post("/copy", response_model=List[ScheduleSlotResponse])
def copy_schedule(
    payload: CopyScheduleRequest,
    business: Businesses = Depends(get_business),
    db: Session = Depends(get_db),
):
    """Paste a day's slots over the selected cells, vacations included"""
    check_employees_in_business(db, business.id, sorted({c.employee_id for c in payload.target_cells}))

    source = [
        CellSlot(is_day_off=s.is_day_off, start_time=s.start_time, end_time=s.end_time, order=s.order)
        for s in payload.source_slots
    ]
    cells = [ScheduleCell(c.employee_id, c.date) for c in payload.target_cells]
    try:
        slots = apply_copy(db, source, cells)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _to_response(slots)
