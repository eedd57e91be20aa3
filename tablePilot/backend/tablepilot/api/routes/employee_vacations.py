from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from tablepilot.api.deps import get_db, get_business, get_business_employee
from tablepilot.db.models.businesses import Businesses
from tablepilot.db.models.employee_vacations import EmployeeVacations
from tablepilot.schemas.employee_vacations import VacationCreate, VacationResponse

router = APIRouter(prefix="/businesses/{business_id}/employees/{employee_id}/vacations", tags=["vacations"])


@router.post("", response_model=VacationResponse, status_code=status.HTTP_201_CREATED)
def create_vacation(
    employee_id: int,
    payload: VacationCreate,
    business: Businesses = Depends(get_business),
    db: Session = Depends(get_db),
):
    employee = get_business_employee(db, business.id, employee_id)
    vacation = EmployeeVacations(**payload.model_dump(), employee_id=employee.id)
    db.add(vacation)
    db.commit()
    db.refresh(vacation)
    return vacation


@router.get("", response_model=List[VacationResponse])
def list_vacations(
    employee_id: int,
    business: Businesses = Depends(get_business),
    db: Session = Depends(get_db),
):
    employee = get_business_employee(db, business.id, employee_id)
    return db.query(EmployeeVacations).filter(
        EmployeeVacations.employee_id == employee.id
    ).order_by(EmployeeVacations.start_date).all()


@router.delete("/{vacation_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_vacation(
    employee_id: int,
    vacation_id: int,
    business: Businesses = Depends(get_business),
    db: Session = Depends(get_db),
):
    employee = get_business_employee(db, business.id, employee_id)
    vacation = db.query(EmployeeVacations).filter(
        EmployeeVacations.id == vacation_id,
        EmployeeVacations.employee_id == employee.id,
    ).first()
    if not vacation:
        raise HTTPException(status_code=404, detail="Vacation not found")

    db.delete(vacation)
    db.commit()
