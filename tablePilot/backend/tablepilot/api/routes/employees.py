from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from tablepilot.api.deps import get_db, get_business, get_business_employee
from tablepilot.db.models.businesses import Businesses
from tablepilot.db.models.employees import Employees
from tablepilot.schemas.employees import EmployeeCreate, EmployeeUpdate, EmployeeResponse

router = APIRouter(prefix="/businesses/{business_id}/employees", tags=["employees"])


@router.post("", response_model=EmployeeResponse, status_code=status.HTTP_201_CREATED)
def create_employee(
    payload: EmployeeCreate,
    business: Businesses = Depends(get_business),
    db: Session = Depends(get_db),
):
    employee = Employees(**payload.model_dump(), business_id=business.id)
    db.add(employee)
    db.commit()
    db.refresh(employee)
    return employee


@router.get("", response_model=List[EmployeeResponse])
def list_employees(
    include_inactive: bool = False,
    business: Businesses = Depends(get_business),
    db: Session = Depends(get_db),
):
    query = db.query(Employees).filter(Employees.business_id == business.id)
    if not include_inactive:
        query = query.filter(Employees.is_active == True)
    return query.order_by(Employees.name).all()


@router.get("/{employee_id}", response_model=EmployeeResponse)
def get_employee(
    employee_id: int,
    business: Businesses = Depends(get_business),
    db: Session = Depends(get_db),
):
    return get_business_employee(db, business.id, employee_id)


@router.put("/{employee_id}", response_model=EmployeeResponse)
def update_employee(
    employee_id: int,
    payload: EmployeeUpdate,
    business: Businesses = Depends(get_business),
    db: Session = Depends(get_db),
):
    employee = get_business_employee(db, business.id, employee_id)

    update_data = payload.model_dump(exclude_unset=True)
    for field, value in update_data.items():
        setattr(employee, field, value)

    db.commit()
    db.refresh(employee)
    return employee


@router.delete("/{employee_id}", status_code=status.HTTP_204_NO_CONTENT)
def deactivate_employee(
    employee_id: int,
    business: Businesses = Depends(get_business),
    db: Session = Depends(get_db),
):
    """Employees are deactivated, not deleted, so past schedules keep their owner"""
    employee = get_business_employee(db, business.id, employee_id)
    employee.is_active = False
    db.commit()
