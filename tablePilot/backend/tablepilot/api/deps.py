from typing import Generator
from fastapi import Depends, HTTPException, status
from sqlalchemy.orm import Session

from tablepilot.db.database import SessionLocal
from tablepilot.db.models.businesses import Businesses
from tablepilot.db.models.employees import Employees


def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_business(
    business_id: int,
    db: Session = Depends(get_db),
) -> Businesses:
    """Business from the path parameter, 404 if missing"""
    business = db.query(Businesses).filter(Businesses.id == business_id).first()
    if not business:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Business not found")
    return business


def get_business_employee(db: Session, business_id: int, employee_id: int) -> Employees:
    employee = db.query(Employees).filter(
        Employees.id == employee_id,
        Employees.business_id == business_id,
    ).first()
    if not employee:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Employee not found")
    return employee


def check_employees_in_business(db: Session, business_id: int, employee_ids: list[int]) -> None:
    """Every id must belong to the business"""
    found = {
        e.id for e in db.query(Employees.id).filter(
            Employees.business_id == business_id,
            Employees.id.in_(employee_ids),
        ).all()
    }
    missing = sorted(set(employee_ids) - found)
    if missing:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Employees not found: {missing}")
