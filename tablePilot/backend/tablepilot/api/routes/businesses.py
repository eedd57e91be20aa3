from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from tablepilot.api.deps import get_db, get_business
from tablepilot.db.models.businesses import Businesses
from tablepilot.schemas.businesses import BusinessCreate, BusinessUpdate, BusinessResponse

router = APIRouter(prefix="/businesses", tags=["businesses"])


@router.post("", response_model=BusinessResponse, status_code=status.HTTP_201_CREATED)
def create_business(payload: BusinessCreate, db: Session = Depends(get_db)):
    business = Businesses(**payload.model_dump())
    db.add(business)
    db.commit()
    db.refresh(business)
    return business


@router.get("", response_model=List[BusinessResponse])
def list_businesses(
    skip: int = 0,
    limit: int = 100,
    db: Session = Depends(get_db),
):
    return db.query(Businesses).order_by(Businesses.name).offset(skip).limit(limit).all()


@router.get("/{business_id}", response_model=BusinessResponse)
def get_business_detail(business: Businesses = Depends(get_business)):
    return business


@router.put("/{business_id}", response_model=BusinessResponse)
def update_business(
    payload: BusinessUpdate,
    business: Businesses = Depends(get_business),
    db: Session = Depends(get_db),
):
    update_data = payload.model_dump(exclude_unset=True)
    for field, value in update_data.items():
        setattr(business, field, value)

    db.commit()
    db.refresh(business)
    return business
