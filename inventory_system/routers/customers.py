from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from inventory_system.dependencies import get_db
from inventory_system.schemas.customer import CustomerCreate, CustomerRead
from inventory_system.services.customer_service import create_customer, list_customers

router = APIRouter(prefix="/customers", tags=["Customers"])


@router.post("", response_model=CustomerRead, status_code=status.HTTP_201_CREATED)
def add_customer(payload: CustomerCreate, db: Session = Depends(get_db)):
    return create_customer(db, payload)


@router.get("", response_model=list[CustomerRead])
def get_customers(db: Session = Depends(get_db)):
    return list_customers(db)


__all__ = ["router"]
