from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from inventory_system.dependencies import get_db
from inventory_system.schemas.supplier import SupplierCreate, SupplierRead
from inventory_system.services.supplier_service import create_supplier, list_suppliers

router = APIRouter(prefix="/suppliers", tags=["Suppliers"])


@router.post("", response_model=SupplierRead, status_code=status.HTTP_201_CREATED)
def add_supplier(payload: SupplierCreate, db: Session = Depends(get_db)):
    return create_supplier(db, payload)


@router.get("", response_model=list[SupplierRead])
def get_suppliers(db: Session = Depends(get_db)):
    return list_suppliers(db)


__all__ = ["router"]
