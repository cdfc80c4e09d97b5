from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from inventory_system.dependencies import get_db
from inventory_system.schemas.common import MessageResponse
from inventory_system.schemas.product import ProductCreate, ProductRead, ProductUpdate
from inventory_system.services.product_service import (
    create_product,
    delete_product,
    list_products,
    update_product,
)

router = APIRouter(prefix="/products", tags=["Products"])


@router.post("", response_model=ProductRead, status_code=status.HTTP_201_CREATED)
def add_product(payload: ProductCreate, db: Session = Depends(get_db)):
    return create_product(db, payload)


@router.get("", response_model=list[ProductRead])
def get_products(db: Session = Depends(get_db)):
    return list_products(db)


@router.put("/{product_id}", response_model=ProductRead)
def edit_product(product_id: str, payload: ProductUpdate, db: Session = Depends(get_db)):
    return update_product(db, product_id, payload)


@router.delete("/{product_id}", response_model=MessageResponse)
def remove_product(product_id: str, db: Session = Depends(get_db)):
    delete_product(db, product_id)
    return MessageResponse(message="Product successfully deleted.")


__all__ = ["router"]
