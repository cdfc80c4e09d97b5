from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from inventory_system.database.unit_of_work import UnitOfWork
from inventory_system.dependencies import get_db, get_unit_of_work
from inventory_system.schemas.ledger import PurchaseCreate, PurchaseRead, StockTransactionResult
from inventory_system.services.ledger_service import list_purchases
from inventory_system.services.stock_service import record_purchase

router = APIRouter(prefix="/purchases", tags=["Purchases"])


@router.post("", response_model=StockTransactionResult, status_code=status.HTTP_201_CREATED)
def add_purchase(payload: PurchaseCreate, uow: UnitOfWork = Depends(get_unit_of_work)):
    return record_purchase(uow, payload)


@router.get("", response_model=list[PurchaseRead])
def get_purchases(db: Session = Depends(get_db)):
    return list_purchases(db)


__all__ = ["router"]
