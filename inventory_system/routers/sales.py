from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from inventory_system.database.unit_of_work import UnitOfWork
from inventory_system.dependencies import get_db, get_unit_of_work
from inventory_system.schemas.ledger import SaleCreate, SaleRead, StockTransactionResult
from inventory_system.services.ledger_service import list_sales
from inventory_system.services.stock_service import record_sale

router = APIRouter(prefix="/sales", tags=["Sales"])


@router.post("", response_model=StockTransactionResult, status_code=status.HTTP_201_CREATED)
def add_sale(payload: SaleCreate, uow: UnitOfWork = Depends(get_unit_of_work)):
    return record_sale(uow, payload)


@router.get("", response_model=list[SaleRead])
def get_sales(db: Session = Depends(get_db)):
    return list_sales(db)


__all__ = ["router"]
