"""Purchases and sales: the only writes that move stock.

Both run inside one unit of work that locks the product row, applies a
guarded ``UPDATE`` to its quantity, and inserts the ledger entry. Either
both land or neither does.
"""

import logging
from typing import Callable

from sqlalchemy import update

from inventory_system.core.errors import (
    InsufficientStockError,
    InventoryError,
    NotFoundError,
    TransactionFailure,
)
from inventory_system.database.unit_of_work import UnitOfWork
from inventory_system.models.product import Product
from inventory_system.models.purchase import Purchase
from inventory_system.models.sale import Sale
from inventory_system.schemas.ledger import PurchaseCreate, SaleCreate, StockTransactionResult

logger = logging.getLogger(__name__)

PURCHASE_RECORDED = "Purchase recorded and stock updated successfully."
PURCHASE_FAILED = "Failed to record purchase."
SALE_RECORDED = "Sale recorded and stock updated successfully."
SALE_FAILED = "Failed to record sale."


def _apply_stock_change(session, product_id: str, change: int, *, minimum_on_hand: int | None) -> bool:
    stmt = update(Product).where(Product.id == product_id)
    if minimum_on_hand is not None:
        stmt = stmt.where(Product.quantity >= minimum_on_hand)
    stmt = stmt.values(quantity=Product.quantity + change).execution_options(
        synchronize_session=False
    )
    return session.execute(stmt).rowcount == 1


def _log_context(result: StockTransactionResult, change: int) -> dict:
    return {
        "product_id": result.product_id,
        "entry_id": result.id,
        "change": change,
        "on_hand": result.quantity,
    }


def _record_stock_movement(
    uow: UnitOfWork,
    *,
    product_id: str,
    change: int,
    build_entry: Callable[[], Purchase | Sale],
    requires_stock: bool,
    missing_product_status: int = 404,
    success_message: str,
    failure_message: str,
) -> StockTransactionResult:
    try:
        with uow.scope() as session:
            product = session.get(Product, product_id, with_for_update=True)
            if product is None:
                raise NotFoundError("Product", status_code=missing_product_status)

            needed = -change if requires_stock else None
            if needed is not None and product.quantity < needed:
                raise InsufficientStockError(product.quantity)

            if not _apply_stock_change(session, product_id, change, minimum_on_hand=needed):
                # Another writer moved the stock after our read.
                session.refresh(product)
                raise InsufficientStockError(product.quantity)

            entry = build_entry()
            session.add(entry)
            session.flush()
            session.refresh(product)
            result = StockTransactionResult(
                message=success_message,
                id=entry.id,
                product_id=product.id,
                quantity=product.quantity,
            )
    except InventoryError:
        raise
    except Exception as exc:
        logger.exception(
            "%s product=%s change=%s",
            failure_message,
            product_id,
            change,
            extra={"product_id": product_id, "change": change},
        )
        raise TransactionFailure(failure_message, str(exc)) from exc
    return result


def record_purchase(uow: UnitOfWork, payload: PurchaseCreate) -> StockTransactionResult:
    quantity = int(payload.quantity)
    result = _record_stock_movement(
        uow,
        product_id=payload.product_id,
        change=quantity,
        build_entry=lambda: Purchase(
            product_id=payload.product_id,
            supplier_id=payload.supplier_id,
            quantity=quantity,
            total_cost=payload.total_cost,
        ),
        requires_stock=False,
        success_message=PURCHASE_RECORDED,
        failure_message=PURCHASE_FAILED,
    )
    logger.info(
        "Recorded purchase %s: product %s +%d (on hand %d)",
        result.id,
        result.product_id,
        quantity,
        result.quantity,
        extra=_log_context(result, quantity),
    )
    return result


def record_sale(uow: UnitOfWork, payload: SaleCreate) -> StockTransactionResult:
    quantity = int(payload.quantity)
    try:
        result = _record_stock_movement(
            uow,
            product_id=payload.product_id,
            change=-quantity,
            build_entry=lambda: Sale(
                product_id=payload.product_id,
                customer_id=payload.customer_id,
                quantity=quantity,
                total_price=payload.total_price,
            ),
            requires_stock=True,
            missing_product_status=400,
            success_message=SALE_RECORDED,
            failure_message=SALE_FAILED,
        )
    except InsufficientStockError as exc:
        logger.warning(
            "Rejected sale of %d units of product %s: %d available",
            quantity,
            payload.product_id,
            exc.available,
            extra={
                "product_id": payload.product_id,
                "change": -quantity,
                "on_hand": exc.available,
            },
        )
        raise
    logger.info(
        "Recorded sale %s: product %s -%d (on hand %d)",
        result.id,
        result.product_id,
        quantity,
        result.quantity,
        extra=_log_context(result, -quantity),
    )
    return result


__all__ = [
    "PURCHASE_FAILED",
    "PURCHASE_RECORDED",
    "SALE_FAILED",
    "SALE_RECORDED",
    "record_purchase",
    "record_sale",
]
