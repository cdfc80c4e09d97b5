import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from inventory_system.core.errors import PersistenceError
from inventory_system.models.customer import Customer
from inventory_system.models.product import Product
from inventory_system.models.purchase import Purchase
from inventory_system.models.sale import Sale
from inventory_system.models.supplier import Supplier
from inventory_system.schemas.common import EntityRef
from inventory_system.schemas.ledger import PurchaseRead, SaleRead

logger = logging.getLogger(__name__)


def _ref(entity_id, name):
    if name is None:
        return None
    return EntityRef(id=entity_id, name=name)


def list_purchases(db: Session) -> list[PurchaseRead]:
    stmt = (
        select(
            Purchase,
            Product.name.label("product_name"),
            Supplier.name.label("supplier_name"),
        )
        .outerjoin(Product, Product.id == Purchase.product_id)
        .outerjoin(Supplier, Supplier.id == Purchase.supplier_id)
        .order_by(Purchase.date.desc())
    )
    try:
        rows = db.execute(stmt).all()
    except SQLAlchemyError as exc:
        logger.exception("Failed to fetch purchase records")
        raise PersistenceError("Failed to fetch purchase records.", str(exc)) from exc

    results = []
    for row in rows:
        purchase = row.Purchase
        results.append(
            PurchaseRead(
                id=purchase.id,
                date=purchase.date,
                quantity=purchase.quantity,
                total_cost=purchase.total_cost,
                product_id=purchase.product_id,
                supplier_id=purchase.supplier_id,
                product=_ref(purchase.product_id, row.product_name),
                supplier=_ref(purchase.supplier_id, row.supplier_name),
            )
        )
    return results


def list_sales(db: Session) -> list[SaleRead]:
    stmt = (
        select(
            Sale,
            Product.name.label("product_name"),
            Customer.name.label("customer_name"),
        )
        .outerjoin(Product, Product.id == Sale.product_id)
        .outerjoin(Customer, Customer.id == Sale.customer_id)
        .order_by(Sale.date.desc())
    )
    try:
        rows = db.execute(stmt).all()
    except SQLAlchemyError as exc:
        logger.exception("Failed to fetch sales records")
        raise PersistenceError("Failed to fetch sales records.", str(exc)) from exc

    results = []
    for row in rows:
        sale = row.Sale
        results.append(
            SaleRead(
                id=sale.id,
                date=sale.date,
                quantity=sale.quantity,
                total_price=sale.total_price,
                product_id=sale.product_id,
                customer_id=sale.customer_id,
                product=_ref(sale.product_id, row.product_name),
                customer=_ref(sale.customer_id, row.customer_name),
            )
        )
    return results


__all__ = ["list_purchases", "list_sales"]
