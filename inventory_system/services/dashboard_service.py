import logging

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from inventory_system.core.constants import LOW_STOCK_THRESHOLD
from inventory_system.core.errors import PersistenceError
from inventory_system.models.customer import Customer
from inventory_system.models.product import Product
from inventory_system.models.purchase import Purchase
from inventory_system.models.sale import Sale
from inventory_system.models.supplier import Supplier
from inventory_system.schemas.dashboard import DashboardSummary

logger = logging.getLogger(__name__)


def _count(db: Session, model, *criteria) -> int:
    stmt = select(func.count()).select_from(model)
    if criteria:
        stmt = stmt.where(*criteria)
    return int(db.execute(stmt).scalar_one())


def _total(db: Session, column) -> int | float:
    total = float(db.execute(select(func.coalesce(func.sum(column), 0))).scalar_one())
    # 10.0 + 15.0 reads back as 25, not 25.0
    return int(total) if total.is_integer() else total


def dashboard_summary(db: Session) -> DashboardSummary:
    try:
        return DashboardSummary(
            total_products=_count(db, Product),
            low_stock_items=_count(db, Product, Product.quantity < LOW_STOCK_THRESHOLD),
            total_suppliers=_count(db, Supplier),
            total_customers=_count(db, Customer),
            total_sales=_total(db, Sale.total_price),
            total_purchases=_total(db, Purchase.total_cost),
        )
    except SQLAlchemyError as exc:
        logger.exception("Dashboard aggregation failed")
        raise PersistenceError("Error fetching dashboard data.", str(exc)) from exc


__all__ = ["dashboard_summary"]
