from sqlalchemy import select
from sqlalchemy.orm import Session

from inventory_system.models.supplier import Supplier
from inventory_system.schemas.supplier import SupplierCreate
from inventory_system.services.common import commit_record, ensure_unique, fetch_all


def list_suppliers(db: Session) -> list[Supplier]:
    return fetch_all(db, select(Supplier).order_by(Supplier.name), "Failed to fetch suppliers.")


def create_supplier(db: Session, payload: SupplierCreate) -> Supplier:
    ensure_unique(db, "Supplier", Supplier.name, payload.name)
    supplier = Supplier(**payload.model_dump())
    db.add(supplier)
    return commit_record(db, "Supplier", supplier)


__all__ = ["create_supplier", "list_suppliers"]
