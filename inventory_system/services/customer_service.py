from sqlalchemy import select
from sqlalchemy.orm import Session

from inventory_system.models.customer import Customer
from inventory_system.schemas.customer import CustomerCreate
from inventory_system.services.common import commit_record, ensure_unique, fetch_all


def list_customers(db: Session) -> list[Customer]:
    return fetch_all(db, select(Customer).order_by(Customer.name), "Failed to fetch customers.")


def create_customer(db: Session, payload: CustomerCreate) -> Customer:
    ensure_unique(db, "Customer", Customer.email, payload.email)
    customer = Customer(**payload.model_dump())
    db.add(customer)
    return commit_record(db, "Customer", customer)


__all__ = ["create_customer", "list_customers"]
