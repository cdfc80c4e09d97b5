import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from inventory_system.core.errors import NotFoundError, PersistenceError, ValidationError
from inventory_system.models.product import Product
from inventory_system.schemas.product import ProductCreate, ProductUpdate
from inventory_system.services.common import commit_record, ensure_unique, fetch_all

logger = logging.getLogger(__name__)

_UPDATABLE_FIELDS = ("name", "category", "price")


def list_products(db: Session) -> list[Product]:
    return fetch_all(db, select(Product).order_by(Product.name), "Failed to fetch products.")


def get_product(db: Session, product_id: str) -> Product:
    product = db.get(Product, product_id)
    if product is None:
        raise NotFoundError("Product")
    return product


def create_product(db: Session, payload: ProductCreate) -> Product:
    ensure_unique(db, "Product", Product.name, payload.name)
    product = Product(**payload.model_dump())
    db.add(product)
    commit_record(db, "Product", product)
    logger.info("Created product %s (%s)", product.id, product.name)
    return product


def update_product(db: Session, product_id: str, payload: ProductUpdate) -> Product:
    product = get_product(db, product_id)
    changes = {
        key: value
        for key, value in payload.model_dump(exclude_unset=True).items()
        if key in _UPDATABLE_FIELDS and value is not None
    }
    if "name" in changes:
        changes["name"] = changes["name"].strip()
        if not changes["name"]:
            raise ValidationError("Product validation failed: name is required.")
        ensure_unique(db, "Product", Product.name, changes["name"], exclude_id=product.id)
    for key, value in changes.items():
        setattr(product, key, value)
    return commit_record(db, "Product", product)


def delete_product(db: Session, product_id: str) -> None:
    product = get_product(db, product_id)
    db.delete(product)
    try:
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        raise PersistenceError("Failed to delete product.", str(exc)) from exc
    logger.info("Deleted product %s", product_id)


__all__ = [
    "create_product",
    "delete_product",
    "get_product",
    "list_products",
    "update_product",
]
