import argparse
import logging

from sqlalchemy import delete, select

from inventory_system.config import get_settings
from inventory_system.core.logging import setup_logging
from inventory_system.database import Database
from inventory_system.models import Customer, Product, Purchase, Sale, Supplier
from inventory_system.schemas.ledger import PurchaseCreate, SaleCreate
from inventory_system.services.stock_service import record_purchase, record_sale

logger = logging.getLogger(__name__)


def parse_args():
    parser = argparse.ArgumentParser(description="Seed sample inventory data.")
    parser.add_argument(
        "--reset",
        action="store_true",
        help="Clear existing data before seeding.",
    )
    return parser.parse_args()


def main():
    setup_logging()
    args = parse_args()

    database = Database(get_settings().DATABASE_URL)
    database.create_schema()

    db = database.session()
    try:
        if args.reset:
            for model in (Sale, Purchase, Product, Customer, Supplier):
                db.execute(delete(model))
            db.commit()

        has_product = db.execute(select(Product.id).limit(1)).first()
        if has_product:
            print("Seed skipped: products already exist.")
            return

        products = [
            Product(name="Widget", category="Hardware", quantity=0, price=5.0),
            Product(name="Gadget", category="Hardware", quantity=12, price=18.5),
            Product(name="Sprocket", price=2.25),
        ]
        supplier = Supplier(name="Acme Supply", contact_number="555-0100", email="orders@acme.test")
        customer = Customer(name="Jane Buyer", phone="555-0199", email="jane@example.test")
        db.add_all(products + [supplier, customer])
        db.commit()
        widget_id, supplier_id, customer_id = products[0].id, supplier.id, customer.id
    finally:
        db.close()

    uow = database.unit_of_work()
    record_purchase(
        uow,
        PurchaseCreate(product_id=widget_id, quantity=20, supplier_id=supplier_id, total_cost=80),
    )
    record_sale(
        uow,
        SaleCreate(product_id=widget_id, quantity=5, customer_id=customer_id, total_price=25),
    )
    database.dispose()
    print("Seed data created.")


if __name__ == "__main__":
    main()
