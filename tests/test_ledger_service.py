import unittest
from datetime import datetime, timedelta, timezone

from inventory_system.database import Database
from inventory_system.models import Customer, Product, Purchase, Sale, Supplier
from inventory_system.services.ledger_service import list_purchases, list_sales


class LedgerServiceTest(unittest.TestCase):
    def setUp(self):
        self.database = Database("sqlite://")
        self.database.create_schema()
        self.addCleanup(self.database.dispose)
        self.db = self.database.session()
        self.addCleanup(self.db.close)

        now = datetime.now(timezone.utc)
        self.db.add_all(
            [
                Product(id="p1", name="Widget", price=5.0, quantity=3),
                Supplier(id="s1", name="Acme"),
                Customer(id="c1", name="Jane"),
                Purchase(
                    id="old", product_id="p1", supplier_id="s1",
                    quantity=1, total_cost=4.0, date=now - timedelta(days=2),
                ),
                Purchase(
                    id="new", product_id="p1", supplier_id="s1",
                    quantity=2, total_cost=8.0, date=now,
                ),
                Purchase(
                    id="orphan", product_id="gone", supplier_id="s1",
                    quantity=1, total_cost=1.0, date=now - timedelta(days=1),
                ),
                Sale(id="sale-1", product_id="p1", customer_id="c1", quantity=1, total_price=5.0),
            ]
        )
        self.db.commit()

    def test_purchases_newest_first_with_names(self):
        purchases = list_purchases(self.db)

        self.assertEqual([p.id for p in purchases], ["new", "orphan", "old"])
        self.assertEqual(purchases[0].product.name, "Widget")
        self.assertEqual(purchases[0].supplier.name, "Acme")

    def test_orphaned_reference_resolves_to_none(self):
        orphan = [p for p in list_purchases(self.db) if p.id == "orphan"][0]

        self.assertIsNone(orphan.product)
        self.assertEqual(orphan.product_id, "gone")
        self.assertEqual(orphan.supplier.name, "Acme")

    def test_sales_resolve_customer(self):
        sales = list_sales(self.db)

        self.assertEqual(len(sales), 1)
        self.assertEqual(sales[0].product.name, "Widget")
        self.assertEqual(sales[0].customer.id, "c1")
        self.assertEqual(sales[0].customer.name, "Jane")


if __name__ == "__main__":
    unittest.main()
