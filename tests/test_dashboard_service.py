import unittest

from inventory_system.core.errors import PersistenceError
from inventory_system.database import Database
from inventory_system.models import Customer, Product, Purchase, Sale, Supplier
from inventory_system.services.dashboard_service import dashboard_summary


class DashboardServiceTest(unittest.TestCase):
    def setUp(self):
        self.database = Database("sqlite://")
        self.database.create_schema()
        self.addCleanup(self.database.dispose)
        self.db = self.database.session()
        self.addCleanup(self.db.close)

    def test_empty_store_sums_to_zero(self):
        summary = dashboard_summary(self.db)

        self.assertEqual(summary.total_products, 0)
        self.assertEqual(summary.low_stock_items, 0)
        self.assertEqual(summary.total_sales, 0)
        self.assertEqual(summary.total_purchases, 0)

    def test_totals_and_counts(self):
        self.db.add_all(
            [
                Product(id="p1", name="Widget", price=5.0, quantity=9),
                Product(id="p2", name="Gadget", price=5.0, quantity=10),
                Product(id="p3", name="Sprocket", price=5.0, quantity=0),
                Supplier(id="s1", name="Acme"),
                Customer(id="c1", name="Jane"),
                Customer(id="c2", name="John", email="john@example.test"),
                Sale(product_id="p1", customer_id="c1", quantity=1, total_price=10.0),
                Sale(product_id="p1", customer_id="c2", quantity=2, total_price=15.0),
                Purchase(product_id="p2", supplier_id="s1", quantity=4, total_cost=12.5),
            ]
        )
        self.db.commit()

        summary = dashboard_summary(self.db)

        self.assertEqual(summary.total_products, 3)
        # quantity 10 sits on the threshold and is not low stock
        self.assertEqual(summary.low_stock_items, 2)
        self.assertEqual(summary.total_suppliers, 1)
        self.assertEqual(summary.total_customers, 2)
        self.assertEqual(summary.total_sales, 25.0)
        self.assertIsInstance(summary.total_sales, int)
        self.assertEqual(summary.total_purchases, 12.5)

    def test_failing_query_fails_the_summary(self):
        Purchase.__table__.drop(self.database.engine)

        with self.assertRaises(PersistenceError) as ctx:
            dashboard_summary(self.db)

        self.assertEqual(ctx.exception.status_code, 500)
        self.assertEqual(ctx.exception.message, "Error fetching dashboard data.")
        self.assertIn("purchases", ctx.exception.error)

    def test_serializes_with_camel_case_keys(self):
        payload = dashboard_summary(self.db).model_dump(by_alias=True)
        self.assertEqual(
            set(payload),
            {
                "totalProducts",
                "lowStockItems",
                "totalSuppliers",
                "totalCustomers",
                "totalSales",
                "totalPurchases",
            },
        )


if __name__ == "__main__":
    unittest.main()
