from inventory_system.services.customer_service import create_customer, list_customers
from inventory_system.services.dashboard_service import dashboard_summary
from inventory_system.services.ledger_service import list_purchases, list_sales
from inventory_system.services.product_service import (
    create_product,
    delete_product,
    list_products,
    update_product,
)
from inventory_system.services.stock_service import record_purchase, record_sale
from inventory_system.services.supplier_service import create_supplier, list_suppliers

__all__ = [
    "create_customer",
    "create_product",
    "create_supplier",
    "dashboard_summary",
    "delete_product",
    "list_customers",
    "list_products",
    "list_purchases",
    "list_sales",
    "list_suppliers",
    "record_purchase",
    "record_sale",
    "update_product",
]
