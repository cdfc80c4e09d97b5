import importlib

from inventory_system.models.customer import Customer
from inventory_system.models.product import Product
from inventory_system.models.purchase import Purchase
from inventory_system.models.sale import Sale
from inventory_system.models.supplier import Supplier
from inventory_system.models.user import User


def import_all_models() -> None:
    for module_name in (
        "inventory_system.models.customer",
        "inventory_system.models.product",
        "inventory_system.models.purchase",
        "inventory_system.models.sale",
        "inventory_system.models.supplier",
        "inventory_system.models.user",
    ):
        importlib.import_module(module_name)


__all__ = [
    "Customer",
    "Product",
    "Purchase",
    "Sale",
    "Supplier",
    "User",
    "import_all_models",
]
