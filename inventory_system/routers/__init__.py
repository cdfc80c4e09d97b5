from inventory_system.routers.customers import router as customers_router
from inventory_system.routers.dashboard import router as dashboard_router
from inventory_system.routers.health import router as health_router
from inventory_system.routers.products import router as products_router
from inventory_system.routers.purchases import router as purchases_router
from inventory_system.routers.sales import router as sales_router
from inventory_system.routers.suppliers import router as suppliers_router

__all__ = [
    "customers_router",
    "dashboard_router",
    "health_router",
    "products_router",
    "purchases_router",
    "sales_router",
    "suppliers_router",
]
