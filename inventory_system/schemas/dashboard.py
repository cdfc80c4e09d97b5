from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class DashboardSummary(BaseModel):
    total_products: int
    low_stock_items: int
    total_suppliers: int
    total_customers: int
    total_sales: int | float
    total_purchases: int | float

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
