from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from inventory_system.schemas.common import EntityRef


def _coerce_quantity(value):
    """Truncate to a whole number of units; the range is checked on write."""
    if isinstance(value, bool):
        raise ValueError("quantity must be a number")
    if isinstance(value, float):
        return int(value)
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            try:
                return int(float(text))
            except ValueError:
                raise ValueError("quantity must be a number") from None
    return value


class PurchaseCreate(BaseModel):
    product_id: str = Field(min_length=1)
    quantity: int
    supplier_id: str = Field(min_length=1)
    total_cost: float

    @field_validator("quantity", mode="before")
    @classmethod
    def coerce_quantity(cls, v):
        return _coerce_quantity(v)


class SaleCreate(BaseModel):
    product_id: str = Field(min_length=1)
    quantity: int
    customer_id: str = Field(min_length=1)
    total_price: float

    @field_validator("quantity", mode="before")
    @classmethod
    def coerce_quantity(cls, v):
        return _coerce_quantity(v)


class PurchaseRead(BaseModel):
    id: str
    date: datetime
    quantity: int
    total_cost: float
    product_id: str
    supplier_id: str
    product: Optional[EntityRef] = None
    supplier: Optional[EntityRef] = None


class SaleRead(BaseModel):
    id: str
    date: datetime
    quantity: int
    total_price: float
    product_id: str
    customer_id: str
    product: Optional[EntityRef] = None
    customer: Optional[EntityRef] = None


class StockTransactionResult(BaseModel):
    message: str
    id: str
    product_id: str
    quantity: int
