from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from inventory_system.core.constants import DEFAULT_CATEGORY


class ProductBase(BaseModel):
    name: str = Field(min_length=1)
    category: str = DEFAULT_CATEGORY
    price: float = Field(ge=0)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("name is required")
        return v


class ProductCreate(ProductBase):
    quantity: int = Field(0, ge=0)


class ProductUpdate(BaseModel):
    # quantity is left out on purpose: stock only moves through purchases and sales.
    name: Optional[str] = Field(None, min_length=1)
    category: Optional[str] = None
    price: Optional[float] = Field(None, ge=0)


class ProductRead(ProductBase):
    id: str
    quantity: int

    model_config = ConfigDict(from_attributes=True)
