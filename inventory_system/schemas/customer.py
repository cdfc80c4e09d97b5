from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from inventory_system.schemas.common import blank_to_none


class CustomerCreate(BaseModel):
    name: str = Field(min_length=1)
    phone: Optional[str] = None
    email: Optional[str] = None

    @field_validator("phone", "email", mode="before")
    @classmethod
    def empty_as_missing(cls, v):
        return blank_to_none(v)


class CustomerRead(CustomerCreate):
    id: str

    model_config = ConfigDict(from_attributes=True)
