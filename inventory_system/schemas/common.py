from pydantic import BaseModel, ConfigDict


class MessageResponse(BaseModel):
    message: str


class EntityRef(BaseModel):
    id: str
    name: str

    model_config = ConfigDict(from_attributes=True)


def blank_to_none(value):
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    return value
