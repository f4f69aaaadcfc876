# backend/laundry_pos/schemas/item_schema.py
from pydantic import BaseModel, Field
from beanie import PydanticObjectId

class ItemBase(BaseModel):
    item_name: str = Field(..., min_length=1, max_length=100)
    quantity: int = Field(0, description="Quantity on hand")
    price: float = Field(0.0, ge=0, description="Unit price")

class ItemCreate(ItemBase):
    pass

class ItemUpdate(ItemBase):
    pass

class ItemOut(ItemBase):
    id: PydanticObjectId

    class Config:
        from_attributes = True
