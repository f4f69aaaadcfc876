# backend/laundry_pos/schemas/item_transaction_schema.py
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field
from beanie import PydanticObjectId
from laundry_pos.models.item_transaction_model import ItemTransactionType

class ItemTransactionBase(BaseModel):
    item_id: str = Field(..., min_length=1)
    item_name: str = ""
    transaction_type: ItemTransactionType
    quantity: int
    stock_after: int = 0

class ItemTransactionCreate(ItemTransactionBase):
    pass

class ItemTransactionUpdate(ItemTransactionBase):
    date: Optional[datetime] = None

class ItemTransactionOut(ItemTransactionBase):
    id: PydanticObjectId
    date: datetime

    class Config:
        from_attributes = True

class ItemTransactionSummaryOut(BaseModel):
    id: PydanticObjectId
    item_id: str
    item_name: str = ""

    class Config:
        from_attributes = True
