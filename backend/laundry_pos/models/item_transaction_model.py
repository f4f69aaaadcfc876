# backend/laundry_pos/models/item_transaction_model.py
from datetime import datetime
from beanie import Document, PydanticObjectId
from pydantic import BaseModel, Field
from enum import Enum

class ItemTransactionType(str, Enum):
    USAGE = "usage"          # Stock consumed by the laundry
    PURCHASE = "purchase"    # Stock bought in

class ItemTransaction(Document):
    item_id: str
    item_name: str = ""
    date: datetime = Field(default_factory=datetime.utcnow)
    transaction_type: ItemTransactionType
    quantity: int
    stock_after: int = Field(0, description="Stock level reported by the client after this movement")

    def __repr__(self) -> str:
        return f"<ItemTransaction {self.transaction_type.value} {self.item_name} x{self.quantity}>"

    class Settings:
        name = "item_transactions"

class ItemTransactionSummary(BaseModel):
    id: PydanticObjectId = Field(alias="_id")
    item_id: str
    item_name: str = ""

    class Settings:
        projection = {"_id": 1, "item_id": 1, "item_name": 1}
