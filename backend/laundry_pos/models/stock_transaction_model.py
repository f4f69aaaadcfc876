# backend/laundry_pos/models/stock_transaction_model.py
from typing import Optional
from datetime import datetime
from beanie import Document
from pydantic import ConfigDict

class StockTransaction(Document):
    # Free-form record: fields beyond these are stored as sent.
    model_config = ConfigDict(extra="allow")

    item_name: str = ""
    quantity: float = 0
    description: Optional[str] = None
    date: Optional[datetime] = None

    class Settings:
        name = "stock_transactions"
