# backend/laundry_pos/schemas/stock_transaction_schema.py
from datetime import datetime
from typing import Any, Dict, Optional
from pydantic import BaseModel, ConfigDict, Field

class StockTransactionBase(BaseModel):
    model_config = ConfigDict(extra="allow")

    item_name: str = ""
    quantity: float = 0
    description: Optional[str] = Field(None, max_length=1000)
    date: Optional[datetime] = None

class StockTransactionCreate(StockTransactionBase):
    pass

class StockTransactionUpdate(StockTransactionBase):
    pass

def stock_transaction_out(transaction: BaseModel) -> Dict[str, Any]:
    """Stored document as JSON, including any free-form fields it carries"""
    return transaction.model_dump(mode="json", exclude={"revision_id"})
