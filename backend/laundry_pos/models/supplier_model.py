# backend/laundry_pos/models/supplier_model.py
from typing import List, Optional
from datetime import datetime
from beanie import Document
from bson import ObjectId
from pydantic import BaseModel, Field

class PurchasedItem(BaseModel):
    item_name: str
    quantity: int = Field(..., ge=0)
    unit_price: float = Field(..., ge=0)
    total_price: float = Field(..., ge=0)

class SupplierTransaction(BaseModel):
    """Purchase from a supplier, stored inside the supplier document."""
    transaction_id: str = Field(default_factory=lambda: str(ObjectId()))
    total_amount: float = Field(..., ge=0)
    payment_method: str = "cash"
    date: datetime = Field(default_factory=datetime.utcnow)
    items_purchased: List[PurchasedItem] = Field(default_factory=list)

class Supplier(Document):
    supplier_name: str
    phone_number: str = ""
    address: str = ""
    email: Optional[str] = None
    supplied_products: List[str] = Field(default_factory=list)
    # Append only through SupplierService.add_transaction
    transactions: List[SupplierTransaction] = Field(default_factory=list)

    def __repr__(self) -> str:
        return f"<Supplier {self.supplier_name} - {len(self.transactions)} transactions>"

    def __str__(self) -> str:
        return self.supplier_name

    class Settings:
        name = "suppliers"
