# backend/laundry_pos/schemas/supplier_schema.py
from typing import List, Optional
from pydantic import BaseModel, EmailStr, Field
from beanie import PydanticObjectId
from laundry_pos.models.supplier_model import PurchasedItem, SupplierTransaction

class SupplierBase(BaseModel):
    supplier_name: str = Field(..., min_length=1, max_length=100)
    phone_number: str = Field("", max_length=20)
    address: str = Field("", max_length=255)
    email: Optional[EmailStr] = None
    supplied_products: List[str] = Field(default_factory=list)

class SupplierCreate(SupplierBase):
    pass

class SupplierUpdate(SupplierBase):
    pass

class SupplierOut(SupplierBase):
    id: PydanticObjectId
    transactions: List[SupplierTransaction] = Field(default_factory=list)

    class Config:
        from_attributes = True

class SupplierTransactionCreate(BaseModel):
    """
    Body of POST /supplier/transaction.
    transaction_id and date are always assigned by the server, so anything
    the client sends for them is ignored.
    """
    total_amount: float = Field(..., ge=0)
    payment_method: str = Field("cash", min_length=1)
    items_purchased: List[PurchasedItem] = Field(default_factory=list)
