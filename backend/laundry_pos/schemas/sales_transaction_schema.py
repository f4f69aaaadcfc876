# backend/laundry_pos/schemas/sales_transaction_schema.py
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field
from beanie import PydanticObjectId

class SalesTransactionBase(BaseModel):
    customer_name: str = Field(..., min_length=1, max_length=100)
    phone_number: str = Field("", max_length=20)
    service_type: str = Field("", max_length=100)
    weight_per_kg: float = Field(0, ge=0)
    total_price: float = Field(0, ge=0)

class SalesTransactionCreate(SalesTransactionBase):
    payment_method: str = "cash"
    transaction_date: Optional[datetime] = Field(None, description="Defaults to the time of the request")

class SalesTransactionUpdate(SalesTransactionBase):
    pass

class SalesTransactionOut(SalesTransactionBase):
    id: PydanticObjectId
    payment_method: str
    transaction_date: datetime
    formatted_date: str

    class Config:
        from_attributes = True
