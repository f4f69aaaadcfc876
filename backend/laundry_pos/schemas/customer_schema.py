# backend/laundry_pos/schemas/customer_schema.py
from typing import Optional
from pydantic import BaseModel, EmailStr, Field
from beanie import PydanticObjectId

class CustomerBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    phone: str = Field("", max_length=20)
    address: str = Field("", max_length=255)
    email: Optional[EmailStr] = None

class CustomerCreate(CustomerBase):
    pass

class CustomerUpdate(CustomerBase):
    pass

class CustomerOut(CustomerBase):
    id: PydanticObjectId

    class Config:
        from_attributes = True

class CustomerNameOut(BaseModel):
    id: PydanticObjectId
    name: str
    phone: str = ""

    class Config:
        from_attributes = True

class CustomerContactOut(BaseModel):
    name: str
    phone: str = ""

    class Config:
        from_attributes = True
