# backend/laundry_pos/models/customer_model.py
from typing import Optional
from beanie import Document, PydanticObjectId
from pydantic import BaseModel, Field

class Customer(Document):
    name: str
    phone: str = ""
    address: str = ""
    email: Optional[str] = None

    def __repr__(self) -> str:
        return f"<Customer {self.name}>"

    def __str__(self) -> str:
        return self.name

    class Settings:
        name = "customers"

class CustomerName(BaseModel):
    id: PydanticObjectId = Field(alias="_id")
    name: str
    phone: str = ""

    class Settings:
        projection = {"_id": 1, "name": 1, "phone": 1}
