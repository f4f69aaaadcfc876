# backend/laundry_pos/models/sales_transaction_model.py
from datetime import datetime
from beanie import Document
from pydantic import Field
from laundry_pos.utils.date_utils import format_display_date

class SalesTransaction(Document):
    customer_name: str
    phone_number: str = ""
    service_type: str = ""
    weight_per_kg: float = Field(0, ge=0)
    total_price: float = Field(0, ge=0)
    payment_method: str = "cash"
    transaction_date: datetime = Field(default_factory=datetime.utcnow)

    def __repr__(self) -> str:
        return f"<SalesTransaction {self.customer_name} - {self.total_price}>"

    def __str__(self) -> str:
        return f"{self.service_type} - {self.customer_name}"

    @property
    def formatted_date(self) -> str:
        """Display date (DD/MM/YYYY), computed on read and never stored"""
        return format_display_date(self.transaction_date)

    class Settings:
        name = "transactions"
