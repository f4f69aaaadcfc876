# backend/laundry_pos/models/item_model.py
from beanie import Document
from pydantic import Field

class Item(Document):
    item_name: str = Field(..., min_length=1)
    # Stock on hand is whatever the client last wrote; it is not derived
    # from item transactions.
    quantity: int = 0
    price: float = 0.0

    def __repr__(self) -> str:
        return f"<Item {self.item_name} x{self.quantity}>"

    def __str__(self) -> str:
        return self.item_name

    class Settings:
        name = "items"
