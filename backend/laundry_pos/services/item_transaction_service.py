# backend/laundry_pos/services/item_transaction_service.py
from typing import Any, Dict, List
from datetime import datetime
from pydantic import BaseModel
from laundry_pos.models.item_transaction_model import ItemTransaction, ItemTransactionSummary
from laundry_pos.schemas.item_transaction_schema import ItemTransactionCreate
from laundry_pos.services.base_service import ResourceService

class ItemTransactionService(ResourceService[ItemTransaction]):
    document_model = ItemTransaction
    update_fields = ("item_id", "item_name", "date", "transaction_type", "quantity", "stock_after")

    @classmethod
    def build_document(cls, data: ItemTransactionCreate) -> ItemTransaction:
        # The movement date is always the time it was recorded
        return ItemTransaction(**data.model_dump(), date=datetime.utcnow())

    @staticmethod
    async def get_summaries() -> List[ItemTransactionSummary]:
        return await ItemTransaction.find_all().project(ItemTransactionSummary).to_list()

    @classmethod
    def update_values(cls, data: BaseModel) -> Dict[str, Any]:
        values = super().update_values(data)
        if values.get("date") is None:
            values.pop("date", None)
        return values
