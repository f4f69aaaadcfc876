# backend/laundry_pos/services/stock_transaction_service.py
from pydantic import BaseModel
from laundry_pos.models.stock_transaction_model import StockTransaction
from laundry_pos.services.base_service import ResourceService

RESERVED_FIELDS = {"id", "_id", "revision_id"}

class StockTransactionService(ResourceService[StockTransaction]):
    document_model = StockTransaction
    # Free-form records: an update writes every field it carries
    update_fields = None

    @classmethod
    def build_document(cls, data: BaseModel) -> StockTransaction:
        # Identifiers are always generated by the database
        return StockTransaction(**data.model_dump(exclude=RESERVED_FIELDS, exclude_none=True))
