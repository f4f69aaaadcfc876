# backend/laundry_pos/services/supplier_service.py
from datetime import datetime
from beanie import PydanticObjectId, UpdateResponse
from beanie.operators import Push
from bson import ObjectId
from laundry_pos.models.supplier_model import Supplier, SupplierTransaction
from laundry_pos.schemas.supplier_schema import SupplierTransactionCreate
from laundry_pos.services.base_service import ResourceService
import logging

logger = logging.getLogger(__name__)

class SupplierService(ResourceService[Supplier]):
    document_model = Supplier
    update_fields = ("supplier_name", "phone_number", "address", "email", "supplied_products")

    @staticmethod
    def build_transaction(transaction_data: SupplierTransactionCreate) -> SupplierTransaction:
        """Stamp a fresh id and the current time on an incoming purchase"""
        return SupplierTransaction(
            **transaction_data.model_dump(),
            transaction_id=str(ObjectId()),
            date=datetime.utcnow(),
        )

    @staticmethod
    async def add_transaction(supplier_id: PydanticObjectId, transaction: SupplierTransaction) -> bool:
        """
        Append a purchase to the supplier's transaction list.

        Uses a single $push so concurrent appends to the same supplier never
        overwrite each other. Returns False when the supplier no longer exists
        (it may have been deleted after the caller checked for it).
        """
        try:
            result = await Supplier.find_one(Supplier.id == supplier_id).update(
                Push({Supplier.transactions: transaction.model_dump()}),
                response_type=UpdateResponse.UPDATE_RESULT
            )
        except Exception as e:
            logger.error(f"Error adding transaction to supplier {supplier_id}: {str(e)}")
            raise

        if result is None or result.matched_count == 0:
            logger.warning(f"Supplier {supplier_id} disappeared before transaction {transaction.transaction_id} was added")
            return False

        logger.info(f"Added transaction {transaction.transaction_id} to supplier {supplier_id}: {transaction.total_amount}")
        return True
