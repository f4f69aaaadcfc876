# backend/laundry_pos/api/api_v1/handlers/item_transaction.py
from fastapi import APIRouter, HTTPException, status, Depends
from typing import List
from beanie import PydanticObjectId
from laundry_pos.schemas.item_transaction_schema import (
    ItemTransactionCreate, ItemTransactionUpdate, ItemTransactionOut, ItemTransactionSummaryOut
)
from laundry_pos.services.item_transaction_service import ItemTransactionService
from laundry_pos.api.deps.id_deps import get_object_id
from laundry_pos.api.deps.user_deps import AuthenticatedRoute
import logging

logger = logging.getLogger(__name__)
item_transaction_router = APIRouter(route_class=AuthenticatedRoute)

@item_transaction_router.post("/item-transaction", summary="Record a stock movement for an item")
async def create_item_transaction(transaction_data: ItemTransactionCreate):
    try:
        transaction = await ItemTransactionService.create(transaction_data)
    except Exception as e:
        logger.error(f"Error creating item transaction: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create transaction"
        )
    return {
        "message": "Transaction created successfully",
        "transaction": ItemTransactionOut.model_validate(transaction)
    }

@item_transaction_router.get("/item-transaction", summary="Get all item transactions", response_model=List[ItemTransactionOut])
async def get_all_item_transactions():
    try:
        transactions = await ItemTransactionService.get_all()
    except Exception as e:
        logger.error(f"Error fetching item transactions: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch transactions"
        )
    if not transactions:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No transactions found"
        )
    return [ItemTransactionOut.model_validate(transaction) for transaction in transactions]

@item_transaction_router.get(
    "/item-transaction-summary",
    summary="Get id, item id and item name of every item transaction",
    response_model=List[ItemTransactionSummaryOut]
)
async def get_item_transaction_summaries():
    transactions = await ItemTransactionService.get_summaries()
    if not transactions:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No transactions found"
        )
    return [ItemTransactionSummaryOut.model_validate(transaction) for transaction in transactions]

@item_transaction_router.get("/item-transaction-id", summary="Get item transaction by ID", response_model=ItemTransactionOut)
async def get_item_transaction(transaction_id: PydanticObjectId = Depends(get_object_id)):
    transaction = await ItemTransactionService.get_by_id(transaction_id)
    if not transaction:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Transaction not found"
        )
    return ItemTransactionOut.model_validate(transaction)

@item_transaction_router.put("/item-transaction-id", summary="Update item transaction")
async def update_item_transaction(
    transaction_data: ItemTransactionUpdate,
    transaction_id: PydanticObjectId = Depends(get_object_id)
):
    try:
        updated = await ItemTransactionService.update(transaction_id, transaction_data)
    except Exception as e:
        logger.error(f"Error updating item transaction {transaction_id}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update transaction"
        )
    if not updated:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Transaction not found"
        )
    return {"message": "Transaction updated successfully"}

@item_transaction_router.delete("/item-transaction-id", summary="Delete item transaction")
async def delete_item_transaction(transaction_id: PydanticObjectId = Depends(get_object_id)):
    deleted = await ItemTransactionService.delete(transaction_id)
    if not deleted:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Transaction not found"
        )
    return {"message": "Transaction deleted successfully"}
