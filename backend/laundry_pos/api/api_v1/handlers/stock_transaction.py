# backend/laundry_pos/api/api_v1/handlers/stock_transaction.py
from fastapi import APIRouter, HTTPException, status, Depends
from beanie import PydanticObjectId
from laundry_pos.schemas.stock_transaction_schema import (
    StockTransactionCreate, StockTransactionUpdate, stock_transaction_out
)
from laundry_pos.services.stock_transaction_service import StockTransactionService
from laundry_pos.api.deps.id_deps import get_object_id
from laundry_pos.api.deps.user_deps import AuthenticatedRoute
import logging

logger = logging.getLogger(__name__)
stock_transaction_router = APIRouter(route_class=AuthenticatedRoute)

@stock_transaction_router.post("/stock-transaction", summary="Create a stock transaction")
async def create_stock_transaction(transaction_data: StockTransactionCreate):
    try:
        transaction = await StockTransactionService.create(transaction_data)
    except Exception as e:
        logger.error(f"Error creating stock transaction: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create stock transaction"
        )
    return {
        "message": "Stock transaction created successfully",
        "transaction": stock_transaction_out(transaction)
    }

@stock_transaction_router.get("/stock-transaction", summary="Get all stock transactions")
async def get_all_stock_transactions():
    try:
        transactions = await StockTransactionService.get_all()
    except Exception as e:
        logger.error(f"Error fetching stock transactions: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch stock transactions"
        )
    if not transactions:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No stock transactions found"
        )
    return [stock_transaction_out(transaction) for transaction in transactions]

@stock_transaction_router.get("/stock-transaction-id", summary="Get stock transaction by ID")
async def get_stock_transaction(transaction_id: PydanticObjectId = Depends(get_object_id)):
    transaction = await StockTransactionService.get_by_id(transaction_id)
    if not transaction:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Stock transaction not found"
        )
    return stock_transaction_out(transaction)

@stock_transaction_router.put("/stock-transaction-id", summary="Update stock transaction")
async def update_stock_transaction(
    transaction_data: StockTransactionUpdate,
    transaction_id: PydanticObjectId = Depends(get_object_id)
):
    try:
        updated = await StockTransactionService.update(transaction_id, transaction_data)
    except Exception as e:
        logger.error(f"Error updating stock transaction {transaction_id}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update stock transaction"
        )
    if not updated:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Stock transaction not found"
        )
    return {"message": "Stock transaction updated successfully"}

@stock_transaction_router.delete("/stock-transaction-id", summary="Delete stock transaction")
async def delete_stock_transaction(transaction_id: PydanticObjectId = Depends(get_object_id)):
    deleted = await StockTransactionService.delete(transaction_id)
    if not deleted:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Stock transaction not found"
        )
    return {"message": "Stock transaction deleted successfully"}
