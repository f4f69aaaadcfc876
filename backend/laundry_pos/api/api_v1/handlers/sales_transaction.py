# backend/laundry_pos/api/api_v1/handlers/sales_transaction.py
from fastapi import APIRouter, HTTPException, status, Depends
from typing import List
from beanie import PydanticObjectId
from laundry_pos.schemas.sales_transaction_schema import (
    SalesTransactionCreate, SalesTransactionUpdate, SalesTransactionOut
)
from laundry_pos.services.sales_transaction_service import SalesTransactionService
from laundry_pos.api.deps.id_deps import get_object_id
from laundry_pos.api.deps.user_deps import AuthenticatedRoute
import logging

logger = logging.getLogger(__name__)
sales_transaction_router = APIRouter(route_class=AuthenticatedRoute)

@sales_transaction_router.post("/transaction", summary="Record a laundry sale")
async def create_sales_transaction(transaction_data: SalesTransactionCreate):
    try:
        transaction = await SalesTransactionService.create(transaction_data)
    except Exception as e:
        logger.error(f"Error creating sales transaction: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create transaction"
        )
    return {
        "message": "Transaction created successfully",
        "transaction": SalesTransactionOut.model_validate(transaction)
    }

@sales_transaction_router.get("/transaction", summary="Get all sales transactions", response_model=List[SalesTransactionOut])
async def get_all_sales_transactions():
    try:
        transactions = await SalesTransactionService.get_all()
    except Exception as e:
        logger.error(f"Error fetching sales transactions: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch transactions"
        )
    if not transactions:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No transactions found"
        )
    return [SalesTransactionOut.model_validate(transaction) for transaction in transactions]

@sales_transaction_router.get("/transaction-id", summary="Get sales transaction by ID", response_model=SalesTransactionOut)
async def get_sales_transaction(transaction_id: PydanticObjectId = Depends(get_object_id)):
    transaction = await SalesTransactionService.get_by_id(transaction_id)
    if not transaction:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Transaction not found"
        )
    return SalesTransactionOut.model_validate(transaction)

@sales_transaction_router.put("/transaction-id", summary="Update sales transaction")
async def update_sales_transaction(
    transaction_data: SalesTransactionUpdate,
    transaction_id: PydanticObjectId = Depends(get_object_id)
):
    try:
        updated = await SalesTransactionService.update(transaction_id, transaction_data)
    except Exception as e:
        logger.error(f"Error updating sales transaction {transaction_id}: {str(e)}")
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

@sales_transaction_router.delete("/transaction-id", summary="Delete sales transaction")
async def delete_sales_transaction(transaction_id: PydanticObjectId = Depends(get_object_id)):
    deleted = await SalesTransactionService.delete(transaction_id)
    if not deleted:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Transaction not found"
        )
    return {"message": "Transaction deleted successfully"}
