# backend/laundry_pos/api/api_v1/handlers/supplier.py
from fastapi import APIRouter, HTTPException, Request, status, Depends
from typing import List
from json import JSONDecodeError
from beanie import PydanticObjectId
from pydantic import ValidationError
from laundry_pos.schemas.supplier_schema import (
    SupplierCreate, SupplierUpdate, SupplierOut, SupplierTransactionCreate
)
from laundry_pos.services.supplier_service import SupplierService
from laundry_pos.api.deps.id_deps import get_object_id, object_id_param
from laundry_pos.api.deps.user_deps import AuthenticatedRoute
import logging

logger = logging.getLogger(__name__)
supplier_router = APIRouter(route_class=AuthenticatedRoute)

get_supplier_id = object_id_param("supplier_id", "Supplier ID")

@supplier_router.post("/supplier", summary="Create a new supplier")
async def create_supplier(supplier_data: SupplierCreate):
    try:
        supplier = await SupplierService.create(supplier_data)
    except Exception as e:
        logger.error(f"Error creating supplier: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create supplier"
        )
    return {
        "message": "Supplier created successfully",
        "supplier": SupplierOut.model_validate(supplier)
    }

@supplier_router.get("/supplier", summary="Get all suppliers", response_model=List[SupplierOut])
async def get_all_suppliers():
    try:
        suppliers = await SupplierService.get_all()
    except Exception as e:
        logger.error(f"Error fetching suppliers: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch suppliers"
        )
    if not suppliers:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No suppliers found"
        )
    return [SupplierOut.model_validate(supplier) for supplier in suppliers]

@supplier_router.get("/supplier-id", summary="Get supplier by ID", response_model=SupplierOut)
async def get_supplier(supplier_id: PydanticObjectId = Depends(get_object_id)):
    supplier = await SupplierService.get_by_id(supplier_id)
    if not supplier:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Supplier not found"
        )
    return SupplierOut.model_validate(supplier)

@supplier_router.put("/supplier-id", summary="Update supplier")
async def update_supplier(
    supplier_data: SupplierUpdate,
    supplier_id: PydanticObjectId = Depends(get_object_id)
):
    try:
        updated = await SupplierService.update(supplier_id, supplier_data)
    except Exception as e:
        logger.error(f"Error updating supplier {supplier_id}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update supplier"
        )
    if not updated:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Supplier not found"
        )
    return {"message": "Supplier updated successfully"}

@supplier_router.delete("/supplier-id", summary="Delete supplier")
async def delete_supplier(supplier_id: PydanticObjectId = Depends(get_object_id)):
    deleted = await SupplierService.delete(supplier_id)
    if not deleted:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Supplier not found"
        )
    return {"message": "Supplier deleted successfully"}

@supplier_router.post("/supplier/transaction", summary="Add a purchase transaction to a supplier")
async def add_supplier_transaction(
    request: Request,
    supplier_id: PydanticObjectId = Depends(get_supplier_id)
):
    """
    Append a purchase to the supplier's transaction list.

    The supplier is looked up before the body is read, so an unknown supplier
    is reported as 404 even when the payload is also invalid. The transaction
    id and date are always assigned here.
    """
    supplier = await SupplierService.get_by_id(supplier_id)
    if not supplier:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Supplier tidak ditemukan"
        )

    try:
        transaction_data = SupplierTransactionCreate.model_validate(await request.json())
    except (JSONDecodeError, UnicodeDecodeError, ValidationError) as e:
        logger.warning(f"Invalid transaction input for supplier {supplier_id}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Input tidak valid"
        )

    transaction = SupplierService.build_transaction(transaction_data)
    try:
        added = await SupplierService.add_transaction(supplier_id, transaction)
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Gagal menambahkan transaksi ke database"
        )
    if not added:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Supplier tidak ditemukan"
        )
    return {"message": "Transaksi berhasil ditambahkan"}
