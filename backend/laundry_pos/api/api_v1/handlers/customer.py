# backend/laundry_pos/api/api_v1/handlers/customer.py
from fastapi import APIRouter, HTTPException, status, Depends
from typing import List
from beanie import PydanticObjectId
from laundry_pos.schemas.customer_schema import (
    CustomerCreate, CustomerUpdate, CustomerOut, CustomerNameOut, CustomerContactOut
)
from laundry_pos.services.customer_service import CustomerService
from laundry_pos.api.deps.id_deps import get_object_id
from laundry_pos.api.deps.user_deps import AuthenticatedRoute
import logging

logger = logging.getLogger(__name__)
customer_router = APIRouter(route_class=AuthenticatedRoute)

@customer_router.post("/customer", summary="Create a new customer")
async def create_customer(customer_data: CustomerCreate):
    try:
        customer = await CustomerService.create(customer_data)
    except Exception as e:
        logger.error(f"Error creating customer: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create customer"
        )
    return {
        "message": "Customer created successfully",
        "customer": CustomerOut.model_validate(customer)
    }

@customer_router.get("/customer", summary="Get all customers", response_model=List[CustomerOut])
async def get_all_customers():
    try:
        customers = await CustomerService.get_all()
    except Exception as e:
        logger.error(f"Error fetching customers: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch customers"
        )
    if not customers:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No customers found"
        )
    return [CustomerOut.model_validate(customer) for customer in customers]

@customer_router.get("/customer-names", summary="Get id, name and phone of every customer", response_model=List[CustomerNameOut])
async def get_customer_names():
    customers = await CustomerService.get_customer_names()
    if not customers:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No customers found"
        )
    return [CustomerNameOut.model_validate(customer) for customer in customers]

@customer_router.get("/customer-id", summary="Get customer by ID", response_model=CustomerOut)
async def get_customer(customer_id: PydanticObjectId = Depends(get_object_id)):
    customer = await CustomerService.get_by_id(customer_id)
    if not customer:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Customer not found"
        )
    return CustomerOut.model_validate(customer)

@customer_router.get("/customer-name", summary="Get customer name and phone by ID", response_model=CustomerContactOut)
async def get_customer_contact(customer_id: PydanticObjectId = Depends(get_object_id)):
    customer = await CustomerService.get_customer_contact(customer_id)
    if not customer:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Customer not found"
        )
    return CustomerContactOut.model_validate(customer)

@customer_router.put("/customer-id", summary="Update customer")
async def update_customer(
    customer_data: CustomerUpdate,
    customer_id: PydanticObjectId = Depends(get_object_id)
):
    try:
        updated = await CustomerService.update(customer_id, customer_data)
    except Exception as e:
        logger.error(f"Error updating customer {customer_id}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update customer"
        )
    if not updated:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Customer not found"
        )
    return {"message": "Customer updated successfully"}

@customer_router.delete("/customer-id", summary="Delete customer")
async def delete_customer(customer_id: PydanticObjectId = Depends(get_object_id)):
    deleted = await CustomerService.delete(customer_id)
    if not deleted:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Customer not found"
        )
    return {"message": "Customer deleted successfully"}
