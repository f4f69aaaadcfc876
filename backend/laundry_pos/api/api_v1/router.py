# backend/laundry_pos/api/api_v1/router.py
from fastapi import APIRouter, Depends
from laundry_pos.api.api_v1.handlers import (
    employee, customer, supplier, item, item_transaction, stock_transaction, sales_transaction
)
from laundry_pos.api.auth.jwt import auth_router, register_router
from laundry_pos.api.deps.user_deps import get_current_user

router = APIRouter()

# Authentication (login is public, register is admin only)
router.include_router(auth_router, tags=["auth"])
router.include_router(register_router, tags=["auth"])

# Every handler router uses AuthenticatedRoute (AdminRoute for employees),
# which rejects the caller before the body is parsed. The dependency here
# puts the bearer scheme in the OpenAPI docs.
protected_router = APIRouter(dependencies=[Depends(get_current_user)])

protected_router.include_router(employee.employee_router, tags=["employees"])
protected_router.include_router(customer.customer_router, tags=["customers"])
protected_router.include_router(supplier.supplier_router, tags=["suppliers"])
protected_router.include_router(item.item_router, tags=["items"])
protected_router.include_router(item_transaction.item_transaction_router, tags=["item transactions"])
protected_router.include_router(stock_transaction.stock_transaction_router, tags=["stock transactions"])
protected_router.include_router(sales_transaction.sales_transaction_router, tags=["sales transactions"])

router.include_router(protected_router)
