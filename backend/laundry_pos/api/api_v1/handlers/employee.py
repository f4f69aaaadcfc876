# backend/laundry_pos/api/api_v1/handlers/employee.py
from fastapi import APIRouter, HTTPException, status, Depends
from typing import List
from beanie import PydanticObjectId
from laundry_pos.schemas.user_schema import UserOut, UserUpdate, EmployeeNameOut
from laundry_pos.services.user_service import UserService
from laundry_pos.api.deps.id_deps import get_object_id
from laundry_pos.api.deps.user_deps import AdminRoute
import pymongo
import logging

logger = logging.getLogger(__name__)
employee_router = APIRouter(route_class=AdminRoute)

@employee_router.get("/employee", summary="Get all employees", response_model=List[UserOut])
async def get_all_employees():
    try:
        employees = await UserService.get_all_employees()
    except Exception as e:
        logger.error(f"Error fetching employees: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch employees"
        )
    if not employees:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No employees found"
        )
    return [UserOut.from_user(employee) for employee in employees]

@employee_router.get("/employee-names", summary="Get id and name of every employee", response_model=List[EmployeeNameOut])
async def get_employee_names():
    employees = await UserService.get_employee_names()
    return [EmployeeNameOut(id=employee.id, name=employee.username) for employee in employees]

@employee_router.get("/employee-id", summary="Get employee by ID", response_model=UserOut)
async def get_employee(user_id: PydanticObjectId = Depends(get_object_id)):
    employee = await UserService.get_employee_by_id(user_id)
    if not employee:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found"
        )
    return UserOut.from_user(employee)

@employee_router.put("/employee-id", summary="Update employee")
async def update_employee(
    user_data: UserUpdate,
    user_id: PydanticObjectId = Depends(get_object_id)
):
    try:
        updated = await UserService.update(user_id, user_data)
    except pymongo.errors.DuplicateKeyError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Username already exists"
        )
    except Exception as e:
        logger.error(f"Error updating user {user_id}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update user"
        )
    if not updated:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found"
        )
    return {"message": "User updated successfully"}

@employee_router.delete("/employee-id", summary="Delete employee")
async def delete_employee(user_id: PydanticObjectId = Depends(get_object_id)):
    deleted = await UserService.delete(user_id)
    if not deleted:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found"
        )
    return {"message": "User deleted successfully"}
