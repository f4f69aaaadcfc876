# backend/laundry_pos/schemas/user_schema.py
from datetime import datetime
from pydantic import BaseModel, Field
from typing import Optional, Union
from beanie import PydanticObjectId
from laundry_pos.models.user_model import User, Employee, UserRole
from laundry_pos.utils.date_utils import format_display_date

class UserAuth(BaseModel):
    username: str = Field(..., min_length=1, max_length=50, description="Login name, unique")
    password: str = Field(..., min_length=1, max_length=128)
    role: UserRole = Field(default=UserRole.STAFF)
    phone: str = ""
    address: str = ""
    salary: float = Field(0.0, ge=0)

class UserUpdate(BaseModel):
    username: str = Field(..., min_length=1, max_length=50)
    role: UserRole
    phone: str = ""
    address: str = ""
    salary: float = Field(0.0, ge=0)
    salary_date: Optional[datetime] = None

class UserOut(BaseModel):
    """User or employee as returned by the API. Dates are DD/MM/YYYY strings."""
    id: PydanticObjectId
    username: str
    role: UserRole
    phone: str = ""
    address: str = ""
    salary: float = 0.0
    hired_date: str
    salary_date: str = ""

    @classmethod
    def from_user(cls, user: Union[User, Employee]) -> "UserOut":
        return cls(
            id=user.id,
            username=user.username,
            role=user.role,
            phone=user.phone,
            address=user.address,
            salary=user.salary,
            hired_date=format_display_date(user.hired_date),
            salary_date=format_display_date(user.salary_date),
        )

class EmployeeNameOut(BaseModel):
    id: PydanticObjectId
    name: str
