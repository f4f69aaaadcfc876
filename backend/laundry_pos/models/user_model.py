# backend/laundry_pos/models/user_model.py
from typing import Optional
from datetime import datetime
from beanie import Document, Indexed, PydanticObjectId
from pydantic import BaseModel, Field
from enum import Enum

class UserRole(str, Enum):
    ADMIN = "admin"
    STAFF = "staff"

class User(Document):
    username: Indexed(str, unique=True)
    password: str = Field(..., description="bcrypt hash, never the plain password")
    role: UserRole = Field(default=UserRole.STAFF)
    phone: str = ""
    address: str = ""
    salary: float = 0.0
    salary_date: Optional[datetime] = None
    hired_date: datetime = Field(default_factory=datetime.utcnow)

    def __repr__(self) -> str:
        return f"<User {self.username} - {self.role.value}>"

    def __str__(self) -> str:
        return self.username

    class Settings:
        name = "users"

class Employee(BaseModel):
    """Employee view of a user record. Employees are not stored separately."""
    id: PydanticObjectId = Field(alias="_id")
    username: str
    role: UserRole
    phone: str = ""
    address: str = ""
    salary: float = 0.0
    salary_date: Optional[datetime] = None
    hired_date: datetime

    class Settings:
        projection = {
            "_id": 1,
            "username": 1,
            "role": 1,
            "phone": 1,
            "address": 1,
            "salary": 1,
            "salary_date": 1,
            "hired_date": 1
        }

class EmployeeName(BaseModel):
    id: PydanticObjectId = Field(alias="_id")
    username: str

    class Settings:
        projection = {"_id": 1, "username": 1}
