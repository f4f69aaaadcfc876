# backend/laundry_pos/services/user_service.py
from typing import Optional, List
from datetime import datetime
from beanie import PydanticObjectId
from laundry_pos.schemas.user_schema import UserAuth
from laundry_pos.models.user_model import User, Employee, EmployeeName
from laundry_pos.core.security import get_password, verify_password, dummy_verify
from laundry_pos.services.base_service import ResourceService
import logging

logger = logging.getLogger(__name__)

class UsernameTakenError(Exception):
    pass

class UserService(ResourceService[User]):
    document_model = User
    update_fields = ("username", "role", "phone", "address", "salary", "salary_date")

    @staticmethod
    async def create_user(user: UserAuth) -> User:
        if await UserService.get_user_by_username(user.username):
            raise UsernameTakenError(user.username)

        user_in = User(
            username=user.username,
            password=get_password(user.password),
            role=user.role,
            phone=user.phone,
            address=user.address,
            salary=user.salary,
            salary_date=None,
            hired_date=datetime.utcnow(),
        )
        await user_in.insert()
        logger.info(f"Registered user {user_in.username} ({user_in.role.value})")
        return user_in

    @staticmethod
    async def authenticate(username: str, password: str) -> Optional[User]:
        user = await UserService.get_user_by_username(username=username)
        if not user:
            # Keep the response time of an unknown username close to a wrong password
            dummy_verify()
            return None
        if not verify_password(password=password, hashed_password=user.password):
            return None

        return user

    @staticmethod
    async def get_user_by_username(username: str) -> Optional[User]:
        return await User.find_one(User.username == username)

    @staticmethod
    async def get_all_employees() -> List[Employee]:
        return await User.find_all().project(Employee).to_list()

    @staticmethod
    async def get_employee_by_id(user_id: PydanticObjectId) -> Optional[Employee]:
        return await User.find_one(User.id == user_id).project(Employee)

    @staticmethod
    async def get_employee_names() -> List[EmployeeName]:
        return await User.find_all().project(EmployeeName).to_list()
