# backend/laundry_pos/services/customer_service.py
from typing import Optional, List
from beanie import PydanticObjectId
from laundry_pos.models.customer_model import Customer, CustomerName
from laundry_pos.services.base_service import ResourceService

class CustomerService(ResourceService[Customer]):
    document_model = Customer
    update_fields = ("name", "phone", "address", "email")

    @staticmethod
    async def get_customer_names() -> List[CustomerName]:
        return await Customer.find_all().project(CustomerName).to_list()

    @staticmethod
    async def get_customer_contact(customer_id: PydanticObjectId) -> Optional[CustomerName]:
        return await Customer.find_one(Customer.id == customer_id).project(CustomerName)
