# backend/laundry_pos/services/sales_transaction_service.py
from laundry_pos.models.sales_transaction_model import SalesTransaction
from laundry_pos.services.base_service import ResourceService

class SalesTransactionService(ResourceService[SalesTransaction]):
    document_model = SalesTransaction
    update_fields = ("customer_name", "phone_number", "service_type", "weight_per_kg", "total_price")
