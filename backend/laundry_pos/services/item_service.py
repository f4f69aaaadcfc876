# backend/laundry_pos/services/item_service.py
from laundry_pos.models.item_model import Item
from laundry_pos.services.base_service import ResourceService

class ItemService(ResourceService[Item]):
    document_model = Item
    update_fields = ("item_name", "quantity", "price")
