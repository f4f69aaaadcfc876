# backend/laundry_pos/api/api_v1/handlers/item.py
from fastapi import APIRouter, HTTPException, status, Depends
from typing import List
from beanie import PydanticObjectId
from laundry_pos.schemas.item_schema import ItemCreate, ItemUpdate, ItemOut
from laundry_pos.services.item_service import ItemService
from laundry_pos.api.deps.id_deps import get_object_id
from laundry_pos.api.deps.user_deps import AuthenticatedRoute
import logging

logger = logging.getLogger(__name__)
item_router = APIRouter(route_class=AuthenticatedRoute)

@item_router.post("/item", summary="Create a new inventory item")
async def create_item(item_data: ItemCreate):
    try:
        item = await ItemService.create(item_data)
    except Exception as e:
        logger.error(f"Error creating item: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create item"
        )
    return {
        "message": "Item created successfully",
        "item": ItemOut.model_validate(item)
    }

@item_router.get("/item", summary="Get all items", response_model=List[ItemOut])
async def get_all_items():
    try:
        items = await ItemService.get_all()
    except Exception as e:
        logger.error(f"Error fetching items: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch items"
        )
    if not items:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No items found"
        )
    return [ItemOut.model_validate(item) for item in items]

@item_router.get("/item-id", summary="Get item by ID", response_model=ItemOut)
async def get_item(item_id: PydanticObjectId = Depends(get_object_id)):
    item = await ItemService.get_by_id(item_id)
    if not item:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Item not found"
        )
    return ItemOut.model_validate(item)

@item_router.put("/item-id", summary="Update item")
async def update_item(
    item_data: ItemUpdate,
    item_id: PydanticObjectId = Depends(get_object_id)
):
    try:
        updated = await ItemService.update(item_id, item_data)
    except Exception as e:
        logger.error(f"Error updating item {item_id}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update item"
        )
    if not updated:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Item not found"
        )
    return {"message": "Item updated successfully"}

@item_router.delete("/item-id", summary="Delete item")
async def delete_item(item_id: PydanticObjectId = Depends(get_object_id)):
    deleted = await ItemService.delete(item_id)
    if not deleted:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Item not found"
        )
    return {"message": "Item deleted successfully"}
