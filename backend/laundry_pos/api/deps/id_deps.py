# backend/laundry_pos/api/deps/id_deps.py
from typing import Callable, Optional
from beanie import PydanticObjectId
from bson import ObjectId
from fastapi import HTTPException, Query, status

def parse_object_id(raw_id: Optional[str], label: str = "ID") -> PydanticObjectId:
    if not raw_id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=f"{label} not provided")
    if not ObjectId.is_valid(raw_id):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=f"Invalid {label}")
    return PydanticObjectId(raw_id)

async def get_object_id(id: Optional[str] = Query(None, description="Document ID")) -> PydanticObjectId:
    return parse_object_id(id)

def object_id_param(name: str, label: str) -> Callable:
    """Dependency reading an identifier from a differently named query parameter"""
    async def dependency(value: Optional[str] = Query(None, alias=name)) -> PydanticObjectId:
        return parse_object_id(value, label)

    return dependency
