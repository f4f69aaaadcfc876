# backend/laundry_pos/services/base_service.py
"""
Shared create/list/get/update/delete operations for every collection.

Entity services subclass ResourceService, point it at their Beanie document
and list the fields an update is allowed to write. Lookups take an already
parsed PydanticObjectId; turning the `id` query parameter into one (and the
400 that goes with a bad value) happens in the API layer.
"""
from typing import Any, Dict, Generic, List, Optional, Tuple, Type, TypeVar
from beanie import Document, PydanticObjectId, UpdateResponse
from pydantic import BaseModel
import logging

logger = logging.getLogger(__name__)
DocumentType = TypeVar("DocumentType", bound=Document)

class ResourceService(Generic[DocumentType]):
    document_model: Type[DocumentType]
    # None writes every field of the update body
    update_fields: Optional[Tuple[str, ...]] = ()

    @classmethod
    def build_document(cls, data: BaseModel) -> DocumentType:
        return cls.document_model(**data.model_dump(exclude_none=True))

    @classmethod
    async def create(cls, data: BaseModel) -> DocumentType:
        document = cls.build_document(data)
        try:
            await document.insert()
        except Exception as e:
            logger.error(f"Error creating {cls.document_model.__name__}: {str(e)}")
            raise
        logger.info(f"Created {cls.document_model.__name__} {document.id}")
        return document

    @classmethod
    async def get_all(cls) -> List[DocumentType]:
        return await cls.document_model.find_all().to_list()

    @classmethod
    async def get_by_id(cls, document_id: PydanticObjectId) -> Optional[DocumentType]:
        return await cls.document_model.get(document_id)

    @classmethod
    def update_values(cls, data: BaseModel) -> Dict[str, Any]:
        if cls.update_fields is None:
            return data.model_dump(exclude={"id", "_id", "revision_id"})
        return data.model_dump(include=set(cls.update_fields))

    @classmethod
    async def update(cls, document_id: PydanticObjectId, data: BaseModel) -> bool:
        """
        Overwrite the allow-listed fields of one document.
        Returns False when no document has this id.
        """
        values = cls.update_values(data)
        try:
            result = await cls.document_model.find_one({"_id": document_id}).update(
                {"$set": values}, response_type=UpdateResponse.UPDATE_RESULT
            )
        except Exception as e:
            logger.error(f"Error updating {cls.document_model.__name__} {document_id}: {str(e)}")
            raise
        return result is not None and result.matched_count > 0

    @classmethod
    async def delete(cls, document_id: PydanticObjectId) -> bool:
        try:
            result = await cls.document_model.find_one({"_id": document_id}).delete()
        except Exception as e:
            logger.error(f"Error deleting {cls.document_model.__name__} {document_id}: {str(e)}")
            raise
        return result is not None and result.deleted_count > 0
