import re
import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase

from places_api.core.config import settings
from places_api.core.logger import logs

ALL_CATEGORIES = "all"
SEARCH_FIELDS = ("name", "description", "location.address")


def build_places_query(category: Optional[str] = None, search: Optional[str] = None) -> Dict[str, Any]:
    """
    Builds the Mongo filter for the listing endpoint.
    Category is an exact match unless it is "all"; search is a
    case-insensitive literal substring over name, description and address.
    """
    query: Dict[str, Any] = {}

    if category and category != ALL_CATEGORIES:
        query["category"] = category

    if search:
        pattern = re.escape(search)
        query["$or"] = [
            {field: {"$regex": pattern, "$options": "i"}} for field in SEARCH_FIELDS
        ]

    return query


def to_object_id(place_id: str) -> ObjectId | None:
    # ObjectId(None) would mint a fresh id, so validate first
    if not ObjectId.is_valid(place_id):
        return None
    return ObjectId(place_id)


class PlacesRepository:
    def __init__(self, db: AsyncIOMotorDatabase):
        self.collection = db[settings.PLACES_COLLECTION]

    async def list_places(self, category: Optional[str] = None, search: Optional[str] = None) -> List[dict]:
        """Returns every matching document, newest first."""
        query = build_places_query(category, search)
        logs.log(logging.DEBUG, "Places query built", extra=query)

        cursor = self.collection.find(query).sort("createdAt", -1)
        return await cursor.to_list(length=None)

    async def get_place(self, place_id: str) -> dict | None:
        oid = to_object_id(place_id)
        if oid is None:
            return None
        return await self.collection.find_one({"_id": oid})

    async def create_place(self, document: Dict[str, Any]) -> dict:
        now = datetime.now(timezone.utc)
        doc = {
            **document,
            "images": document.get("images") or [],
            "submittedBy": document.get("submittedBy") or "Anonymous",
            "createdAt": now,
            "updatedAt": now,
        }
        result = await self.collection.insert_one(doc)
        doc["_id"] = result.inserted_id
        return doc

    async def delete_place(self, place_id: str) -> dict | None:
        oid = to_object_id(place_id)
        if oid is None:
            return None
        return await self.collection.find_one_and_delete({"_id": oid})

    async def restore_place(self, document: dict):
        """Puts a removed document back unchanged, _id included."""
        await self.collection.insert_one(document)

    async def count_places(self) -> int:
        return await self.collection.count_documents({})

    async def sample_places(self, limit: int = 2) -> List[dict]:
        cursor = self.collection.find({}).limit(limit)
        return await cursor.to_list(length=limit)
