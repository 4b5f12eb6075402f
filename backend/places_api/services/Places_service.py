import logging
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from places_api.core.error_handlers import describe_validation_error
from places_api.core.exceptions import (
    PlaceNotFoundError,
    PlaceValidationError,
    StoreUnavailableError,
)
from places_api.core.logger import logs
from places_api.models.places_model import REQUIRED_FIELDS, Place, PlaceCreate
from places_api.repos.places_repo import PlacesRepository


class PlacesService:
    def __init__(self, repo: PlacesRepository):
        self.repo = repo

    async def list_places(self, category: Optional[str] = None, search: Optional[str] = None) -> List[Place]:
        try:
            docs = await self.repo.list_places(category, search)
            places = [Place.from_document(doc) for doc in docs]
        except Exception as e:
            logs.log(logging.ERROR, f"Error fetching places: {str(e)}")
            raise StoreUnavailableError("Failed to fetch places") from e

        logs.log(logging.INFO, f"Found {len(places)} places (category={category!r}, search={search!r})")
        return places

    async def get_place(self, place_id: str) -> Place:
        try:
            doc = await self.repo.get_place(place_id)
            place = Place.from_document(doc) if doc is not None else None
        except Exception as e:
            logs.log(logging.ERROR, f"Error fetching place {place_id}: {str(e)}")
            raise StoreUnavailableError("Failed to fetch place") from e

        if place is None:
            raise PlaceNotFoundError()
        return place

    async def create_place(self, body: Dict[str, Any]) -> Place:
        """
        Validates the raw request body and persists it.
        Missing required fields are reported together before any other check.
        """
        if any(not body.get(field) for field in REQUIRED_FIELDS):
            raise PlaceValidationError(f"Missing required fields: {', '.join(REQUIRED_FIELDS)}")

        try:
            payload = PlaceCreate.model_validate(body)
        except ValidationError as e:
            raise PlaceValidationError(describe_validation_error(e.errors())) from e

        try:
            doc = await self.repo.create_place(payload.to_document())
        except Exception as e:
            logs.log(logging.ERROR, f"Error creating place: {str(e)}")
            raise StoreUnavailableError("Failed to create place") from e

        logs.log(logging.INFO, f"Created place {doc['_id']} ({payload.category.value})")
        return Place.from_document(doc)

    async def delete_place(self, place_id: str) -> Place:
        try:
            doc = await self.repo.delete_place(place_id)
        except Exception as e:
            logs.log(logging.ERROR, f"Error deleting place {place_id}: {str(e)}")
            raise StoreUnavailableError("Failed to delete place") from e

        if doc is None:
            raise PlaceNotFoundError()

        try:
            place = Place.from_document(doc)
        except Exception as e:
            # The delete only counts if the removed document can be returned
            logs.log(logging.ERROR, f"Deleted place {place_id} could not be read back, restoring it: {str(e)}")
            await self.repo.restore_place(doc)
            raise StoreUnavailableError("Failed to delete place") from e

        logs.log(logging.INFO, f"Deleted place {place_id}")
        return place

    async def debug_sample(self, limit: int = 2) -> Dict[str, Any]:
        try:
            count = await self.repo.count_places()
            sample = await self.repo.sample_places(limit)
            converted = [Place.from_document(doc).to_response() for doc in sample]
        except Exception as e:
            logs.log(logging.ERROR, f"Debug sample failed: {str(e)}")
            raise StoreUnavailableError("Debug failed") from e

        logs.log(logging.DEBUG, f"Raw places sample: {sample}")
        return {
            "message": "Check server logs for raw data",
            "count": count,
            "sample": converted,
        }
