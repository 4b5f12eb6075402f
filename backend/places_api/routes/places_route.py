from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends
from motor.motor_asyncio import AsyncIOMotorDatabase

from places_api.services.Places_service import PlacesService
from places_api.repos.places_repo import PlacesRepository
from places_api.core.db_connection import get_db

router = APIRouter(tags=["places"])

# --- Dependency Injection ---
def get_places_repo(db: AsyncIOMotorDatabase = Depends(get_db)) -> PlacesRepository:
    return PlacesRepository(db)

def get_places_service(repo: PlacesRepository = Depends(get_places_repo)) -> PlacesService:
    return PlacesService(repo)

@router.get("/places")
async def list_places_endpoint(
    category: Optional[str] = None,
    search: Optional[str] = None,
    service: PlacesService = Depends(get_places_service)
):
    places = await service.list_places(category, search)
    return {"places": [p.to_response() for p in places]}

@router.post("/places", status_code=201)
async def create_place_endpoint(
    body: Dict[str, Any] = Body(...),
    service: PlacesService = Depends(get_places_service)
):
    place = await service.create_place(body)
    return {"place": place.to_response()}

@router.get("/places/{place_id}")
async def get_place_endpoint(
    place_id: str,
    service: PlacesService = Depends(get_places_service)
):
    place = await service.get_place(place_id)
    return {"place": place.to_response()}

@router.delete("/places/{place_id}")
async def delete_place_endpoint(
    place_id: str,
    service: PlacesService = Depends(get_places_service)
):
    place = await service.delete_place(place_id)
    return {"message": "Place deleted successfully", "place": place.to_response()}
