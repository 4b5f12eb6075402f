from fastapi import APIRouter, Depends

from places_api.routes.places_route import get_places_service
from places_api.services.Places_service import PlacesService

router = APIRouter(tags=["debug"])

@router.get("/debug")
async def debug_endpoint(service: PlacesService = Depends(get_places_service)):
    """Raw look at the collection: document count and the first two documents."""
    return await service.debug_sample(limit=2)
