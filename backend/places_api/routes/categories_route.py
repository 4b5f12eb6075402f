from fastapi import APIRouter

from places_api.models.places_model import PLACE_CATEGORIES, CategoriesResponse

router = APIRouter(tags=["categories"])

@router.get("/categories", response_model=CategoriesResponse)
async def list_categories_endpoint():
    return CategoriesResponse(categories=list(PLACE_CATEGORIES))
