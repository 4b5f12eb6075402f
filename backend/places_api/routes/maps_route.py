from fastapi import APIRouter, Depends
from fastapi.responses import Response

from places_api.services.maps_loader import MapsScriptLoader, get_maps_loader

router = APIRouter(prefix="/maps", tags=["maps"])

@router.get("/script")
async def maps_script_endpoint(loader: MapsScriptLoader = Depends(get_maps_loader)):
    """
    Serves the Google Maps bootstrap script, fetching it on first use.
    MapsScriptLoadError is turned into a 502 by the error handlers.
    """
    script = await loader.load()
    return Response(content=script, media_type="application/javascript")

@router.get("/status")
async def maps_status_endpoint(loader: MapsScriptLoader = Depends(get_maps_loader)):
    return {"loaded": loader.is_api_loaded()}
