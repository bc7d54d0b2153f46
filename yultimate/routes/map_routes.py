import logging
from pathlib import Path as FilePath
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Path, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from yultimate.api.dependencies import get_map_service
from yultimate.models import Venue
from yultimate.schemas.report_schemas import PointOfInterest
from yultimate.services.map_service import MapService, MapsConfigurationError

logger = logging.getLogger(__name__)

templates = Jinja2Templates(directory=str(FilePath(__file__).resolve().parent.parent / "templates"))

router = APIRouter()
page_router = APIRouter()

@router.get("/points", response_model=List[PointOfInterest], summary="Venues, centers and communities on the map")
async def list_points(service: MapService = Depends(get_map_service)):
    return service.points_of_interest()

@router.get("/venues/{venue_id}", response_model=Venue, summary="Get venue by ID")
async def get_venue(
    venue_id: int = Path(..., description="The ID of the venue"),
    service: MapService = Depends(get_map_service)
):
    venue = service.get_venue(venue_id)
    if not venue:
        raise HTTPException(status_code=404, detail="Venue not found")
    return venue

@page_router.get("/map", response_class=HTMLResponse, summary="Map page")
async def map_page(
    request: Request,
    venue_id: Optional[int] = None,
    service: MapService = Depends(get_map_service)
):
    """
    Renders the interactive map. Without a maps API key the page explains
    how to configure one instead of loading the map script.
    """
    try:
        api_key = service.require_api_key()
    except MapsConfigurationError as e:
        logger.warning("Map page requested without a maps API key")
        return templates.TemplateResponse(
            request, "map_config_error.html", {"message": str(e)}, status_code=503
        )

    return templates.TemplateResponse(request, "map.html", {
        "api_key": api_key,
        "points": [p.model_dump() for p in service.points_of_interest()],
        "focus": service.focus_point(venue_id),
    })
