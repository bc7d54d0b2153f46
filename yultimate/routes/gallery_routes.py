from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path

from yultimate.api.dependencies import get_gallery_service
from yultimate.models import GalleryImage
from yultimate.schemas.gallery_schemas import Album, ImageUploadRequest
from yultimate.services.gallery_service import GalleryService

router = APIRouter()

@router.get("/albums", response_model=List[Album], summary="Albums for past events")
async def list_albums(service: GalleryService = Depends(get_gallery_service)):
    return service.albums()

@router.post("/events/{event_id}/images", response_model=GalleryImage, status_code=201, summary="Upload image")
async def upload_image(
    image: ImageUploadRequest,
    event_id: int = Path(..., description="The ID of the event"),
    service: GalleryService = Depends(get_gallery_service)
):
    added = service.add_image_to_event(event_id, image.url, image.description)
    if not added:
        raise HTTPException(status_code=404, detail="Event not found")
    return added

@router.delete("/events/{event_id}/images/{image_id}", status_code=204, summary="Delete uploaded image")
async def delete_image(
    event_id: int = Path(..., description="The ID of the event"),
    image_id: str = Path(..., description="The ID of the uploaded image"),
    service: GalleryService = Depends(get_gallery_service)
):
    if not service.delete_image_from_event(event_id, image_id):
        raise HTTPException(status_code=404, detail="Image not found")
