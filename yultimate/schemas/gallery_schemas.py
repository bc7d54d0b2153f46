from datetime import datetime
from typing import List

from pydantic import BaseModel, Field

from yultimate.models import GalleryImage

class ImageUploadRequest(BaseModel):
    """Payload for attaching an image to an event album."""
    url: str = Field(..., min_length=1, description="Data URL or link of the uploaded image.")
    description: str = ""

class Album(BaseModel):
    event_id: int
    event_name: str
    date: datetime
    images: List[GalleryImage]
