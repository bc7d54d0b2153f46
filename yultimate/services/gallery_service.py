import logging
from datetime import datetime
from typing import List, Optional
from uuid import uuid4

from yultimate.models import EventModel, GalleryImage
from yultimate.models.common import as_utc, utcnow
from yultimate.schemas.gallery_schemas import Album
from yultimate.services.state import AppState

logger = logging.getLogger(__name__)

IMAGES_PER_ALBUM = 2

class GalleryService:
    """Photo albums for past events.

    Each album shows its share of the static placeholder images followed by
    any images uploaded during this run. Uploads live in ``state.temp_images``
    and are gone after a restart.
    """

    def __init__(self, state: AppState):
        self.state = state

    def add_image_to_event(self, event_id: int, url: str, description: str = "") -> Optional[GalleryImage]:
        if not self.state.find_event(event_id):
            return None
        image = GalleryImage(id=f"temp-{uuid4().hex[:12]}", url=url, description=description)
        self.state.temp_images.setdefault(event_id, []).append(image)
        logger.info("Added image %s to event %s", image.id, event_id)
        return image

    def delete_image_from_event(self, event_id: int, image_id: str) -> bool:
        images = self.state.temp_images.get(event_id, [])
        remaining = [img for img in images if img.id != image_id]
        if len(remaining) == len(images):
            return False
        if remaining:
            self.state.temp_images[event_id] = remaining
        else:
            self.state.temp_images.pop(event_id, None)
        logger.info("Deleted image %s from event %s", image_id, event_id)
        return True

    def images_for_event(self, event_id: int, album_index: Optional[int] = None) -> List[GalleryImage]:
        placeholders: List[GalleryImage] = []
        if album_index is not None:
            start = album_index * IMAGES_PER_ALBUM
            placeholders = self.state.placeholder_images[start:start + IMAGES_PER_ALBUM]
        return list(placeholders) + list(self.state.temp_images.get(event_id, []))

    def past_events(self, now: Optional[datetime] = None) -> List[EventModel]:
        now = as_utc(now) if now else utcnow()
        return [e for e in self.state.events if e.date < now]

    def albums(self, now: Optional[datetime] = None) -> List[Album]:
        return [
            Album(
                event_id=event.id,
                event_name=event.name,
                date=event.date,
                images=self.images_for_event(event.id, album_index=index),
            )
            for index, event in enumerate(self.past_events(now))
        ]
