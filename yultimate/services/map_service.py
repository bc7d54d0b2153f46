from typing import List, Optional

from yultimate.core.config import settings
from yultimate.models import Venue
from yultimate.schemas.report_schemas import PointOfInterest
from yultimate.services.state import AppState

class MapsConfigurationError(RuntimeError):
    """The third-party map service cannot be used without an API key."""

class MapService:
    def __init__(self, state: AppState, api_key: Optional[str] = None):
        self.state = state
        self.api_key = api_key if api_key is not None else settings.MAPS_API_KEY

    def require_api_key(self) -> str:
        if not self.api_key:
            raise MapsConfigurationError(
                "Google Maps API key is missing. Set MAPS_API_KEY to enable maps and directions."
            )
        return self.api_key

    def get_venue(self, venue_id: int) -> Optional[Venue]:
        return self.state.find_venue(venue_id)

    def points_of_interest(self) -> List[PointOfInterest]:
        points = [
            PointOfInterest(
                id=f"v-{v.id}",
                name=v.name,
                type="venue",
                coordinates=v.coordinates,
                description=v.location,
            )
            for v in self.state.venues
            if v.coordinates is not None
        ]
        points += [
            PointOfInterest(
                id=f"c-{c.id}",
                name=c.name,
                type="center",
                coordinates=c.coordinates,
                description=c.specialty,
            )
            for c in self.state.coaching_centers
            if c.coordinates is not None
        ]
        points += [
            PointOfInterest(
                id=f"com-{c.name}",
                name=c.name,
                type="community",
                coordinates=c.coordinates,
                description=f"{c.children} children",
                children=c.children,
                sessions=sum(1 for s in self.state.sessions if s.community == c.name),
            )
            for c in self.state.communities
        ]
        return points

    def focus_point(self, venue_id: Optional[int]) -> Optional[PointOfInterest]:
        """The point the map should centre on when opened from an event's venue link."""
        if venue_id is None:
            return None
        wanted = f"v-{venue_id}"
        return next((p for p in self.points_of_interest() if p.id == wanted), None)
