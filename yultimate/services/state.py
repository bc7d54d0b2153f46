from dataclasses import dataclass, field
from typing import Dict, List, Optional

from yultimate.data import seed
from yultimate.models import (
    Alert,
    Assessment,
    Child,
    CoachingCenter,
    Community,
    EventModel,
    GalleryImage,
    HomeVisit,
    Organization,
    PlayerStat,
    Session,
    Team,
    Venue,
)


@dataclass
class AppState:
    """All mutable collections of the running application.

    One instance is created at startup and handed to every service. Nothing in
    here is persisted; a restart reseeds it.
    """

    events: List[EventModel] = field(default_factory=list)
    venues: List[Venue] = field(default_factory=list)
    organizations: List[Organization] = field(default_factory=list)
    coaching_centers: List[CoachingCenter] = field(default_factory=list)
    users: list = field(default_factory=list)
    children: List[Child] = field(default_factory=list)
    sessions: List[Session] = field(default_factory=list)
    home_visits: List[HomeVisit] = field(default_factory=list)
    assessments: List[Assessment] = field(default_factory=list)
    alerts: List[Alert] = field(default_factory=list)
    communities: List[Community] = field(default_factory=list)
    teams: List[Team] = field(default_factory=list)
    player_stats: List[PlayerStat] = field(default_factory=list)
    placeholder_images: List[GalleryImage] = field(default_factory=list)
    temp_images: Dict[int, List[GalleryImage]] = field(default_factory=dict)

    @classmethod
    def seeded(cls) -> "AppState":
        return cls(
            events=seed.seed_events(),
            venues=seed.seed_venues(),
            organizations=seed.seed_organizations(),
            coaching_centers=seed.seed_coaching_centers(),
            users=seed.seed_users(),
            children=seed.seed_children(),
            sessions=seed.seed_sessions(),
            home_visits=seed.seed_home_visits(),
            assessments=seed.seed_assessments(),
            alerts=seed.seed_alerts(),
            communities=seed.seed_communities(),
            teams=seed.seed_teams(),
            player_stats=seed.seed_player_stats(),
            placeholder_images=seed.seed_placeholder_images(),
            temp_images=seed.seed_temp_images(),
        )

    # Lookups shared by several services

    def find_event(self, event_id: int) -> Optional[EventModel]:
        return next((e for e in self.events if e.id == event_id), None)

    def find_venue(self, venue_id: int) -> Optional[Venue]:
        return next((v for v in self.venues if v.id == venue_id), None)

    def find_organization(self, organization_id: int) -> Optional[Organization]:
        return next((o for o in self.organizations if o.id == organization_id), None)

    def find_center(self, center_id: int) -> Optional[CoachingCenter]:
        return next((c for c in self.coaching_centers if c.id == center_id), None)

    def find_user(self, user_id: str):
        return next((u for u in self.users if u.id == user_id), None)

    def find_child(self, child_id: str) -> Optional[Child]:
        return next((c for c in self.children if c.id == child_id), None)

    def find_session(self, session_id: str) -> Optional[Session]:
        return next((s for s in self.sessions if s.id == session_id), None)

    def community_size(self, community: str) -> int:
        return sum(1 for c in self.children if c.community == community)


def next_int_id(items) -> int:
    """max(existing ids) + 1, or 1 for an empty collection."""
    return max((item.id for item in items), default=0) + 1
