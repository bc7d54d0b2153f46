import logging
from typing import List, Optional

from yultimate.models import EventModel, Venue, Winners
from yultimate.schemas.event_schemas import EventCreate, EventUpdate, ResultsSubmission
from yultimate.services.state import AppState, next_int_id

logger = logging.getLogger(__name__)

class EventService:
    def __init__(self, state: AppState):
        self.state = state

    def list_events(self) -> List[EventModel]:
        return list(self.state.events)

    def get_event(self, event_id: int) -> Optional[EventModel]:
        return self.state.find_event(event_id)

    def add_event(self, data: EventCreate) -> EventModel:
        if not self.state.find_venue(data.venue_id):
            raise ValueError(f"Venue with ID {data.venue_id} not found.")
        if not self.state.find_organization(data.organization_id):
            raise ValueError(f"Organization with ID {data.organization_id} not found.")

        event = EventModel(
            **data.model_dump(),
            id=next_int_id(self.state.events),
            participants=[],
        )
        self.state.events.append(event)
        logger.info("Created event %s (%s)", event.id, event.name)
        return event

    def add_venue(self, name: str) -> Venue:
        venue = Venue(id=next_int_id(self.state.venues), name=name, location=name)
        self.state.venues.append(venue)
        logger.info("Created venue %s (%s)", venue.id, venue.name)
        return venue

    def find_or_add_venue(self, name: str) -> Venue:
        wanted = name.strip().lower()
        for venue in self.state.venues:
            if venue.name.lower() == wanted:
                return venue
        return self.add_venue(name.strip())

    def update_event(self, event_id: int, data: EventUpdate) -> Optional[EventModel]:
        event = self.get_event(event_id)
        if not event:
            return None
        if not self.state.find_organization(data.organization_id):
            raise ValueError(f"Organization with ID {data.organization_id} not found.")

        venue = self.find_or_add_venue(data.venue_name)
        update_data = data.model_dump(exclude={"venue_name"})
        update_data["venue_id"] = venue.id
        # id, participants, winners and highlights are not editable here
        updated = EventModel.model_validate({**event.model_dump(), **update_data})
        self._replace(updated)
        logger.info("Updated event %s", event_id)
        return updated

    def toggle_registration(self, event_id: int, user_id: str) -> Optional[EventModel]:
        """Removes the user from the event if registered, otherwise registers them."""
        event = self.get_event(event_id)
        if not event:
            return None

        if user_id in event.participants:
            participants = [p for p in event.participants if p != user_id]
            logger.info("User %s unregistered from event %s", user_id, event_id)
        else:
            participants = event.participants + [user_id]
            logger.info("User %s registered for event %s", user_id, event_id)

        updated = event.model_copy(update={"participants": participants})
        self._replace(updated)
        return updated

    def is_registered(self, event_id: int, user_id: str) -> bool:
        event = self.get_event(event_id)
        return bool(event) and user_id in event.participants

    def submit_results(self, event_id: int, data: ResultsSubmission) -> Optional[EventModel]:
        event = self.get_event(event_id)
        if not event:
            return None

        names = []
        for placement in (data.first, data.second, data.third):
            team = next((t for t in self.state.teams if t.id == placement.team_id), None)
            if not team:
                raise ValueError(f"Team with ID {placement.team_id} not found.")
            names.append(team.name)

        updated = event.model_copy(update={
            "winners": Winners(first=names[0], second=names[1], third=names[2]),
            "highlights": data.highlights,
        })
        self._replace(updated)
        logger.info("Recorded results for event %s", event_id)
        return updated

    def search_events(self, query: str) -> List[EventModel]:
        query = (query or "").strip().lower()
        if not query:
            return []

        results = []
        for event in self.state.events:
            venue = self.state.find_venue(event.venue_id)
            haystacks = [event.name, event.description, event.type]
            if venue:
                haystacks.append(venue.name)
            if any(query in text.lower() for text in haystacks):
                results.append(event)
        return results

    def get_event_participants(self, event_id: int) -> Optional[list]:
        event = self.get_event(event_id)
        if not event:
            return None
        return [u for u in self.state.users if u.id in event.participants]

    def _replace(self, updated: EventModel) -> None:
        for i, existing in enumerate(self.state.events):
            if existing.id == updated.id:
                self.state.events[i] = updated
                return
