import pytest
from datetime import datetime, timedelta, timezone
from pydantic import ValidationError

from yultimate.schemas.event_schemas import EventCreate, EventUpdate, PlacementResult, ResultsSubmission
from yultimate.services.event_service import EventService
from yultimate.services.state import AppState

def future_date(days=30):
    return datetime.now(timezone.utc) + timedelta(days=days)

@pytest.fixture
def state():
    return AppState.seeded()

@pytest.fixture
def event_service(state):
    return EventService(state)

def make_event_create(**overrides):
    data = dict(
        name="Autumn Hat Tournament",
        description="Random teams, one day of ultimate for everyone.",
        date=future_date(),
        venue_id=1,
        organization_id=1,
        type="Tournament",
    )
    data.update(overrides)
    return EventCreate(**data)


class TestEventService:

    def test_add_event_assigns_next_id(self, event_service: EventService, state: AppState):
        created = event_service.add_event(make_event_create())
        assert created.id == 5
        assert created.participants == []
        assert state.events[-1] == created

    def test_add_event_into_empty_state_starts_at_one(self, state: AppState):
        state.events = []
        created = EventService(state).add_event(make_event_create())
        assert created.id == 1

    def test_add_event_unknown_venue(self, event_service: EventService):
        with pytest.raises(ValueError, match="Venue with ID 99 not found."):
            event_service.add_event(make_event_create(venue_id=99))

    def test_add_event_unknown_organization(self, event_service: EventService):
        with pytest.raises(ValueError, match="Organization with ID 42 not found."):
            event_service.add_event(make_event_create(organization_id=42))

    def test_event_create_rejects_past_date(self):
        with pytest.raises(ValidationError):
            make_event_create(date=datetime(2020, 1, 1, tzinfo=timezone.utc))

    def test_event_create_rejects_short_fields(self):
        with pytest.raises(ValidationError):
            make_event_create(name="ab")
        with pytest.raises(ValidationError):
            make_event_create(description="too short")

    def test_get_event_not_found(self, event_service: EventService):
        assert event_service.get_event(999) is None

    def test_toggle_registration_twice_is_identity(self, event_service: EventService):
        original = list(event_service.get_event(2).participants)

        registered = event_service.toggle_registration(2, "U004")
        assert "U004" in registered.participants

        unregistered = event_service.toggle_registration(2, "U004")
        assert unregistered.participants == original

    def test_toggle_registration_removes_existing(self, event_service: EventService):
        updated = event_service.toggle_registration(1, "U003")
        assert "U003" not in updated.participants
        assert event_service.is_registered(1, "U003") is False

    def test_toggle_registration_unknown_event(self, event_service: EventService, state: AppState):
        before = [e.model_copy() for e in state.events]
        assert event_service.toggle_registration(999, "U003") is None
        assert state.events == before

    def test_update_event_matches_existing_venue_case_insensitively(self, event_service: EventService, state: AppState):
        update = EventUpdate(
            name="Weekly Pickup Game",
            description="Casual pickup games, now on the big field.",
            date=future_date(),
            organization_id=2,
            type="Meetup",
            venue_name="university stadium",
        )
        updated = event_service.update_event(3, update)

        assert updated.venue_id == 2
        assert len(state.venues) == 3
        assert updated.participants == ["U003", "U004", "U005"]

    def test_update_event_creates_new_venue(self, event_service: EventService, state: AppState):
        update = EventUpdate(
            name="Weekly Pickup Game",
            description="Casual pickup games in a new place.",
            date=future_date(),
            organization_id=2,
            venue_name="Riverside Commons",
        )
        updated = event_service.update_event(3, update)

        assert updated.venue_id == 4
        assert state.venues[-1].name == "Riverside Commons"
        assert state.venues[-1].coordinates is None

    def test_update_event_not_found(self, event_service: EventService):
        update = EventUpdate(
            name="Ghost Event",
            description="This event does not exist anywhere.",
            date=future_date(),
            organization_id=1,
            venue_name="City Park Fields",
        )
        assert event_service.update_event(999, update) is None

    def test_submit_results_uses_team_names(self, event_service: EventService):
        results = ResultsSubmission(
            first=PlacementResult(team_id="T02", spirit_score=12),
            second=PlacementResult(team_id="T01"),
            third=PlacementResult(team_id="T04"),
            highlights="A thrilling final decided on universe point.",
        )
        updated = event_service.submit_results(4, results)

        assert updated.winners.first == "Sky Walkers"
        assert updated.winners.second == "Disc Jockeys"
        assert updated.winners.third == "Layout Legends"
        assert updated.highlights == "A thrilling final decided on universe point."

    def test_results_require_distinct_teams(self):
        with pytest.raises(ValidationError):
            ResultsSubmission(
                first=PlacementResult(team_id="T01"),
                second=PlacementResult(team_id="T01"),
                third=PlacementResult(team_id="T03"),
                highlights="Same team twice on the podium.",
            )

    def test_submit_results_unknown_team(self, event_service: EventService):
        results = ResultsSubmission(
            first=PlacementResult(team_id="T01"),
            second=PlacementResult(team_id="T02"),
            third=PlacementResult(team_id="T99"),
            highlights="The third team never existed.",
        )
        with pytest.raises(ValueError, match="Team with ID T99 not found."):
            event_service.submit_results(1, results)

    def test_search_events(self, event_service: EventService):
        assert [e.id for e in event_service.search_events("beach")] == [4]
        assert [e.id for e in event_service.search_events("WORKSHOP")] == [2]
        # Venue names are searched too
        assert {e.id for e in event_service.search_events("city park")} == {1, 3}

    def test_search_events_empty_query(self, event_service: EventService):
        assert event_service.search_events("") == []
        assert event_service.search_events("   ") == []

    def test_get_event_participants(self, event_service: EventService):
        participants = event_service.get_event_participants(4)
        assert [u.name for u in participants] == ["Jane Doe", "John Smith"]
        assert event_service.get_event_participants(999) is None

    def test_is_registered(self, event_service: EventService):
        assert event_service.is_registered(1, "U004") is True
        assert event_service.is_registered(2, "U004") is False
        assert event_service.is_registered(999, "U004") is False
